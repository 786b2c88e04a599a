"""
The MIT License (MIT)

Copyright (c) 2024-present MCausc78

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

from attrs import define, field
from datetime import datetime, timezone
import typing

from .base import Base
from .enums import ActivityType

if typing.TYPE_CHECKING:
    from typing_extensions import Self

    from . import raw
    from .guild import Guild, GuildMember
    from .user import User


@define(slots=True, frozen=True, eq=False)
class Activity:
    """Represents an activity of a user."""

    name: str = field(repr=True, kw_only=True)
    """:class:`str`: The activity's name."""

    type: ActivityType = field(repr=True, kw_only=True)
    """:class:`ActivityType`: The activity's type."""

    url: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The stream URL, for streaming activities."""

    state: str | None = field(default=None, repr=False, kw_only=True)
    details: str | None = field(default=None, repr=False, kw_only=True)
    application_id: str | None = field(default=None, repr=False, kw_only=True)
    created_at: datetime | None = field(default=None, repr=False, kw_only=True)

    @classmethod
    def from_data(cls, data: raw.Activity, /) -> Self:
        created_at = data.get('created_at')
        return cls(
            name=data['name'],
            type=ActivityType.try_value(data['type']),
            url=data.get('url'),
            state=data.get('state'),
            details=data.get('details'),
            application_id=data.get('application_id'),  # type: ignore
            created_at=None if created_at is None else datetime.fromtimestamp(created_at / 1000, timezone.utc),
        )

    def equals(self, other: Activity, /) -> bool:
        """Compares the fields of activities that are visible to other users."""
        return self is other or (
            self.name == other.name
            and self.type == other.type
            and self.url == other.url
            and self.state == other.state
            and self.details == other.details
        )

    def __str__(self) -> str:
        return self.name


@define(slots=True, eq=False)
class Presence(Base):
    """Represents a user's presence in a guild. The ID is the ID of the user."""

    guild: Guild | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`Guild`]: The guild the presence is in."""

    status: str = field(default='offline', repr=True, kw_only=True)
    """:class:`str`: The status of the user. One of ``online``, ``idle``, ``dnd`` or ``offline``."""

    activities: list[Activity] = field(factory=list, repr=False, kw_only=True)
    """List[:class:`Activity`]: The activities of the user."""

    client_status: dict[str, str] | None = field(default=None, repr=False, kw_only=True)
    """Optional[Dict[:class:`str`, :class:`str`]]: The statuses per platform, under ``web``, ``mobile`` and ``desktop`` keys."""

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        return cls._validate_id((data.get('user') or {}).get('id'))

    def _patch(self, data: raw.Presence, /) -> raw.Presence:  # type: ignore[override]
        if 'status' in data:
            self.status = data['status'] or 'offline'
        if 'activities' in data:
            self.activities = [Activity.from_data(activity) for activity in data['activities'] or ()]
        if 'client_status' in data:
            client_status = data['client_status']
            self.client_status = None if client_status is None else dict(client_status)
        return data

    def _clone(self) -> Presence:
        clone = Base._clone(self)
        clone.activities = list(self.activities)
        return clone

    @property
    def user(self) -> User | None:
        return self.state.users.get(self.id)

    @property
    def member(self) -> GuildMember | None:
        if self.guild is None:
            return None
        return self.guild.members.get(self.id)

    def equals(self, other: Presence | None, /) -> bool:
        """Checks whether two presences are equal by value.

        Compares status, each activity's name, type, URL, state and details,
        and each per-platform status.
        """
        if self is other:
            return True
        if other is None:
            return False

        if self.status != other.status or len(self.activities) != len(other.activities):
            return False
        if not all(a.equals(b) for a, b in zip(self.activities, other.activities)):
            return False

        mine = self.client_status or {}
        theirs = other.client_status or {}
        return all(mine.get(platform) == theirs.get(platform) for platform in ('web', 'mobile', 'desktop'))


__all__ = ('Activity', 'Presence')
