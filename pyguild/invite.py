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
from datetime import datetime
import typing

from .base import Base
from .errors import InvalidData
from .utils import parse_time

if typing.TYPE_CHECKING:
    from . import raw
    from .channel import Channel
    from .guild import Guild
    from .user import User


@define(slots=True, eq=False)
class Invite(Base):
    """Represents an invite to a guild channel. The ID is the invite code."""

    guild: Guild | None = field(default=None, repr=False, kw_only=True)
    channel: Channel | None = field(default=None, repr=False, kw_only=True)

    inviter: User | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`User`]: The user who created the invite."""

    uses: int | None = field(default=None, repr=False, kw_only=True)
    max_uses: int | None = field(default=None, repr=False, kw_only=True)
    max_age: int | None = field(default=None, repr=False, kw_only=True)
    temporary: bool | None = field(default=None, repr=False, kw_only=True)
    created_at: datetime | None = field(default=None, repr=False, kw_only=True)  # type: ignore[assignment]
    """Optional[:class:`~datetime.datetime`]: When the invite was created."""

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        code = data.get('code')
        if not isinstance(code, str) or not code:
            raise InvalidData(f'{cls.__name__} payload is missing a code')
        return code

    def _patch(self, data: raw.Invite, /) -> raw.Invite:  # type: ignore[override]
        if 'guild_id' in data and self.guild is None:
            self.guild = self.state.guilds.get(data['guild_id'])
        if 'channel_id' in data and self.channel is None:
            self.channel = self.state.channels.get(data['channel_id'])
        if 'inviter' in data:
            self.inviter = self.state.users._add(data['inviter'])
        if 'uses' in data:
            self.uses = data['uses']
        if 'max_uses' in data:
            self.max_uses = data['max_uses']
        if 'max_age' in data:
            self.max_age = data['max_age']
        if 'temporary' in data:
            self.temporary = data['temporary']
        if 'created_at' in data:
            self.created_at = parse_time(data['created_at'])
        return data

    @property
    def code(self) -> str:
        return self.id

    @property
    def url(self) -> str:
        return f'https://discord.gg/{self.id}'


__all__ = ('Invite',)
