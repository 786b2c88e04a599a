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
import typing

from .base import Base
from .flags import UserFlags

if typing.TYPE_CHECKING:
    from . import raw


@define(slots=True, eq=False)
class User(Base):
    """Represents a user on the platform."""

    username: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The username of the user. ``None`` if the user is partial."""

    discriminator: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The four-digit discriminator of the user."""

    avatar: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The avatar hash of the user."""

    bot: bool = field(default=False, repr=True, kw_only=True)
    """:class:`bool`: Whether the user is a bot."""

    system: bool = field(default=False, repr=False, kw_only=True)
    """:class:`bool`: Whether the user is an official system user."""

    public_flags: UserFlags = field(factory=UserFlags, repr=False, kw_only=True)
    """:class:`UserFlags`: The public flags of the user."""

    def _patch(self, data: raw.User, /) -> raw.User:  # type: ignore[override]
        if 'username' in data:
            self.username = data['username']
        if 'discriminator' in data:
            self.discriminator = data['discriminator']
        if 'avatar' in data:
            self.avatar = data['avatar']
        if 'bot' in data:
            self.bot = bool(data['bot'])
        if 'system' in data:
            self.system = bool(data['system'])
        if 'public_flags' in data:
            self.public_flags = UserFlags(data['public_flags'] or 0)
        return data

    @property
    def partial(self) -> bool:
        """:class:`bool`: Whether the user is partial, i.e. only ID is known."""
        return self.username is None

    @property
    def tag(self) -> str | None:
        """Optional[:class:`str`]: The ``username#discriminator`` of the user."""
        if self.partial:
            return None
        return f'{self.username}#{self.discriminator}'

    @property
    def mention(self) -> str:
        return f'<@{self.id}>'

    def equals(self, other: User, /) -> bool:
        """Checks if user fields that are exposed in update events are equal.

        Parameters
        ----------
        other: :class:`User`
            The user to compare against.
        """
        return (
            self.id == other.id
            and self.username == other.username
            and self.discriminator == other.discriminator
            and self.avatar == other.avatar
            and self.public_flags == other.public_flags
        )

    async def fetch(self, *, force: bool = True) -> User:
        """|coro|

        Retrieves this user from API, updating the cached copy.
        """
        return await self.state.users.fetch(self.id, force=force)

    def __str__(self) -> str:
        return self.tag or self.id


@define(slots=True, eq=False)
class ClientUser(User):
    """Represents the connected user."""

    verified: bool = field(default=False, repr=False, kw_only=True)
    mfa_enabled: bool = field(default=False, repr=False, kw_only=True)

    def _patch(self, data: raw.User, /) -> raw.User:  # type: ignore[override]
        User._patch(self, data)
        if 'verified' in data:
            self.verified = bool(data['verified'])
        if 'mfa_enabled' in data:
            self.mfa_enabled = bool(data['mfa_enabled'])
        return data


__all__ = ('User', 'ClientUser')
