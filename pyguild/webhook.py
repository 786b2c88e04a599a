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

if typing.TYPE_CHECKING:
    from . import raw
    from .user import User


@define(slots=True, eq=False)
class Webhook(Base):
    """Represents a webhook."""

    type: int = field(default=1, repr=False, kw_only=True)
    guild_id: str | None = field(default=None, repr=False, kw_only=True)
    channel_id: str | None = field(default=None, repr=False, kw_only=True)
    name: str | None = field(default=None, repr=True, kw_only=True)
    avatar: str | None = field(default=None, repr=False, kw_only=True)
    token: str | None = field(default=None, repr=False, kw_only=True)
    application_id: str | None = field(default=None, repr=False, kw_only=True)

    owner: User | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`User`]: The user who created the webhook."""

    def _patch(self, data: raw.Webhook, /) -> raw.Webhook:  # type: ignore[override]
        if 'type' in data:
            self.type = data['type']
        if 'guild_id' in data:
            self.guild_id = data['guild_id']
        if 'channel_id' in data:
            self.channel_id = data['channel_id']
        if 'name' in data:
            self.name = data['name']
        if 'avatar' in data:
            self.avatar = data['avatar']
        if 'token' in data:
            self.token = data['token']
        if 'application_id' in data:
            self.application_id = data['application_id']
        if 'user' in data:
            self.owner = self.state.users._add(data['user'])
        return data


__all__ = ('Webhook',)
