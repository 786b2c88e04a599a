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
from .core import UNDEFINED, UndefinedOr
from .enums import PrivacyLevel

if typing.TYPE_CHECKING:
    from . import raw
    from .channel import StageChannel
    from .guild import Guild


@define(slots=True, eq=False)
class StageInstance(Base):
    """Represents a live stage in a stage channel."""

    guild_id: str | None = field(default=None, repr=False, kw_only=True)

    channel_id: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The ID of the stage channel."""

    topic: str | None = field(default=None, repr=True, kw_only=True)
    privacy_level: PrivacyLevel | None = field(default=None, repr=False, kw_only=True)
    discoverable_disabled: bool | None = field(default=None, repr=False, kw_only=True)

    def _patch(self, data: raw.StageInstance, /) -> raw.StageInstance:  # type: ignore[override]
        if 'guild_id' in data:
            self.guild_id = data['guild_id']
        if 'channel_id' in data:
            self.channel_id = data['channel_id']
        if 'topic' in data:
            self.topic = data['topic']
        if 'privacy_level' in data:
            self.privacy_level = PrivacyLevel.try_value(data['privacy_level'])
        if 'discoverable_disabled' in data:
            self.discoverable_disabled = data['discoverable_disabled']
        return data

    @property
    def guild(self) -> Guild | None:
        if self.guild_id is None:
            return None
        return self.state.guilds.get(self.guild_id)

    @property
    def channel(self) -> StageChannel | None:
        """Optional[:class:`StageChannel`]: The stage channel, if cached."""
        if self.channel_id is None:
            return None
        return self.state.channels.get(self.channel_id)  # type: ignore

    async def edit(
        self,
        *,
        topic: UndefinedOr[str] = UNDEFINED,
        privacy_level: UndefinedOr[PrivacyLevel] = UNDEFINED,
    ) -> StageInstance:
        """|coro|

        Edits the stage instance.

        Raises
        ------
        :class:`InvalidArgument`
            The stage channel could not be resolved.
        """
        from .errors import NoData

        guild = self.guild
        if guild is None:
            raise NoData(self.guild_id or self.id, 'guild')
        return await guild.stage_instances.edit(self.channel_id or '', topic=topic, privacy_level=privacy_level)

    async def delete(self) -> StageInstance:
        """|coro|

        Ends the stage instance.
        """
        from .errors import NoData

        guild = self.guild
        if guild is None:
            raise NoData(self.guild_id or self.id, 'guild')
        await guild.stage_instances.delete(self.channel_id or '')
        self.deleted = True
        return self


__all__ = ('StageInstance',)
