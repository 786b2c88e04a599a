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

from abc import ABC, abstractmethod
from attrs import define, field
from datetime import datetime
import logging
import typing

from .base import Base
from .utils import parse_time

if typing.TYPE_CHECKING:
    from . import raw
    from .channel import Channel
    from .guild import Guild, GuildMember
    from .state import State

_L = logging.getLogger(__name__)


@define(slots=True, eq=False)
class VoiceState(Base):
    """Represents the voice state of a member. The ID is the ID of the user."""

    guild: Guild = field(repr=False, kw_only=True)
    """:class:`Guild`: The guild the voice state is in."""

    server_deaf: bool | None = field(default=None, repr=False, kw_only=True)
    server_mute: bool | None = field(default=None, repr=False, kw_only=True)
    self_deaf: bool | None = field(default=None, repr=False, kw_only=True)
    self_mute: bool | None = field(default=None, repr=False, kw_only=True)
    self_video: bool | None = field(default=None, repr=False, kw_only=True)
    session_id: str | None = field(default=None, repr=False, kw_only=True)
    streaming: bool = field(default=False, repr=False, kw_only=True)

    channel_id: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The ID of the voice channel the member is in. ``None`` if they are disconnected."""

    suppress: bool | None = field(default=None, repr=False, kw_only=True)
    request_to_speak_timestamp: datetime | None = field(default=None, repr=False, kw_only=True)

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        return cls._validate_id(data.get('user_id'))

    def _patch(self, data: raw.VoiceState, /) -> raw.VoiceState:  # type: ignore[override]
        if 'deaf' in data:
            self.server_deaf = data['deaf']
        if 'mute' in data:
            self.server_mute = data['mute']
        if 'self_deaf' in data:
            self.self_deaf = data['self_deaf']
        if 'self_mute' in data:
            self.self_mute = data['self_mute']
        if 'self_video' in data:
            self.self_video = data['self_video']
        if 'session_id' in data:
            self.session_id = data['session_id']
        if 'self_stream' in data:
            self.streaming = bool(data['self_stream'])
        if 'channel_id' in data:
            self.channel_id = data['channel_id']
        if 'suppress' in data:
            self.suppress = data['suppress']
        if 'request_to_speak_timestamp' in data:
            self.request_to_speak_timestamp = parse_time(data['request_to_speak_timestamp'])
        return data

    @property
    def deaf(self) -> bool:
        """:class:`bool`: Whether the member is deafened, either by themselves or by the guild."""
        return bool(self.server_deaf or self.self_deaf)

    @property
    def mute(self) -> bool:
        """:class:`bool`: Whether the member is muted, either by themselves or by the guild."""
        return bool(self.server_mute or self.self_mute)

    @property
    def member(self) -> GuildMember | None:
        return self.guild.members.get(self.id)

    @property
    def channel(self) -> Channel | None:
        if self.channel_id is None:
            return None
        return self.guild.channels.get(self.channel_id)


class VoiceAdapter(ABC):
    """The interface of a voice connection for a single guild.

    Implementations receive the connected user's voice events needed to
    establish voice connections. The media transport itself is left to them.
    """

    __slots__ = ()

    @abstractmethod
    def on_voice_state_update(self, payload: raw.VoiceState, /) -> None:
        """Called when the connected user's voice state in the guild changes."""
        ...

    @abstractmethod
    def on_voice_server_update(self, payload: raw.VoiceServerUpdateEvent, /) -> None:
        """Called when the voice server of the guild is assigned or changed."""
        ...

    @abstractmethod
    def destroy(self) -> None:
        """Called when the adapter is no longer used and must release its resources."""
        ...


class VoiceManager:
    """Coordinates voice adapters of the connected user.

    Attributes
    ----------
    adapters: Dict[:class:`str`, :class:`VoiceAdapter`]
        The adapters, keyed by guild ID.
    state: :class:`State`
        The state.
    """

    __slots__ = ('adapters', 'state')

    def __init__(self, state: State, /) -> None:
        self.adapters: dict[str, VoiceAdapter] = {}
        self.state: State = state

    def register(self, guild_id: str, adapter: VoiceAdapter, /) -> None:
        """Registers an adapter for the guild, destroying the previous one."""
        previous = self.adapters.get(guild_id)
        if previous is not None and previous is not adapter:
            previous.destroy()
        self.adapters[guild_id] = adapter

    def on_voice_server_update(self, payload: raw.VoiceServerUpdateEvent, /) -> None:
        adapter = self.adapters.get(payload['guild_id'])
        if adapter is not None:
            adapter.on_voice_server_update(payload)

    def on_voice_state_update(self, payload: raw.VoiceState, /) -> None:
        me = self.state.me
        guild_id = payload.get('guild_id')
        if guild_id and payload.get('session_id') and me is not None and payload.get('user_id') == me.id:
            adapter = self.adapters.get(guild_id)
            if adapter is not None:
                adapter.on_voice_state_update(payload)

    def destroy_adapter(self, guild_id: str, /) -> None:
        """Removes and destroys the adapter of the guild, if any."""
        adapter = self.adapters.pop(guild_id, None)
        if adapter is not None:
            _L.debug('Destroying voice adapter for guild %s', guild_id)
            adapter.destroy()


__all__ = ('VoiceState', 'VoiceAdapter', 'VoiceManager')
