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

import logging
import typing

from .channel import (
    CategoryChannel,
    Channel,
    DMChannel,
    NewsChannel,
    StageChannel,
    TextChannel,
    ThreadChannel,
    VoiceChannel,
)
from .enums import ChannelType, InteractionType
from .interaction import CommandInteraction, Interaction, MessageComponentInteraction

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from . import raw
    from .guild import Guild
    from .state import State

_L = logging.getLogger(__name__)


class Parser:
    """Builds entities whose class depends on the payload.

    Attributes
    ----------
    state: :class:`State`
        The state the built entities are attached to.
    """

    __slots__ = (
        'state',
        '_guild_channel_classes',
        '_interaction_parsers',
    )

    def __init__(self, *, state: State) -> None:
        self.state: State = state
        self._guild_channel_classes: dict[int, type[Channel]] = {
            ChannelType.text.value: TextChannel,
            ChannelType.voice.value: VoiceChannel,
            ChannelType.category.value: CategoryChannel,
            ChannelType.news.value: NewsChannel,
            ChannelType.stage_voice.value: StageChannel,
            ChannelType.news_thread.value: ThreadChannel,
            ChannelType.public_thread.value: ThreadChannel,
            ChannelType.private_thread.value: ThreadChannel,
        }
        self._interaction_parsers: dict[int, Callable[[raw.Interaction], Interaction]] = {
            InteractionType.application_command.value: self.parse_command_interaction,
            InteractionType.message_component.value: self.parse_message_component_interaction,
            InteractionType.application_command_autocomplete.value: self.parse_command_interaction,
        }

    def create_channel(self, payload: raw.Channel, guild: Guild | None = None, /) -> Channel | None:
        """Builds a channel of class matching the payload's ``type``.

        Guild channels are attached to ``guild``, or to the cached guild the payload
        refers to.

        Returns
        -------
        Optional[:class:`Channel`]
            The channel, or ``None`` if the type is unknown or the guild is not cached.
        """
        type = payload.get('type')

        if type == ChannelType.private.value:
            return DMChannel._from_data(self.state, payload, type=ChannelType.private)

        cls = self._guild_channel_classes.get(type)  # type: ignore
        if cls is None:
            return None

        if guild is None:
            guild_id = payload.get('guild_id')
            if guild_id is not None:
                guild = self.state.guilds.get(guild_id)
        if guild is None:
            return None

        return cls._from_data(self.state, payload, type=ChannelType(type), guild=guild)

    def parse_command_interaction(self, payload: raw.Interaction, /) -> CommandInteraction:
        return CommandInteraction._from_data(self.state, payload, type=InteractionType(payload['type']))

    def parse_message_component_interaction(self, payload: raw.Interaction, /) -> MessageComponentInteraction:
        return MessageComponentInteraction._from_data(self.state, payload, type=InteractionType(payload['type']))

    def create_interaction(self, payload: raw.Interaction, /) -> Interaction | None:
        """Builds an interaction of class matching the payload's ``type``.

        Returns
        -------
        Optional[:class:`Interaction`]
            The interaction, or ``None`` if the type is unknown.
        """
        parser = self._interaction_parsers.get(payload.get('type'))  # type: ignore
        if parser is None:
            _L.debug('Unknown interaction type: %s', payload.get('type'))
            return None
        return parser(payload)


__all__ = ('Parser',)
