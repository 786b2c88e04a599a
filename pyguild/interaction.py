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
from .enums import ComponentType, InteractionResponseType, InteractionType
from .errors import InteractionAlreadyReplied, InteractionEphemeralReplied, InteractionNotReplied
from .flags import MessageFlags

if typing.TYPE_CHECKING:
    from . import raw
    from .channel import Channel
    from .guild import Guild, GuildMember
    from .message import Message
    from .user import User


def _build_message_payload(
    *,
    content: UndefinedOr[str | None] = UNDEFINED,
    embeds: UndefinedOr[list[dict[str, typing.Any]] | None] = UNDEFINED,
    components: UndefinedOr[list[dict[str, typing.Any]] | None] = UNDEFINED,
    ephemeral: bool = False,
) -> dict[str, typing.Any]:
    payload: dict[str, typing.Any] = {}
    if content is not UNDEFINED:
        payload['content'] = content
    if embeds is not UNDEFINED:
        payload['embeds'] = embeds or []
    if components is not UNDEFINED:
        payload['components'] = components or []
    if ephemeral:
        payload['flags'] = MessageFlags.ephemeral.value
    return payload


@define(slots=True, eq=False)
class Interaction(Base):
    """Represents an interaction."""

    type: InteractionType = field(repr=True, kw_only=True)
    """:class:`InteractionType`: The type of interaction."""

    token: str = field(default='', repr=False, kw_only=True)
    """:class:`str`: The token used to respond to the interaction."""

    application_id: str | None = field(default=None, repr=False, kw_only=True)
    channel_id: str | None = field(default=None, repr=False, kw_only=True)
    guild_id: str | None = field(default=None, repr=False, kw_only=True)

    user: User | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`User`]: The user who invoked the interaction."""

    member: GuildMember | dict[str, typing.Any] | None = field(default=None, repr=False, kw_only=True)
    """Optional[Union[:class:`GuildMember`, Dict[:class:`str`, Any]]]: The member who invoked the interaction.

    This is the raw payload if the guild is not cached.
    """

    version: int = field(default=1, repr=False, kw_only=True)

    deferred: bool = field(default=False, repr=False, kw_only=True)
    """:class:`bool`: Whether the reply to this interaction was deferred."""

    replied: bool = field(default=False, repr=False, kw_only=True)
    """:class:`bool`: Whether this interaction was replied to."""

    ephemeral: bool | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`bool`]: Whether the reply to this interaction is ephemeral."""

    def _patch(self, data: raw.Interaction, /) -> raw.Interaction:  # type: ignore[override]
        if 'type' in data:
            self.type = InteractionType.try_value(data['type'])
        if 'token' in data:
            self.token = data['token']
        if 'application_id' in data:
            self.application_id = data['application_id']
        if 'channel_id' in data:
            self.channel_id = data['channel_id']
        if 'guild_id' in data:
            self.guild_id = data['guild_id']
        if 'version' in data:
            self.version = data['version']

        user = data.get('user')
        member = data.get('member')
        if user is None and member is not None:
            user = member.get('user')
        if user is not None:
            self.user = self.state.users._add(user)

        if member is not None:
            guild = self.guild
            self.member = guild.members._add(member) if guild is not None else member

        return data

    @property
    def channel(self) -> Channel | None:
        if self.channel_id is None:
            return None
        return self.state.channels.get(self.channel_id)

    @property
    def guild(self) -> Guild | None:
        if self.guild_id is None:
            return None
        return self.state.guilds.get(self.guild_id)

    def is_command(self) -> bool:
        return self.type == InteractionType.application_command

    def is_message_component(self) -> bool:
        return self.type == InteractionType.message_component

    def is_autocomplete(self) -> bool:
        return self.type == InteractionType.application_command_autocomplete

    def is_button(self) -> bool:
        return False

    def is_select_menu(self) -> bool:
        return False

    def _resolve_message(self, data: raw.Message, /) -> Message | raw.Message:
        channel = self.channel
        messages = getattr(channel, 'messages', None)
        if messages is None:
            return data
        return messages._add(data)


class InteractionResponses:
    """Methods for responding to interactions."""

    __slots__ = ()

    if typing.TYPE_CHECKING:
        id: str
        token: str
        application_id: str | None
        deferred: bool
        replied: bool
        ephemeral: bool | None
        state: typing.Any

        def _resolve_message(self, data: raw.Message, /) -> Message | raw.Message: ...

    async def _callback(self, type: InteractionResponseType, data: dict[str, typing.Any] | None = None, /) -> None:
        payload: dict[str, typing.Any] = {'type': type.value}
        if data is not None:
            payload['data'] = data
        await self.state.http.create_interaction_response(self.id, self.token, payload)

    async def defer(self, *, ephemeral: bool = False) -> None:
        """|coro|

        Defers the reply to this interaction.

        Raises
        ------
        :class:`InteractionAlreadyReplied`
            The interaction was already deferred or replied to.
        """
        if self.deferred or self.replied:
            raise InteractionAlreadyReplied()
        self.ephemeral = ephemeral
        await self._callback(
            InteractionResponseType.deferred_channel_message_with_source,
            {'flags': MessageFlags.ephemeral.value} if ephemeral else {},
        )
        self.deferred = True

    async def reply(
        self,
        content: str | None = None,
        *,
        embeds: list[dict[str, typing.Any]] | None = None,
        components: list[dict[str, typing.Any]] | None = None,
        ephemeral: bool = False,
    ) -> None:
        """|coro|

        Replies to this interaction.

        Raises
        ------
        :class:`InteractionAlreadyReplied`
            The interaction was already deferred or replied to.
        """
        if self.deferred or self.replied:
            raise InteractionAlreadyReplied()
        self.ephemeral = ephemeral
        await self._callback(
            InteractionResponseType.channel_message_with_source,
            _build_message_payload(
                content=content,
                embeds=UNDEFINED if embeds is None else embeds,
                components=UNDEFINED if components is None else components,
                ephemeral=ephemeral,
            ),
        )
        self.replied = True

    async def fetch_reply(self) -> Message | raw.Message:
        """|coro|

        Retrieves the initial reply to this interaction.

        Raises
        ------
        :class:`InteractionEphemeralReplied`
            The reply is ephemeral.
        """
        if self.ephemeral:
            raise InteractionEphemeralReplied()
        data = await self.state.http.get_webhook_message(self.application_id or '', self.token)
        return self._resolve_message(data)

    async def edit_reply(
        self,
        content: UndefinedOr[str | None] = UNDEFINED,
        *,
        embeds: UndefinedOr[list[dict[str, typing.Any]] | None] = UNDEFINED,
        components: UndefinedOr[list[dict[str, typing.Any]] | None] = UNDEFINED,
    ) -> Message | raw.Message:
        """|coro|

        Edits the initial reply to this interaction.

        Raises
        ------
        :class:`InteractionNotReplied`
            The interaction was not deferred or replied to yet.
        """
        if not self.deferred and not self.replied:
            raise InteractionNotReplied()
        data = await self.state.http.edit_webhook_message(
            self.application_id or '',
            self.token,
            _build_message_payload(content=content, embeds=embeds, components=components),
        )
        self.replied = True
        return self._resolve_message(data)

    async def delete_reply(self) -> None:
        """|coro|

        Deletes the initial reply to this interaction.

        Raises
        ------
        :class:`InteractionEphemeralReplied`
            The reply is ephemeral.
        """
        if self.ephemeral:
            raise InteractionEphemeralReplied()
        await self.state.http.delete_webhook_message(self.application_id or '', self.token)

    async def follow_up(
        self,
        content: str | None = None,
        *,
        embeds: list[dict[str, typing.Any]] | None = None,
        components: list[dict[str, typing.Any]] | None = None,
        ephemeral: bool = False,
    ) -> Message | raw.Message:
        """|coro|

        Sends a follow-up message to this interaction.
        """
        data = await self.state.http.execute_webhook(
            self.application_id or '',
            self.token,
            _build_message_payload(
                content=content,
                embeds=UNDEFINED if embeds is None else embeds,
                components=UNDEFINED if components is None else components,
                ephemeral=ephemeral,
            ),
        )
        return self._resolve_message(data)


class ComponentResponses(InteractionResponses):
    """Methods for responding to message component interactions."""

    __slots__ = ()

    async def defer_update(self) -> None:
        """|coro|

        Acknowledges the interaction, without updating the message yet.

        Raises
        ------
        :class:`InteractionAlreadyReplied`
            The interaction was already deferred or replied to.
        """
        if self.deferred or self.replied:
            raise InteractionAlreadyReplied()
        await self._callback(InteractionResponseType.deferred_message_update)
        self.deferred = True

    async def update(
        self,
        content: UndefinedOr[str | None] = UNDEFINED,
        *,
        embeds: UndefinedOr[list[dict[str, typing.Any]] | None] = UNDEFINED,
        components: UndefinedOr[list[dict[str, typing.Any]] | None] = UNDEFINED,
    ) -> None:
        """|coro|

        Updates the message the component is attached to.

        Raises
        ------
        :class:`InteractionAlreadyReplied`
            The interaction was already deferred or replied to.
        """
        if self.deferred or self.replied:
            raise InteractionAlreadyReplied()
        await self._callback(
            InteractionResponseType.update_message,
            _build_message_payload(content=content, embeds=embeds, components=components),
        )
        self.replied = True


@define(slots=True, eq=False)
class CommandInteraction(InteractionResponses, Interaction):
    """Represents an application command interaction, or an autocomplete request for one."""

    command_id: str | None = field(default=None, repr=True, kw_only=True)
    command_name: str | None = field(default=None, repr=True, kw_only=True)

    options: list[dict[str, typing.Any]] = field(factory=list, repr=False, kw_only=True)
    """List[Dict[:class:`str`, Any]]: The options the command was invoked with."""

    def _patch(self, data: raw.Interaction, /) -> raw.Interaction:  # type: ignore[override]
        Interaction._patch(self, data)
        command = data.get('data')
        if command is not None:
            if 'id' in command:
                self.command_id = command['id']
            if 'name' in command:
                self.command_name = command['name']
            if 'options' in command:
                self.options = list(command['options'] or ())
        return data

    def get_option(self, name: str, /) -> dict[str, typing.Any] | None:
        """Returns the top-level option with the name, if provided."""
        for option in self.options:
            if option.get('name') == name:
                return option
        return None

    @property
    def command(self) -> typing.Any:
        """Optional[:class:`ApplicationCommand`]: The invoked command, if cached."""
        if self.command_id is None:
            return None
        guild = self.guild
        if guild is not None:
            command = guild.commands.get(self.command_id)
            if command is not None:
                return command
        application = self.state.application
        if application is None:
            return None
        return application.commands.get(self.command_id)


@define(slots=True, eq=False)
class MessageComponentInteraction(ComponentResponses, Interaction):
    """Represents an interaction with a message component."""

    custom_id: str | None = field(default=None, repr=True, kw_only=True)
    component_type: ComponentType | None = field(default=None, repr=True, kw_only=True)

    message: Message | dict[str, typing.Any] | None = field(default=None, repr=False, kw_only=True)
    """Optional[Union[:class:`Message`, Dict[:class:`str`, Any]]]: The message the component is attached to.

    This is the raw payload if the channel is not cached.
    """

    values: list[str] = field(factory=list, repr=False, kw_only=True)
    """List[:class:`str`]: The values selected in a select menu."""

    def _patch(self, data: raw.Interaction, /) -> raw.Interaction:  # type: ignore[override]
        Interaction._patch(self, data)
        component = data.get('data')
        if component is not None:
            if 'custom_id' in component:
                self.custom_id = component['custom_id']
            if 'component_type' in component:
                self.component_type = ComponentType.try_value(component['component_type'])
            if 'values' in component:
                self.values = list(component['values'] or ())
        if 'message' in data:
            self.message = self._resolve_message(data['message'])
        return data

    @property
    def message_id(self) -> str | None:
        message = self.message
        if message is None:
            return None
        if isinstance(message, dict):
            return message.get('id')
        return message.id

    def is_button(self) -> bool:
        return self.component_type == ComponentType.button

    def is_select_menu(self) -> bool:
        return self.component_type == ComponentType.select_menu


__all__ = (
    'Interaction',
    'InteractionResponses',
    'ComponentResponses',
    'CommandInteraction',
    'MessageComponentInteraction',
)
