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

if typing.TYPE_CHECKING:
    from .application_command import ApplicationCommand
    from .channel import Channel, ThreadChannel, ThreadMember
    from .collection import Collection
    from .guild import Guild, GuildBan, GuildMember
    from .interaction import Interaction
    from .invite import Invite
    from .message import Message
    from .presence import Presence
    from .stage_instance import StageInstance
    from .sticker import Sticker
    from .user import ClientUser, User
    from .voice import VoiceState


@define(slots=True)
class BaseEvent:
    """Base class for all events.

    Events are dispatched after the cache was updated, so entities they carry
    reflect the state the event describes.
    """

    event_name: typing.ClassVar[str] = ''


@define(slots=True)
class ReadyEvent(BaseEvent):
    """Dispatched when the connection is established and the initial state is received."""

    event_name: typing.ClassVar[typing.Literal['ready']] = 'ready'

    me: ClientUser = field(repr=True, kw_only=True)
    """:class:`ClientUser`: The connected user."""

    guilds: list[Guild] = field(repr=False, kw_only=True)
    """List[:class:`Guild`]: The guilds the user is in. These are unavailable until their data arrives."""


@define(slots=True)
class ChannelCreateEvent(BaseEvent):
    """Dispatched when a channel or thread is created."""

    event_name: typing.ClassVar[typing.Literal['channel_create']] = 'channel_create'

    channel: Channel = field(repr=True, kw_only=True)
    """:class:`Channel`: The created channel."""


@define(slots=True)
class ChannelUpdateEvent(BaseEvent):
    """Dispatched when a channel or thread is updated."""

    event_name: typing.ClassVar[typing.Literal['channel_update']] = 'channel_update'

    before: Channel = field(repr=True, kw_only=True)
    """:class:`Channel`: The channel as it was before the update."""

    after: Channel = field(repr=True, kw_only=True)
    """:class:`Channel`: The channel as it is now."""


@define(slots=True)
class ChannelDeleteEvent(BaseEvent):
    """Dispatched when a channel or thread is deleted."""

    event_name: typing.ClassVar[typing.Literal['channel_delete']] = 'channel_delete'

    channel: Channel = field(repr=True, kw_only=True)
    """:class:`Channel`: The deleted channel."""


@define(slots=True)
class GuildCreateEvent(BaseEvent):
    """Dispatched when the user joins a guild."""

    event_name: typing.ClassVar[typing.Literal['guild_create']] = 'guild_create'

    guild: Guild = field(repr=True, kw_only=True)


@define(slots=True)
class GuildAvailableEvent(BaseEvent):
    """Dispatched when a guild that was unavailable becomes available."""

    event_name: typing.ClassVar[typing.Literal['guild_available']] = 'guild_available'

    guild: Guild = field(repr=True, kw_only=True)


@define(slots=True)
class GuildUnavailableEvent(BaseEvent):
    """Dispatched when a guild becomes unavailable due to an outage. The guild stays cached."""

    event_name: typing.ClassVar[typing.Literal['guild_unavailable']] = 'guild_unavailable'

    guild: Guild = field(repr=True, kw_only=True)


@define(slots=True)
class GuildUpdateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['guild_update']] = 'guild_update'

    before: Guild = field(repr=True, kw_only=True)
    after: Guild = field(repr=True, kw_only=True)


@define(slots=True)
class GuildDeleteEvent(BaseEvent):
    """Dispatched when the user leaves a guild, or the guild is deleted."""

    event_name: typing.ClassVar[typing.Literal['guild_delete']] = 'guild_delete'

    guild: Guild = field(repr=True, kw_only=True)
    """:class:`Guild`: The removed guild. Its :attr:`~Guild.deleted` is ``True``."""


@define(slots=True)
class GuildBanRemoveEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['guild_ban_remove']] = 'guild_ban_remove'

    ban: GuildBan = field(repr=True, kw_only=True)


@define(slots=True)
class InviteDeleteEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['invite_delete']] = 'invite_delete'

    invite: Invite = field(repr=True, kw_only=True)


@define(slots=True)
class UserUpdateEvent(BaseEvent):
    """Dispatched when the user's name, discriminator, avatar or public flags change."""

    event_name: typing.ClassVar[typing.Literal['user_update']] = 'user_update'

    before: User = field(repr=True, kw_only=True)
    after: User = field(repr=True, kw_only=True)


@define(slots=True)
class GuildMemberAvailableEvent(BaseEvent):
    """Dispatched when a member who was not cached comes online."""

    event_name: typing.ClassVar[typing.Literal['guild_member_available']] = 'guild_member_available'

    member: GuildMember = field(repr=True, kw_only=True)


@define(slots=True)
class PresenceUpdateEvent(BaseEvent):
    """Dispatched when the presence of a member changes."""

    event_name: typing.ClassVar[typing.Literal['presence_update']] = 'presence_update'

    before: Presence | None = field(repr=True, kw_only=True)
    """Optional[:class:`Presence`]: The presence before the update. ``None`` if it was not cached."""

    after: Presence = field(repr=True, kw_only=True)


@define(slots=True)
class VoiceStateUpdateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['voice_state_update']] = 'voice_state_update'

    before: VoiceState = field(repr=True, kw_only=True)
    """:class:`VoiceState`: The voice state before the update. Default values if it was not cached."""

    after: VoiceState = field(repr=True, kw_only=True)


@define(slots=True)
class ThreadMembersUpdateEvent(BaseEvent):
    """Dispatched when members are added to or removed from a thread."""

    event_name: typing.ClassVar[typing.Literal['thread_members_update']] = 'thread_members_update'

    thread: ThreadChannel = field(repr=True, kw_only=True)

    before: Collection[str, ThreadMember] = field(repr=False, kw_only=True)
    """:class:`Collection`: The members of the thread before the update."""

    after: Collection[str, ThreadMember] = field(repr=False, kw_only=True)
    """:class:`Collection`: The members of the thread after the update."""


@define(slots=True)
class StageInstanceCreateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['stage_instance_create']] = 'stage_instance_create'

    instance: StageInstance = field(repr=True, kw_only=True)


@define(slots=True)
class StageInstanceUpdateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['stage_instance_update']] = 'stage_instance_update'

    before: StageInstance | None = field(repr=True, kw_only=True)
    after: StageInstance = field(repr=True, kw_only=True)


@define(slots=True)
class StageInstanceDeleteEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['stage_instance_delete']] = 'stage_instance_delete'

    instance: StageInstance = field(repr=True, kw_only=True)


@define(slots=True)
class StickerCreateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['sticker_create']] = 'sticker_create'

    sticker: Sticker = field(repr=True, kw_only=True)


@define(slots=True)
class StickerUpdateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['sticker_update']] = 'sticker_update'

    before: Sticker = field(repr=True, kw_only=True)
    after: Sticker = field(repr=True, kw_only=True)


@define(slots=True)
class StickerDeleteEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['sticker_delete']] = 'sticker_delete'

    sticker: Sticker = field(repr=True, kw_only=True)


@define(slots=True)
class ApplicationCommandCreateEvent(BaseEvent):
    """Dispatched when an application command is created.

    This includes commands of other applications in guilds the user is in.
    """

    event_name: typing.ClassVar[typing.Literal['application_command_create']] = 'application_command_create'

    command: ApplicationCommand = field(repr=True, kw_only=True)


@define(slots=True)
class ApplicationCommandUpdateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['application_command_update']] = 'application_command_update'

    before: ApplicationCommand | None = field(repr=True, kw_only=True)
    after: ApplicationCommand = field(repr=True, kw_only=True)


@define(slots=True)
class ApplicationCommandDeleteEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['application_command_delete']] = 'application_command_delete'

    command: ApplicationCommand = field(repr=True, kw_only=True)


@define(slots=True)
class InteractionCreateEvent(BaseEvent):
    """Dispatched when an interaction is received."""

    event_name: typing.ClassVar[typing.Literal['interaction_create']] = 'interaction_create'

    interaction: Interaction = field(repr=True, kw_only=True)


@define(slots=True)
class MessageCreateEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['message_create']] = 'message_create'

    message: Message = field(repr=True, kw_only=True)


@define(slots=True)
class MessageDeleteEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['message_delete']] = 'message_delete'

    message: Message = field(repr=True, kw_only=True)
    """:class:`Message`: The deleted message. This is partial if it was not cached."""


@define(slots=True)
class MessageReactionRemoveAllEvent(BaseEvent):
    event_name: typing.ClassVar[typing.Literal['message_reaction_remove_all']] = 'message_reaction_remove_all'

    message: Message = field(repr=True, kw_only=True)


__all__ = (
    'BaseEvent',
    'ReadyEvent',
    'ChannelCreateEvent',
    'ChannelUpdateEvent',
    'ChannelDeleteEvent',
    'GuildCreateEvent',
    'GuildAvailableEvent',
    'GuildUnavailableEvent',
    'GuildUpdateEvent',
    'GuildDeleteEvent',
    'GuildBanRemoveEvent',
    'InviteDeleteEvent',
    'UserUpdateEvent',
    'GuildMemberAvailableEvent',
    'PresenceUpdateEvent',
    'VoiceStateUpdateEvent',
    'ThreadMembersUpdateEvent',
    'StageInstanceCreateEvent',
    'StageInstanceUpdateEvent',
    'StageInstanceDeleteEvent',
    'StickerCreateEvent',
    'StickerUpdateEvent',
    'StickerDeleteEvent',
    'ApplicationCommandCreateEvent',
    'ApplicationCommandUpdateEvent',
    'ApplicationCommandDeleteEvent',
    'InteractionCreateEvent',
    'MessageCreateEvent',
    'MessageDeleteEvent',
    'MessageReactionRemoveAllEvent',
)
