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

import asyncio
import logging
import typing

from .application_command import ClientApplication
from .channel import ThreadChannel
from .enums import ChannelType, Partials
from .events import (
    ApplicationCommandCreateEvent,
    ApplicationCommandDeleteEvent,
    ApplicationCommandUpdateEvent,
    ChannelCreateEvent,
    ChannelDeleteEvent,
    ChannelUpdateEvent,
    GuildAvailableEvent,
    GuildBanRemoveEvent,
    GuildCreateEvent,
    GuildDeleteEvent,
    GuildMemberAvailableEvent,
    GuildUnavailableEvent,
    GuildUpdateEvent,
    InteractionCreateEvent,
    InviteDeleteEvent,
    MessageCreateEvent,
    MessageDeleteEvent,
    MessageReactionRemoveAllEvent,
    PresenceUpdateEvent,
    ReadyEvent,
    StageInstanceCreateEvent,
    StageInstanceDeleteEvent,
    StageInstanceUpdateEvent,
    StickerCreateEvent,
    StickerDeleteEvent,
    StickerUpdateEvent,
    ThreadMembersUpdateEvent,
    UserUpdateEvent,
    VoiceStateUpdateEvent,
)
from .guild import GuildBan
from .invite import Invite
from .user import ClientUser
from .voice import VoiceState

if typing.TYPE_CHECKING:
    from . import raw
    from .application_command import ApplicationCommand
    from .channel import Channel
    from .guild import Guild, GuildMember
    from .managers import ApplicationCommandManager, CachedManager
    from .message import Message
    from .state import State
    from .sticker import Sticker
    from .user import User

_L = logging.getLogger(__name__)


class GenericAction:
    """Translates one kind of inbound event into cache changes and an event.

    Handlers return a :class:`dict` of the affected entities. The shape is the same
    whether the handler was called for a gateway event or after a REST request.
    An event whose parent is not cached is dropped, and ``{}`` is returned.
    """

    __slots__ = ('state',)

    def __init__(self, state: State, /) -> None:
        self.state: State = state

    def handle(self, data: typing.Any, /) -> dict[str, typing.Any]:
        return {}

    def get_payload(
        self,
        data: dict[str, typing.Any],
        manager: CachedManager[typing.Any],
        id: str,
        partial_type: Partials,
        /,
        *,
        cache: bool = True,
    ) -> typing.Any:
        """Returns the cached entity, or builds one from ``data`` if ``partial_type`` is allowed."""
        existing = manager.get(id)
        if existing is None and self.state.allows_partial(partial_type):
            return manager._add(data, cache=cache)
        return existing

    def get_channel(self, data: dict[str, typing.Any], /) -> Channel | None:
        id = data.get('channel_id') or data['id']
        payload: dict[str, typing.Any] = {'id': id}
        guild_id = data.get('guild_id')
        if guild_id is None:
            payload['type'] = ChannelType.private.value
            user = data.get('author') or data.get('user')
            if user is None and 'user_id' in data:
                user = {'id': data['user_id']}
            if user is not None:
                payload['recipients'] = [user]
        else:
            payload['guild_id'] = guild_id
        return self.get_payload(payload, self.state.channels, id, Partials.channel)

    def get_message(self, data: dict[str, typing.Any], channel: Channel, /, *, cache: bool = True) -> Message | None:
        messages = getattr(channel, 'messages', None)
        if messages is None:
            return None
        id = data.get('message_id') or data['id']
        payload = {
            'id': id,
            'channel_id': channel.id,
            'guild_id': data.get('guild_id', getattr(channel, 'guild_id', None)),
        }
        return self.get_payload(payload, messages, id, Partials.message, cache=cache)

    def get_member(self, data: dict[str, typing.Any], guild: Guild, /) -> GuildMember | None:
        return self.get_payload(data, guild.members, data['user']['id'], Partials.guild_member)

    def get_user(self, data: dict[str, typing.Any], /) -> User | None:
        user = data.get('user')
        if user is not None:
            return self.state.users._add(user)
        id = data['user_id']
        return self.get_payload({'id': id}, self.state.users, id, Partials.user)

    def get_user_from_member(self, data: dict[str, typing.Any], /) -> User | None:
        """Returns the user of ``data['member']``, caching the member if its guild is cached."""
        member = data.get('member')
        guild_id = data.get('guild_id')
        if guild_id and member and member.get('user'):
            guild = self.state.guilds.get(guild_id)
            if guild is not None:
                return guild.members._add(member).user
            return self.state.users._add(member['user'])
        return self.get_user(data)


class ReadyAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.ReadyEvent, /) -> dict[str, typing.Any]:
        state = self.state

        me = state.me
        if me is None:
            me = ClientUser._from_data(state, data['user'])
            state.me = me
        else:
            me._patch(data['user'])
        state.users.cache[me.id] = me

        application = data.get('application')
        if application is not None:
            if state.application is None:
                state.application = ClientApplication._from_data(state, application)
            else:
                state.application._patch(application)

        guilds = [state.guilds._add(guild) for guild in data['guilds']]

        state.dispatch(ReadyEvent(me=me, guilds=guilds))
        return {}


class ChannelCreateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Channel, /) -> dict[str, typing.Any]:
        existing = self.state.channels.get(data['id'])
        channel = self.state.channels._add(data)
        if existing is None and channel is not None:
            self.state.dispatch(ChannelCreateEvent(channel=channel))
        return {'channel': channel}


class ChannelUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Channel, /) -> dict[str, typing.Any]:
        state = self.state
        channel = state.channels.get(data['id'])
        if channel is None:
            return {'old': None, 'updated': state.channels._add(data)}

        changed_type = 'type' in data and data['type'] != channel.type.value
        old = channel._update(data)

        if changed_type:
            replacement = state.parser.create_channel(data, getattr(channel, 'guild', None))
            if replacement is not None:
                messages = getattr(channel, 'messages', None)
                new_messages = getattr(replacement, 'messages', None)
                if messages is not None and new_messages is not None:
                    for id, message in messages.cache.items():
                        new_messages.cache[id] = message
                        message.channel = replacement

                _L.debug('Channel %s changed type from %s to %s', channel.id, channel.type, replacement.type)
                state.channels.cache[replacement.id] = replacement
                state.channels._register(replacement)
                channel = replacement

        state.dispatch(ChannelUpdateEvent(before=old, after=channel))
        return {'old': old, 'updated': channel}


class ChannelDeleteAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Channel, /) -> dict[str, typing.Any]:
        channel = self.state.channels._remove(data['id'])
        if channel is None:
            return {}

        messages = getattr(channel, 'messages', None)
        if messages is not None:
            for message in messages.cache.values():
                message.deleted = True

        self.state.dispatch(ChannelDeleteEvent(channel=channel))
        return {'channel': channel}


class GuildCreateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Guild, /) -> dict[str, typing.Any]:
        state = self.state
        guild = state.guilds.get(data['id'])

        if guild is None:
            guild = state.guilds._add(data)
            if guild.available:
                state.dispatch(GuildCreateEvent(guild=guild))
            return {'guild': guild}

        was_available = guild.available
        guild._patch(data)
        # A guild is only sent without the key once it is available.
        if 'unavailable' not in data:
            guild.available = True
        if not was_available and guild.available:
            state.dispatch(GuildAvailableEvent(guild=guild))
        return {'guild': guild}


class GuildUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Guild, /) -> dict[str, typing.Any]:
        guild = self.state.guilds.get(data['id'])
        if guild is None:
            _L.debug('Dropping GUILD_UPDATE of uncached guild %s', data['id'])
            return {}

        old = guild._update(data)
        self.state.dispatch(GuildUpdateEvent(before=old, after=guild))
        return {'old': old, 'updated': guild}


class GuildDeleteAction(GenericAction):
    """Removes guilds the user left.

    Removed guilds are remembered for :attr:`State.rest_ws_bridge_timeout` seconds,
    so a duplicate delete event still returns the same guild.

    Attributes
    ----------
    deleted: Dict[:class:`str`, :class:`Guild`]
        The recently removed guilds, keyed by ID.
    """

    __slots__ = ('deleted',)

    def __init__(self, state: State, /) -> None:
        super().__init__(state)
        self.deleted: dict[str, Guild] = {}

    def handle(self, data: raw.GuildDeleteEvent, /) -> dict[str, typing.Any]:
        state = self.state
        guild = state.guilds.get(data['id'])

        if guild is None:
            return {'guild': self.deleted.get(data['id'])}

        if data.get('unavailable'):
            guild.available = False
            state.dispatch(GuildUnavailableEvent(guild=guild))
            return {'guild': None}

        for channel_id in list(guild.channels.cache.keys()):
            state.channels._remove(channel_id)
        state.voice.destroy_adapter(guild.id)

        state.guilds._remove(guild.id)
        state.dispatch(GuildDeleteEvent(guild=guild))

        self.deleted[guild.id] = guild
        self.schedule_for_deletion(guild.id)
        return {'guild': guild}

    def schedule_for_deletion(self, id: str, /) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            _L.debug('No running event loop, guild %s tombstone will not expire', id)
            return
        loop.call_later(self.state.rest_ws_bridge_timeout, self.deleted.pop, id, None)


class GuildBanRemoveAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.GuildBanRemoveEvent, /) -> dict[str, typing.Any]:
        guild = self.state.guilds.get(data['guild_id'])
        if guild is None:
            return {}

        ban = guild.bans.get(data['user']['id'])
        if ban is None:
            ban = GuildBan._from_data(self.state, data, guild=guild)
        guild.bans.cache.delete(ban.id)

        self.state.dispatch(GuildBanRemoveEvent(ban=ban))
        return {'ban': ban}


class InviteDeleteAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.InviteDeleteEvent, /) -> dict[str, typing.Any]:
        state = self.state
        channel = state.channels.get(data['channel_id'])
        if channel is None:
            return {}

        guild_id = data.get('guild_id')
        guild = None if guild_id is None else state.guilds.get(guild_id)

        invite = Invite._from_data(state, data, channel=channel, guild=guild)
        if guild is not None:
            guild.invites.cache.delete(invite.code)

        state.dispatch(InviteDeleteEvent(invite=invite))
        return {'invite': invite}


class UserUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.User, /) -> dict[str, typing.Any]:
        state = self.state
        me = state.me
        user = me if me is not None and me.id == data['id'] else state.users.get(data['id'])
        if user is None:
            return {'old': None, 'updated': state.users._add(data)}

        old = user._update(data)
        if not old.equals(user):
            state.dispatch(UserUpdateEvent(before=old, after=user))
        return {'old': old, 'updated': user}


class PresenceUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Presence, /) -> dict[str, typing.Any]:
        state = self.state
        user_data = data['user']

        user = state.users.get(user_data['id'])
        if user is None and user_data.get('username'):
            user = state.users._add(user_data)
        if user is None:
            return {}

        if user_data.get('username'):
            candidate = user._clone()
            candidate._patch(user_data)
            if not user.equals(candidate):
                state.actions.user_update.handle(user_data)

        guild = state.guilds.get(data.get('guild_id'))  # type: ignore
        if guild is None:
            return {}

        cached = guild.presences.get(user.id)
        old = None if cached is None else cached._clone()

        if guild.members.get(user.id) is None and data.get('status') != 'offline':
            member = guild.members._add({'deaf': False, 'mute': False}, id=user.id)
            member.user = user
            state.dispatch(GuildMemberAvailableEvent(member=member))

        presence = guild.presences._add(data)
        if state.has_listeners(PresenceUpdateEvent) and not presence.equals(old):
            state.dispatch(PresenceUpdateEvent(before=old, after=presence))
        return {'old': old, 'updated': presence}


class VoiceStateUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.VoiceState, /) -> dict[str, typing.Any]:
        state = self.state
        guild = state.guilds.get(data.get('guild_id'))  # type: ignore
        if guild is None:
            return {}

        user_id = data['user_id']
        cached = guild.voice_states.get(user_id)
        if cached is None:
            old = VoiceState(state=state, id=user_id, guild=guild)
        else:
            old = cached._clone()
        voice_state = guild.voice_states._add(data)

        member_data = data.get('member')
        member = guild.members.get(user_id)
        if member is not None and member_data:
            member._patch(member_data)
        elif member_data and member_data.get('user') and member_data.get('joined_at'):
            guild.members._add(member_data)

        me = state.me
        if me is not None and user_id == me.id:
            _L.debug('Received voice state update: %s', data)
            state.voice.on_voice_state_update(data)

        state.dispatch(VoiceStateUpdateEvent(before=old, after=voice_state))
        return {'old': old, 'updated': voice_state}


class VoiceServerUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.VoiceServerUpdateEvent, /) -> dict[str, typing.Any]:
        _L.debug('Received voice server update: %s', data)
        self.state.voice.on_voice_server_update(data)
        return {}


class ThreadMembersUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.ThreadMembersUpdateEvent, /) -> dict[str, typing.Any]:
        thread = self.state.channels.get(data['id'])
        if not isinstance(thread, ThreadChannel):
            return {}

        old = thread.members.cache.clone()
        thread.member_count = data['member_count']

        for member in data.get('added_members') or ():
            thread.members._add(member)
        for member_id in data.get('removed_member_ids') or ():
            thread.members.cache.delete(member_id)

        self.state.dispatch(ThreadMembersUpdateEvent(thread=thread, before=old, after=thread.members.cache))
        return {'old': old, 'members': thread.members.cache}


class StageInstanceCreateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.StageInstance, /) -> dict[str, typing.Any]:
        channel = self.get_channel(data)
        guild = getattr(channel, 'guild', None)
        if guild is None:
            return {}

        instance = guild.stage_instances._add(data)
        self.state.dispatch(StageInstanceCreateEvent(instance=instance))
        return {'instance': instance}


class StageInstanceUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.StageInstance, /) -> dict[str, typing.Any]:
        channel = self.get_channel(data)
        guild = getattr(channel, 'guild', None)
        if guild is None:
            return {}

        cached = guild.stage_instances.get(data['id'])
        old = None if cached is None else cached._clone()
        instance = guild.stage_instances._add(data)

        self.state.dispatch(StageInstanceUpdateEvent(before=old, after=instance))
        return {'old': old, 'updated': instance}


class StageInstanceDeleteAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.StageInstance, /) -> dict[str, typing.Any]:
        channel = self.get_channel(data)
        guild = getattr(channel, 'guild', None)
        if guild is None:
            return {}

        instance = guild.stage_instances._add(data)
        guild.stage_instances._remove(instance.id)

        self.state.dispatch(StageInstanceDeleteEvent(instance=instance))
        return {'instance': instance}


class GuildStickerCreateAction(GenericAction):
    __slots__ = ()

    def handle(self, guild: Guild, data: raw.Sticker, /) -> dict[str, typing.Any]:  # type: ignore[override]
        sticker = guild.stickers._add(data)
        self.state.dispatch(StickerCreateEvent(sticker=sticker))
        return {'sticker': sticker}


class GuildStickerUpdateAction(GenericAction):
    __slots__ = ()

    def handle(self, sticker: Sticker, data: raw.Sticker, /) -> dict[str, typing.Any]:  # type: ignore[override]
        old = sticker._update(data)
        self.state.dispatch(StickerUpdateEvent(before=old, after=sticker))
        return {'old': old, 'updated': sticker}


class GuildStickerDeleteAction(GenericAction):
    __slots__ = ()

    def handle(self, sticker: Sticker, /) -> dict[str, typing.Any]:  # type: ignore[override]
        guild = sticker.guild
        if guild is not None:
            guild.stickers.cache.delete(sticker.id)
        sticker.deleted = True

        self.state.dispatch(StickerDeleteEvent(sticker=sticker))
        return {'sticker': sticker}


class GuildStickersUpdateAction(GenericAction):
    """Diffs the full sticker list of a guild into create, update and delete actions."""

    __slots__ = ()

    def handle(self, data: raw.GuildStickersUpdateEvent, /) -> dict[str, typing.Any]:
        actions = self.state.actions
        guild = self.state.guilds.get(data['guild_id'])
        if guild is None:
            return {}

        deleted = guild.stickers.cache.clone()
        for payload in data['stickers']:
            cached = guild.stickers.get(payload['id'])
            if cached is None:
                actions.guild_sticker_create.handle(guild, payload)
                continue

            deleted.delete(payload['id'])
            if not cached.equals(payload):
                actions.guild_sticker_update.handle(cached, payload)

        for sticker in deleted.values():
            actions.guild_sticker_delete.handle(sticker)
        return {}


class _ApplicationCommandAction(GenericAction):
    __slots__ = ()

    def get_manager(self, data: raw.ApplicationCommand, /) -> ApplicationCommandManager | None:
        guild_id = data.get('guild_id')
        if guild_id:
            guild = self.state.guilds.get(guild_id)
            return None if guild is None else guild.commands

        application = self.state.application
        return None if application is None else application.commands

    def is_own(self, data: raw.ApplicationCommand, /) -> bool:
        application = self.state.application
        return application is not None and data.get('application_id') == application.id


class ApplicationCommandCreateAction(_ApplicationCommandAction):
    __slots__ = ()

    def handle(self, data: raw.ApplicationCommand, /) -> dict[str, typing.Any]:
        manager = self.get_manager(data)
        if manager is None:
            return {}

        command = manager._add(data, cache=self.is_own(data))
        self.state.dispatch(ApplicationCommandCreateEvent(command=command))
        return {'command': command}


class ApplicationCommandUpdateAction(_ApplicationCommandAction):
    __slots__ = ()

    def handle(self, data: raw.ApplicationCommand, /) -> dict[str, typing.Any]:
        manager = self.get_manager(data)
        if manager is None:
            return {}

        cached: ApplicationCommand | None = manager.get(data['id'])
        old = None if cached is None else cached._clone()
        command = manager._add(data, cache=self.is_own(data))

        self.state.dispatch(ApplicationCommandUpdateEvent(before=old, after=command))
        return {'old': old, 'updated': command}


class ApplicationCommandDeleteAction(_ApplicationCommandAction):
    __slots__ = ()

    def handle(self, data: raw.ApplicationCommand, /) -> dict[str, typing.Any]:
        manager = self.get_manager(data)
        if manager is None:
            return {}

        own = self.is_own(data)
        command = manager._add(data, cache=own)
        if own:
            manager.cache.delete(command.id)
        command.deleted = True

        self.state.dispatch(ApplicationCommandDeleteEvent(command=command))
        return {'command': command}


class InteractionCreateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Interaction, /) -> dict[str, typing.Any]:
        interaction = self.state.parser.create_interaction(data)
        if interaction is None:
            return {}

        self.state.dispatch(InteractionCreateEvent(interaction=interaction))
        return {'interaction': interaction}


class MessageCreateAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.Message, /) -> dict[str, typing.Any]:
        channel = self.state.channels.get(data['channel_id'])
        messages = getattr(channel, 'messages', None)
        if channel is None or messages is None:
            return {}

        existing = messages.get(data['id'])
        if existing is not None:
            return {'message': existing}

        message = messages._add(data)
        if hasattr(channel, 'last_message_id'):
            channel.last_message_id = message.id  # type: ignore

        self.state.dispatch(MessageCreateEvent(message=message))
        return {'message': message}


class MessageDeleteAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.MessageDeleteEvent, /) -> dict[str, typing.Any]:
        channel = self.get_channel(data)  # type: ignore
        if channel is None:
            return {}

        message = self.get_message(data, channel)  # type: ignore
        if message is None:
            return {}

        channel.messages.cache.delete(message.id)  # type: ignore
        message.deleted = True

        self.state.dispatch(MessageDeleteEvent(message=message))
        return {'message': message}


class MessageReactionRemoveAllAction(GenericAction):
    __slots__ = ()

    def handle(self, data: raw.MessageReactionRemoveAllEvent, /) -> dict[str, typing.Any]:
        channel = self.get_channel(data)  # type: ignore
        if channel is None:
            return {}

        message = self.get_message(data, channel)  # type: ignore
        if message is None:
            return {}

        message.reactions.cache.clear()

        self.state.dispatch(MessageReactionRemoveAllEvent(message=message))
        return {'message': message}


class ActionsManager:
    """Holds one instance of every action handler.

    Handlers are exposed under snake case names, for example :attr:`channel_update`.
    """

    __slots__ = (
        'ready',
        'channel_create',
        'channel_update',
        'channel_delete',
        'guild_create',
        'guild_update',
        'guild_delete',
        'guild_ban_remove',
        'invite_delete',
        'user_update',
        'presence_update',
        'voice_state_update',
        'voice_server_update',
        'thread_members_update',
        'stage_instance_create',
        'stage_instance_update',
        'stage_instance_delete',
        'guild_sticker_create',
        'guild_sticker_update',
        'guild_sticker_delete',
        'guild_stickers_update',
        'application_command_create',
        'application_command_update',
        'application_command_delete',
        'interaction_create',
        'message_create',
        'message_delete',
        'message_reaction_remove_all',
    )

    def __init__(self, state: State, /) -> None:
        self.ready: ReadyAction = ReadyAction(state)
        self.channel_create: ChannelCreateAction = ChannelCreateAction(state)
        self.channel_update: ChannelUpdateAction = ChannelUpdateAction(state)
        self.channel_delete: ChannelDeleteAction = ChannelDeleteAction(state)
        self.guild_create: GuildCreateAction = GuildCreateAction(state)
        self.guild_update: GuildUpdateAction = GuildUpdateAction(state)
        self.guild_delete: GuildDeleteAction = GuildDeleteAction(state)
        self.guild_ban_remove: GuildBanRemoveAction = GuildBanRemoveAction(state)
        self.invite_delete: InviteDeleteAction = InviteDeleteAction(state)
        self.user_update: UserUpdateAction = UserUpdateAction(state)
        self.presence_update: PresenceUpdateAction = PresenceUpdateAction(state)
        self.voice_state_update: VoiceStateUpdateAction = VoiceStateUpdateAction(state)
        self.voice_server_update: VoiceServerUpdateAction = VoiceServerUpdateAction(state)
        self.thread_members_update: ThreadMembersUpdateAction = ThreadMembersUpdateAction(state)
        self.stage_instance_create: StageInstanceCreateAction = StageInstanceCreateAction(state)
        self.stage_instance_update: StageInstanceUpdateAction = StageInstanceUpdateAction(state)
        self.stage_instance_delete: StageInstanceDeleteAction = StageInstanceDeleteAction(state)
        self.guild_sticker_create: GuildStickerCreateAction = GuildStickerCreateAction(state)
        self.guild_sticker_update: GuildStickerUpdateAction = GuildStickerUpdateAction(state)
        self.guild_sticker_delete: GuildStickerDeleteAction = GuildStickerDeleteAction(state)
        self.guild_stickers_update: GuildStickersUpdateAction = GuildStickersUpdateAction(state)
        self.application_command_create: ApplicationCommandCreateAction = ApplicationCommandCreateAction(state)
        self.application_command_update: ApplicationCommandUpdateAction = ApplicationCommandUpdateAction(state)
        self.application_command_delete: ApplicationCommandDeleteAction = ApplicationCommandDeleteAction(state)
        self.interaction_create: InteractionCreateAction = InteractionCreateAction(state)
        self.message_create: MessageCreateAction = MessageCreateAction(state)
        self.message_delete: MessageDeleteAction = MessageDeleteAction(state)
        self.message_reaction_remove_all: MessageReactionRemoveAllAction = MessageReactionRemoveAllAction(state)


__all__ = (
    'GenericAction',
    'ReadyAction',
    'ChannelCreateAction',
    'ChannelUpdateAction',
    'ChannelDeleteAction',
    'GuildCreateAction',
    'GuildUpdateAction',
    'GuildDeleteAction',
    'GuildBanRemoveAction',
    'InviteDeleteAction',
    'UserUpdateAction',
    'PresenceUpdateAction',
    'VoiceStateUpdateAction',
    'VoiceServerUpdateAction',
    'ThreadMembersUpdateAction',
    'StageInstanceCreateAction',
    'StageInstanceUpdateAction',
    'StageInstanceDeleteAction',
    'GuildStickerCreateAction',
    'GuildStickerUpdateAction',
    'GuildStickerDeleteAction',
    'GuildStickersUpdateAction',
    'ApplicationCommandCreateAction',
    'ApplicationCommandUpdateAction',
    'ApplicationCommandDeleteAction',
    'InteractionCreateAction',
    'MessageCreateAction',
    'MessageDeleteAction',
    'MessageReactionRemoveAllAction',
    'ActionsManager',
)
