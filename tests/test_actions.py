from __future__ import annotations

import asyncio
import pytest
import pyguild


class RecordingVoiceAdapter(pyguild.VoiceAdapter):
    def __init__(self) -> None:
        self.states: list[dict] = []
        self.servers: list[dict] = []
        self.destroyed: bool = False

    def on_voice_state_update(self, payload, /) -> None:
        self.states.append(payload)

    def on_voice_server_update(self, payload, /) -> None:
        self.servers.append(payload)

    def destroy(self) -> None:
        self.destroyed = True


def test_channel_create_emits_once(state, dispatcher, guild):
    payload = {'id': '210', 'type': 0, 'guild_id': '100', 'name': 'new'}

    result = state.actions.channel_create.handle(payload)
    assert isinstance(result['channel'], pyguild.TextChannel)
    assert len(dispatcher.of(pyguild.ChannelCreateEvent)) == 1

    again = state.actions.channel_create.handle(payload)
    assert again['channel'] is result['channel']
    assert len(dispatcher.of(pyguild.ChannelCreateEvent)) == 1


def test_channel_update_changing_type(state, dispatcher, guild):
    message = state.actions.message_create.handle(
        {
            'id': '500',
            'channel_id': '200',
            'guild_id': '100',
            'author': {'id': '1', 'username': 'me'},
            'content': 'hello',
        }
    )['message']
    channel = state.channels.get('200')
    assert channel.last_message_id == '500'

    result = state.actions.channel_update.handle({'id': '200', 'type': 5, 'guild_id': '100', 'name': 'news'})

    old, updated = result['old'], result['updated']
    assert isinstance(old, pyguild.TextChannel) and not isinstance(old, pyguild.NewsChannel)
    assert old.name == 'general'
    assert isinstance(updated, pyguild.NewsChannel)
    assert updated.name == 'news'

    assert state.channels.get('200') is updated
    assert guild.channels.get('200') is updated
    assert updated.messages.get('500') is message
    assert message.channel is updated

    (event,) = dispatcher.of(pyguild.ChannelUpdateEvent)
    assert event.before is old and event.after is updated


def test_channel_delete_marks_messages(state, dispatcher, guild):
    message = state.actions.message_create.handle(
        {'id': '501', 'channel_id': '200', 'author': {'id': '1'}, 'content': 'bye'}
    )['message']

    result = state.actions.channel_delete.handle({'id': '200', 'type': 0, 'guild_id': '100'})
    assert result['channel'].deleted
    assert message.deleted
    assert guild.channels.get('200') is None
    assert state.actions.channel_delete.handle({'id': '200'}) == {}


def test_guild_unavailable(state, dispatcher, guild):
    result = state.actions.guild_delete.handle({'id': '100', 'unavailable': True})

    assert result == {'guild': None}
    assert state.guilds.get('100') is guild
    assert guild.available is False
    assert len(dispatcher.of(pyguild.GuildUnavailableEvent)) == 1
    assert not dispatcher.of(pyguild.GuildDeleteEvent)
    assert '100' not in state.actions.guild_delete.deleted

    # Updates that do not mention availability keep the guild unavailable
    result = state.actions.guild_update.handle({'id': '100', 'name': 'Renamed'})
    assert result['updated'] is guild
    assert guild.name == 'Renamed'
    assert guild.available is False

    state.actions.guild_create.handle({'id': '100', 'name': 'Renamed'})
    assert guild.available is True
    (event,) = dispatcher.of(pyguild.GuildAvailableEvent)
    assert event.guild is guild


def test_guild_update_of_uncached_guild(state, dispatcher):
    assert state.actions.guild_update.handle({'id': '999', 'name': 'Unknown'}) == {}
    assert not dispatcher.events


@pytest.mark.asyncio
async def test_guild_delete_is_remembered(state, dispatcher, guild):
    state.rest_ws_bridge_timeout = 0.05
    adapter = RecordingVoiceAdapter()
    state.voice.register('100', adapter)

    result = state.actions.guild_delete.handle({'id': '100'})
    assert result['guild'] is guild
    assert guild.deleted
    assert state.guilds.get('100') is None
    assert state.channels.get('200') is None
    assert adapter.destroyed
    assert len(dispatcher.of(pyguild.GuildDeleteEvent)) == 1

    # A duplicate delete, e.g. the gateway event following a REST call, returns the same guild
    assert state.actions.guild_delete.handle({'id': '100'}) == {'guild': guild}
    assert len(dispatcher.of(pyguild.GuildDeleteEvent)) == 1

    await asyncio.sleep(0.2)
    assert state.actions.guild_delete.handle({'id': '100'}) == {'guild': None}


def test_thread_members_update(state, dispatcher, guild):
    thread = state.channels._add(
        {'id': '202', 'type': 11, 'guild_id': '100', 'parent_id': '200', 'member_count': 1},
    )
    thread.members._add({'user_id': '1', 'join_timestamp': '2021-01-01T00:00:00+00:00'})
    kept = thread.members._add({'user_id': '3', 'join_timestamp': '2021-01-01T00:00:00+00:00'})

    result = state.actions.thread_members_update.handle(
        {
            'id': '202',
            'guild_id': '100',
            'member_count': 2,
            'added_members': [{'user_id': '2', 'join_timestamp': '2021-01-02T00:00:00+00:00'}],
            'removed_member_ids': ['1'],
        }
    )

    assert sorted(result['old'].keys()) == ['1', '3']
    assert sorted(result['members'].keys()) == ['2', '3']
    assert result['members'] is thread.members.cache
    assert thread.members.get('3') is kept
    assert thread.member_count == 2

    (event,) = dispatcher.of(pyguild.ThreadMembersUpdateEvent)
    assert event.thread is thread
    assert sorted(event.before.keys()) == ['1', '3']
    assert sorted(event.after.keys()) == ['2', '3']


def test_presence_update_equality(state, dispatcher, guild):
    payload = {
        'guild_id': '100',
        'user': {'id': '1'},
        'status': 'online',
        'activities': [{'name': 'Chess', 'type': 0}],
        'client_status': {'desktop': 'online'},
    }

    first = state.actions.presence_update.handle(payload)
    assert first['old'] is None
    assert first['updated'].status == 'online'
    assert len(dispatcher.of(pyguild.PresenceUpdateEvent)) == 1

    second = state.actions.presence_update.handle(payload)
    assert second['old'].equals(second['updated'])
    assert len(dispatcher.of(pyguild.PresenceUpdateEvent)) == 1

    state.actions.presence_update.handle({**payload, 'status': 'idle'})
    (_, event) = dispatcher.of(pyguild.PresenceUpdateEvent)
    assert event.before is not event.after
    assert event.before.status == 'online'
    assert event.after.status == 'idle'


def test_presence_update_without_listeners(state, dispatcher, guild):
    dispatcher.listening = False
    result = state.actions.presence_update.handle({'guild_id': '100', 'user': {'id': '1'}, 'status': 'dnd'})

    assert result['updated'].status == 'dnd'
    assert not dispatcher.of(pyguild.PresenceUpdateEvent)


def test_presence_update_creates_member(state, dispatcher, guild):
    state.actions.presence_update.handle(
        {'guild_id': '100', 'user': {'id': '3', 'username': 'dave', 'discriminator': '0003'}, 'status': 'online'},
    )

    member = guild.members.get('3')
    assert member is not None
    assert member.user is state.users.get('3')
    assert member.user.username == 'dave'
    (event,) = dispatcher.of(pyguild.GuildMemberAvailableEvent)
    assert event.member is member


def test_presence_update_changes_user(state, dispatcher, guild):
    state.actions.presence_update.handle(
        {'guild_id': '100', 'user': {'id': '1', 'username': 'renamed', 'discriminator': '0001'}, 'status': 'online'},
    )

    (event,) = dispatcher.of(pyguild.UserUpdateEvent)
    assert event.before.username == 'me'
    assert event.after is state.me
    assert state.me.username == 'renamed'


def test_presence_update_of_uncached_guild(state, dispatcher):
    assert state.actions.presence_update.handle({'guild_id': '999', 'user': {'id': '1'}, 'status': 'online'}) == {}
    assert not dispatcher.events


def test_voice_events_are_forwarded(state, dispatcher, guild):
    adapter = RecordingVoiceAdapter()
    state.voice.register('100', adapter)

    payload = {
        'guild_id': '100',
        'channel_id': '201',
        'user_id': '1',
        'session_id': 'session',
        'deaf': False,
        'mute': False,
        'self_deaf': True,
        'self_mute': False,
    }
    result = state.actions.voice_state_update.handle(payload)

    assert result['old'].channel_id is None
    assert result['updated'].channel_id == '201'
    assert result['updated'].deaf
    assert adapter.states == [payload]

    server = {'guild_id': '100', 'token': 'token', 'endpoint': 'voice.example.com'}
    state.actions.voice_server_update.handle(server)
    assert adapter.servers == [server]

    # Voice states of other users are not forwarded
    state.actions.voice_state_update.handle({**payload, 'user_id': '2'})
    assert len(adapter.states) == 1


def test_invite_delete_of_uncached_channel(state, dispatcher, guild):
    dispatcher.events.clear()

    assert state.actions.invite_delete.handle({'channel_id': '999', 'guild_id': '100', 'code': 'abc'}) == {}
    assert not dispatcher.events

    result = state.actions.invite_delete.handle({'channel_id': '200', 'guild_id': '100', 'code': 'abc'})
    assert result['invite'].code == 'abc'
    assert result['invite'].guild is guild


def test_user_update_without_changes(state, dispatcher):
    result = state.actions.user_update.handle({'id': '1', 'username': 'me', 'discriminator': '0001'})
    assert result['updated'] is state.me
    assert not dispatcher.of(pyguild.UserUpdateEvent)


def test_application_commands_of_own_application_are_cached(state, dispatcher):
    commands = state.application.commands

    own = state.actions.application_command_create.handle(
        {'id': '700', 'application_id': '50', 'name': 'ping', 'description': 'Pong!'},
    )['command']
    assert commands.get('700') is own

    foreign = state.actions.application_command_create.handle(
        {'id': '701', 'application_id': '51', 'name': 'other', 'description': 'Other'},
    )['command']
    assert foreign.name == 'other'
    assert commands.get('701') is None
    assert len(dispatcher.of(pyguild.ApplicationCommandCreateEvent)) == 2

    result = state.actions.application_command_update.handle(
        {'id': '700', 'application_id': '50', 'name': 'ping', 'description': 'Pong?'},
    )
    assert result['old'].description == 'Pong!'
    assert result['updated'] is own
    assert own.description == 'Pong?'

    deleted = state.actions.application_command_delete.handle(
        {'id': '700', 'application_id': '50', 'name': 'ping', 'description': 'Pong?'},
    )['command']
    assert deleted is own
    assert own.deleted
    assert commands.get('700') is None


def test_stage_instance_lifecycle(state, dispatcher, guild):
    payload = {'id': '800', 'guild_id': '100', 'channel_id': '201', 'topic': 'Talk', 'privacy_level': 2}

    instance = state.actions.stage_instance_create.handle(payload)['instance']
    assert guild.stage_instances.get('800') is instance
    assert state.channels.get('201').stage_instance is instance

    result = state.actions.stage_instance_update.handle({**payload, 'topic': 'Another talk'})
    assert result['old'].topic == 'Talk'
    assert result['updated'] is instance
    assert instance.topic == 'Another talk'

    deleted = state.actions.stage_instance_delete.handle(payload)['instance']
    assert deleted is instance
    assert instance.deleted
    assert guild.stage_instances.get('800') is None


def test_guild_stickers_update_diff(state, dispatcher, guild):
    guild.stickers._add({'id': '600', 'name': 'wave', 'description': 'Waving', 'tags': 'wave'})
    guild.stickers._add({'id': '601', 'name': 'gone', 'description': 'Gone', 'tags': 'bye'})

    state.actions.guild_stickers_update.handle(
        {
            'guild_id': '100',
            'stickers': [
                {'id': '600', 'name': 'wave', 'description': 'Waving hand', 'tags': 'wave'},
                {'id': '602', 'name': 'new', 'description': 'New', 'tags': 'hello, hi'},
            ],
        }
    )

    (created,) = dispatcher.of(pyguild.StickerCreateEvent)
    assert created.sticker.id == '602'
    assert created.sticker.tags == ['hello', 'hi']

    (updated,) = dispatcher.of(pyguild.StickerUpdateEvent)
    assert updated.before.description == 'Waving'
    assert updated.after.description == 'Waving hand'

    (deleted,) = dispatcher.of(pyguild.StickerDeleteEvent)
    assert deleted.sticker.id == '601'
    assert deleted.sticker.deleted
    assert sorted(guild.stickers.cache.keys()) == ['600', '602']


def test_message_delete_with_partials(state, dispatcher, guild):
    result = state.actions.message_delete.handle({'id': '550', 'channel_id': '200', 'guild_id': '100'})

    message = result['message']
    assert message.id == '550'
    assert message.deleted
    assert message.content is None
    assert state.channels.get('200').messages.get('550') is None


def test_message_delete_without_partials(dispatcher):
    state = pyguild.State(dispatcher=dispatcher)
    assert state.actions.message_delete.handle({'id': '550', 'channel_id': '200'}) == {}
    assert not dispatcher.events


def test_reaction_remove_all(state, dispatcher, guild):
    message = state.actions.message_create.handle(
        {'id': '502', 'channel_id': '200', 'author': {'id': '1'}, 'content': 'react'}
    )['message']
    message.reactions._add({'emoji': {'id': None, 'name': '👍'}, 'count': 2, 'me': False})

    result = state.actions.message_reaction_remove_all.handle({'message_id': '502', 'channel_id': '200'})
    assert result['message'] is message
    assert len(message.reactions.cache) == 0
