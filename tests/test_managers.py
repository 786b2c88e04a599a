from __future__ import annotations

import pytest
import pyguild


def test_add_patches_cached_entity(state: pyguild.State):
    user = state.users._add({'id': '10', 'username': 'alice', 'discriminator': '1234', 'avatar': 'abc'})
    assert state.users.get('10') is user

    same = state.users._add({'id': '10', 'username': 'alice2'})
    assert same is user
    assert user.username == 'alice2'
    # Absent keys keep their value
    assert user.avatar == 'abc'

    state.users._add({'id': '10', 'avatar': None})
    assert user.avatar is None


def test_add_without_cache(state: pyguild.State):
    user = state.users._add({'id': '11', 'username': 'bob'}, cache=False)
    assert user.username == 'bob'
    assert state.users.get('11') is None


def test_add_rejects_invalid_ids(state: pyguild.State):
    with pytest.raises(pyguild.InvalidData):
        state.users._add({'username': 'nobody'})

    with pytest.raises(pyguild.InvalidData):
        state.users._add({'id': 'not-a-snowflake'})


def test_update_returns_snapshot(state: pyguild.State):
    user = state.users._add({'id': '12', 'username': 'carol', 'discriminator': '0001'})
    old = user._update({'username': 'caroline'})

    assert old is not user
    assert old.username == 'carol'
    assert user.username == 'caroline'
    assert old == user


def test_resolve(state: pyguild.State, guild: pyguild.Guild):
    member = guild.members.get('1')
    assert member is not None

    assert state.users.resolve(member) is state.me
    assert state.users.resolve_id(member) == '1'
    assert state.users.resolve_id('1') == '1'
    assert state.users.resolve_id(42) is None

    message = state.actions.message_create.handle(
        {'id': '500', 'channel_id': '200', 'author': {'id': '1'}, 'content': 'hello'}
    )['message']
    thread = state.channels._add({'id': '202', 'type': 11, 'guild_id': '100', 'parent_id': '200'})
    thread_member = thread.members._add({'user_id': '1', 'join_timestamp': '2021-01-01T00:00:00+00:00'})

    # Every user resolvable refers to the same user
    for resolvable in (state.me, '1', message, member, thread_member):
        assert state.users.resolve(resolvable) is state.me
        assert state.users.resolve_id(resolvable) == '1'

    channel = state.channels.get('200')
    assert state.guilds.resolve(channel) is guild
    assert state.guilds.resolve_id(member) == '100'

    with pytest.raises(pyguild.InvalidArgument):
        state.users.require_id(None, 'user')


def test_guild_channels_share_identity(state: pyguild.State, guild: pyguild.Guild):
    channel = state.channels.get('200')
    assert isinstance(channel, pyguild.TextChannel)
    assert guild.channels.get('200') is channel
    assert channel.guild is guild

    stage = state.channels.get('201')
    assert isinstance(stage, pyguild.StageChannel)

    thread = state.channels._add(
        {
            'id': '202',
            'type': 11,
            'guild_id': '100',
            'parent_id': '200',
            'name': 'thread',
            'member_count': 1,
        }
    )
    assert isinstance(thread, pyguild.ThreadChannel)
    assert guild.channels.get('202') is thread
    assert channel.threads.get('202') is thread

    state.channels._remove('202')
    assert thread.deleted
    assert guild.channels.get('202') is None
    assert channel.threads.get('202') is None


def test_channel_of_uncached_guild_is_dropped(state: pyguild.State):
    assert state.channels._add({'id': '300', 'type': 0, 'guild_id': '999'}) is None
    assert state.channels.get('300') is None


def test_member_permissions(guild: pyguild.Guild):
    me = guild.me
    assert me is not None
    assert me.permissions.manage_guild
    assert not me.permissions.ban_members

    owner = guild.members._add({'user': {'id': '900', 'username': 'owner'}, 'roles': []})
    assert owner.permissions == pyguild.Permissions.all()


def test_collection_helpers():
    collection = pyguild.Collection({'a': 1, 'b': 2, 'c': 3})
    changes = []

    def observer(key, old, /):
        changes.append((key, old))

    collection.add_observer(observer)

    assert collection.first() == 1
    assert collection.find(lambda v, /: v > 1) == 2
    assert collection.filter(lambda v, /: v % 2 == 1) == {'a': 1, 'c': 3}

    clone = collection.clone()
    assert collection.delete('a')
    assert not collection.delete('a')
    assert 'a' in clone

    collection['b'] = 20
    assert changes == [('a', 1), ('b', 2)]

    assert collection.array() == [20, 3]
    assert collection.key_array() == ['b', 'c']

    collection.remove_observer(observer)
    collection['d'] = 4
    assert len(changes) == 2
