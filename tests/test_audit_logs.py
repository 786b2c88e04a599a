from __future__ import annotations

import pytest
import pyguild


def test_target_type_boundaries():
    target_type_of = pyguild.target_type_of
    T = pyguild.AuditLogTargetType

    assert target_type_of(1) is T.guild
    assert target_type_of(9) is T.guild
    assert target_type_of(10) is T.channel
    assert target_type_of(28) is T.user
    assert target_type_of(32) is T.role
    assert target_type_of(42) is T.invite
    assert target_type_of(52) is T.webhook
    assert target_type_of(62) is T.emoji
    assert target_type_of(73) is T.message
    assert target_type_of(82) is T.integration
    assert target_type_of(83) is T.stage_instance
    assert target_type_of(85) is T.stage_instance
    assert target_type_of(90) is T.sticker
    assert target_type_of(105) is T.unknown
    assert target_type_of(110) is T.thread
    assert target_type_of(121) is T.unknown
    assert target_type_of(pyguild.AuditLogAction.role_delete) is T.role


def test_action_types():
    action_type_of = pyguild.action_type_of
    A = pyguild.AuditLogActionType

    assert action_type_of(pyguild.AuditLogAction.channel_create) is A.create
    assert action_type_of(pyguild.AuditLogAction.member_kick) is A.delete
    assert action_type_of(pyguild.AuditLogAction.sticker_update) is A.update
    assert action_type_of(pyguild.AuditLogAction.message_pin) is A.create
    assert action_type_of(pyguild.AuditLogAction.message_unpin) is A.delete
    assert action_type_of(1) is A.update
    assert action_type_of(999) is A.all


def test_entries_resolve_from_cache(guild: pyguild.Guild):
    logs = pyguild.GuildAuditLogs(
        guild,
        {
            'users': [{'id': '5', 'username': 'moderator', 'discriminator': '0005'}],
            'threads': [{'id': '210', 'type': 11, 'name': 'thread', 'guild_id': '100', 'parent_id': '200'}],
            'webhooks': [{'id': '6000', 'type': 1, 'name': 'Hook', 'guild_id': '100', 'channel_id': '200'}],
            'integrations': [],
            'audit_log_entries': [
                {'id': '3000', 'action_type': 31, 'user_id': '5', 'target_id': '101'},
                {'id': '3001', 'action_type': 50, 'user_id': '5', 'target_id': '6000'},
                {
                    'id': '3002',
                    'action_type': 13,
                    'user_id': '5',
                    'target_id': '200',
                    'options': {'id': '101', 'type': '0', 'role_name': 'Moderators'},
                },
                {
                    'id': '3003',
                    'action_type': 21,
                    'user_id': '5',
                    'target_id': None,
                    'options': {'members_removed': '4', 'delete_member_days': '7'},
                },
                {'id': '3004', 'action_type': 111, 'user_id': '5', 'target_id': '210'},
                {
                    'id': '3005',
                    'action_type': 12,
                    'user_id': '5',
                    'target_id': '299',
                    'changes': [{'key': 'name', 'old_value': 'gone'}],
                },
            ],
        },
    )

    assert logs.resolved
    assert list(logs.entries.keys()) == ['3000', '3001', '3002', '3003', '3004', '3005']

    role_entry = logs.entries['3000']
    assert role_entry.target_value is guild.roles.get('101')
    assert role_entry.executor is guild.state.users.get('5')

    assert logs.entries['3001'].target_value is logs.webhooks['6000']

    overwrite_entry = logs.entries['3002']
    assert overwrite_entry.target_value is guild.channels.get('200')
    assert overwrite_entry.extra is guild.roles.get('101')

    assert logs.entries['3003'].extra == {'removed': 4, 'days': 7}

    thread = logs.entries['3004'].target_value
    assert isinstance(thread, pyguild.ThreadChannel)
    assert guild.channels.get('210') is thread

    assert logs.entries['3005'].target_value == {'id': '299', 'name': 'gone'}


def test_invite_targets_stay_pending(guild: pyguild.Guild):
    logs = pyguild.GuildAuditLogs(
        guild,
        {
            'audit_log_entries': [
                {
                    'id': '3000',
                    'action_type': 40,
                    'user_id': None,
                    'target_id': None,
                    'changes': [{'key': 'code', 'new_value': 'abcdef'}],
                },
            ],
        },
    )

    assert not logs.resolved
    entry = logs.entries['3000']
    assert entry.target == pyguild.PendingTarget(kind=pyguild.AuditLogTargetType.invite, key='abcdef')
    assert entry.executor is None

    with pytest.raises(pyguild.NoData):
        entry.target_value
