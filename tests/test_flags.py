import pytest
import pyguild


def test_flags():
    permissions = pyguild.Permissions()
    assert permissions.value == 0

    permissions.manage_webhooks = True
    assert permissions.manage_webhooks is True
    assert permissions.value == 536870912

    permissions.manage_webhooks = False
    assert permissions.manage_webhooks is False
    assert permissions.value == 0

    permissions = pyguild.Permissions(manage_webhooks=True)
    assert permissions.manage_webhooks is True
    assert permissions.value == 536870912


def test_flags_resolve():
    assert pyguild.Permissions.resolve('manage_guild') == 32
    assert pyguild.Permissions.resolve('32') == 32
    assert pyguild.Permissions.resolve(['kick_members', 'ban_members']) == 6
    assert pyguild.Permissions.resolve(pyguild.Permissions(kick_members=True)) == 2

    with pytest.raises(TypeError):
        pyguild.Permissions.resolve('not_a_permission')


def test_flags_has_and_missing():
    permissions = pyguild.Permissions(kick_members=True, ban_members=True)

    assert permissions.has('kick_members')
    assert 'ban_members' in permissions
    assert not permissions.has(['kick_members', 'manage_guild'])
    assert permissions.missing(['kick_members', 'manage_guild']) == ['manage_guild']

    assert (permissions | 'manage_guild').manage_guild is True
    assert (permissions & 'kick_members').value == 2
    assert ~pyguild.Permissions.all() == pyguild.Permissions.none()
