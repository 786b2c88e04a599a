from __future__ import annotations

from aiohttp import web
import pytest
import pytest_asyncio
import pyguild

PORT = 5211

routes = web.RouteTableDef()


@routes.get('/users/{user_id}')
async def get_user(request: web.Request) -> web.Response:
    request.app['requests'].append((request.method, request.path))
    user_id = request.match_info['user_id']
    if user_id == '404':
        return web.json_response({'code': 10013, 'message': 'Unknown User'}, status=404)
    return web.json_response({'id': user_id, 'username': f'user{user_id}', 'discriminator': '0001'})


@routes.patch('/channels/{channel_id}')
async def edit_channel(request: web.Request) -> web.Response:
    request.app['requests'].append((request.method, request.path))
    return web.json_response(
        {
            'code': 50035,
            'message': 'Invalid Form Body',
            'errors': {'name': {'_errors': [{'code': 'BASE_TYPE_BAD_LENGTH', 'message': 'Must be between 1 and 100'}]}},
        },
        status=400,
    )


@routes.get('/guilds/{guild_id}/members/{user_id}')
async def get_member(request: web.Request) -> web.Response:
    request.app['requests'].append((request.method, request.path))
    return web.json_response(
        {
            'user': {'id': request.match_info['user_id'], 'username': 'me', 'discriminator': '0001'},
            'roles': ['101'],
            'joined_at': '2021-01-01T00:00:00+00:00',
        }
    )


@routes.get('/guilds/{guild_id}/invites')
async def get_invites(request: web.Request) -> web.Response:
    request.app['requests'].append((request.method, request.path))
    attempts = request.app['invite_attempts']
    request.app['invite_attempts'] = attempts + 1
    if attempts == 0:
        return web.json_response({'message': 'You are being rate limited.', 'retry_after': 0.01}, status=429)
    return web.json_response(
        [
            {'code': 'abcdef', 'guild_id': '100', 'channel_id': '200', 'uses': 3, 'max_uses': 0},
            {'code': 'ghijkl', 'guild_id': '100', 'channel_id': '200', 'uses': 0, 'max_uses': 1},
        ]
    )


@routes.get('/guilds/{guild_id}/audit-logs')
async def get_audit_logs(request: web.Request) -> web.Response:
    request.app['requests'].append((request.method, request.path))
    return web.json_response(
        {
            'users': [{'id': '5', 'username': 'moderator', 'discriminator': '0005'}],
            'webhooks': [],
            'integrations': [],
            'threads': [],
            'audit_log_entries': [
                {
                    'id': '3000',
                    'action_type': 40,
                    'user_id': '5',
                    'target_id': None,
                    'changes': [{'key': 'code', 'new_value': 'abcdef'}, {'key': 'max_uses', 'new_value': 0}],
                },
                {
                    'id': '3001',
                    'action_type': 22,
                    'user_id': '5',
                    'target_id': '6',
                    'reason': 'spam',
                },
            ],
        }
    )


@routes.post('/interactions/{interaction_id}/{interaction_token}/callback')
async def interaction_callback(request: web.Request) -> web.Response:
    request.app['requests'].append((request.method, request.path))
    request.app['callbacks'].append(await request.json())
    return web.Response(status=204)


@pytest_asyncio.fixture
async def app():
    app = web.Application()
    app['requests'] = []
    app['callbacks'] = []
    app['invite_attempts'] = 0
    app.add_routes(routes)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host='localhost', port=PORT)
    await site.start()

    yield app

    await runner.cleanup()


@pytest_asyncio.fixture
async def client():
    client = pyguild.Client(token='token', http_base=f'http://127.0.0.1:{PORT}')
    client.state.actions.ready.handle(
        {
            'user': {'id': '1', 'username': 'me', 'discriminator': '0001', 'bot': True},
            'application': {'id': '50', 'name': 'Application'},
            'guilds': [],
        }
    )

    yield client

    await client.close()


@pytest.mark.asyncio
async def test_fetch_uses_cache(app, client):
    user = await client.users.fetch('7')
    assert user.username == 'user7'
    assert client.get_user('7') is user

    assert await client.users.fetch('7') is user
    assert app['requests'] == [('GET', '/users/7')]

    assert await client.users.fetch('7', force=True) is user
    assert len(app['requests']) == 2


@pytest.mark.asyncio
async def test_fetch_without_cache(app, client):
    user = await client.users.fetch('8', cache=False)
    assert user.username == 'user8'
    assert client.get_user('8') is None


@pytest.mark.asyncio
async def test_http_errors_carry_request(app, client):
    with pytest.raises(pyguild.NotFound) as exc_info:
        await client.users.fetch('404')

    exc = exc_info.value
    assert exc.status == 404
    assert exc.code == 10013
    assert exc.message == 'Unknown User'
    assert exc.method == 'GET'
    assert exc.path == '/users/404'

    with pytest.raises(pyguild.HTTPException) as exc_info:
        await client.http.edit_channel('200', {'name': ''})

    exc = exc_info.value
    assert exc.status == 400
    assert exc.method == 'PATCH'
    assert exc.path == '/channels/200'
    assert exc.request_data['json'] == {'name': ''}
    assert 'name: [BASE_TYPE_BAD_LENGTH] Must be between 1 and 100' in exc.message


@pytest.mark.asyncio
async def test_interaction_replies_once(app, client):
    interaction = client.state.actions.interaction_create.handle(
        {
            'id': '4000',
            'type': 2,
            'token': 'interaction-token',
            'application_id': '50',
            'channel_id': '200',
            'user': {'id': '9', 'username': 'caller', 'discriminator': '0009'},
            'data': {'id': '700', 'name': 'ping'},
        }
    )['interaction']
    assert isinstance(interaction, pyguild.CommandInteraction)

    await interaction.reply('pong!')
    assert interaction.replied

    with pytest.raises(pyguild.InteractionAlreadyReplied):
        await interaction.reply('pong again!')
    with pytest.raises(pyguild.InteractionAlreadyReplied):
        await interaction.defer()

    assert app['requests'] == [('POST', '/interactions/4000/interaction-token/callback')]
    assert app['callbacks'] == [{'type': 4, 'data': {'content': 'pong!'}}]


@pytest.mark.asyncio
async def test_audit_logs_resolve_invites(app, client):
    guild = client.state.actions.guild_create.handle(
        {
            'id': '100',
            'name': 'Testing',
            'owner_id': '900',
            'roles': [
                {'id': '100', 'name': '@everyone', 'permissions': '0'},
                {'id': '101', 'name': 'Managers', 'permissions': str(1 << 5)},
            ],
            'channels': [{'id': '200', 'type': 0, 'name': 'general'}],
        }
    )['guild']

    logs = await guild.fetch_audit_logs()
    assert logs.resolved

    invite_entry = logs.entries['3000']
    assert invite_entry.target_type is pyguild.AuditLogTargetType.invite
    assert invite_entry.action_type is pyguild.AuditLogActionType.create
    invite = invite_entry.target_value
    assert isinstance(invite, pyguild.Invite)
    assert invite.code == 'abcdef'
    assert invite.uses == 3

    ban_entry = logs.entries['3001']
    assert ban_entry.target_type is pyguild.AuditLogTargetType.user
    assert ban_entry.reason == 'spam'
    assert ban_entry.executor is client.get_user('5')

    # The first invites request was rate limited and retried
    assert app['invite_attempts'] == 2
    assert ('GET', '/guilds/100/members/1') in app['requests']
