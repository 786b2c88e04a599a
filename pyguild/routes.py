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

import typing
from urllib.parse import quote

HTTPMethod = typing.Literal['GET', 'POST', 'PATCH', 'DELETE', 'PUT']


class CompiledRoute:
    """Represents compiled API route."""

    __slots__ = ('route', 'args')

    def __init__(self, route: Route, /, **args: typing.Any) -> None:
        self.route: Route = route
        self.args: dict[str, typing.Any] = args

    def __repr__(self) -> str:
        return f'<CompiledRoute route={self.route!r} args={self.args!r}>'

    def __str__(self) -> str:
        return f'CompiledRoute({self.route}, **{self.args!r})'

    def build(self) -> str:
        # '@' is kept as-is for paths like ``/messages/@original``
        return self.route.path.format_map({k: quote(str(v), safe='@') for k, v in self.args.items()})


class Route:
    """Represents API route."""

    __slots__ = (
        'method',
        'path',
    )

    def __init__(self, method: HTTPMethod, path: str, /) -> None:
        self.method: HTTPMethod = method
        self.path: str = path

    def __repr__(self) -> str:
        return f'<Route method={self.method!r} path={self.path!r}>'

    def __str__(self) -> str:
        return f'{self.method} {self.path}'

    def compile(self, **args: typing.Any) -> CompiledRoute:
        """Compiles route."""
        return CompiledRoute(self, **args)


GET: typing.Final[HTTPMethod] = 'GET'
POST: typing.Final[HTTPMethod] = 'POST'
PUT: typing.Final[HTTPMethod] = 'PUT'
DELETE: typing.Final[HTTPMethod] = 'DELETE'
PATCH: typing.Final[HTTPMethod] = 'PATCH'

# Application commands
APPLICATION_COMMANDS_LIST: typing.Final[Route] = Route(GET, '/applications/{application_id}/commands')
APPLICATION_COMMANDS_CREATE: typing.Final[Route] = Route(POST, '/applications/{application_id}/commands')
APPLICATION_COMMANDS_BULK_OVERWRITE: typing.Final[Route] = Route(PUT, '/applications/{application_id}/commands')
APPLICATION_COMMANDS_FETCH: typing.Final[Route] = Route(GET, '/applications/{application_id}/commands/{command_id}')
APPLICATION_COMMANDS_EDIT: typing.Final[Route] = Route(PATCH, '/applications/{application_id}/commands/{command_id}')
APPLICATION_COMMANDS_DELETE: typing.Final[Route] = Route(
    DELETE, '/applications/{application_id}/commands/{command_id}'
)
GUILD_APPLICATION_COMMANDS_LIST: typing.Final[Route] = Route(
    GET, '/applications/{application_id}/guilds/{guild_id}/commands'
)
GUILD_APPLICATION_COMMANDS_CREATE: typing.Final[Route] = Route(
    POST, '/applications/{application_id}/guilds/{guild_id}/commands'
)
GUILD_APPLICATION_COMMANDS_BULK_OVERWRITE: typing.Final[Route] = Route(
    PUT, '/applications/{application_id}/guilds/{guild_id}/commands'
)
GUILD_APPLICATION_COMMANDS_FETCH: typing.Final[Route] = Route(
    GET, '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}'
)
GUILD_APPLICATION_COMMANDS_EDIT: typing.Final[Route] = Route(
    PATCH, '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}'
)
GUILD_APPLICATION_COMMANDS_DELETE: typing.Final[Route] = Route(
    DELETE, '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}'
)
GUILD_APPLICATION_COMMANDS_PERMISSIONS_LIST: typing.Final[Route] = Route(
    GET, '/applications/{application_id}/guilds/{guild_id}/commands/permissions'
)
GUILD_APPLICATION_COMMANDS_PERMISSIONS_BULK_EDIT: typing.Final[Route] = Route(
    PUT, '/applications/{application_id}/guilds/{guild_id}/commands/permissions'
)
GUILD_APPLICATION_COMMANDS_PERMISSIONS_FETCH: typing.Final[Route] = Route(
    GET, '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}/permissions'
)
GUILD_APPLICATION_COMMANDS_PERMISSIONS_EDIT: typing.Final[Route] = Route(
    PUT, '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}/permissions'
)

# Channels
CHANNELS_FETCH: typing.Final[Route] = Route(GET, '/channels/{channel_id}')
CHANNELS_EDIT: typing.Final[Route] = Route(PATCH, '/channels/{channel_id}')
CHANNELS_PERMISSIONS_SET: typing.Final[Route] = Route(PUT, '/channels/{channel_id}/permissions/{overwrite_id}')
CHANNELS_PERMISSIONS_DELETE: typing.Final[Route] = Route(DELETE, '/channels/{channel_id}/permissions/{overwrite_id}')

# Messages
MESSAGES_FETCH: typing.Final[Route] = Route(GET, '/channels/{channel_id}/messages/{message_id}')
MESSAGES_REACTIONS_CLEAR: typing.Final[Route] = Route(DELETE, '/channels/{channel_id}/messages/{message_id}/reactions')
MESSAGES_REACTIONS_CLEAR_EMOJI: typing.Final[Route] = Route(
    DELETE, '/channels/{channel_id}/messages/{message_id}/reactions/{emoji}'
)

# Guilds
GUILDS_FETCH: typing.Final[Route] = Route(GET, '/guilds/{guild_id}')
GUILDS_AUDIT_LOGS: typing.Final[Route] = Route(GET, '/guilds/{guild_id}/audit-logs')
GUILDS_INVITES: typing.Final[Route] = Route(GET, '/guilds/{guild_id}/invites')
GUILDS_MEMBER_FETCH: typing.Final[Route] = Route(GET, '/guilds/{guild_id}/members/{user_id}')

# Stickers
GUILDS_STICKERS_LIST: typing.Final[Route] = Route(GET, '/guilds/{guild_id}/stickers')
GUILDS_STICKERS_CREATE: typing.Final[Route] = Route(POST, '/guilds/{guild_id}/stickers')
GUILDS_STICKERS_FETCH: typing.Final[Route] = Route(GET, '/guilds/{guild_id}/stickers/{sticker_id}')
GUILDS_STICKERS_EDIT: typing.Final[Route] = Route(PATCH, '/guilds/{guild_id}/stickers/{sticker_id}')
GUILDS_STICKERS_DELETE: typing.Final[Route] = Route(DELETE, '/guilds/{guild_id}/stickers/{sticker_id}')

# Stage instances
STAGE_INSTANCES_CREATE: typing.Final[Route] = Route(POST, '/stage-instances')
STAGE_INSTANCES_FETCH: typing.Final[Route] = Route(GET, '/stage-instances/{channel_id}')
STAGE_INSTANCES_EDIT: typing.Final[Route] = Route(PATCH, '/stage-instances/{channel_id}')
STAGE_INSTANCES_DELETE: typing.Final[Route] = Route(DELETE, '/stage-instances/{channel_id}')

# Interactions
INTERACTIONS_CALLBACK: typing.Final[Route] = Route(POST, '/interactions/{interaction_id}/{interaction_token}/callback')

# Users
USERS_FETCH: typing.Final[Route] = Route(GET, '/users/{user_id}')

# Webhooks
WEBHOOKS_EXECUTE: typing.Final[Route] = Route(POST, '/webhooks/{webhook_id}/{webhook_token}')
WEBHOOKS_MESSAGE_FETCH: typing.Final[Route] = Route(GET, '/webhooks/{webhook_id}/{webhook_token}/messages/{message_id}')
WEBHOOKS_MESSAGE_EDIT: typing.Final[Route] = Route(
    PATCH, '/webhooks/{webhook_id}/{webhook_token}/messages/{message_id}'
)
WEBHOOKS_MESSAGE_DELETE: typing.Final[Route] = Route(
    DELETE, '/webhooks/{webhook_id}/{webhook_token}/messages/{message_id}'
)

__all__ = (
    'HTTPMethod',
    'CompiledRoute',
    'Route',
    'GET',
    'POST',
    'PUT',
    'DELETE',
    'PATCH',
    'APPLICATION_COMMANDS_LIST',
    'APPLICATION_COMMANDS_CREATE',
    'APPLICATION_COMMANDS_BULK_OVERWRITE',
    'APPLICATION_COMMANDS_FETCH',
    'APPLICATION_COMMANDS_EDIT',
    'APPLICATION_COMMANDS_DELETE',
    'GUILD_APPLICATION_COMMANDS_LIST',
    'GUILD_APPLICATION_COMMANDS_CREATE',
    'GUILD_APPLICATION_COMMANDS_BULK_OVERWRITE',
    'GUILD_APPLICATION_COMMANDS_FETCH',
    'GUILD_APPLICATION_COMMANDS_EDIT',
    'GUILD_APPLICATION_COMMANDS_DELETE',
    'GUILD_APPLICATION_COMMANDS_PERMISSIONS_LIST',
    'GUILD_APPLICATION_COMMANDS_PERMISSIONS_BULK_EDIT',
    'GUILD_APPLICATION_COMMANDS_PERMISSIONS_FETCH',
    'GUILD_APPLICATION_COMMANDS_PERMISSIONS_EDIT',
    'CHANNELS_FETCH',
    'CHANNELS_EDIT',
    'CHANNELS_PERMISSIONS_SET',
    'CHANNELS_PERMISSIONS_DELETE',
    'MESSAGES_FETCH',
    'MESSAGES_REACTIONS_CLEAR',
    'MESSAGES_REACTIONS_CLEAR_EMOJI',
    'GUILDS_FETCH',
    'GUILDS_AUDIT_LOGS',
    'GUILDS_INVITES',
    'GUILDS_MEMBER_FETCH',
    'GUILDS_STICKERS_LIST',
    'GUILDS_STICKERS_CREATE',
    'GUILDS_STICKERS_FETCH',
    'GUILDS_STICKERS_EDIT',
    'GUILDS_STICKERS_DELETE',
    'STAGE_INSTANCES_CREATE',
    'STAGE_INSTANCES_FETCH',
    'STAGE_INSTANCES_EDIT',
    'STAGE_INSTANCES_DELETE',
    'INTERACTIONS_CALLBACK',
    'USERS_FETCH',
    'WEBHOOKS_EXECUTE',
    'WEBHOOKS_MESSAGE_FETCH',
    'WEBHOOKS_MESSAGE_EDIT',
    'WEBHOOKS_MESSAGE_DELETE',
)
