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

import aiohttp
from multidict import CIMultiDict

from . import routes, utils
from .core import UNDEFINED, UndefinedOr, __version__ as version
from .errors import (
    HTTPException,
    Unauthorized,
    Forbidden,
    NotFound,
    Ratelimited,
    InternalServerError,
    BadGateway,
)

if typing.TYPE_CHECKING:
    from collections.abc import Sequence

    from . import raw
    from .state import State


DEFAULT_HTTP_USER_AGENT = f'DiscordBot (https://github.com/pyguild/pyguild, {version})'


_L = logging.getLogger(__name__)
_STATUS_TO_ERRORS = {
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    429: Ratelimited,
    500: InternalServerError,
    502: BadGateway,
}


class File:
    """Represents a file to upload in a multipart request.

    Attributes
    ----------
    filename: :class:`str`
        The file name.
    data: :class:`bytes`
        The file contents.
    content_type: :class:`str`
        The MIME type of contents.
    """

    __slots__ = ('filename', 'data', 'content_type')

    def __init__(self, data: bytes, /, *, filename: str, content_type: str = 'application/octet-stream') -> None:
        self.filename: str = filename
        self.data: bytes = data
        self.content_type: str = content_type

    def __repr__(self) -> str:
        return f'<File filename={self.filename!r} size={len(self.data)}>'


class HTTPClient:
    """Represents an HTTP client sending HTTP requests to the platform API.

    Methods of this class only perform requests and return decoded JSON, they never
    touch the cache. Reconciling responses into cache is done by managers.

    Attributes
    ----------
    max_retries: :class:`int`
        How many times to retry requests that received 429 or 502 HTTP status code.
    state: :class:`State`
        The state.
    token: :class:`str`
        The bot token in use.
    user_agent: :class:`str`
        The HTTP user agent used when making requests.
    """

    __slots__ = (
        '_base',
        '_session',
        'max_retries',
        'state',
        'token',
        'user_agent',
    )

    def __init__(
        self,
        token: str | None = None,
        *,
        base: str | None = None,
        max_retries: int | None = None,
        state: State,
        session: utils.MaybeAwaitableFunc[[HTTPClient], aiohttp.ClientSession] | aiohttp.ClientSession,
        user_agent: str | None = None,
    ) -> None:
        if base is None:
            base = 'https://discord.com/api/v9'
        self._base: str = base.rstrip('/')
        self._session: utils.MaybeAwaitableFunc[[HTTPClient], aiohttp.ClientSession] | aiohttp.ClientSession = (
            session
        )
        self.max_retries: int = 3 if max_retries is None else max_retries
        self.state: State = state
        self.token: str = token or ''
        self.user_agent: str = user_agent or DEFAULT_HTTP_USER_AGENT

    @property
    def base(self) -> str:
        """:class:`str`: The base URL used for API requests."""
        return self._base

    def url_for(self, route: routes.CompiledRoute, /) -> str:
        """Returns a URL for route.

        Parameters
        ----------
        route: :class:`~routes.CompiledRoute`
            The route.

        Returns
        -------
        :class:`str`
            The URL for the route.
        """
        return self._base + route.build()

    def with_credentials(self, token: str, /) -> None:
        """Modifies HTTP client credentials."""
        self.token = token

    def add_headers(
        self,
        headers: CIMultiDict[typing.Any],
        /,
        *,
        json_body: bool = False,
        reason: str | None = None,
    ) -> None:
        headers['Accept'] = 'application/json'
        if json_body:
            headers['Content-Type'] = 'application/json'
        if self.token:
            headers['Authorization'] = f'Bot {self.token}'
        if self.user_agent:
            headers['User-Agent'] = self.user_agent
        if reason:
            headers['X-Audit-Log-Reason'] = reason

    async def _get_session(self) -> aiohttp.ClientSession:
        session = self._session
        if callable(session):
            session = await utils.maybe_coroutine(session, self)
            # detect recursion
            if callable(session):
                raise TypeError(f'Expected aiohttp.ClientSession, not {type(session)!r}')
            # Do not call factory on future requests
            self._session = session
        return session

    async def raw_request(
        self,
        route: routes.CompiledRoute,
        *,
        json: UndefinedOr[typing.Any] = UNDEFINED,
        form: dict[str, typing.Any] | None = None,
        files: Sequence[File] | None = None,
        params: dict[str, typing.Any] | None = None,
        reason: str | None = None,
    ) -> aiohttp.ClientResponse:
        """|coro|

        Perform a HTTP request, with retries and errors handling.

        Parameters
        ----------
        route: :class:`~routes.CompiledRoute`
            The route.
        json: UndefinedOr[typing.Any]
            The JSON payload to pass in.
        form: Optional[Dict[:class:`str`, Any]]
            The multipart form fields to pass in. Used together with ``files``.
        files: Optional[Sequence[:class:`File`]]
            The files to upload.
        params: Optional[Dict[:class:`str`, Any]]
            The query string parameters.
        reason: Optional[:class:`str`]
            The reason shown in guild audit logs.

        Raises
        ------
        :class:`HTTPException`
            Something went wrong during request.

        Returns
        -------
        :class:`aiohttp.ClientResponse`
            The aiohttp response.
        """
        headers: CIMultiDict[str] = CIMultiDict()
        multipart = form is not None or bool(files)
        self.add_headers(headers, json_body=json is not UNDEFINED and not multipart, reason=reason)

        method = route.route.method
        path = route.build()
        url = self._base + path

        request_data: dict[str, typing.Any] = {
            'json': None if json is UNDEFINED else json,
            'files': list(files or ()),
        }

        retries = 0

        while True:
            kwargs: dict[str, typing.Any] = {}
            if params:
                kwargs['params'] = {k: str(v) for k, v in params.items() if v is not None}

            # Form data can be consumed only once, so it is rebuilt on every attempt
            if multipart:
                data = aiohttp.FormData()
                for k, v in (form or {}).items():
                    data.add_field(k, str(v))
                if json is not UNDEFINED:
                    data.add_field('payload_json', utils.to_json(json), content_type='application/json')
                for i, file in enumerate(files or ()):
                    data.add_field(
                        'file' if len(files or ()) == 1 else f'files[{i}]',
                        file.data,
                        filename=file.filename,
                        content_type=file.content_type,
                    )
                kwargs['data'] = data
            elif json is not UNDEFINED:
                kwargs['data'] = utils.to_json(json)

            _L.debug('Sending request to %s %s with %s', method, path, request_data['json'])

            session = await self._get_session()
            response = await session.request(method, url, headers=headers, **kwargs)

            if response.status >= 400:
                _L.debug('%s %s has returned %s', method, path, response.status)

                retries += 1
                data = await utils._json_or_text(response)

                if response.status == 502 and retries < self.max_retries:
                    await asyncio.sleep(1 + retries * 2)
                    continue

                if response.status == 429 and retries < self.max_retries:
                    if isinstance(data, dict):
                        retry_after: float = float(data.get('retry_after', 1))
                    else:
                        retry_after = 1

                    _L.debug(
                        'Ratelimited on %s %s, retrying in %.3f seconds',
                        method,
                        url,
                        retry_after,
                    )
                    await asyncio.sleep(retry_after)
                    continue

                raise _STATUS_TO_ERRORS.get(response.status, HTTPException)(
                    response,
                    data,
                    method=method,
                    path=path,
                    request_data=request_data,
                )
            return response

    async def request(
        self,
        route: routes.CompiledRoute,
        *,
        json: UndefinedOr[typing.Any] = UNDEFINED,
        form: dict[str, typing.Any] | None = None,
        files: Sequence[File] | None = None,
        params: dict[str, typing.Any] | None = None,
        reason: str | None = None,
    ) -> typing.Any:
        """|coro|

        Perform a HTTP request, with retries and errors handling.

        Raises
        ------
        :class:`HTTPException`
            Something went wrong during request.

        Returns
        -------
        typing.Any
            The parsed JSON response, or ``None`` if the response had no content.
        """
        response = await self.raw_request(
            route,
            json=json,
            form=form,
            files=files,
            params=params,
            reason=reason,
        )
        result = await utils._json_or_text(response)

        method = response.request_info.method
        url = response.request_info.url

        _L.debug('%s %s has received %s %s', method, url, response.status, result)

        response.close()
        return result

    async def cleanup(self) -> None:
        """|coro|

        Closes the aiohttp session.
        """
        if not callable(self._session):
            await self._session.close()

    # Users
    async def get_user(self, user_id: str, /) -> raw.User:
        return await self.request(routes.USERS_FETCH.compile(user_id=user_id))

    # Channels
    async def get_channel(self, channel_id: str, /) -> raw.Channel:
        return await self.request(routes.CHANNELS_FETCH.compile(channel_id=channel_id))

    async def edit_channel(
        self, channel_id: str, payload: dict[str, typing.Any], /, *, reason: str | None = None
    ) -> raw.Channel:
        return await self.request(routes.CHANNELS_EDIT.compile(channel_id=channel_id), json=payload, reason=reason)

    async def edit_channel_permissions(
        self,
        channel_id: str,
        overwrite_id: str,
        payload: dict[str, typing.Any],
        /,
        *,
        reason: str | None = None,
    ) -> None:
        await self.request(
            routes.CHANNELS_PERMISSIONS_SET.compile(channel_id=channel_id, overwrite_id=overwrite_id),
            json=payload,
            reason=reason,
        )

    async def delete_channel_permissions(
        self, channel_id: str, overwrite_id: str, /, *, reason: str | None = None
    ) -> None:
        await self.request(
            routes.CHANNELS_PERMISSIONS_DELETE.compile(channel_id=channel_id, overwrite_id=overwrite_id),
            reason=reason,
        )

    # Messages
    async def get_message(self, channel_id: str, message_id: str, /) -> raw.Message:
        return await self.request(routes.MESSAGES_FETCH.compile(channel_id=channel_id, message_id=message_id))

    async def clear_reactions(self, channel_id: str, message_id: str, /) -> None:
        await self.request(routes.MESSAGES_REACTIONS_CLEAR.compile(channel_id=channel_id, message_id=message_id))

    async def clear_single_reaction(self, channel_id: str, message_id: str, emoji: str, /) -> None:
        await self.request(
            routes.MESSAGES_REACTIONS_CLEAR_EMOJI.compile(channel_id=channel_id, message_id=message_id, emoji=emoji)
        )

    # Guilds
    async def get_guild(self, guild_id: str, /) -> raw.Guild:
        return await self.request(routes.GUILDS_FETCH.compile(guild_id=guild_id))

    async def get_audit_logs(
        self,
        guild_id: str,
        /,
        *,
        before: str | None = None,
        limit: int | None = None,
        user_id: str | None = None,
        action_type: int | None = None,
    ) -> raw.AuditLog:
        params = {
            'before': before,
            'limit': limit,
            'user_id': user_id,
            'action_type': action_type,
        }
        return await self.request(routes.GUILDS_AUDIT_LOGS.compile(guild_id=guild_id), params=params)

    async def get_guild_invites(self, guild_id: str, /) -> list[raw.Invite]:
        return await self.request(routes.GUILDS_INVITES.compile(guild_id=guild_id))

    async def get_member(self, guild_id: str, user_id: str, /) -> raw.Member:
        return await self.request(routes.GUILDS_MEMBER_FETCH.compile(guild_id=guild_id, user_id=user_id))

    # Stickers
    async def get_stickers(self, guild_id: str, /) -> list[raw.Sticker]:
        return await self.request(routes.GUILDS_STICKERS_LIST.compile(guild_id=guild_id))

    async def get_sticker(self, guild_id: str, sticker_id: str, /) -> raw.Sticker:
        return await self.request(routes.GUILDS_STICKERS_FETCH.compile(guild_id=guild_id, sticker_id=sticker_id))

    async def create_sticker(
        self,
        guild_id: str,
        form: dict[str, typing.Any],
        file: File,
        /,
        *,
        reason: str | None = None,
    ) -> raw.Sticker:
        return await self.request(
            routes.GUILDS_STICKERS_CREATE.compile(guild_id=guild_id),
            form=form,
            files=[file],
            reason=reason,
        )

    async def edit_sticker(
        self,
        guild_id: str,
        sticker_id: str,
        payload: dict[str, typing.Any],
        /,
        *,
        reason: str | None = None,
    ) -> raw.Sticker:
        return await self.request(
            routes.GUILDS_STICKERS_EDIT.compile(guild_id=guild_id, sticker_id=sticker_id),
            json=payload,
            reason=reason,
        )

    async def delete_sticker(self, guild_id: str, sticker_id: str, /, *, reason: str | None = None) -> None:
        await self.request(
            routes.GUILDS_STICKERS_DELETE.compile(guild_id=guild_id, sticker_id=sticker_id),
            reason=reason,
        )

    # Stage instances
    async def create_stage_instance(self, payload: dict[str, typing.Any], /) -> raw.StageInstance:
        return await self.request(routes.STAGE_INSTANCES_CREATE.compile(), json=payload)

    async def get_stage_instance(self, channel_id: str, /) -> raw.StageInstance:
        return await self.request(routes.STAGE_INSTANCES_FETCH.compile(channel_id=channel_id))

    async def edit_stage_instance(self, channel_id: str, payload: dict[str, typing.Any], /) -> raw.StageInstance:
        return await self.request(routes.STAGE_INSTANCES_EDIT.compile(channel_id=channel_id), json=payload)

    async def delete_stage_instance(self, channel_id: str, /) -> None:
        await self.request(routes.STAGE_INSTANCES_DELETE.compile(channel_id=channel_id))

    # Application commands
    def application_command_route(
        self,
        application_id: str,
        /,
        *,
        method: routes.HTTPMethod = 'GET',
        command_id: str | None = None,
        guild_id: str | None = None,
    ) -> routes.CompiledRoute:
        """Picks route for commands of an application, scoped to a guild when ``guild_id`` is given."""
        if guild_id is None:
            if command_id is None:
                route = {
                    'GET': routes.APPLICATION_COMMANDS_LIST,
                    'POST': routes.APPLICATION_COMMANDS_CREATE,
                    'PUT': routes.APPLICATION_COMMANDS_BULK_OVERWRITE,
                }[method]
            else:
                route = {
                    'GET': routes.APPLICATION_COMMANDS_FETCH,
                    'PATCH': routes.APPLICATION_COMMANDS_EDIT,
                    'DELETE': routes.APPLICATION_COMMANDS_DELETE,
                }[method]
        elif command_id is None:
            route = {
                'GET': routes.GUILD_APPLICATION_COMMANDS_LIST,
                'POST': routes.GUILD_APPLICATION_COMMANDS_CREATE,
                'PUT': routes.GUILD_APPLICATION_COMMANDS_BULK_OVERWRITE,
            }[method]
        else:
            route = {
                'GET': routes.GUILD_APPLICATION_COMMANDS_FETCH,
                'PATCH': routes.GUILD_APPLICATION_COMMANDS_EDIT,
                'DELETE': routes.GUILD_APPLICATION_COMMANDS_DELETE,
            }[method]

        args: dict[str, str] = {'application_id': application_id}
        if guild_id is not None:
            args['guild_id'] = guild_id
        if command_id is not None:
            args['command_id'] = command_id
        return route.compile(**args)

    async def get_application_commands(
        self, application_id: str, /, *, guild_id: str | None = None
    ) -> list[raw.ApplicationCommand]:
        return await self.request(self.application_command_route(application_id, guild_id=guild_id))

    async def get_application_command(
        self, application_id: str, command_id: str, /, *, guild_id: str | None = None
    ) -> raw.ApplicationCommand:
        return await self.request(
            self.application_command_route(application_id, command_id=command_id, guild_id=guild_id)
        )

    async def create_application_command(
        self, application_id: str, payload: dict[str, typing.Any], /, *, guild_id: str | None = None
    ) -> raw.ApplicationCommand:
        return await self.request(
            self.application_command_route(application_id, method='POST', guild_id=guild_id),
            json=payload,
        )

    async def bulk_overwrite_application_commands(
        self, application_id: str, payload: list[dict[str, typing.Any]], /, *, guild_id: str | None = None
    ) -> list[raw.ApplicationCommand]:
        return await self.request(
            self.application_command_route(application_id, method='PUT', guild_id=guild_id),
            json=payload,
        )

    async def edit_application_command(
        self,
        application_id: str,
        command_id: str,
        payload: dict[str, typing.Any],
        /,
        *,
        guild_id: str | None = None,
    ) -> raw.ApplicationCommand:
        return await self.request(
            self.application_command_route(application_id, method='PATCH', command_id=command_id, guild_id=guild_id),
            json=payload,
        )

    async def delete_application_command(
        self, application_id: str, command_id: str, /, *, guild_id: str | None = None
    ) -> None:
        await self.request(
            self.application_command_route(application_id, method='DELETE', command_id=command_id, guild_id=guild_id)
        )

    async def get_application_command_permissions(
        self, application_id: str, guild_id: str, /, *, command_id: str | None = None
    ) -> typing.Any:
        if command_id is None:
            route = routes.GUILD_APPLICATION_COMMANDS_PERMISSIONS_LIST.compile(
                application_id=application_id, guild_id=guild_id
            )
        else:
            route = routes.GUILD_APPLICATION_COMMANDS_PERMISSIONS_FETCH.compile(
                application_id=application_id, guild_id=guild_id, command_id=command_id
            )
        return await self.request(route)

    async def edit_application_command_permissions(
        self,
        application_id: str,
        guild_id: str,
        command_id: str,
        permissions: list[dict[str, typing.Any]],
        /,
    ) -> raw.GuildApplicationCommandPermissions:
        return await self.request(
            routes.GUILD_APPLICATION_COMMANDS_PERMISSIONS_EDIT.compile(
                application_id=application_id, guild_id=guild_id, command_id=command_id
            ),
            json={'permissions': permissions},
        )

    async def bulk_edit_application_command_permissions(
        self, application_id: str, guild_id: str, payload: list[dict[str, typing.Any]], /
    ) -> list[raw.GuildApplicationCommandPermissions]:
        return await self.request(
            routes.GUILD_APPLICATION_COMMANDS_PERMISSIONS_BULK_EDIT.compile(
                application_id=application_id, guild_id=guild_id
            ),
            json=payload,
        )

    # Interactions
    async def create_interaction_response(
        self, interaction_id: str, interaction_token: str, payload: dict[str, typing.Any], /
    ) -> None:
        await self.request(
            routes.INTERACTIONS_CALLBACK.compile(interaction_id=interaction_id, interaction_token=interaction_token),
            json=payload,
        )

    async def execute_webhook(self, webhook_id: str, webhook_token: str, payload: dict[str, typing.Any], /) -> raw.Message:
        return await self.request(
            routes.WEBHOOKS_EXECUTE.compile(webhook_id=webhook_id, webhook_token=webhook_token),
            json=payload,
        )

    async def get_webhook_message(
        self, webhook_id: str, webhook_token: str, message_id: str = '@original', /
    ) -> raw.Message:
        return await self.request(
            routes.WEBHOOKS_MESSAGE_FETCH.compile(webhook_id=webhook_id, webhook_token=webhook_token, message_id=message_id)
        )

    async def edit_webhook_message(
        self,
        webhook_id: str,
        webhook_token: str,
        payload: dict[str, typing.Any],
        message_id: str = '@original',
        /,
    ) -> raw.Message:
        return await self.request(
            routes.WEBHOOKS_MESSAGE_EDIT.compile(webhook_id=webhook_id, webhook_token=webhook_token, message_id=message_id),
            json=payload,
        )

    async def delete_webhook_message(self, webhook_id: str, webhook_token: str, message_id: str = '@original', /) -> None:
        await self.request(
            routes.WEBHOOKS_MESSAGE_DELETE.compile(
                webhook_id=webhook_id, webhook_token=webhook_token, message_id=message_id
            )
        )


__all__ = (
    'DEFAULT_HTTP_USER_AGENT',
    '_STATUS_TO_ERRORS',
    'File',
    'HTTPClient',
)
