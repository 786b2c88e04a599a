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

if typing.TYPE_CHECKING:
    from aiohttp import ClientResponse as Response


class PyguildError(Exception):
    """Base exception class for pyguild

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    __slots__ = ()


def _flatten_errors(obj: dict[str, typing.Any], key: str = '', /) -> list[tuple[str, str]]:
    items: list[tuple[str, str]] = []

    for k, v in obj.items():
        if k == 'message':
            continue

        new_key = k
        if key:
            if k.isdigit():
                new_key = f'{key}[{k}]'
            else:
                new_key = f'{key}.{k}'

        if isinstance(v, dict):
            errors = v.get('_errors')
            if errors is not None:
                items.append((new_key, ' '.join(f'[{e.get("code")}] {e.get("message")}' for e in errors)))
            else:
                items.extend(_flatten_errors(v, new_key))
        elif isinstance(v, str):
            items.append((new_key, v))

    return items


class HTTPException(PyguildError):
    """Exception that's raised when an HTTP request operation fails.

    Attributes
    ------------
    response: :class:`aiohttp.ClientResponse`
        The response of the failed HTTP request.
    data: Union[Dict[:class:`str`, Any], Any]
        The data of the error. Could be an empty string.
    status: :class:`int`
        The status code of the HTTP request.
    code: :class:`int`
        The platform specific error code for the failure. ``0`` if the body was not JSON.
    message: :class:`str`
        The error message, with nested validation errors flattened into it.
    method: :class:`str`
        The HTTP method used.
    path: :class:`str`
        The path that was requested.
    request_data: Dict[:class:`str`, Any]
        The data that was sent with request, under ``json`` and ``files`` keys.
    """

    __slots__ = (
        'response',
        'data',
        'status',
        'code',
        'message',
        'method',
        'path',
        'request_data',
    )

    def __init__(
        self,
        response: Response,
        data: dict[str, typing.Any] | str,
        /,
        *,
        method: str = '',
        path: str = '',
        request_data: dict[str, typing.Any] | None = None,
    ) -> None:
        self.response: Response = response
        self.data: dict[str, typing.Any] | str = data
        self.status: int = response.status
        self.method: str = method
        self.path: str = path
        self.request_data: dict[str, typing.Any] = request_data or {'json': None, 'files': []}

        if isinstance(data, dict):
            self.code: int = data.get('code', 0)
            message = data.get('message', '')
            errors = data.get('errors')
            if errors:
                flattened = '\n'.join(f'{k}: {v}' for k, v in _flatten_errors(errors))
                message = f'{message}\n{flattened}'
            self.message: str = message
        else:
            self.code = 0
            self.message = data or ''

        super().__init__(f'{self.status} (error code: {self.code}): {self.message}')


class Unauthorized(HTTPException):
    __slots__ = ()


class Forbidden(HTTPException):
    __slots__ = ()


class NotFound(HTTPException):
    __slots__ = ()


class Ratelimited(HTTPException):
    __slots__ = ()


class InternalServerError(HTTPException):
    __slots__ = ()


class BadGateway(HTTPException):
    __slots__ = ()


_INVALID_ARGUMENT_MESSAGES: dict[str, str] = {
    'INVALID_TYPE': 'Supplied {} is not a{} {}.',
    'INVALID_ELEMENT': 'Supplied {} includes an invalid element: {}',
    'STAGE_CHANNEL_RESOLVE': 'Could not resolve channel to a stage channel.',
    'GLOBAL_COMMAND_PERMISSIONS': (
        'Permissions for global commands may only be fetched or set by providing a guild ID, or from a guild command.'
    ),
}


class InvalidArgument(PyguildError):
    """Exception that's raised when a reference could not be resolved before
    performing a mutating request.

    Attributes
    ----------
    code: :class:`str`
        The error code. One of ``'INVALID_TYPE'``, ``'INVALID_ELEMENT'``, ``'STAGE_CHANNEL_RESOLVE'``
        or ``'GLOBAL_COMMAND_PERMISSIONS'``.
    """

    __slots__ = ('code',)

    def __init__(self, code: str, /, *args: typing.Any) -> None:
        self.code: str = code

        template = _INVALID_ARGUMENT_MESSAGES.get(code)
        if template is None:
            message = code
        elif code == 'INVALID_TYPE':
            name, expected = args
            message = template.format(name, 'n' if expected[:1].lower() in 'aeiou' else '', expected)
        else:
            message = template.format(*args)
        super().__init__(message)


class InteractionError(PyguildError):
    __slots__ = ()


class InteractionAlreadyReplied(InteractionError):
    """Exception that's raised when an interaction was already deferred or replied to."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__('The reply to this interaction has already been sent or deferred.')


class InteractionNotReplied(InteractionError):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__('The reply to this interaction has not been sent or deferred.')


class InteractionEphemeralReplied(InteractionError):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__('Ephemeral responses cannot be fetched or deleted.')


class InvalidData(PyguildError):
    """Exception that's raised when the library encounters unknown
    or invalid data from the platform.
    """

    __slots__ = ('reason',)

    def __init__(self, reason: str, /) -> None:
        self.reason: str = reason
        super().__init__(reason)


class NoData(PyguildError):
    __slots__ = ('what', 'type')

    def __init__(self, what: str, type: str) -> None:
        self.what = what
        self.type = type
        super().__init__(f'Unable to find {type} {what} in cache')


class CollectorEnded(PyguildError):
    """Exception that's raised when waiting for an item of a collector that has ended.

    Attributes
    ----------
    collected: :class:`Collection`
        The items collected before the collector ended.
    reason: :class:`str`
        Why the collector ended.
    """

    __slots__ = ('collected', 'reason')

    def __init__(self, collected: typing.Any, reason: str, /) -> None:
        self.collected: typing.Any = collected
        self.reason: str = reason
        super().__init__(f'Collector ended: {reason}')


__all__ = (
    'PyguildError',
    'HTTPException',
    'Unauthorized',
    'Forbidden',
    'NotFound',
    'Ratelimited',
    'InternalServerError',
    'BadGateway',
    'InvalidArgument',
    'InteractionError',
    'InteractionAlreadyReplied',
    'InteractionNotReplied',
    'InteractionEphemeralReplied',
    'InvalidData',
    'NoData',
    'CollectorEnded',
)
