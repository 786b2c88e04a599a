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

from abc import ABC, abstractmethod
import typing

if typing.TYPE_CHECKING:
    from . import raw, utils


class EventHandler(ABC):
    """A handler for decoded gateway dispatches.

    The transport that receives dispatches from the gateway hands every decoded
    ``{'op': 0, 't': name, 'd': payload}`` envelope to :meth:`handle_raw`, in the
    order they were received.
    """

    __slots__ = ()

    @abstractmethod
    def handle_raw(self, payload: raw.GatewayDispatch, /) -> utils.MaybeAwaitable[None]:
        """Handles dispatched event.

        Parameters
        ----------
        payload: Dict[:class:`str`, Any]
            The received event envelope.
        """
        ...


__all__ = ('EventHandler',)
