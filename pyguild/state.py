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

import logging
import typing

from .actions import ActionsManager
from .enums import Partials
from .managers import ChannelManager, GuildManager, UserManager
from .parser import Parser
from .voice import VoiceManager

if typing.TYPE_CHECKING:
    from collections.abc import Iterable

    from .application_command import ClientApplication
    from .events import BaseEvent
    from .http import HTTPClient
    from .user import ClientUser

_L = logging.getLogger(__name__)


class Dispatcher(typing.Protocol):
    """The shape of event bus that :class:`State` publishes events to."""

    def dispatch(self, event: BaseEvent, /) -> typing.Any: ...

    def has_listeners(self, event: type[BaseEvent], /) -> bool: ...


class State:
    """Represents a manager for all pyguild objects.

    Attributes
    ----------
    actions: :class:`ActionsManager`
        The action handlers translating inbound events into cache changes.
    channels: :class:`ChannelManager`
        The global channel manager.
    guilds: :class:`GuildManager`
        The guild manager.
    parser: :class:`Parser`
        The parser.
    partials: FrozenSet[:class:`Partials`]
        The structures allowed to be constructed from an ID alone.
    rest_ws_bridge_timeout: :class:`float`
        How long, in seconds, removed guilds are remembered to answer duplicate delete events.
    users: :class:`UserManager`
        The user manager.
    voice: :class:`VoiceManager`
        The voice coordinator.
    """

    __slots__ = (
        '_dispatcher',
        '_http',
        'actions',
        'application',
        'channels',
        'guilds',
        'me',
        'parser',
        'partials',
        'rest_ws_bridge_timeout',
        'users',
        'voice',
    )

    def __init__(
        self,
        *,
        dispatcher: Dispatcher | None = None,
        http: HTTPClient | None = None,
        parser: Parser | None = None,
        partials: Iterable[Partials] | None = None,
        rest_ws_bridge_timeout: float = 5.0,
    ) -> None:
        self._dispatcher: Dispatcher | None = dispatcher
        self._http: HTTPClient | None = http
        self.parser: Parser = parser if parser else Parser(state=self)
        self.partials: frozenset[Partials] = frozenset(partials or ())
        self.rest_ws_bridge_timeout: float = rest_ws_bridge_timeout

        self.me: ClientUser | None = None
        self.application: ClientApplication | None = None

        self.users: UserManager = UserManager(self)
        self.channels: ChannelManager = ChannelManager(self)
        self.guilds: GuildManager = GuildManager(self)
        self.voice: VoiceManager = VoiceManager(self)
        self.actions: ActionsManager = ActionsManager(self)

    def setup(
        self,
        *,
        dispatcher: Dispatcher | None = None,
        http: HTTPClient | None = None,
        parser: Parser | None = None,
    ) -> State:
        if dispatcher:
            self._dispatcher = dispatcher
        if http:
            self._http = http
        if parser:
            self.parser = parser
        return self

    @property
    def http(self) -> HTTPClient:
        assert self._http, 'State has no HTTP client attached'
        return self._http

    @property
    def dispatcher(self) -> Dispatcher | None:
        return self._dispatcher

    def dispatch(self, event: BaseEvent, /) -> None:
        """Publishes an event to the attached dispatcher, if any."""
        dispatcher = self._dispatcher
        if dispatcher is None:
            _L.debug('Dropping %s as no dispatcher is attached', event.__class__.__name__)
            return
        dispatcher.dispatch(event)

    def has_listeners(self, event: type[BaseEvent], /) -> bool:
        dispatcher = self._dispatcher
        if dispatcher is None:
            return False
        return dispatcher.has_listeners(event)

    def allows_partial(self, partial: Partials, /) -> bool:
        """:class:`bool`: Whether the structure may be constructed from an ID alone."""
        return partial in self.partials


__all__ = ('Dispatcher', 'State')
