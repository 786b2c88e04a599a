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
import builtins
from inspect import isawaitable, signature
import logging
import typing

import aiohttp

from . import utils
from .events import BaseEvent
from .gateway import EventHandler
from .http import HTTPClient
from .state import State

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Coroutine, Generator, Iterable
    from types import TracebackType

    from typing_extensions import Self

    from . import raw
    from .application_command import ClientApplication
    from .channel import Channel
    from .enums import Partials
    from .events import (
        ApplicationCommandCreateEvent,
        ApplicationCommandDeleteEvent,
        ApplicationCommandUpdateEvent,
        ChannelCreateEvent,
        ChannelDeleteEvent,
        ChannelUpdateEvent,
        GuildAvailableEvent,
        GuildBanRemoveEvent,
        GuildCreateEvent,
        GuildDeleteEvent,
        GuildMemberAvailableEvent,
        GuildUnavailableEvent,
        GuildUpdateEvent,
        InteractionCreateEvent,
        InviteDeleteEvent,
        MessageCreateEvent,
        MessageDeleteEvent,
        MessageReactionRemoveAllEvent,
        PresenceUpdateEvent,
        ReadyEvent,
        StageInstanceCreateEvent,
        StageInstanceDeleteEvent,
        StageInstanceUpdateEvent,
        StickerCreateEvent,
        StickerDeleteEvent,
        StickerUpdateEvent,
        ThreadMembersUpdateEvent,
        UserUpdateEvent,
        VoiceStateUpdateEvent,
    )
    from .guild import Guild
    from .managers import ChannelManager, GuildManager, UserManager
    from .user import ClientUser, User


_L = logging.getLogger(__name__)


def _session_factory(_) -> aiohttp.ClientSession:
    return aiohttp.ClientSession()


class ClientEventHandler(EventHandler):
    """The default event handler for the client.

    Maps gateway dispatch names to action handlers of the client's state.
    """

    __slots__ = ('_client', '_state', '_handlers')

    def __init__(self, client: Client) -> None:
        self._client = client
        self._state = client._state

        actions = self._state.actions
        self._handlers: dict[str, Callable[[typing.Any], typing.Any]] = {
            'READY': actions.ready.handle,
            'CHANNEL_CREATE': actions.channel_create.handle,
            'CHANNEL_UPDATE': actions.channel_update.handle,
            'CHANNEL_DELETE': actions.channel_delete.handle,
            'THREAD_CREATE': actions.channel_create.handle,
            'THREAD_UPDATE': actions.channel_update.handle,
            'THREAD_DELETE': actions.channel_delete.handle,
            'THREAD_MEMBERS_UPDATE': actions.thread_members_update.handle,
            'GUILD_CREATE': actions.guild_create.handle,
            'GUILD_UPDATE': actions.guild_update.handle,
            'GUILD_DELETE': actions.guild_delete.handle,
            'GUILD_BAN_REMOVE': actions.guild_ban_remove.handle,
            'GUILD_STICKERS_UPDATE': actions.guild_stickers_update.handle,
            'INVITE_DELETE': actions.invite_delete.handle,
            'USER_UPDATE': actions.user_update.handle,
            'PRESENCE_UPDATE': actions.presence_update.handle,
            'VOICE_STATE_UPDATE': actions.voice_state_update.handle,
            'VOICE_SERVER_UPDATE': actions.voice_server_update.handle,
            'STAGE_INSTANCE_CREATE': actions.stage_instance_create.handle,
            'STAGE_INSTANCE_UPDATE': actions.stage_instance_update.handle,
            'STAGE_INSTANCE_DELETE': actions.stage_instance_delete.handle,
            'APPLICATION_COMMAND_CREATE': actions.application_command_create.handle,
            'APPLICATION_COMMAND_UPDATE': actions.application_command_update.handle,
            'APPLICATION_COMMAND_DELETE': actions.application_command_delete.handle,
            'INTERACTION_CREATE': actions.interaction_create.handle,
            'MESSAGE_CREATE': actions.message_create.handle,
            'MESSAGE_DELETE': actions.message_delete.handle,
            'MESSAGE_REACTION_REMOVE_ALL': actions.message_reaction_remove_all.handle,
        }

    async def _handle_library_error(self, payload: raw.GatewayDispatch, exc: Exception, name: str, /) -> None:
        try:
            r = self._client.on_library_error(payload, exc)
            if isawaitable(r):
                await r
        except Exception:
            _L.exception('on_library_error (task: %s) raised an exception', name)

    async def _handle(self, payload: raw.GatewayDispatch, /) -> None:
        type = payload['t']
        try:
            handler = self._handlers[type]
        except KeyError:
            _L.debug('Received unknown event: %s. Discarding.', type)
        else:
            _L.debug('Handling %s', type)
            try:
                handler(payload['d'])
            except Exception as exc:
                if type == 'READY':
                    # This is fatal
                    raise

                _L.exception('%s handler raised an exception', type)

                name = f'pyguild-dispatch-{self._client._get_i()}'
                asyncio.create_task(self._handle_library_error(payload, exc, name), name=name)

    def handle_raw(self, payload: raw.GatewayDispatch, /) -> utils.MaybeAwaitable[None]:
        return self._handle(payload)


ClientT = typing.TypeVar('ClientT', bound='Client')
EventT = typing.TypeVar('EventT', bound='BaseEvent')


def _parents_of(type: type[BaseEvent], /) -> tuple[type[BaseEvent], ...]:
    """Tuple[Type[:class:`.BaseEvent`], ...]: Returns parents of BaseEvent, including BaseEvent itself."""
    if type is BaseEvent:
        return (BaseEvent,)
    tmp: typing.Any = type.__mro__[:-1]
    return tmp


class EventSubscription(typing.Generic[EventT]):
    """Represents a event subscription.

    Attributes
    ----------
    client: :class:`Client`
        The client that this subscription is tied to.
    id: :class:`int`
        The ID of the subscription.
    callback: MaybeAwaitableFunc[[EventT], None]
        The callback.
    event: Type[EventT]
        The event the callback is subscribed to.
    """

    __slots__ = (
        'client',
        'id',
        'callback',
        'event',
    )

    def __init__(
        self,
        *,
        client: Client,
        id: int,
        callback: utils.MaybeAwaitableFunc[[EventT], None],
        event: type[EventT],
    ) -> None:
        self.client: Client = client
        self.id: int = id
        self.callback: utils.MaybeAwaitableFunc[[EventT], None] = callback
        self.event: type[EventT] = event

    def __call__(self, arg: EventT, /) -> utils.MaybeAwaitable[None]:
        return self.callback(arg)

    async def _handle(self, arg: EventT, name: str, /) -> None:
        await self.client._run_callback(self.callback, arg, name)

    def remove(self) -> None:
        """Removes the event subscription."""
        self.client._handlers[self.event][0].pop(self.id, None)


class TemporarySubscription(typing.Generic[EventT]):
    """Represents a temporary event subscription, created by :meth:`Client.wait_for`."""

    __slots__ = (
        'client',
        'id',
        'event',
        'future',
        'check',
        'coro',
    )

    def __init__(
        self,
        *,
        client: Client,
        id: int,
        event: type[EventT],
        future: asyncio.Future[EventT],
        check: Callable[[EventT], utils.MaybeAwaitable[bool]],
        coro: Coroutine[typing.Any, typing.Any, EventT],
    ) -> None:
        self.client: Client = client
        self.id: int = id
        self.event: type[EventT] = event
        self.future: asyncio.Future[EventT] = future
        self.check: Callable[[EventT], utils.MaybeAwaitable[bool]] = check
        self.coro: Coroutine[typing.Any, typing.Any, EventT] = coro

    def __await__(self) -> Generator[typing.Any, typing.Any, EventT]:
        return self.coro.__await__()

    async def _handle(self, arg: EventT, name: str, /) -> bool:
        try:
            can = self.check(arg)
            if isawaitable(can):
                can = await can

            if can:
                self.future.set_result(arg)
            return can
        except Exception as exc:
            try:
                self.future.set_exception(exc)
            except asyncio.InvalidStateError:
                pass
            _L.exception('Checker function (task: %s) raised an exception', name)
            return True

    def cancel(self) -> None:
        """Cancels the subscription."""
        self.future.cancel()
        self.client._handlers[self.event][1].pop(self.id, None)


class TemporarySubscriptionListIterator(typing.Generic[EventT]):
    __slots__ = ('subscription',)

    def __init__(self, *, subscription: TemporarySubscriptionList[EventT]) -> None:
        self.subscription: TemporarySubscriptionList[EventT] = subscription

    async def __anext__(self) -> EventT:
        subscription = self.subscription

        if subscription.exception is not None:
            raise subscription.exception

        if subscription.done.is_set() and subscription.queue.empty():
            raise StopAsyncIteration

        while True:
            index = await subscription.queue.get()

            if subscription.exception is not None:
                raise subscription.exception

            if index >= 0:
                break

        return subscription.result[index]


class TemporarySubscriptionList(typing.Generic[EventT]):
    """Represents a temporary subscription on multiple events.

    Awaiting it returns all events once ``expected`` events were received. It can be
    iterated with ``async for`` to receive events as they arrive.
    """

    __slots__ = (
        'client',
        'id',
        'event',
        'done',
        'check',
        'result',
        'exception',
        'expected',
        'queue',
    )

    def __init__(
        self,
        *,
        client: Client,
        expected: int,
        id: int,
        event: type[EventT],
        check: Callable[[EventT], utils.MaybeAwaitable[bool]],
    ) -> None:
        self.client: Client = client
        self.id: int = id
        self.event: type[EventT] = event
        self.done: asyncio.Event = asyncio.Event()
        self.check: Callable[[EventT], utils.MaybeAwaitable[bool]] = check
        self.result: list[EventT] = []
        self.exception: Exception | None = None
        self.expected: int = expected

        self.queue: asyncio.Queue[int] = asyncio.Queue(expected)

    async def wait(self) -> list[EventT]:
        if len(self.result) < self.expected:
            await self.done.wait()

            if self.exception is not None:
                raise self.exception

            if len(self.result) < self.expected:
                raise asyncio.TimeoutError('Timed out waiting.')

        return self.result

    def __await__(self) -> Generator[typing.Any, typing.Any, list[EventT]]:
        return self.wait().__await__()

    def __aiter__(self) -> TemporarySubscriptionListIterator[EventT]:
        return TemporarySubscriptionListIterator(subscription=self)

    async def _handle(self, arg: EventT, name: str, /) -> bool:
        try:
            can = self.check(arg)
            if isawaitable(can):
                can = await can

            if can:
                if len(self.result) >= self.expected:
                    self.done.set()
                else:
                    self.result.append(arg)
                    if len(self.result) >= self.expected:
                        self.done.set()
                    self.queue.put_nowait(len(self.result) - 1)

            return self.done.is_set()
        except Exception as exc:
            _L.exception('Checker function (task: %s) raised an exception', name)
            self.exception = exc
            self.done.set()
            self.queue.put_nowait(len(self.result) - 1)
            return True

    def cancel(self) -> None:
        """Cancels the subscription."""

        self.done.set()
        self.client._handlers[self.event][1].pop(self.id, None)


_DEFAULT_HANDLERS = ({}, {})


class Client:
    """A pyguild client.

    The client owns the :class:`State` with every cache, and is the event bus
    action handlers publish events to.

    Parameters
    ----------
    token: :class:`str`
        The bot token.
    http_base: Optional[:class:`str`]
        The base URL of REST API.
    max_retries: Optional[:class:`int`]
        How many times to retry requests that received 429 or 502 HTTP status code.
    rest_ws_bridge_timeout: :class:`float`
        How long, in seconds, removed guilds are remembered to answer duplicate delete events.
    partials: Optional[Iterable[:class:`Partials`]]
        The structures allowed to be constructed from an ID alone.
    state: Optional[Union[Callable[[:class:`Client`], :class:`State`], :class:`State`]]
        The state to use instead of constructing one.
    http: Optional[Callable[[:class:`Client`, :class:`State`], :class:`HTTPClient`]]
        The factory of HTTP client to use.
    """

    __slots__ = (
        '_handlers',
        '_i',
        '_state',
        '_token',
        '_types',
        'closed',
        'extra',
        'handler',
    )

    def __init__(
        self,
        *,
        token: str = '',
        http_base: str | None = None,
        max_retries: int | None = None,
        rest_ws_bridge_timeout: float = 5.0,
        partials: Iterable[Partials] | None = None,
        state: Callable[[Client], State] | State | None = None,
        http: Callable[[Client, State], HTTPClient] | None = None,
    ) -> None:
        self.closed: bool = True
        self._handlers: dict[
            type[BaseEvent],
            tuple[
                dict[int, EventSubscription[BaseEvent]],
                dict[int, TemporarySubscription[BaseEvent] | TemporarySubscriptionList[BaseEvent]],
            ],
        ] = {}
        # {Type[BaseEvent]: Tuple[Type[BaseEvent], ...]}
        self._types: dict[type[BaseEvent], tuple[type[BaseEvent], ...]] = {}
        self._i = 0

        self.extra = {}
        if state:
            if callable(state):
                self._state: State = state(self)
            else:
                self._state = state
        else:
            state = State(partials=partials, rest_ws_bridge_timeout=rest_ws_bridge_timeout)
            state.setup(
                http=(
                    http(self, state)
                    if http
                    else HTTPClient(
                        token,
                        base=http_base,
                        max_retries=max_retries,
                        session=_session_factory,
                        state=state,
                    )
                ),
            )
            self._state = state
        self._state.setup(dispatcher=self)
        self._token: str = token
        self.handler: ClientEventHandler = ClientEventHandler(self)

    def _get_i(self) -> int:
        self._i += 1
        return self._i

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException],
        exc_value: BaseException | None,
        traceback: TracebackType | None,
        /,
    ) -> None:
        await self.close()

    async def on_user_error(self, event: BaseEvent) -> None:
        """Handles user errors that came from handlers.
        You can get current exception being raised via :func:`sys.exc_info`.

        By default, this logs exception.
        """
        _L.exception(
            'One of %s handlers raised an exception',
            event.__class__.__name__,
        )

    async def on_library_error(self, payload: raw.GatewayDispatch, exc: Exception, /) -> None:
        """Handles library errors. By default, this logs exception.

        .. note::
            This won't be called if handling ``READY`` will raise a exception as it is fatal.
        """

        type = payload['t']

        _L.exception('%s handler raised an exception', type, exc_info=exc)

    async def _run_callback(
        self, callback: Callable[[EventT], utils.MaybeAwaitable[None]], arg: EventT, name: str, /
    ) -> None:
        try:
            r = callback(arg)
            if isawaitable(r):
                await r
        except Exception:
            try:
                r = self.on_user_error(arg)
                if isawaitable(r):
                    await r
            except Exception:
                _L.exception('on_user_error (task: %s) raised an exception', name)

    async def _dispatch(self, types: tuple[type[BaseEvent], ...], event: BaseEvent, name: str, /) -> None:
        for type in types:
            handlers, temporary_handlers = self._handlers.get(type, _DEFAULT_HANDLERS)
            if _L.isEnabledFor(logging.DEBUG):
                _L.debug(
                    'Dispatching %s (%i handlers, originating from %s)',
                    type.__name__,
                    len(handlers),
                    event.__class__.__name__,
                )

            remove = []
            for handler in list(temporary_handlers.values()):
                r = handler._handle(event, name)
                if isawaitable(r):
                    r = await r

                if r:
                    remove.append(handler.id)

            for id in remove:
                temporary_handlers.pop(id, None)

            for handler in list(handlers.values()):
                r = handler._handle(event, name)
                if isawaitable(r):
                    await r

            event_name: str | None = getattr(type, 'event_name', None)
            if event_name:
                handler = getattr(self, 'on_' + event_name, None)
                if handler:
                    await self._run_callback(handler, event, name)

        handler = getattr(self, 'on_event', None)
        if handler:
            await self._run_callback(handler, event, name)

    def dispatch(self, event: BaseEvent, /) -> asyncio.Task[None]:
        """Dispatches a event.

        Temporary subscriptions made with :meth:`wait_for` are run first, then subscriptions,
        then ``on_<event_name>`` method of the client, for the event class and each of its parents.
        ``on_event`` method is called last.

        Examples
        --------

        Dispatch a event when someone sends a message with no content: ::

            from attrs import define, field
            import pyguild

            # ...


            @define(slots=True)
            class EmptyMessageEvent(pyguild.BaseEvent):
                event_name = 'empty_message'

                message: pyguild.Message = field(repr=True, kw_only=True)


            @client.on(pyguild.MessageCreateEvent)
            async def on_message_create(event):
                message = event.message
                if not message.content:
                    # Block until event gets fully handled.
                    await client.dispatch(EmptyMessageEvent(message=message))

        Parameters
        ----------
        event: :class:`.BaseEvent`
            The event to dispatch.

        Returns
        -------
        :class:`asyncio.Task`
            The asyncio task.
        """

        et = builtins.type(event)
        try:
            types = self._types[et]
        except KeyError:
            types = self._types[et] = _parents_of(et)

        name = f'pyguild-dispatch-{self._get_i()}'
        return asyncio.create_task(self._dispatch(types, event, name), name=name)

    def has_listeners(self, event: type[BaseEvent], /) -> bool:
        """Checks whether dispatching the event would call anything.

        Returns ``True`` if there is any subscription or temporary subscription to the event,
        its parents or subclasses, or if the client overrides ``on_<event_name>`` or ``on_event``.
        """
        for k, (handlers, temporary_handlers) in self._handlers.items():
            if (handlers or temporary_handlers) and (issubclass(k, event) or issubclass(event, k)):
                return True

        if getattr(self, 'on_event', None):
            return True

        for type in _parents_of(event):
            event_name: str | None = getattr(type, 'event_name', None)
            if event_name and getattr(self, 'on_' + event_name, None):
                return True
        return False

    def subscribe(
        self,
        event: type[EventT],
        /,
        callback: utils.MaybeAwaitableFunc[[EventT], None],
    ) -> EventSubscription[EventT]:
        """Subscribes to event.

        Parameters
        ----------
        event: Type[EventT]
            The type of the event.
        callback: MaybeAwaitableFunc[[EventT], None]
            The callback for the event.
        """
        sub: EventSubscription[EventT] = EventSubscription(
            client=self,
            id=self._get_i(),
            callback=callback,
            event=event,
        )

        # The actual generic of value type is same as key
        try:
            self._handlers[event][0][sub.id] = sub  # type: ignore
        except KeyError:
            self._handlers[event] = ({sub.id: sub}, {})  # type: ignore
        return sub

    def unsubscribe(
        self,
        event: type[EventT],
        callback: utils.MaybeAwaitableFunc[[EventT], None],
        /,
    ) -> list[EventSubscription[EventT]]:
        """Removes subscriptions of the callback to the event.

        Returns
        -------
        List[:class:`EventSubscription`]
            The removed subscriptions.
        """
        try:
            subscriptions = self._handlers[event][0]
        except KeyError:
            return []

        removed = [k for k, subscription in subscriptions.items() if subscription.callback == callback]
        return [subscriptions.pop(k) for k in removed]  # type: ignore

    def listen(
        self,
        event: type[EventT] | None = None,
        /,
    ) -> Callable[
        [utils.MaybeAwaitableFunc[[EventT], None]],
        EventSubscription[EventT],
    ]:
        """Register an event listener.

        There is alias called :meth:`on`.

        Examples
        --------

        Ping Pong: ::

            @client.listen()
            async def on_interaction_create(event: pyguild.InteractionCreateEvent):
                interaction = event.interaction
                if interaction.is_command() and interaction.command_name == 'ping':
                    await interaction.reply(content='pong!')


            # It returns :class:`EventSubscription`, so you can do ``on_interaction_create.remove()``

        Parameters
        ----------
        event: Optional[Type[EventT]]
            The event to listen to. If not given, the annotation of callback's first parameter is used.
        """

        def decorator(callback: utils.MaybeAwaitableFunc[[EventT], None], /) -> EventSubscription[EventT]:
            tmp = event

            if tmp is None:
                fs = signature(callback)
                typ = list(fs.parameters.values())[0]

                if typ.annotation is typ.empty:
                    raise TypeError('Cannot use listen() without event annotation type')

                hints = typing.get_type_hints(utils.unwrap_function(callback))
                tmp = hints[typ.name]

            return self.subscribe(tmp, callback)  # type: ignore

        return decorator

    on = listen

    @typing.overload
    def wait_for(  # pyright: ignore[reportOverlappingOverload]
        self,
        event: type[EventT],
        /,
        *,
        check: Callable[[EventT], bool] | None = None,
        count: typing.Literal[1] = 1,
        timeout: float | None = None,
    ) -> TemporarySubscription[EventT]: ...

    @typing.overload
    def wait_for(
        self,
        event: type[EventT],
        /,
        *,
        check: Callable[[EventT], bool] | None = None,
        count: int = 1,
        timeout: float | None = None,
    ) -> TemporarySubscriptionList[EventT]: ...

    def wait_for(
        self,
        event: type[EventT],
        /,
        *,
        check: Callable[[EventT], bool] | None = None,
        count: int = 1,
        timeout: float | None = None,
    ) -> TemporarySubscription[EventT] | TemporarySubscriptionList[EventT]:
        """|coro|

        Waits for an event to be dispatched.

        The ``timeout`` parameter is passed onto :func:`asyncio.wait_for`. By default,
        it does not timeout.

        This function returns the **first event that meets the requirements**.

        Examples
        --------

        Waiting for a button press on a message: ::

            def check(event):
                interaction = event.interaction
                return interaction.is_button() and interaction.message_id == message.id

            try:
                event = await client.wait_for(pyguild.InteractionCreateEvent, check=check, timeout=60.0)
            except asyncio.TimeoutError:
                ...

        Parameters
        ------------
        event: Type[EventT]
            The event to wait for.
        check: Optional[Callable[[EventT], :class:`bool`]]
            A predicate to check what to wait for.
        count: :class:`int`
            How many events to wait for. If greater than 1, a :class:`TemporarySubscriptionList` is returned.
        timeout: Optional[:class:`float`]
            The number of seconds to wait before timing out and raising
            :exc:`asyncio.TimeoutError`.

        Raises
        -------
        TypeError
            If ``count`` parameter was negative or zero.
        asyncio.TimeoutError
            If a timeout is provided and it was reached.

        Returns
        --------
        Union[:class:`TemporarySubscription`, :class:`TemporarySubscriptionList`]
            The subscription. This can be ``await``'ed.
        """

        if count <= 0:
            raise TypeError('Cannot wait for zero events')

        if check is None:
            check = lambda _, /: True

        if count > 1:
            subs = TemporarySubscriptionList(
                client=self,
                expected=count,
                id=self._get_i(),
                event=event,
                check=check,
            )

            try:
                self._handlers[event][1][subs.id] = subs  # type: ignore
            except KeyError:
                self._handlers[event] = ({}, {subs.id: subs})  # type: ignore

            if timeout is not None:
                asyncio.get_running_loop().call_later(timeout, subs.cancel)
            return subs

        future = asyncio.get_running_loop().create_future()

        coro = asyncio.wait_for(future, timeout=timeout)
        sub = TemporarySubscription(
            client=self,
            id=self._get_i(),
            event=event,
            future=future,
            check=check,
            coro=coro,
        )

        try:
            self._handlers[event][1][sub.id] = sub  # type: ignore
        except KeyError:
            self._handlers[event] = ({}, {sub.id: sub})  # type: ignore
        return sub

    @property
    def me(self) -> ClientUser | None:
        """Optional[:class:`ClientUser`]: The connected user."""
        return self._state.me

    @property
    def user(self) -> ClientUser | None:
        """Optional[:class:`ClientUser`]: The connected user."""
        return self._state.me

    @property
    def application(self) -> ClientApplication | None:
        return self._state.application

    @property
    def http(self) -> HTTPClient:
        """:class:`HTTPClient`: The HTTP client."""
        return self._state.http

    @property
    def state(self) -> State:
        """:class:`State`: The state."""
        return self._state

    @property
    def users(self) -> UserManager:
        return self._state.users

    @property
    def channels(self) -> ChannelManager:
        return self._state.channels

    @property
    def guilds(self) -> GuildManager:
        return self._state.guilds

    def get_channel(self, channel_id: str, /) -> Channel | None:
        """Retrieves a channel from cache."""
        return self._state.channels.get(channel_id)

    def get_guild(self, guild_id: str, /) -> Guild | None:
        """Retrieves a guild from cache."""
        return self._state.guilds.get(guild_id)

    def get_user(self, user_id: str, /) -> User | None:
        """Retrieves a user from cache."""
        return self._state.users.get(user_id)

    async def close(self, *, http: bool = True) -> None:
        """|coro|

        Closes the HTTP session.
        """
        self.closed = True
        if http and self._state._http is not None:
            await self._state.http.cleanup()

    if typing.TYPE_CHECKING:

        def on_event(self, arg: BaseEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_ready(self, arg: ReadyEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_channel_create(self, arg: ChannelCreateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_channel_update(self, arg: ChannelUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_channel_delete(self, arg: ChannelDeleteEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_guild_create(self, arg: GuildCreateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_guild_available(self, arg: GuildAvailableEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_guild_unavailable(self, arg: GuildUnavailableEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_guild_update(self, arg: GuildUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_guild_delete(self, arg: GuildDeleteEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_guild_ban_remove(self, arg: GuildBanRemoveEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_invite_delete(self, arg: InviteDeleteEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_user_update(self, arg: UserUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_guild_member_available(self, arg: GuildMemberAvailableEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_presence_update(self, arg: PresenceUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_voice_state_update(self, arg: VoiceStateUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_thread_members_update(self, arg: ThreadMembersUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_stage_instance_create(self, arg: StageInstanceCreateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_stage_instance_update(self, arg: StageInstanceUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_stage_instance_delete(self, arg: StageInstanceDeleteEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_sticker_create(self, arg: StickerCreateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_sticker_update(self, arg: StickerUpdateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_sticker_delete(self, arg: StickerDeleteEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_application_command_create(
            self, arg: ApplicationCommandCreateEvent, /
        ) -> utils.MaybeAwaitable[None]: ...
        def on_application_command_update(
            self, arg: ApplicationCommandUpdateEvent, /
        ) -> utils.MaybeAwaitable[None]: ...
        def on_application_command_delete(
            self, arg: ApplicationCommandDeleteEvent, /
        ) -> utils.MaybeAwaitable[None]: ...
        def on_interaction_create(self, arg: InteractionCreateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_message_create(self, arg: MessageCreateEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_message_delete(self, arg: MessageDeleteEvent, /) -> utils.MaybeAwaitable[None]: ...
        def on_message_reaction_remove_all(
            self, arg: MessageReactionRemoveAllEvent, /
        ) -> utils.MaybeAwaitable[None]: ...


__all__ = (
    'ClientEventHandler',
    'EventSubscription',
    'TemporarySubscription',
    'TemporarySubscriptionListIterator',
    'TemporarySubscriptionList',
    'Client',
)
