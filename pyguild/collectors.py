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
from inspect import isawaitable
import logging
import typing

from .collection import Collection
from .enums import ComponentType, InteractionType
from .errors import CollectorEnded
from .events import ChannelDeleteEvent, GuildDeleteEvent, InteractionCreateEvent, MessageDeleteEvent
from .utils import maybe_coroutine

if typing.TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from . import utils
    from .client import Client, EventSubscription
    from .events import BaseEvent
    from .interaction import Interaction
    from .user import User

_L = logging.getLogger(__name__)

T = typing.TypeVar('T')

_END: typing.Any = object()


class Collector(typing.Generic[T]):
    """Collects items from events, until a limit is reached or it is stopped.

    Subclasses subscribe to events and pass their items to :meth:`handle_collect`
    and :meth:`handle_dispose`, and override :meth:`collect`, :meth:`dispose` and
    :attr:`end_reason`.

    Parameters
    ----------
    client: :class:`Client`
        The client to subscribe to.
    filter: Optional[Callable[[T, :class:`Collection`], MaybeAwaitable[:class:`bool`]]]
        The filter applied to items. It receives the item and items collected so far.
    time: Optional[:class:`float`]
        How long, in seconds, to run the collector for.
    idle: Optional[:class:`float`]
        How long, in seconds, to wait for the next item before stopping.
    max: Optional[:class:`int`]
        How many items to collect at most.
    dispose: :class:`bool`
        Whether to remove items from :attr:`collected` when they are deleted.

    Attributes
    ----------
    collected: :class:`Collection`
        The collected items, keyed by ID.
    ended: :class:`bool`
        Whether the collector has stopped.
    reason: Optional[:class:`str`]
        Why the collector stopped.
    """

    __slots__ = (
        'client',
        'filter',
        'time',
        'idle',
        'max',
        'should_dispose',
        'collected',
        'ended',
        'reason',
        '_timeout',
        '_idle_timeout',
        '_listeners',
        '_subscriptions',
        '_waiters',
        '_end_waiters',
        '_queues',
        '_tasks',
    )

    def __init__(
        self,
        client: Client,
        /,
        *,
        filter: Callable[[T, Collection[str, T]], utils.MaybeAwaitable[bool]] | None = None,
        time: float | None = None,
        idle: float | None = None,
        max: int | None = None,
        dispose: bool = False,
    ) -> None:
        if filter is not None and not callable(filter):
            raise TypeError('filter must be callable')

        self.client: Client = client
        self.filter: Callable[[T, Collection[str, T]], utils.MaybeAwaitable[bool]] | None = filter
        self.time: float | None = time
        self.idle: float | None = idle
        self.max: int | None = max
        self.should_dispose: bool = dispose
        self.collected: Collection[str, T] = Collection()
        self.ended: bool = False
        self.reason: str | None = None

        self._listeners: dict[str, list[Callable[..., typing.Any]]] = {}
        self._subscriptions: list[EventSubscription[typing.Any]] = []
        self._waiters: list[asyncio.Future[T]] = []
        self._end_waiters: list[asyncio.Future[tuple[Collection[str, T], str]]] = []
        self._queues: list[asyncio.Queue[T]] = []
        self._tasks: set[asyncio.Future[typing.Any]] = set()

        self._timeout: asyncio.TimerHandle | None = None
        self._idle_timeout: asyncio.TimerHandle | None = None
        if time:
            self._timeout = asyncio.get_running_loop().call_later(time, self.stop, 'time')
        if idle:
            self._idle_timeout = asyncio.get_running_loop().call_later(idle, self.stop, 'idle')

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} collected={len(self.collected)} ended={self.ended}>'

    def collect(self, item: T, /) -> utils.MaybeAwaitable[str | None]:
        """Returns the key to store the item under, or ``None`` to skip it."""
        return None

    def dispose(self, item: T, /) -> utils.MaybeAwaitable[str | None]:
        """Returns the key of the item to remove, or ``None`` to keep collected items."""
        return None

    @property
    def end_reason(self) -> str | None:
        """Optional[:class:`str`]: The reason to stop the collector for, if a limit was reached."""
        return None

    def _subscribe(self, event: type[BaseEvent], callback: Callable[[typing.Any], typing.Any], /) -> None:
        self._subscriptions.append(self.client.subscribe(event, callback))

    def on(self, name: typing.Literal['collect', 'dispose', 'end'], callback: Callable[..., typing.Any], /) -> None:
        """Registers a callback.

        ``'collect'`` and ``'dispose'`` callbacks receive the item, ``'end'`` callbacks receive
        the collected items and the reason. Callbacks may be coroutine functions.
        """
        self._listeners.setdefault(name, []).append(callback)

    def _emit(self, name: str, /, *args: typing.Any) -> None:
        for callback in list(self._listeners.get(name, ())):
            r = callback(*args)
            if isawaitable(r):
                task = asyncio.ensure_future(r)
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)

    async def _passes_filter(self, item: T, /) -> bool:
        if self.filter is None:
            return True
        return bool(await maybe_coroutine(self.filter, item, self.collected))

    async def handle_collect(self, item: T, /) -> None:
        """|coro|

        Collects the item if it is wanted and passes the filter, then checks limits.
        """
        if self.ended:
            return

        key = await maybe_coroutine(self.collect, item)
        if key is not None and await self._passes_filter(item):
            self.collected[key] = item
            self._emit('collect', item)

            for waiter in self._waiters:
                if not waiter.done():
                    waiter.set_result(item)
            self._waiters.clear()
            for queue in self._queues:
                queue.put_nowait(item)

            if self._idle_timeout is not None:
                self._idle_timeout.cancel()
                self._idle_timeout = asyncio.get_running_loop().call_later(self.idle, self.stop, 'idle')  # type: ignore

        self.check_end()

    async def handle_dispose(self, item: T, /) -> None:
        """|coro|

        Removes the item from collected ones, if the collector was created with ``dispose=True``.
        """
        if not self.should_dispose or self.ended:
            return

        key = await maybe_coroutine(self.dispose, item)
        if key is None or key not in self.collected or not await self._passes_filter(item):
            return

        self.collected.delete(key)
        self._emit('dispose', item)
        self.check_end()

    def stop(self, reason: str = 'user') -> None:
        """Stops the collector. Does nothing if it has already stopped.

        Parameters
        ----------
        reason: :class:`str`
            Why the collector is stopped. Passed to ``'end'`` callbacks.
        """
        if self.ended:
            return

        if self._timeout is not None:
            self._timeout.cancel()
            self._timeout = None
        if self._idle_timeout is not None:
            self._idle_timeout.cancel()
            self._idle_timeout = None

        self.ended = True
        self.reason = reason
        _L.debug('%s ended: %s', self.__class__.__name__, reason)

        for subscription in self._subscriptions:
            subscription.remove()
        self._subscriptions.clear()

        self._emit('end', self.collected, reason)

        for waiter in self._waiters:
            if not waiter.done():
                waiter.set_exception(CollectorEnded(self.collected, reason))
        self._waiters.clear()

        for end_waiter in self._end_waiters:
            if not end_waiter.done():
                end_waiter.set_result((self.collected, reason))
        self._end_waiters.clear()

        for queue in self._queues:
            queue.put_nowait(_END)

    def reset_timer(self, *, time: float | None = None, idle: float | None = None) -> None:
        """Restarts running timers, optionally with new durations."""
        loop = asyncio.get_running_loop()
        if self._timeout is not None:
            self._timeout.cancel()
            self._timeout = loop.call_later(time or self.time, self.stop, 'time')  # type: ignore
        if self._idle_timeout is not None:
            self._idle_timeout.cancel()
            self._idle_timeout = loop.call_later(idle or self.idle, self.stop, 'idle')  # type: ignore

    def check_end(self) -> bool:
        """Stops the collector if a limit was reached.

        Returns
        -------
        :class:`bool`
            Whether the collector was stopped.
        """
        reason = self.end_reason
        if reason:
            self.stop(reason)
        return bool(reason)

    async def next(self) -> T:
        """|coro|

        Waits for the next collected item.

        Raises
        ------
        :class:`CollectorEnded`
            The collector ended before an item was collected.
        """
        if self.ended:
            raise CollectorEnded(self.collected, self.reason or 'user')

        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._waiters.append(future)
        return await future

    async def wait(self) -> tuple[Collection[str, T], str]:
        """|coro|

        Waits for the collector to end.

        Returns
        -------
        Tuple[:class:`Collection`, :class:`str`]
            The collected items and why the collector ended.
        """
        if self.ended:
            return self.collected, self.reason or 'user'

        future: asyncio.Future[tuple[Collection[str, T], str]] = asyncio.get_running_loop().create_future()
        self._end_waiters.append(future)
        return await future

    async def _iterate(self) -> AsyncGenerator[T, None]:
        if self.ended:
            return

        queue: asyncio.Queue[T] = asyncio.Queue()
        self._queues.append(queue)
        try:
            while True:
                item = await queue.get()
                if item is _END:
                    return
                yield item
        finally:
            self._queues.remove(queue)

    def __aiter__(self) -> AsyncGenerator[T, None]:
        return self._iterate()


class InteractionCollector(Collector['Interaction']):
    """Collects interactions.

    The collector stops when the message, channel or guild it is scoped to is deleted,
    with ``'messageDelete'``, ``'channelDelete'`` or ``'guildDelete'`` reason.

    Parameters
    ----------
    message: Optional[:class:`Message`]
        Collect interactions on components of this message only.
    channel: Optional[:class:`ChannelResolvable`]
        Collect interactions in this channel only.
    guild: Optional[:class:`GuildResolvable`]
        Collect interactions in this guild only.
    interaction_type: Optional[Union[:class:`InteractionType`, :class:`int`]]
        Collect interactions of this type only.
    component_type: Optional[Union[:class:`ComponentType`, :class:`int`]]
        Collect interactions with components of this type only.
    max: Optional[:class:`int`]
        How many interactions to collect at most, counted by :attr:`total`.
        Stops with ``'limit'`` reason.
    max_components: Optional[:class:`int`]
        How many interactions to collect at most. Stops with ``'componentLimit'`` reason.
    max_users: Optional[:class:`int`]
        How many distinct users to collect from at most. Stops with ``'userLimit'`` reason.

    Attributes
    ----------
    users: :class:`Collection`
        The users interactions were collected from, keyed by ID.
    total: :class:`int`
        How many interactions were collected.
    """

    __slots__ = (
        'message_id',
        'channel_id',
        'guild_id',
        'interaction_type',
        'component_type',
        'max_components',
        'max_users',
        'users',
        'total',
    )

    def __init__(
        self,
        client: Client,
        /,
        *,
        message: typing.Any = None,
        channel: typing.Any = None,
        guild: typing.Any = None,
        interaction_type: InteractionType | int | None = None,
        component_type: ComponentType | int | None = None,
        max: int | None = None,
        max_components: int | None = None,
        max_users: int | None = None,
        filter: Callable[[Interaction, Collection[str, Interaction]], utils.MaybeAwaitable[bool]] | None = None,
        time: float | None = None,
        idle: float | None = None,
        dispose: bool = False,
    ) -> None:
        super().__init__(client, filter=filter, time=time, idle=idle, max=max, dispose=dispose)

        state = client.state
        self.message_id: str | None = None if message is None else message.id
        self.channel_id: str | None = (
            message.channel_id if message is not None else state.channels.resolve_id(channel)
        )
        if message is not None:
            self.guild_id: str | None = message.guild_id
        elif guild is not None:
            self.guild_id = state.guilds.resolve_id(guild)
        else:
            self.guild_id = getattr(state.channels.resolve(channel), 'guild_id', None)

        if isinstance(interaction_type, int):
            interaction_type = InteractionType(interaction_type)
        self.interaction_type: InteractionType | None = interaction_type

        if isinstance(component_type, int):
            component_type = ComponentType(component_type)
        self.component_type: ComponentType | None = component_type

        self.max_components: int | None = max_components
        self.max_users: int | None = max_users
        self.users: Collection[str, User] = Collection()
        self.total: int = 0

        if self.message_id is not None:
            self._subscribe(MessageDeleteEvent, self._handle_message_deletion)
        if self.channel_id is not None:
            self._subscribe(ChannelDeleteEvent, self._handle_channel_deletion)
        if self.guild_id is not None:
            self._subscribe(GuildDeleteEvent, self._handle_guild_deletion)
        self._subscribe(InteractionCreateEvent, self._handle_interaction_create)

        self.on('collect', self._track)

    def _track(self, interaction: Interaction, /) -> None:
        self.total += 1
        if interaction.user is not None:
            self.users[interaction.user.id] = interaction.user

    def _matches(self, interaction: Interaction, /) -> bool:
        if self.interaction_type is not None and interaction.type != self.interaction_type:
            return False
        if self.component_type is not None and getattr(interaction, 'component_type', None) != self.component_type:
            return False
        if self.message_id is not None and getattr(interaction, 'message_id', None) != self.message_id:
            return False
        if self.channel_id is not None and interaction.channel_id != self.channel_id:
            return False
        if self.guild_id is not None and interaction.guild_id != self.guild_id:
            return False
        return True

    def collect(self, item: Interaction, /) -> str | None:
        return item.id if self._matches(item) else None

    def dispose(self, item: Interaction, /) -> str | None:
        return item.id if self._matches(item) else None

    def empty(self) -> None:
        """Removes all collected interactions and resets counters."""
        self.total = 0
        self.collected.clear()
        self.users.clear()
        self.check_end()

    @property
    def end_reason(self) -> str | None:
        if self.max and self.total >= self.max:
            return 'limit'
        if self.max_components and len(self.collected) >= self.max_components:
            return 'componentLimit'
        if self.max_users and len(self.users) >= self.max_users:
            return 'userLimit'
        return None

    async def _handle_interaction_create(self, event: InteractionCreateEvent, /) -> None:
        await self.handle_collect(event.interaction)

    def _handle_message_deletion(self, event: MessageDeleteEvent, /) -> None:
        if event.message.id == self.message_id:
            self.stop('messageDelete')

    def _handle_channel_deletion(self, event: ChannelDeleteEvent, /) -> None:
        if event.channel.id == self.channel_id:
            self.stop('channelDelete')

    def _handle_guild_deletion(self, event: GuildDeleteEvent, /) -> None:
        if event.guild.id == self.guild_id:
            self.stop('guildDelete')


__all__ = ('Collector', 'InteractionCollector')
