from __future__ import annotations

from attrs import define, field
import asyncio
import pytest
import pyguild


@define(slots=True)
class AddEvent(pyguild.BaseEvent):
    a: int = field(repr=True, kw_only=True)
    b: int = field(repr=True, kw_only=True)


@define(slots=True)
class SubtractEvent(pyguild.BaseEvent):
    a: int = field(repr=True, kw_only=True)
    b: int = field(repr=True, kw_only=True)


@pytest.mark.asyncio
async def test_events():
    queue: asyncio.Queue[int] = asyncio.Queue()

    client = pyguild.Client()

    async def on_add(event: AddEvent, /) -> None:
        await queue.put(event.a + event.b)

    async def on_subtract(event: SubtractEvent, /) -> None:
        await queue.put(event.a - event.b)

    client.subscribe(AddEvent, on_add)
    client.subscribe(SubtractEvent, on_subtract)

    await client.dispatch(AddEvent(a=1, b=2))
    await client.dispatch(SubtractEvent(a=13, b=7))

    response = await asyncio.wait_for(queue.get(), timeout=1)
    assert response == 3

    response = await asyncio.wait_for(queue.get(), timeout=1)
    assert response == 6

    subscription = client.wait_for(AddEvent, check=lambda event, /: event.a == 0xDEAD, count=1, timeout=3)
    await client.dispatch(AddEvent(a=0xDEAD, b=11))

    number = await subscription
    assert number.a + number.b == 57016

    subscription = client.wait_for(AddEvent, check=lambda event, /: event.a == 0xBEEF, count=3, timeout=3)

    await client.dispatch(AddEvent(a=0xBEEF, b=11))
    await client.dispatch(AddEvent(a=0xBEEF, b=12))
    await client.dispatch(AddEvent(a=0xBEEF, b=13))

    numbers = [event.b async for event in subscription]

    assert sum(numbers) == 36


@pytest.mark.asyncio
async def test_has_listeners():
    client = pyguild.Client()
    assert not client.has_listeners(pyguild.PresenceUpdateEvent)

    subscription = client.subscribe(pyguild.PresenceUpdateEvent, lambda event, /: None)
    assert client.has_listeners(pyguild.PresenceUpdateEvent)

    subscription.remove()
    assert not client.has_listeners(pyguild.PresenceUpdateEvent)

    def callback(event, /) -> None:
        pass

    client.subscribe(pyguild.PresenceUpdateEvent, callback)
    client.subscribe(pyguild.PresenceUpdateEvent, callback)
    assert len(client.unsubscribe(pyguild.PresenceUpdateEvent, callback)) == 2
    assert not client.has_listeners(pyguild.PresenceUpdateEvent)
    assert client.unsubscribe(pyguild.ReadyEvent, callback) == []


@pytest.mark.asyncio
async def test_gateway_dispatch_populates_cache():
    client = pyguild.Client()
    ready: asyncio.Queue[pyguild.ReadyEvent] = asyncio.Queue()
    client.subscribe(pyguild.ReadyEvent, ready.put)

    await client.handler.handle_raw(
        {
            'op': 0,
            's': 1,
            't': 'READY',
            'd': {
                'user': {'id': '1', 'username': 'me', 'discriminator': '0001', 'bot': True},
                'application': {'id': '50'},
                'guilds': [{'id': '100', 'unavailable': True}],
            },
        }
    )

    event = await asyncio.wait_for(ready.get(), timeout=1)
    assert event.me is client.me
    assert client.application is not None and client.application.id == '50'

    guild = client.get_guild('100')
    assert guild is not None
    assert guild.available is False

    available: asyncio.Queue[pyguild.GuildAvailableEvent] = asyncio.Queue()
    client.subscribe(pyguild.GuildAvailableEvent, available.put)

    await client.handler.handle_raw(
        {'op': 0, 's': 2, 't': 'GUILD_CREATE', 'd': {'id': '100', 'name': 'Testing'}},
    )

    event = await asyncio.wait_for(available.get(), timeout=1)
    assert event.guild is guild
    assert guild.available is True
    assert guild.name == 'Testing'

    # Unknown events are discarded
    await client.handler.handle_raw({'op': 0, 's': 3, 't': 'SOMETHING_NEW', 'd': {}})
