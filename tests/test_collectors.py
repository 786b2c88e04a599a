from __future__ import annotations

import asyncio
import pytest
import pyguild


def component_interaction(id: str, user_id: str, *, message_id: str = '500', component_type: int = 2) -> dict:
    return {
        'id': id,
        'type': 3,
        'token': 'token',
        'application_id': '50',
        'channel_id': '200',
        'guild_id': '100',
        'user': {'id': user_id, 'username': f'user{user_id}', 'discriminator': '0001'},
        'message': {'id': message_id, 'channel_id': '200'},
        'data': {'custom_id': 'button', 'component_type': component_type},
    }


def make_client() -> pyguild.Client:
    client = pyguild.Client()
    state = client.state
    state.actions.ready.handle(
        {'user': {'id': '1', 'username': 'me', 'discriminator': '0001'}, 'application': {'id': '50'}, 'guilds': []}
    )
    state.actions.guild_create.handle(
        {'id': '100', 'name': 'Testing', 'channels': [{'id': '200', 'type': 0, 'name': 'general'}]}
    )
    return client


async def settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_interaction_collector_limits():
    client = make_client()
    message = client.state.actions.message_create.handle(
        {'id': '500', 'channel_id': '200', 'author': {'id': '1'}, 'content': 'Click!'}
    )['message']

    collector = pyguild.InteractionCollector(
        client,
        message=message,
        component_type=pyguild.ComponentType.button,
        max_users=2,
    )
    assert collector.channel_id == '200'
    assert collector.guild_id == '100'

    collected = []
    collector.on('collect', collected.append)

    handle = client.state.actions.interaction_create.handle
    handle(component_interaction('4001', '7'))
    # Another message
    handle(component_interaction('4002', '7', message_id='501'))
    # Another component type
    handle(component_interaction('4003', '8', component_type=3))
    handle(component_interaction('4004', '7'))
    await settle()

    assert [interaction.id for interaction in collected] == ['4001', '4004']
    assert collector.total == 2
    assert list(collector.users.keys()) == ['7']
    assert not collector.ended

    handle(component_interaction('4005', '8'))
    collected_items, reason = await asyncio.wait_for(collector.wait(), timeout=1)

    assert reason == 'userLimit'
    assert list(collected_items.keys()) == ['4001', '4004', '4005']
    assert collector.ended

    # Subscriptions are removed once the collector ends
    handle(component_interaction('4006', '9'))
    await settle()
    assert len(collector.collected) == 3


@pytest.mark.asyncio
async def test_collector_stops_when_message_is_deleted():
    client = make_client()
    message = client.state.actions.message_create.handle(
        {'id': '500', 'channel_id': '200', 'author': {'id': '1'}, 'content': 'Click!'}
    )['message']

    collector = pyguild.InteractionCollector(client, message=message)
    ends = []
    collector.on('end', lambda collected, reason, /: ends.append(reason))

    client.state.actions.message_delete.handle({'id': '500', 'channel_id': '200', 'guild_id': '100'})
    _, reason = await asyncio.wait_for(collector.wait(), timeout=1)

    assert reason == 'messageDelete'
    assert ends == ['messageDelete']

    with pytest.raises(pyguild.CollectorEnded):
        await collector.next()


@pytest.mark.asyncio
async def test_collector_filter_and_iteration():
    client = make_client()

    async def only_even(interaction: pyguild.Interaction, collected: pyguild.Collection, /) -> bool:
        return int(interaction.user.id) % 2 == 0

    collector = pyguild.InteractionCollector(client, channel='200', filter=only_even, max_components=2)

    async def produce() -> None:
        handle = client.state.actions.interaction_create.handle
        for i, user_id in enumerate(('2', '3', '4', '6')):
            handle(component_interaction(f'410{i}', user_id))
            await settle()

    task = asyncio.create_task(produce())
    users = [interaction.user.id async for interaction in collector]
    await task

    assert users == ['2', '4']
    assert collector.reason == 'componentLimit'
    assert collector.total == 2
    assert collector.guild_id == '100'


@pytest.mark.asyncio
async def test_collector_idle_timeout():
    client = make_client()
    collector = pyguild.InteractionCollector(client, guild='100', idle=0.05)

    next_item = asyncio.ensure_future(collector.next())
    client.state.actions.interaction_create.handle(component_interaction('4200', '2'))

    interaction = await asyncio.wait_for(next_item, timeout=1)
    assert interaction.id == '4200'

    _, reason = await asyncio.wait_for(collector.wait(), timeout=1)
    assert reason == 'idle'


@pytest.mark.asyncio
async def test_collector_stop_and_empty():
    client = make_client()
    collector = pyguild.InteractionCollector(client, max=1)

    client.state.actions.interaction_create.handle(component_interaction('4300', '2'))
    await settle()
    assert collector.ended
    assert collector.reason == 'limit'

    collector = pyguild.InteractionCollector(client, time=10)
    client.state.actions.interaction_create.handle(component_interaction('4301', '2'))
    await settle()
    assert len(collector.collected) == 1

    collector.empty()
    assert collector.total == 0
    assert len(collector.collected) == 0
    assert len(collector.users) == 0

    collector.stop()
    collector.stop('ignored')
    assert collector.reason == 'user'


@pytest.mark.asyncio
async def test_collector_limit_counts_collected_only():
    client = make_client()
    collector = pyguild.InteractionCollector(
        client,
        max=1,
        filter=lambda interaction, collected, /: interaction.user.id == '3',
    )

    client.state.actions.interaction_create.handle(component_interaction('4400', '2'))
    await settle()
    assert not collector.ended
    assert collector.total == 0

    client.state.actions.interaction_create.handle(component_interaction('4401', '3'))
    await settle()
    assert collector.ended
    assert collector.reason == 'limit'
    assert collector.total == 1
