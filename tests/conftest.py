from __future__ import annotations

import pytest
import pyguild


class RecordingDispatcher:
    def __init__(self) -> None:
        self.events: list[pyguild.BaseEvent] = []
        self.listening: bool = True

    def dispatch(self, event: pyguild.BaseEvent, /) -> None:
        self.events.append(event)

    def has_listeners(self, event: type[pyguild.BaseEvent], /) -> bool:
        return self.listening

    def of(self, type: type[pyguild.BaseEvent], /) -> list[pyguild.BaseEvent]:
        return [event for event in self.events if isinstance(event, type)]


def guild_payload(**overrides) -> dict:
    payload = {
        'id': '100',
        'name': 'Testing',
        'owner_id': '900',
        'roles': [
            {'id': '100', 'name': '@everyone', 'permissions': '0'},
            {'id': '101', 'name': 'Moderators', 'permissions': str(1 << 5)},
        ],
        'channels': [
            {'id': '200', 'type': 0, 'name': 'general'},
            {'id': '201', 'type': 13, 'name': 'stage'},
        ],
        'members': [
            {
                'user': {'id': '1', 'username': 'me', 'discriminator': '0001'},
                'roles': ['101'],
                'joined_at': '2021-01-01T00:00:00+00:00',
            },
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def state(dispatcher: RecordingDispatcher) -> pyguild.State:
    state = pyguild.State(dispatcher=dispatcher, partials=[pyguild.Partials.channel, pyguild.Partials.message])
    state.actions.ready.handle(
        {
            'user': {'id': '1', 'username': 'me', 'discriminator': '0001', 'bot': True},
            'application': {'id': '50', 'name': 'Application'},
            'guilds': [],
        }
    )
    dispatcher.events.clear()
    return state


@pytest.fixture
def guild(state: pyguild.State) -> pyguild.Guild:
    return state.actions.guild_create.handle(guild_payload())['guild']
