from __future__ import annotations

import typing
import typing_extensions


class User(typing.TypedDict):
    id: str
    username: str
    discriminator: str
    avatar: str | None
    bot: typing_extensions.NotRequired[bool]
    system: typing_extensions.NotRequired[bool]
    public_flags: typing_extensions.NotRequired[int]
    verified: typing_extensions.NotRequired[bool]
    mfa_enabled: typing_extensions.NotRequired[bool]


class PartialUser(typing.TypedDict):
    id: str
    username: typing_extensions.NotRequired[str]
    discriminator: typing_extensions.NotRequired[str]
    avatar: typing_extensions.NotRequired[str | None]


PresenceStatus = typing.Literal['online', 'idle', 'dnd', 'offline']


class ClientStatus(typing.TypedDict):
    web: typing_extensions.NotRequired[PresenceStatus]
    mobile: typing_extensions.NotRequired[PresenceStatus]
    desktop: typing_extensions.NotRequired[PresenceStatus]


class Activity(typing.TypedDict):
    name: str
    type: int
    url: typing_extensions.NotRequired[str | None]
    state: typing_extensions.NotRequired[str | None]
    details: typing_extensions.NotRequired[str | None]
    created_at: typing_extensions.NotRequired[int]


class Presence(typing.TypedDict):
    user: PartialUser
    guild_id: typing_extensions.NotRequired[str]
    status: PresenceStatus
    activities: list[Activity]
    client_status: ClientStatus


class VoiceState(typing.TypedDict):
    guild_id: typing_extensions.NotRequired[str]
    channel_id: str | None
    user_id: str
    member: typing_extensions.NotRequired[typing.Any]
    session_id: str
    deaf: bool
    mute: bool
    self_deaf: bool
    self_mute: bool
    self_stream: typing_extensions.NotRequired[bool]
    self_video: bool
    suppress: bool
    request_to_speak_timestamp: str | None


__all__ = (
    'User',
    'PartialUser',
    'PresenceStatus',
    'ClientStatus',
    'Activity',
    'Presence',
    'VoiceState',
)
