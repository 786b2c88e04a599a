from __future__ import annotations

import typing
import typing_extensions

from .users import User, Presence, VoiceState

if typing.TYPE_CHECKING:
    from .channels import Channel, StageInstance


class Role(typing.TypedDict):
    id: str
    name: str
    color: int
    hoist: bool
    position: int
    permissions: str
    managed: bool
    mentionable: bool


class Member(typing.TypedDict):
    user: typing_extensions.NotRequired[User]
    nick: typing_extensions.NotRequired[str | None]
    avatar: typing_extensions.NotRequired[str | None]
    roles: list[str]
    joined_at: str | None
    deaf: typing_extensions.NotRequired[bool]
    mute: typing_extensions.NotRequired[bool]
    pending: typing_extensions.NotRequired[bool]
    permissions: typing_extensions.NotRequired[str]


class Sticker(typing.TypedDict):
    id: str
    pack_id: typing_extensions.NotRequired[str]
    name: str
    description: str | None
    tags: str
    type: int
    format_type: int
    available: typing_extensions.NotRequired[bool]
    guild_id: typing_extensions.NotRequired[str]
    user: typing_extensions.NotRequired[User]
    sort_value: typing_extensions.NotRequired[int]


class UnavailableGuild(typing.TypedDict):
    id: str
    unavailable: typing_extensions.NotRequired[bool]


class Guild(typing.TypedDict):
    id: str
    name: str
    icon: str | None
    owner_id: str
    unavailable: typing_extensions.NotRequired[bool]
    member_count: typing_extensions.NotRequired[int]
    large: typing_extensions.NotRequired[bool]
    roles: list[Role]
    channels: typing_extensions.NotRequired[list[Channel]]
    threads: typing_extensions.NotRequired[list[Channel]]
    members: typing_extensions.NotRequired[list[Member]]
    presences: typing_extensions.NotRequired[list[Presence]]
    voice_states: typing_extensions.NotRequired[list[VoiceState]]
    stickers: typing_extensions.NotRequired[list[Sticker]]
    stage_instances: typing_extensions.NotRequired[list[StageInstance]]


class Ban(typing.TypedDict):
    reason: str | None
    user: User


class Invite(typing.TypedDict):
    code: str
    guild_id: typing_extensions.NotRequired[str]
    channel_id: typing_extensions.NotRequired[str]
    inviter: typing_extensions.NotRequired[User]
    uses: typing_extensions.NotRequired[int]
    max_uses: typing_extensions.NotRequired[int]
    max_age: typing_extensions.NotRequired[int]
    temporary: typing_extensions.NotRequired[bool]
    created_at: typing_extensions.NotRequired[str]


class Webhook(typing.TypedDict):
    id: str
    type: int
    guild_id: typing_extensions.NotRequired[str | None]
    channel_id: str | None
    user: typing_extensions.NotRequired[User]
    name: str | None
    avatar: str | None
    token: typing_extensions.NotRequired[str]
    application_id: str | None


class IntegrationAccount(typing.TypedDict):
    id: str
    name: str


class Integration(typing.TypedDict):
    id: str
    name: str
    type: str
    enabled: bool
    account: IntegrationAccount


__all__ = (
    'Role',
    'Member',
    'Sticker',
    'UnavailableGuild',
    'Guild',
    'Ban',
    'Invite',
    'Webhook',
    'IntegrationAccount',
    'Integration',
)
