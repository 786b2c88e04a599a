from __future__ import annotations

import typing
import typing_extensions

from .channels import Channel, ThreadMember
from .guilds import UnavailableGuild
from .users import User


class GatewayDispatch(typing.TypedDict):
    op: typing_extensions.NotRequired[int]
    t: str
    d: typing.Any
    s: typing_extensions.NotRequired[int | None]


class ReadyApplication(typing.TypedDict):
    id: str
    flags: typing_extensions.NotRequired[int]


class ReadyEvent(typing.TypedDict):
    v: int
    user: User
    guilds: list[UnavailableGuild]
    session_id: str
    application: ReadyApplication


class GuildDeleteEvent(typing.TypedDict):
    id: str
    unavailable: typing_extensions.NotRequired[bool]


class GuildBanRemoveEvent(typing.TypedDict):
    guild_id: str
    user: User


class InviteDeleteEvent(typing.TypedDict):
    channel_id: str
    guild_id: typing_extensions.NotRequired[str]
    code: str


class ThreadMembersUpdateEvent(typing.TypedDict):
    id: str
    guild_id: str
    member_count: int
    added_members: typing_extensions.NotRequired[list[ThreadMember]]
    removed_member_ids: typing_extensions.NotRequired[list[str]]


class VoiceServerUpdateEvent(typing.TypedDict):
    token: str
    guild_id: str
    endpoint: str | None


class MessageDeleteEvent(typing.TypedDict):
    id: str
    channel_id: str
    guild_id: typing_extensions.NotRequired[str]


class MessageReactionRemoveAllEvent(typing.TypedDict):
    channel_id: str
    message_id: str
    guild_id: typing_extensions.NotRequired[str]


class GuildStickersUpdateEvent(typing.TypedDict):
    guild_id: str
    stickers: list[typing.Any]


ThreadChannel = Channel

__all__ = (
    'GatewayDispatch',
    'ReadyApplication',
    'ReadyEvent',
    'GuildDeleteEvent',
    'GuildBanRemoveEvent',
    'InviteDeleteEvent',
    'ThreadMembersUpdateEvent',
    'VoiceServerUpdateEvent',
    'MessageDeleteEvent',
    'MessageReactionRemoveAllEvent',
    'GuildStickersUpdateEvent',
    'ThreadChannel',
)
