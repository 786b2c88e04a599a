from __future__ import annotations

import typing
import typing_extensions

from .guilds import Member
from .users import User


class PermissionOverwrite(typing.TypedDict):
    id: str
    type: int
    allow: str
    deny: str


class ThreadMetadata(typing.TypedDict):
    archived: bool
    auto_archive_duration: int
    archive_timestamp: str
    locked: bool
    invitable: typing_extensions.NotRequired[bool]


class ThreadMember(typing.TypedDict):
    id: typing_extensions.NotRequired[str]
    user_id: typing_extensions.NotRequired[str]
    join_timestamp: str
    flags: int
    member: typing_extensions.NotRequired[Member]


class Channel(typing.TypedDict):
    id: str
    type: int
    guild_id: typing_extensions.NotRequired[str]
    position: typing_extensions.NotRequired[int]
    permission_overwrites: typing_extensions.NotRequired[list[PermissionOverwrite]]
    name: typing_extensions.NotRequired[str | None]
    topic: typing_extensions.NotRequired[str | None]
    nsfw: typing_extensions.NotRequired[bool]
    last_message_id: typing_extensions.NotRequired[str | None]
    bitrate: typing_extensions.NotRequired[int]
    user_limit: typing_extensions.NotRequired[int]
    rate_limit_per_user: typing_extensions.NotRequired[int]
    recipients: typing_extensions.NotRequired[list[User]]
    parent_id: typing_extensions.NotRequired[str | None]
    rtc_region: typing_extensions.NotRequired[str | None]
    owner_id: typing_extensions.NotRequired[str]
    message_count: typing_extensions.NotRequired[int]
    member_count: typing_extensions.NotRequired[int]
    thread_metadata: typing_extensions.NotRequired[ThreadMetadata]
    member: typing_extensions.NotRequired[ThreadMember]


class StageInstance(typing.TypedDict):
    id: str
    guild_id: str
    channel_id: str
    topic: str
    privacy_level: int
    discoverable_disabled: bool


__all__ = (
    'PermissionOverwrite',
    'ThreadMetadata',
    'ThreadMember',
    'Channel',
    'StageInstance',
)
