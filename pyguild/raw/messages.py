from __future__ import annotations

import typing
import typing_extensions

from .guilds import Member
from .users import User


class ReactionEmoji(typing.TypedDict):
    id: str | None
    name: str | None
    animated: typing_extensions.NotRequired[bool]


class Reaction(typing.TypedDict):
    count: int
    me: bool
    emoji: ReactionEmoji


class MessageInteraction(typing.TypedDict):
    id: str
    type: int
    name: str
    user: User


class Message(typing.TypedDict):
    id: str
    channel_id: str
    guild_id: typing_extensions.NotRequired[str]
    author: User
    member: typing_extensions.NotRequired[Member]
    content: str
    timestamp: str
    edited_timestamp: str | None
    tts: bool
    pinned: bool
    type: int
    reactions: typing_extensions.NotRequired[list[Reaction]]
    webhook_id: typing_extensions.NotRequired[str]
    application_id: typing_extensions.NotRequired[str]
    interaction: typing_extensions.NotRequired[MessageInteraction]
    flags: typing_extensions.NotRequired[int]


__all__ = (
    'ReactionEmoji',
    'Reaction',
    'MessageInteraction',
    'Message',
)
