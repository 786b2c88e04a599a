from __future__ import annotations

import typing
import typing_extensions

from .guilds import Member
from .messages import Message
from .users import User


class ApplicationCommandOption(typing.TypedDict):
    type: int
    name: str
    description: str
    required: typing_extensions.NotRequired[bool]
    choices: typing_extensions.NotRequired[list[dict[str, typing.Any]]]
    options: typing_extensions.NotRequired[list[ApplicationCommandOption]]


class ApplicationCommand(typing.TypedDict):
    id: str
    type: typing_extensions.NotRequired[int]
    application_id: str
    guild_id: typing_extensions.NotRequired[str]
    name: str
    description: str
    options: typing_extensions.NotRequired[list[ApplicationCommandOption]]
    default_permission: typing_extensions.NotRequired[bool]
    version: str


class ApplicationCommandPermission(typing.TypedDict):
    id: str
    type: int
    permission: bool


class GuildApplicationCommandPermissions(typing.TypedDict):
    id: str
    application_id: str
    guild_id: str
    permissions: list[ApplicationCommandPermission]


class InteractionData(typing.TypedDict):
    id: typing_extensions.NotRequired[str]
    name: typing_extensions.NotRequired[str]
    type: typing_extensions.NotRequired[int]
    options: typing_extensions.NotRequired[list[dict[str, typing.Any]]]
    custom_id: typing_extensions.NotRequired[str]
    component_type: typing_extensions.NotRequired[int]
    values: typing_extensions.NotRequired[list[str]]


class Interaction(typing.TypedDict):
    id: str
    application_id: str
    type: int
    data: typing_extensions.NotRequired[InteractionData]
    guild_id: typing_extensions.NotRequired[str]
    channel_id: typing_extensions.NotRequired[str]
    member: typing_extensions.NotRequired[Member]
    user: typing_extensions.NotRequired[User]
    token: str
    version: int
    message: typing_extensions.NotRequired[Message]


__all__ = (
    'ApplicationCommandOption',
    'ApplicationCommand',
    'ApplicationCommandPermission',
    'GuildApplicationCommandPermissions',
    'InteractionData',
    'Interaction',
)
