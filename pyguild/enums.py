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

# Thanks Danny https://github.com/Rapptz/discord.py/blob/7d3eff9d9d115dc29b5716c42eaeedf1a008e9b0/discord/enums.py
from __future__ import annotations

from collections import namedtuple
import types
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


def _create_value_cls(name: str, comparable: bool, /):
    # All the type ignores here are due to the type checker being unable to recognise
    # Runtime type creation without exploding.
    cls = namedtuple('_EnumValue_' + name, 'name value')
    cls.__repr__ = lambda self: f'<{name}.{self.name}: {self.value!r}>'  # type: ignore
    cls.__str__ = lambda self: f'{name}.{self.name}'  # type: ignore
    if comparable:
        cls.__le__ = lambda self, other: isinstance(other, self.__class__) and self.value <= other.value  # type: ignore
        cls.__ge__ = lambda self, other: isinstance(other, self.__class__) and self.value >= other.value  # type: ignore
        cls.__lt__ = lambda self, other: isinstance(other, self.__class__) and self.value < other.value  # type: ignore
        cls.__gt__ = lambda self, other: isinstance(other, self.__class__) and self.value > other.value  # type: ignore
    return cls


def _is_descriptor(obj: typing.Any, /) -> bool:
    return hasattr(obj, '__get__') or hasattr(obj, '__set__') or hasattr(obj, '__delete__')


class EnumMeta(type):
    if typing.TYPE_CHECKING:
        __name__: typing.ClassVar[str]  # type: ignore
        _enum_member_names_: typing.ClassVar[list[str]]
        _enum_member_map_: typing.ClassVar[dict[str, typing.Any]]
        _enum_value_map_: typing.ClassVar[dict[typing.Any, typing.Any]]

    def __new__(
        cls,
        name: str,
        bases: tuple[type, ...],
        attrs: dict[str, typing.Any],
        /,
        *,
        comparable: bool = False,
    ) -> EnumMeta:
        value_mapping = {}
        member_mapping = {}
        member_names = []

        value_cls = _create_value_cls(name, comparable)
        for key, value in list(attrs.items()):
            is_descriptor = _is_descriptor(value)
            if key[0] == '_' and not is_descriptor:
                continue

            # Special case classmethod to just pass through
            if isinstance(value, classmethod):
                continue

            if is_descriptor:
                setattr(value_cls, key, value)
                del attrs[key]
                continue

            try:
                new_value = value_mapping[value]
            except KeyError:
                new_value = value_cls(name=key, value=value)
                value_mapping[value] = new_value
                member_names.append(key)

            member_mapping[key] = new_value
            attrs[key] = new_value

        attrs['_enum_value_map_'] = value_mapping
        attrs['_enum_member_map_'] = member_mapping
        attrs['_enum_member_names_'] = member_names
        attrs['_enum_value_cls_'] = value_cls
        actual_cls = super().__new__(cls, name, bases, attrs)
        value_cls._actual_enum_cls_ = actual_cls  # type: ignore # Runtime attribute isn't understood
        return actual_cls

    def __iter__(cls) -> Iterator[typing.Any]:
        return (cls._enum_member_map_[name] for name in cls._enum_member_names_)

    def __len__(cls) -> int:
        return len(cls._enum_member_names_)

    def __repr__(cls) -> str:
        return f'<enum {cls.__name__}>'

    @property
    def __members__(cls) -> Mapping[str, typing.Any]:
        return types.MappingProxyType(cls._enum_member_map_)

    def __call__(cls, value: typing.Any, /) -> typing.Any:
        try:
            return cls._enum_value_map_[value]
        except (KeyError, TypeError):
            raise ValueError(f'{value!r} is not a valid {cls.__name__}') from None

    def __getitem__(cls, key: str, /) -> typing.Any:
        return cls._enum_member_map_[key]

    def __setattr__(cls, name: str, value: typing.Any, /) -> None:
        raise TypeError('Enums are immutable.')

    def __delattr__(cls, attr: str, /) -> None:
        raise TypeError('Enums are immutable.')

    def __instancecheck__(self, instance: typing.Any, /) -> bool:
        try:
            return instance._actual_enum_cls_ is self
        except AttributeError:
            return False


if typing.TYPE_CHECKING:
    from enum import Enum
else:

    class Enum(metaclass=EnumMeta):
        @classmethod
        def try_value(cls, value) -> typing.Any:
            try:
                return cls._enum_value_map_[value]
            except (KeyError, TypeError):
                return value


class ChannelType(Enum):
    text = 0
    private = 1
    voice = 2
    group = 3
    category = 4
    news = 5
    store = 6
    news_thread = 10
    public_thread = 11
    private_thread = 12
    stage_voice = 13


class OverwriteType(Enum):
    role = 0
    member = 1


class InteractionType(Enum):
    ping = 1
    application_command = 2
    message_component = 3
    application_command_autocomplete = 4


class InteractionResponseType(Enum):
    pong = 1
    channel_message_with_source = 4
    deferred_channel_message_with_source = 5
    deferred_message_update = 6
    update_message = 7
    application_command_autocomplete_result = 8


class ComponentType(Enum):
    action_row = 1
    button = 2
    select_menu = 3


class StickerType(Enum):
    standard = 1
    guild = 2


class StickerFormatType(Enum):
    png = 1
    apng = 2
    lottie = 3


class PrivacyLevel(Enum):
    public = 1
    guild_only = 2


class ActivityType(Enum):
    playing = 0
    streaming = 1
    listening = 2
    watching = 3
    custom = 4
    competing = 5


class Status(Enum):
    online = 'online'
    idle = 'idle'
    dnd = 'dnd'
    invisible = 'invisible'
    offline = 'offline'


class ApplicationCommandType(Enum):
    chat_input = 1
    user = 2
    message = 3


class ApplicationCommandOptionType(Enum):
    sub_command = 1
    sub_command_group = 2
    string = 3
    integer = 4
    boolean = 5
    user = 6
    channel = 7
    role = 8
    mentionable = 9
    number = 10


class ApplicationCommandPermissionType(Enum):
    role = 1
    user = 2


class Partials(Enum):
    """Structures that may be constructed from an ID alone, when the full data is not cached."""

    user = 'USER'
    channel = 'CHANNEL'
    guild_member = 'GUILD_MEMBER'
    message = 'MESSAGE'
    reaction = 'REACTION'


class AuditLogAction(Enum, comparable=True):
    guild_update = 1
    channel_create = 10
    channel_update = 11
    channel_delete = 12
    channel_overwrite_create = 13
    channel_overwrite_update = 14
    channel_overwrite_delete = 15
    member_kick = 20
    member_prune = 21
    member_ban_add = 22
    member_ban_remove = 23
    member_update = 24
    member_role_update = 25
    member_move = 26
    member_disconnect = 27
    bot_add = 28
    role_create = 30
    role_update = 31
    role_delete = 32
    invite_create = 40
    invite_update = 41
    invite_delete = 42
    webhook_create = 50
    webhook_update = 51
    webhook_delete = 52
    emoji_create = 60
    emoji_update = 61
    emoji_delete = 62
    message_delete = 72
    message_bulk_delete = 73
    message_pin = 74
    message_unpin = 75
    integration_create = 80
    integration_update = 81
    integration_delete = 82
    stage_instance_create = 83
    stage_instance_update = 84
    stage_instance_delete = 85
    sticker_create = 90
    sticker_update = 91
    sticker_delete = 92
    thread_create = 110
    thread_update = 111
    thread_delete = 112


class AuditLogTargetType(Enum):
    all = 'ALL'
    guild = 'GUILD'
    channel = 'CHANNEL'
    user = 'USER'
    role = 'ROLE'
    invite = 'INVITE'
    webhook = 'WEBHOOK'
    emoji = 'EMOJI'
    message = 'MESSAGE'
    integration = 'INTEGRATION'
    stage_instance = 'STAGE_INSTANCE'
    sticker = 'STICKER'
    thread = 'THREAD'
    unknown = 'UNKNOWN'


class AuditLogActionType(Enum):
    all = 'ALL'
    create = 'CREATE'
    delete = 'DELETE'
    update = 'UPDATE'


__all__ = (
    'EnumMeta',
    'Enum',
    'ChannelType',
    'OverwriteType',
    'InteractionType',
    'InteractionResponseType',
    'ComponentType',
    'StickerType',
    'StickerFormatType',
    'PrivacyLevel',
    'ActivityType',
    'Status',
    'ApplicationCommandType',
    'ApplicationCommandOptionType',
    'ApplicationCommandPermissionType',
    'Partials',
    'AuditLogAction',
    'AuditLogTargetType',
    'AuditLogActionType',
)
