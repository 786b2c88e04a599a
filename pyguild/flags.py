from __future__ import annotations

import inspect
import typing

from .utils import MISSING

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from typing_extensions import Self

BF = typing.TypeVar('BF', bound='BaseFlags')


class flag(typing.Generic[BF]):
    __slots__ = (
        '__doc__',
        '_func',
        '_parent',
        'name',
        'value',
        'alias',
    )

    def __init__(self, *, alias: bool = False) -> None:
        self.__doc__: typing.Optional[str] = None
        self._func: Callable[[BF], int] = MISSING
        self._parent: type[BF] = MISSING
        self.name: str = ''
        self.value: int = 0
        self.alias: bool = alias

    def __call__(self, func: Callable[[BF], int], /) -> Self:
        self._func = func
        self.__doc__ = func.__doc__
        self.name = func.__name__
        return self

    @typing.overload
    def __get__(self, instance: None, owner: type[BF], /) -> Self: ...

    @typing.overload
    def __get__(self, instance: BF, owner: type[BF], /) -> bool: ...

    def __get__(self, instance: typing.Optional[BF], owner: type[BF], /) -> typing.Union[bool, Self]:
        if instance is None:
            return self
        return (instance.value & self.value) == self.value

    def __set__(self, instance: BF, value: bool, /) -> None:
        if value:
            instance.value |= self.value
        else:
            instance.value &= ~self.value

    def __or__(self, other: typing.Union[BF, flag[BF], int], /) -> BF:
        return self._parent(self.value) | other

    def __int__(self) -> int:
        return self.value


class BaseFlags:
    """Base class for flags."""

    if typing.TYPE_CHECKING:
        ALL_VALUE: typing.ClassVar[int]
        VALID_FLAGS: typing.ClassVar[dict[str, int]]
        FLAGS: typing.ClassVar[dict[str, flag]]

    __slots__ = ('value',)

    def __init_subclass__(cls) -> None:
        valid_flags = {}
        flags = {}
        for _, f in inspect.getmembers(cls):
            if isinstance(f, flag):
                f.value = f._func(cls)
                if f.alias:
                    continue
                valid_flags[f.name] = f.value
                flags[f.name] = f
                f._parent = cls

        all = 0
        for value in valid_flags.values():
            all |= value

        cls.ALL_VALUE = all
        cls.VALID_FLAGS = valid_flags
        cls.FLAGS = flags

    def __init__(self, value: int = 0, /, **kwargs: bool) -> None:
        self.value: int = value
        for k, v in kwargs.items():
            if k not in self.VALID_FLAGS:
                raise TypeError(f'Unknown flag {k}')
            setattr(self, k, v)

    @classmethod
    def all(cls) -> Self:
        """Returns instance with all flags."""
        return cls(cls.ALL_VALUE)

    @classmethod
    def none(cls) -> Self:
        """Returns instance with no flags."""
        return cls(0)

    @classmethod
    def resolve(cls, value: typing.Any, /) -> int:
        """Resolves a flag-like value into raw integer.

        Accepts an :class:`int`, a numeric string, a flag name, a flags instance,
        or an iterable of any of these.

        Raises
        ------
        :class:`TypeError`
            The value could not be resolved.
        """
        if isinstance(value, int):
            return value
        if isinstance(value, cls):
            return value.value
        if isinstance(value, flag):
            return value.value
        if isinstance(value, str):
            if value.isdigit():
                return int(value)
            try:
                return cls.VALID_FLAGS[value]
            except KeyError:
                raise TypeError(f'Unknown flag {value}') from None
        if isinstance(value, (list, tuple, set, frozenset)):
            result = 0
            for item in value:
                result |= cls.resolve(item)
            return result
        raise TypeError(f'cannot resolve {value.__class__.__name__} to {cls.__name__}')

    def __hash__(self) -> int:
        return hash(self.value)

    def __iter__(self) -> Iterator[tuple[str, bool]]:
        for name in self.VALID_FLAGS:
            yield (name, getattr(self, name))

    def __repr__(self, /) -> str:
        return f'<{self.__class__.__name__}: {self.value}>'

    def copy(self) -> Self:
        """Copies the flag value."""
        return self.__class__(self.value)

    def has(self, other: typing.Any, /) -> bool:
        """:class:`bool`: Whether all bits of ``other`` are set."""
        ov = self.resolve(other)
        return (self.value & ov) == ov

    def missing(self, other: typing.Any, /) -> list[str]:
        """List[:class:`str`]: The names of flags from ``other`` that are not set."""
        ov = self.resolve(other)
        return [name for name, value in self.VALID_FLAGS.items() if ov & value and not self.value & value]

    __contains__ = has

    def __and__(self, other: typing.Any, /) -> Self:
        return self.__class__(self.value & self.resolve(other))

    def __or__(self, other: typing.Any, /) -> Self:
        return self.__class__(self.value | self.resolve(other))

    def __xor__(self, other: typing.Any, /) -> Self:
        return self.__class__(self.value ^ self.resolve(other))

    def __invert__(self) -> Self:
        return self.__class__(self.value ^ self.ALL_VALUE)

    def __bool__(self) -> bool:
        return self.value != 0

    def __eq__(self, other: object, /) -> bool:
        return self is other or isinstance(other, self.__class__) and self.value == other.value

    def __ne__(self, other: object, /) -> bool:
        return not self.__eq__(other)

    def __int__(self) -> int:
        return self.value


class Permissions(BaseFlags):
    """Wraps up a guild or channel permission value."""

    __slots__ = ()

    @flag()
    def create_instant_invite(cls) -> int:
        return 1 << 0

    @flag()
    def kick_members(cls) -> int:
        return 1 << 1

    @flag()
    def ban_members(cls) -> int:
        return 1 << 2

    @flag()
    def administrator(cls) -> int:
        """:class:`bool`: Whether the user bypasses every permission check and channel override."""
        return 1 << 3

    @flag()
    def manage_channels(cls) -> int:
        return 1 << 4

    @flag()
    def manage_guild(cls) -> int:
        """:class:`bool`: Whether the user can edit guild properties, and view invites and audit log targets."""
        return 1 << 5

    @flag()
    def add_reactions(cls) -> int:
        return 1 << 6

    @flag()
    def view_audit_log(cls) -> int:
        return 1 << 7

    @flag()
    def priority_speaker(cls) -> int:
        return 1 << 8

    @flag()
    def stream(cls) -> int:
        return 1 << 9

    @flag()
    def view_channel(cls) -> int:
        return 1 << 10

    @flag()
    def send_messages(cls) -> int:
        return 1 << 11

    @flag()
    def send_tts_messages(cls) -> int:
        return 1 << 12

    @flag()
    def manage_messages(cls) -> int:
        return 1 << 13

    @flag()
    def embed_links(cls) -> int:
        return 1 << 14

    @flag()
    def attach_files(cls) -> int:
        return 1 << 15

    @flag()
    def read_message_history(cls) -> int:
        return 1 << 16

    @flag()
    def mention_everyone(cls) -> int:
        return 1 << 17

    @flag()
    def use_external_emojis(cls) -> int:
        return 1 << 18

    @flag()
    def view_guild_insights(cls) -> int:
        return 1 << 19

    @flag()
    def connect(cls) -> int:
        return 1 << 20

    @flag()
    def speak(cls) -> int:
        return 1 << 21

    @flag()
    def mute_members(cls) -> int:
        return 1 << 22

    @flag()
    def deafen_members(cls) -> int:
        return 1 << 23

    @flag()
    def move_members(cls) -> int:
        return 1 << 24

    @flag()
    def use_vad(cls) -> int:
        return 1 << 25

    @flag()
    def change_nickname(cls) -> int:
        return 1 << 26

    @flag()
    def manage_nicknames(cls) -> int:
        return 1 << 27

    @flag()
    def manage_roles(cls) -> int:
        return 1 << 28

    @flag()
    def manage_webhooks(cls) -> int:
        return 1 << 29

    @flag()
    def manage_emojis_and_stickers(cls) -> int:
        return 1 << 30

    @flag()
    def use_application_commands(cls) -> int:
        return 1 << 31

    @flag()
    def request_to_speak(cls) -> int:
        return 1 << 32

    @flag()
    def manage_threads(cls) -> int:
        return 1 << 34

    @flag()
    def use_public_threads(cls) -> int:
        return 1 << 35

    @flag()
    def use_private_threads(cls) -> int:
        return 1 << 36

    @flag()
    def use_external_stickers(cls) -> int:
        return 1 << 37


class MessageFlags(BaseFlags):
    """Wraps up a Message flag value."""

    __slots__ = ()

    @flag()
    def crossposted(cls) -> int:
        return 1 << 0

    @flag()
    def is_crosspost(cls) -> int:
        return 1 << 1

    @flag()
    def suppress_embeds(cls) -> int:
        return 1 << 2

    @flag()
    def source_message_deleted(cls) -> int:
        return 1 << 3

    @flag()
    def urgent(cls) -> int:
        return 1 << 4

    @flag()
    def has_thread(cls) -> int:
        return 1 << 5

    @flag()
    def ephemeral(cls) -> int:
        """:class:`bool`: Whether the message is only visible to the user who invoked the interaction."""
        return 1 << 6

    @flag()
    def loading(cls) -> int:
        return 1 << 7


class UserFlags(BaseFlags):
    """Wraps up public flags of a user."""

    __slots__ = ()

    @flag()
    def staff(cls) -> int:
        return 1 << 0

    @flag()
    def partner(cls) -> int:
        return 1 << 1

    @flag()
    def hypesquad(cls) -> int:
        return 1 << 2

    @flag()
    def bug_hunter_level_1(cls) -> int:
        return 1 << 3

    @flag()
    def early_supporter(cls) -> int:
        return 1 << 9

    @flag()
    def team_user(cls) -> int:
        return 1 << 10

    @flag()
    def bug_hunter_level_2(cls) -> int:
        return 1 << 14

    @flag()
    def verified_bot(cls) -> int:
        return 1 << 16

    @flag()
    def early_verified_bot_developer(cls) -> int:
        return 1 << 17

    @flag()
    def discord_certified_moderator(cls) -> int:
        return 1 << 18


__all__ = (
    'flag',
    'BaseFlags',
    'Permissions',
    'MessageFlags',
    'UserFlags',
)
