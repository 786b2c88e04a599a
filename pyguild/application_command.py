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

from __future__ import annotations

from attrs import define, field
import typing

from .base import Base
from .enums import ApplicationCommandOptionType, ApplicationCommandType

if typing.TYPE_CHECKING:
    from . import raw
    from .guild import Guild
    from .managers import ApplicationCommandManager

_SUBCOMMAND_TYPES: typing.Final[tuple[int, ...]] = (
    ApplicationCommandOptionType.sub_command.value,
    ApplicationCommandOptionType.sub_command_group.value,
)


def _option_type_value(type: typing.Any, /) -> int:
    if isinstance(type, int):
        return type
    if isinstance(type, str):
        return ApplicationCommandOptionType[type.lower()].value
    return type.value


def transform_option(option: dict[str, typing.Any], /, *, received: bool = False) -> dict[str, typing.Any]:
    """Converts an application command option between its API and library forms.

    Parameters
    ----------
    option: Dict[:class:`str`, Any]
        The option. Its ``type`` may be an :class:`int`, an :class:`ApplicationCommandOptionType`
        or the name of one (case insensitive).
    received: :class:`bool`
        Whether the option was received from API. Received options get their ``type``
        converted into :class:`ApplicationCommandOptionType`.
    """
    if received:
        type = ApplicationCommandOptionType.try_value(option['type'])
        raw_type = option['type']
    else:
        raw_type = _option_type_value(option['type'])
        type = raw_type

    result: dict[str, typing.Any] = {
        'type': type,
        'name': option['name'],
        'description': option.get('description'),
    }

    required = option.get('required')
    if required is None and raw_type not in _SUBCOMMAND_TYPES:
        required = False
    if required is not None:
        result['required'] = required

    if option.get('choices') is not None:
        result['choices'] = list(option['choices'])
    if option.get('options') is not None:
        result['options'] = [transform_option(o, received=received) for o in option['options']]
    return result


@define(slots=True, eq=False)
class ApplicationCommand(Base):
    """Represents an application command."""

    application_id: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The ID of the application the command belongs to."""

    guild_id: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The ID of the guild the command is registered in. ``None`` for global commands."""

    name: str = field(default='', repr=True, kw_only=True)
    description: str = field(default='', repr=False, kw_only=True)

    options: list[dict[str, typing.Any]] = field(factory=list, repr=False, kw_only=True)
    """List[Dict[:class:`str`, Any]]: The options of the command, as returned by :func:`transform_option`."""

    default_permission: bool = field(default=True, repr=False, kw_only=True)
    version: str | None = field(default=None, repr=False, kw_only=True)
    type: ApplicationCommandType = field(default=ApplicationCommandType.chat_input, repr=False, kw_only=True)

    def _patch(self, data: raw.ApplicationCommand, /) -> raw.ApplicationCommand:  # type: ignore[override]
        if 'application_id' in data:
            self.application_id = data['application_id']
        if 'guild_id' in data:
            self.guild_id = data['guild_id']
        if 'name' in data:
            self.name = data['name']
        if 'description' in data:
            self.description = data['description']
        if 'options' in data:
            self.options = [transform_option(option, received=True) for option in data['options'] or ()]
        if 'default_permission' in data:
            self.default_permission = data['default_permission']
        if 'version' in data:
            self.version = data['version']
        if 'type' in data:
            self.type = ApplicationCommandType.try_value(data['type'])
        return data

    def _clone(self) -> ApplicationCommand:
        clone = Base._clone(self)
        clone.options = list(self.options)
        return clone

    @property
    def guild(self) -> Guild | None:
        if self.guild_id is None:
            return None
        return self.state.guilds.get(self.guild_id)

    @property
    def manager(self) -> ApplicationCommandManager:
        """:class:`ApplicationCommandManager`: The manager this command belongs to."""
        guild = self.guild
        if guild is not None:
            return guild.commands
        application = self.state.application
        assert application, 'Application is not ready yet'
        return application.commands

    async def edit(self, data: dict[str, typing.Any], /) -> ApplicationCommand:
        """|coro|

        Edits the command.

        Parameters
        ----------
        data: Dict[:class:`str`, Any]
            The new data. Keys are the same as :meth:`ApplicationCommandManager.create` accepts.
        """
        return await self.manager.edit(self, data, guild_id=self.guild_id)

    async def delete(self) -> ApplicationCommand:
        """|coro|

        Deletes the command.
        """
        await self.manager.delete(self, guild_id=self.guild_id)
        return self

    async def fetch_permissions(self, *, guild_id: str | None = None) -> list[dict[str, typing.Any]]:
        """|coro|

        Retrieves the permissions of this command in a guild.

        Raises
        ------
        :class:`InvalidArgument`
            The command is global and ``guild_id`` was not given.
        """
        return await self.manager.fetch_permissions(self, guild_id=guild_id or self.guild_id)

    async def set_permissions(
        self, permissions: list[dict[str, typing.Any]], /, *, guild_id: str | None = None
    ) -> list[dict[str, typing.Any]]:
        """|coro|

        Replaces the permissions of this command in a guild.
        """
        return await self.manager.set_permissions(self, permissions, guild_id=guild_id or self.guild_id)

    def equals(self, other: ApplicationCommand | dict[str, typing.Any], /) -> bool:
        """Checks whether the command is equal to other command, or command data.

        Only ``name``, ``description``, ``default_permission`` and ``options`` are compared.
        """
        if isinstance(other, ApplicationCommand):
            if other.id and self.id and other.id != self.id:
                return False
            name = other.name
            description = other.description
            default_permission = other.default_permission
            options = other.options
        else:
            name = other.get('name')
            description = other.get('description')
            default_permission = other.get('default_permission', True)
            options = [transform_option(o) for o in other.get('options') or ()]

        if (self.name, self.description, self.default_permission) != (name, description, default_permission):
            return False

        mine = [transform_option(o) for o in self.options]
        theirs = [transform_option(o) for o in options]
        return mine == theirs


@define(slots=True, eq=False)
class ClientApplication(Base):
    """Represents the application of the connected bot."""

    name: str | None = field(default=None, repr=True, kw_only=True)
    description: str | None = field(default=None, repr=False, kw_only=True)
    flags: int = field(default=0, repr=False, kw_only=True)

    commands: ApplicationCommandManager = field(init=False, repr=False)
    """:class:`ApplicationCommandManager`: The global commands of the application."""

    def __attrs_post_init__(self) -> None:
        from .managers import ApplicationCommandManager

        self.commands = ApplicationCommandManager(self.state)

    def _patch(self, data: dict[str, typing.Any], /) -> dict[str, typing.Any]:
        if 'name' in data:
            self.name = data['name']
        if 'description' in data:
            self.description = data['description']
        if 'flags' in data:
            self.flags = data['flags'] or 0
        return data

    @property
    def partial(self) -> bool:
        return self.name is None


__all__ = ('transform_option', 'ApplicationCommand', 'ClientApplication')
