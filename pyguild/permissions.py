from __future__ import annotations

from attrs import define, field
import typing

from .base import Base
from .enums import OverwriteType
from .errors import InvalidArgument
from .flags import Permissions

if typing.TYPE_CHECKING:
    from collections.abc import Mapping

    from . import raw
    from .channel import GuildChannel
    from .guild import Guild


def resolve_overwrite_options(
    options: Mapping[str, bool | None],
    /,
    *,
    allow: Permissions | int = 0,
    deny: Permissions | int = 0,
) -> tuple[Permissions, Permissions]:
    """Applies permission options on top of existing allow and deny values.

    ``True`` allows the permission, ``False`` denies it, and ``None`` removes it from both.

    Parameters
    ----------
    options: Mapping[:class:`str`, Optional[:class:`bool`]]
        The permission names mapped to their new state.
    allow: Union[:class:`Permissions`, :class:`int`]
        The base allowed permissions.
    deny: Union[:class:`Permissions`, :class:`int`]
        The base denied permissions.

    Raises
    ------
    :class:`InvalidArgument`
        A permission name is unknown.

    Returns
    -------
    Tuple[:class:`Permissions`, :class:`Permissions`]
        The allowed and denied permissions.
    """
    allow_value = int(allow)
    deny_value = int(deny)

    for name, value in options.items():
        try:
            bit = Permissions.VALID_FLAGS[name]
        except KeyError:
            raise InvalidArgument('INVALID_ELEMENT', 'options', name) from None

        if value is True:
            allow_value |= bit
            deny_value &= ~bit
        elif value is False:
            allow_value &= ~bit
            deny_value |= bit
        elif value is None:
            allow_value &= ~bit
            deny_value &= ~bit

    return Permissions(allow_value), Permissions(deny_value)


@define(slots=True, eq=False)
class PermissionOverwrite(Base):
    """Represents a permission overwrite on a guild channel."""

    channel: GuildChannel = field(repr=False, kw_only=True)
    """:class:`GuildChannel`: The channel the overwrite belongs to."""

    type: OverwriteType = field(default=OverwriteType.role, repr=True, kw_only=True)
    """:class:`OverwriteType`: Whether the overwrite targets a role or a member."""

    allow: Permissions = field(factory=Permissions, repr=True, kw_only=True)
    """:class:`Permissions`: The allowed permissions."""

    deny: Permissions = field(factory=Permissions, repr=True, kw_only=True)
    """:class:`Permissions`: The denied permissions."""

    def _patch(self, data: raw.PermissionOverwrite, /) -> raw.PermissionOverwrite:  # type: ignore[override]
        if 'type' in data:
            self.type = OverwriteType(data['type'])
        if 'allow' in data:
            self.allow = Permissions(int(data['allow']))
        if 'deny' in data:
            self.deny = Permissions(int(data['deny']))
        return data

    def to_dict(self) -> raw.PermissionOverwrite:
        return {
            'id': self.id,
            'type': self.type.value,
            'allow': str(self.allow.value),
            'deny': str(self.deny.value),
        }

    async def edit(self, options: Mapping[str, bool | None], /, *, reason: str | None = None) -> PermissionOverwrite:
        """|coro|

        Updates this overwrite, keeping the permissions not mentioned in ``options``.
        """
        allow, deny = resolve_overwrite_options(options, allow=self.allow, deny=self.deny)
        await self.state.http.edit_channel_permissions(
            self.channel.id,
            self.id,
            {'id': self.id, 'type': self.type.value, 'allow': str(allow.value), 'deny': str(deny.value)},
            reason=reason,
        )
        return self

    async def delete(self, *, reason: str | None = None) -> PermissionOverwrite:
        """|coro|

        Deletes this overwrite.
        """
        await self.state.http.delete_channel_permissions(self.channel.id, self.id, reason=reason)
        return self

    @classmethod
    def resolve(cls, overwrite: typing.Any, guild: Guild, /) -> raw.PermissionOverwrite:
        """Converts an overwrite-like value into API payload.

        Accepts a :class:`PermissionOverwrite`, a mapping with ``id``, ``type``, ``allow``
        and ``deny`` keys, or a mapping whose ``id`` refers to a cached role or user.

        Raises
        ------
        :class:`InvalidArgument`
            The target could not be resolved to a role or user.
        """
        if isinstance(overwrite, cls):
            return overwrite.to_dict()

        id = overwrite.get('id')
        type = overwrite.get('type')
        if isinstance(type, str):
            type = {'role': 0, 'member': 1}.get(type, type)
        if isinstance(type, int):
            type = OverwriteType.try_value(type)

        if isinstance(id, str) and isinstance(type, OverwriteType):
            target_type = type
        else:
            from .guild import Role

            target = guild.roles.resolve(id) or guild.state.users.resolve(id)
            if target is None:
                raise InvalidArgument('INVALID_TYPE', 'parameter', 'User nor a Role')
            id = target.id
            target_type = OverwriteType.role if isinstance(target, Role) else OverwriteType.member

        return {
            'id': id,
            'type': target_type.value,
            'allow': str(Permissions.resolve(overwrite.get('allow') or 0)),
            'deny': str(Permissions.resolve(overwrite.get('deny') or 0)),
        }


__all__ = ('resolve_overwrite_options', 'PermissionOverwrite')
