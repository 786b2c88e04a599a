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
from datetime import datetime
import typing

from .base import Base
from .core import resolve_id
from .enums import AuditLogAction
from .flags import Permissions
from .utils import parse_time

if typing.TYPE_CHECKING:
    from . import raw
    from .audit_logs import GuildAuditLogs
    from .managers import (
        GuildApplicationCommandManager,
        GuildBanManager,
        GuildChannelManager,
        GuildInviteManager,
        GuildMemberManager,
        GuildStickerManager,
        PresenceManager,
        RoleManager,
        StageInstanceManager,
        VoiceStateManager,
    )
    from .user import User


@define(slots=True, eq=False)
class Guild(Base):
    """Represents a guild on the platform.

    Child entities are held by per-guild managers. Channels in :attr:`channels`
    are the same objects as in the global channel manager.
    """

    name: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The guild's name. ``None`` if the guild is unavailable."""

    icon: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The guild's icon hash."""

    owner_id: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The ID of the guild owner."""

    available: bool = field(default=True, repr=True, kw_only=True)
    """:class:`bool`: Whether the guild is available. Guilds become unavailable during outages."""

    member_count: int = field(default=0, repr=False, kw_only=True)
    """:class:`int`: The approximate number of members."""

    large: bool = field(default=False, repr=False, kw_only=True)
    """:class:`bool`: Whether the guild is considered large."""

    channels: GuildChannelManager = field(init=False, repr=False)
    roles: RoleManager = field(init=False, repr=False)
    members: GuildMemberManager = field(init=False, repr=False)
    presences: PresenceManager = field(init=False, repr=False)
    voice_states: VoiceStateManager = field(init=False, repr=False)
    stickers: GuildStickerManager = field(init=False, repr=False)
    stage_instances: StageInstanceManager = field(init=False, repr=False)
    bans: GuildBanManager = field(init=False, repr=False)
    invites: GuildInviteManager = field(init=False, repr=False)
    commands: GuildApplicationCommandManager = field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        from .managers import (
            GuildApplicationCommandManager,
            GuildBanManager,
            GuildChannelManager,
            GuildInviteManager,
            GuildMemberManager,
            GuildStickerManager,
            PresenceManager,
            RoleManager,
            StageInstanceManager,
            VoiceStateManager,
        )

        self.channels = GuildChannelManager(self)
        self.roles = RoleManager(self)
        self.members = GuildMemberManager(self)
        self.presences = PresenceManager(self)
        self.voice_states = VoiceStateManager(self)
        self.stickers = GuildStickerManager(self)
        self.stage_instances = StageInstanceManager(self)
        self.bans = GuildBanManager(self)
        self.invites = GuildInviteManager(self)
        self.commands = GuildApplicationCommandManager(self)

    def _patch(self, data: raw.Guild, /) -> raw.Guild:  # type: ignore[override]
        if 'unavailable' in data:
            self.available = not data['unavailable']

        if 'name' in data:
            self.name = data['name']
        if 'icon' in data:
            self.icon = data['icon']
        if 'owner_id' in data:
            self.owner_id = data['owner_id']
        if 'member_count' in data:
            self.member_count = data['member_count']
        if 'large' in data:
            self.large = bool(data['large'])

        if 'roles' in data:
            self.roles.cache.clear()
            for role in data['roles']:
                self.roles._add(role)

        if 'channels' in data:
            self.channels.cache.clear()
            for channel in data['channels']:
                self.state.channels._add(channel, self)

        if 'threads' in data:
            for thread in data['threads']:
                self.state.channels._add(thread, self)

        if 'members' in data:
            for member in data['members']:
                self.members._add(member)

        if 'presences' in data:
            for presence in data['presences']:
                self.presences._add(presence)

        if 'voice_states' in data:
            self.voice_states.cache.clear()
            for voice_state in data['voice_states']:
                self.voice_states._add(voice_state)

        if 'stickers' in data:
            self.stickers.cache.clear()
            for sticker in data['stickers']:
                self.stickers._add(sticker)

        if 'stage_instances' in data:
            self.stage_instances.cache.clear()
            for stage_instance in data['stage_instances']:
                self.stage_instances._add(stage_instance)

        return data

    @property
    def partial(self) -> bool:
        return self.name is None

    @property
    def owner(self) -> GuildMember | None:
        """Optional[:class:`GuildMember`]: The owner of the guild, if cached."""
        if self.owner_id is None:
            return None
        return self.members.get(self.owner_id)

    @property
    def me(self) -> GuildMember | None:
        """Optional[:class:`GuildMember`]: The connected user's member in the guild, if cached."""
        me = self.state.me
        if me is None:
            return None
        return self.members.get(me.id)

    @property
    def default_role(self) -> Role | None:
        """Optional[:class:`Role`]: The ``@everyone`` role of the guild, if cached."""
        return self.roles.get(self.id)

    async def fetch(self, *, force: bool = True) -> Guild:
        """|coro|

        Retrieves the guild from API.
        """
        return await self.state.guilds.fetch(self.id, force=force)

    async def fetch_audit_logs(
        self,
        *,
        before: typing.Any = None,
        limit: int | None = None,
        user: typing.Any = None,
        type: AuditLogAction | int | None = None,
    ) -> GuildAuditLogs:
        """|coro|

        Retrieves audit logs of the guild, with every entry target resolved.

        Parameters
        ----------
        before: Optional[Union[:class:`str`, :class:`.AuditLogEntry`]]
            Retrieve entries before this entry ID.
        limit: Optional[:class:`int`]
            How many entries to retrieve.
        user: Optional[:class:`.UserResolvable`]
            Retrieve entries made by this user only.
        type: Optional[Union[:class:`AuditLogAction`, :class:`int`]]
            Retrieve entries of this action only.

        Raises
        ------
        :class:`HTTPException`
            Retrieving audit logs failed.

        Returns
        -------
        :class:`.GuildAuditLogs`
            The audit logs.
        """
        from .audit_logs import GuildAuditLogs

        data = await self.state.http.get_audit_logs(
            self.id,
            before=None if before is None else resolve_id(before),
            limit=limit,
            user_id=None if user is None else self.state.users.resolve_id(user),
            action_type=None if type is None else int(getattr(type, 'value', type)),
        )
        return await GuildAuditLogs.build(self, data)


@define(slots=True, eq=False)
class Role(Base):
    """Represents a guild role."""

    guild: Guild = field(repr=False, kw_only=True)
    """:class:`Guild`: The guild the role belongs to."""

    name: str = field(default='', repr=True, kw_only=True)
    color: int = field(default=0, repr=False, kw_only=True)
    position: int = field(default=0, repr=True, kw_only=True)
    permissions: Permissions = field(factory=Permissions, repr=False, kw_only=True)
    hoist: bool = field(default=False, repr=False, kw_only=True)
    mentionable: bool = field(default=False, repr=False, kw_only=True)
    managed: bool = field(default=False, repr=False, kw_only=True)

    def _patch(self, data: raw.Role, /) -> raw.Role:  # type: ignore[override]
        if 'name' in data:
            self.name = data['name']
        if 'color' in data:
            self.color = data['color']
        if 'position' in data:
            self.position = data['position']
        if 'permissions' in data:
            self.permissions = Permissions(int(data['permissions']))
        if 'hoist' in data:
            self.hoist = bool(data['hoist'])
        if 'mentionable' in data:
            self.mentionable = bool(data['mentionable'])
        if 'managed' in data:
            self.managed = bool(data['managed'])
        return data

    @property
    def mention(self) -> str:
        return f'<@&{self.id}>'


@define(slots=True, eq=False)
class GuildMember(Base):
    """Represents a member of a guild. The ID is the ID of the user."""

    guild: Guild = field(repr=False, kw_only=True)
    """:class:`Guild`: The guild the member belongs to."""

    user: User | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`User`]: The user the member represents."""

    nick: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The member's nickname."""

    avatar: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The member's guild avatar hash."""

    joined_at: datetime | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`~datetime.datetime`]: When the member joined the guild."""

    role_ids: list[str] = field(factory=list, repr=False, kw_only=True)
    """List[:class:`str`]: The IDs of roles the member has, excluding ``@everyone``."""

    pending: bool = field(default=False, repr=False, kw_only=True)
    """:class:`bool`: Whether the member has not yet passed membership screening."""

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        user = data.get('user')
        if user is not None:
            return cls._validate_id(user.get('id'))
        return cls._validate_id(data.get('id'))

    def _patch(self, data: raw.Member, /) -> raw.Member:  # type: ignore[override]
        if 'user' in data:
            self.user = self.state.users._add(data['user'])
        if 'nick' in data:
            self.nick = data['nick']
        if 'avatar' in data:
            self.avatar = data['avatar']
        if 'joined_at' in data:
            self.joined_at = parse_time(data['joined_at'])
        if 'roles' in data:
            self.role_ids = list(data['roles'])
        if 'pending' in data:
            self.pending = bool(data['pending'])
        return data

    def _clone(self) -> GuildMember:
        clone = Base._clone(self)
        clone.role_ids = list(self.role_ids)
        return clone

    @property
    def partial(self) -> bool:
        return self.joined_at is None

    @property
    def display_name(self) -> str | None:
        if self.nick is not None:
            return self.nick
        if self.user is None:
            return None
        return self.user.username

    @property
    def roles(self) -> list[Role]:
        """List[:class:`Role`]: The cached roles of the member, including ``@everyone``."""
        roles = []
        default_role = self.guild.default_role
        if default_role is not None:
            roles.append(default_role)
        for role_id in self.role_ids:
            role = self.guild.roles.get(role_id)
            if role is not None:
                roles.append(role)
        return roles

    @property
    def permissions(self) -> Permissions:
        """:class:`Permissions`: The guild-wide permissions of the member, computed from cached roles."""
        if self.guild.owner_id == self.id:
            return Permissions.all()

        value = 0
        for role in self.roles:
            value |= role.permissions.value

        permissions = Permissions(value)
        if permissions.administrator:
            return Permissions.all()
        return permissions

    @property
    def mention(self) -> str:
        return f'<@{self.id}>'


@define(slots=True, eq=False)
class GuildBan(Base):
    """Represents a ban in a guild. The ID is the ID of the banned user."""

    guild: Guild = field(repr=False, kw_only=True)
    user: User | None = field(default=None, repr=True, kw_only=True)
    reason: str | None = field(default=None, repr=True, kw_only=True)

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        return cls._validate_id((data.get('user') or {}).get('id'))

    def _patch(self, data: raw.Ban, /) -> raw.Ban:  # type: ignore[override]
        if 'user' in data:
            self.user = self.state.users._add(data['user'])
        if 'reason' in data:
            self.reason = data['reason']
        return data


@define(slots=True, eq=False)
class Integration(Base):
    """Represents a guild integration."""

    guild: Guild = field(repr=False, kw_only=True)
    name: str = field(default='', repr=True, kw_only=True)
    type: str = field(default='', repr=True, kw_only=True)
    enabled: bool = field(default=False, repr=False, kw_only=True)
    account: dict[str, str] | None = field(default=None, repr=False, kw_only=True)

    def _patch(self, data: raw.Integration, /) -> raw.Integration:  # type: ignore[override]
        if 'name' in data:
            self.name = data['name']
        if 'type' in data:
            self.type = data['type']
        if 'enabled' in data:
            self.enabled = bool(data['enabled'])
        if 'account' in data:
            self.account = dict(data['account'])
        return data


__all__ = ('Guild', 'Role', 'GuildMember', 'GuildBan', 'Integration')
