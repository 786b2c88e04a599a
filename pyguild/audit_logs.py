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

import asyncio
from attrs import define, evolve, field
from datetime import datetime
import logging
import typing

from .collection import Collection
from .core import snowflake_time
from .enums import AuditLogAction, AuditLogActionType, AuditLogTargetType, OverwriteType, Partials
from .errors import NoData
from .guild import Integration
from .stage_instance import StageInstance
from .sticker import Sticker
from .webhook import Webhook

if typing.TYPE_CHECKING:
    from . import raw
    from .guild import Guild
    from .invite import Invite
    from .user import User

_L = logging.getLogger(__name__)


_CREATE_ACTIONS: typing.Final[frozenset[int]] = frozenset(
    a.value
    for a in (
        AuditLogAction.channel_create,
        AuditLogAction.channel_overwrite_create,
        AuditLogAction.member_ban_remove,
        AuditLogAction.bot_add,
        AuditLogAction.role_create,
        AuditLogAction.invite_create,
        AuditLogAction.webhook_create,
        AuditLogAction.emoji_create,
        AuditLogAction.message_pin,
        AuditLogAction.integration_create,
        AuditLogAction.stage_instance_create,
        AuditLogAction.sticker_create,
        AuditLogAction.thread_create,
    )
)

_DELETE_ACTIONS: typing.Final[frozenset[int]] = frozenset(
    a.value
    for a in (
        AuditLogAction.channel_delete,
        AuditLogAction.channel_overwrite_delete,
        AuditLogAction.member_kick,
        AuditLogAction.member_prune,
        AuditLogAction.member_ban_add,
        AuditLogAction.member_disconnect,
        AuditLogAction.role_delete,
        AuditLogAction.invite_delete,
        AuditLogAction.webhook_delete,
        AuditLogAction.emoji_delete,
        AuditLogAction.message_delete,
        AuditLogAction.message_bulk_delete,
        AuditLogAction.message_unpin,
        AuditLogAction.integration_delete,
        AuditLogAction.stage_instance_delete,
        AuditLogAction.sticker_delete,
        AuditLogAction.thread_delete,
    )
)

_UPDATE_ACTIONS: typing.Final[frozenset[int]] = frozenset(
    a.value
    for a in (
        AuditLogAction.guild_update,
        AuditLogAction.channel_update,
        AuditLogAction.channel_overwrite_update,
        AuditLogAction.member_update,
        AuditLogAction.member_role_update,
        AuditLogAction.member_move,
        AuditLogAction.role_update,
        AuditLogAction.invite_update,
        AuditLogAction.webhook_update,
        AuditLogAction.emoji_update,
        AuditLogAction.integration_update,
        AuditLogAction.stage_instance_update,
        AuditLogAction.sticker_update,
        AuditLogAction.thread_update,
    )
)

# Upper bounds (exclusive) of action values per target type.
_TARGET_BOUNDARIES: typing.Final[tuple[tuple[int, AuditLogTargetType], ...]] = (
    (10, AuditLogTargetType.guild),
    (20, AuditLogTargetType.channel),
    (30, AuditLogTargetType.user),
    (40, AuditLogTargetType.role),
    (50, AuditLogTargetType.invite),
    (60, AuditLogTargetType.webhook),
    (70, AuditLogTargetType.emoji),
    (80, AuditLogTargetType.message),
    (83, AuditLogTargetType.integration),
    (86, AuditLogTargetType.stage_instance),
    (100, AuditLogTargetType.sticker),
    (110, AuditLogTargetType.unknown),
    (120, AuditLogTargetType.thread),
)


def target_type_of(action: AuditLogAction | int, /) -> AuditLogTargetType:
    """Returns the kind of entity targeted by the action.

    Parameters
    ----------
    action: Union[:class:`AuditLogAction`, :class:`int`]
        The action.
    """
    value = action if isinstance(action, int) else action.value
    for boundary, target_type in _TARGET_BOUNDARIES:
        if value < boundary:
            return target_type
    return AuditLogTargetType.unknown


def action_type_of(action: AuditLogAction | int, /) -> AuditLogActionType:
    """Returns whether the action created, deleted or updated its target.

    Actions that do neither are :attr:`AuditLogActionType.all`.
    """
    value = action if isinstance(action, int) else action.value
    if value in _CREATE_ACTIONS:
        return AuditLogActionType.create
    if value in _DELETE_ACTIONS:
        return AuditLogActionType.delete
    if value in _UPDATE_ACTIONS:
        return AuditLogActionType.update
    return AuditLogActionType.all


@define(slots=True, frozen=True)
class AuditLogChange:
    """Represents a change of a single property made by an audit log action."""

    key: str = field(repr=True, kw_only=True)
    """:class:`str`: The name of the changed property."""

    old: typing.Any = field(default=None, repr=True, kw_only=True)
    """Any: The value before the change."""

    new: typing.Any = field(default=None, repr=True, kw_only=True)
    """Any: The value after the change."""


@define(slots=True, frozen=True)
class ResolvedTarget:
    """The target of an audit log entry that is known.

    The value is an entity when the target is cached, or a :class:`dict` built from
    the entry's changes when it is not.
    """

    value: typing.Any = field(repr=True, kw_only=True)


@define(slots=True, frozen=True)
class PendingTarget:
    """The target of an audit log entry that needs a request to be resolved.

    Entries returned by :meth:`GuildAuditLogs.build` never have a pending target.
    """

    kind: AuditLogTargetType = field(repr=True, kw_only=True)
    """:class:`AuditLogTargetType`: The kind of the target."""

    key: str | None = field(repr=True, kw_only=True)
    """Optional[:class:`str`]: The value identifying the target, like an invite code."""


AuditLogTarget = ResolvedTarget | PendingTarget


@define(slots=True, frozen=True, eq=False)
class AuditLogEntry:
    """Represents an audit log entry."""

    id: str = field(repr=True, kw_only=True)

    action: AuditLogAction | int = field(repr=True, kw_only=True)
    """Union[:class:`AuditLogAction`, :class:`int`]: The action. An :class:`int` if the action is unknown."""

    action_id: int = field(repr=False, kw_only=True)
    """:class:`int`: The raw action value."""

    target_type: AuditLogTargetType = field(repr=True, kw_only=True)
    action_type: AuditLogActionType = field(repr=False, kw_only=True)
    reason: str | None = field(repr=False, kw_only=True)

    executor: User | None = field(repr=False, kw_only=True)
    """Optional[:class:`User`]: The user who made the action, if cached."""

    changes: list[AuditLogChange] | None = field(repr=False, kw_only=True)

    extra: typing.Any = field(repr=False, kw_only=True)
    """Any: Information specific to the action.

    +-----------------------------------------------+---------------------------------------------------+
    | Action                                        | Value                                             |
    +-----------------------------------------------+---------------------------------------------------+
    | member prune                                  | ``{'removed': int, 'days': int}``                 |
    | member move, message delete/bulk delete       | ``{'channel': Channel or dict, 'count': int}``    |
    | message pin/unpin                             | ``{'channel': Channel or dict, 'message_id': str}``|
    | member disconnect                             | ``{'count': int}``                                |
    | channel overwrite create/update/delete        | the role or member, or ``{'id', 'name', 'type'}`` |
    | stage instance create/update/delete           | ``{'channel': Channel or dict}``                  |
    +-----------------------------------------------+---------------------------------------------------+
    """

    target: AuditLogTarget = field(repr=True, kw_only=True)
    """Union[:class:`ResolvedTarget`, :class:`PendingTarget`]: The target of the action."""

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object, /) -> bool:
        return self is other or isinstance(other, AuditLogEntry) and self.id == other.id

    @property
    def created_at(self) -> datetime:
        return snowflake_time(self.id)

    @property
    def resolved(self) -> bool:
        """:class:`bool`: Whether the target is resolved."""
        return isinstance(self.target, ResolvedTarget)

    @property
    def target_value(self) -> typing.Any:
        """Any: The resolved target.

        Raises
        ------
        :class:`NoData`
            The target is still pending.
        """
        target = self.target
        if isinstance(target, PendingTarget):
            raise NoData(target.key or self.id, 'audit log target')
        return target.value


def _flatten_changes(changes: list[AuditLogChange] | None, /, **initial: typing.Any) -> dict[str, typing.Any]:
    result = dict(initial)
    for change in changes or ():
        result[change.key] = change.old if change.new is None else change.new
    return result


class GuildAuditLogs:
    """Represents audit logs of a guild.

    Construction pre-populates users, threads, webhooks and integrations the entries
    refer to, then builds entries. Targets that cannot be resolved from cache are left
    :class:`PendingTarget`, use :meth:`build` to get logs with every target resolved.

    Attributes
    ----------
    guild: :class:`Guild`
        The guild the logs are of.
    webhooks: :class:`Collection`
        The webhooks referred to by entries, keyed by ID.
    integrations: :class:`Collection`
        The integrations referred to by entries, keyed by ID.
    entries: :class:`Collection`
        The entries, keyed by ID, in the order they were received.
    """

    __slots__ = ('guild', 'webhooks', 'integrations', 'entries')

    def __init__(self, guild: Guild, data: raw.AuditLog, /) -> None:
        state = guild.state
        self.guild: Guild = guild

        for user in data.get('users') or ():
            state.users._add(user)

        for thread in data.get('threads') or ():
            state.channels._add(thread, guild)

        self.webhooks: Collection[str, Webhook] = Collection()
        for webhook in data.get('webhooks') or ():
            self.webhooks[webhook['id']] = Webhook._from_data(state, webhook)

        self.integrations: Collection[str, Integration] = Collection()
        for integration in data.get('integrations') or ():
            self.integrations[integration['id']] = Integration._from_data(state, integration, guild=guild)

        self.entries: Collection[str, AuditLogEntry] = Collection()
        for item in data['audit_log_entries']:
            entry = self._create_entry(item)
            self.entries[entry.id] = entry

    def __repr__(self) -> str:
        return f'<GuildAuditLogs guild={self.guild!r} entries={len(self.entries)}>'

    @classmethod
    async def build(cls, guild: Guild, data: raw.AuditLog, /) -> GuildAuditLogs:
        """|coro|

        Constructs audit logs, and resolves every pending target concurrently.

        Raises
        ------
        :class:`HTTPException`
            Retrieving data needed to resolve a target failed.
        """
        logs = cls(guild, data)
        pending = [entry for entry in logs.entries.values() if isinstance(entry.target, PendingTarget)]
        if not pending:
            return logs

        _L.debug('Resolving %i pending audit log targets of guild %s', len(pending), guild.id)
        targets = await asyncio.gather(*(logs._resolve_pending(entry) for entry in pending))
        for entry, value in zip(pending, targets):
            logs.entries[entry.id] = evolve(entry, target=ResolvedTarget(value=value))
        return logs

    @property
    def resolved(self) -> bool:
        """:class:`bool`: Whether no entry has a pending target."""
        return all(entry.resolved for entry in self.entries.values())

    def _get_user(self, user_id: str, /) -> User | None:
        state = self.guild.state
        if state.allows_partial(Partials.user):
            return state.users._add({'id': user_id})
        return state.users.get(user_id)

    def _create_extra(self, action: int, options: raw.AuditEntryInfo | None, /) -> typing.Any:
        guild = self.guild
        state = guild.state
        if options is None:
            options = {}

        if action == AuditLogAction.member_prune.value:
            return {
                'removed': int(options.get('members_removed', 0)),
                'days': int(options.get('delete_member_days', 0)),
            }

        if action in (
            AuditLogAction.member_move.value,
            AuditLogAction.message_delete.value,
            AuditLogAction.message_bulk_delete.value,
        ):
            channel_id = options.get('channel_id')
            return {
                'channel': guild.channels.get(channel_id) or {'id': channel_id},  # type: ignore
                'count': int(options.get('count', 0)),
            }

        if action in (AuditLogAction.message_pin.value, AuditLogAction.message_unpin.value):
            channel_id = options.get('channel_id')
            return {
                'channel': state.channels.get(channel_id) or {'id': channel_id},  # type: ignore
                'message_id': options.get('message_id'),
            }

        if action == AuditLogAction.member_disconnect.value:
            return {'count': int(options.get('count', 0))}

        if action in (
            AuditLogAction.channel_overwrite_create.value,
            AuditLogAction.channel_overwrite_update.value,
            AuditLogAction.channel_overwrite_delete.value,
        ):
            id = options.get('id')
            type = int(options.get('type', -1))
            if type == OverwriteType.role.value:
                return guild.roles.get(id) or {  # type: ignore
                    'id': id,
                    'name': options.get('role_name'),
                    'type': OverwriteType.role.name,
                }
            if type == OverwriteType.member.value:
                return guild.members.get(id) or {'id': id, 'type': OverwriteType.member.name}  # type: ignore
            return None

        if action in (
            AuditLogAction.stage_instance_create.value,
            AuditLogAction.stage_instance_update.value,
            AuditLogAction.stage_instance_delete.value,
        ):
            channel_id = options.get('channel_id')
            return {'channel': state.channels.get(channel_id) or {'id': channel_id}}  # type: ignore

        return None

    def _create_target(
        self,
        target_type: AuditLogTargetType,
        action: int,
        target_id: str | None,
        changes: list[AuditLogChange] | None,
        options: raw.AuditEntryInfo | None,
        /,
    ) -> AuditLogTarget:
        guild = self.guild
        state = guild.state

        if target_type is AuditLogTargetType.unknown:
            return ResolvedTarget(value=_flatten_changes(changes, id=target_id))

        if target_type is AuditLogTargetType.user:
            return ResolvedTarget(value=None if target_id is None else self._get_user(target_id))

        if target_type is AuditLogTargetType.guild:
            return ResolvedTarget(value=state.guilds.get(target_id))  # type: ignore

        if target_type is AuditLogTargetType.webhook:
            webhook = self.webhooks.get(target_id)  # type: ignore
            if webhook is None:
                webhook = Webhook._from_data(state, _flatten_changes(changes, id=target_id, guild_id=guild.id))
            return ResolvedTarget(value=webhook)

        if target_type is AuditLogTargetType.invite:
            code = _flatten_changes(changes).get('code')
            return PendingTarget(kind=target_type, key=code)

        if target_type is AuditLogTargetType.message:
            if action == AuditLogAction.message_bulk_delete.value:
                return ResolvedTarget(value=guild.channels.get(target_id) or {'id': target_id})  # type: ignore
            return ResolvedTarget(value=state.users.get(target_id))  # type: ignore

        if target_type is AuditLogTargetType.integration:
            integration = self.integrations.get(target_id)  # type: ignore
            if integration is None:
                integration = Integration._from_data(state, _flatten_changes(changes, id=target_id), guild=guild)
            return ResolvedTarget(value=integration)

        if target_type in (AuditLogTargetType.channel, AuditLogTargetType.thread):
            channel = guild.channels.get(target_id)  # type: ignore
            return ResolvedTarget(value=channel or _flatten_changes(changes, id=target_id))

        if target_type is AuditLogTargetType.stage_instance:
            instance = guild.stage_instances.get(target_id)  # type: ignore
            if instance is None:
                payload = _flatten_changes(
                    changes,
                    id=target_id,
                    channel_id=(options or {}).get('channel_id'),
                    guild_id=guild.id,
                )
                instance = StageInstance._from_data(state, payload)
            return ResolvedTarget(value=instance)

        if target_type is AuditLogTargetType.sticker:
            sticker = guild.stickers.get(target_id)  # type: ignore
            if sticker is None:
                sticker = Sticker._from_data(state, _flatten_changes(changes, id=target_id))
            return ResolvedTarget(value=sticker)

        if target_id is None:
            return ResolvedTarget(value=None)

        manager = getattr(guild, f'{target_type.name}s', None)
        cached = None if manager is None else manager.get(target_id)
        return ResolvedTarget(value=cached or {'id': target_id})

    def _create_entry(self, data: raw.AuditLogEntry, /) -> AuditLogEntry:
        action_id = data['action_type']
        target_type = target_type_of(action_id)

        user_id = data.get('user_id')
        changes = None
        if 'changes' in data:
            changes = [
                AuditLogChange(key=c['key'], old=c.get('old_value'), new=c.get('new_value')) for c in data['changes']
            ]
        options = data.get('options')

        return AuditLogEntry(
            id=data['id'],
            action=AuditLogAction.try_value(action_id),
            action_id=action_id,
            target_type=target_type,
            action_type=action_type_of(action_id),
            reason=data.get('reason'),
            executor=None if user_id is None else self._get_user(user_id),
            changes=changes,
            extra=self._create_extra(action_id, options),
            target=self._create_target(target_type, action_id, data.get('target_id'), changes, options),
        )

    async def _resolve_pending(self, entry: AuditLogEntry, /) -> typing.Any:
        target = entry.target
        assert isinstance(target, PendingTarget)

        guild = self.guild
        state = guild.state
        me = state.me
        if me is None:
            raise NoData('current', 'user')

        member = await guild.members.fetch(me.id)
        if member.permissions.manage_guild:
            invites = await guild.invites.fetch()
            invite: Invite | None = invites.get(target.key) if target.key else None  # type: ignore
            return invite

        return _flatten_changes(entry.changes)


__all__ = (
    'target_type_of',
    'action_type_of',
    'AuditLogChange',
    'ResolvedTarget',
    'PendingTarget',
    'AuditLogTarget',
    'AuditLogEntry',
    'GuildAuditLogs',
)
