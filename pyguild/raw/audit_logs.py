from __future__ import annotations

import typing
import typing_extensions

from .channels import Channel
from .guilds import Integration, Webhook
from .users import User


class AuditLogChange(typing.TypedDict):
    key: str
    new_value: typing_extensions.NotRequired[typing.Any]
    old_value: typing_extensions.NotRequired[typing.Any]


class AuditEntryInfo(typing.TypedDict):
    delete_member_days: typing_extensions.NotRequired[str]
    members_removed: typing_extensions.NotRequired[str]
    channel_id: typing_extensions.NotRequired[str]
    message_id: typing_extensions.NotRequired[str]
    count: typing_extensions.NotRequired[str]
    id: typing_extensions.NotRequired[str]
    type: typing_extensions.NotRequired[str]
    role_name: typing_extensions.NotRequired[str]


class AuditLogEntry(typing.TypedDict):
    id: str
    target_id: str | None
    user_id: str | None
    action_type: int
    changes: typing_extensions.NotRequired[list[AuditLogChange]]
    options: typing_extensions.NotRequired[AuditEntryInfo]
    reason: typing_extensions.NotRequired[str]


class AuditLog(typing.TypedDict):
    audit_log_entries: list[AuditLogEntry]
    users: list[User]
    webhooks: list[Webhook]
    integrations: list[Integration]
    threads: typing_extensions.NotRequired[list[Channel]]


__all__ = (
    'AuditLogChange',
    'AuditEntryInfo',
    'AuditLogEntry',
    'AuditLog',
)
