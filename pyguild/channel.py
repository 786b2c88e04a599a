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
from .core import UNDEFINED, UndefinedOr, resolve_id
from .enums import ChannelType
from .utils import parse_time

if typing.TYPE_CHECKING:
    from collections.abc import Iterable

    from . import raw
    from .guild import Guild, GuildMember
    from .managers import MessageManager, PermissionOverwriteManager, ThreadManager, ThreadMemberManager
    from .stage_instance import StageInstance
    from .user import User
    from .voice import VoiceState


THREAD_CHANNEL_TYPES: typing.Final[tuple[ChannelType, ...]] = (
    ChannelType.news_thread,
    ChannelType.public_thread,
    ChannelType.private_thread,
)

TEXT_BASED_CHANNEL_TYPES: typing.Final[tuple[ChannelType, ...]] = (
    ChannelType.text,
    ChannelType.private,
    ChannelType.news,
    *THREAD_CHANNEL_TYPES,
)


@define(slots=True, eq=False)
class Channel(Base):
    """The base class for every channel."""

    type: ChannelType = field(repr=True, kw_only=True)
    """:class:`ChannelType`: The type of the channel."""

    def _patch(self, data: raw.Channel, /) -> raw.Channel:  # type: ignore[override]
        if 'type' in data:
            self.type = ChannelType(data['type'])
        return data

    @property
    def partial(self) -> bool:
        return False

    @property
    def mention(self) -> str:
        return f'<#{self.id}>'

    def is_text(self) -> bool:
        """:class:`bool`: Whether messages can be sent in the channel."""
        return self.type in TEXT_BASED_CHANNEL_TYPES

    def is_thread(self) -> bool:
        return self.type in THREAD_CHANNEL_TYPES

    def is_voice(self) -> bool:
        return self.type in (ChannelType.voice, ChannelType.stage_voice)

    async def fetch(self, *, force: bool = True) -> Channel:
        """|coro|

        Retrieves the channel from API.
        """
        channel = await self.state.channels.fetch(self.id, force=force)
        assert channel is not None
        return channel


@define(slots=True, eq=False)
class DMChannel(Channel):
    """Represents a direct message channel."""

    recipient: User | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`User`]: The recipient on the other end of the channel."""

    last_message_id: str | None = field(default=None, repr=False, kw_only=True)

    messages: MessageManager = field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        from .managers import MessageManager

        self.messages = MessageManager(self)

    def _patch(self, data: raw.Channel, /) -> raw.Channel:  # type: ignore[override]
        Channel._patch(self, data)
        if 'recipients' in data:
            recipients = data['recipients']
            self.recipient = self.state.users._add(recipients[0]) if recipients else None
        if 'last_message_id' in data:
            self.last_message_id = data['last_message_id']
        return data

    @property
    def partial(self) -> bool:
        return self.last_message_id is None and self.recipient is None


@define(slots=True, eq=False)
class GuildChannel(Channel):
    """The base class for every channel in a guild."""

    guild: Guild = field(repr=False, kw_only=True)
    """:class:`Guild`: The guild the channel belongs to."""

    name: str | None = field(default=None, repr=True, kw_only=True)
    position: int = field(default=0, repr=False, kw_only=True)

    parent_id: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The ID of the category the channel is in."""

    nsfw: bool = field(default=False, repr=False, kw_only=True)
    topic: str | None = field(default=None, repr=False, kw_only=True)
    rate_limit_per_user: int = field(default=0, repr=False, kw_only=True)
    last_message_id: str | None = field(default=None, repr=False, kw_only=True)

    permission_overwrites: PermissionOverwriteManager = field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        from .managers import PermissionOverwriteManager

        self.permission_overwrites = PermissionOverwriteManager(self)

    def _patch(self, data: raw.Channel, /) -> raw.Channel:  # type: ignore[override]
        Channel._patch(self, data)
        if 'name' in data:
            self.name = data['name']
        if 'position' in data:
            self.position = data['position']
        if 'parent_id' in data:
            self.parent_id = data['parent_id']
        if 'nsfw' in data:
            self.nsfw = bool(data['nsfw'])
        if 'topic' in data:
            self.topic = data['topic']
        if 'rate_limit_per_user' in data:
            self.rate_limit_per_user = data['rate_limit_per_user'] or 0
        if 'last_message_id' in data:
            self.last_message_id = data['last_message_id']
        if 'permission_overwrites' in data:
            self.permission_overwrites.cache.clear()
            for overwrite in data['permission_overwrites']:
                self.permission_overwrites._add(overwrite)
        return data

    @property
    def guild_id(self) -> str:
        return self.guild.id

    @property
    def parent(self) -> CategoryChannel | None:
        """Optional[:class:`CategoryChannel`]: The category the channel is in."""
        if self.parent_id is None:
            return None
        parent = self.guild.channels.get(self.parent_id)
        if isinstance(parent, CategoryChannel):
            return parent
        return None

    async def edit(
        self,
        *,
        name: UndefinedOr[str] = UNDEFINED,
        type: UndefinedOr[ChannelType] = UNDEFINED,
        position: UndefinedOr[int] = UNDEFINED,
        topic: UndefinedOr[str | None] = UNDEFINED,
        nsfw: UndefinedOr[bool] = UNDEFINED,
        rate_limit_per_user: UndefinedOr[int] = UNDEFINED,
        bitrate: UndefinedOr[int] = UNDEFINED,
        user_limit: UndefinedOr[int] = UNDEFINED,
        parent: UndefinedOr[typing.Any] = UNDEFINED,
        permission_overwrites: UndefinedOr[Iterable[typing.Any]] = UNDEFINED,
        reason: str | None = None,
    ) -> GuildChannel:
        """|coro|

        Edits the channel. The response is reconciled into cache the same way
        a ``CHANNEL_UPDATE`` event would be.

        Parameters
        ----------
        permission_overwrites: UndefinedOr[Iterable[Union[:class:`PermissionOverwrite`, Dict[:class:`str`, Any]]]]
            The new overwrites. Each mapping is resolved with :meth:`PermissionOverwrite.resolve`.

        Raises
        ------
        :class:`InvalidArgument`
            An overwrite target could not be resolved.
        :class:`HTTPException`
            Editing the channel failed.

        Returns
        -------
        :class:`GuildChannel`
            The updated channel.
        """
        from .permissions import PermissionOverwrite

        payload: dict[str, typing.Any] = {}
        if name is not UNDEFINED:
            payload['name'] = name
        if type is not UNDEFINED:
            payload['type'] = type.value
        if position is not UNDEFINED:
            payload['position'] = position
        if topic is not UNDEFINED:
            payload['topic'] = topic
        if nsfw is not UNDEFINED:
            payload['nsfw'] = nsfw
        if rate_limit_per_user is not UNDEFINED:
            payload['rate_limit_per_user'] = rate_limit_per_user
        if bitrate is not UNDEFINED:
            payload['bitrate'] = bitrate
        if user_limit is not UNDEFINED:
            payload['user_limit'] = user_limit
        if parent is not UNDEFINED:
            payload['parent_id'] = None if parent is None else resolve_id(parent)
        if permission_overwrites is not UNDEFINED:
            payload['permission_overwrites'] = [
                PermissionOverwrite.resolve(overwrite, self.guild) for overwrite in permission_overwrites
            ]

        data = await self.state.http.edit_channel(self.id, payload, reason=reason)
        return self.state.actions.channel_update.handle(data)['updated']


@define(slots=True, eq=False)
class TextChannel(GuildChannel):
    """Represents a text channel in a guild."""

    messages: MessageManager = field(init=False, repr=False)
    threads: ThreadManager = field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        from .managers import MessageManager, ThreadManager

        GuildChannel.__attrs_post_init__(self)
        self.messages = MessageManager(self)
        self.threads = ThreadManager(self)


@define(slots=True, eq=False)
class NewsChannel(TextChannel):
    """Represents a news channel in a guild."""


@define(slots=True, eq=False)
class CategoryChannel(GuildChannel):
    """Represents a category in a guild."""

    @property
    def children(self) -> list[GuildChannel]:
        """List[:class:`GuildChannel`]: The cached channels within the category."""
        return [
            channel
            for channel in self.guild.channels.cache.values()
            if isinstance(channel, GuildChannel) and channel.parent_id == self.id
        ]


@define(slots=True, eq=False)
class VoiceChannel(GuildChannel):
    """Represents a voice channel in a guild."""

    bitrate: int = field(default=64000, repr=False, kw_only=True)
    user_limit: int = field(default=0, repr=False, kw_only=True)
    rtc_region: str | None = field(default=None, repr=False, kw_only=True)

    def _patch(self, data: raw.Channel, /) -> raw.Channel:  # type: ignore[override]
        GuildChannel._patch(self, data)
        if 'bitrate' in data:
            self.bitrate = data['bitrate']
        if 'user_limit' in data:
            self.user_limit = data['user_limit']
        if 'rtc_region' in data:
            self.rtc_region = data['rtc_region']
        return data

    @property
    def voice_states(self) -> list[VoiceState]:
        """List[:class:`VoiceState`]: The cached voice states connected to the channel."""
        return [vs for vs in self.guild.voice_states.cache.values() if vs.channel_id == self.id]

    @property
    def members(self) -> list[GuildMember]:
        members = []
        for voice_state in self.voice_states:
            member = voice_state.member
            if member is not None:
                members.append(member)
        return members


@define(slots=True, eq=False)
class StageChannel(VoiceChannel):
    """Represents a stage channel in a guild."""

    @property
    def stage_instance(self) -> StageInstance | None:
        """Optional[:class:`StageInstance`]: The live stage instance of the channel, if cached."""
        return self.guild.stage_instances.cache.find(lambda instance: instance.channel_id == self.id)

    async def create_stage_instance(self, *, topic: str, privacy_level: typing.Any = None) -> StageInstance:
        """|coro|

        Creates a stage instance in this channel.
        """
        return await self.guild.stage_instances.create(self, topic=topic, privacy_level=privacy_level)


@define(slots=True, eq=False)
class ThreadChannel(Channel):
    """Represents a thread channel.

    Keys missing from updates keep their previous values.
    """

    guild: Guild = field(repr=False, kw_only=True)
    """:class:`Guild`: The guild the thread belongs to."""

    name: str | None = field(default=None, repr=True, kw_only=True)

    parent_id: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The ID of the channel the thread was created in."""

    owner_id: str | None = field(default=None, repr=False, kw_only=True)
    last_message_id: str | None = field(default=None, repr=False, kw_only=True)
    message_count: int | None = field(default=None, repr=False, kw_only=True)
    member_count: int | None = field(default=None, repr=False, kw_only=True)
    rate_limit_per_user: int | None = field(default=None, repr=False, kw_only=True)
    archived: bool | None = field(default=None, repr=False, kw_only=True)
    locked: bool | None = field(default=None, repr=False, kw_only=True)
    invitable: bool | None = field(default=None, repr=False, kw_only=True)
    auto_archive_duration: int | None = field(default=None, repr=False, kw_only=True)
    archive_timestamp: datetime | None = field(default=None, repr=False, kw_only=True)

    members: ThreadMemberManager = field(init=False, repr=False)
    messages: MessageManager = field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        from .managers import MessageManager, ThreadMemberManager

        self.members = ThreadMemberManager(self)
        self.messages = MessageManager(self)

    def _patch(self, data: raw.Channel, /) -> raw.Channel:  # type: ignore[override]
        Channel._patch(self, data)
        if 'name' in data:
            self.name = data['name']
        if 'parent_id' in data:
            self.parent_id = data['parent_id']
        if 'owner_id' in data:
            self.owner_id = data['owner_id']
        if 'last_message_id' in data:
            self.last_message_id = data['last_message_id']
        if 'message_count' in data:
            self.message_count = data['message_count']
        if 'member_count' in data:
            self.member_count = data['member_count']
        if 'rate_limit_per_user' in data:
            self.rate_limit_per_user = data['rate_limit_per_user'] or 0

        metadata = data.get('thread_metadata')
        if metadata is not None:
            self.locked = metadata.get('locked', False)
            if 'invitable' in metadata:
                self.invitable = metadata['invitable']
            self.archived = metadata['archived']
            self.auto_archive_duration = metadata['auto_archive_duration']
            self.archive_timestamp = parse_time(metadata['archive_timestamp'])

        member = data.get('member')
        me = self.state.me
        if member is not None and me is not None:
            self.members._add({'user_id': me.id, **member})

        return data

    @property
    def guild_id(self) -> str:
        return self.guild.id

    @property
    def partial(self) -> bool:
        return self.archived is None

    @property
    def parent(self) -> TextChannel | None:
        """Optional[Union[:class:`TextChannel`, :class:`NewsChannel`]]: The channel the thread was created in."""
        if self.parent_id is None:
            return None
        parent = self.guild.channels.get(self.parent_id)
        if isinstance(parent, TextChannel):
            return parent
        return None

    @property
    def joined(self) -> bool:
        """:class:`bool`: Whether the connected user is a member of the thread."""
        me = self.state.me
        return me is not None and me.id in self.members.cache

    async def edit(
        self,
        *,
        name: UndefinedOr[str] = UNDEFINED,
        archived: UndefinedOr[bool] = UNDEFINED,
        auto_archive_duration: UndefinedOr[int] = UNDEFINED,
        rate_limit_per_user: UndefinedOr[int] = UNDEFINED,
        locked: UndefinedOr[bool] = UNDEFINED,
        invitable: UndefinedOr[bool] = UNDEFINED,
        reason: str | None = None,
    ) -> ThreadChannel:
        """|coro|

        Edits the thread.

        Raises
        ------
        :class:`HTTPException`
            Editing the thread failed.

        Returns
        -------
        :class:`ThreadChannel`
            The updated thread.
        """
        payload: dict[str, typing.Any] = {}
        if name is not UNDEFINED:
            payload['name'] = name
        if archived is not UNDEFINED:
            payload['archived'] = archived
        if auto_archive_duration is not UNDEFINED:
            payload['auto_archive_duration'] = auto_archive_duration
        if rate_limit_per_user is not UNDEFINED:
            payload['rate_limit_per_user'] = rate_limit_per_user
        if locked is not UNDEFINED:
            payload['locked'] = locked
        if invitable is not UNDEFINED:
            payload['invitable'] = invitable

        data = await self.state.http.edit_channel(self.id, payload, reason=reason)
        return self.state.actions.channel_update.handle(data)['updated']


@define(slots=True, eq=False)
class ThreadMember(Base):
    """Represents a member of a thread. The ID is the ID of the user."""

    thread: ThreadChannel = field(repr=False, kw_only=True)
    """:class:`ThreadChannel`: The thread the member is in."""

    joined_timestamp: datetime | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`~datetime.datetime`]: When the member joined the thread."""

    flags: int = field(default=0, repr=False, kw_only=True)

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        return cls._validate_id(data.get('user_id'))

    def _patch(self, data: raw.ThreadMember, /) -> raw.ThreadMember:  # type: ignore[override]
        if 'join_timestamp' in data:
            self.joined_timestamp = parse_time(data['join_timestamp'])
        if 'flags' in data:
            self.flags = data['flags']
        return data

    @property
    def guild_member(self) -> GuildMember | None:
        """Optional[:class:`GuildMember`]: The guild member of the thread member, if cached."""
        return self.thread.guild.members.get(self.id)

    @property
    def user(self) -> User | None:
        return self.state.users.get(self.id)


__all__ = (
    'THREAD_CHANNEL_TYPES',
    'TEXT_BASED_CHANNEL_TYPES',
    'Channel',
    'DMChannel',
    'GuildChannel',
    'TextChannel',
    'NewsChannel',
    'CategoryChannel',
    'VoiceChannel',
    'StageChannel',
    'ThreadChannel',
    'ThreadMember',
)
