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

import logging
import typing

from .application_command import ApplicationCommand, transform_option
from .channel import Channel, GuildChannel, ThreadChannel, ThreadMember
from .collection import Collection
from .core import UNDEFINED, UndefinedOr
from .enums import ApplicationCommandPermissionType, OverwriteType, PrivacyLevel
from .errors import InvalidArgument, NoData
from .guild import Guild, GuildBan, GuildMember, Role
from .invite import Invite
from .message import Message, MessageReaction
from .permissions import PermissionOverwrite, resolve_overwrite_options
from .presence import Presence
from .stage_instance import StageInstance
from .sticker import Sticker
from .user import User
from .voice import VoiceState

if typing.TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from . import raw
    from .base import Base
    from .http import File
    from .state import State

_L = logging.getLogger(__name__)

E = typing.TypeVar('E', bound='Base')


class CachedManager(typing.Generic[E]):
    """Owns a cache of one kind of entity.

    Entities are added with :meth:`_add`, which patches an existing entity in place
    instead of creating a second instance for the same ID.

    Attributes
    ----------
    state: :class:`State`
        The state.
    holds: Type[:class:`Base`]
        The class of entities this manager holds.
    cache: :class:`Collection`
        The cached entities, keyed by ID. Treat it as read-only.
    """

    __slots__ = ('state', 'holds', 'cache', '_extras')

    resolvable_name: typing.ClassVar[str] = 'Resolvable'

    def __init__(self, state: State, holds: type[E], /, **extras: typing.Any) -> None:
        self.state: State = state
        self.holds: type[E] = holds
        self.cache: Collection[str, E] = Collection()
        self._extras: dict[str, typing.Any] = extras

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} holds={self.holds.__name__} size={len(self.cache)}>'

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, id: str, /) -> bool:
        return id in self.cache

    def get(self, id: str, /) -> E | None:
        """Retrieves an entity from cache."""
        return self.cache.get(id)

    def _add(self, data: dict[str, typing.Any], /, *, cache: bool = True, id: str | None = None) -> E:
        """Adds an entity to cache, or patches the cached one.

        Parameters
        ----------
        data: Dict[:class:`str`, Any]
            The entity data.
        cache: :class:`bool`
            Whether to store a newly constructed entity. Cached entities are patched regardless.
        id: Optional[:class:`str`]
            The key to use instead of extracting it from ``data``.

        Raises
        ------
        :class:`InvalidData`
            The data has no valid ID.
        """
        key = self.holds._extract_id(data) if id is None else id
        existing = self.cache.get(key)
        if existing is not None:
            existing._patch(data)
            return existing

        if id is None:
            entity = self.holds._from_data(self.state, data, **self._extras)
        else:
            entity = self.holds(state=self.state, id=id, **self._extras)
            entity._patch(data)

        if cache:
            self.cache[key] = entity
        return entity

    def _remove(self, id: str, /) -> E | None:
        """Removes an entity from cache and marks it deleted.

        Returns
        -------
        Optional[:class:`Base`]
            The removed entity, if it was cached.
        """
        entity = self.cache.pop(id, None)
        if entity is not None:
            entity.deleted = True
        return entity

    def _get_cached(self, id: str, /, *, force: bool) -> E | None:
        if force:
            return None
        existing = self.cache.get(id)
        if existing is None or getattr(existing, 'partial', False):
            return None
        return existing

    def resolve(self, resolvable: typing.Any, /) -> E | None:
        """Resolves an entity or ID into a cached entity.

        Returns
        -------
        Optional[:class:`Base`]
            The entity, or ``None`` if it could not be resolved.
        """
        if isinstance(resolvable, self.holds):
            return resolvable
        if isinstance(resolvable, str):
            return self.cache.get(resolvable)
        return None

    def resolve_id(self, resolvable: typing.Any, /) -> str | None:
        """Resolves an entity or ID into an ID.

        Returns
        -------
        Optional[:class:`str`]
            The ID, or ``None`` if it could not be resolved.
        """
        if isinstance(resolvable, self.holds):
            return resolvable.id
        if isinstance(resolvable, str):
            return resolvable
        return None

    def require_id(self, resolvable: typing.Any, name: str, /) -> str:
        """Resolves an entity or ID into an ID, for operations that cannot continue without one.

        Raises
        ------
        :class:`InvalidArgument`
            The value could not be resolved.
        """
        id = self.resolve_id(resolvable)
        if id is None:
            raise InvalidArgument('INVALID_TYPE', name, self.resolvable_name)
        return id


class UserManager(CachedManager[User]):
    """Manages users the library has seen."""

    __slots__ = ()

    resolvable_name = 'UserResolvable'

    def __init__(self, state: State, /) -> None:
        super().__init__(state, User)

    def resolve(self, resolvable: typing.Any, /) -> User | None:
        """Resolves a user, member, thread member, message or ID into a user.

        Messages resolve to their author.
        """
        if isinstance(resolvable, GuildMember):
            return resolvable.user
        if isinstance(resolvable, ThreadMember):
            return resolvable.user
        if isinstance(resolvable, Message):
            return resolvable.author
        return super().resolve(resolvable)

    def resolve_id(self, resolvable: typing.Any, /) -> str | None:
        if isinstance(resolvable, (GuildMember, ThreadMember)):
            return resolvable.id
        if isinstance(resolvable, Message):
            author = resolvable.author
            return None if author is None else author.id
        return super().resolve_id(resolvable)

    async def fetch(self, user: typing.Any, /, *, cache: bool = True, force: bool = False) -> User:
        """|coro|

        Retrieves a user, from cache if it is cached and not partial.

        Parameters
        ----------
        user: :class:`UserResolvable`
            The user to retrieve.
        cache: :class:`bool`
            Whether to cache the user if it was not cached.
        force: :class:`bool`
            Whether to skip the cache check and request the API.

        Raises
        ------
        :class:`InvalidArgument`
            The user could not be resolved.
        :class:`HTTPException`
            Retrieving the user failed.
        """
        id = self.require_id(user, 'user')
        existing = self._get_cached(id, force=force)
        if existing is not None:
            return existing
        data = await self.state.http.get_user(id)
        return self._add(data, cache=cache)


class ChannelManager(CachedManager[Channel]):
    """Manages every cached channel.

    Guild channels and threads are also registered in their guild's :attr:`Guild.channels`,
    and threads in their parent's :attr:`TextChannel.threads`. These hold the same objects.
    """

    __slots__ = ()

    resolvable_name = 'ChannelResolvable'

    def __init__(self, state: State, /) -> None:
        super().__init__(state, Channel)

    def _register(self, channel: Channel, guild: Guild | None = None, /) -> None:
        if guild is None:
            guild = getattr(channel, 'guild', None)
        if guild is not None:
            guild.channels._register(channel)
        if isinstance(channel, ThreadChannel):
            parent = channel.parent
            if parent is not None:
                parent.threads._register(channel)

    def _add(  # type: ignore[override]
        self,
        data: raw.Channel,
        guild: Guild | None = None,
        /,
        *,
        cache: bool = True,
    ) -> Channel | None:
        """Adds a channel to cache, or patches the cached one.

        Returns
        -------
        Optional[:class:`Channel`]
            The channel, or ``None`` if its type is unknown or its guild is not cached.
        """
        existing = self.cache.get(Channel._extract_id(data))
        if existing is not None:
            existing._patch(data)
            self._register(existing, guild)
            return existing

        channel = self.state.parser.create_channel(data, guild)
        if channel is None:
            _L.debug('Failed to find guild, or unknown type for channel %s %s', data.get('id'), data.get('type'))
            return None

        if cache:
            self.cache[channel.id] = channel
            self._register(channel)
        return channel

    def _remove(self, id: str, /) -> Channel | None:
        channel = self.cache.get(id)
        if channel is None:
            return None

        guild = getattr(channel, 'guild', None)
        if guild is not None:
            guild.channels.cache.pop(id, None)
        if isinstance(channel, ThreadChannel):
            parent = channel.parent
            if parent is not None:
                parent.threads.cache.pop(id, None)

        return super()._remove(id)

    async def fetch(self, channel: typing.Any, /, *, cache: bool = True, force: bool = False) -> Channel | None:
        """|coro|

        Retrieves a channel, from cache if it is cached and not partial.

        Raises
        ------
        :class:`InvalidArgument`
            The channel could not be resolved.
        :class:`HTTPException`
            Retrieving the channel failed.
        """
        id = self.require_id(channel, 'channel')
        existing = self._get_cached(id, force=force)
        if existing is not None:
            return existing
        data = await self.state.http.get_channel(id)
        return self._add(data, None, cache=cache)


class GuildManager(CachedManager[Guild]):
    """Manages cached guilds."""

    __slots__ = ()

    resolvable_name = 'GuildResolvable'

    def __init__(self, state: State, /) -> None:
        super().__init__(state, Guild)

    def _owner_of(self, resolvable: typing.Any, /) -> Guild | None:
        if isinstance(resolvable, (GuildChannel, ThreadChannel, GuildMember, Role)):
            return resolvable.guild
        return None

    def resolve(self, resolvable: typing.Any, /) -> Guild | None:
        """Resolves a guild, guild ID, or an entity owned by a guild into a guild."""
        guild = self._owner_of(resolvable)
        if guild is not None:
            return guild
        return super().resolve(resolvable)

    def resolve_id(self, resolvable: typing.Any, /) -> str | None:
        guild = self._owner_of(resolvable)
        if guild is not None:
            return guild.id
        return super().resolve_id(resolvable)

    async def fetch(self, guild: typing.Any, /, *, cache: bool = True, force: bool = False) -> Guild:
        """|coro|

        Retrieves a guild, from cache if it is cached and available.
        """
        id = self.require_id(guild, 'guild')
        existing = self._get_cached(id, force=force)
        if existing is not None:
            return existing
        data = await self.state.http.get_guild(id)
        return self._add(data, cache=cache)


class GuildChannelManager(CachedManager[Channel]):
    """A view of channels and threads in a guild.

    Channels are owned by :attr:`State.channels`, this view only indexes them.
    """

    __slots__ = ('guild',)

    resolvable_name = 'GuildChannelResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, Channel)
        self.guild: Guild = guild

    def _register(self, channel: Channel, /) -> None:
        self.cache[channel.id] = channel

    def _add(self, data: raw.Channel, /, *, cache: bool = True, id: str | None = None) -> Channel | None:  # type: ignore[override]
        return self.state.channels._add(data, self.guild, cache=cache)

    async def fetch(self, channel: typing.Any, /, *, cache: bool = True, force: bool = False) -> Channel | None:
        """|coro|

        Retrieves a channel in the guild.
        """
        return await self.state.channels.fetch(self.require_id(channel, 'channel'), cache=cache, force=force)


class ThreadManager(CachedManager[ThreadChannel]):
    """A view of threads created in a channel."""

    __slots__ = ('channel',)

    resolvable_name = 'ThreadChannelResolvable'

    def __init__(self, channel: GuildChannel, /) -> None:
        super().__init__(channel.state, ThreadChannel)
        self.channel: GuildChannel = channel

    def _register(self, thread: ThreadChannel, /) -> None:
        self.cache[thread.id] = thread

    def _add(self, data: raw.Channel, /, *, cache: bool = True, id: str | None = None) -> ThreadChannel | None:  # type: ignore[override]
        return self.state.channels._add(data, self.channel.guild, cache=cache)  # type: ignore


class GuildMemberManager(CachedManager[GuildMember]):
    """Manages members of a guild, keyed by user ID. Adding a member also adds its user."""

    __slots__ = ('guild',)

    resolvable_name = 'GuildMemberResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, GuildMember, guild=guild)
        self.guild: Guild = guild

    def resolve(self, resolvable: typing.Any, /) -> GuildMember | None:
        if isinstance(resolvable, User):
            return self.cache.get(resolvable.id)
        return super().resolve(resolvable)

    def resolve_id(self, resolvable: typing.Any, /) -> str | None:
        if isinstance(resolvable, User):
            return resolvable.id
        return super().resolve_id(resolvable)

    async def fetch(self, user: typing.Any, /, *, cache: bool = True, force: bool = False) -> GuildMember:
        """|coro|

        Retrieves a member of the guild.

        Raises
        ------
        :class:`InvalidArgument`
            The user could not be resolved.
        :class:`HTTPException`
            Retrieving the member failed.
        """
        id = self.require_id(user, 'user')
        existing = self._get_cached(id, force=force)
        if existing is not None:
            return existing
        data = await self.state.http.get_member(self.guild.id, id)
        return self._add(data, cache=cache)


class RoleManager(CachedManager[Role]):
    __slots__ = ('guild',)

    resolvable_name = 'RoleResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, Role, guild=guild)
        self.guild: Guild = guild


class PresenceManager(CachedManager[Presence]):
    """Manages presences in a guild, keyed by user ID."""

    __slots__ = ('guild',)

    resolvable_name = 'PresenceResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, Presence, guild=guild)
        self.guild: Guild = guild


class VoiceStateManager(CachedManager[VoiceState]):
    """Manages voice states in a guild, keyed by user ID."""

    __slots__ = ('guild',)

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, VoiceState, guild=guild)
        self.guild: Guild = guild


class ThreadMemberManager(CachedManager[ThreadMember]):
    """Manages members of a thread, keyed by user ID."""

    __slots__ = ('thread',)

    resolvable_name = 'ThreadMemberResolvable'

    def __init__(self, thread: ThreadChannel, /) -> None:
        super().__init__(thread.state, ThreadMember, thread=thread)
        self.thread: ThreadChannel = thread

    def _add(self, data: raw.ThreadMember, /, *, cache: bool = True, id: str | None = None) -> ThreadMember:  # type: ignore[override]
        member = data.get('member')
        if member is not None:
            self.thread.guild.members._add(member)
        return super()._add(data, cache=cache, id=id)  # type: ignore

    def resolve(self, resolvable: typing.Any, /) -> ThreadMember | None:
        if isinstance(resolvable, (GuildMember, User)):
            return self.cache.get(resolvable.id)
        return super().resolve(resolvable)

    def resolve_id(self, resolvable: typing.Any, /) -> str | None:
        if isinstance(resolvable, (GuildMember, User)):
            return resolvable.id
        return super().resolve_id(resolvable)


class MessageManager(CachedManager[Message]):
    """Manages messages of a channel."""

    __slots__ = ('channel',)

    resolvable_name = 'MessageResolvable'

    def __init__(self, channel: Channel, /) -> None:
        super().__init__(channel.state, Message, channel=channel)
        self.channel: Channel = channel

    async def fetch(self, message: typing.Any, /, *, cache: bool = True, force: bool = False) -> Message:
        """|coro|

        Retrieves a message of the channel, from cache if it is cached and not partial.

        Raises
        ------
        :class:`InvalidArgument`
            The message could not be resolved.
        :class:`HTTPException`
            Retrieving the message failed.
        """
        id = self.require_id(message, 'message')
        existing = self._get_cached(id, force=force)
        if existing is not None:
            return existing
        data = await self.state.http.get_message(self.channel.id, id)
        return self._add(data, cache=cache)


class ReactionManager(CachedManager[MessageReaction]):
    """Manages reactions on a message, keyed by emoji ID or, for unicode emojis, its name."""

    __slots__ = ('message',)

    resolvable_name = 'MessageReactionResolvable'

    def __init__(self, message: Message, /) -> None:
        super().__init__(message.state, MessageReaction, message=message)
        self.message: Message = message

    async def remove_all(self) -> Message:
        """|coro|

        Removes every reaction from the message.

        Raises
        ------
        :class:`HTTPException`
            Removing the reactions failed.
        """
        message = self.message
        await self.state.http.clear_reactions(message.channel.id, message.id)
        self.cache.clear()
        return message


class PermissionOverwriteManager(CachedManager[PermissionOverwrite]):
    """Manages permission overwrites of a guild channel, keyed by target ID."""

    __slots__ = ('channel',)

    resolvable_name = 'PermissionOverwriteResolvable'

    def __init__(self, channel: GuildChannel, /) -> None:
        super().__init__(channel.state, PermissionOverwrite, channel=channel)
        self.channel: GuildChannel = channel

    def _resolve_target_id(self, user_or_role: typing.Any, /) -> str | None:
        return self.channel.guild.roles.resolve_id(user_or_role) or self.state.users.resolve_id(user_or_role)

    async def set(self, overwrites: typing.Any, /, *, reason: str | None = None) -> GuildChannel:
        """|coro|

        Replaces every overwrite of the channel.

        Parameters
        ----------
        overwrites: Union[List, Tuple, :class:`Collection`]
            The new overwrites. See :meth:`GuildChannel.edit`.

        Raises
        ------
        :class:`InvalidArgument`
            The overwrites are not a list, tuple or :class:`Collection`.
        :class:`HTTPException`
            Editing the channel failed.
        """
        if isinstance(overwrites, Collection):
            overwrites = list(overwrites.values())
        elif not isinstance(overwrites, (list, tuple)):
            raise InvalidArgument('INVALID_TYPE', 'overwrites', 'Array or Collection of Permission Overwrites')
        return await self.channel.edit(permission_overwrites=overwrites, reason=reason)

    async def upsert(
        self,
        user_or_role: typing.Any,
        options: Mapping[str, bool | None],
        /,
        *,
        type: OverwriteType | int | None = None,
        reason: str | None = None,
        existing: PermissionOverwrite | None = None,
    ) -> GuildChannel:
        """|coro|

        Creates or replaces the overwrite of a role or user.

        Parameters
        ----------
        user_or_role: Union[:class:`RoleResolvable`, :class:`UserResolvable`]
            The target of the overwrite.
        options: Mapping[:class:`str`, Optional[:class:`bool`]]
            The permission names mapped to ``True`` to allow, ``False`` to deny,
            or ``None`` to inherit.
        type: Optional[Union[:class:`OverwriteType`, :class:`int`]]
            The type of target. Inferred from the target when not given.
        existing: Optional[:class:`PermissionOverwrite`]
            The overwrite to use as base for ``options``.

        Raises
        ------
        :class:`InvalidArgument`
            The target could not be resolved, or a permission name is unknown.
        :class:`HTTPException`
            Updating the overwrite failed.
        """
        id = self._resolve_target_id(user_or_role)

        if type is None:
            target = self.channel.guild.roles.resolve(user_or_role) or self.state.users.resolve(user_or_role)
            if target is None:
                raise InvalidArgument('INVALID_TYPE', 'parameter', 'User nor a Role')
            type = OverwriteType.role if isinstance(target, Role) else OverwriteType.member
        elif isinstance(type, int):
            type = OverwriteType(type)

        if id is None:
            raise InvalidArgument('INVALID_TYPE', 'parameter', 'User nor a Role')

        if existing is None:
            allow, deny = resolve_overwrite_options(options)
        else:
            allow, deny = resolve_overwrite_options(options, allow=existing.allow, deny=existing.deny)

        await self.state.http.edit_channel_permissions(
            self.channel.id,
            id,
            {'id': id, 'type': type.value, 'allow': str(allow.value), 'deny': str(deny.value)},
            reason=reason,
        )
        return self.channel

    async def create(
        self,
        user_or_role: typing.Any,
        options: Mapping[str, bool | None],
        /,
        *,
        type: OverwriteType | int | None = None,
        reason: str | None = None,
    ) -> GuildChannel:
        """|coro|

        Creates an overwrite, replacing the existing one for the same target.
        """
        return await self.upsert(user_or_role, options, type=type, reason=reason)

    async def edit(
        self,
        user_or_role: typing.Any,
        options: Mapping[str, bool | None],
        /,
        *,
        type: OverwriteType | int | None = None,
        reason: str | None = None,
    ) -> GuildChannel:
        """|coro|

        Edits an overwrite, keeping permissions not mentioned in ``options``.
        """
        id = self._resolve_target_id(user_or_role)
        existing = None if id is None else self.cache.get(id)
        return await self.upsert(user_or_role, options, type=type, reason=reason, existing=existing)

    async def delete(self, user_or_role: typing.Any, /, *, reason: str | None = None) -> GuildChannel:
        """|coro|

        Deletes the overwrite of a role or user.

        Raises
        ------
        :class:`InvalidArgument`
            The target could not be resolved.
        :class:`HTTPException`
            Deleting the overwrite failed.
        """
        id = self._resolve_target_id(user_or_role)
        if id is None:
            raise InvalidArgument('INVALID_TYPE', 'parameter', 'User nor a Role')
        await self.state.http.delete_channel_permissions(self.channel.id, id, reason=reason)
        return self.channel


class GuildStickerManager(CachedManager[Sticker]):
    """Manages stickers of a guild."""

    __slots__ = ('guild',)

    resolvable_name = 'StickerResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, Sticker)
        self.guild: Guild = guild

    def _add(self, data: raw.Sticker, /, *, cache: bool = True, id: str | None = None) -> Sticker:  # type: ignore[override]
        if 'guild_id' not in data:
            data = {**data, 'guild_id': self.guild.id}
        return super()._add(data, cache=cache, id=id)  # type: ignore

    async def create(
        self,
        file: File,
        name: str,
        tags: str,
        /,
        *,
        description: str | None = None,
        reason: str | None = None,
    ) -> Sticker:
        """|coro|

        Creates a sticker in the guild.

        Parameters
        ----------
        file: :class:`File`
            The sticker image.
        name: :class:`str`
            The sticker name.
        tags: :class:`str`
            The autocomplete tags, separated by ``', '``.
        description: Optional[:class:`str`]
            The sticker description.

        Raises
        ------
        :class:`HTTPException`
            Creating the sticker failed.
        """
        form = {'name': name, 'tags': tags, 'description': description or ''}
        data = await self.state.http.create_sticker(self.guild.id, form, file, reason=reason)
        return self.state.actions.guild_sticker_create.handle(self.guild, data)['sticker']

    async def edit(
        self,
        sticker: typing.Any,
        /,
        *,
        name: UndefinedOr[str] = UNDEFINED,
        description: UndefinedOr[str | None] = UNDEFINED,
        tags: UndefinedOr[str] = UNDEFINED,
        reason: str | None = None,
    ) -> Sticker:
        """|coro|

        Edits a sticker of the guild.

        A cached sticker is left untouched until the update event arrives, and
        an updated copy is returned instead.

        Raises
        ------
        :class:`InvalidArgument`
            The sticker could not be resolved.
        :class:`HTTPException`
            Editing the sticker failed.
        """
        id = self.require_id(sticker, 'sticker')

        payload: dict[str, typing.Any] = {}
        if name is not UNDEFINED:
            payload['name'] = name
        if description is not UNDEFINED:
            payload['description'] = description
        if tags is not UNDEFINED:
            payload['tags'] = tags

        data = await self.state.http.edit_sticker(self.guild.id, id, payload, reason=reason)

        existing = self.cache.get(id)
        if existing is not None:
            clone = existing._clone()
            clone._patch(data)
            return clone
        return self._add(data)

    async def delete(self, sticker: typing.Any, /, *, reason: str | None = None) -> None:
        """|coro|

        Deletes a sticker of the guild.

        Raises
        ------
        :class:`InvalidArgument`
            The sticker could not be resolved.
        :class:`HTTPException`
            Deleting the sticker failed.
        """
        id = self.require_id(sticker, 'sticker')
        await self.state.http.delete_sticker(self.guild.id, id, reason=reason)

    @typing.overload
    async def fetch(self, sticker: None = ..., /, *, cache: bool = ..., force: bool = ...) -> Collection[str, Sticker]: ...

    @typing.overload
    async def fetch(self, sticker: str, /, *, cache: bool = ..., force: bool = ...) -> Sticker: ...

    async def fetch(
        self, sticker: str | None = None, /, *, cache: bool = True, force: bool = False
    ) -> Sticker | Collection[str, Sticker]:
        """|coro|

        Retrieves one sticker, or every sticker of the guild when ``sticker`` is not given.
        """
        if sticker is not None:
            if not force:
                existing = self.cache.get(sticker)
                if existing is not None:
                    return existing
            data = await self.state.http.get_sticker(self.guild.id, sticker)
            return self._add(data, cache=cache)

        stickers = await self.state.http.get_stickers(self.guild.id)
        result: Collection[str, Sticker] = Collection()
        for payload in stickers:
            s = self._add(payload, cache=cache)
            result[s.id] = s
        return result


def _privacy_level_value(privacy_level: typing.Any, /) -> int:
    if isinstance(privacy_level, int):
        return privacy_level
    if isinstance(privacy_level, str):
        return PrivacyLevel[privacy_level.lower()].value
    return privacy_level.value


class StageInstanceManager(CachedManager[StageInstance]):
    """Manages live stages in a guild."""

    __slots__ = ('guild',)

    resolvable_name = 'StageInstanceResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, StageInstance)
        self.guild: Guild = guild

    def _require_channel_id(self, channel: typing.Any, /) -> str:
        id = self.guild.channels.resolve_id(channel)
        if id is None:
            raise InvalidArgument('STAGE_CHANNEL_RESOLVE')
        return id

    async def create(self, channel: typing.Any, /, *, topic: str, privacy_level: typing.Any = None) -> StageInstance:
        """|coro|

        Starts a stage in a stage channel.

        Parameters
        ----------
        channel: :class:`StageChannelResolvable`
            The stage channel.
        topic: :class:`str`
            The topic of the stage.
        privacy_level: Optional[Union[:class:`PrivacyLevel`, :class:`int`, :class:`str`]]
            The privacy level of the stage.

        Raises
        ------
        :class:`InvalidArgument`
            The channel could not be resolved.
        :class:`HTTPException`
            Creating the stage instance failed.
        """
        channel_id = self._require_channel_id(channel)
        payload: dict[str, typing.Any] = {'channel_id': channel_id, 'topic': topic}
        if privacy_level:
            payload['privacy_level'] = _privacy_level_value(privacy_level)
        data = await self.state.http.create_stage_instance(payload)
        return self._add(data)

    async def fetch(self, channel: typing.Any, /, *, cache: bool = True, force: bool = False) -> StageInstance:
        """|coro|

        Retrieves the stage instance of a stage channel.

        Raises
        ------
        :class:`InvalidArgument`
            The channel could not be resolved.
        :class:`HTTPException`
            Retrieving the stage instance failed.
        """
        channel_id = self._require_channel_id(channel)
        if not force:
            existing = self.cache.find(lambda instance: instance.channel_id == channel_id)
            if existing is not None:
                return existing
        data = await self.state.http.get_stage_instance(channel_id)
        return self._add(data, cache=cache)

    async def edit(
        self,
        channel: typing.Any,
        /,
        *,
        topic: UndefinedOr[str] = UNDEFINED,
        privacy_level: UndefinedOr[typing.Any] = UNDEFINED,
    ) -> StageInstance:
        """|coro|

        Edits the stage instance of a stage channel.

        A cached stage instance is left untouched until the update event arrives,
        and an updated copy is returned instead.
        """
        channel_id = self._require_channel_id(channel)

        payload: dict[str, typing.Any] = {}
        if topic is not UNDEFINED:
            payload['topic'] = topic
        if privacy_level is not UNDEFINED and privacy_level:
            payload['privacy_level'] = _privacy_level_value(privacy_level)

        data = await self.state.http.edit_stage_instance(channel_id, payload)

        existing = self.cache.get(data['id'])
        if existing is not None:
            clone = existing._clone()
            clone._patch(data)
            return clone
        return self._add(data)

    async def delete(self, channel: typing.Any, /) -> None:
        """|coro|

        Ends the stage instance of a stage channel.
        """
        channel_id = self._require_channel_id(channel)
        await self.state.http.delete_stage_instance(channel_id)


class ApplicationCommandManager(CachedManager[ApplicationCommand]):
    """Manages commands of the application.

    Attributes
    ----------
    cache_guild_commands: :class:`bool`
        Whether guild commands created or fetched through this manager are cached in it.
    """

    __slots__ = ('cache_guild_commands',)

    resolvable_name = 'ApplicationCommandResolvable'

    def __init__(self, state: State, /, *, cache_guild_commands: bool = True) -> None:
        super().__init__(state, ApplicationCommand)
        self.cache_guild_commands: bool = cache_guild_commands

    @property
    def guild(self) -> Guild | None:
        """Optional[:class:`Guild`]: The guild this manager is scoped to."""
        return None

    @property
    def application_id(self) -> str:
        application = self.state.application
        if application is None:
            raise NoData('current', 'application')
        return application.id

    def _scope(self, guild_id: str | None, /) -> str | None:
        guild = self.guild
        if guild is not None:
            return guild.id
        return guild_id

    def _add(self, data: raw.ApplicationCommand, /, *, cache: bool = True, id: str | None = None) -> ApplicationCommand:  # type: ignore[override]
        if self.guild is None and data.get('guild_id') is not None and not self.cache_guild_commands:
            cache = False
        return super()._add(data, cache=cache, id=id)  # type: ignore

    def command_path(self, *, id: str | None = None, guild_id: str | None = None) -> str:
        """:class:`str`: The path to commands, or a single command, of the application."""
        path = f'/applications/{self.application_id}'
        guild_id = self._scope(guild_id)
        if guild_id is not None:
            path += f'/guilds/{guild_id}'
        path += '/commands'
        if id is not None:
            path += f'/{id}'
        return path

    @staticmethod
    def transform_command(command: dict[str, typing.Any], /) -> dict[str, typing.Any]:
        """Converts command data into API payload."""
        payload: dict[str, typing.Any] = {}
        if 'name' in command:
            payload['name'] = command['name']
        if 'description' in command:
            payload['description'] = command['description']
        if command.get('options') is not None:
            payload['options'] = [transform_option(option) for option in command['options']]
        if 'default_permission' in command:
            payload['default_permission'] = command['default_permission']
        if 'type' in command:
            type = command['type']
            payload['type'] = type if isinstance(type, int) else type.value
        return payload

    @staticmethod
    def transform_permissions(permission: dict[str, typing.Any], /, *, received: bool = False) -> dict[str, typing.Any]:
        """Converts command permission between its API and library forms.

        Received permissions get their ``type`` converted into :class:`ApplicationCommandPermissionType`.
        """
        type = permission['type']
        if received:
            type = ApplicationCommandPermissionType.try_value(type)
        elif isinstance(type, str):
            type = ApplicationCommandPermissionType[type.lower()].value
        elif not isinstance(type, int):
            type = type.value
        return {'id': permission['id'], 'permission': permission['permission'], 'type': type}

    async def fetch(
        self,
        command: typing.Any = None,
        /,
        *,
        guild_id: str | None = None,
        cache: bool = True,
        force: bool = False,
    ) -> ApplicationCommand | Collection[str, ApplicationCommand]:
        """|coro|

        Retrieves one command, or every command when ``command`` is not given.

        Parameters
        ----------
        command: Optional[:class:`ApplicationCommandResolvable`]
            The command to retrieve.
        guild_id: Optional[:class:`str`]
            The guild to retrieve commands of. Ignored by guild managers.
        """
        http = self.state.http
        scope = self._scope(guild_id)

        if command is not None:
            id = self.require_id(command, 'command')
            if not force:
                existing = self.cache.get(id)
                if existing is not None:
                    return existing
            data = await http.get_application_command(self.application_id, id, guild_id=scope)
            return self._add(data, cache=cache)

        commands = await http.get_application_commands(self.application_id, guild_id=scope)
        result: Collection[str, ApplicationCommand] = Collection()
        for payload in commands:
            c = self._add(payload, cache=cache)
            result[c.id] = c
        return result

    async def create(self, command: dict[str, typing.Any], /, *, guild_id: str | None = None) -> ApplicationCommand:
        """|coro|

        Creates a command.

        Raises
        ------
        :class:`HTTPException`
            Creating the command failed.
        """
        data = await self.state.http.create_application_command(
            self.application_id, self.transform_command(command), guild_id=self._scope(guild_id)
        )
        return self._add(data)

    async def set(
        self, commands: Iterable[dict[str, typing.Any]], /, *, guild_id: str | None = None
    ) -> Collection[str, ApplicationCommand]:
        """|coro|

        Replaces every command with ``commands``.

        Raises
        ------
        :class:`HTTPException`
            Replacing the commands failed.
        """
        data = await self.state.http.bulk_overwrite_application_commands(
            self.application_id,
            [self.transform_command(command) for command in commands],
            guild_id=self._scope(guild_id),
        )
        result: Collection[str, ApplicationCommand] = Collection()
        for payload in data:
            c = self._add(payload)
            result[c.id] = c
        return result

    async def edit(
        self, command: typing.Any, data: dict[str, typing.Any], /, *, guild_id: str | None = None
    ) -> ApplicationCommand:
        """|coro|

        Edits a command.

        Raises
        ------
        :class:`InvalidArgument`
            The command could not be resolved.
        :class:`HTTPException`
            Editing the command failed.
        """
        id = self.require_id(command, 'command')
        payload = await self.state.http.edit_application_command(
            self.application_id, id, self.transform_command(data), guild_id=self._scope(guild_id)
        )
        return self._add(payload)

    async def delete(self, command: typing.Any, /, *, guild_id: str | None = None) -> ApplicationCommand | None:
        """|coro|

        Deletes a command.

        Raises
        ------
        :class:`InvalidArgument`
            The command could not be resolved.
        :class:`HTTPException`
            Deleting the command failed.

        Returns
        -------
        Optional[:class:`ApplicationCommand`]
            The deleted command, if it was cached.
        """
        id = self.require_id(command, 'command')
        await self.state.http.delete_application_command(self.application_id, id, guild_id=self._scope(guild_id))
        return self.cache.pop(id, None)

    async def fetch_permissions(
        self, command: typing.Any = None, /, *, guild_id: str | None = None
    ) -> list[dict[str, typing.Any]] | Collection[str, list[dict[str, typing.Any]]]:
        """|coro|

        Retrieves permissions of one command, or of every command when ``command`` is not given.

        Raises
        ------
        :class:`InvalidArgument`
            No guild was given to a global manager, or the command could not be resolved.
        :class:`HTTPException`
            Retrieving the permissions failed.
        """
        scope = self._scope(guild_id)
        if scope is None:
            raise InvalidArgument('GLOBAL_COMMAND_PERMISSIONS')

        http = self.state.http
        if command is not None:
            id = self.require_id(command, 'command')
            data = await http.get_application_command_permissions(self.application_id, scope, command_id=id)
            return [self.transform_permissions(p, received=True) for p in data['permissions']]

        data = await http.get_application_command_permissions(self.application_id, scope)
        return Collection(
            (entry['id'], [self.transform_permissions(p, received=True) for p in entry['permissions']])
            for entry in data
        )

    async def set_permissions(
        self,
        command: typing.Any,
        permissions: list[dict[str, typing.Any]] | None = None,
        /,
        *,
        guild_id: str | None = None,
    ) -> list[dict[str, typing.Any]] | Collection[str, list[dict[str, typing.Any]]]:
        """|coro|

        Replaces permissions of one command, or of many commands when ``command`` is a list
        of ``{'id': ..., 'permissions': [...]}`` mappings.

        Raises
        ------
        :class:`InvalidArgument`
            No guild was given to a global manager.
        :class:`HTTPException`
            Replacing the permissions failed.
        """
        scope = self._scope(guild_id)
        if scope is None:
            raise InvalidArgument('GLOBAL_COMMAND_PERMISSIONS')

        http = self.state.http
        id = self.resolve_id(command)
        if id is not None:
            data = await http.edit_application_command_permissions(
                self.application_id,
                scope,
                id,
                [self.transform_permissions(p) for p in permissions or ()],
            )
            return [self.transform_permissions(p, received=True) for p in data['permissions']]

        data = await http.bulk_edit_application_command_permissions(
            self.application_id,
            scope,
            [
                {'id': entry['id'], 'permissions': [self.transform_permissions(p) for p in entry['permissions']]}
                for entry in command
            ],
        )
        return Collection(
            (entry['id'], [self.transform_permissions(p, received=True) for p in entry['permissions']])
            for entry in data
        )


class GuildApplicationCommandManager(ApplicationCommandManager):
    """Manages commands of the application in a single guild."""

    __slots__ = ('_guild',)

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state)
        self._guild: Guild = guild

    @property
    def guild(self) -> Guild:
        return self._guild


class GuildBanManager(CachedManager[GuildBan]):
    """Manages bans of a guild, keyed by user ID."""

    __slots__ = ('guild',)

    resolvable_name = 'GuildBanResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, GuildBan, guild=guild)
        self.guild: Guild = guild


class GuildInviteManager(CachedManager[Invite]):
    """Manages invites of a guild, keyed by invite code."""

    __slots__ = ('guild',)

    resolvable_name = 'InviteResolvable'

    def __init__(self, guild: Guild, /) -> None:
        super().__init__(guild.state, Invite, guild=guild)
        self.guild: Guild = guild

    def resolve_id(self, resolvable: typing.Any, /) -> str | None:
        if isinstance(resolvable, Invite):
            return resolvable.code
        return super().resolve_id(resolvable)

    async def fetch(self) -> Collection[str, Invite]:
        """|coro|

        Retrieves every invite of the guild.

        Raises
        ------
        :class:`HTTPException`
            Retrieving the invites failed.
        """
        data = await self.state.http.get_guild_invites(self.guild.id)
        result: Collection[str, Invite] = Collection()
        for payload in data:
            invite = self._add(payload)
            result[invite.code] = invite
        return result


__all__ = (
    'CachedManager',
    'UserManager',
    'ChannelManager',
    'GuildManager',
    'GuildChannelManager',
    'ThreadManager',
    'GuildMemberManager',
    'RoleManager',
    'PresenceManager',
    'VoiceStateManager',
    'ThreadMemberManager',
    'MessageManager',
    'ReactionManager',
    'PermissionOverwriteManager',
    'GuildStickerManager',
    'StageInstanceManager',
    'ApplicationCommandManager',
    'GuildApplicationCommandManager',
    'GuildBanManager',
    'GuildInviteManager',
)
