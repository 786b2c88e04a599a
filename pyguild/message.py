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
from .flags import MessageFlags
from .utils import parse_time

if typing.TYPE_CHECKING:
    from . import raw
    from .channel import Channel
    from .guild import Guild, GuildMember
    from .managers import ReactionManager
    from .user import User


@define(slots=True, eq=False)
class Message(Base):
    """Represents a message in a channel."""

    channel: Channel = field(repr=False, kw_only=True)
    """:class:`Channel`: The channel the message was sent in."""

    guild_id: str | None = field(default=None, repr=False, kw_only=True)
    author: User | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`User`]: The author of the message. ``None`` if the message is partial."""

    content: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The content of the message. ``None`` if the message is partial."""

    type: int = field(default=0, repr=False, kw_only=True)
    pinned: bool = field(default=False, repr=False, kw_only=True)
    tts: bool = field(default=False, repr=False, kw_only=True)
    created_timestamp: datetime | None = field(default=None, repr=False, kw_only=True)
    edited_timestamp: datetime | None = field(default=None, repr=False, kw_only=True)
    interaction_id: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The ID of the interaction the message is a response to."""

    webhook_id: str | None = field(default=None, repr=False, kw_only=True)
    application_id: str | None = field(default=None, repr=False, kw_only=True)
    flags: MessageFlags = field(factory=MessageFlags, repr=False, kw_only=True)

    reactions: ReactionManager = field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        from .managers import ReactionManager

        self.reactions = ReactionManager(self)

    def _patch(self, data: raw.Message, /) -> raw.Message:  # type: ignore[override]
        if 'guild_id' in data:
            self.guild_id = data['guild_id']
        elif self.guild_id is None:
            self.guild_id = getattr(self.channel, 'guild_id', None)

        if 'author' in data:
            self.author = self.state.users._add(data['author'])
        if 'content' in data:
            self.content = data['content']
        if 'type' in data:
            self.type = data['type']
        if 'pinned' in data:
            self.pinned = bool(data['pinned'])
        if 'tts' in data:
            self.tts = bool(data['tts'])
        if 'timestamp' in data:
            self.created_timestamp = parse_time(data['timestamp'])
        if 'edited_timestamp' in data:
            self.edited_timestamp = parse_time(data['edited_timestamp'])
        if 'interaction' in data:
            interaction = data['interaction']
            self.interaction_id = interaction['id'] if interaction else None
        if 'webhook_id' in data:
            self.webhook_id = data['webhook_id']
        if 'application_id' in data:
            self.application_id = data['application_id']
        if 'flags' in data:
            self.flags = MessageFlags(data['flags'] or 0)

        if 'reactions' in data:
            self.reactions.cache.clear()
            for reaction in data['reactions']:
                self.reactions._add(reaction)

        if 'member' in data and self.author is not None:
            guild = self.guild
            if guild is not None:
                guild.members._add({**data['member'], 'user': {'id': self.author.id}})

        return data

    @property
    def partial(self) -> bool:
        """:class:`bool`: Whether the message is partial, i.e. the content or author is unknown."""
        return self.content is None or self.author is None

    @property
    def channel_id(self) -> str:
        return self.channel.id

    @property
    def guild(self) -> Guild | None:
        if self.guild_id is None:
            return None
        return self.state.guilds.get(self.guild_id)

    @property
    def member(self) -> GuildMember | None:
        """Optional[:class:`GuildMember`]: The author as a guild member, if cached."""
        guild = self.guild
        if guild is None or self.author is None:
            return None
        return guild.members.get(self.author.id)

    async def fetch(self, *, force: bool = True) -> Message:
        """|coro|

        Retrieves the message from API.
        """
        return await self.channel.messages.fetch(self.id, force=force)  # type: ignore


@define(slots=True, eq=False)
class MessageReaction(Base):
    """Represents a reaction on a message. The ID is the emoji ID, or the emoji name for unicode emojis."""

    message: Message = field(repr=False, kw_only=True)
    """:class:`Message`: The message the reaction is on."""

    emoji: dict[str, typing.Any] = field(factory=dict, repr=True, kw_only=True)
    """Dict[:class:`str`, Any]: The emoji, with ``id``, ``name`` and ``animated`` keys."""

    count: int = field(default=0, repr=True, kw_only=True)
    me: bool = field(default=False, repr=False, kw_only=True)
    users: set[str] = field(factory=set, repr=False, kw_only=True)
    """Set[:class:`str`]: The IDs of users known to have reacted."""

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        from .errors import InvalidData

        emoji = data.get('emoji') or {}
        key = emoji.get('id') or emoji.get('name')
        if not key:
            raise InvalidData(f'{cls.__name__} payload is missing an emoji')
        return key

    def _patch(self, data: raw.Reaction, /) -> raw.Reaction:  # type: ignore[override]
        if 'emoji' in data:
            emoji = data['emoji']
            self.emoji = {
                'id': emoji.get('id'),
                'name': emoji.get('name'),
                'animated': emoji.get('animated', False),
            }
        if 'count' in data:
            self.count = data['count']
        if 'me' in data:
            self.me = bool(data['me'])
            me = self.state.me
            if self.me and me is not None:
                self.users.add(me.id)
        return data

    def _clone(self) -> MessageReaction:
        clone = Base._clone(self)
        clone.users = set(self.users)
        return clone

    @property
    def identifier(self) -> str:
        """:class:`str`: The emoji in the form accepted by API routes."""
        if self.emoji.get('id'):
            return f'{self.emoji["name"]}:{self.emoji["id"]}'
        return self.emoji.get('name') or ''

    async def remove(self) -> MessageReaction:
        """|coro|

        Removes every reaction of this emoji from the message.

        Raises
        ------
        :class:`HTTPException`
            Removing the reaction failed.
        """
        message = self.message
        await self.state.http.clear_single_reaction(message.channel.id, message.id, self.identifier)
        return self


__all__ = ('Message', 'MessageReaction')
