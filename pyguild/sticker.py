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
from .core import UNDEFINED, UndefinedOr
from .enums import StickerFormatType, StickerType

if typing.TYPE_CHECKING:
    from . import raw
    from .guild import Guild
    from .user import User


@define(slots=True, eq=False)
class Sticker(Base):
    """Represents a sticker."""

    name: str | None = field(default=None, repr=True, kw_only=True)
    """Optional[:class:`str`]: The sticker's name. ``None`` if the sticker is partial."""

    description: str | None = field(default=None, repr=False, kw_only=True)

    tags: list[str] = field(factory=list, repr=False, kw_only=True)
    """List[:class:`str`]: The autocomplete tags of the sticker."""

    type: StickerType | None = field(default=None, repr=False, kw_only=True)
    format_type: StickerFormatType | None = field(default=None, repr=False, kw_only=True)
    pack_id: str | None = field(default=None, repr=False, kw_only=True)
    available: bool | None = field(default=None, repr=False, kw_only=True)

    guild_id: str | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`str`]: The ID of the guild the sticker belongs to. ``None`` for standard stickers."""

    user: User | None = field(default=None, repr=False, kw_only=True)
    """Optional[:class:`User`]: The user who uploaded the sticker."""

    sort_value: int | None = field(default=None, repr=False, kw_only=True)

    def _patch(self, data: raw.Sticker, /) -> raw.Sticker:  # type: ignore[override]
        if 'name' in data:
            self.name = data['name']
        if 'description' in data:
            self.description = data['description']
        if 'tags' in data:
            tags = data['tags']
            self.tags = tags.split(', ') if tags else []
        if 'type' in data:
            self.type = StickerType.try_value(data['type'])
        if 'format_type' in data:
            self.format_type = StickerFormatType.try_value(data['format_type'])
        if 'pack_id' in data:
            self.pack_id = data['pack_id']
        if 'available' in data:
            self.available = data['available']
        if 'guild_id' in data:
            self.guild_id = data['guild_id']
        if 'user' in data:
            self.user = self.state.users._add(data['user'])
        if 'sort_value' in data:
            self.sort_value = data['sort_value']
        return data

    def _clone(self) -> Sticker:
        clone = Base._clone(self)
        clone.tags = list(self.tags)
        return clone

    @property
    def partial(self) -> bool:
        return self.name is None

    def equals(self, other: Sticker | dict[str, typing.Any], /) -> bool:
        """Checks whether the sticker is equal to other sticker, or sticker data.

        Data is compared by ``id``, ``name``, ``description`` and ``tags`` only.
        """
        if isinstance(other, Sticker):
            return (
                self.id == other.id
                and self.name == other.name
                and self.description == other.description
                and self.tags == other.tags
                and self.type == other.type
                and self.format_type == other.format_type
                and self.pack_id == other.pack_id
                and self.available == other.available
                and self.guild_id == other.guild_id
                and self.sort_value == other.sort_value
            )
        return (
            self.id == other.get('id')
            and self.name == other.get('name')
            and self.description == other.get('description')
            and ', '.join(self.tags) == (other.get('tags') or '')
        )

    @property
    def guild(self) -> Guild | None:
        if self.guild_id is None:
            return None
        return self.state.guilds.get(self.guild_id)

    def _require_guild(self) -> Guild:
        guild = self.guild
        if guild is None:
            from .errors import NoData

            raise NoData(self.guild_id or self.id, 'guild')
        return guild

    async def fetch(self) -> Sticker:
        """|coro|

        Retrieves the guild sticker from API.

        Raises
        ------
        :class:`NoData`
            The guild of the sticker is not cached.
        """
        return await self._require_guild().stickers.fetch(self.id, force=True)  # type: ignore

    async def edit(
        self,
        *,
        name: UndefinedOr[str] = UNDEFINED,
        description: UndefinedOr[str | None] = UNDEFINED,
        tags: UndefinedOr[str] = UNDEFINED,
        reason: str | None = None,
    ) -> Sticker:
        """|coro|

        Edits the guild sticker. Returns an updated copy, the cached sticker is
        updated once the update event arrives.
        """
        return await self._require_guild().stickers.edit(
            self, name=name, description=description, tags=tags, reason=reason
        )

    async def delete(self, *, reason: str | None = None) -> Sticker:
        """|coro|

        Deletes the guild sticker.
        """
        await self._require_guild().stickers.delete(self, reason=reason)
        return self


__all__ = ('Sticker',)
