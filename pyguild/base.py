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
from copy import copy
from datetime import datetime
import typing


from .core import is_snowflake, snowflake_time
from .errors import InvalidData

if typing.TYPE_CHECKING:
    from typing_extensions import Self

    from .state import State


@define(slots=True, eq=False)
class Base:
    """The base class for every cached entity.

    Entities are mutated in place by :meth:`_patch` when new data arrives. Before a
    change, :meth:`_clone` may be called to keep a snapshot of the previous state.
    """

    state: State = field(repr=False, kw_only=True)
    """:class:`.State`: The state that controls this entity."""

    id: str = field(repr=True, kw_only=True)
    """:class:`str`: The ID of the entity."""

    deleted: bool = field(default=False, repr=False, kw_only=True)
    """:class:`bool`: Whether the entity was removed from the platform."""

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object, /) -> bool:
        return self is other or isinstance(other, self.__class__) and self.id == other.id

    @property
    def created_at(self) -> datetime:
        """:class:`~datetime.datetime`: When the entity was created."""
        return snowflake_time(self.id)

    @classmethod
    def _extract_id(cls, data: dict[str, typing.Any], /) -> str:
        """Returns the key this entity is cached under.

        Raises
        ------
        :class:`InvalidData`
            The ID is missing or is not a snowflake.
        """
        try:
            id = data['id']
        except (KeyError, TypeError):
            id = None
        return cls._validate_id(id)

    @classmethod
    def _validate_id(cls, id: typing.Any, /) -> str:
        if id is None:
            raise InvalidData(f'{cls.__name__} payload is missing an ID')
        if not is_snowflake(id):
            raise InvalidData(f'{cls.__name__} payload has invalid ID: {id!r}')
        return id

    @classmethod
    def _from_data(cls, state: State, data: dict[str, typing.Any], /, **kwargs: typing.Any) -> Self:
        self = cls(state=state, id=cls._extract_id(data), **kwargs)
        self._patch(data)
        return self

    def _patch(self, data: dict[str, typing.Any], /) -> dict[str, typing.Any]:
        """Merges the keys present in ``data`` into this entity.

        Absent keys keep their value, explicit ``None`` clears it.

        Returns
        -------
        Dict[:class:`str`, Any]
            The data, for subclasses to continue patching from.
        """
        return data

    def _clone(self) -> Self:
        """Returns a shallow snapshot of this entity. Nested entities are shared, not copied."""
        return copy(self)

    def _update(self, data: dict[str, typing.Any], /) -> Self:
        """Patches this entity with ``data``, returning the snapshot taken before patching."""
        clone = self._clone()
        self._patch(data)
        return clone


__all__ = ('Base',)
