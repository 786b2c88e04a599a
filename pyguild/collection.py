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

if typing.TYPE_CHECKING:
    from collections.abc import Callable

    from typing_extensions import Self

_L = logging.getLogger(__name__)

K = typing.TypeVar('K')
V = typing.TypeVar('V')

_MISSING = object()


class Collection(dict[K, V]):
    """An insertion-ordered mapping used as storage for every cache.

    Observers registered with :meth:`add_observer` are called with ``(key, old_value)``
    on every mutation. They exist for instrumentation only; nothing in the library
    relies on them.

    .. container:: operations

        .. describe:: coll[key] = value

            Stores the value and notifies observers.
        .. describe:: del coll[key]

            Removes the value and notifies observers.
    """

    __slots__ = ('_observers',)

    def __init__(self, *args: typing.Any, **kwargs: typing.Any) -> None:
        super().__init__(*args, **kwargs)
        self._observers: list[Callable[[K, V | None], None]] = []

    def add_observer(self, callback: Callable[[K, V | None], None], /) -> None:
        """Registers a callback that is called with ``(key, old_value)`` after each mutation."""
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[K, V | None], None], /) -> None:
        try:
            self._observers.remove(callback)
        except ValueError:
            pass

    def _notify(self, key: K, old: V | None, /) -> None:
        for observer in self._observers:
            try:
                observer(key, old)
            except Exception:
                _L.exception('Collection observer %r raised an exception', observer)

    def __setitem__(self, key: K, value: V, /) -> None:
        old = dict.get(self, key)
        super().__setitem__(key, value)
        if self._observers:
            self._notify(key, old)

    def __delitem__(self, key: K, /) -> None:
        old = self[key]
        super().__delitem__(key)
        if self._observers:
            self._notify(key, old)

    def pop(self, key: K, default: typing.Any = _MISSING, /) -> typing.Any:
        if key not in self:
            if default is _MISSING:
                raise KeyError(key)
            return default
        old = super().pop(key)
        if self._observers:
            self._notify(key, old)
        return old

    def delete(self, key: K, /) -> bool:
        """Removes the key from collection.

        Returns
        -------
        :class:`bool`
            Whether the key was present.
        """
        if key in self:
            del self[key]
            return True
        return False

    def clear(self) -> None:
        keys = list(self.items())
        super().clear()
        if self._observers:
            for key, old in keys:
                self._notify(key, old)

    def clone(self) -> Self:
        """Returns a shallow copy of this collection: same values, new container, no observers."""
        return self.__class__(self)

    def first(self) -> V | None:
        for value in self.values():
            return value
        return None

    def find(self, predicate: Callable[[V], bool], /) -> V | None:
        for value in self.values():
            if predicate(value):
                return value
        return None

    def filter(self, predicate: Callable[[V], bool], /) -> Collection[K, V]:
        return Collection((k, v) for k, v in self.items() if predicate(v))

    def array(self) -> list[V]:
        return list(self.values())

    def key_array(self) -> list[K]:
        return list(self.keys())

    def __repr__(self) -> str:
        return f'Collection({dict.__repr__(self)})'


__all__ = ('Collection',)
