"""
dimensia.core.storage
=====================

Append-only arenas that hand out stable integer identities.

Each `ItemStorage` is bound to one identity type (`UnitClassId` or `UnitId`) and
stamps every identity it issues with its own owner token, so an identity can
never be used against a different storage by accident.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Tuple, Type, TypeVar

from dimensia.core.errors import StorageError

T = TypeVar("T")
I = TypeVar("I", bound="Identity")

_owner_tokens = itertools.count(1)


@dataclass(frozen=True, slots=True)
class Identity:
    """Opaque handle into an `ItemStorage`. Compare and hash freely."""

    index: int
    owner: int = field(default=0, compare=False, repr=False)

    def __eq__(self, other: object) -> bool:
        # Different identity types never compare equal, even with equal indices.
        if type(self) is not type(other):
            return NotImplemented
        return (self.index, self.owner) == (other.index, other.owner)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.index, self.owner))


@dataclass(frozen=True, slots=True, eq=False)
class UnitClassId(Identity):
    """Identity of a registered `UnitClass`."""


@dataclass(frozen=True, slots=True, eq=False)
class UnitId(Identity):
    """Identity of a registered `Unit`."""


class ItemStorage(Generic[T, I]):
    """Append-only arena giving stable identities to stored items."""

    def __init__(self, id_type: Type[I]) -> None:
        self._id_type = id_type
        self._owner = next(_owner_tokens)
        self._items: List[T] = []

    @property
    def id_type(self) -> Type[I]:
        return self._id_type

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, identity: object) -> bool:
        return self._issued_here(identity)

    def add(self, item: T) -> I:
        """Append `item` and return a fresh identity for it."""
        identity = self._id_type(len(self._items), self._owner)
        self._items.append(item)
        return identity

    def borrow(self, identity: I) -> T:
        """Return the item behind `identity`; `StorageError` if not issued here."""
        if not self._issued_here(identity):
            raise StorageError(
                f"{identity!r} was not issued by this {self._id_type.__name__} storage."
            )
        return self._items[identity.index]

    def items(self) -> Iterator[Tuple[I, T]]:
        for index, item in enumerate(self._items):
            yield self._id_type(index, self._owner), item

    def _issued_here(self, identity: object) -> bool:
        return (
            type(identity) is self._id_type
            and identity.owner == self._owner  # type: ignore[attr-defined]
            and 0 <= identity.index < len(self._items)  # type: ignore[attr-defined]
        )


__all__ = ["Identity", "UnitClassId", "UnitId", "ItemStorage"]
