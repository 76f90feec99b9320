"""A string hash table with open addressing or red-black-tree chaining."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from probebench.rbtree import RedBlackTree

HashFunction = Callable[[str], int]

LINEAR_STEP = 3


class CollisionStrategy(enum.Enum):
    LINEAR_PROBING = "Linear"
    DOUBLE_HASHING = "Double"
    SEPARATE_CHAINING_RBT = "Chaining"


@dataclass(slots=True)
class _Slot:
    key: str = ""
    occupied: bool = False
    deleted: bool = False

    @property
    def live(self) -> bool:
        return self.occupied and not self.deleted

    @property
    def never_used(self) -> bool:
        return not self.occupied and not self.deleted


class HashTable:
    """A fixed-size hash table of strings that reports probe counts."""

    def __init__(
        self,
        size: int,
        strategy: CollisionStrategy,
        primary_hash: HashFunction,
        secondary_hash: HashFunction | None = None,
    ) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.capacity = size
        self.strategy = strategy
        self.primary_hash = primary_hash
        self.secondary_hash = secondary_hash
        self._chains: list[RedBlackTree] = []
        self._slots: list[_Slot] = []
        if strategy is CollisionStrategy.SEPARATE_CHAINING_RBT:
            self._chains = [RedBlackTree() for _ in range(size)]
        else:
            self._slots = [_Slot() for _ in range(size)]

    @property
    def _chaining(self) -> bool:
        return self.strategy is CollisionStrategy.SEPARATE_CHAINING_RBT

    def _chain(self, key: str) -> RedBlackTree:
        return self._chains[self.primary_hash(key)]

    def _step(self, key: str) -> int:
        if self.strategy is CollisionStrategy.DOUBLE_HASHING and self.secondary_hash:
            return self.secondary_hash(key)
        if self.strategy is CollisionStrategy.LINEAR_PROBING:
            return LINEAR_STEP
        return 1

    def _probe(self, key: str) -> Iterator[_Slot]:
        start = self.primary_hash(key)
        step = self._step(key)
        for i in range(self.capacity):
            yield self._slots[(start + i * step) % self.capacity]

    def insert(self, key: str) -> int:
        """Insert ``key`` and return the number of collisions on the way.

        With chaining, returns 0 for a new key and 1 if it was already present.
        A full open table returns its capacity.
        """
        if self._chaining:
            return 0 if self._chain(key).insert(key, 0) else 1

        for collisions, slot in enumerate(self._probe(key)):
            if not slot.occupied or slot.deleted:
                slot.key, slot.occupied, slot.deleted = key, True, False
                return collisions
            if slot.live and slot.key == key:
                return collisions
        return self.capacity

    def search(self, key: str) -> int:
        """Return the number of probes a lookup of ``key`` takes."""
        if self._chaining:
            self._chain(key).search(key)
            return 1

        probes = 0
        for slot in self._probe(key):
            probes += 1
            if slot.never_used or (slot.live and slot.key == key):
                break
        return probes

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        if self._chaining:
            return key in self._chain(key)
        for slot in self._probe(key):
            if slot.never_used:
                return False
            if slot.live and slot.key == key:
                return True
        return False

    def remove(self, key: str) -> None:
        """Remove ``key`` if present; open tables leave a tombstone."""
        if self._chaining:
            self._chain(key).delete(key)
            return
        for slot in self._probe(key):
            if slot.occupied and slot.key == key:
                slot.deleted = True
                return
            if slot.never_used:
                return

    def chain_length(self, index: int) -> int:
        """Number of keys in bucket ``index``; always 0 for open addressing."""
        if not self._chaining:
            return 0
        return len(self._chains[index])

    def is_bucket_empty(self, index: int) -> bool:
        """True if bucket ``index`` holds no keys; always True for open addressing."""
        if self._chaining and 0 <= index < self.capacity:
            return self._chains[index].is_empty()
        return True