"""Per-transaction lock bookkeeping on top of a lock table."""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Optional

from recdb.lock_table import LockTable


class _LockMode(Enum):
    SHARED = "S"
    EXCLUSIVE = "X"


class ConcurrencyManager:
    """Records which locks one transaction holds and releases them together."""

    def __init__(self, lock_table: Optional[LockTable] = None) -> None:
        self.lock_table = lock_table if lock_table is not None else LockTable()
        self._held: dict[Hashable, _LockMode] = {}

    def s_lock(self, block: Hashable) -> None:
        """Take a shared lock unless this transaction already holds a lock."""
        if block not in self._held:
            self.lock_table.s_lock(block)
            self._held[block] = _LockMode.SHARED

    def x_lock(self, block: Hashable) -> None:
        """Take an exclusive lock, first taking a shared one if needed."""
        if not self.has_x_lock(block):
            self.s_lock(block)
            self.lock_table.x_lock(block)
            self._held[block] = _LockMode.EXCLUSIVE

    def has_x_lock(self, block: Hashable) -> bool:
        return self._held.get(block) is _LockMode.EXCLUSIVE

    def release(self) -> None:
        """Release every lock this transaction holds."""
        for block in list(self._held):
            self.lock_table.unlock(block)
        self._held.clear()