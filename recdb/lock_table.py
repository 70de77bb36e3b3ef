"""Shared and exclusive block locks with bounded waiting."""

from __future__ import annotations

import threading
import time
from typing import Hashable


class LockAbortError(Exception):
    """Raised when a lock could not be obtained within the wait limit."""


class LockTable:
    """Tracks locks per block: a positive count of shared locks, or -1 for exclusive."""

    def __init__(self, max_wait: float = 10.0) -> None:
        self.max_wait = max_wait
        self._locks: dict[Hashable, int] = {}
        self._cond = threading.Condition()

    def _value(self, block: Hashable) -> int:
        return self._locks.get(block, 0)

    def _wait_while(self, blocked) -> None:
        deadline = time.monotonic() + self.max_wait
        while blocked():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            self._cond.wait(remaining)

    def s_lock(self, block: Hashable) -> None:
        """Take a shared lock, waiting while another holds an exclusive one."""
        with self._cond:
            self._wait_while(lambda: self._value(block) < 0)
            if self._value(block) < 0:
                raise LockAbortError("block has an exclusive lock")
            self._locks[block] = self._value(block) + 1

    def x_lock(self, block: Hashable) -> None:
        """Take an exclusive lock, waiting while other shared locks are held."""
        with self._cond:
            self._wait_while(lambda: self._value(block) > 1)
            if self._value(block) > 1:
                raise LockAbortError("block has other shared locks")
            self._locks[block] = -1

    def unlock(self, block: Hashable) -> None:
        """Release one lock on the block."""
        with self._cond:
            value = self._value(block)
            if value > 1:
                self._locks[block] = value - 1
            else:
                self._locks.pop(block, None)
                self._cond.notify_all()

    def has_x_lock(self, block: Hashable) -> bool:
        with self._cond:
            return self._value(block) < 0

    def has_other_s_locks(self, block: Hashable) -> bool:
        with self._cond:
            return self._value(block) > 1