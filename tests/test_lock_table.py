import threading
import time

import pytest

from recdb.lock_table import LockAbortError, LockTable

BLOCK = ("data.tbl", 1)


@pytest.fixture
def table():
    return LockTable(max_wait=0)


def _apply(table, *actions, block=BLOCK):
    for action in actions:
        getattr(table, action)(block)


def test_shared_locks_accumulate(table):
    _apply(table, "s_lock")
    assert not table.has_other_s_locks(BLOCK)
    _apply(table, "s_lock")
    assert table.has_other_s_locks(BLOCK)
    assert not table.has_x_lock(BLOCK)


@pytest.mark.parametrize(
    "setup, attempt, holds_x",
    [
        (("s_lock", "s_lock"), "x_lock", False),
        (("x_lock",), "s_lock", True),
    ],
)
def test_conflicting_request_aborts(table, setup, attempt, holds_x):
    _apply(table, *setup)
    with pytest.raises(LockAbortError):
        _apply(table, attempt)
    assert table.has_x_lock(BLOCK) is holds_x


def test_x_lock_after_own_shared_lock(table):
    _apply(table, "s_lock", "x_lock")
    assert table.has_x_lock(BLOCK)


def test_blocks_are_independent(table):
    other = ("data.tbl", 2)
    _apply(table, "x_lock")
    _apply(table, "s_lock", block=other)
    assert [table.has_x_lock(b) for b in (BLOCK, other)] == [True, False]


def test_unlock_decrements_then_removes(table):
    _apply(table, "s_lock", "s_lock", "unlock")
    assert not table.has_other_s_locks(BLOCK)
    _apply(table, "unlock", "x_lock")
    assert table.has_x_lock(BLOCK)
    _apply(table, "unlock")
    assert not table.has_x_lock(BLOCK)


def test_waiting_shared_lock_succeeds_after_release():
    table = LockTable(max_wait=5)
    table.x_lock(BLOCK)
    errors = []

    def reader():
        try:
            table.s_lock(BLOCK)
        except LockAbortError as exc:
            errors.append(exc)

    thread = threading.Thread(target=reader)
    thread.start()
    time.sleep(0.05)
    table.unlock(BLOCK)
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert errors == []
    assert not table.has_x_lock(BLOCK)