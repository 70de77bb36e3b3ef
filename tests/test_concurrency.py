import pytest

from recdb.concurrency import ConcurrencyManager
from recdb.lock_table import LockAbortError, LockTable

FIRST_BLK = ("accounts.tbl", 0)
SECOND_BLK = ("accounts.tbl", 1)


@pytest.fixture
def locks():
    return LockTable(0)


@pytest.fixture
def managers(locks):
    return [ConcurrencyManager(locks) for _ in range(2)]


def test_s_lock_is_taken_once(locks, managers):
    owner = managers[0]
    for _ in range(2):
        owner.s_lock(FIRST_BLK)
    assert not locks.has_other_s_locks(FIRST_BLK)
    assert not owner.has_x_lock(FIRST_BLK)


def test_x_lock_recorded(locks, managers):
    managers[0].x_lock(FIRST_BLK)
    assert managers[0].has_x_lock(FIRST_BLK)
    assert locks.has_x_lock(FIRST_BLK)


def test_x_lock_conflicts_with_other_reader(managers):
    writer, reader = managers
    for manager in managers:
        manager.s_lock(FIRST_BLK)
    with pytest.raises(LockAbortError):
        writer.x_lock(FIRST_BLK)
    reader.release()
    writer.x_lock(FIRST_BLK)
    assert writer.has_x_lock(FIRST_BLK)


def test_reader_blocked_by_writer(managers):
    managers[0].x_lock(FIRST_BLK)
    with pytest.raises(LockAbortError):
        managers[1].s_lock(FIRST_BLK)


def test_release_frees_everything(locks, managers):
    holder, successor = managers
    holder.x_lock(FIRST_BLK)
    holder.s_lock(SECOND_BLK)
    holder.release()
    assert not holder.has_x_lock(FIRST_BLK)
    assert not locks.has_x_lock(FIRST_BLK)
    for block in (FIRST_BLK, SECOND_BLK):
        successor.x_lock(block)
    assert successor.has_x_lock(SECOND_BLK)


def test_default_lock_table_is_private():
    separate = [ConcurrencyManager(), ConcurrencyManager()]
    for manager in separate:
        manager.x_lock(FIRST_BLK)
    assert all(manager.has_x_lock(FIRST_BLK) for manager in separate)