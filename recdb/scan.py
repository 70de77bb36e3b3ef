"""Cursor interfaces over records: read-only scans and updatable scans."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from recdb.constant import Constant
from recdb.rid import RID


class Scan(ABC):
    """A cursor that moves through records and reads their fields."""

    @abstractmethod
    def before_first(self) -> None:
        """Position the scan before its first record."""

    @abstractmethod
    def next(self) -> bool:
        """Move to the next record; return False when there is none."""

    def get_int(self, field_name: str) -> int:
        """Return the integer value of a field in the current record."""
        return self.get_val(field_name).as_int()

    def get_string(self, field_name: str) -> str:
        """Return the string value of a field in the current record."""
        return self.get_val(field_name).as_string()

    @abstractmethod
    def get_val(self, field_name: str) -> Constant:
        """Return the value of a field in the current record."""

    @abstractmethod
    def has_field(self, field_name: str) -> bool:
        """Tell whether the scan's records have the field."""

    @abstractmethod
    def close(self) -> None:
        """Release whatever the scan holds."""

    def __iter__(self) -> Iterator["Scan"]:
        """Restart the scan and yield it once positioned on each record."""
        self.before_first()
        while self.next():
            yield self

    def __enter__(self) -> "Scan":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class UpdateScan(Scan):
    """A scan whose current record can be modified, inserted or deleted."""

    @abstractmethod
    def set_val(self, field_name: str, value: Constant) -> None:
        """Store a value in a field of the current record."""

    def set_int(self, field_name: str, value: int) -> None:
        """Store an integer in a field of the current record."""
        self.set_val(field_name, Constant.of_int(value))

    def set_string(self, field_name: str, value: str) -> None:
        """Store a string in a field of the current record."""
        self.set_val(field_name, Constant.of_string(value))

    @abstractmethod
    def insert(self) -> None:
        """Add a new record and make it current."""

    @abstractmethod
    def delete(self) -> None:
        """Remove the current record."""

    @abstractmethod
    def get_rid(self) -> RID:
        """Return the identifier of the current record."""

    @abstractmethod
    def move_to_rid(self, rid: RID) -> None:
        """Make the record with the given identifier current."""