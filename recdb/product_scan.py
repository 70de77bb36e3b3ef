"""The product of two scans: every record of one paired with every record of the other."""

from __future__ import annotations

from recdb.constant import Constant
from recdb.scan import Scan


class ProductScan(Scan):
    """Pairs each record of the first scan with each record of the second."""

    def __init__(self, first: Scan, second: Scan) -> None:
        self.first = first
        self.second = second
        self.before_first()

    def before_first(self) -> None:
        self.first.before_first()
        self.first.next()
        self.second.before_first()

    def next(self) -> bool:
        if self.second.next():
            return True
        self.second.before_first()
        return self.second.next() and self.first.next()

    def _owner(self, field_name: str) -> Scan:
        return self.first if self.first.has_field(field_name) else self.second

    def get_int(self, field_name: str) -> int:
        return self._owner(field_name).get_int(field_name)

    def get_string(self, field_name: str) -> str:
        return self._owner(field_name).get_string(field_name)

    def get_val(self, field_name: str) -> Constant:
        return self._owner(field_name).get_val(field_name)

    def has_field(self, field_name: str) -> bool:
        return any(scan.has_field(field_name) for scan in (self.first, self.second))

    def close(self) -> None:
        for scan in (self.first, self.second):
            scan.close()