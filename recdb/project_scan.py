"""A scan that exposes only some fields of another scan."""

from __future__ import annotations

from typing import Iterable

from recdb.constant import Constant
from recdb.scan import Scan


class ProjectScan(Scan):
    """Passes records through, restricting which fields may be read."""

    def __init__(self, scan: Scan, fields: Iterable[str]) -> None:
        self.scan = scan
        self.fields = list(fields)

    def before_first(self) -> None:
        self.scan.before_first()

    def next(self) -> bool:
        return self.scan.next()

    def _source(self, field_name: str) -> Scan:
        """Return the underlying scan, if the field is among the projected ones."""
        if field_name not in self.fields:
            raise KeyError(f"field {field_name} not found")
        return self.scan

    def get_int(self, field_name: str) -> int:
        return self._source(field_name).get_int(field_name)

    def get_string(self, field_name: str) -> str:
        return self._source(field_name).get_string(field_name)

    def get_val(self, field_name: str) -> Constant:
        return self._source(field_name).get_val(field_name)

    def has_field(self, field_name: str) -> bool:
        return field_name in self.fields

    def close(self) -> None:
        self.scan.close()