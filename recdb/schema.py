"""Record schemas: ordered field names with their types and lengths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class FieldType(IntEnum):
    """Type codes of record fields."""

    BIT = 0
    TINYINT = 1
    SMALLINT = 2
    INTEGER = 3
    BIGINT = 4
    FLOAT = 5
    REAL = 6
    DOUBLE = 7
    NUMERIC = 8
    DECIMAL = 9
    CHAR = 10
    VARCHAR = 11
    LONG_VARCHAR = 12
    DATE = 13
    TIME = 14
    TIMESTAMP = 15
    BINARY = 16
    OTHER = 17
    NULL = 18


@dataclass(frozen=True)
class FieldInfo:
    """The type and declared length of one field."""

    type: FieldType
    length: int


class Schema:
    """The fields of a table's records, in declaration order."""

    def __init__(self) -> None:
        self._info: dict[str, FieldInfo] = {}

    def add_field(self, name: str, field_type: int, length: int) -> None:
        """Add a field; a repeated name replaces the earlier type and length."""
        self._info[name] = FieldInfo(FieldType(field_type), length)

    def add_int_field(self, name: str) -> None:
        self.add_field(name, FieldType.INTEGER, 0)

    def add_string_field(self, name: str, length: int) -> None:
        self.add_field(name, FieldType.VARCHAR, length)

    def add(self, name: str, other: "Schema") -> None:
        """Copy one field from another schema."""
        self.add_field(name, other.type(name), other.length(name))

    def add_all(self, other: "Schema") -> None:
        """Copy every field of another schema, in its order."""
        for name in other.fields():
            self.add(name, other)

    def has_field(self, name: str) -> bool:
        return name in self._info

    def type(self, name: str) -> FieldType:
        """Return the field's type; raise KeyError for an unknown field."""
        return self._info[name].type

    def length(self, name: str) -> int:
        """Return the field's declared length; raise KeyError for an unknown field."""
        return self._info[name].length

    def fields(self) -> list[str]:
        """Return the field names in declaration order."""
        return list(self._info)

    def __contains__(self, name: object) -> bool:
        return name in self._info

    def __iter__(self):
        return iter(list(self._info))

    def __len__(self) -> int:
        return len(self._info)