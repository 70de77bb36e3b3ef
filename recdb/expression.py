"""Expressions in predicates: a constant or a reference to a field."""

from __future__ import annotations

from typing import Optional

from recdb.constant import Constant
from recdb.scan import Scan
from recdb.schema import Schema


class Expression:
    """Either a constant value or the name of a field."""

    __slots__ = ("_value", "_field")

    def __init__(self, value: Optional[Constant] = None, field_name: Optional[str] = None) -> None:
        if (value is None) == (field_name is None):
            raise ValueError("an expression is exactly one of a constant or a field name")
        self._value = value
        self._field = field_name

    @staticmethod
    def of_constant(value: Constant) -> Expression:
        """Create a constant expression."""
        return Expression(value=value)

    @staticmethod
    def of_field(field_name: str) -> Expression:
        """Create an expression that refers to a field."""
        return Expression(field_name=field_name)

    def evaluate(self, scan: Scan) -> Constant:
        """Return the constant, or the field's value in the scan's current record."""
        return self._value if self._field is None else scan.get_val(self._field)

    def is_field_name(self) -> bool:
        return self._field is not None

    def as_constant(self) -> Optional[Constant]:
        """Return the constant, or None for a field reference."""
        return self._value

    def as_field_name(self) -> Optional[str]:
        """Return the field name, or None for a constant."""
        return self._field

    def applies_to(self, schema: Schema) -> bool:
        """Tell whether the expression can be evaluated on records of the schema."""
        return self._field is None or schema.has_field(self._field)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return (self._value, self._field) == (other._value, other._field)

    def __hash__(self) -> int:
        return hash((self._value, self._field))

    def __repr__(self) -> str:
        return f"Expression(value={self._value!r}, field_name={self._field!r})"

    def __str__(self) -> str:
        return self._field if self._field is not None else str(self._value)