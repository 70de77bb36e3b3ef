"""Typed constant values stored in records: integers or strings."""

from __future__ import annotations

from typing import Union

_MASK32 = 0xFFFFFFFF


def _string_hash(text: str) -> int:
    """Hash a string the way stored constants are hashed: a 32-bit djb2 variant."""
    value = 5381
    for byte in text.encode("utf-8"):
        char = byte - 256 if byte > 127 else byte
        value = (((value << 5) + value) ^ char) & _MASK32
    return value - (1 << 32) if value >= (1 << 31) else value


class Constant:
    """An immutable value that is either an integer or a string."""

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, str]) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"constant must be int or str, not {type(value).__name__}")
        self._value = value

    @staticmethod
    def of_int(value: int) -> "Constant":
        """Create an integer constant."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("integer constant requires an int")
        return Constant(value)

    @staticmethod
    def of_string(value: str) -> "Constant":
        """Create a string constant."""
        if not isinstance(value, str):
            raise TypeError("string constant requires a str")
        return Constant(value)

    @property
    def is_int(self) -> bool:
        return isinstance(self._value, int)

    def as_int(self) -> int:
        """Return the integer value; raise TypeError for a string constant."""
        if not self.is_int:
            raise TypeError("trying to get integer value from string constant")
        return self._value  # type: ignore[return-value]

    def as_string(self) -> str:
        """Return the string value; raise TypeError for an integer constant."""
        if self.is_int:
            raise TypeError("trying to get string value from integer constant")
        return self._value  # type: ignore[return-value]

    def compare_to(self, other: "Constant") -> int:
        """Return a negative, zero or positive number ordering self against other."""
        if self.is_int and other.is_int:
            return self._value - other._value  # type: ignore[operator]
        if not self.is_int and not other.is_int:
            mine = self._value.encode("utf-8")  # type: ignore[union-attr]
            theirs = other._value.encode("utf-8")  # type: ignore[union-attr]
            return (mine > theirs) - (mine < theirs)
        raise TypeError("comparing different types of constants")

    def __lt__(self, other: "Constant") -> bool:
        return self.compare_to(other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constant):
            return NotImplemented
        if self.is_int != other.is_int:
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        if self.is_int:
            return self._value  # type: ignore[return-value]
        return _string_hash(self._value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"