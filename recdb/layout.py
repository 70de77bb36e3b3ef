"""Physical layout of a record: field offsets within a slot."""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from recdb.schema import FieldType, Schema

INT_SIZE = 4


class Layout:
    """Offsets of each field in a slot and the slot's total size.

    A slot begins with a four-byte in-use flag, followed by the fields in
    schema order. ``max_length`` gives the bytes a string field of a declared
    length occupies in a page.
    """

    def __init__(
        self,
        schema: Schema,
        max_length: Callable[[int], int],
        offsets: Optional[Mapping[str, int]] = None,
        slot_size: Optional[int] = None,
    ) -> None:
        self.schema = schema
        if offsets is not None:
            if slot_size is None:
                raise ValueError("slot_size is required when offsets are given")
            self.offsets = dict(offsets)
            self.slot_size = slot_size
            return
        self.offsets = {}
        pos = INT_SIZE
        for name in schema.fields():
            self.offsets[name] = pos
            if schema.type(name) == FieldType.INTEGER:
                pos += INT_SIZE
            else:
                pos += max_length(schema.length(name))
        self.slot_size = pos

    def offset(self, name: str) -> int:
        """Return the field's offset within a slot; raise KeyError if unknown."""
        return self.offsets[name]