"""Slotted record storage within a single block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from recdb.layout import Layout
from recdb.schema import FieldType


@dataclass(frozen=True)
class Block:
    """Identifies a block by file name and block number."""

    file_name: str
    number: int


class SlotFlag(IntEnum):
    """The in-use flag stored at the start of every slot."""

    EMPTY = 0
    USED = 1


class Transaction(Protocol):
    """What record storage needs from a transaction."""

    def pin(self, block: Block) -> None: ...

    def unpin(self, block: Block) -> None: ...

    def get_int(self, block: Block, offset: int) -> int: ...

    def get_string(self, block: Block, offset: int) -> str: ...

    def set_int(self, block: Block, offset: int, value: int, ok_to_log: bool) -> None: ...

    def set_string(self, block: Block, offset: int, value: str, ok_to_log: bool) -> None: ...

    def size(self, file_name: str) -> int: ...

    def append(self, file_name: str) -> Block: ...

    def block_size(self) -> int: ...


class RecordPage:
    """Stores records of one layout in the slots of a pinned block."""

    def __init__(self, tx: Transaction, block: Block, layout: Layout) -> None:
        self.tx = tx
        self.block = block
        self.layout = layout
        tx.pin(block)

    def offset(self, slot: int) -> int:
        """Return the byte offset where the slot begins."""
        return slot * self.layout.slot_size

    def _field_pos(self, slot: int, field_name: str) -> int:
        return self.offset(slot) + self.layout.offset(field_name)

    def get_int(self, slot: int, field_name: str) -> int:
        return self.tx.get_int(self.block, self._field_pos(slot, field_name))

    def get_string(self, slot: int, field_name: str) -> str:
        return self.tx.get_string(self.block, self._field_pos(slot, field_name))

    def set_int(self, slot: int, field_name: str, value: int) -> None:
        self.tx.set_int(self.block, self._field_pos(slot, field_name), value, True)

    def set_string(self, slot: int, field_name: str, value: str) -> None:
        self.tx.set_string(self.block, self._field_pos(slot, field_name), value, True)

    def _set_flag(self, slot: int, flag: SlotFlag) -> None:
        self.tx.set_int(self.block, self.offset(slot), int(flag), True)

    def delete(self, slot: int) -> None:
        """Mark the slot empty."""
        self._set_flag(slot, SlotFlag.EMPTY)

    def is_valid_slot(self, slot: int) -> bool:
        """Tell whether the whole slot fits in the block."""
        return self.offset(slot + 1) <= self.tx.block_size()

    def _search_after(self, slot: int, flag: SlotFlag) -> int:
        slot += 1
        while self.is_valid_slot(slot):
            if self.tx.get_int(self.block, self.offset(slot)) == flag:
                return slot
            slot += 1
        return -1

    def format(self) -> None:
        """Mark every slot empty and reset its fields, without logging."""
        schema = self.layout.schema
        slot = 0
        while self.is_valid_slot(slot):
            self.tx.set_int(self.block, self.offset(slot), int(SlotFlag.EMPTY), False)
            for name in schema.fields():
                pos = self._field_pos(slot, name)
                field_type = schema.type(name)
                if field_type == FieldType.INTEGER:
                    self.tx.set_int(self.block, pos, 0, False)
                elif field_type == FieldType.VARCHAR:
                    self.tx.set_string(self.block, pos, "", False)
            slot += 1

    def insert_after(self, slot: int) -> int:
        """Claim the first empty slot after the given one; return -1 if none."""
        new_slot = self._search_after(slot, SlotFlag.EMPTY)
        if new_slot >= 0:
            self._set_flag(new_slot, SlotFlag.USED)
        return new_slot

    def next_after(self, slot: int) -> int:
        """Return the first used slot after the given one, or -1 if none."""
        return self._search_after(slot, SlotFlag.USED)