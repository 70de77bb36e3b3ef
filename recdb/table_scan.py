"""A scan over every record stored in a table's file."""

from __future__ import annotations

from typing import Callable, Optional

from recdb.constant import Constant
from recdb.layout import Layout
from recdb.record_page import Block, RecordPage, Transaction
from recdb.rid import RID
from recdb.scan import UpdateScan
from recdb.schema import FieldType


class TableScan(UpdateScan):
    """Reads and modifies the records of a table, block by block."""

    def __init__(self, tx: Transaction, table_name: str, layout: Layout) -> None:
        self.tx = tx
        self.layout = layout
        self.file_name = f"{table_name}.tbl"
        self.record_page: Optional[RecordPage] = None
        self.current_slot = -1
        if tx.size(self.file_name) == 0:
            self._move_to_new_block()
        else:
            self._move_to_block(0)

    def _page(self) -> RecordPage:
        if self.record_page is None:
            raise RuntimeError("table scan is closed")
        return self.record_page

    def close(self) -> None:
        """Unpin the current block."""
        if self.record_page is not None:
            self.tx.unpin(self.record_page.block)
            self.record_page = None

    def _open(self, block: Block, slot: int = -1) -> RecordPage:
        self.close()
        self.record_page = RecordPage(self.tx, block, self.layout)
        self.current_slot = slot
        return self.record_page

    def _move_to_new_block(self) -> None:
        self.close()
        self._open(self.tx.append(self.file_name)).format()

    def _move_to_block(self, number: int) -> None:
        self._open(Block(self.file_name, number))

    def _at_last_block(self) -> bool:
        return self._page().block.number == self.tx.size(self.file_name) - 1

    def _seek(self, find: Callable[[RecordPage, int], int], extend: bool) -> bool:
        """Move to the slot that find picks, walking on through later blocks."""
        self.current_slot = find(self._page(), self.current_slot)
        while self.current_slot < 0:
            if not self._at_last_block():
                self._move_to_block(self._page().block.number + 1)
            elif extend:
                self._move_to_new_block()
            else:
                return False
            self.current_slot = find(self._page(), self.current_slot)
        return True

    def before_first(self) -> None:
        self._move_to_block(0)

    def next(self) -> bool:
        return self._seek(RecordPage.next_after, extend=False)

    def insert(self) -> None:
        self._seek(RecordPage.insert_after, extend=True)

    def delete(self) -> None:
        self._page().delete(self.current_slot)

    def move_to_rid(self, rid: RID) -> None:
        self._open(Block(self.file_name, rid.block_num), rid.slot)

    def has_field(self, field_name: str) -> bool:
        return self.layout.schema.has_field(field_name)

    def get_int(self, field_name: str) -> int:
        return self._page().get_int(self.current_slot, field_name)

    def get_string(self, field_name: str) -> str:
        return self._page().get_string(self.current_slot, field_name)

    def get_val(self, field_name: str) -> Constant:
        if self.layout.schema.type(field_name) == FieldType.INTEGER:
            return Constant.of_int(self.get_int(field_name))
        return Constant.of_string(self.get_string(field_name))

    def set_int(self, field_name: str, value: int) -> None:
        self._page().set_int(self.current_slot, field_name, value)

    def set_string(self, field_name: str, value: str) -> None:
        self._page().set_string(self.current_slot, field_name, value)

    def set_val(self, field_name: str, value: Constant) -> None:
        if value.is_int:
            self.set_int(field_name, value.as_int())
        else:
            self.set_string(field_name, value.as_string())

    def get_rid(self) -> RID:
        return RID(self._page().block.number, self.current_slot)