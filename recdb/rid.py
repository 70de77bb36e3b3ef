"""Record identifiers: a block number and a slot within it."""

from typing import NamedTuple


class RID(NamedTuple):
    """Identifies a record by block number and slot."""

    block_num: int
    slot: int

    def __str__(self) -> str:
        return f"This RID is BlockNum: {self.block_num}, Slot: {self.slot}"