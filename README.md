# recdb

The record, query-scan and locking layers of a small relational database
engine, for learning and experimenting.

## What is inside

- `recdb.constant.Constant`: an integer or string value. `as_int()` and
  `as_string()` raise `TypeError` for the wrong kind; `compare_to()` orders
  two constants of the same kind (strings by their UTF-8 bytes) and raises
  `TypeError` for mixed kinds. Constants compare equal, hash and convert to
  `str`.
- `recdb.schema.Schema`, `FieldType`, `FieldInfo`: the fields of a table,
  kept in the order they were added, with their types and lengths.
  `add_int_field`, `add_string_field`, `add`, `add_all`, `has_field`,
  `type`, `length` and `fields`.
- `recdb.layout.Layout`: the byte offset of each field in a record slot and
  the size of a slot. A slot starts with a four-byte in-use flag; integer
  fields take four bytes, and other fields take what the `max_length`
  callable you pass returns for their declared length.
- `recdb.rid.RID`: a record identifier (block number and slot).
- `recdb.record_page.RecordPage`, `Block`, `SlotFlag`: reading and writing
  records in the slots of one block through a transaction object.
- `recdb.table_scan.TableScan`: moves through all the records of a table
  (stored in the file `<table_name>.tbl`) and inserts, deletes and updates
  them, adding blocks as needed.
- `recdb.scan.Scan`, `UpdateScan`: the scan interfaces. Iterating over a
  scan restarts it and yields it once on each record; a scan is also a
  context manager that closes it on exit.
- `recdb.expression.Expression`: a constant or a field reference, evaluated
  against a scan.
- `recdb.product_scan.ProductScan`: the cross product of two scans.
- `recdb.project_scan.ProjectScan`: a scan limited to chosen fields; reading
  any other field raises `KeyError`.
- `recdb.lock_table.LockTable`, `LockAbortError`: shared and exclusive block
  locks. A request waits up to `max_wait` seconds (10 by default) and then
  raises `LockAbortError`.
- `recdb.concurrency.ConcurrencyManager`: the locks held by one
  transaction, released together by `release()`. Give several managers the
  same `LockTable` for them to see each other's locks.

## Example

```python
from recdb.constant import Constant
from recdb.schema import Schema
from recdb.layout import Layout

schema = Schema()
schema.add_int_field("A")
schema.add_string_field("B", 9)

# bytes a string field of the given declared length takes up in a page
layout = Layout(schema, lambda length: 4 + 4 * length)
print(layout.offset("A"), layout.offset("B"), layout.slot_size)  # 4 8 48

c = Constant.of_int(42)
print(c.as_int(), str(c), c == Constant.of_int(42))
```

A `TableScan` works through a transaction object with the methods listed by
`recdb.record_page.Transaction`: `pin`, `unpin`, `get_int`, `get_string`,
`set_int`, `set_string`, `size`, `append` and `block_size`. Given one, it
inserts and visits records:

```python
from recdb.table_scan import TableScan

scan = TableScan(tx, "students", layout)
scan.insert()
scan.set_int("A", 7)
scan.set_string("B", "rec7")
for record in scan:
    print(record.get_int("A"), record.get_string("B"), record.get_rid())
scan.close()
```

## What it does not do

The package has no transaction, buffer, file or log manager and no
recovery: it does not read or write files itself. Record storage goes
entirely through the transaction object you supply. There is no SQL parser,
no planner and no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```