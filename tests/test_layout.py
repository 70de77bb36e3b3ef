import pytest

from recdb.layout import Layout
from recdb.schema import Schema


def _max_length(length):
    return 4 + 2 * length


@pytest.fixture
def schema():
    result = Schema()
    result.add_int_field("A")
    result.add_string_field("B", 9)
    return result


@pytest.mark.parametrize("name, expected", [("A", 4), ("B", 8)])
def test_offsets_from_schema(schema, name, expected):
    assert Layout(schema, _max_length).offset(name) == expected


def test_slot_size(schema):
    assert Layout(schema, _max_length).slot_size == 30


def test_offsets_increase_in_field_order(schema):
    schema.add_int_field("C")
    layout = Layout(schema, _max_length)
    offsets = [layout.offset(name) for name in schema.fields()]
    assert offsets == sorted(offsets)
    assert layout.offset("C") == 30
    assert layout.slot_size == 34


def test_empty_schema_slot_holds_flag_only():
    assert Layout(Schema(), _max_length).slot_size == 4


def test_given_offsets_are_used(schema):
    layout = Layout(schema, _max_length, {"A": 10, "B": 20}, 50)
    assert (layout.offset("A"), layout.offset("B"), layout.slot_size) == (10, 20, 50)


@pytest.mark.parametrize(
    "build, error",
    [
        (lambda s: Layout(s, _max_length, {"A": 4}), ValueError),
        (lambda s: Layout(s, _max_length).offset("Z"), KeyError),
    ],
)
def test_errors(schema, build, error):
    with pytest.raises(error):
        build(schema)