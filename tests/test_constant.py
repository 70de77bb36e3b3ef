import pytest

from recdb.constant import Constant


def test_int_round_trip():
    assert Constant.of_int(42).as_int() == 42
    assert Constant.of_int(42).is_int


def test_string_round_trip():
    assert Constant.of_string("hello").as_string() == "hello"
    assert not Constant.of_string("hello").is_int


def test_as_int_on_string_raises():
    with pytest.raises(TypeError):
        Constant.of_string("x").as_int()


def test_as_string_on_int_raises():
    with pytest.raises(TypeError):
        Constant.of_int(1).as_string()


def test_compare_ints():
    assert Constant.of_int(3).compare_to(Constant.of_int(5)) < 0
    assert Constant.of_int(5).compare_to(Constant.of_int(3)) > 0
    assert Constant.of_int(4).compare_to(Constant.of_int(4)) == 0


def test_compare_strings():
    assert Constant.of_string("abc").compare_to(Constant.of_string("abd")) < 0
    assert Constant.of_string("b").compare_to(Constant.of_string("a")) > 0
    assert Constant.of_string("same").compare_to(Constant.of_string("same")) == 0


def test_compare_mixed_raises():
    with pytest.raises(TypeError):
        Constant.of_int(1).compare_to(Constant.of_string("1"))


def test_equality():
    assert Constant.of_int(7) == Constant.of_int(7)
    assert Constant.of_string("a") == Constant.of_string("a")
    assert not (Constant.of_int(1) == Constant.of_string("1"))
    assert not (Constant.of_int(1) == Constant.of_int(2))


def test_int_hash_is_value():
    assert Constant.of_int(7).__hash__() == 7


def test_empty_string_hash_is_seed():
    assert Constant.of_string("").__hash__() == 5381


def test_equal_strings_hash_equal():
    assert hash(Constant.of_string("record")) == hash(Constant.of_string("record"))
    assert len({Constant.of_string("k"), Constant.of_string("k")}) == 1


def test_str():
    assert str(Constant.of_int(-12)) == "-12"
    assert str(Constant.of_string("rec5")) == "rec5"


def test_invalid_construction():
    with pytest.raises(TypeError):
        Constant.of_int("3")
    with pytest.raises(TypeError):
        Constant.of_string(3)