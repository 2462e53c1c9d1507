import pytest
from hypothesis import given, strategies as st

from uutkit.containers import Dictionary, FixedArray, List


def test_fixed_array_fill_and_len():
    arr = FixedArray(4, "x")
    assert len(arr) == 4
    assert list(arr) == ["x", "x", "x", "x"]


def test_fixed_array_zero():
    arr = FixedArray(3, 7)
    arr.zero()
    assert list(arr) == [0, 0, 0]


def test_fixed_array_set_and_get():
    arr = FixedArray(3, 0)
    arr[1] = 5
    assert arr[1] == 5
    assert len(arr) == 3


def test_fixed_array_out_of_range():
    arr = FixedArray(2, 0)
    with pytest.raises(IndexError):
        arr[2]
    with pytest.raises(IndexError):
        arr[5] = 1
    assert arr[1] == 0
    assert list(arr) == [0, 0]
    assert len(arr) == 2


def test_fixed_array_slice_assignment_rejected():
    arr = FixedArray(2, 0)
    with pytest.raises(TypeError):
        arr[0:1] = [1, 2, 3]
    assert len(arr) == 2


def test_fixed_array_negative_count():
    with pytest.raises(ValueError):
        FixedArray(-1)


def test_fixed_array_equality():
    assert FixedArray(2, 1) == FixedArray(2, 1)
    assert not (FixedArray(2, 1) == FixedArray(3, 1))


def test_list_exists_and_true_for_all():
    items = List([1, 2, 3])
    assert items.exists(lambda v: v > 2)
    assert not items.exists(lambda v: v > 3)
    assert items.true_for_all(lambda v: v > 0)
    assert not items.true_for_all(lambda v: v > 1)
    assert List().true_for_all(lambda v: False)


def test_list_find_all_returns_list():
    found = List([1, 2, 3, 4]).find_all(lambda v: v % 2 == 0)
    assert isinstance(found, List)
    assert found == [2, 4]


def test_list_convert_all():
    converted = List([1, 2, 3]).convert_all(str)
    assert converted == ["1", "2", "3"]
    assert isinstance(converted, List)


def test_list_index_of_and_last_index_of():
    items = List(["a", "b", "a", "c"])
    assert items.index_of("a") == 0
    assert items.last_index_of("a") == 2
    assert items.index_of("z") == -1
    assert items.last_index_of("z") == -1


def test_list_remove_all():
    items = List([1, 2, 3, 4, 5])
    removed = items.remove_all(lambda v: v % 2 == 1)
    assert removed == 3
    assert items == [2, 4]


@given(st.lists(st.integers()))
def test_list_remove_all_partitions(values):
    items = List(values)
    removed = items.remove_all(lambda v: v < 0)
    assert removed == sum(1 for v in values if v < 0)
    assert items == [v for v in values if v >= 0]


@given(st.lists(st.integers(min_value=0, max_value=5)), st.integers(0, 5))
def test_list_index_bounds(values, needle):
    items = List(values)
    first = items.index_of(needle)
    last = items.last_index_of(needle)
    if needle in values:
        assert items[first] == needle and items[last] == needle
        assert first <= last
    else:
        assert first == last == -1


def test_dictionary_add_does_not_overwrite():
    d = Dictionary()
    assert d.add("k", 1)
    assert not d.add("k", 2)
    assert d["k"] == 1


def test_dictionary_try_get():
    d = Dictionary({"a": 1})
    assert d.try_get("a") == 1
    assert d.try_get("missing") is None


@given(st.dictionaries(st.integers(), st.integers()))
def test_dictionary_keys_are_ordered(mapping):
    d = Dictionary()
    for key, value in mapping.items():
        d.add(key, value)
    assert list(d) == sorted(mapping)
    assert len(d) == len(mapping)