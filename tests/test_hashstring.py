import pytest
from hypothesis import given, strategies as st

from uutkit.hashstring import HashString, string_hash


def test_default_is_empty():
    hs = HashString()
    assert hs.is_empty()
    assert int(hs) == 0
    assert hs.text == ""


def test_empty_constant():
    assert HashString.EMPTY.is_empty()
    assert HashString.EMPTY == HashString()


def test_fnv1a_known_vectors():
    assert string_hash("") & 0xFFFFFFFF == 0x811C9DC5
    assert string_hash("a") & 0xFFFFFFFF == 0xE40C292C


def test_int_matches_string_hash():
    hs = HashString("texture")
    assert int(hs) == string_hash("texture")
    assert hs.hash_code == int(hs)
    assert str(hs) == "texture"


def test_empty_text_is_not_empty_hash():
    assert not HashString("").is_empty()


def test_non_string_rejected():
    with pytest.raises(TypeError):
        HashString(42)


def test_distinct_strings_differ():
    assert HashString("abc") != HashString("abd")


def test_usable_as_key():
    table = {HashString("key"): 1}
    assert table[HashString("key")] == 1


def test_comparison_with_other_types():
    assert (HashString("a") == "a") is False
    with pytest.raises(TypeError):
        HashString("a") < "a"


@given(st.text())
def test_hash_is_signed_32_bit(text):
    value = string_hash(text)
    assert -(1 << 31) <= value < (1 << 31)
    assert HashString(text) == HashString(text)


@given(st.text(), st.text())
def test_ordering_follows_hash(a, b):
    ha, hb = HashString(a), HashString(b)
    assert (ha < hb) == (int(ha) < int(hb))
    assert (ha <= hb) == (int(ha) <= int(hb))
    assert (ha > hb) == (int(ha) > int(hb))
    assert (ha == hb) == (int(ha) == int(hb))