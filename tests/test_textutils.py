import pytest

from sidengine.textutils import (
    array_from_tokens,
    casecompare,
    equal,
    extended_ascii_to_utf8,
    load_file,
    to_lower,
    trim,
    utf8_to_extended_ascii,
)


def test_casecompare():
    assert casecompare("a", "A") is True
    assert casecompare("a", "b") is False


def test_equal_ignores_case():
    assert equal("Hello", "hELLO") is True
    assert equal("abc", "abd") is False
    assert equal("abc", "abcd") is False


def test_equal_with_prefix_length():
    assert equal("abcX", "ABCy", 3) is True
    assert equal("abcX", "ABCy", 4) is False
    assert equal("x", "y", 0) is True


def test_equal_with_missing_strings():
    assert equal(None, "a") is False
    assert equal("a", None) is False
    assert equal(None, None) is True


def test_to_lower_only_touches_ascii():
    assert to_lower("ABC") == "abc"
    assert to_lower("É") == "É"
    text = "Some Mixed Text"
    assert to_lower(text) == to_lower(text.upper())


def test_trim():
    assert trim("  x y \t\n") == "x y"
    assert trim("   ") == ""


def test_array_from_tokens_default_newline():
    assert array_from_tokens("a\n\n  b  \nc\n") == ["a", "b", "c"]


def test_array_from_tokens_custom_delimiter():
    assert array_from_tokens(" x, ,y ", ",") == ["x", "y"]


def test_extended_ascii_to_utf8_matches_latin1():
    assert extended_ascii_to_utf8(bytes([0xE9])) == "é".encode("utf-8")
    assert extended_ascii_to_utf8(b"plain") == b"plain"


@pytest.mark.parametrize("value", range(1, 256))
def test_extended_ascii_round_trip(value):
    data = bytes([value, 0x41])
    assert utf8_to_extended_ascii(extended_ascii_to_utf8(data)) == data


def test_conversions_stop_at_nul():
    assert utf8_to_extended_ascii(b"ab\0cd") == b"ab"
    assert extended_ascii_to_utf8(b"ab\0cd") == b"ab"


def test_load_file_reads_bytes(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes(range(10))
    path.write_bytes(payload)
    assert load_file(path) == payload


def test_load_file_missing_or_empty(tmp_path):
    assert load_file(tmp_path / "missing.bin") == b""
    empty = tmp_path / "empty.bin"
    empty.write_bytes(b"")
    assert load_file(empty) == b""