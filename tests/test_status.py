import pytest

from procmon.status import field_value, find_field, is_numeric


@pytest.mark.parametrize("text", ["1", "1234", "007"])
def test_is_numeric_accepts_digits(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", [".", "..", "self", "12a", "-1", " 1"])
def test_is_numeric_rejects_other_text(text):
    assert is_numeric(text) is False


def test_field_value_strips_key_whitespace_and_newline():
    assert field_value("Name:\tbash\n", "Name:") == "bash"


def test_field_value_keeps_inner_spaces():
    assert field_value("State:\tS (sleeping)\n", "State:") == "S (sleeping)"


def test_field_value_without_newline():
    assert field_value("Uid:   1000\t1000", "Uid:") == "1000\t1000"


def test_field_value_empty_value():
    assert field_value("Name:\n", "Name:") == ""


def test_find_field_returns_first_match():
    lines = ["Name:\tinit\n", "Umask:\t0022\n", "State:\tR (running)\n"]
    assert find_field(lines, "State:") == "R (running)"


def test_find_field_missing_key():
    assert find_field(["Name:\tinit\n"], "Uid:") is None


def test_find_field_consumes_iterator_in_order():
    lines = iter(["Name:\tsh\n", "State:\tS (sleeping)\n", "Uid:\t0\t0\n"])
    assert find_field(lines, "State:") == "S (sleeping)"
    assert find_field(lines, "Name:") is None


def test_find_field_sequential_lookups():
    lines = iter(["Name:\tsh\n", "State:\tZ (zombie)\n", "Uid:\t5\t5\n"])
    assert find_field(lines, "Name:") == "sh"
    assert find_field(lines, "State:") == "Z (zombie)"
    assert find_field(lines, "Uid:") == "5\t5"