from __future__ import annotations

import pytest

from kw_browser.core.exceptions import InvalidListEntry, InvalidValue
from kw_browser.core.fields import (
    clamp,
    decode_float_list,
    decode_int_list,
    decode_number,
    decode_optional_number,
)


def _num(raw, is_integer=False):
    return decode_number(raw, is_integer, column="CPC", line_number=2)


def test_decode_number_trims_and_strips_thousands_separators():
    assert _num(" 14,800 ", is_integer=True) == 14800
    assert _num("1,234.5") == 1234.5
    assert _num("0.18") == 0.18
    assert _num("-3") == -3.0


def test_decode_number_integer_returns_int():
    value = _num("23000000", is_integer=True)
    assert value == 23000000
    assert isinstance(value, int)


@pytest.mark.parametrize("raw", ["abc", "", "   ", "nan", "inf", "-Infinity", "1_000", "1.2.3", "12.5x"])
def test_decode_number_rejects_non_finite_or_garbage(raw):
    with pytest.raises(InvalidValue) as exc_info:
        _num(raw)

    err = exc_info.value
    assert err.column == "CPC"
    assert err.line_number == 2
    assert err.raw_text == raw


def test_decode_number_integer_rejects_fraction():
    with pytest.raises(InvalidValue):
        _num("12.5", is_integer=True)


def test_decode_number_overlong_integer_is_invalid_value():
    raw = "9" * 5000
    with pytest.raises(InvalidValue) as exc_info:
        _num(raw, is_integer=True)
    assert exc_info.value.raw_text == raw


def test_decode_optional_number_blank_or_absent_is_none():
    assert decode_optional_number(None, True, column="Search Volume", line_number=3) is None
    assert decode_optional_number("", True, column="Search Volume", line_number=3) is None
    assert decode_optional_number("   ", False, column="CPC", line_number=3) is None
    assert decode_optional_number("0", True, column="Search Volume", line_number=3) == 0


def test_decode_int_list_basic_and_empty():
    assert decode_int_list("0,7", column="Intent", line_number=2) == (0, 7)
    assert decode_int_list(" 3 , 1 ", column="Intent", line_number=2) == (3, 1)
    assert decode_int_list("", column="Intent", line_number=2) == ()
    assert decode_int_list(None, column="Intent", line_number=2) == ()


def test_decode_int_list_keeps_duplicates():
    assert decode_int_list("5,5,1", column="Intent", line_number=2) == (5, 5, 1)


def test_decode_list_one_bad_token_fails_whole_cell():
    with pytest.raises(InvalidListEntry) as exc_info:
        decode_int_list("1,x,3", column="Keywords SERP Features", line_number=7)

    err = exc_info.value
    assert err.raw_text == "x"
    assert err.line_number == 7
    assert err.column == "Keywords SERP Features"


def test_decode_list_empty_token_is_invalid():
    with pytest.raises(InvalidListEntry):
        decode_float_list("0.1,,0.2", column="Trends", line_number=2)


def test_decode_int_list_rejects_decimal():
    with pytest.raises(InvalidListEntry):
        decode_int_list("1.5", column="Intent", line_number=2)


def test_decode_float_list():
    assert decode_float_list("0.5,1,.25", column="Trends", line_number=2) == (0.5, 1.0, 0.25)


def test_clamp():
    assert clamp(-0.2) == 0.0
    assert clamp(1.7) == 1.0
    assert clamp(0.4) == 0.4
