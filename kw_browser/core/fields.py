"""
Field decoders: raw text cell -> typed value.

Every decoder is pure and either returns a value or raises a labelled
DatasetParseError subclass. Nothing is silently dropped.
"""
from __future__ import annotations

import math
import re
from typing import Optional, Tuple, Union

from kw_browser.core.exceptions import InvalidListEntry, InvalidValue

Number = Union[int, float]

THOUSANDS_SEPARATOR = ","
LIST_SEPARATOR = ","

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def _parse_literal(text: str, is_integer: bool) -> Optional[Number]:
    """Return the parsed number, or None when text is not a finite literal."""
    pattern = _INT_RE if is_integer else _FLOAT_RE
    if not pattern.match(text):
        return None
    try:
        value: Number = int(text) if is_integer else float(text)
    except ValueError:
        # int() refuses very long digit strings
        return None
    if not math.isfinite(value):
        return None
    return value


def decode_number(raw: str, is_integer: bool, *, column: str, line_number: int) -> Number:
    text = raw.strip().replace(THOUSANDS_SEPARATOR, "")
    value = _parse_literal(text, is_integer)
    if value is None:
        raise InvalidValue(column=column, line_number=line_number, raw_text=raw)
    return value


def decode_optional_number(
        raw: Optional[str],
        is_integer: bool,
        *,
        column: str,
        line_number: int,
) -> Optional[Number]:
    """None for an absent column or a blank cell, otherwise decode_number."""
    if raw is None or not raw.strip():
        return None
    return decode_number(raw, is_integer, column=column, line_number=line_number)


def _decode_list(
        raw: Optional[str],
        is_integer: bool,
        column: str,
        line_number: int,
) -> Tuple[Number, ...]:
    if raw is None or not raw.strip():
        return ()

    values = []
    for piece in raw.split(LIST_SEPARATOR):
        token = piece.strip()
        value = _parse_literal(token, is_integer)
        if value is None:
            raise InvalidListEntry(column=column, line_number=line_number, raw_text=token)
        values.append(value)
    return tuple(values)


def decode_int_list(raw: Optional[str], *, column: str, line_number: int) -> Tuple[int, ...]:
    return _decode_list(raw, True, column, line_number)  # type: ignore[return-value]


def decode_float_list(raw: Optional[str], *, column: str, line_number: int) -> Tuple[float, ...]:
    return _decode_list(raw, False, column, line_number)  # type: ignore[return-value]


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))
