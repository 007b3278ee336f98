from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from kw_browser.core.columns import DELIMITER, Column, HeaderMap, split_cells
from kw_browser.core.exceptions import InvalidValue, TrendsLengthMismatch
from kw_browser.core.fields import (
    clamp,
    decode_float_list,
    decode_int_list,
    decode_optional_number,
)

TRENDS_LENGTH = 12


@dataclass(frozen=True)
class KeywordRow:
    """
    One decoded line of a keyword export.

    Fields whose column is missing from the header are absent: numbers are
    None (never 0) and lists are empty tuples.

    - id: 1-based position among data lines, stable for the dataset's lifetime
    - trends: 12 monthly ratios clamped to [0, 1], or empty
    - serp_features / intent_codes: integer tag codes, sorted ascending
    """

    id: int
    keyword: str
    search_volume: Optional[int] = None
    cpc: Optional[float] = None
    competition: Optional[float] = None
    number_of_results: Optional[int] = None
    trends: Tuple[float, ...] = ()
    related_relevance: Optional[float] = None
    serp_features: Tuple[int, ...] = ()
    intent_codes: Tuple[int, ...] = ()
    keyword_difficulty: Optional[int] = None


# Numeric columns: column -> (KeywordRow attribute, integer semantics)
NUMERIC_FIELDS = {
    Column.SEARCH_VOLUME: ("search_volume", True),
    Column.CPC: ("cpc", False),
    Column.COMPETITION: ("competition", False),
    Column.NUMBER_OF_RESULTS: ("number_of_results", True),
    Column.RELATED_RELEVANCE: ("related_relevance", False),
    Column.KEYWORD_DIFFICULTY: ("keyword_difficulty", True),
}

TAG_FIELDS = {
    Column.SERP_FEATURES: "serp_features",
    Column.INTENT: "intent_codes",
}


def _cell(cells: List[str], header_map: HeaderMap, column: Column) -> Optional[str]:
    """
    Raw text of a column for one line.

    None when the column is not in the header. A line shorter than the
    header yields "" past its end, i.e. the same as an empty cell.
    """
    pos = header_map.position(column)
    if pos is None:
        return None
    if pos >= len(cells):
        return ""
    return cells[pos]


def _decode_trends(raw: Optional[str], line_number: int) -> Tuple[float, ...]:
    values = decode_float_list(raw, column=Column.TRENDS.value, line_number=line_number)
    # Lenient on purpose: an empty cell in a present Trends column means no
    # trend data. Only a non-empty cell must carry all 12 months.
    if not values:
        return ()
    if len(values) != TRENDS_LENGTH:
        raise TrendsLengthMismatch(line_number=line_number, found=len(values), expected=TRENDS_LENGTH)
    return tuple(clamp(v) for v in values)


def decode_row(
        raw_line: str,
        header_map: HeaderMap,
        line_number: int,
        row_id: int,
        delimiter: str = DELIMITER,
) -> KeywordRow:
    """
    Decode one data line into a KeywordRow.

    :param line_number: physical line in the source text, used in errors
    :param row_id: 1-based position among data lines
    """
    cells = split_cells(raw_line, delimiter)

    keyword = (_cell(cells, header_map, Column.KEYWORD) or "").strip()
    if not keyword:
        raise InvalidValue(column=Column.KEYWORD.value, line_number=line_number, raw_text=keyword)

    values: dict = {}
    for column, (attr, is_integer) in NUMERIC_FIELDS.items():
        values[attr] = decode_optional_number(
            _cell(cells, header_map, column),
            is_integer,
            column=column.value,
            line_number=line_number,
        )

    for column, attr in TAG_FIELDS.items():
        codes = decode_int_list(
            _cell(cells, header_map, column),
            column=column.value,
            line_number=line_number,
        )
        values[attr] = tuple(sorted(codes))

    values["trends"] = _decode_trends(_cell(cells, header_map, Column.TRENDS), line_number)

    return KeywordRow(id=row_id, keyword=keyword, **values)
