from __future__ import annotations

import pytest

from kw_browser.core.columns import build_header_map
from kw_browser.core.exceptions import InvalidListEntry, InvalidValue, TrendsLengthMismatch
from kw_browser.core.keyword_row import decode_row

FULL_HEADER = (
    "Keyword;Search Volume;CPC;Competition;Number of Results;Trends;"
    "Related Relevance;Keywords SERP Features;Intent;Keyword Difficulty Index"
)
TRENDS_12 = "0.66,0.64,0.65,0.68,0.71,0.69,0.72,0.74,0.75,0.77,0.79,0.82"


def _decode(line, header=FULL_HEADER, line_number=2, row_id=1):
    return decode_row(line, build_header_map(header), line_number, row_id)


def test_decode_row_full_line():
    row = _decode(f"semrush login;14800;0.18;0.05;23000000;{TRENDS_12};0.95;0,7;2;16")

    assert row.id == 1
    assert row.keyword == "semrush login"
    assert row.search_volume == 14800
    assert row.cpc == 0.18
    assert row.competition == 0.05
    assert row.number_of_results == 23000000
    assert len(row.trends) == 12
    assert row.trends[0] == 0.66
    assert row.related_relevance == 0.95
    assert row.serp_features == (0, 7)
    assert row.intent_codes == (2,)
    assert row.keyword_difficulty == 16


def test_absent_columns_are_none_or_empty_not_zero():
    row = _decode("seo tools;100", header="Keyword;Search Volume")

    assert row.search_volume == 100
    assert row.cpc is None
    assert row.competition is None
    assert row.keyword_difficulty is None
    assert row.trends == ()
    assert row.serp_features == ()
    assert row.intent_codes == ()


def test_tag_lists_are_sorted_with_duplicates():
    row = _decode("kw;9,1,4,1", header="Keyword;Keywords SERP Features")
    assert row.serp_features == (1, 1, 4, 9)


def test_trends_values_are_clamped():
    raw = "-0.5,1.5,0.2,0.2,0.2,0.2,0.2,0.2,0.2,0.2,0.2,0.2"
    row = _decode(f"kw;{raw}", header="Keyword;Trends")
    assert row.trends[0] == 0.0
    assert row.trends[1] == 1.0
    assert row.trends[2] == 0.2


@pytest.mark.parametrize("count", [1, 5, 11, 13])
def test_trends_wrong_length_fails(count):
    raw = ",".join(["0.5"] * count)
    with pytest.raises(TrendsLengthMismatch) as exc_info:
        _decode(f"kw;{raw}", header="Keyword;Trends", line_number=4)

    assert exc_info.value.line_number == 4
    assert exc_info.value.found == count


def test_trends_length_checked_before_clamping():
    # 12 values, some out of range: length OK, values clamped
    raw = ",".join(["2"] * 12)
    row = _decode(f"kw;{raw}", header="Keyword;Trends")
    assert row.trends == (1.0,) * 12


def test_empty_trends_cell_is_absent():
    row = _decode("kw;", header="Keyword;Trends")
    assert row.trends == ()


def test_short_line_yields_absent_trailing_values():
    row = _decode("only keyword", header="Keyword;Search Volume;Intent")
    assert row.keyword == "only keyword"
    assert row.search_volume is None
    assert row.intent_codes == ()


def test_extra_cells_are_ignored():
    row = _decode("kw;10;junk;more", header="Keyword;Search Volume")
    assert row.search_volume == 10


def test_invalid_number_reports_column_line_and_text():
    with pytest.raises(InvalidValue) as exc_info:
        _decode("kw;lots", header="Keyword;Search Volume", line_number=9)

    err = exc_info.value
    assert err.column == "Search Volume"
    assert err.line_number == 9
    assert err.raw_text == "lots"
    assert "Line 9" in str(err)


def test_invalid_list_entry_fails_row():
    with pytest.raises(InvalidListEntry):
        _decode("kw;1,two", header="Keyword;Intent")


def test_empty_keyword_fails():
    with pytest.raises(InvalidValue) as exc_info:
        _decode(" ;10", header="Keyword;Search Volume")
    assert exc_info.value.column == "Keyword"


def test_keyword_column_not_first():
    row = _decode("5;kw", header="Search Volume;Keyword")
    assert row.keyword == "kw"
    assert row.search_volume == 5
