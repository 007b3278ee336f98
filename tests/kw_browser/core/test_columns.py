from __future__ import annotations

from kw_browser.core.columns import COLUMN_CATALOG, Column, build_header_map


def test_catalog_has_ten_columns_in_order():
    assert len(COLUMN_CATALOG) == 10
    assert COLUMN_CATALOG[0] is Column.KEYWORD
    assert COLUMN_CATALOG[-1] is Column.KEYWORD_DIFFICULTY


def test_header_map_any_order_and_ignores_unknown():
    hm = build_header_map("CPC;Extra;Keyword;Intent")

    assert hm.position(Column.CPC) == 0
    assert hm.position(Column.KEYWORD) == 2
    assert hm.position(Column.INTENT) == 3
    assert hm.position(Column.TRENDS) is None
    assert hm.present_columns == {Column.CPC, Column.KEYWORD, Column.INTENT}


def test_header_map_is_case_sensitive():
    hm = build_header_map("keyword;cpc")
    assert hm.present_columns == frozenset()


def test_header_map_strips_cells_and_bom():
    hm = build_header_map("\ufeffKeyword ; Search Volume")
    assert hm.position(Column.KEYWORD) == 0
    assert hm.position(Column.SEARCH_VOLUME) == 1


def test_header_map_first_duplicate_wins():
    hm = build_header_map("Keyword;CPC;CPC")
    assert hm.position(Column.CPC) == 1
