from __future__ import annotations

import pytest

from kw_browser.core.columns import COLUMN_CATALOG, Column
from kw_browser.core.exceptions import DatasetParseError, MissingRequiredColumn
from kw_browser.core.query_state import QueryState, SortDirection, SortKey
from kw_browser.services.session_service import KeywordSession, SessionRegistry

DATASET_A = "Keyword;Search Volume;Keywords SERP Features\nalpha;10;1,2\nbeta;30;2\ngamma;20;\n"
DATASET_B = "Keyword;CPC\ndelta;0.4\n"


def _loaded_session() -> KeywordSession:
    session = KeywordSession()
    session.load_dataset(DATASET_A)
    return session


def _ids(rows):
    return [r.id for r in rows]


def test_load_dataset_returns_counts_and_columns():
    session = KeywordSession()
    result = session.load_dataset(DATASET_A)

    assert result.row_count == 3
    assert result.present_columns == {Column.KEYWORD, Column.SEARCH_VOLUME, Column.SERP_FEATURES}
    assert len(session.table) == 3


def test_load_blank_text_gives_full_catalog():
    session = KeywordSession()
    result = session.load_dataset("")
    assert result.row_count == 0
    assert result.present_columns == frozenset(COLUMN_CATALOG)


def test_failed_load_keeps_previous_table_and_query():
    session = _loaded_session()
    session.set_query(active_tags=[2], selected_ids=[1])
    table_before = session.table
    query_before = session.query

    with pytest.raises(MissingRequiredColumn):
        session.load_dataset("CPC\n1.0\n")

    assert session.table is table_before
    assert session.query == query_before


def test_failed_load_on_bad_row_is_dataset_parse_error():
    session = _loaded_session()
    with pytest.raises(DatasetParseError):
        session.load_dataset("Keyword;Search Volume\nok;1\nbad;x\n")
    assert len(session.table) == 3


def test_successful_load_resets_selection_and_tags_but_keeps_sort_and_text():
    session = _loaded_session()
    session.set_query(
        text_filter="a",
        selection_only=True,
        selected_ids=[1, 2],
        active_tags=[2],
        sort_key=SortKey.CPC,
        sort_direction=SortDirection.DESC,
    )

    session.load_dataset(DATASET_B)
    q = session.query

    assert q.selected_ids == frozenset()
    assert q.active_tags == frozenset()
    assert q.selection_only is False
    assert q.text_filter == "a"
    assert q.sort_key is SortKey.CPC
    assert q.sort_direction is SortDirection.DESC
    assert [r.keyword for r in session.get_view()] == ["delta"]


def test_set_query_is_partial():
    session = _loaded_session()
    session.set_query(sort_key="search_volume", sort_direction="desc")
    session.set_query(text_filter="a")

    assert session.query.sort_key is SortKey.SEARCH_VOLUME
    assert [r.keyword for r in session.get_view()] == ["beta", "gamma", "alpha"]


def test_toggle_selection():
    session = _loaded_session()
    assert session.toggle_selection(2) is True
    assert session.query.selected_ids == {2}
    assert session.toggle_selection(2) is False
    assert session.query.selected_ids == frozenset()


def test_select_all_visible_only_touches_visible_rows():
    session = _loaded_session()
    session.toggle_selection(1)
    session.set_query(active_tags=[2])  # visible: alpha(1), beta(2)

    session.select_all_visible(True)
    assert session.query.selected_ids == {1, 2}

    session.set_query(active_tags=[], text_filter="beta")
    session.select_all_visible(False)
    assert session.query.selected_ids == {1}


def test_selection_only_view():
    session = _loaded_session()
    session.toggle_selection(3)
    session.toggle_selection(1)
    session.set_query(selection_only=True)
    assert _ids(session.get_view()) == [1, 3]
    assert _ids(session.selected_rows()) == [1, 3]


def test_get_view_does_not_change_state():
    session = _loaded_session()
    q = session.query
    session.get_view()
    session.get_view()
    assert session.query is q


def test_registry_get_or_create_uses_default_query():
    default = QueryState(sort_key=SortKey.SEARCH_VOLUME, sort_direction=SortDirection.DESC)
    registry = SessionRegistry(default_query=default)

    s1 = registry.get_or_create("a")
    assert registry.get_or_create("a") is s1
    assert registry.get_or_create("b") is not s1
    assert s1.query == default
    assert len(registry) == 2

    registry.drop("a")
    assert registry.get("a") is None
    assert len(registry) == 1


def test_registry_evicts_least_recently_used_session():
    registry = SessionRegistry(max_sessions=2)

    a = registry.get_or_create("a")
    registry.get_or_create("b")
    assert registry.get_or_create("a") is a  # "a" is now most recent
    registry.get_or_create("c")

    assert len(registry) == 2
    assert "b" not in registry
    assert registry.get("a") is a
    assert "c" in registry


def test_registry_never_grows_past_cap():
    registry = SessionRegistry(max_sessions=5)
    for i in range(1000):
        registry.get_or_create(f"tab-{i}")

    assert len(registry) == 5
    assert "tab-999" in registry
    assert "tab-0" not in registry


def test_registry_get_refreshes_recency():
    registry = SessionRegistry(max_sessions=2)
    a = registry.get_or_create("a")
    registry.get_or_create("b")

    registry.get("a")
    registry.get_or_create("c")

    assert registry.get("a") is a
    assert registry.get("b") is None


def test_registry_seeds_new_session_with_given_query():
    registry = SessionRegistry(default_query=QueryState())
    restored = QueryState(text_filter="seo", sort_key=SortKey.CPC)

    session = registry.get_or_create("a", query=restored)
    assert session.query == restored

    # existing sessions keep their own query
    assert registry.get_or_create("a", query=QueryState()).query == restored


def test_registry_rejects_zero_cap():
    with pytest.raises(ValueError):
        SessionRegistry(max_sessions=0)
