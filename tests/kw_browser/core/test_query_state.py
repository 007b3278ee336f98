from __future__ import annotations

import pytest

from kw_browser.core.query_state import QueryState, SortDirection, SortKey


def test_query_state_to_from_dict_roundtrip():
    st = QueryState(
        text_filter="login",
        selection_only=True,
        selected_ids=frozenset({3, 1}),
        active_tags=frozenset({7, 0}),
        sort_key=SortKey.CPC,
        sort_direction=SortDirection.DESC,
    )

    raw = st.to_dict()
    assert raw["selected_ids"] == [1, 3]
    assert raw["sort_key"] == "cpc"

    rebuilt = QueryState.from_dict(raw)
    assert rebuilt == st


def test_from_dict_defaults():
    st = QueryState.from_dict({})
    assert st == QueryState()


def test_replace_coerces_values():
    st = QueryState().replace(
        selected_ids=[1, "2"],
        active_tags=None,
        sort_key="search_volume",
        sort_direction="desc",
        text_filter=None,
    )
    assert st.selected_ids == frozenset({1, 2})
    assert st.active_tags == frozenset()
    assert st.sort_key is SortKey.SEARCH_VOLUME
    assert st.sort_direction is SortDirection.DESC
    assert st.text_filter == ""


def test_replace_rejects_unknown_sort_key():
    with pytest.raises(ValueError):
        QueryState().replace(sort_key="trends")


def test_replace_returns_new_instance():
    st = QueryState()
    st2 = st.replace(text_filter="x")
    assert st.text_filter == ""
    assert st2.text_filter == "x"
