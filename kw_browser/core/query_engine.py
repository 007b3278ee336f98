from __future__ import annotations

import functools
import locale
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from kw_browser.core.keyword_row import KeywordRow
from kw_browser.core.keyword_table import KeywordTable
from kw_browser.core.query_state import QueryState, SortDirection, SortKey

# Sort key -> accessor. Scalars may be None; tag keys return tuples.
_SORT_ACCESSORS: Dict[SortKey, Callable[[KeywordRow], Any]] = {
    SortKey.ID: lambda r: r.id,
    SortKey.KEYWORD: lambda r: r.keyword,
    SortKey.SEARCH_VOLUME: lambda r: r.search_volume,
    SortKey.CPC: lambda r: r.cpc,
    SortKey.COMPETITION: lambda r: r.competition,
    SortKey.NUMBER_OF_RESULTS: lambda r: r.number_of_results,
    SortKey.RELATED_RELEVANCE: lambda r: r.related_relevance,
    SortKey.SERP_FEATURES: lambda r: r.serp_features,
    SortKey.INTENT: lambda r: r.intent_codes,
    SortKey.KEYWORD_DIFFICULTY: lambda r: r.keyword_difficulty,
}

_SEQUENCE_KEYS = frozenset({SortKey.SERP_FEATURES, SortKey.INTENT})


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_nullable(a: Optional[Any], b: Optional[Any]) -> int:
    """None sorts before any present value."""
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return _cmp(a, b)


def keyword_collation_key(keyword: str) -> Tuple[str, str]:
    """
    Locale collation key for keywords.

    Letters compare case-blind first, so "apple" sorts before "Banana"; case
    only separates otherwise equal keywords, lowercase first.
    """
    return locale.strxfrm(keyword.casefold()), keyword.swapcase()


def compare_keywords(a: str, b: str) -> int:
    return _cmp(keyword_collation_key(a), keyword_collation_key(b))


def compare_sequences(a: Sequence[Any], b: Sequence[Any]) -> int:
    """
    Position-by-position comparison. The shorter sequence has trailing
    "no value" entries, which sort first.
    """
    for i in range(max(len(a), len(b))):
        left = a[i] if i < len(a) else None
        right = b[i] if i < len(b) else None
        result = compare_nullable(left, right)
        if result:
            return result
    return 0


def compare_rows(
        left: Tuple[int, KeywordRow],
        right: Tuple[int, KeywordRow],
        sort_key: SortKey,
        direction: SortDirection,
) -> int:
    """
    Compare (original index, row) pairs.

    Direction flips the value comparison only; ties always fall back to the
    original index, ascending, so the sort is stable in both directions.
    """
    accessor = _SORT_ACCESSORS[sort_key]
    a, b = accessor(left[1]), accessor(right[1])

    if sort_key in _SEQUENCE_KEYS:
        result = compare_sequences(a, b)
    elif sort_key is SortKey.KEYWORD:
        result = compare_keywords(a, b)
    else:
        result = compare_nullable(a, b)

    if direction is SortDirection.DESC:
        result = -result
    if result == 0:
        result = _cmp(left[0], right[0])
    return result


def matches_text(row: KeywordRow, text_filter: str) -> bool:
    if not text_filter:
        return True
    return text_filter.lower() in row.keyword.lower()


def matches_tags(row: KeywordRow, active_tags: Iterable[int]) -> bool:
    """AND semantics: every active tag must be among the row's SERP features."""
    return set(active_tags).issubset(row.serp_features)


def matches_selection(row: KeywordRow, state: QueryState) -> bool:
    if not state.selection_only:
        return True
    return row.id in state.selected_ids


def filter_rows(table: KeywordTable, state: QueryState) -> List[Tuple[int, KeywordRow]]:
    return [
        (idx, row)
        for idx, row in enumerate(table.rows)
        if matches_text(row, state.text_filter)
        and matches_selection(row, state)
        and matches_tags(row, state.active_tags)
    ]


def apply_query(table: KeywordTable, state: QueryState) -> List[KeywordRow]:
    """
    Filter and sort `table` according to `state`.

    Pure: neither the table nor the state is modified; a new list is returned.
    """
    indexed = filter_rows(table, state)
    ordered = sorted(
        indexed,
        key=functools.cmp_to_key(
            lambda l, r: compare_rows(l, r, state.sort_key, state.sort_direction)
        ),
    )
    return [row for _idx, row in ordered]
