from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence

from dash import html

from kw_browser.core.columns import COLUMN_CATALOG, Column
from kw_browser.core.exceptions import DatasetParseError
from kw_browser.core.keyword_row import KeywordRow
from kw_browser.core.query_state import QueryState, SortKey
from kw_browser.core.tag_metadata import serp_feature_info, tag_labels

SPARK_CHARS = "▁▂▃▄▅▆▇█"

# Table column id per dataset column. Ids double as SortKey values where sortable.
COLUMN_IDS: Dict[Column, str] = {
    Column.KEYWORD: SortKey.KEYWORD.value,
    Column.SEARCH_VOLUME: SortKey.SEARCH_VOLUME.value,
    Column.CPC: SortKey.CPC.value,
    Column.COMPETITION: SortKey.COMPETITION.value,
    Column.NUMBER_OF_RESULTS: SortKey.NUMBER_OF_RESULTS.value,
    Column.TRENDS: "trends",
    Column.RELATED_RELEVANCE: SortKey.RELATED_RELEVANCE.value,
    Column.SERP_FEATURES: SortKey.SERP_FEATURES.value,
    Column.INTENT: SortKey.INTENT.value,
    Column.KEYWORD_DIFFICULTY: SortKey.KEYWORD_DIFFICULTY.value,
}

_SORTABLE_IDS = {k.value for k in SortKey}


class UploadDecodeError(ValueError):
    """Upload payload is not base64 text we can read."""


def decode_upload(contents: str) -> str:
    """
    Turn a dcc.Upload `contents` data URL into text.

    Accepts UTF-8 (with or without BOM) and falls back to latin-1, which
    some spreadsheet tools still write.
    """
    try:
        _content_type, content_string = contents.split(",", 1)
        raw = base64.b64decode(content_string)
    except (ValueError, binascii.Error) as exc:
        raise UploadDecodeError("The uploaded file appears to be corrupted.") from exc

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def sparkline(values: Sequence[float]) -> str:
    """Unicode block sparkline for values in [0, 1]."""
    if not values:
        return ""
    top = len(SPARK_CHARS) - 1
    return "".join(SPARK_CHARS[round(v * top)] for v in values)


def table_columns(present_columns: FrozenSet[Column]) -> List[Dict[str, Any]]:
    """DataTable column specs for present columns only, in catalog order."""
    cols = []
    for column in COLUMN_CATALOG:
        if column not in present_columns:
            continue
        spec: Dict[str, Any] = {"name": column.value, "id": COLUMN_IDS[column]}
        if column in (Column.SEARCH_VOLUME, Column.NUMBER_OF_RESULTS, Column.KEYWORD_DIFFICULTY,
                      Column.CPC, Column.COMPETITION, Column.RELATED_RELEVANCE):
            spec["type"] = "numeric"
        cols.append(spec)
    return cols


def row_to_table_record(row: KeywordRow) -> Dict[str, Any]:
    return {
        "id": row.id,
        COLUMN_IDS[Column.KEYWORD]: row.keyword,
        COLUMN_IDS[Column.SEARCH_VOLUME]: row.search_volume,
        COLUMN_IDS[Column.CPC]: row.cpc,
        COLUMN_IDS[Column.COMPETITION]: row.competition,
        COLUMN_IDS[Column.NUMBER_OF_RESULTS]: row.number_of_results,
        COLUMN_IDS[Column.TRENDS]: sparkline(row.trends),
        COLUMN_IDS[Column.RELATED_RELEVANCE]: row.related_relevance,
        COLUMN_IDS[Column.SERP_FEATURES]: ", ".join(tag_labels(row.serp_features)),
        COLUMN_IDS[Column.INTENT]: ", ".join(tag_labels(row.intent_codes, intent=True)),
        COLUMN_IDS[Column.KEYWORD_DIFFICULTY]: row.keyword_difficulty,
    }


def table_records(rows: Iterable[KeywordRow]) -> List[Dict[str, Any]]:
    return [row_to_table_record(r) for r in rows]


def tag_filter_options(rows: Iterable[KeywordRow]) -> List[Dict[str, Any]]:
    codes = sorted({code for row in rows for code in row.serp_features})
    return [{"label": serp_feature_info(c).name, "value": c} for c in codes]


def sort_from_table(sort_by: Optional[List[Dict[str, Any]]]) -> Optional[Dict[str, str]]:
    """
    Map DataTable `sort_by` to QueryState sort fields.

    None when the table sort is cleared or targets an unsortable column.
    """
    if not sort_by:
        return None
    first = sort_by[0]
    column_id = first.get("column_id")
    if column_id not in _SORTABLE_IDS:
        return None
    direction = "desc" if first.get("direction") == "desc" else "asc"
    return {"sort_key": column_id, "sort_direction": direction}


def restore_query(stored: Optional[Dict[str, Any]]) -> Optional[QueryState]:
    """
    Rebuild a QueryState from the browser-side store.

    Used to reseed a session the server no longer holds. None when the
    store is empty or holds values that no longer parse.
    """
    if not stored:
        return None
    try:
        return QueryState.from_dict(stored)
    except (TypeError, ValueError):
        return None


def parse_error_banner(exc: DatasetParseError) -> html.Div:
    details = []
    if exc.line_number is not None:
        details.append(f"line {exc.line_number}")
    if exc.column:
        details.append(f"column '{exc.column}'")
    if exc.raw_text:
        details.append(f"value {exc.raw_text!r}")

    return html.Div(
        [
            html.Strong("Could not load dataset. "),
            html.Span(str(exc)),
            html.Div(
                (" · ".join(details) + ". " if details else "") + "The previous dataset is still loaded.",
                className="text-muted small",
            ),
        ],
        className="alert alert-danger mb-0",
    )
