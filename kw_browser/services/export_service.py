from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from kw_browser.core.columns import COLUMN_CATALOG, DELIMITER, Column
from kw_browser.core.keyword_row import NUMERIC_FIELDS, TAG_FIELDS, KeywordRow
from kw_browser.core.keyword_table import KeywordTable
from kw_browser.services.storage import StorageBackend

logger = logging.getLogger(__name__)

SAVED_VIEW_SUFFIX = ".txt"


def _format_number(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _format_list(values: Iterable) -> str:
    return ",".join(_format_number(v) for v in values)


def format_cell(row: KeywordRow, column: Column) -> str:
    if column is Column.KEYWORD:
        return row.keyword
    if column is Column.TRENDS:
        return _format_list(row.trends)
    if column in TAG_FIELDS:
        return _format_list(getattr(row, TAG_FIELDS[column]))
    return _format_number(getattr(row, NUMERIC_FIELDS[column][0]))


def serialize_rows(rows: Sequence[KeywordRow], columns: Iterable[Column]) -> str:
    """
    Write rows back out in the semicolon-delimited import format.

    Columns are emitted in catalog order. Parsing the result gives the same
    rows again (ids are renumbered from 1 in output order).
    """
    column_set = set(columns)
    ordered = [c for c in COLUMN_CATALOG if c in column_set]
    lines = [DELIMITER.join(c.value for c in ordered)]
    for row in rows:
        lines.append(DELIMITER.join(format_cell(row, c) for c in ordered))
    return "\n".join(lines) + "\n"


class ExportService:
    """
    Produces downloadable copies of the current view and saves them to storage.
    """

    def __init__(self, storage: Optional[StorageBackend] = None):
        self.storage = storage

    def export_csv(self, table: KeywordTable, rows: Sequence[KeywordRow]) -> str:
        """
        Spreadsheet-friendly export: list cells joined with commas, absent
        values left empty.
        """
        df = table.to_dataframe(list(rows))
        for column in (Column.TRENDS, Column.SERP_FEATURES, Column.INTENT):
            if column.value in df.columns:
                df[column.value] = df[column.value].map(_format_list)
        return df.to_csv(sep=DELIMITER, index=False)

    def _free_name(self, name: str) -> str:
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        path = f"{name}-{stamp}{SAVED_VIEW_SUFFIX}"
        counter = 2
        # two saves within the same second
        while self.storage.exists(path):
            path = f"{name}-{stamp}-{counter}{SAVED_VIEW_SUFFIX}"
            counter += 1
        return path

    def save_view(
            self,
            name: str,
            rows: Sequence[KeywordRow],
            columns: Iterable[Column],
    ) -> Optional[str]:
        """
        Save rows under `name` in storage and return the stored path.

        Earlier saves are never overwritten. Storage problems (no backend,
        permissions, full disk, bad name) are logged and reported as None;
        they never surface as dataset errors.
        """
        if self.storage is None:
            logger.warning("No storage backend configured; view not saved")
            return None

        path = None
        try:
            path = self._free_name(name)
            self.storage.write_text(path, serialize_rows(rows, columns))
        except (OSError, ValueError):
            logger.exception("Failed to save keyword view %s", path or name)
            return None

        logger.info("Saved keyword view", extra={"path": path, "row_count": len(rows)})
        return path

    def saved_views(self) -> List[str]:
        if self.storage is None:
            return []
        return self.storage.list_files(suffix=SAVED_VIEW_SUFFIX)
