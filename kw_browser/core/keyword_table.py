from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Tuple

import pandas as pd

from kw_browser.core.columns import COLUMN_CATALOG, Column
from kw_browser.core.keyword_row import NUMERIC_FIELDS, TAG_FIELDS, KeywordRow


@dataclass(frozen=True)
class KeywordTable:
    """
    Decoded rows of the currently loaded export plus the set of columns
    its header declared.

    Tables are never mutated: a new load builds a new table and the owner
    swaps the reference.
    """

    rows: Tuple[KeywordRow, ...] = ()
    present_columns: FrozenSet[Column] = field(default_factory=frozenset)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[KeywordRow]:
        return iter(self.rows)

    def has_column(self, column: Column) -> bool:
        return column in self.present_columns

    def ordered_columns(self) -> List[Column]:
        """Present columns in catalog order."""
        return [c for c in COLUMN_CATALOG if c in self.present_columns]

    def to_dataframe(self, rows: Tuple[KeywordRow, ...] | List[KeywordRow] | None = None) -> pd.DataFrame:
        """
        Tabular copy of `rows` (default: every row), indexed by row id.

        Only present columns are emitted, in catalog order; absent numbers
        become NaN via pandas' nullable dtypes.
        """
        rows = self.rows if rows is None else rows
        records: List[Dict[str, Any]] = [row_to_record(r, self.ordered_columns()) for r in rows]
        df = pd.DataFrame(records, columns=[c.value for c in self.ordered_columns()])
        df.index = pd.Index([r.id for r in rows], name="id")
        for column, (_attr, is_integer) in NUMERIC_FIELDS.items():
            if column.value in df.columns:
                df[column.value] = df[column.value].astype("Int64" if is_integer else "Float64")
        return df


def row_to_record(row: KeywordRow, columns: List[Column]) -> Dict[str, Any]:
    record: Dict[str, Any] = {}
    for column in columns:
        if column is Column.KEYWORD:
            record[column.value] = row.keyword
        elif column is Column.TRENDS:
            record[column.value] = list(row.trends)
        elif column in TAG_FIELDS:
            record[column.value] = list(getattr(row, TAG_FIELDS[column]))
        else:
            record[column.value] = getattr(row, NUMERIC_FIELDS[column][0])
    return record


def full_catalog_table() -> KeywordTable:
    """Empty table that claims every recognized column (blank input)."""
    return KeywordTable(rows=(), present_columns=frozenset(COLUMN_CATALOG))
