from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

DELIMITER = ";"
BOM = "\ufeff"


class Column(str, Enum):
    """
    Recognized header names of a keyword research export.

    Values are the exact (case-sensitive) header strings. Member order is
    the catalog order; input files may list the columns in any order.
    """

    KEYWORD = "Keyword"
    SEARCH_VOLUME = "Search Volume"
    CPC = "CPC"
    COMPETITION = "Competition"
    NUMBER_OF_RESULTS = "Number of Results"
    TRENDS = "Trends"
    RELATED_RELEVANCE = "Related Relevance"
    SERP_FEATURES = "Keywords SERP Features"
    INTENT = "Intent"
    KEYWORD_DIFFICULTY = "Keyword Difficulty Index"

    @classmethod
    def from_header(cls, name: str) -> Optional[Column]:
        try:
            return cls(name)
        except ValueError:
            return None


COLUMN_CATALOG: Tuple[Column, ...] = tuple(Column)
REQUIRED_COLUMN = Column.KEYWORD


@dataclass(frozen=True)
class HeaderMap:
    """
    Recognized column -> zero-based position in the current file.

    Built once per parse from the header line and reused for every row.
    """

    positions: Mapping[Column, int] = field(default_factory=dict)

    def position(self, column: Column) -> Optional[int]:
        return self.positions.get(column)

    def __contains__(self, column: object) -> bool:
        return column in self.positions

    @property
    def present_columns(self) -> FrozenSet[Column]:
        return frozenset(self.positions)


def split_cells(line: str, delimiter: str = DELIMITER) -> list[str]:
    return line.split(delimiter)


def build_header_map(header_line: str, delimiter: str = DELIMITER) -> HeaderMap:
    """
    Discover recognized columns from a header line.

    Unknown header cells are ignored. If a recognized name is repeated,
    the first occurrence wins.
    """
    cells = split_cells(header_line, delimiter)
    if cells and cells[0].startswith(BOM):
        cells[0] = cells[0][len(BOM):]

    positions: Dict[Column, int] = {}
    for idx, cell in enumerate(cells):
        column = Column.from_header(cell.strip())
        if column is not None and column not in positions:
            positions[column] = idx

    return HeaderMap(positions=positions)
