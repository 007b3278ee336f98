from __future__ import annotations

import logging
from typing import List, Tuple

from kw_browser.core.columns import DELIMITER, REQUIRED_COLUMN, build_header_map
from kw_browser.core.exceptions import DatasetParseError, MissingRequiredColumn
from kw_browser.core.keyword_row import KeywordRow, decode_row
from kw_browser.core.keyword_table import KeywordTable, full_catalog_table

logger = logging.getLogger(__name__)


def _non_blank_lines(raw_text: str) -> List[Tuple[int, str]]:
    """
    Normalise line endings, trim every line and drop blank ones.

    Returns (physical 1-based line number, trimmed line) pairs.
    """
    text = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    out: List[Tuple[int, str]] = []
    for idx, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if stripped:
            out.append((idx, stripped))
    return out


def parse_dataset(raw_text: str, delimiter: str = DELIMITER) -> KeywordTable:
    """
    Decode a full keyword export into a KeywordTable.

    The first non-blank line is the header. Every other non-blank line is a
    data row. The first failing line aborts the whole parse: callers get a
    complete table or a single DatasetParseError, never a partial table.
    """
    lines = _non_blank_lines(raw_text)
    if not lines:
        logger.info("Empty dataset text; returning empty table with full column catalog")
        return full_catalog_table()

    header_line_number, header_line = lines[0]
    header_map = build_header_map(header_line, delimiter)
    if REQUIRED_COLUMN not in header_map:
        logger.warning(
            "Header is missing required column %r",
            REQUIRED_COLUMN.value,
            extra={"line_number": header_line_number},
        )
        raise MissingRequiredColumn(REQUIRED_COLUMN.value, line_number=header_line_number)

    present = header_map.present_columns
    logger.info(
        "Parsing dataset: %d data lines, columns=%s",
        len(lines) - 1,
        sorted(c.value for c in present),
    )

    rows: List[KeywordRow] = []
    for row_id, (line_number, line) in enumerate(lines[1:], start=1):
        try:
            rows.append(decode_row(line, header_map, line_number, row_id, delimiter))
        except DatasetParseError as exc:
            logger.warning(
                "Dataset parse failed: %s",
                exc,
                extra={"line_number": exc.line_number, "column": exc.column},
            )
            raise

    logger.info("Parsed %d keyword rows", len(rows))
    return KeywordTable(rows=tuple(rows), present_columns=present)
