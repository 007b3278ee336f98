from __future__ import annotations

from typing import Optional


class KwBrowserError(Exception):
    """Base exception for all kw_browser errors"""
    pass


class ConfigError(KwBrowserError):
    """Invalid or inconsistent global.json / environment config"""
    pass


class DatasetParseError(KwBrowserError):
    """
    A keyword export could not be decoded.

    Every parse error is fatal to the load as a whole. The attributes carry
    enough context to build a precise user-facing message.
    """

    def __init__(
            self,
            message: str,
            *,
            line_number: Optional[int] = None,
            column: Optional[str] = None,
            raw_text: Optional[str] = None,
    ) -> None:
        self.line_number = line_number
        self.column = column
        self.raw_text = raw_text
        super().__init__(message)


class MissingRequiredColumn(DatasetParseError):
    """Header line lacks a mandatory column (only "Keyword" today)"""

    def __init__(self, column: str, line_number: int = 1) -> None:
        super().__init__(
            f"Line {line_number}: required column '{column}' not found in header.",
            line_number=line_number,
            column=column,
        )


class InvalidValue(DatasetParseError):
    """A numeric cell is not a finite number"""

    def __init__(self, column: str, line_number: int, raw_text: str) -> None:
        super().__init__(
            f"Line {line_number}: invalid value {raw_text!r} in column '{column}'.",
            line_number=line_number,
            column=column,
            raw_text=raw_text,
        )


class InvalidListEntry(DatasetParseError):
    """One comma-separated token of a list cell is not a finite number"""

    def __init__(self, column: str, line_number: int, raw_text: str) -> None:
        super().__init__(
            f"Line {line_number}: invalid list entry {raw_text!r} in column '{column}'.",
            line_number=line_number,
            column=column,
            raw_text=raw_text,
        )


class TrendsLengthMismatch(DatasetParseError):
    """Trends cell is present but does not hold exactly 12 values"""

    def __init__(self, line_number: int, found: int, expected: int = 12, column: str = "Trends") -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"Line {line_number}: column '{column}' must contain {expected} values, found {found}.",
            line_number=line_number,
            column=column,
        )
