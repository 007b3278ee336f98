from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from kw_browser.core.query_state import SortDirection, SortKey

DEFAULT_DEBOUNCE_MS = 200
DEFAULT_MAX_UPLOAD_BYTES = 50_000_000
DEFAULT_MAX_SESSIONS = 100


@dataclass
class GlobalConfig:
    """
    Parsed global.json.
    """
    ui_title: str = "Keyword Research Browser"
    filter_debounce_ms: int = DEFAULT_DEBOUNCE_MS
    default_sort_key: SortKey = SortKey.ID
    default_sort_direction: SortDirection = SortDirection.ASC
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    export_dir: Optional[Path] = None
    max_sessions: int = DEFAULT_MAX_SESSIONS

    @property
    def filter_debounce_seconds(self) -> float:
        return self.filter_debounce_ms / 1000.0
