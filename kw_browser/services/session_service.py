from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional

from kw_browser.core.columns import Column
from kw_browser.core.dataset_parser import parse_dataset
from kw_browser.core.keyword_row import KeywordRow
from kw_browser.core.keyword_table import KeywordTable
from kw_browser.core.query_engine import apply_query
from kw_browser.core.query_state import QueryState

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 100


@dataclass(frozen=True)
class LoadResult:
    row_count: int
    present_columns: FrozenSet[Column]


class KeywordSession:
    """
    Owns the currently loaded KeywordTable and the user's QueryState.

    A load either replaces the table wholesale or leaves everything as it
    was. Queries are delegated to the pure query engine.
    """

    def __init__(self, query: Optional[QueryState] = None):
        self._table = KeywordTable()
        self._query = query or QueryState()

    @property
    def table(self) -> KeywordTable:
        return self._table

    @property
    def query(self) -> QueryState:
        return self._query

    def load_dataset(self, text: str) -> LoadResult:
        """
        Parse `text` and make it the current table.

        Raises DatasetParseError; on failure the previous table and query
        state are untouched. On success selection, selection-only and tag
        filters are reset, while the text filter and sort persist.
        """
        table = parse_dataset(text)

        self._table = table
        self._query = self._query.replace(
            selected_ids=(),
            selection_only=False,
            active_tags=(),
        )
        logger.info(
            "Dataset loaded",
            extra={"row_count": len(table), "columns": sorted(c.value for c in table.present_columns)},
        )
        return LoadResult(row_count=len(table), present_columns=table.present_columns)

    def set_query(self, **changes: Any) -> QueryState:
        """Merge a partial query state into the current one."""
        self._query = self._query.replace(**changes)
        return self._query

    def get_view(self) -> List[KeywordRow]:
        return apply_query(self._table, self._query)

    def toggle_selection(self, row_id: int) -> bool:
        """Flip one row's selection. Returns True if it is now selected."""
        selected = set(self._query.selected_ids)
        if row_id in selected:
            selected.discard(row_id)
            now_selected = False
        else:
            selected.add(row_id)
            now_selected = True
        self._query = self._query.replace(selected_ids=selected)
        return now_selected

    def select_all_visible(self, selected: bool) -> None:
        """Add (or remove) every row of the current view to the selection."""
        visible = {row.id for row in self.get_view()}
        current = set(self._query.selected_ids)
        current = current | visible if selected else current - visible
        self._query = self._query.replace(selected_ids=current)

    def selected_rows(self) -> List[KeywordRow]:
        ids = self._query.selected_ids
        return [row for row in self._table.rows if row.id in ids]


class SessionRegistry:
    """
    In-process lookup of one KeywordSession per browser session id.

    Every page load mints a new id, so the registry keeps at most
    `max_sessions` entries and evicts the least recently used one.
    """

    def __init__(self, default_query: Optional[QueryState] = None, max_sessions: int = DEFAULT_MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be >= 1, got {max_sessions}")
        self._sessions: "OrderedDict[str, KeywordSession]" = OrderedDict()
        self._default_query = default_query or QueryState()
        self._max_sessions = max_sessions
        self._lock = threading.Lock()

    @property
    def max_sessions(self) -> int:
        return self._max_sessions

    def get_or_create(self, session_id: str, query: Optional[QueryState] = None) -> KeywordSession:
        """
        Return the session for `session_id`, creating it if needed.

        `query` seeds a newly created session (e.g. the browser-side copy of
        the query after the server copy was evicted); it is ignored when the
        session already exists.
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
                return session

            logger.info("Creating keyword session %s", session_id)
            session = KeywordSession(query=query or self._default_query)
            self._sessions[session_id] = session
            while len(self._sessions) > self._max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info("Evicted keyword session %s", evicted_id, extra={"max_sessions": self._max_sessions})
            return session

    def get(self, session_id: str) -> Optional[KeywordSession]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
            return session

    def drop(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
