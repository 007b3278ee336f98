from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable


class SortKey(str, Enum):
    ID = "id"
    KEYWORD = "keyword"
    SEARCH_VOLUME = "search_volume"
    CPC = "cpc"
    COMPETITION = "competition"
    NUMBER_OF_RESULTS = "number_of_results"
    RELATED_RELEVANCE = "related_relevance"
    SERP_FEATURES = "serp_features"
    INTENT = "intent"
    KEYWORD_DIFFICULTY = "keyword_difficulty"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _int_set(values: Iterable[Any] | None) -> FrozenSet[int]:
    return frozenset(int(v) for v in (values or ()))


@dataclass(frozen=True)
class QueryState:
    """
    Represents the current user query over the keyword table.

    Fields:

    - text_filter: case-insensitive substring matched against the keyword
    - selection_only: if True, only rows whose id is in selected_ids are shown
    - selected_ids: ids of rows the user has ticked
    - active_tags: SERP feature codes a row must all carry (AND)
    - sort_key / sort_direction: ordering of the view

    The state is owned by the caller and passed to the query engine; the
    engine never stores it.
    """

    text_filter: str = ""
    selection_only: bool = False
    selected_ids: FrozenSet[int] = field(default_factory=frozenset)
    active_tags: FrozenSet[int] = field(default_factory=frozenset)
    sort_key: SortKey = SortKey.ID
    sort_direction: SortDirection = SortDirection.ASC

    def replace(self, **changes: Any) -> QueryState:
        """Copy with some fields changed; sets and enums are coerced."""
        if "selected_ids" in changes:
            changes["selected_ids"] = _int_set(changes["selected_ids"])
        if "active_tags" in changes:
            changes["active_tags"] = _int_set(changes["active_tags"])
        if "sort_key" in changes:
            changes["sort_key"] = SortKey(changes["sort_key"])
        if "sort_direction" in changes:
            changes["sort_direction"] = SortDirection(changes["sort_direction"])
        if "text_filter" in changes:
            changes["text_filter"] = changes["text_filter"] or ""
        if "selection_only" in changes:
            changes["selection_only"] = bool(changes["selection_only"])
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text_filter": self.text_filter,
            "selection_only": self.selection_only,
            "selected_ids": sorted(self.selected_ids),
            "active_tags": sorted(self.active_tags),
            "sort_key": self.sort_key.value,
            "sort_direction": self.sort_direction.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QueryState:
        return cls(
            text_filter=str(data.get("text_filter") or ""),
            selection_only=bool(data.get("selection_only", False)),
            selected_ids=_int_set(data.get("selected_ids")),
            active_tags=_int_set(data.get("active_tags")),
            sort_key=SortKey(data.get("sort_key", SortKey.ID.value)),
            sort_direction=SortDirection(data.get("sort_direction", SortDirection.ASC.value)),
        )
