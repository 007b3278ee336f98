from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        SESSION_ID = "session-id"
        QUERY_STATE = "query-state"
        DATASET_VERSION = "dataset-version"

    class Control:
        # Dataset upload
        UPLOAD = "dataset-upload"
        UPLOAD_STATUS = "dataset-upload-status"

        # Filters
        TEXT_FILTER = "keyword-text-filter"
        TAG_FILTER = "serp-feature-filter"
        TAG_FILTER_CONTAINER = "serp-feature-filter-container"
        SELECTION_ONLY = "selection-only-switch"
        SELECT_ALL_BTN = "select-all-visible-btn"
        CLEAR_SELECTION_BTN = "clear-visible-selection-btn"

        # Table + chart
        KEYWORD_TABLE = "keyword-table"
        TREND_GRAPH = "trend-graph"
        STATUS_BAR = "status-bar"

        # Export
        DOWNLOAD_BTN = "download-view-btn"
        DOWNLOAD = "download-view"
        SAVE_BTN = "save-view-btn"
        SAVE_STATUS = "save-view-status"
