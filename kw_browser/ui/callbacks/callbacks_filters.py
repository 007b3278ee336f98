from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from kw_browser.ui.helpers import restore_query, sort_from_table
from kw_browser.ui.ids import IDs

if TYPE_CHECKING:
    from kw_browser.services.session_service import KeywordSession
    from kw_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _sync_table_selection(session: KeywordSession, selected_row_ids) -> None:
    """
    Apply DataTable tick boxes to the session, one toggle per changed row.

    Only rows in the current view are considered; selections hidden by the
    filters are kept.
    """
    ticked = set(selected_row_ids or [])
    current = session.query.selected_ids
    for row in session.get_view():
        if (row.id in ticked) != (row.id in current):
            session.toggle_selection(row.id)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Every query control funnels into the session's QueryState
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.QUERY_STATE, "data"),
        Output(IDs.Control.KEYWORD_TABLE, "selected_row_ids"),
        Input(IDs.Control.TEXT_FILTER, "value"),
        Input(IDs.Control.TAG_FILTER, "value"),
        Input(IDs.Control.SELECTION_ONLY, "value"),
        Input(IDs.Control.KEYWORD_TABLE, "sort_by"),
        Input(IDs.Control.KEYWORD_TABLE, "selected_row_ids"),
        Input(IDs.Control.SELECT_ALL_BTN, "n_clicks"),
        Input(IDs.Control.CLEAR_SELECTION_BTN, "n_clicks"),
        Input(IDs.Store.DATASET_VERSION, "data"),
        State(IDs.Store.SESSION_ID, "data"),
        State(IDs.Store.QUERY_STATE, "data"),
    )
    def update_query(text, tags, selection_only, sort_by, selected_row_ids,
                     _n_select, _n_clear, _version, session_id, stored_query):
        if not session_id:
            raise dash.exceptions.PreventUpdate

        # An evicted session comes back with the query the browser still shows
        session = ctx.sessions.get_or_create(session_id, query=restore_query(stored_query))
        trigger = dash.ctx.triggered_id

        changes = {
            "text_filter": (text or "").strip(),
            "active_tags": tags or [],
            "selection_only": bool(selection_only),
        }
        sort = sort_from_table(sort_by)
        if sort is not None:
            changes.update(sort)
        elif trigger == IDs.Control.KEYWORD_TABLE and not sort_by:
            changes.update(
                sort_key=ctx.global_config.default_sort_key,
                sort_direction=ctx.global_config.default_sort_direction,
            )
        session.set_query(**changes)

        if trigger == IDs.Control.SELECT_ALL_BTN:
            session.select_all_visible(True)
        elif trigger == IDs.Control.CLEAR_SELECTION_BTN:
            session.select_all_visible(False)
        elif trigger == IDs.Control.KEYWORD_TABLE:
            _sync_table_selection(session, selected_row_ids)

        state = session.query
        logger.debug("Query updated", extra={"session_id": session_id, "query": state.to_dict()})
        return state.to_dict(), sorted(state.selected_ids)
