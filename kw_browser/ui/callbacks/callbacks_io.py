from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc

from kw_browser.ui.ids import IDs

if TYPE_CHECKING:
    from kw_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DOWNLOAD, "data"),
        Input(IDs.Control.DOWNLOAD_BTN, "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def download_view(n_clicks, session_id):
        if not n_clicks or not session_id:
            raise dash.exceptions.PreventUpdate

        session = ctx.sessions.get_or_create(session_id)
        if not len(session.table):
            raise dash.exceptions.PreventUpdate

        csv_text = ctx.export_service.export_csv(session.table, session.get_view())
        return dcc.send_string(csv_text, "keywords-view.csv")

    @app.callback(
        Output(IDs.Control.SAVE_STATUS, "children"),
        Input(IDs.Control.SAVE_BTN, "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def save_view(n_clicks, session_id):
        if not n_clicks or not session_id:
            raise dash.exceptions.PreventUpdate

        session = ctx.sessions.get_or_create(session_id)
        if not len(session.table):
            return "Nothing to save: load a dataset first."

        path = ctx.export_service.save_view(
            "keywords-view",
            session.get_view(),
            session.table.present_columns,
        )
        if path is None:
            # save failures are not dataset errors
            return "View was not saved."
        saved_count = len(ctx.export_service.saved_views())
        return f"Saved {len(session.get_view())} keywords to {path} ({saved_count} saved views)."
