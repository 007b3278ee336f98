from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from kw_browser.ui.helpers import table_columns, table_records
from kw_browser.ui.ids import IDs

if TYPE_CHECKING:
    from kw_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.KEYWORD_TABLE, "columns"),
        Output(IDs.Control.KEYWORD_TABLE, "data"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Output(IDs.Control.TREND_GRAPH, "figure"),
        Input(IDs.Store.QUERY_STATE, "data"),
        State(IDs.Store.SESSION_ID, "data"),
    )
    def render_view(_query, session_id):
        if not session_id:
            raise dash.exceptions.PreventUpdate

        session = ctx.sessions.get_or_create(session_id)
        table = session.table
        view = session.get_view()

        status = (
            f"{len(view)} of {len(table)} keywords shown · "
            f"{len(session.query.selected_ids)} selected"
        )

        # Chart selected keywords, or the top of the view when nothing is selected
        chart_rows = session.selected_rows() or view
        trend_df = ctx.trend_view.compute_data(chart_rows)
        fig = ctx.trend_view.render_figure(trend_df)

        return table_columns(table.present_columns), table_records(view), status, fig
