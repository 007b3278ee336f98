from __future__ import annotations

import uuid

import dash_bootstrap_components as dbc
from dash import dcc

from kw_browser.ui.config import AppConfig
from kw_browser.ui.ids import IDs
from kw_browser.ui.layout.build_filter_panel import build_filter_panel
from kw_browser.ui.layout.build_navbar import build_navbar
from kw_browser.ui.layout.build_table_panel import build_table_panel
from kw_browser.ui.layout.build_upload_panel import build_upload_panel


def build_layout(ctx: AppConfig) -> dbc.Container:
    """
    Called on every page load so each browser tab gets its own session id.
    """
    session_id = uuid.uuid4().hex

    return dbc.Container(
        fluid=True,
        className="kwb-root",
        children=[
            build_navbar(ctx.global_config),

            dcc.Store(id=IDs.Store.SESSION_ID, data=session_id),
            dcc.Store(id=IDs.Store.QUERY_STATE),
            dcc.Store(id=IDs.Store.DATASET_VERSION, data=0),

            dbc.Row(
                [
                    dbc.Col(
                        [build_upload_panel(), build_filter_panel(ctx.global_config)],
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(build_table_panel(), md=9, className="mt-3"),
                ]
            ),
        ],
    )
