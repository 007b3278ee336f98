from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from kw_browser.config.model import GlobalConfig
from kw_browser.ui.ids import IDs


def build_filter_panel(global_config: GlobalConfig) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Keyword contains", className="form-label"),
                    # Dash applies the quiescence window client-side before the
                    # value reaches the server.
                    dcc.Input(
                        id=IDs.Control.TEXT_FILTER,
                        type="text",
                        value="",
                        placeholder="e.g. login",
                        debounce=global_config.filter_debounce_seconds,
                        className="form-control mb-3",
                    ),
                    html.Div(
                        id=IDs.Control.TAG_FILTER_CONTAINER,
                        children=[
                            html.Label("SERP features (all of)", className="form-label"),
                            dcc.Checklist(
                                id=IDs.Control.TAG_FILTER,
                                options=[],
                                value=[],
                                inputClassName="me-1",
                                labelClassName="d-block",
                                className="kwb-tag-filter mb-3",
                            ),
                        ],
                    ),
                    dbc.Switch(
                        id=IDs.Control.SELECTION_ONLY,
                        label="Show selected only",
                        value=False,
                        className="mb-3",
                    ),
                    dbc.ButtonGroup(
                        [
                            dbc.Button("Select visible", id=IDs.Control.SELECT_ALL_BTN,
                                       color="secondary", outline=True, size="sm"),
                            dbc.Button("Clear visible", id=IDs.Control.CLEAR_SELECTION_BTN,
                                       color="secondary", outline=True, size="sm"),
                        ],
                        className="mb-3",
                    ),
                    html.Hr(),
                    dbc.ButtonGroup(
                        [
                            dbc.Button("Download view", id=IDs.Control.DOWNLOAD_BTN, color="primary", size="sm"),
                            dbc.Button("Save view", id=IDs.Control.SAVE_BTN, color="primary",
                                       outline=True, size="sm"),
                        ],
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD),
                    html.Div(id=IDs.Control.SAVE_STATUS, className="small text-muted mt-2"),
                ]
            ),
        ],
        className="kwb-sidebar",
    )
