from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from kw_browser.ui.ids import IDs


def build_upload_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Dataset", className="fw-semibold"),
            dbc.CardBody(
                [
                    dcc.Upload(
                        id=IDs.Control.UPLOAD,
                        children=html.Div(
                            ["Drag and drop or ", html.A("select a keyword export (.csv / .txt)")]
                        ),
                        multiple=False,
                        className="kwb-upload mb-2",
                    ),
                    html.Div(
                        "Semicolon-delimited, first line is the header. "
                        "A 'Keyword' column is required.",
                        className="text-muted small mb-2",
                    ),
                    html.Div(id=IDs.Control.UPLOAD_STATUS, className="small"),
                ]
            ),
        ],
        className="mb-3",
    )
