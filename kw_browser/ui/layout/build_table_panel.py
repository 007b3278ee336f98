from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from kw_browser.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(id=IDs.Control.STATUS_BAR, className="text-muted small mb-2"),
                dash_table.DataTable(
                    id=IDs.Control.KEYWORD_TABLE,
                    columns=[],
                    data=[],
                    row_selectable="multi",
                    selected_row_ids=[],
                    sort_action="custom",
                    sort_mode="single",
                    sort_by=[],
                    page_action="native",
                    page_size=50,
                    style_table={"overflowX": "auto"},
                    style_cell={"fontFamily": "inherit", "fontSize": "0.85rem", "padding": "4px 8px"},
                    style_header={"fontWeight": "600"},
                ),
                html.Hr(),
                dcc.Graph(id=IDs.Control.TREND_GRAPH, config={"displaylogo": False}),
            ]
        ),
        className="kwb-table-card",
    )
