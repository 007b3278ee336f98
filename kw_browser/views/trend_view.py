from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from kw_browser.core.keyword_row import KeywordRow

MONTH_COLUMN = "month"
VALUE_COLUMN = "value"
KEYWORD_COLUMN = "keyword"


class TrendView:
    """
    Line chart of the 12-month Trends ratios for a handful of keywords.

    Rows without trend data are skipped.
    """

    id = "trends"
    label = "Trends"

    def __init__(self, max_series: int = 20):
        self.max_series = max_series

    def compute_data(self, rows: Sequence[KeywordRow]) -> pd.DataFrame:
        records = []
        with_trends = [r for r in rows if r.trends][: self.max_series]
        for row in with_trends:
            for month, value in enumerate(row.trends, start=1):
                records.append(
                    {
                        "id": row.id,
                        KEYWORD_COLUMN: row.keyword,
                        MONTH_COLUMN: month,
                        VALUE_COLUMN: value,
                    }
                )
        return pd.DataFrame.from_records(
            records, columns=["id", KEYWORD_COLUMN, MONTH_COLUMN, VALUE_COLUMN]
        )

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            fig = go.Figure()
            fig.update_layout(
                title="No trend data - select keywords with a Trends column",
                xaxis={"visible": False},
                yaxis={"visible": False},
            )
            return fig

        fig = go.Figure()
        for _row_id, grp in data.groupby("id", sort=False):
            fig.add_trace(
                go.Scatter(
                    x=grp[MONTH_COLUMN],
                    y=grp[VALUE_COLUMN],
                    mode="lines+markers",
                    name=str(grp[KEYWORD_COLUMN].iloc[0]),
                )
            )

        fig.update_layout(
            xaxis_title="Month",
            yaxis={"title": {"text": "Relative interest"}, "range": [0, 1.05]},
            legend_title_text="Keyword",
            margin={"l": 40, "r": 20, "t": 30, "b": 40},
        )
        return fig
