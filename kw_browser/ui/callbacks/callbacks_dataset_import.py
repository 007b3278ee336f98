from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, html

from kw_browser.core.exceptions import DatasetParseError
from kw_browser.ui.helpers import (
    UploadDecodeError,
    decode_upload,
    parse_error_banner,
    tag_filter_options,
)
from kw_browser.ui.ids import IDs

if TYPE_CHECKING:
    from kw_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_dataset_import_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.UPLOAD_STATUS, "children"),
        Output(IDs.Store.DATASET_VERSION, "data"),
        Output(IDs.Control.TAG_FILTER, "options"),
        Output(IDs.Control.TAG_FILTER, "value"),
        Output(IDs.Control.SELECTION_ONLY, "value"),
        Input(IDs.Control.UPLOAD, "contents"),
        State(IDs.Control.UPLOAD, "filename"),
        State(IDs.Store.SESSION_ID, "data"),
        State(IDs.Store.DATASET_VERSION, "data"),
        prevent_initial_call=True,
    )
    def import_dataset(contents, filename, session_id, version):
        if not contents or not session_id:
            raise dash.exceptions.PreventUpdate

        no_change = (dash.no_update, dash.no_update, dash.no_update, dash.no_update)

        # rough size check on the base64 payload before decoding
        if len(contents) * 3 // 4 > ctx.global_config.max_upload_bytes:
            return (f"File '{filename}' exceeds the upload limit.", *no_change)

        try:
            text = decode_upload(contents)
        except UploadDecodeError as exc:
            logger.error("Corrupted upload data for %s: %s", filename, exc)
            return (f"The uploaded file '{filename}' appears to be corrupted.", *no_change)

        session = ctx.sessions.get_or_create(session_id)
        try:
            result = session.load_dataset(text)
        except DatasetParseError as exc:
            logger.info("Rejected dataset %s: %s", filename, exc)
            return (parse_error_banner(exc), *no_change)

        status = html.Div(
            f"Loaded '{filename}': {result.row_count} keywords, "
            f"{len(result.present_columns)} recognised columns.",
            className="alert alert-success mb-0",
        )
        options = tag_filter_options(session.table.rows)
        return status, (version or 0) + 1, options, [], False
