from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from kw_browser.config.loader import load_global_config
from kw_browser.core.query_state import QueryState
from kw_browser.services.export_service import ExportService
from kw_browser.services.session_service import SessionRegistry
from kw_browser.services.storage import LocalFileSystemStorage
from kw_browser.ui.callbacks.callbacks_dataset_import import register_dataset_import_callbacks
from kw_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from kw_browser.ui.callbacks.callbacks_io import register_io_callbacks
from kw_browser.ui.callbacks.callbacks_render import register_render_callbacks
from kw_browser.ui.config import AppConfig
from kw_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Services
    default_query = QueryState(
        sort_key=global_config.default_sort_key,
        sort_direction=global_config.default_sort_direction,
    )
    sessions = SessionRegistry(default_query=default_query, max_sessions=global_config.max_sessions)
    storage_backend = LocalFileSystemStorage(global_config.export_dir)
    export_service = ExportService(storage_backend)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        sessions=sessions,
        export_service=export_service,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    # Layout as a function: evaluated per page load
    app.layout = partial(build_layout, ctx)

    register_dataset_import_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info("Dash app created", extra={"config_root": str(config_root)})
    return app
