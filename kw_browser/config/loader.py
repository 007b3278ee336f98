from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from kw_browser.config.model import (
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_MAX_SESSIONS,
    DEFAULT_MAX_UPLOAD_BYTES,
    GlobalConfig,
)
from kw_browser.core.exceptions import ConfigError
from kw_browser.core.query_state import SortDirection, SortKey

logger = logging.getLogger(__name__)

ENV_DEBOUNCE_MS = "KW_BROWSER_DEBOUNCE_MS"
ENV_EXPORT_DIR = "KW_BROWSER_EXPORT_DIR"


def _positive_int(raw: Any, name: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{name}' must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"'{name}' must be >= 0, got {value}")
    return value


def _resolve_dir(raw: str, root: Path) -> Path:
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def parse_global_config(raw: Dict[str, Any], root: Path) -> GlobalConfig:
    try:
        sort_key = SortKey(raw.get("default_sort_key", SortKey.ID.value))
        sort_direction = SortDirection(raw.get("default_sort_direction", SortDirection.ASC.value))
    except ValueError as exc:
        raise ConfigError(f"Invalid default sort in global config: {exc}") from exc

    export_raw = raw.get("export_dir")

    max_sessions = _positive_int(raw.get("max_sessions", DEFAULT_MAX_SESSIONS), "max_sessions")
    if max_sessions == 0:
        raise ConfigError("'max_sessions' must be >= 1")

    return GlobalConfig(
        ui_title=raw.get("ui_title", "Keyword Research Browser"),
        filter_debounce_ms=_positive_int(raw.get("filter_debounce_ms", DEFAULT_DEBOUNCE_MS), "filter_debounce_ms"),
        default_sort_key=sort_key,
        default_sort_direction=sort_direction,
        max_upload_bytes=_positive_int(raw.get("max_upload_bytes", DEFAULT_MAX_UPLOAD_BYTES), "max_upload_bytes"),
        export_dir=_resolve_dir(export_raw, root) if export_raw else None,
        max_sessions=max_sessions,
    )


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from <root>/global.json, then apply env overrides.

    A missing file is not an error: defaults are used.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if global_path.is_file():
        try:
            with global_path.open() as f:
                raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Malformed JSON in {global_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning("Global config not found at %s; using defaults", global_path)
        raw = {}

    config = parse_global_config(raw, root)

    env_debounce = os.getenv(ENV_DEBOUNCE_MS)
    if env_debounce:
        config.filter_debounce_ms = _positive_int(env_debounce, ENV_DEBOUNCE_MS)

    env_export = os.getenv(ENV_EXPORT_DIR)
    if env_export:
        config.export_dir = Path(env_export)

    if config.export_dir is None:
        config.export_dir = (root / "exports").resolve()

    return config
