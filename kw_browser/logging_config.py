from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

ENV_LOG_FORMAT = "KW_BROWSER_LOG_FORMAT"
ENV_LOG_LEVEL = "KW_BROWSER_LOG_LEVEL"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"

# werkzeug logs one access line per Dash callback request
NOISY_LOGGERS = ("werkzeug",)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for kw_browser.

    Format: force_format ("json" or "plain"), else KW_BROWSER_LOG_FORMAT,
    else JSON. JSON records carry `timestamp` and `level` keys plus any
    `extra={...}` passed by the caller (row counts, session ids, paths).

    Level: the argument (int or name), else KW_BROWSER_LOG_LEVEL, else INFO.
    """
    format_mode = (force_format or os.getenv(ENV_LOG_FORMAT, "json")).lower()

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        handler.setFormatter(
            jsonlogger.JsonFormatter(
                JSON_FIELDS,
                rename_fields={"asctime": "timestamp", "levelname": "level"},
            )
        )

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.WARNING))
