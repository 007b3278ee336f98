from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from kw_browser.config.model import GlobalConfig
from kw_browser.services.export_service import ExportService
from kw_browser.services.session_service import SessionRegistry
from kw_browser.views.trend_view import TrendView


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    sessions: SessionRegistry = field(default_factory=SessionRegistry)
    export_service: Optional[ExportService] = None
    trend_view: TrendView = field(default_factory=TrendView)

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")
