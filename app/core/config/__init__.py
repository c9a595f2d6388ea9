from __future__ import annotations

from app.core.config.scoring import get_scoring_config, get_scoring_int, get_scoring_value
from app.core.config.settings import Settings, load_settings, settings

__all__ = ["Settings", "get_scoring_config", "get_scoring_int", "get_scoring_value", "load_settings", "settings"]
