"""Application settings read from the environment.

Only the hosting concerns are configurable; calculator constants (ranges,
multipliers, safe minimums) are fixed in the service modules.
"""

import logging
import os
from typing import List

from core.exceptions import ConfigurationError

_ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

APP_TITLE = os.getenv("NUTRITION_APP_TITLE", "Nutrition Calculator API")
LOG_DIR = os.getenv("NUTRITION_LOG_DIR", os.path.join(_ROOT_DIR, "logs"))


def parse_log_level(raw: str) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {raw}", config_key="NUTRITION_LOG_LEVEL")
    return level


def parse_origins(raw: str) -> List[str]:
    """Split a comma-separated CORS origin list, dropping blanks."""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


LOG_LEVEL = parse_log_level(os.getenv("NUTRITION_LOG_LEVEL", "INFO"))
CORS_ORIGINS = parse_origins(os.getenv("NUTRITION_CORS_ORIGINS", "*"))
