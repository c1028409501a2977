"""Runtime configuration defaults for the menu app."""

from __future__ import annotations

import os
from pathlib import Path

from diner.models import Course

DEBUG_LOG_PATH = "/tmp/diner-debug.log"
_DEBUG_LOG_ENV = "DINER_DEBUG_LOG"

MIN_INGREDIENTS = 1
MAX_INGREDIENTS = 4

CURRENCY_PREFIX = "R"
PRICE_DECIMALS = 2

DEFAULT_COURSE = Course.STARTER


def resolve_debug_log_path() -> Path:
    """
    Resolve where the debug log is written.

    Resolution order:
    1. DINER_DEBUG_LOG (if set)
    2. DEBUG_LOG_PATH
    """
    env_override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return Path(env_override or DEBUG_LOG_PATH)
