"""Runtime configuration defaults for the ordering app."""

from __future__ import annotations

import os

DEBUG_LOG_PATH = "/tmp/buffbites-debug.log"
CURRENCY_SYMBOL = "$"

_DEBUG_LOG_ENV = "BUFFBITES_DEBUG_LOG"


def resolve_debug_log_path() -> str:
    """
    Resolve the debug log path.

    Resolution order:
    1. BUFFBITES_DEBUG_LOG (if set)
    2. DEBUG_LOG_PATH
    """
    env_override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    if env_override:
        return env_override
    return DEBUG_LOG_PATH
