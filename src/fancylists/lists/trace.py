"""Debug tracing for list decisions.

Enable via FANCYLISTS_DEBUG=list environment variable or programmatically.
Trace lines go to the ``fancylists.lists.trace`` logger at DEBUG level.

Usage:
    from fancylists.lists.trace import enable_trace, trace
    enable_trace()
    trace("list_open", token="iv", start=4)
"""

from __future__ import annotations

import os
from typing import Any

from fancylists.utils.logger import get_logger

logger = get_logger(__name__)

# Global enable flag - check env var once at import time
_ENABLED = os.environ.get("FANCYLISTS_DEBUG", "").lower() in ("list", "all", "1", "true")


def enable_trace() -> None:
    """Enable list decision tracing programmatically."""
    global _ENABLED
    _ENABLED = True


def disable_trace() -> None:
    """Disable list decision tracing."""
    global _ENABLED
    _ENABLED = False


def is_trace_enabled() -> bool:
    """Check if tracing is enabled."""
    return _ENABLED


def trace(event: str, **kwargs: Any) -> None:
    """Log a trace event if tracing is enabled.

    Args:
        event: Event name (e.g., "list_open", "list_close")
        **kwargs: Key-value pairs to include in trace output

    """
    if not _ENABLED:
        return

    parts = [f"[{event}]"]
    for key, value in kwargs.items():
        if isinstance(value, str) and len(value) > 40:
            value = repr(value[:40] + "...")
        else:
            value = repr(value)
        parts.append(f"{key}={value}")

    logger.debug(" ".join(parts))
