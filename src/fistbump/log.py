"""Console messages for fistbump."""

from __future__ import annotations

import sys

PACKAGE_NAME = "fistbump"

_LEVEL_EMOJI = {
    "info": "👊",
    "warn": "⚠️",
    "error": "❗️",
}


def log_message(message: str, level: str | None = None) -> str:
    """Print a prefixed message to stderr and return it.

    ``level`` is ``"warn"``, ``"error"`` or None for an info message.
    """
    emoji = _LEVEL_EMOJI.get(level or "info", _LEVEL_EMOJI["info"])
    msg = f"[{PACKAGE_NAME}] {emoji} {message}"
    print(msg, file=sys.stderr, flush=True)
    return msg
