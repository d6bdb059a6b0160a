"""
ANSI color helpers for console output.
"""

import os

RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
BOLD = "\x1b[1m"

_enabled = "NO_COLOR" not in os.environ and os.environ.get("TERM", "") != "dumb"


def set_enabled(enabled: bool) -> None:
    global _enabled
    _enabled = enabled


def is_enabled() -> bool:
    return _enabled


def colorize(text: str, *codes: str) -> str:
    """Wrap ``text`` in the given escape codes when colors are on."""
    if not _enabled or not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"
