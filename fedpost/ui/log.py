"""
Status-line helpers.

One line per call, tagged and colored:

    [ERROR] - scripts/nvidia_drivers.sh not found in .
    [WARNING] - Could not mark scripts/x.sh executable: Operation not permitted

Messages are appended as plain text, so paths or command output containing
square brackets are never parsed as Rich markup.
"""

import os

from rich.console import Console
from rich.text import Text


def _line(console: Console, tag: str, style: str, message: str) -> None:
    t = Text()
    t.append(f"[{tag}]", style=style)
    t.append(f" - {message}")
    console.print(t)


def debug_enabled() -> bool:
    """True when DEBUG=1 is set in the environment."""
    return os.environ.get("DEBUG", "0") == "1"


def log_warning(console: Console, message: str) -> None:
    _line(console, "WARNING", "warning", message)


def log_error(console: Console, message: str) -> None:
    _line(console, "ERROR", "danger", message)


def log_debug(console: Console, message: str) -> None:
    """Print only when DEBUG=1."""
    if debug_enabled():
        _line(console, "DEBUG", "debug", message)
