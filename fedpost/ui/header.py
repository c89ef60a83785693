"""
fedpost banner.

Printed at the top of every menu redraw and again above a running script:

  ╭──────────────────────────────────────────────────────────╮
  │                FEDORA POST-INSTALL TOOL                  │
  │        Fedora Linux 41 (Workstation Edition) · x86_64    │
  ╰──────────────────────────────────────────────────────────╯
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from fedpost.system_info import get_system_info
from fedpost.ui.theme import APP_TITLE, COLOR_BANNER, RULE_CHAR, RULE_WIDTH


def build_header() -> Panel:
    """Return the banner Panel: tool title over a one-line system identity."""
    info = get_system_info()

    t = Text(justify="center")
    t.append(APP_TITLE, style="bold")
    identity = "  ·  ".join(
        part for part in (info.get("pretty_name", ""), info.get("machine", "")) if part
    )
    if identity:
        t.append("\n")
        t.append(identity, style="dim")

    return Panel(t, border_style=COLOR_BANNER, width=RULE_WIDTH + 2)


def print_header(console: Console) -> None:
    """Print the banner followed by a blank line."""
    console.print(build_header())
    console.print()


def print_rule(console: Console) -> None:
    """Print the fixed-width separator used between menu and status blocks."""
    console.print(Text(RULE_CHAR * RULE_WIDTH, style="primary"))
