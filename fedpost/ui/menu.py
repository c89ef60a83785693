"""
Menu renderer.

Stateless — takes (entries, selected), prints the full screen.
The caller (MenuController) owns the selection and calls this every loop.

  ╭── banner ──╮
    ►  System Configuration                 ← reverse video
       Optimize DNF, set hostname, ...
    1) Packages Installation
       Enable RPM Fusion, Flatpak, ...
  ──────────────────────────────────────────
  Use ↑↓ arrows to navigate, Enter to select
"""

from typing import Sequence

from rich.console import Console
from rich.text import Text

from fedpost.launcher.entries import MenuEntry
from fedpost.ui.header import print_header, print_rule
from fedpost.ui.theme import MENU_CURSOR, NAV_HINT


def render_entry(index: int, entry: MenuEntry, selected: bool) -> Text:
    """Return one entry (label line plus optional description line)."""
    t = Text()
    if selected:
        t.append(f"  {MENU_CURSOR}", style="primary reverse")
        t.append(f" {entry.label}", style="bold reverse")
        if entry.description:
            t.append("\n")
            t.append("     ", style="reverse")
            t.append(entry.description, style="info reverse")
    else:
        t.append(f"  {index})", style="primary")
        t.append(f" {entry.label}", style="bold")
        if entry.description:
            t.append("\n")
            t.append(f"     {entry.description}", style="info")
    return t


def render_menu(console: Console, entries: Sequence[MenuEntry], selected: int) -> None:
    """Clear the screen and draw banner, every entry, and the footer hint."""
    console.clear()
    print_header(console)

    for i, entry in enumerate(entries):
        console.print(render_entry(i, entry, i == selected))
        console.print()

    print_rule(console)
    console.print(Text(NAV_HINT, style="info"))
