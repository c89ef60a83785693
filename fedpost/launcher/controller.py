"""
Menu controller — selection state and the navigate/confirm loop.

One state, Idle(selected). Transitions:
  up       → selected = (selected - 1) mod N
  down     → selected = (selected + 1) mod N
  confirm  → Exit entry: stop the loop
             otherwise:  run the bound script, then redraw
  other    → nothing

N is always len(entries). The loop ends only through the Exit entry.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from rich.console import Console
from rich.text import Text

from fedpost.config import DEFAULT_SHELL
from fedpost.launcher.entries import MENU_ENTRIES, MenuEntry
from fedpost.launcher.executor import ActionResult, run_script
from fedpost.launcher.keys import CONFIRM, DOWN, UP, Key, read_key
from fedpost.ui.log import log_debug
from fedpost.ui.menu import render_menu
from fedpost.ui.theme import ICON_RUN, ICON_WARN


Runner = Callable[[Path, str], ActionResult]


class MenuController:
    """
    Owns the selected index and drives the menu loop.

    Args:
        console:     Shared Rich Console.
        scripts_dir: Base directory every entry's script is resolved against.
        entries:     Ordered menu; must contain an Exit entry.
        shell:       Interpreter handed to the action runner.
        read_key:    Blocking key source; tests inject a scripted one.
        runner:      Called as runner(path, label); defaults to run_script.
    """

    def __init__(
        self,
        console: Console,
        scripts_dir: Path,
        entries: Sequence[MenuEntry] = MENU_ENTRIES,
        shell: str = DEFAULT_SHELL,
        read_key: Callable[[], Key] = read_key,
        runner: Runner | None = None,
    ) -> None:
        if not entries:
            raise ValueError("menu needs at least one entry")
        if not any(e.is_exit for e in entries):
            raise ValueError("menu has no Exit entry")

        self.console = console
        self.scripts_dir = scripts_dir
        self.entries = tuple(entries)
        self.shell = shell
        self.selected = 0
        self._read_key = read_key
        self._runner = runner or self._run_script

    @property
    def size(self) -> int:
        return len(self.entries)

    @property
    def current(self) -> MenuEntry:
        return self.entries[self.selected]

    # ── Transitions ──────────────────────────────────────────────────────────

    def move_up(self) -> None:
        self.selected = (self.selected - 1 + self.size) % self.size

    def move_down(self) -> None:
        self.selected = (self.selected + 1) % self.size

    def handle(self, key: Key) -> bool:
        """Apply one key event. Returns False once Exit is confirmed."""
        log_debug(self.console, f"key={key} selected={self.selected}")
        if key == UP:
            self.move_up()
        elif key == DOWN:
            self.move_down()
        elif key == CONFIRM:
            return self.confirm()
        return True

    def confirm(self) -> bool:
        entry = self.current
        if entry.is_exit:
            self.console.print()
            self.console.print(Text("Exiting. Enjoy your new Fedora setup!", style="danger"))
            return False

        self._announce(entry)
        self._runner(entry.script_path(self.scripts_dir), entry.announcement or entry.label)
        return True

    # ── Loop ─────────────────────────────────────────────────────────────────

    def render(self) -> None:
        render_menu(self.console, self.entries, self.selected)

    def run(self) -> None:
        """Redraw, read one key, apply it, until Exit is confirmed."""
        while True:
            self.render()
            if not self.handle(self._read_key()):
                return

    # ── Internal ─────────────────────────────────────────────────────────────

    def _announce(self, entry: MenuEntry) -> None:
        headline = entry.announcement or entry.label
        self.console.print()
        if entry.caution:
            self.console.print(Text(f"{ICON_WARN} RUNNING: {headline}", style="warning"))
        else:
            self.console.print(Text(f"{ICON_RUN} RUNNING: {headline}", style="success"))
        for note in entry.notes:
            self.console.print(Text(note, style="info"))

    def _run_script(self, path: Path, label: str) -> ActionResult:
        return run_script(path, label, self.console, shell=self.shell, base=self.scripts_dir)
