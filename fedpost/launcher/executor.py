"""
Action runner — run one provisioning script in the foreground.

Flow for run_script():
  - Missing file  → error line, wait for ↵, return (nothing runs)
  - chmod +x      → idempotent; a failure is only a warning
  - Show command  → wait for ↵ before starting
  - Run           → child inherits stdin/stdout/stderr, no timeout
  - Report        → success, or warning with the exit code (never fatal)
  - Wait for ↵    → control goes back to the menu

Ctrl-C during a run belongs to the child; see run_foreground().
"""

from __future__ import annotations

import shlex
import signal
import stat
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.text import Text

from fedpost.config import DEFAULT_SHELL
from fedpost.ui.header import print_header, print_rule
from fedpost.ui.log import log_error, log_warning
from fedpost.ui.theme import ICON_EXEC, ICON_LAUNCH, ICON_OK, ICON_WARN


_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass
class ActionResult:
    label: str
    command: list[str]
    found: bool = True
    exit_code: int | None = None    # None when the child never ran

    @property
    def ok(self) -> bool:
        return self.found and self.exit_code == 0


# ── Helpers ───────────────────────────────────────────────────────────────────

def ensure_executable(path: Path) -> int:
    """
    Add execute permission for user, group, and other.

    Only calls chmod when a bit is missing. Returns the resulting mode.
    """
    mode = stat.S_IMODE(path.stat().st_mode)
    wanted = mode | _EXEC_BITS
    if wanted != mode:
        path.chmod(wanted)
    return wanted


def build_command(path: Path, shell: str = DEFAULT_SHELL) -> list[str]:
    """Return the argv that runs the script, e.g. ['bash', './scripts/x.sh']."""
    return [shell, str(path)]


def wait_for_enter() -> None:
    """Block until a line is read from stdin."""
    input()


def _prompt(console: Console, message: str, pause: Callable[[], None]) -> None:
    console.print(Text(message, style="info"))
    pause()


# ── Public API ────────────────────────────────────────────────────────────────

def run_script(
    path: Path,
    label: str,
    console: Console,
    shell: str = DEFAULT_SHELL,
    pause: Callable[[], None] = wait_for_enter,
    base: Path | None = None,
) -> ActionResult:
    """
    Run the script at path as a blocking foreground child.

    Args:
        path:    Script to run. Must be an existing regular file.
        label:   Human-readable title shown before and during the run.
        console: Shared Rich Console.
        shell:   Interpreter the script is handed to.
        pause:   The "press Enter" gate; tests replace it with a no-op.
        base:    Scripts directory path was resolved against; used to name
                 a missing script the way it was configured.

    Raises KeyboardInterrupt when the child itself was killed by SIGINT.
    """
    command = build_command(path, shell)

    if not path.is_file():
        console.print()
        log_error(console, f"{_display_name(path, base)} not found in {_display_dir(path, base)}")
        _prompt(console, "Press Enter to return to menu...", pause)
        return ActionResult(label=label, command=command, found=False)

    try:
        ensure_executable(path)
    except OSError as e:
        log_warning(console, f"Could not mark {path} executable: {e.strerror or e}")

    cmd_line = shlex.join(command)
    t = Text()
    t.append(f"{ICON_LAUNCH} Executing: ", style="primary")
    t.append(cmd_line, style="bold")
    console.print(t)
    console.print(Text(f"Command: {label}", style="info"))
    print_rule(console)
    _prompt(console, "Press Enter to start execution...", pause)

    console.clear()
    print_header(console)
    console.print(Text(f"{ICON_EXEC} EXECUTING COMMAND:", style="primary"))
    console.print(Text(cmd_line, style="info"))
    console.print(Text(f"Title: {label}", style="info"))
    print_rule(console)
    console.print()

    try:
        exit_code: int | None = run_foreground(command)
    except OSError as e:
        exit_code = None
        log_error(console, f"Could not start {command[0]}: {e.strerror or e}")

    console.print()
    print_rule(console)
    if exit_code == 0:
        console.print(Text(f"{ICON_OK} Command completed successfully!", style="success"))
    elif exit_code is not None:
        console.print(
            Text(f"{ICON_WARN} Command completed with exit code: {exit_code}", style="warning")
        )
    _prompt(console, "Press Enter to return to main menu...", pause)

    return ActionResult(label=label, command=command, exit_code=exit_code)


def run_foreground(command: list[str]) -> int:
    """
    Start command with inherited stdio and wait for it, like system(3).

    While the child runs, SIGINT is ignored here so Ctrl-C is handled by
    the child alone (a dnf transaction gets to clean up). The previous
    handler is restored afterwards. If the child died from SIGINT, the
    interrupt is re-raised here as KeyboardInterrupt.
    """
    proc = subprocess.Popen(command)
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        returncode = proc.wait()
    finally:
        signal.signal(signal.SIGINT, previous)

    if returncode == -signal.SIGINT:
        raise KeyboardInterrupt
    return returncode


# ── Internal ──────────────────────────────────────────────────────────────────

def _display_name(path: Path, base: Path | None) -> str:
    if base is not None:
        try:
            return str(path.relative_to(base))
        except ValueError:
            pass
    return path.name


def _display_dir(path: Path, base: Path | None) -> str:
    return str(base) if base is not None else str(path.parent)
