"""
fedpost — entry point.

CLI flags, config resolution, terminal checks, menu loop.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from fedpost import __version__
from fedpost.config import load_config
from fedpost.launcher.controller import MenuController
from fedpost.launcher.keys import read_key
from fedpost.ui.log import log_debug
from fedpost.ui.theme import FEDPOST_THEME


# ── Console (shared across the tool) ─────────────────────────────────────────

console = Console(theme=FEDPOST_THEME)


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="fedpost", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="fedpost")
@click.option(
    "--scripts-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory the provisioning scripts are resolved against "
         "(default: scripts_dir from config, else the current directory).",
)
def cli(scripts_dir: Optional[Path]) -> None:
    """Fedora Post-Install Tool.

    Arrow-key menu over the provisioning scripts: system configuration,
    packages, development tools, virtualization, Secure Boot MOK keys,
    and Nvidia drivers. Each script runs in the foreground and its exit
    code is reported before returning to the menu.

    \b
    Config file:
      ~/.config/fedpost/config.toml   scripts_dir = "...", shell = "bash"
    Environment variables:
      DEBUG=1      Print [DEBUG] lines.
      NO_COLOR=1   Disable all colour output.
    """
    if not _stdin_is_tty():
        console.print("[danger]Error:[/danger] fedpost needs an interactive terminal.")
        raise SystemExit(1)

    config = load_config()
    base = _resolve_scripts_dir(scripts_dir, config.get("scripts_dir"))
    log_debug(console, f"scripts dir: {base}  shell: {config['shell']}")

    controller = MenuController(
        console,
        scripts_dir=base,
        shell=config["shell"],
        read_key=read_key,
    )

    try:
        controller.run()
    except KeyboardInterrupt:
        console.print("\n  [dim]Cancelled.[/dim]\n")
        raise SystemExit(130)
    except EOFError:
        console.print("\n  [dim]Input closed.[/dim]\n")
        raise SystemExit(1)


# ── Terminal check ────────────────────────────────────────────────────────────

def _stdin_is_tty() -> bool:
    return sys.stdin.isatty()


# ── Scripts dir resolution ────────────────────────────────────────────────────

def _resolve_scripts_dir(flag: Optional[Path], configured: Optional[Path]) -> Path:
    """--scripts-dir wins over config; the current directory is the fallback."""
    if flag is not None:
        return flag.expanduser()
    if configured is not None:
        return configured
    return Path(".")


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
