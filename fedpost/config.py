"""
Config file loading for fedpost.

Reads ~/.config/fedpost/config.toml and returns structured config.
Never raises — always returns a valid dict with sensible defaults.

    scripts_dir = "~/fedora-post-install"   # base for every action script
    shell = "bash"                          # interpreter the scripts run under
"""

from pathlib import Path

_CONFIG_PATH = Path.home() / ".config" / "fedpost" / "config.toml"

DEFAULT_SHELL = "bash"


def load_config(path: Path | None = None) -> dict:
    """
    Load and return fedpost config from TOML file.

    Returns {"scripts_dir": Path | None, "shell": str} — always valid, never raises.
    Missing file, parse errors, or bad shapes fall back to defaults per key.
    """
    config_path = path or _CONFIG_PATH
    config: dict = {"scripts_dir": None, "shell": DEFAULT_SHELL}

    if not config_path.is_file():
        return config

    try:
        raw = config_path.read_bytes()
    except OSError:
        return config

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return config

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except Exception:
        return config

    scripts_dir = data.get("scripts_dir")
    if isinstance(scripts_dir, str) and scripts_dir.strip():
        config["scripts_dir"] = Path(scripts_dir).expanduser()

    shell = data.get("shell")
    if isinstance(shell, str) and shell.strip():
        config["shell"] = shell.strip()

    return config
