"""
Fedora system detection — release and architecture.
Read once per run; the banner shows it on every redraw.
"""

import platform
import shlex
from functools import lru_cache
from pathlib import Path
from typing import Any


_OS_RELEASE = Path("/etc/os-release")


def parse_os_release(text: str) -> dict[str, str]:
    """
    Parse os-release(5) content into a dict.

    Values may be single-quoted, double-quoted, or bare. Blank lines,
    comments, and lines without '=' are ignored.
    """
    fields: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw = line.partition("=")
        try:
            parts = shlex.split(raw)
        except ValueError:
            continue
        fields[key.strip()] = parts[0] if parts else ""
    return fields


def _read_os_release(path: Path | None = None) -> dict[str, str]:
    """Return parsed os-release fields, or {} if the file is unreadable."""
    try:
        return parse_os_release((path or _OS_RELEASE).read_text())
    except OSError:
        return {}


@lru_cache(maxsize=1)
def get_system_info() -> dict[str, Any]:
    """
    Return a dict describing this machine.

    Keys:
        pretty_name     "Fedora Linux 41 (Workstation Edition)"
                        (NAME VERSION_ID when PRETTY_NAME is absent, else "Linux")
        machine         "x86_64" | "aarch64"
    """
    fields = _read_os_release()
    distro = fields.get("NAME", "Linux")
    version_id = fields.get("VERSION_ID", "")

    return {
        "pretty_name": fields.get("PRETTY_NAME", f"{distro} {version_id}".strip()),
        "machine": platform.machine(),
    }
