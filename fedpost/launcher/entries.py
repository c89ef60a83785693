"""
Menu data model.

MenuEntry — one row of the launcher menu, bound to one provisioning script.
MENU_ENTRIES — the fixed, ordered menu. The last entry is Exit.

The menu size is always len(entries); nothing else stores a count.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MenuEntry:
    label: str                      # "Nvidia Drivers"
    description: str                # second line under the label, may be ""
    script: str | None = None       # relative to the scripts dir; None = Exit
    announcement: str = ""          # "RUNNING: …" headline printed on confirm
    notes: tuple[str, ...] = ()     # extra info lines printed under the headline
    caution: bool = False           # headline in warning style

    @property
    def is_exit(self) -> bool:
        return self.script is None

    def script_path(self, base: Path) -> Path:
        """Resolve the bound script against the scripts directory."""
        if self.script is None:
            raise ValueError(f"{self.label!r} has no script")
        return base / self.script


_REBOOT_NOTE = "The system will reboot after completion..."

MENU_ENTRIES: tuple[MenuEntry, ...] = (
    MenuEntry(
        label="System Configuration",
        description="Optimize DNF, set hostname, and tune system limits.",
        script="scripts/system_configuration.sh",
        announcement="System Configuration",
        notes=("Applying DNF optimizations and system tweaks...", _REBOOT_NOTE),
    ),
    MenuEntry(
        label="Packages Installation",
        description="Enable RPM Fusion, Flatpak, and install essential apps.",
        script="scripts/packages_installation.sh",
        announcement="Packages Installation",
        notes=("Setting up repositories and installing software...",),
    ),
    MenuEntry(
        label="Development Environment Installation",
        description="Install Development Tools.",
        script="scripts/development_installation.sh",
        announcement="Development Tools Installation",
        notes=("Setting up development tools and installing container support...",),
    ),
    MenuEntry(
        label="Virtualization Stack",
        description="Install KVM/QEMU hypervisor and libvirt services.",
        script="scripts/virtualization_installation.sh",
        announcement="Virtualization Stack Installation",
        notes=("Installing KVM/QEMU hypervisor and configuring libvirt...",),
    ),
    MenuEntry(
        label="Secure Boot Config",
        description="Generate and enroll MOK keys for 3rd party modules.",
        script="scripts/configure_secureboot.sh",
        announcement="Secure Boot Configuration",
        notes=("Preparing MOK keys for kernel module signing...", _REBOOT_NOTE),
        caution=True,
    ),
    MenuEntry(
        label="Nvidia Drivers",
        description="Install latest proprietary drivers via Akmod.",
        script="scripts/nvidia_drivers.sh",
        announcement="Nvidia Driver Installation",
        notes=("Installing drivers. This may take several minutes...",),
    ),
    MenuEntry(label="Exit", description=""),
)
