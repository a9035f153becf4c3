# pciresolve/paths.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
import os

CHROOT_ENV = "PCIRESOLVE_CHROOT"

SYSFS_DEVICES_DEFAULT = "/sys/bus/pci/devices"

# Where distributions install pci.ids; plain text before gzip.
PCI_IDS_SYSTEM_PATHS = (
    "/usr/share/hwdata/pci.ids",
    "/usr/share/misc/pci.ids",
    "/usr/share/hwdata/pci.ids.gz",
    "/usr/share/misc/pci.ids.gz",
)


def _under(chroot: Path, path: str) -> Path:
    return chroot / path.lstrip("/")


@dataclass(frozen=True)
class LinuxPaths:
    """Host paths, rebased onto a chroot (a captured /sys + /usr/share tree)."""

    chroot: Path

    @classmethod
    def from_env(cls, chroot: Optional[str] = None) -> "LinuxPaths":
        return cls(Path(chroot or os.getenv(CHROOT_ENV) or "/"))

    @property
    def sys_bus_pci_devices(self) -> Path:
        return _under(self.chroot, SYSFS_DEVICES_DEFAULT)

    @property
    def pci_ids_candidates(self) -> Tuple[Path, ...]:
        return tuple(_under(self.chroot, p) for p in PCI_IDS_SYSTEM_PATHS)
