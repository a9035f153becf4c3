# pciresolve/sysfs.py
from __future__ import annotations
from pathlib import Path
from typing import Callable, Iterable, List, Optional
import logging

from .address import PciAddress, parse_address
from .device import PciDevice, assemble_device
from .modalias import read_modalias
from .paths import LinuxPaths
from .resolver import resolve
from .types import PciDb

log = logging.getLogger(__name__)

Reporter = Callable[[str], None]
Lister = Callable[[], Iterable[str]]


def _log_reporter(msg: str) -> None:
    log.warning("%s", msg)


def collect_devices(
    addresses: Iterable[str],
    get_device: Callable[[str], Optional[PciDevice]],
    report: Reporter,
) -> List[PciDevice]:
    """Resolve each address in turn; failures are reported and skipped."""
    devs: List[PciDevice] = []
    for addr in addresses:
        dev = get_device(addr)
        if dev is None:
            report(f"failed to get device information for PCI address {addr}")
            continue
        devs.append(dev)
    return devs


class SysfsEnumerator:
    """
    Builds PciDevice records from /sys/bus/pci/devices/<address>/modalias
    and a PCI ID database.

    `lister` replaces the directory listing of the devices root and
    `reporter` receives one message per skipped address (default: log
    warning).
    """

    def __init__(
        self,
        db: PciDb,
        root: Optional[str] = None,
        *,
        chroot: Optional[str] = None,
        lister: Optional[Lister] = None,
        reporter: Optional[Reporter] = None,
    ):
        self.db = db
        if root:
            self.root = Path(root)
        else:
            self.root = LinuxPaths.from_env(chroot).sys_bus_pci_devices
        self._lister = lister
        self.report = reporter or _log_reporter

    def modalias_path(self, address: str) -> Optional[Path]:
        addr = parse_address(address)
        if addr is None:
            return None
        return self._modalias_file(addr)

    def _modalias_file(self, addr: PciAddress) -> Path:
        return self.root / str(addr) / "modalias"

    def get_device(self, address: str) -> Optional[PciDevice]:
        addr = parse_address(address)
        if addr is None:
            log.debug("not a PCI address: %r", address)
            return None
        info = read_modalias(self._modalias_file(addr))
        if info is None:
            return None
        return assemble_device(addr, resolve(self.db, info))

    def list_addresses(self) -> List[str]:
        if self._lister is not None:
            return list(self._lister())
        # The devices directory holds one symlink per function, named by address.
        return sorted(d.name for d in self.root.iterdir())

    def list_devices(self) -> List[PciDevice]:
        try:
            addresses = self.list_addresses()
        except Exception as e:
            self.report(f"failed to read {self.root}: {e}")
            return []
        return collect_devices(addresses, self.get_device, self.report)
