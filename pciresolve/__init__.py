"""
pciresolve — resolve PCI addresses into named devices from sysfs modalias + pci.ids.

Public API:
    - Database protocol & factory:
        PciDb, open_db, PciDbText
    - Records:
        Vendor, Product, PciClass, Subclass, ProgrammingInterface, UNKNOWN
    - Pipeline:
        parse_address, decode_modalias, resolve, assemble_device
    - Sysfs enumeration (Linux):
        SysfsEnumerator, PciAddress, PciDevice
"""

from __future__ import annotations

# Version from installed dist; falls back to dev string when run from source tree.
from importlib.metadata import version, PackageNotFoundError

try:  # pragma: no cover
    __version__ = version("pciresolve")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0.dev0"

# Public API re-exports
from .address import PciAddress, parse_address
from .api import PciDb, PciDbText, open_db
from .device import PciDevice, assemble_device
from .modalias import ModaliasInfo, decode_modalias, read_modalias
from .resolver import Resolution, resolve
from .sysfs import SysfsEnumerator
from .types import UNKNOWN, PciClass, Product, ProgrammingInterface, Subclass, Vendor

__all__ = [
    "__version__",
    # DB protocol/factory
    "PciDb",
    "open_db",
    "PciDbText",
    # Records
    "UNKNOWN",
    "Vendor",
    "Product",
    "PciClass",
    "Subclass",
    "ProgrammingInterface",
    # Pipeline
    "PciAddress",
    "parse_address",
    "ModaliasInfo",
    "decode_modalias",
    "read_modalias",
    "Resolution",
    "resolve",
    "PciDevice",
    "assemble_device",
    # Sysfs
    "SysfsEnumerator",
]
