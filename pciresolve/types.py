"""
Reference database records and the lookup protocol the resolver depends on.

Records are frozen and their list-like fields are tuples, so a loaded
database (and anything resolved from it) can be shared freely.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, runtime_checkable

UNKNOWN = "unknown"


@dataclass(frozen=True)
class ProgrammingInterface:
    id: str
    name: str


@dataclass(frozen=True)
class Subclass:
    id: str
    name: str
    programming_interfaces: Tuple[ProgrammingInterface, ...] = ()


@dataclass(frozen=True)
class PciClass:
    id: str
    name: str
    subclasses: Tuple[Subclass, ...] = ()


@dataclass(frozen=True)
class Product:
    # For subsystem entries vendor_id is the subsystem vendor.
    vendor_id: str
    id: str
    name: str
    subsystems: Tuple["Product", ...] = ()


@dataclass(frozen=True)
class Vendor:
    id: str
    name: str
    products: Tuple[Product, ...] = ()


@runtime_checkable
class PciDb(Protocol):
    """Read-only lookups over a loaded PCI ID database. Misses return None."""

    def get_vendor(self, vendor_id: str) -> Optional[Vendor]: ...

    def get_product(self, vendor_id: str, product_id: str) -> Optional[Product]: ...

    def get_class(self, class_id: str) -> Optional[PciClass]: ...


__all__ = [
    "UNKNOWN",
    "PciDb",
    "Vendor",
    "Product",
    "PciClass",
    "Subclass",
    "ProgrammingInterface",
]
