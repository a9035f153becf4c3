# pciresolve/device.py
from __future__ import annotations
from dataclasses import dataclass

from .address import PciAddress
from .resolver import Resolution
from .types import PciClass, Product, ProgrammingInterface, Subclass, Vendor


@dataclass(frozen=True)
class PciDevice:
    address: PciAddress
    vendor: Vendor
    product: Product
    subsystem: Product
    klass: PciClass
    subclass: Subclass
    programming_interface: ProgrammingInterface

    def __str__(self) -> str:
        return (
            f"{self.address} -> class: '{self.klass.name}' "
            f"vendor: '{self.vendor.name}' product: '{self.product.name}'"
        )


def assemble_device(address: PciAddress, resolution: Resolution) -> PciDevice:
    return PciDevice(
        address=address,
        vendor=resolution.vendor,
        product=resolution.product,
        subsystem=resolution.subsystem,
        klass=resolution.klass,
        subclass=resolution.subclass,
        programming_interface=resolution.programming_interface,
    )
