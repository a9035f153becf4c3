"""
Cascade decoded modalias IDs through the reference database.

Every lookup returns a populated record. A miss at any level produces a
placeholder carrying the raw ID and the name "unknown", so callers never
have to deal with a partially resolved device.
"""

from __future__ import annotations
from dataclasses import dataclass

from .modalias import ModaliasInfo
from .types import (
    UNKNOWN,
    PciClass,
    PciDb,
    Product,
    ProgrammingInterface,
    Subclass,
    Vendor,
)


@dataclass(frozen=True)
class Resolution:
    vendor: Vendor
    product: Product
    subsystem: Product
    klass: PciClass
    subclass: Subclass
    programming_interface: ProgrammingInterface


def find_vendor(db: PciDb, vendor_id: str) -> Vendor:
    vendor = db.get_vendor(vendor_id)
    if vendor is None:
        return Vendor(id=vendor_id, name=UNKNOWN, products=())
    return vendor


def find_product(db: PciDb, vendor_id: str, product_id: str) -> Product:
    product = db.get_product(vendor_id, product_id)
    if product is None:
        return Product(vendor_id=vendor_id, id=product_id, name=UNKNOWN, subsystems=())
    return product


def find_subsystem(
    db: PciDb,
    vendor_id: str,
    product_id: str,
    subvendor_id: str,
    subproduct_id: str,
) -> Product:
    """
    The subsystem list hangs off the product, but an entry only counts when
    the subsystem vendor is itself a known vendor. Entries are matched on
    the subsystem device ID alone; the first hit wins.
    """
    product = db.get_product(vendor_id, product_id)
    subvendor = db.get_vendor(subvendor_id)
    if product is not None and subvendor is not None:
        for sub in product.subsystems:
            if sub.id == subproduct_id:
                return sub
    return Product(vendor_id=subvendor_id, id=subproduct_id, name=UNKNOWN, subsystems=())


def find_class(db: PciDb, class_id: str) -> PciClass:
    klass = db.get_class(class_id)
    if klass is None:
        return PciClass(id=class_id, name=UNKNOWN, subclasses=())
    return klass


def find_subclass(db: PciDb, class_id: str, subclass_id: str) -> Subclass:
    klass = db.get_class(class_id)
    if klass is not None:
        for sc in klass.subclasses:
            if sc.id == subclass_id:
                return sc
    return Subclass(id=subclass_id, name=UNKNOWN, programming_interfaces=())


def find_programming_interface(
    db: PciDb, class_id: str, subclass_id: str, prog_iface_id: str
) -> ProgrammingInterface:
    subclass = find_subclass(db, class_id, subclass_id)
    for pi in subclass.programming_interfaces:
        if pi.id == prog_iface_id:
            return pi
    return ProgrammingInterface(id=prog_iface_id, name=UNKNOWN)


def resolve(db: PciDb, info: ModaliasInfo) -> Resolution:
    return Resolution(
        vendor=find_vendor(db, info.vendor_id),
        product=find_product(db, info.vendor_id, info.product_id),
        subsystem=find_subsystem(
            db,
            info.vendor_id,
            info.product_id,
            info.subvendor_id,
            info.subproduct_id,
        ),
        klass=find_class(db, info.class_id),
        subclass=find_subclass(db, info.class_id, info.subclass_id),
        programming_interface=find_programming_interface(
            db, info.class_id, info.subclass_id, info.prog_iface_id
        ),
    )
