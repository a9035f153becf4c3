# pciresolve/export.py
from __future__ import annotations
import json
from typing import Any, Dict, Iterable, List, Optional

from .address import parse_address
from .device import PciDevice
from .types import PciClass, Product, ProgrammingInterface, Subclass, Vendor

# Child lists (a vendor's products, a class's subclasses, ...) are database
# content, not device state, and are left out of the document.


def _product_to_dict(p: Product) -> Dict[str, str]:
    return {"vendor_id": p.vendor_id, "id": p.id, "name": p.name}


def _device_to_dict(dev: PciDevice) -> Dict[str, Any]:
    return {
        "address": str(dev.address),
        "vendor": {"id": dev.vendor.id, "name": dev.vendor.name},
        "product": _product_to_dict(dev.product),
        "subsystem": _product_to_dict(dev.subsystem),
        "class": {"id": dev.klass.id, "name": dev.klass.name},
        "subclass": {"id": dev.subclass.id, "name": dev.subclass.name},
        "programming_interface": {
            "id": dev.programming_interface.id,
            "name": dev.programming_interface.name,
        },
    }


def dumps_devices(devs: Iterable[PciDevice], *, indent: Optional[int] = None) -> str:
    """Serialize resolved devices (IDs and names only)."""
    payload = {"version": 1, "devices": [_device_to_dict(d) for d in devs]}
    return json.dumps(payload, indent=indent, sort_keys=True)


def loads_devices(s: str) -> List[PciDevice]:
    """
    Rebuild PciDevice values from `dumps_devices` output. The records come
    back without child lists.
    """
    obj = json.loads(s)
    if obj.get("version") != 1:
        raise ValueError(f"unsupported document version: {obj.get('version')!r}")

    devs: List[PciDevice] = []
    for n in obj["devices"]:
        addr = parse_address(n["address"])
        if addr is None:
            raise ValueError(f"bad PCI address in document: {n['address']!r}")
        devs.append(
            PciDevice(
                address=addr,
                vendor=Vendor(**n["vendor"]),
                product=Product(**n["product"]),
                subsystem=Product(**n["subsystem"]),
                klass=PciClass(**n["class"]),
                subclass=Subclass(**n["subclass"]),
                programming_interface=ProgrammingInterface(
                    **n["programming_interface"]
                ),
            )
        )
    return devs
