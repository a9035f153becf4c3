#!/usr/bin/python
#
# Python pciresolve library
# Text (pci.ids) database reader
#
# (c) 2025 The pciresolve authors
# Licensed under the MIT license
#

from typing import Dict, IO, List, Optional, Tuple
import gzip
import logging
import zlib

from ..types import PciClass, Product, ProgrammingInterface, Subclass, Vendor

log = logging.getLogger(__name__)

Subsystem = Tuple[str, str, str]
Device = Tuple[str, str, List[Subsystem]]
VendorDict = Dict[str, Tuple[str, List[Device]]]
ClassDict = Dict[str, Tuple[str, List[Tuple[str, str, List[Tuple[str, str]]]]]]


def _open_text(path: str) -> IO[str]:
    if str(path).endswith(".gz"):
        return gzip.open(path, "rt", encoding="utf-8", errors="replace")
    return open(path, "r", encoding="utf-8", errors="replace")


def _split_id(s: str) -> Tuple[str, str]:
    tok = s.strip().split(None, 1)
    return tok[0].lower(), (tok[1] if len(tok) > 1 else "")


# ---------- Parser for plaintext pci.ids ----------
def _parse_pci_ids(f: IO[str]) -> Tuple[VendorDict, ClassDict]:
    """
    Returns:
      vendors: dict[vendor_id] = (vendor_name, list[(dev_id, dev_name, list[(subven, subdev, subname)])])
      classes: dict[base] = (base_name, list[(sub, sub_name, list[(prog_if, prog_if_name)])])

    IDs are kept as the lowercase hex strings found in the file. Order of
    appearance is preserved at every level.
    """
    vendors: VendorDict = {}
    classes: ClassDict = {}

    in_classes = False
    cur_vendor: Optional[str] = None
    cur_base: Optional[str] = None

    for raw in f:
        line = raw.rstrip("\n")
        if not line.strip() or line.startswith("#"):
            continue

        if line.startswith("C "):
            in_classes = True
            base, name = _split_id(line[2:])
            classes[base] = (name, [])
            cur_base = base
            continue

        if not in_classes:
            # Vendors / devices / subsystems
            if line[0] != "\t":
                tok = line.split(None, 1)
                if len(tok[0]) == 4:
                    ven, name = _split_id(line)
                    vendors[ven] = (name, [])
                    cur_vendor = ven
                else:
                    # not a vendor line; ignore until the next vendor
                    cur_vendor = None
                continue

            if cur_vendor is None:
                continue

            if line.startswith("\t\t"):
                # "ssss dddd  name"
                tok = line.strip().split(None, 2)
                if len(tok) < 2 or not vendors[cur_vendor][1]:
                    continue
                name = tok[2] if len(tok) > 2 else ""
                vendors[cur_vendor][1][-1][2].append(
                    (tok[0].lower(), tok[1].lower(), name)
                )
                continue

            dev, name = _split_id(line)
            vendors[cur_vendor][1].append((dev, name, []))
        else:
            # Classes / subclasses / prog-if
            if cur_base is None:
                continue
            subs = classes[cur_base][1]
            if line.startswith("\t\t"):
                if not subs:
                    continue
                pi, name = _split_id(line)
                subs[-1][2].append((pi, name))
                continue

            if line.startswith("\t"):
                sub, name = _split_id(line)
                subs.append((sub, name, []))

    return vendors, classes


class PciDbText:
    """
    pci.ids loaded into frozen records.

    Products are indexed by vendor ID + product ID; the same Product objects
    appear in their vendor's `products` tuple.
    """

    def __init__(self, pci_ids_path: str):
        try:
            with _open_text(pci_ids_path) as f:
                vendors, classes = _parse_pci_ids(f)
        except (zlib.error, EOFError, gzip.BadGzipFile) as e:
            raise ValueError(f"Corrupt compressed database: {pci_ids_path}") from e
        if not vendors or not classes:
            raise ValueError("Corrupt or empty text database")

        self.path = str(pci_ids_path)
        self._vendors: Dict[str, Vendor] = {}
        self._products: Dict[str, Product] = {}
        self._classes: Dict[str, PciClass] = {}

        for ven_id, (vname, devs) in vendors.items():
            products = []
            for dev_id, dname, sublist in devs:
                subsystems = tuple(
                    Product(vendor_id=sv, id=sd, name=sname)
                    for sv, sd, sname in sublist
                )
                product = Product(
                    vendor_id=ven_id, id=dev_id, name=dname, subsystems=subsystems
                )
                products.append(product)
                self._products[ven_id + dev_id] = product
            self._vendors[ven_id] = Vendor(
                id=ven_id, name=vname, products=tuple(products)
            )

        for base, (bname, subs) in classes.items():
            subclasses = tuple(
                Subclass(
                    id=sub,
                    name=sname,
                    programming_interfaces=tuple(
                        ProgrammingInterface(id=pi, name=piname)
                        for pi, piname in pifs
                    ),
                )
                for sub, sname, pifs in subs
            )
            self._classes[base] = PciClass(id=base, name=bname, subclasses=subclasses)

        log.debug(
            "loaded %s: %d vendors, %d products, %d classes",
            self.path,
            len(self._vendors),
            len(self._products),
            len(self._classes),
        )

    # ----- public API -----
    def get_vendor(self, vendor_id: str) -> Optional[Vendor]:
        return self._vendors.get(vendor_id)

    def get_product(self, vendor_id: str, product_id: str) -> Optional[Product]:
        return self._products.get(vendor_id + product_id)

    def get_class(self, class_id: str) -> Optional[PciClass]:
        return self._classes.get(class_id)

