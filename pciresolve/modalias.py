# pciresolve/modalias.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
import logging

log = logging.getLogger(__name__)

# The kernel exposes one line per device, e.g.
#
#   $ cat /sys/bus/pci/devices/0000:03:00.0/modalias
#   pci:v000010DEd00001C82sv00001043sd00008613bc03sc00i00
#
#   v000010DE   vendor
#   d00001C82   device (product)
#   sv00001043  subsystem vendor
#   sd00008613  subsystem device (subproduct)
#   bc03        base class
#   sc00        subclass
#   i00         programming interface
#
# Only the low four digits of the 32-bit IDs are meaningful.
# fmt: off
MODALIAS_FIELDS: Tuple[Tuple[str, int, int, bool], ...] = (
    # name            start  end  lowercase
    ("vendor_id",         9,  13, True),
    ("product_id",       18,  22, True),
    ("subvendor_id",     28,  32, True),
    ("subproduct_id",    38,  42, True),
    ("class_id",         44,  46, False),
    ("subclass_id",      48,  50, False),
    ("prog_iface_id",    51,  53, False),
)
# fmt: on

MODALIAS_MIN_LEN = max(end for _, _, end, _ in MODALIAS_FIELDS)


@dataclass(frozen=True)
class ModaliasInfo:
    vendor_id: str
    product_id: str
    subvendor_id: str
    subproduct_id: str
    class_id: str
    subclass_id: str
    prog_iface_id: str


def decode_modalias(blob: str) -> Optional[ModaliasInfo]:
    """
    Slice a PCI modalias string into its seven ID fields by fixed offset.

    Nothing beyond the length is checked: a blob with garbage in it decodes
    to garbage IDs, which then simply miss in the database. Class-family IDs
    keep the case they have in the blob (upper, as the kernel writes them).
    """
    if len(blob) < MODALIAS_MIN_LEN:
        return None
    fields = {}
    for name, start, end, lower in MODALIAS_FIELDS:
        value = blob[start:end]
        fields[name] = value.lower() if lower else value
    return ModaliasInfo(**fields)


def read_modalias(path: Path) -> Optional[ModaliasInfo]:
    try:
        blob = Path(path).read_bytes().decode("ascii", errors="replace")
    except OSError as e:
        log.debug("cannot read %s: %s", path, e)
        return None
    info = decode_modalias(blob)
    if info is None:
        log.debug("short modalias in %s: %r", path, blob)
    return info
