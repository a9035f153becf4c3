# pciresolve/address.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import re

# DDDD:BB:SS.F, domain optional
_ADDRESS_RE = re.compile(
    r"^(?:(?P<domain>[0-9a-f]{4}):)?"
    r"(?P<bus>[0-9a-f]{2}):(?P<slot>[0-9a-f]{2})\.(?P<function>[0-9a-f])$"
)


@dataclass(frozen=True, slots=True)
class PciAddress:
    domain: str
    bus: str
    slot: str
    function: str

    def __str__(self) -> str:
        return f"{self.domain}:{self.bus}:{self.slot}.{self.function}"


def parse_address(address: str) -> Optional[PciAddress]:
    """
    Split "DDDD:BB:SS.F" (or "BB:SS.F", domain 0000) into its components.
    Hex digits are accepted in either case and stored lowercase.
    Returns None if the string does not have that shape.
    """
    m = _ADDRESS_RE.match(address.strip().lower())
    if m is None:
        return None
    return PciAddress(
        domain=m.group("domain") or "0000",
        bus=m.group("bus"),
        slot=m.group("slot"),
        function=m.group("function"),
    )
