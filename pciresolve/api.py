from __future__ import annotations
from typing import Optional
from .backends.textdb import PciDbText
from .types import PciDb


def open_db(path: Optional[str] = None, chroot: Optional[str] = None) -> PciDb:
    from .backends.discovery import discover_db

    return discover_db(path, chroot=chroot)


__all__ = ["PciDb", "PciDbText", "open_db"]
