"""
Database backends.

Only `discover_db` and the text reader are considered part of the
importable surface here.
"""

from __future__ import annotations

from .discovery import discover_db
from .textdb import PciDbText

__all__ = ["discover_db", "PciDbText"]
