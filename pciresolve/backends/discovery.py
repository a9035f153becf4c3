from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Sequence
from ..paths import LinuxPaths
from ..types import PciDb
from .textdb import PciDbText

log = logging.getLogger(__name__)

PCI_IDS_ENV = "PCIRESOLVE_PCI_IDS"
NO_SYSTEM_ENV = "PCIRESOLVE_NO_SYSTEM"


@dataclass(frozen=True)
class Candidate:
    """Represents a potential DB source in the discovery order."""

    kind: str  # "path", "env", "system"
    ref: str  # path for debugging
    opener: Callable[[], PciDb]  # returns an opened DB instance, or raises


def _open_text(p: str) -> Callable[[], PciDb]:
    def opener() -> PciDb:
        if not Path(p).is_file():
            raise FileNotFoundError(p)
        return PciDbText(p)

    return opener


def _resolve_candidates(
    *,
    explicit_path: Optional[str],
    env_text: Optional[str],
    system_paths: Sequence[Path],
    allow_system: bool,
) -> List[Candidate]:
    """
    Build an ordered list of candidates. Pure function -> easy to unit test.
    An explicit path is the only candidate when given.
    """
    if explicit_path:
        p = str(explicit_path)
        return [Candidate("path", p, _open_text(p))]

    cands: List[Candidate] = []
    if env_text:
        cands.append(Candidate("env", env_text, _open_text(env_text)))

    if allow_system:
        for sp in system_paths:
            cands.append(Candidate("system", str(sp), _open_text(str(sp))))

    return cands


# -------- public entry --------


def discover_db(path: Optional[str] = None, chroot: Optional[str] = None) -> PciDb:
    paths = LinuxPaths.from_env(chroot)
    cands = _resolve_candidates(
        explicit_path=path,
        env_text=os.getenv(PCI_IDS_ENV),
        system_paths=paths.pci_ids_candidates,
        allow_system=os.getenv(NO_SYSTEM_ENV) != "1",
    )

    last_err: Optional[Exception] = None
    for c in cands:
        try:
            db = c.opener()
        except Exception as e:
            log.debug("skipping %s candidate %s: %s", c.kind, c.ref, e)
            last_err = e
            continue
        log.debug("using %s database %s", c.kind, c.ref)
        return db

    raise FileNotFoundError(
        "No PCI ID database found. "
        f"Set {PCI_IDS_ENV}, pass an explicit path, or install hwdata/pciutils."
    ) from last_err
