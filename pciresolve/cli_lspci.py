#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional
import pciresolve
from pciresolve.export import dumps_devices
from pciresolve.log_config import setup_logging

log = logging.getLogger(__name__)


@dataclass
class ProgramArgs:
    db_path: Optional[str]
    sysfs_path: Optional[str]
    chroot: Optional[str] = None
    json: bool = False


def format_line(dev: pciresolve.PciDevice) -> str:
    cls_id = f"{dev.klass.id}{dev.subclass.id}".lower()
    cname = dev.subclass.name
    if cname in ("", pciresolve.UNKNOWN):
        cname = dev.klass.name
    if cname in ("", pciresolve.UNKNOWN):
        cname = f"Class {cls_id}"

    ven, prod = dev.vendor, dev.product
    known_v = ven.name not in ("", pciresolve.UNKNOWN)
    known_p = prod.name not in ("", pciresolve.UNKNOWN)
    if known_v and known_p:
        rdesc = f"{ven.name} {prod.name}"
    elif known_v:
        rdesc = f"{ven.name} Device {prod.id}"
    elif known_p:
        rdesc = f"Vendor {ven.id} {prod.name}"
    else:
        rdesc = f"Device [{ven.id}:{prod.id}]"

    return f"{dev.address} {cname} [{cls_id}]: {rdesc} [{ven.id}:{prod.id}]"


def run(args: ProgramArgs) -> int:
    try:
        db = pciresolve.open_db(args.db_path, chroot=args.chroot)
    except (FileNotFoundError, ValueError) as e:
        log.error("%s", e)
        return 1

    sysfs = pciresolve.SysfsEnumerator(db, args.sysfs_path, chroot=args.chroot)
    devices = sorted(sysfs.list_devices(), key=lambda d: str(d.address))

    if args.json:
        print(dumps_devices(devices, indent=2))
        return 0

    for dev in devices:
        print(format_line(dev))
    return 0


def main() -> None:  # pragma: no cover
    ap = argparse.ArgumentParser(
        description="lspci-style listing via sysfs modalias + pci.ids"
    )
    ap.add_argument("--db", dest="db_path", default=None, help="path to pci.ids[.gz]")
    ap.add_argument(
        "--sysfs",
        dest="sysfs_path",
        default=None,
        help="path to /sys/bus/pci/devices",
    )
    ap.add_argument(
        "--chroot", default=None, help="root of a captured /sys and /usr/share tree"
    )
    ap.add_argument("--json", action="store_true", help="emit JSON")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    ns = vars(ap.parse_args())
    verbose = ns.pop("verbose")
    level = logging.WARNING
    if verbose > 1:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    setup_logging(level)
    sys.exit(run(ProgramArgs(**ns)))


if __name__ == "__main__":  # pragma: no cover
    main()
