# tests/conftest.py
from __future__ import annotations
import gzip
from pathlib import Path
from typing import Optional
import pytest

from pciresolve.backends.textdb import PciDbText

MINIMAL_PCI_IDS = """\
# minimal pci.ids for tests
8086  Intel Corporation
\t1237  440FX - 82441FX PMC
\t2448  82801 Mobile PCI Bridge
beef
\tbabe  Device Without Vendor Name
1043  ASUSTeK Computer Inc.
10de  NVIDIA Corporation
\t0020  NV4 [Riva TNT]
\t\t1043 0200  V3400 TNT
\t\t1048 0c18  Erazor II SGRAM
\t\t1092 0550  Viper V550
\t1c82  GP107 [GeForce GTX 1050 Ti]
\t\t1043 8613  PH-GTX1050TI-4G
\t1db6  GV100GL [Tesla V100 PCIe 32GB]
\t1ba1  GP104M [GeForce GTX 1070 Mobile]
\t\t1458 1651  GeForce GTX 1070 Max-Q
\t\tbaad
15b3  Mellanox Technologies
C 02  Network controller
\t00  Ethernet controller
\t80  Network controller
C 03  Display controller
\t00  VGA compatible controller
\t\t00  VGA controller
\t\t01  8514 controller
\t02  3D controller
C 04
\t01
\t\t02
C 06  Bridge
\t00  Host bridge
\t04  PCI bridge
\t\t00  Normal decode
\t\t01  Subtractive decode
C 0c  Serial bus controller
\t03  USB controller
\t\t30  XHCI
"""

MODALIAS_BRIDGE = "pci:v00008086d00002448sv00000000sd00000000bc06sc04i01"
MODALIAS_GPU = "pci:v000010DEd00001C82sv00001043sd00008613bc03sc00i00"
MODALIAS_NIC = "pci:v000015B3d00001017sv000015B3sd00000001bc02sc00i00"
MODALIAS_NONAME = "pci:v0000BEEFd0000BABEsv00000000sd00000000bc02sc00i00"
MODALIAS_XHCI = "pci:v00008086d0000A36Dsv00008086sd00007270bc0Csc03i30"


@pytest.fixture
def pci_ids_text(tmp_path: Path) -> Path:
    p = tmp_path / "pci.ids"
    p.write_text(MINIMAL_PCI_IDS, encoding="utf-8")
    return p


@pytest.fixture
def pci_ids_gz(tmp_path: Path) -> Path:
    p = tmp_path / "pci.ids.gz"
    with gzip.open(p, "wt", encoding="utf-8") as f:
        f.write(MINIMAL_PCI_IDS)
    return p


@pytest.fixture
def corrupt_gz(tmp_path: Path) -> Path:
    """Valid gzip header, damaged deflate stream."""
    raw = bytearray(gzip.compress(MINIMAL_PCI_IDS.encode("utf-8")))
    for i in range(20, len(raw) - 8):
        raw[i] ^= 0xFF
    p = tmp_path / "corrupt.ids.gz"
    p.write_bytes(bytes(raw))
    return p


@pytest.fixture
def db(pci_ids_text: Path) -> PciDbText:
    return PciDbText(str(pci_ids_text))


def make_device_dir(real_root: Path, bdf: str, modalias: Optional[str]) -> Path:
    d = real_root
    # nested path fragments imitate the /sys/devices hierarchy
    for frag in bdf.split("/"):
        d = d / frag
    d.mkdir(parents=True, exist_ok=True)
    if modalias is not None:
        (d / "modalias").write_text(modalias + "\n", encoding="ascii")
    return d


@pytest.fixture
def fake_sysfs(tmp_path: Path) -> Path:
    """
    Build a fake /sys/bus/pci/devices tree using symlinks that resolve to
    nested real paths (imitating Linux' /sys symlink layout).
    """
    root = tmp_path / "devices_linkdir"
    real = tmp_path / "real"
    root.mkdir()
    real.mkdir()

    devices = {
        "0000:00:01.0": ("0000:00:01.0", MODALIAS_BRIDGE),
        "0000:65:00.0": ("0000:00:01.0/0000:65:00.0", MODALIAS_GPU),
        "0000:66:00.0": ("0000:00:01.0/0000:66:00.0", MODALIAS_NIC),
        # truncated modalias
        "0000:67:00.0": ("0000:00:01.0/0000:67:00.0", "pci:v000010DEd00001C82"),
        "0000:68:00.0": ("0000:00:01.0/0000:68:00.0", MODALIAS_NONAME),
        # no modalias at all
        "0000:69:00.0": ("0000:00:01.0/0000:69:00.0", None),
        "0000:6a:00.0": ("0000:6a:00.0", MODALIAS_XHCI),
    }
    for name, (path, alias) in devices.items():
        real_dir = make_device_dir(real, path, alias)
        (root / name).symlink_to(real_dir, target_is_directory=True)

    # Dummy to exercise non-address entries
    (root / "dummy").mkdir()

    return root


@pytest.fixture
def fake_chroot(tmp_path: Path) -> Path:
    """A chroot holding both a devices tree and a system pci.ids."""
    chroot = tmp_path / "chroot"
    devices = chroot / "sys" / "bus" / "pci" / "devices"
    devices.mkdir(parents=True)
    real = chroot / "sys" / "devices" / "pci0000:00"
    real_dir = make_device_dir(real, "0000:65:00.0", MODALIAS_GPU)
    (devices / "0000:65:00.0").symlink_to(real_dir, target_is_directory=True)

    hwdata = chroot / "usr" / "share" / "hwdata"
    hwdata.mkdir(parents=True)
    (hwdata / "pci.ids").write_text(MINIMAL_PCI_IDS, encoding="utf-8")
    return chroot
