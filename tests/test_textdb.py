# tests/test_textdb.py
from __future__ import annotations
import pytest
from pciresolve.api import PciDbText


def test_textdb_known_lookups(pci_ids_text):
    db = PciDbText(str(pci_ids_text))
    assert db.get_vendor("8086").name == "Intel Corporation"
    assert "440FX" in db.get_product("8086", "1237").name

    nvidia = db.get_vendor("10de")
    assert [p.id for p in nvidia.products] == ["0020", "1c82", "1db6", "1ba1"]
    # Same objects through the vendor and the product index
    assert nvidia.products[1] is db.get_product("10de", "1c82")

    tnt = db.get_product("10de", "0020")
    assert tnt.vendor_id == "10de"
    assert [(s.vendor_id, s.id) for s in tnt.subsystems] == [
        ("1043", "0200"),
        ("1048", "0c18"),
        ("1092", "0550"),
    ]
    assert tnt.subsystems[0].name == "V3400 TNT"

    # Subsystem lines with no device id are dropped
    assert [s.id for s in db.get_product("10de", "1ba1").subsystems] == ["1651"]

    # Vendor line without a name
    assert db.get_vendor("beef").name == ""
    assert db.get_product("beef", "babe").name == "Device Without Vendor Name"

    display = db.get_class("03")
    assert display.name == "Display controller"
    vga = display.subclasses[0]
    assert (vga.id, vga.name) == ("00", "VGA compatible controller")
    assert [pi.name for pi in vga.programming_interfaces] == [
        "VGA controller",
        "8514 controller",
    ]

    bridge = db.get_class("06")
    assert [s.id for s in bridge.subclasses] == ["00", "04"]

    # Nameless class/subclass/prog-if entries still load
    unnamed = db.get_class("04")
    assert unnamed.name == ""
    assert unnamed.subclasses[0].programming_interfaces[0].id == "02"


def test_textdb_unknowns(db):
    assert db.get_vendor("1234") is None
    assert db.get_vendor("10DE") is None
    assert db.get_product("10de", "1234") is None
    assert db.get_product("1234", "1234") is None
    assert db.get_class("ff") is None
    assert db.get_class("0C") is None


def test_textdb_gzip(pci_ids_gz):
    db = PciDbText(str(pci_ids_gz))
    assert db.get_vendor("15b3").name == "Mellanox Technologies"


def test_textdb_empty(tmp_path):
    p = tmp_path / "pci.ids"
    p.write_text("# nothing here\n")
    with pytest.raises(ValueError):
        PciDbText(str(p))


def test_textdb_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        PciDbText(str(tmp_path / "nonexistent"))


def test_textdb_corrupt_gzip_body(corrupt_gz):
    with pytest.raises(ValueError):
        PciDbText(str(corrupt_gz))
