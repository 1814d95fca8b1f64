"""Tests for the room catalog and its inventory file."""

import pytest

from aerostop.exceptions import FileIOError, InvalidInventoryData
from aerostop.models import Room, RoomType
from aerostop.services import RoomCatalog
from aerostop.storage import InventoryStore


def triples(rooms):
    return [(room.room_number, room.room_type, room.available) for room in rooms]


class TestDefaultInventory:
    """Tests for loading without an inventory file."""

    def test_missing_file_yields_twelve_default_rooms(self, catalog):
        """Test that 3 rooms of each type are numbered 01..12."""
        rooms = catalog.rooms

        assert len(catalog) == 12
        assert [room.room_number for room in rooms] == [f"{n:02d}" for n in range(1, 13)]
        assert [room.room_type for room in rooms] == (
            [RoomType.STANDARD] * 3
            + [RoomType.CLASSIC] * 3
            + [RoomType.DELUXE] * 3
            + [RoomType.FAMILY] * 3
        )
        assert all(room.available for room in rooms)

    def test_default_inventory_is_persisted(self, catalog, inventory_path):
        """Test that the default inventory is written immediately."""
        lines = inventory_path.read_text(encoding="utf-8").splitlines()

        assert len(lines) == 12
        assert lines[0] == "01,Standard,true"
        assert lines[3] == "04,Classic,true"
        assert lines[11] == "12,Family,true"

    def test_unknown_room_type_falls_back_to_default(self, inventory_path):
        """Test that an unknown type discards the file in favour of the default inventory."""
        inventory_path.write_text("01,Penthouse,true\n02,Standard,false\n", encoding="utf-8")

        catalog = RoomCatalog(InventoryStore(inventory_path))
        catalog.load()

        assert len(catalog) == 12
        assert inventory_path.read_text(encoding="utf-8").splitlines()[0] == "01,Standard,true"

    def test_unwritable_inventory_keeps_rooms_in_memory(self, tmp_path):
        """Test that a failed save is non-fatal."""
        directory = tmp_path / "inventory-dir"
        directory.mkdir()

        catalog = RoomCatalog(InventoryStore(directory))
        catalog.load()

        assert len(catalog) == 12
        assert catalog.save() is False


class TestInventoryRoundTrip:
    """Tests for save/load fidelity."""

    def test_save_then_load_reproduces_rooms(self, catalog, inventory_store):
        """Test that availability survives a save and reload."""
        catalog.set_availability(catalog.find_available_by_number("03"), False)
        catalog.set_availability(catalog.find_available_by_number("11"), False)
        assert catalog.save() is True

        reloaded = RoomCatalog(inventory_store)
        reloaded.load()

        assert triples(reloaded.rooms) == triples(catalog.rooms)
        assert [r.room_number for r in reloaded.rooms if not r.available] == ["03", "11"]

    def test_load_keeps_file_order_and_custom_numbers(self, inventory_path):
        """Test loading a hand-written inventory file."""
        inventory_path.write_text(
            "B2,Deluxe,false\nA1,Family,TRUE\n\n", encoding="utf-8"
        )

        catalog = RoomCatalog(InventoryStore(inventory_path))
        catalog.load()

        assert triples(catalog.rooms) == [
            ("B2", RoomType.DELUXE, False),
            ("A1", RoomType.FAMILY, True),
        ]


class TestInventoryStore:
    """Tests for inventory line parsing."""

    def test_serialize_room(self):
        room = Room(room_number="07", room_type=RoomType.DELUXE, available=False)
        assert InventoryStore.serialize_room(room) == "07,Deluxe,false"

    @pytest.mark.parametrize(
        "line",
        ["01,Suite,true", "01,Standard", "01,Standard,yes", ",Standard,true", "01,Standard,true,extra"],
    )
    def test_parse_line_rejects_bad_lines(self, line):
        with pytest.raises(InvalidInventoryData):
            InventoryStore.parse_line(line, 1)

    def test_duplicate_room_numbers_rejected(self, inventory_path):
        inventory_path.write_text("01,Standard,true\n01,Classic,true\n", encoding="utf-8")

        with pytest.raises(InvalidInventoryData, match="Line 2"):
            InventoryStore(inventory_path).load()

    def test_read_failure_raises_file_io_error(self, tmp_path):
        with pytest.raises(FileIOError):
            InventoryStore(tmp_path / "missing.txt").load()


class TestAvailability:
    """Tests for availability queries."""

    def test_booked_room_leaves_available_listing(self, catalog):
        """Test that an unavailable room is excluded from listing and lookup."""
        room = catalog.find_available_by_number("05")
        catalog.set_availability(room, False)

        assert "05" not in [r.room_number for r in catalog.list_available()]
        assert catalog.find_available_by_number("05") is None

        catalog.set_availability(room, True)
        assert catalog.find_available_by_number("05") is room

    def test_list_available_is_restartable(self, catalog):
        """Test that each call yields a fresh sequence."""
        first = list(catalog.list_available())
        second = list(catalog.list_available())

        assert len(first) == len(second) == 12

    def test_find_is_case_insensitive(self, inventory_path):
        inventory_path.write_text("a1,Standard,true\n", encoding="utf-8")
        catalog = RoomCatalog(InventoryStore(inventory_path))
        catalog.load()

        assert catalog.find_available_by_number("A1").room_number == "a1"

    def test_unknown_number_returns_none(self, catalog):
        assert catalog.find_available_by_number("99") is None

    def test_set_availability_does_not_persist(self, catalog, inventory_path):
        """Test that toggling availability leaves the file alone until save()."""
        before = inventory_path.read_text(encoding="utf-8")
        catalog.set_availability(catalog.find_available_by_number("01"), False)

        assert inventory_path.read_text(encoding="utf-8") == before
