"""Flat-file persistence for the room inventory."""

from pathlib import Path
from typing import Iterable, Optional

from structlog import get_logger

from aerostop.config import settings
from aerostop.exceptions import FileIOError, InvalidInventoryData
from aerostop.models import Room, RoomType

logger = get_logger(__name__)

FIELD_SEPARATOR = ","
BOOLEAN_VALUES = {"true": True, "false": False}


class InventoryStore:
    """Reads and overwrites the inventory file.

    One room per line: ``<roomNumber>,<type>,<true|false>``, where type is
    the room type label without the "Room" suffix (e.g. ``01,Standard,true``).
    """

    def __init__(self, path: Optional[Path] = None, encoding: Optional[str] = None):
        """Initialize the store.

        Args:
            path: Inventory file path. Defaults to the configured one.
            encoding: Text encoding. Defaults to the configured one.
        """
        self.path = Path(path or settings.storage.inventory_file)
        self.encoding = encoding or settings.storage.encoding

    def exists(self) -> bool:
        return self.path.is_file()

    @staticmethod
    def serialize_room(room: Room) -> str:
        """Render one room as an inventory line (without newline)."""
        return FIELD_SEPARATOR.join(
            [room.room_number, room.room_type.value, str(room.available).lower()]
        )

    @staticmethod
    def parse_line(line: str, line_number: Optional[int] = None) -> Room:
        """Parse one inventory line into a Room.

        Args:
            line: Raw line without trailing newline
            line_number: 1-based position, used in error messages

        Returns:
            Parsed room

        Raises:
            InvalidInventoryData: If the line is malformed or names an unknown type
        """
        fields = [field.strip() for field in line.split(FIELD_SEPARATOR)]
        if len(fields) != 3:
            raise InvalidInventoryData(
                f"Expected 3 fields, got {len(fields)}: {line!r}", line_number
            )

        room_number, type_label, available_label = fields
        if not room_number:
            raise InvalidInventoryData("Missing room number", line_number)

        try:
            room_type = RoomType(type_label)
        except ValueError:
            raise InvalidInventoryData(f"Unknown room type: {type_label}", line_number)

        available = BOOLEAN_VALUES.get(available_label.lower())
        if available is None:
            raise InvalidInventoryData(
                f"Invalid availability flag: {available_label}", line_number
            )

        return Room(room_number=room_number, room_type=room_type, available=available)

    def load(self) -> list[Room]:
        """Read every room from the inventory file, in file order.

        Returns:
            Rooms as stored

        Raises:
            FileIOError: If the file cannot be read
            InvalidInventoryData: If any line cannot become a room, or a
                room number appears twice
        """
        try:
            text = self.path.read_text(encoding=self.encoding)
        except OSError as e:
            raise FileIOError(self.path, str(e)) from e

        rooms: list[Room] = []
        seen: set[str] = set()
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            room = self.parse_line(line, line_number)
            key = room.room_number.casefold()
            if key in seen:
                raise InvalidInventoryData(
                    f"Duplicate room number: {room.room_number}", line_number
                )
            seen.add(key)
            rooms.append(room)

        logger.debug("Inventory file read", path=str(self.path), room_count=len(rooms))
        return rooms

    def save(self, rooms: Iterable[Room]) -> None:
        """Overwrite the inventory file with the given rooms.

        Raises:
            FileIOError: If the file cannot be written
        """
        lines = [self.serialize_room(room) + "\n" for room in rooms]
        try:
            with open(self.path, "w", encoding=self.encoding) as f:
                f.writelines(lines)
        except OSError as e:
            raise FileIOError(self.path, str(e)) from e

        logger.debug("Inventory file written", path=str(self.path), room_count=len(lines))
