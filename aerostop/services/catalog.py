"""In-memory room catalog backed by the inventory file."""

from typing import Iterator, Optional

from structlog import get_logger

from aerostop.exceptions import FileIOError, InvalidInventoryData
from aerostop.models import Room, RoomType
from aerostop.storage import InventoryStore

logger = get_logger(__name__)

ROOMS_PER_TYPE = 3

# Default inventory order: numbering runs through the types in this order
DEFAULT_TYPE_ORDER = (
    RoomType.STANDARD,
    RoomType.CLASSIC,
    RoomType.DELUXE,
    RoomType.FAMILY,
)


class RoomCatalog:
    """Process-wide list of rooms and their availability.

    The in-memory state is authoritative; the inventory file is a
    snapshot refreshed by ``save()``.
    """

    def __init__(self, store: Optional[InventoryStore] = None):
        self.store = store or InventoryStore()
        self._rooms: list[Room] = []

    @property
    def rooms(self) -> list[Room]:
        """All rooms in catalog order."""
        return list(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def load(self) -> None:
        """Load rooms from the inventory file.

        Falls back to the default inventory when the file is missing,
        unreadable or holds invalid data.
        """
        if not self.store.exists():
            logger.info(
                "No inventory file found, loading default inventory",
                path=str(self.store.path),
            )
            self.initialize_default()
            return

        try:
            rooms = self.store.load()
        except InvalidInventoryData as e:
            logger.error(
                "Invalid inventory data, loading default inventory",
                path=str(self.store.path),
                error=str(e),
            )
            self.initialize_default()
            return
        except FileIOError as e:
            logger.error(
                "Could not read inventory file, loading default inventory",
                path=str(self.store.path),
                error=str(e),
            )
            self.initialize_default()
            return

        self._rooms = rooms
        logger.info(
            "Inventory loaded",
            room_count=len(rooms),
            available_count=sum(1 for room in rooms if room.available),
        )

    def initialize_default(self) -> None:
        """Populate 3 rooms of each type, numbered 01..12, and persist them."""
        numbers = (f"{n:02d}" for n in range(1, ROOMS_PER_TYPE * len(DEFAULT_TYPE_ORDER) + 1))
        self._rooms = [
            Room(room_number=next(numbers), room_type=room_type)
            for room_type in DEFAULT_TYPE_ORDER
            for _ in range(ROOMS_PER_TYPE)
        ]
        self.save()

    def save(self) -> bool:
        """Write current availability to the inventory file.

        Returns:
            True if written, False if the write failed (logged, non-fatal)
        """
        try:
            self.store.save(self._rooms)
        except FileIOError as e:
            logger.error(
                "Error saving inventory",
                path=str(self.store.path),
                error=str(e),
            )
            return False
        return True

    def list_available(self) -> Iterator[Room]:
        """Yield available rooms in catalog order."""
        return (room for room in self._rooms if room.available)

    def find_available_by_number(self, room_number: str) -> Optional[Room]:
        """Find an available room by number, ignoring case."""
        for room in self.list_available():
            if room.matches(room_number):
                return room
        return None

    def set_availability(self, room: Room, available: bool) -> None:
        """Flip the in-memory availability flag. Does not persist."""
        room.available = available
        logger.debug("Availability changed", room_number=room.room_number, available=available)
