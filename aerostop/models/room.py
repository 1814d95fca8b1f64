"""Pydantic models for rooms and the room-type rate table."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RoomType(str, Enum):
    """Room classes offered by the hotel.

    The value is the label written to the inventory file.
    """

    STANDARD = "Standard"
    CLASSIC = "Classic"
    DELUXE = "Deluxe"
    FAMILY = "Family"

    @property
    def nightly_rate(self) -> Decimal:
        return ROOM_TYPE_PROFILES[self].nightly_rate

    @property
    def profile(self) -> "RoomTypeProfile":
        return ROOM_TYPE_PROFILES[self]


class RoomTypeProfile(BaseModel):
    """Fixed pricing and menu description for one room type."""

    nightly_rate: Decimal
    occupancy: str = Field(description="Who the room is meant for, e.g. '1 - 2 pax'")
    amenities: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


_COMMON_AMENITIES = (
    "24 Hours Wifi",
    "Fitness Center",
    "Swimming pool",
    "Free breakfast",
)

# Rate table: the nightly rate is a pure function of the room type
ROOM_TYPE_PROFILES: dict[RoomType, RoomTypeProfile] = {
    RoomType.STANDARD: RoomTypeProfile(
        nightly_rate=Decimal("1945.00"),
        occupancy="for 1 - 2 pax with 2 single bed",
        amenities=_COMMON_AMENITIES,
    ),
    RoomType.CLASSIC: RoomTypeProfile(
        nightly_rate=Decimal("2200.00"),
        occupancy="solo or 2 with Queen bed",
        amenities=_COMMON_AMENITIES,
    ),
    RoomType.DELUXE: RoomTypeProfile(
        nightly_rate=Decimal("2980.00"),
        occupancy="Perfect for 2 - 4 pax",
        amenities=_COMMON_AMENITIES,
    ),
    RoomType.FAMILY: RoomTypeProfile(
        nightly_rate=Decimal("4200.00"),
        occupancy="Up to 6 pax",
        amenities=_COMMON_AMENITIES + ("Free Access to the gym",),
    ),
}


class Room(BaseModel):
    """A bookable room in the catalog.

    Only ``available`` changes during a session.
    """

    room_number: str = Field(min_length=1)
    room_type: RoomType
    available: bool = True

    @property
    def nightly_rate(self) -> Decimal:
        return self.room_type.nightly_rate

    def matches(self, room_number: str) -> bool:
        """Case-insensitive room number comparison."""
        return self.room_number.casefold() == room_number.strip().casefold()
