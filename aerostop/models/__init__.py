"""Reservation system data models."""

from aerostop.models.guest import Guest
from aerostop.models.reservation import Reservation, StayQuote
from aerostop.models.room import ROOM_TYPE_PROFILES, Room, RoomType, RoomTypeProfile

__all__ = [
    "Guest",
    "Reservation",
    "StayQuote",
    "Room",
    "RoomType",
    "RoomTypeProfile",
    "ROOM_TYPE_PROFILES",
]
