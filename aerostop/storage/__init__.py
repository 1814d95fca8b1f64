"""Flat-file storage package."""

from aerostop.storage.inventory_store import InventoryStore
from aerostop.storage.reservation_log import ReservationLog

__all__ = [
    "InventoryStore",
    "ReservationLog",
]
