"""Business services package."""

from aerostop.services.calculator import ReservationCalculator
from aerostop.services.catalog import RoomCatalog
from aerostop.services.ledger import ReceiptCounter, ReservationLedger

__all__ = [
    "ReservationCalculator",
    "RoomCatalog",
    "ReceiptCounter",
    "ReservationLedger",
]
