"""Session ledger of confirmed reservations and the receipt counter."""

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from structlog import get_logger

from aerostop.config import settings
from aerostop.exceptions import FileIOError
from aerostop.models import Guest, Reservation, Room
from aerostop.services.calculator import ReservationCalculator
from aerostop.storage import ReservationLog
from aerostop.transformers import InvoiceFormatter

logger = get_logger(__name__)


class ReceiptCounter:
    """Receipt numbers shared by every session of the process."""

    def __init__(self, start: Optional[int] = None):
        self.current = settings.pricing.receipt_start if start is None else start

    def advance(self) -> int:
        """Move to the next receipt number and return it."""
        self.current += 1
        return self.current


class ReservationLedger:
    """Ordered reservations confirmed during one session."""

    def __init__(
        self,
        calculator: Optional[ReservationCalculator] = None,
        log: Optional[ReservationLog] = None,
    ):
        self.calculator = calculator or ReservationCalculator()
        self.log = log or ReservationLog()
        self._reservations: list[Reservation] = []

    @property
    def reservations(self) -> tuple[Reservation, ...]:
        return tuple(self._reservations)

    @property
    def is_empty(self) -> bool:
        return not self._reservations

    def __len__(self) -> int:
        return len(self._reservations)

    @property
    def grand_total(self) -> Decimal:
        return sum((r.total for r in self._reservations), Decimal("0.00"))

    def record(self, room: Room, check_in: date, check_out: date, guest: Guest) -> Reservation:
        """Price and append a reservation.

        The caller is responsible for having taken the room out of
        availability; no double-booking check happens here.

        Raises:
            InvalidStayLength: If the dates do not span at least one night
        """
        quote = self.calculator.price_stay(room, check_in, check_out)
        reservation = Reservation(
            room=room,
            guest=guest,
            check_in=check_in,
            check_out=check_out,
            quote=quote,
        )
        self._reservations.append(reservation)

        logger.info(
            "Reservation recorded",
            room_number=room.room_number,
            nights=quote.nights,
            total=str(quote.total),
        )
        return reservation

    def append_to_file(
        self,
        reservation: Reservation,
        guest: Guest,
        receipt_number: int,
        today: Optional[date] = None,
    ) -> bool:
        """Append the reservation block to the reservations file.

        Returns:
            True if written, False if the write failed (logged, non-fatal)
        """
        block = InvoiceFormatter.reservation_record(
            reservation, guest, receipt_number, today or date.today()
        )
        try:
            self.log.append(block)
        except FileIOError as e:
            logger.error(
                "Error saving reservation",
                room_number=reservation.room.room_number,
                receipt_number=receipt_number,
                error=str(e),
            )
            return False
        return True

    @staticmethod
    def summary_of(reservation: Reservation) -> str:
        """Invoice text for one reservation."""
        return InvoiceFormatter.invoice(reservation)

    @staticmethod
    def receipt_of(
        reservations: Sequence[Reservation],
        receipt_number: int,
        today: Optional[date] = None,
    ) -> str:
        """Consolidated receipt text for a session's reservations."""
        return InvoiceFormatter.receipt(reservations, receipt_number, today or date.today())

    def issue_receipt(self, counter: ReceiptCounter, today: Optional[date] = None) -> Optional[str]:
        """Render the session receipt and advance the counter.

        Returns:
            Receipt text, or None (counter untouched) when nothing was reserved
        """
        if self.is_empty:
            return None

        receipt_number = counter.current
        text = self.receipt_of(self._reservations, receipt_number, today)
        counter.advance()

        logger.info(
            "Receipt issued",
            receipt_number=receipt_number,
            reservation_count=len(self._reservations),
            grand_total=str(self.grand_total),
        )
        return text
