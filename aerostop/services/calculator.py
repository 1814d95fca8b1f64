"""Stay pricing."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from aerostop.config import settings
from aerostop.exceptions import InvalidStayLength
from aerostop.models import Room, StayQuote

CENTS = Decimal("0.01")


class ReservationCalculator:
    """Prices a stay: nights, subtotal, tax and total."""

    def __init__(self, tax_rate: Optional[Decimal] = None):
        """Initialize the calculator.

        Args:
            tax_rate: Fraction of the subtotal charged as tax. Defaults to
                the configured rate (0.12).
        """
        self.tax_rate = settings.pricing.tax_rate if tax_rate is None else Decimal(tax_rate)

    def price_stay(self, room: Room, check_in: date, check_out: date) -> StayQuote:
        """Price a stay in ``room`` from ``check_in`` to ``check_out``.

        Raises:
            InvalidStayLength: If check-out is not at least one day after check-in
        """
        nights = (check_out - check_in).days
        if nights <= 0:
            raise InvalidStayLength(nights)

        subtotal = (room.nightly_rate * nights).quantize(CENTS, rounding=ROUND_HALF_UP)
        tax_amount = (subtotal * self.tax_rate).quantize(CENTS, rounding=ROUND_HALF_UP)
        return StayQuote(
            nights=nights,
            subtotal=subtotal,
            tax_amount=tax_amount,
            total=subtotal + tax_amount,
        )
