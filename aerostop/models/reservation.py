"""Pydantic models for priced stays and confirmed reservations."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from aerostop.models.guest import Guest
from aerostop.models.room import Room


class StayQuote(BaseModel):
    """Price breakdown for a stay in one room."""

    nights: int = Field(gt=0)
    subtotal: Decimal = Field(description="Nightly rate x nights, before tax")
    tax_amount: Decimal = Field(description="Tax on the subtotal (12% by default)")
    total: Decimal = Field(description="Subtotal plus tax")

    model_config = ConfigDict(frozen=True)


class Reservation(BaseModel):
    """A confirmed reservation, owned by the session ledger."""

    room: Room
    guest: Guest
    check_in: date
    check_out: date
    quote: StayQuote

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_dates_match_quote(self) -> "Reservation":
        if (self.check_out - self.check_in).days != self.quote.nights:
            raise ValueError("Quoted nights do not match the stay dates")
        return self

    @property
    def nights(self) -> int:
        return self.quote.nights

    @property
    def subtotal(self) -> Decimal:
        return self.quote.subtotal

    @property
    def tax_amount(self) -> Decimal:
        return self.quote.tax_amount

    @property
    def total(self) -> Decimal:
        return self.quote.total
