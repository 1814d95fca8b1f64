"""Text rendering for menus, invoices, receipts and reservation records."""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from aerostop.config import settings
from aerostop.models import ROOM_TYPE_PROFILES, Guest, Reservation, Room, RoomType

RULE = "-" * 57
DOUBLE_RULE = "=" * 57
DOTTED_RULE = "- " * 28 + "-"
RECORD_SEPARATOR = "-" * 40


def _currency(currency: Optional[str]) -> str:
    return currency or settings.pricing.currency


class InvoiceFormatter:
    """Renders reservation data as console and file text.

    All methods are pure: they take values and return strings.
    """

    @staticmethod
    def money(amount: Decimal, currency: Optional[str] = None) -> str:
        """Format an amount as e.g. ``PHP 4,356.80``."""
        return f"{_currency(currency)} {amount:,.2f}"

    @staticmethod
    def room_type_label(room_type: RoomType) -> str:
        return f"{room_type.value} Room"

    @staticmethod
    def room_details(room: Room, currency: Optional[str] = None) -> str:
        """Room type, number and nightly rate, one per line."""
        return "\n".join(
            [
                f"Room Type: {InvoiceFormatter.room_type_label(room.room_type)}",
                f"Room No: {room.room_number}",
                f"Room Rate: {InvoiceFormatter.money(room.nightly_rate, currency)}",
            ]
        )

    @staticmethod
    def welcome_menu(hotel_name: Optional[str] = None, currency: Optional[str] = None) -> str:
        """Banner plus the room-type menu with rates and amenities."""
        hotel_name = hotel_name or settings.hotel_name
        lines = [f"\t\t\t- Welcome to {hotel_name} Reservation System -", "", "Room Types and Rates:"]
        for index, (room_type, profile) in enumerate(ROOM_TYPE_PROFILES.items(), start=1):
            lines.append(
                f"[{index}] {room_type.value.upper()}: "
                f"{InvoiceFormatter.money(profile.nightly_rate, currency)} per night"
            )
            lines.append(f" - {profile.occupancy}")
            lines.extend(f" - {amenity}" for amenity in profile.amenities)
            lines.append("")
        return "\n".join(lines).rstrip("\n")

    @staticmethod
    def available_rooms(rooms: Iterable[Room], currency: Optional[str] = None) -> str:
        """Listing of the given rooms under an 'Available Rooms' heading."""
        blocks = [InvoiceFormatter.room_details(room, currency) for room in rooms]
        heading = f"{RULE}\n\n\t\t   Available Rooms:\n{RULE}"
        if not blocks:
            return f"{heading}\nNo rooms are available at the moment."
        return heading + "\n" + "\n\n".join(blocks)

    @staticmethod
    def _special_request(guest: Guest) -> str:
        return guest.special_request or "None"

    @staticmethod
    def tax_label(tax_rate: Optional[Decimal] = None) -> str:
        """E.g. ``Tax (12%)`` for a 0.12 rate."""
        rate = settings.pricing.tax_rate if tax_rate is None else tax_rate
        return f"Tax ({(rate * 100).normalize():f}%)"

    @staticmethod
    def _charges(reservation: Reservation, currency: Optional[str]) -> list[str]:
        return [
            f"Nights stayed: {reservation.nights}",
            f"Subtotal: {InvoiceFormatter.money(reservation.subtotal, currency)}",
            f"{InvoiceFormatter.tax_label()}: {InvoiceFormatter.money(reservation.tax_amount, currency)}",
            f"Total Amount: {InvoiceFormatter.money(reservation.total, currency)}",
        ]

    @staticmethod
    def invoice(reservation: Reservation, currency: Optional[str] = None) -> str:
        """Invoice shown right after a reservation is confirmed."""
        guest = reservation.guest
        lines = [
            DOUBLE_RULE,
            "                         Invoice ",
            DOUBLE_RULE,
            f"Guest: {guest.name}",
            "",
            "Room Details",
            InvoiceFormatter.room_details(reservation.room, currency),
            "",
            f"Check-in Date: {reservation.check_in.isoformat()}",
            f"Check-out Date: {reservation.check_out.isoformat()}",
            f"Special Request: {InvoiceFormatter._special_request(guest)}",
        ]
        lines.extend(InvoiceFormatter._charges(reservation, currency))
        return "\n".join(lines)

    @staticmethod
    def receipt(
        reservations: Sequence[Reservation],
        receipt_number: int,
        issued_on: date,
        hotel_name: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> str:
        """Consolidated end-of-session receipt itemizing every reservation.

        Raises:
            ValueError: If there are no reservations to itemize
        """
        if not reservations:
            raise ValueError("A receipt needs at least one reservation")

        hotel_name = hotel_name or settings.hotel_name
        guest = reservations[0].guest
        lines = [
            f"                ---- {hotel_name} ----",
            DOUBLE_RULE,
            "                    Official Receipt",
            DOUBLE_RULE,
            f"Receipt No.: {receipt_number}",
            f"Reservation Date: {issued_on.isoformat()}",
            f"Guest Name: {guest.name}",
        ]
        for reservation in reservations:
            lines.extend(
                [
                    "Room Details: ",
                    DOTTED_RULE,
                    InvoiceFormatter.room_details(reservation.room, currency),
                    f"Check-in Date: {reservation.check_in.isoformat()}",
                    f"Check-out Date: {reservation.check_out.isoformat()}",
                    f"Special Request: {InvoiceFormatter._special_request(guest)}",
                ]
            )
            lines.extend(InvoiceFormatter._charges(reservation, currency))
            lines.append(DOTTED_RULE)
            lines.append(
                f"Amount Paid: {InvoiceFormatter.money(reservation.total, currency)}"
            )

        grand_total = sum((r.total for r in reservations), Decimal("0.00"))
        lines.append(DOUBLE_RULE)
        lines.append(f"Grand Total: {InvoiceFormatter.money(grand_total, currency)}")
        return "\n".join(lines)

    @staticmethod
    def reservation_record(
        reservation: Reservation,
        guest: Guest,
        receipt_number: int,
        recorded_on: date,
        currency: Optional[str] = None,
    ) -> str:
        """Block appended to the reservations file for one reservation."""
        lines = [
            f"Receipt No.: {receipt_number}",
            f"Date: {recorded_on.isoformat()}",
            f"Guest: {guest.name}",
            f"Contact: {guest.contact_number}",
            f"Email: {guest.email}",
            f"Special Request: {InvoiceFormatter._special_request(guest)}",
            "Room: ",
            InvoiceFormatter.room_details(reservation.room, currency),
            f"Check-in: {reservation.check_in.isoformat()}",
            f"Check-out: {reservation.check_out.isoformat()}",
        ]
        lines.extend(InvoiceFormatter._charges(reservation, currency))
        lines.append(RECORD_SEPARATOR)
        return "\n".join(lines) + "\n"
