"""Tests for the reservation ledger and receipt counter."""

from datetime import date
from decimal import Decimal

import pytest

from aerostop.exceptions import InvalidStayLength
from aerostop.services import ReceiptCounter, ReservationLedger
from aerostop.storage import ReservationLog


@pytest.fixture
def ledger(calculator, reservation_log):
    return ReservationLedger(calculator=calculator, log=reservation_log)


class TestRecord:
    """Tests for ReservationLedger.record."""

    def test_record_appends_in_order(self, ledger, catalog, guest):
        first = ledger.record(
            catalog.find_available_by_number("01"), date(2026, 10, 20), date(2026, 10, 22), guest
        )
        second = ledger.record(
            catalog.find_available_by_number("10"), date(2026, 11, 1), date(2026, 11, 2), guest
        )

        assert ledger.reservations == (first, second)
        assert first.total == Decimal("4356.80")
        assert second.total == Decimal("4704.00")
        assert ledger.grand_total == Decimal("9060.80")

    def test_record_rejects_zero_night_stay(self, ledger, catalog, guest):
        with pytest.raises(InvalidStayLength):
            ledger.record(
                catalog.find_available_by_number("01"), date(2026, 10, 20), date(2026, 10, 20), guest
            )
        assert ledger.is_empty


class TestAppendToFile:
    """Tests for the reservations file."""

    def test_block_contains_reservation_fields(self, ledger, catalog, guest, reservations_path, today):
        reservation = ledger.record(
            catalog.find_available_by_number("01"), date(2026, 10, 20), date(2026, 10, 22), guest
        )

        assert ledger.append_to_file(reservation, guest, 1001, today) is True

        text = reservations_path.read_text(encoding="utf-8")
        for expected in (
            "Receipt No.: 1001",
            "Date: 2026-10-18",
            "Guest: Juan Dela Cruz",
            "Contact: 09171234567",
            "Email: juan.delacruz@example.com",
            "Special Request: Wheelchair accessible room",
            "Room No: 01",
            "Check-in: 2026-10-20",
            "Check-out: 2026-10-22",
            "Nights stayed: 2",
            "Subtotal: PHP 3,890.00",
            "Tax (12%): PHP 466.80",
            "Total Amount: PHP 4,356.80",
            "-" * 40,
        ):
            assert expected in text

    def test_blocks_are_appended(self, ledger, catalog, guest, reservations_path, today):
        reservation = ledger.record(
            catalog.find_available_by_number("02"), date(2026, 10, 20), date(2026, 10, 21), guest
        )
        ledger.append_to_file(reservation, guest, 1001, today)
        ledger.append_to_file(reservation, guest, 1002, today)

        text = reservations_path.read_text(encoding="utf-8")
        assert text.count("Receipt No.:") == 2
        assert text.index("Receipt No.: 1001") < text.index("Receipt No.: 1002")

    def test_write_failure_is_not_fatal(self, calculator, catalog, guest, tmp_path, today):
        ledger = ReservationLedger(calculator=calculator, log=ReservationLog(tmp_path))
        reservation = ledger.record(
            catalog.find_available_by_number("01"), date(2026, 10, 20), date(2026, 10, 21), guest
        )

        assert ledger.append_to_file(reservation, guest, 1001, today) is False
        assert len(ledger) == 1


class TestReceipt:
    """Tests for receipt issuing."""

    def test_empty_ledger_issues_nothing(self, ledger, today):
        counter = ReceiptCounter(1001)

        assert ledger.issue_receipt(counter, today) is None
        assert counter.current == 1001

    def test_receipt_itemizes_all_reservations_under_one_number(self, ledger, catalog, guest, today):
        ledger.record(catalog.find_available_by_number("01"), date(2026, 10, 20), date(2026, 10, 22), guest)
        ledger.record(catalog.find_available_by_number("07"), date(2026, 10, 20), date(2026, 10, 21), guest)
        counter = ReceiptCounter(1001)

        text = ledger.issue_receipt(counter, today)

        assert text.count("Receipt No.:") == 1
        assert "Receipt No.: 1001" in text
        assert "Room No: 01" in text
        assert "Room No: 07" in text
        assert text.count("Amount Paid:") == 2
        assert "Grand Total: PHP 7,694.40" in text
        assert counter.current == 1002

    def test_summary_of(self, ledger, catalog, guest):
        reservation = ledger.record(
            catalog.find_available_by_number("04"), date(2026, 10, 20), date(2026, 10, 23), guest
        )

        summary = ledger.summary_of(reservation)

        assert "Invoice" in summary
        assert "Room Type: Classic Room" in summary
        assert "Subtotal: PHP 6,600.00" in summary
        assert "Tax (12%): PHP 792.00" in summary
        assert "Total Amount: PHP 7,392.00" in summary


def test_receipt_counter_defaults_to_configured_start():
    assert ReceiptCounter().current == 1001
