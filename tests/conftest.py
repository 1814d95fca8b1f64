from datetime import date
from pathlib import Path

import click
import pytest

from aerostop.models import Guest
from aerostop.services import ReceiptCounter, ReservationCalculator, RoomCatalog
from aerostop.services.runner import SessionRunner
from aerostop.storage import InventoryStore, ReservationLog

TODAY = date(2026, 10, 18)


class ScriptedConsole:
    """Console that answers prompts from a list and records everything shown."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def feed(self, *answers: str) -> None:
        self.answers.extend(answers)

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise click.Abort()
        return self.answers.pop(0)

    def echo(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def inventory_path(tmp_path) -> Path:
    return tmp_path / "Room Availability.txt"


@pytest.fixture
def reservations_path(tmp_path) -> Path:
    return tmp_path / "reservation.txt"


@pytest.fixture
def inventory_store(inventory_path):
    return InventoryStore(inventory_path)


@pytest.fixture
def reservation_log(reservations_path):
    return ReservationLog(reservations_path)


@pytest.fixture
def catalog(inventory_store):
    """Catalog loaded with the default inventory."""
    catalog = RoomCatalog(inventory_store)
    catalog.load()
    return catalog


@pytest.fixture
def calculator():
    return ReservationCalculator()


@pytest.fixture
def guest():
    return Guest(
        name="Juan Dela Cruz",
        contact_number="09171234567",
        email="juan.delacruz@example.com",
        special_request="Wheelchair accessible room",
    )


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def runner(catalog, console, calculator, reservation_log, today):
    return SessionRunner(
        catalog=catalog,
        counter=ReceiptCounter(1001),
        console=console,
        calculator=calculator,
        reservation_log=reservation_log,
        today=lambda: today,
    )
