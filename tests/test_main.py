"""Smoke tests for the console entry point."""

import logging

import pytest
import structlog
from click.testing import CliRunner

from aerostop.main import main


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


def test_main_runs_sessions_until_input_ends(tmp_path, monkeypatch, restore_logging):
    """Test that sessions repeat until the console is closed."""
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(main, input="N\nN\n")

    # End of input aborts the third session's first prompt
    assert result.exit_code == 1
    assert result.output.count("Welcome to Aerostop Hotel Reservation System") == 3
    assert result.output.count("Exiting reservation process.") == 2

    inventory = (tmp_path / "Room Availability.txt").read_text(encoding="utf-8").splitlines()
    assert len(inventory) == 12
    assert not (tmp_path / "reservation.txt").exists()


def test_main_books_a_room(tmp_path, monkeypatch, restore_logging):
    monkeypatch.chdir(tmp_path)
    answers = [
        "Y", "12", "2099-01-01", "3",
        "Ana Reyes", "09170000000", "ana@example.com", "",
        "Y", "N",
    ]

    result = CliRunner().invoke(main, input="\n".join(answers) + "\n")

    assert "Receipt No.: 1001" in result.output
    assert "Total Amount: PHP 14,112.00" in result.output
    inventory = (tmp_path / "Room Availability.txt").read_text(encoding="utf-8").splitlines()
    assert inventory[-1] == "12,Family,false"
    assert "Guest: Ana Reyes" in (tmp_path / "reservation.txt").read_text(encoding="utf-8")
