"""Parsers for the values a guest types at the console.

Every function takes the raw text and either returns the parsed value or
raises a ``ValidationError`` subclass whose message is shown before the
prompt is repeated.
"""

import re
from datetime import date, timedelta

from aerostop.exceptions import (
    InvalidAnswer,
    InvalidContactNumber,
    InvalidDate,
    InvalidEmail,
    InvalidName,
    InvalidNightCount,
    PastDate,
)

CONTACT_NUMBER_PATTERN = re.compile(r"[0-9]{11}")
EMAIL_PATTERN = re.compile(r"^[\w.%+-]+@[\w.-]+\.[a-zA-Z]{2,6}$", re.ASCII)
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

YES_ANSWERS = {"y"}
NO_ANSWERS = {"n"}


def parse_yes_no(raw: str) -> bool:
    """Parse a Y/N answer, case-insensitively."""
    answer = raw.strip().lower()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    raise InvalidAnswer()


def parse_check_in_date(raw: str, today: date) -> date:
    """Parse a YYYY-MM-DD check-in date that is not earlier than ``today``."""
    text = raw.strip()
    if not ISO_DATE_PATTERN.fullmatch(text):
        raise InvalidDate()
    try:
        check_in = date.fromisoformat(text)
    except ValueError:
        raise InvalidDate()
    if check_in < today:
        raise PastDate()
    if check_in >= date.max:
        # No night could follow it
        raise InvalidDate("Check-in date is too far in the future. Try again.")
    return check_in


def parse_nights(raw: str) -> int:
    """Parse a strictly positive number of nights."""
    try:
        nights = int(raw.strip())
    except ValueError:
        raise InvalidNightCount()
    if nights <= 0:
        raise InvalidNightCount("Number of nights must be greater than zero.")
    return nights


def parse_check_out(raw: str, check_in: date) -> date:
    """Parse a night count and return the check-out date it gives.

    A stay that would run past the last representable date is rejected
    like any other bad night count.
    """
    nights = parse_nights(raw)
    try:
        return check_in + timedelta(days=nights)
    except OverflowError:
        raise InvalidNightCount("Stay is too long for that check-in date. Try again.")


def validate_name(raw: str) -> str:
    name = raw.strip()
    if not name:
        raise InvalidName()
    return name


def validate_contact_number(raw: str) -> str:
    """Exactly 11 ASCII digits, nothing around them."""
    if not CONTACT_NUMBER_PATTERN.fullmatch(raw):
        raise InvalidContactNumber()
    return raw


def validate_email(raw: str) -> str:
    # ASCII word characters only; surrounding spaces are rejected
    if not EMAIL_PATTERN.fullmatch(raw):
        raise InvalidEmail()
    return raw
