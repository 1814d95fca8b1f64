"""Error taxonomy for the reservation system."""

from pathlib import Path
from typing import Optional


class AerostopError(Exception):
    """Base class for all reservation system errors."""

    pass


class InvalidInventoryData(AerostopError):
    """Raised when the inventory file holds a line that cannot become a room."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class FileIOError(AerostopError):
    """Raised when an inventory or reservation file cannot be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidStayLength(AerostopError):
    """Raised when check-out is not after check-in."""

    def __init__(self, nights: int) -> None:
        super().__init__(f"Stay must be at least one night, got {nights}")
        self.nights = nights


class ValidationError(AerostopError, ValueError):
    """Raised for user input that must be re-prompted.

    The message is shown to the guest as-is.
    """

    pass


class InvalidAnswer(ValidationError):
    def __init__(self, message: str = "Invalid input. Enter Y or N.") -> None:
        super().__init__(message)


class InvalidDate(ValidationError):
    def __init__(self, message: str = "Invalid date format. Try again.") -> None:
        super().__init__(message)


class PastDate(ValidationError):
    def __init__(self, message: str = "Check-in date cannot be in the past.") -> None:
        super().__init__(message)


class InvalidNightCount(ValidationError):
    def __init__(self, message: str = "Invalid input. Enter a valid number.") -> None:
        super().__init__(message)


class InvalidContactNumber(ValidationError):
    def __init__(self, message: str = "Invalid contact number. Must be 11 digits.") -> None:
        super().__init__(message)


class InvalidEmail(ValidationError):
    def __init__(self, message: str = "Invalid email format. Try again.") -> None:
        super().__init__(message)


class RoomUnavailable(ValidationError):
    def __init__(self, room_number: Optional[str] = None) -> None:
        super().__init__("Invalid room number or room is not available. Try again.")
        self.room_number = room_number


class InvalidName(ValidationError):
    def __init__(self, message: str = "Name cannot be empty.") -> None:
        super().__init__(message)
