"""Append-only reservation record file."""

from pathlib import Path
from typing import Optional

from structlog import get_logger

from aerostop.config import settings
from aerostop.exceptions import FileIOError

logger = get_logger(__name__)


class ReservationLog:
    """Appends human-readable reservation blocks to the reservations file.

    The file is opened in append mode for each write and never re-parsed.
    """

    def __init__(self, path: Optional[Path] = None, encoding: Optional[str] = None):
        self.path = Path(path or settings.storage.reservations_file)
        self.encoding = encoding or settings.storage.encoding

    def append(self, block: str) -> None:
        """Append one formatted block.

        Raises:
            FileIOError: If the file cannot be opened or written
        """
        if not block.endswith("\n"):
            block += "\n"
        try:
            with open(self.path, "a", encoding=self.encoding) as f:
                f.write(block)
        except OSError as e:
            raise FileIOError(self.path, str(e)) from e

        logger.debug("Reservation block appended", path=str(self.path))
