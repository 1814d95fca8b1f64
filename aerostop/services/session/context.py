"""Session context shared between session states."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field

from aerostop.console import Console
from aerostop.models import Guest, Room
from aerostop.services.catalog import RoomCatalog
from aerostop.services.ledger import ReceiptCounter, ReservationLedger


class SessionStage(str, Enum):
    """States of the reservation session."""

    WELCOME = "welcome"
    ASK_RESERVE = "ask_reserve"
    SELECT_ROOM = "select_room"
    COLLECT_DATES = "collect_dates"
    COLLECT_GUEST = "collect_guest"
    CONFIRM = "confirm"
    RECEIPT = "receipt"
    EXIT = "exit"


class SessionResult(BaseModel):
    """Outcome of one session, returned to the runner."""

    completed: bool = Field(description="False if the session ended on an unexpected error")
    reservation_count: int = 0
    receipt_number: Optional[int] = None
    grand_total: Decimal = Decimal("0.00")
    errors: list[dict[str, str]] = Field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def reserved(self) -> bool:
        return self.reservation_count > 0


class SessionContext:
    """State of one guest's pass through the reservation flow.

    The catalog and the receipt counter are process-wide and passed in;
    the guest, the ledger and the pending selection belong to this
    session only.
    """

    def __init__(
        self,
        catalog: RoomCatalog,
        counter: ReceiptCounter,
        ledger: ReservationLedger,
        console: Console,
        today: Callable[[], date] = date.today,
    ):
        """Initialize session context.

        Args:
            catalog: Process-wide room catalog
            counter: Process-wide receipt counter
            ledger: Empty ledger for this session
            console: Where prompts are read and text is written
            today: Clock used for check-in validation and file dates
        """
        self.catalog = catalog
        self.counter = counter
        self.ledger = ledger
        self.console = console
        self.today = today
        self.start_time = datetime.now()

        self.guest: Optional[Guest] = None

        # Selection being built, cleared after confirm or cancel
        self.pending_room: Optional[Room] = None
        self.pending_check_in: Optional[date] = None
        self.pending_check_out: Optional[date] = None
        self.guest_collected_for_pending = False

        # Set by the receipt state
        self.receipt_number: Optional[int] = None

        self.errors: list[dict[str, str]] = []
        self.completed = True

    def clear_pending(self, discard_new_guest: bool = False) -> None:
        """Forget the pending selection.

        Args:
            discard_new_guest: Also drop the guest if it was collected for
                this selection and no reservation has been confirmed yet
        """
        if discard_new_guest and self.guest_collected_for_pending and self.ledger.is_empty:
            self.guest = None
        self.pending_room = None
        self.pending_check_in = None
        self.pending_check_out = None
        self.guest_collected_for_pending = False

    def add_error(self, stage: str, error_message: str) -> None:
        self.errors.append({
            "stage": stage,
            "message": error_message,
            "timestamp": datetime.now().isoformat(),
        })

    def get_result(self) -> SessionResult:
        """Summarize the session for the runner."""
        duration = (datetime.now() - self.start_time).total_seconds()
        return SessionResult(
            completed=self.completed,
            reservation_count=len(self.ledger),
            receipt_number=self.receipt_number,
            grand_total=self.ledger.grand_total,
            errors=self.errors,
            duration_seconds=duration,
        )

    def log_context(self) -> dict[str, Any]:
        return {
            "reservation_count": len(self.ledger),
            "has_guest": self.guest is not None,
        }
