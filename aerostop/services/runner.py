"""Top-level owner of process-wide state, running one session at a time."""

from datetime import date
from typing import Callable, Optional

from structlog import get_logger

from aerostop.console import ClickConsole, Console
from aerostop.services.calculator import ReservationCalculator
from aerostop.services.catalog import RoomCatalog
from aerostop.services.ledger import ReceiptCounter, ReservationLedger
from aerostop.services.session import SessionContext, SessionController, SessionResult
from aerostop.storage import ReservationLog

logger = get_logger(__name__)


class SessionRunner:
    """Holds the catalog and receipt counter shared by every session.

    Each call to ``run_session()`` is an independent session with a fresh
    guest and ledger; the caller decides whether to run another.
    """

    def __init__(
        self,
        catalog: Optional[RoomCatalog] = None,
        counter: Optional[ReceiptCounter] = None,
        console: Optional[Console] = None,
        calculator: Optional[ReservationCalculator] = None,
        reservation_log: Optional[ReservationLog] = None,
        controller: Optional[SessionController] = None,
        today: Callable[[], date] = date.today,
    ):
        self.catalog = catalog or RoomCatalog()
        self.counter = counter or ReceiptCounter()
        self.console = console or ClickConsole()
        self.calculator = calculator or ReservationCalculator()
        self.reservation_log = reservation_log or ReservationLog()
        self.controller = controller or SessionController()
        self.today = today
        self.sessions_run = 0

    def new_ledger(self) -> ReservationLedger:
        return ReservationLedger(calculator=self.calculator, log=self.reservation_log)

    def run_session(self) -> SessionResult:
        """Run one session against the shared catalog and counter."""
        context = SessionContext(
            catalog=self.catalog,
            counter=self.counter,
            ledger=self.new_ledger(),
            console=self.console,
            today=self.today,
        )
        result = self.controller.run(context)
        self.sessions_run += 1

        if result.errors:
            logger.warning(
                "Session ended with errors",
                session=self.sessions_run,
                errors=result.errors,
            )
        return result
