"""State machine driving one reservation session."""

from typing import Optional

import click
from structlog import get_logger

from .base_state import SessionState
from .context import SessionContext, SessionResult, SessionStage
from .states import (
    AskReserveState,
    CollectDatesState,
    CollectGuestState,
    ConfirmState,
    ReceiptState,
    SelectRoomState,
    WelcomeState,
)

logger = get_logger(__name__)


def default_states() -> list[SessionState]:
    return [
        WelcomeState(),
        AskReserveState(),
        SelectRoomState(),
        CollectDatesState(),
        CollectGuestState(),
        ConfirmState(),
        ReceiptState(),
    ]


class SessionController:
    """Runs session states from WELCOME until EXIT.

    The controller:
    1. Starts at WELCOME
    2. Runs the state registered for the current stage
    3. Moves to the stage that state returns
    4. Ends the session on an unexpected error
    5. Returns a SessionResult
    """

    def __init__(self, states: Optional[list[SessionState]] = None):
        """Initialize the controller.

        Args:
            states: State handlers, one per stage other than EXIT
        """
        self.states = {state.stage: state for state in (states or default_states())}
        missing = [
            stage.value
            for stage in SessionStage
            if stage is not SessionStage.EXIT and stage not in self.states
        ]
        if missing:
            raise ValueError(f"No state registered for: {', '.join(missing)}")

    def run(self, context: SessionContext) -> SessionResult:
        """Run one session to completion.

        Console aborts (end of input, Ctrl-C) propagate; any other
        exception is logged and ends the session, after issuing the
        receipt for whatever was already confirmed.

        Args:
            context: Fresh session context

        Returns:
            Session outcome
        """
        stage = SessionStage.WELCOME
        transitions = 0

        while stage is not SessionStage.EXIT:
            state = self.states[stage]
            try:
                stage = state.run(context)
            except click.Abort:
                raise
            except Exception as e:
                logger.error(
                    "Session state raised unexpected exception",
                    state=state.get_name(),
                    error=str(e),
                    exc_info=True,
                )
                context.add_error(state.get_name(), f"Unexpected exception: {str(e)}")
                context.completed = False
                if stage is not SessionStage.RECEIPT:
                    self._close_with_receipt(context)
                break
            transitions += 1

        result = context.get_result()
        logger.info(
            "Session finished",
            completed=result.completed,
            reservation_count=result.reservation_count,
            receipt_number=result.receipt_number,
            transitions=transitions,
        )
        return result

    def _close_with_receipt(self, context: SessionContext) -> None:
        """Issue the receipt for confirmed reservations after a failed state."""
        if context.ledger.is_empty:
            return

        state = self.states[SessionStage.RECEIPT]
        try:
            state.run(context)
        except click.Abort:
            raise
        except Exception as e:
            logger.error(
                "Receipt could not be issued after failure",
                state=state.get_name(),
                error=str(e),
                exc_info=True,
            )
            context.add_error(state.get_name(), f"Unexpected exception: {str(e)}")
