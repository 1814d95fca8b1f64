"""Check-in date and length of stay."""

from aerostop.console import ask
from aerostop.services.session.base_state import SessionState
from aerostop.services.session.context import SessionContext, SessionStage
from aerostop.transformers.invoice_formatter import RULE
from aerostop.validators import parse_check_in_date, parse_check_out


class CollectDatesState(SessionState):
    """Ask for a check-in date (today or later) and a positive number of nights."""

    stage = SessionStage.COLLECT_DATES

    def execute(self, context: SessionContext) -> SessionStage:
        check_in = ask(
            context.console,
            f"\n{RULE}\n\nEnter check-in date (YYYY-MM-DD): ",
            lambda raw: parse_check_in_date(raw, context.today()),
        )
        check_out = ask(
            context.console,
            "Enter number of nights: ",
            lambda raw: parse_check_out(raw, check_in),
        )

        context.pending_check_in = check_in
        context.pending_check_out = check_out

        if context.guest is None:
            return SessionStage.COLLECT_GUEST
        return SessionStage.CONFIRM
