"""Yes/no gate before any reservation work starts."""

from aerostop.console import ask
from aerostop.services.session.base_state import SessionState
from aerostop.services.session.context import SessionContext, SessionStage
from aerostop.transformers.invoice_formatter import RULE
from aerostop.validators import parse_yes_no


class AskReserveState(SessionState):
    """Ask whether the guest wants to reserve; "N" ends the session untouched."""

    stage = SessionStage.ASK_RESERVE

    def execute(self, context: SessionContext) -> SessionStage:
        if ask(context.console, f"\n{RULE}\nDo you want to reserve a room? (Y/N): ", parse_yes_no):
            return SessionStage.SELECT_ROOM

        context.console.echo("Exiting reservation process.\n")
        return SessionStage.EXIT
