"""End-of-session receipt."""

from aerostop.config import settings
from aerostop.services.session.base_state import SessionState
from aerostop.services.session.context import SessionContext, SessionStage


class ReceiptState(SessionState):
    """Print the consolidated receipt when anything was reserved."""

    stage = SessionStage.RECEIPT

    def execute(self, context: SessionContext) -> SessionStage:
        receipt_number = context.counter.current
        text = context.ledger.issue_receipt(context.counter, context.today())
        if text is None:
            return SessionStage.EXIT

        context.receipt_number = receipt_number
        context.console.echo(text)
        context.console.echo(
            f"\nThank you for choosing {settings.hotel_name}! "
            "We look forward to your stay.\n" + "-" * 49 + "\n\n"
        )
        return SessionStage.EXIT
