"""Welcome banner and room-type menu."""

from aerostop.services.session.base_state import SessionState
from aerostop.services.session.context import SessionContext, SessionStage
from aerostop.transformers import InvoiceFormatter


class WelcomeState(SessionState):
    stage = SessionStage.WELCOME

    def execute(self, context: SessionContext) -> SessionStage:
        context.console.echo(InvoiceFormatter.welcome_menu())
        return SessionStage.ASK_RESERVE
