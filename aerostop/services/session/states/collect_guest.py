"""Guest details, collected once per session."""

from aerostop.console import ask
from aerostop.models import Guest
from aerostop.services.session.base_state import SessionState
from aerostop.services.session.context import SessionContext, SessionStage
from aerostop.validators import validate_contact_number, validate_email, validate_name


class CollectGuestState(SessionState):
    stage = SessionStage.COLLECT_GUEST

    def execute(self, context: SessionContext) -> SessionStage:
        console = context.console
        name = ask(console, "\nEnter your name: ", validate_name)
        contact_number = ask(console, "\nEnter your contact number: ", validate_contact_number)
        email = ask(console, "Enter your email: ", validate_email)
        special_request = console.prompt(
            "\nDo you have any special requests? \n(ex: Wheelchair accessible room: ) "
        )

        context.guest = Guest(
            name=name,
            contact_number=contact_number,
            email=email,
            special_request=special_request,
        )
        context.guest_collected_for_pending = True
        return SessionStage.CONFIRM
