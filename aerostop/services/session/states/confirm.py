"""Confirmation of the pending selection."""

from aerostop.console import ask
from aerostop.services.session.base_state import SessionState
from aerostop.services.session.context import SessionContext, SessionStage
from aerostop.transformers.invoice_formatter import RULE
from aerostop.validators import parse_yes_no


class ConfirmState(SessionState):
    """Book the pending selection or discard it.

    On "Y" the room leaves availability, the inventory is saved, the
    reservation is recorded and appended to the reservations file, and
    the invoice is printed. On "N" the selection is dropped and room
    selection starts over.
    """

    stage = SessionStage.CONFIRM

    def execute(self, context: SessionContext) -> SessionStage:
        console = context.console
        room = context.pending_room
        check_in = context.pending_check_in
        check_out = context.pending_check_out
        guest = context.guest
        if room is None or check_in is None or check_out is None or guest is None:
            raise RuntimeError("Nothing pending to confirm")

        if not ask(console, f"\n{RULE}\nDo you want to confirm your reservation? (Y/N): ", parse_yes_no):
            self.logger.info("Reservation declined", room_number=room.room_number)
            context.clear_pending(discard_new_guest=True)
            console.echo("\nReservation canceled. Starting over...\n")
            return SessionStage.SELECT_ROOM

        context.catalog.set_availability(room, False)
        context.catalog.save()
        reservation = context.ledger.record(room, check_in, check_out, guest)
        context.ledger.append_to_file(
            reservation, guest, context.counter.current, context.today()
        )
        console.echo(context.ledger.summary_of(reservation))
        context.clear_pending()

        if ask(console, f"\n{RULE}\nDo you want to reserve more rooms? (Y/N): ", parse_yes_no):
            console.echo(RULE)
            return SessionStage.SELECT_ROOM
        console.echo(RULE)
        return SessionStage.RECEIPT
