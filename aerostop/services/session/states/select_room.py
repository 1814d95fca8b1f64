"""Room selection among the currently available rooms."""

from aerostop.console import ask
from aerostop.exceptions import RoomUnavailable
from aerostop.models import Room
from aerostop.services.session.base_state import SessionState
from aerostop.services.session.context import SessionContext, SessionStage
from aerostop.transformers import InvoiceFormatter
from aerostop.transformers.invoice_formatter import RULE


class SelectRoomState(SessionState):
    """Show available rooms and prompt until one of them is picked."""

    stage = SessionStage.SELECT_ROOM

    def execute(self, context: SessionContext) -> SessionStage:
        available = list(context.catalog.list_available())
        context.console.echo(InvoiceFormatter.available_rooms(available))

        if not available:
            self.logger.warning("No rooms available, closing session")
            return SessionStage.RECEIPT

        def pick(raw: str) -> Room:
            room = context.catalog.find_available_by_number(raw)
            if room is None:
                raise RoomUnavailable(raw.strip())
            return room

        context.pending_room = ask(context.console, f"{RULE}\n\nEnter room number to reserve: ", pick)
        self.logger.info("Room selected", room_number=context.pending_room.room_number)
        return SessionStage.COLLECT_DATES
