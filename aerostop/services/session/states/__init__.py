"""Session states."""

from aerostop.services.session.states.ask_reserve import AskReserveState
from aerostop.services.session.states.collect_dates import CollectDatesState
from aerostop.services.session.states.collect_guest import CollectGuestState
from aerostop.services.session.states.confirm import ConfirmState
from aerostop.services.session.states.receipt import ReceiptState
from aerostop.services.session.states.select_room import SelectRoomState
from aerostop.services.session.states.welcome import WelcomeState

__all__ = [
    "WelcomeState",
    "AskReserveState",
    "SelectRoomState",
    "CollectDatesState",
    "CollectGuestState",
    "ConfirmState",
    "ReceiptState",
]
