"""Interactive reservation session."""

from .base_state import SessionState
from .context import SessionContext, SessionResult, SessionStage
from .controller import SessionController

__all__ = [
    "SessionState",
    "SessionContext",
    "SessionResult",
    "SessionStage",
    "SessionController",
]
