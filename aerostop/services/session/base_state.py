"""Base class for session states."""

from abc import ABC, abstractmethod

from structlog import get_logger

from aerostop.services.session.context import SessionContext, SessionStage

logger = get_logger(__name__)


class SessionState(ABC):
    """Abstract base class for session states.

    Each state should:
    1. Implement execute() method
    2. Read what it needs from the context
    3. Talk to the guest through context.console
    4. Write results back to the context
    5. Return the next stage
    """

    stage: SessionStage

    def __init__(self, name: str | None = None):
        """Initialize the session state.

        Args:
            name: Optional custom name for the state. Defaults to class name.
        """
        self.name = name or self.__class__.__name__
        self.logger = logger.bind(state=self.name)

    @abstractmethod
    def execute(self, context: SessionContext) -> SessionStage:
        """Execute the state.

        Args:
            context: Session context

        Returns:
            The stage to move to next
        """
        pass

    def run(self, context: SessionContext) -> SessionStage:
        """Run the state with transition logging.

        Exceptions propagate to the controller, which ends the session.
        """
        self.logger.debug("State entered", **context.log_context())
        next_stage = self.execute(context)
        self.logger.debug("State finished", next_stage=next_stage.value)
        return next_stage

    def get_name(self) -> str:
        return self.name
