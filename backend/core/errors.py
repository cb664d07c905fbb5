"""Error types raised by the step runner."""


class AutomationError(Exception):
    """Base class for all runner errors."""


class UnknownActionError(AutomationError):
    """A step names an action the executor does not support."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Unknown action: {action}")


class StepFileError(AutomationError):
    """An uploaded step file could not be turned into steps."""


class RunFailedError(AutomationError):
    """The run as a whole failed (browser launch, navigation, report write)."""

    def __init__(self, message: str, session_id: str | None = None):
        self.session_id = session_id
        super().__init__(message)
