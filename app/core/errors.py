"""
Application errors for the planner service.

Services raise these instead of HTTP exceptions; ``app.main`` maps them to
responses. ``NotificationFailure`` never reaches the caller, it is logged by
whoever sent the message.
"""


class PlannerError(Exception):
    """Base exception for planner errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(PlannerError):
    """Caller supplied data that fails a validation rule."""

    pass


class NotFound(PlannerError):
    """Referenced trip does not exist."""

    def __init__(self, message: str = "Trip not found"):
        super().__init__(message)


class NotificationFailure(PlannerError):
    """A single email could not be delivered."""

    def __init__(self, recipient: str, reason: str):
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to send email to {recipient}: {reason}")
