"""Custom exceptions for the document lifecycle.

Public Document operations never raise these for an unsupported transition
(those are no-ops). They guard the state slot invariants.
"""


class DocumentError(Exception):
    """Base exception for document lifecycle errors."""

    def __init__(self, message: str, error_type: str = "document_error"):
        self.message = message
        self.error_type = error_type
        super().__init__(message)


class DocumentStateError(DocumentError):
    """Raised when a state change is not an edge of the transition table."""

    def __init__(self, current_status: str, target_status: str, trigger: str | None = None):
        via = f" via '{trigger}'" if trigger else ""
        super().__init__(
            f"Invalid state transition: '{current_status}' -> '{target_status}'{via}",
            "document_state_error",
        )
        self.current_status = current_status
        self.target_status = target_status
        self.trigger = trigger


class StateUnavailableError(DocumentError):
    """Raised when the state slot is read while a transition holds it."""

    def __init__(self):
        super().__init__(
            "Document has no active state; a transition is in progress",
            "state_unavailable",
        )
