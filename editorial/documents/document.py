"""Document - content buffer plus its current editorial state."""

import threading

from editorial.documents.exceptions import StateUnavailableError
from editorial.documents.state_machine import (
    TRANSITION_RULES,
    DocumentState,
    redact,
    validate_transition,
    visible_content,
)
from editorial.shared.utils.logging import get_logger

logger = get_logger(__name__)


class Document:
    """
    A document moving through draft -> pending review -> published.

    Text can be appended in any state, but content() only returns it once
    the document is published. Operations that have no effect in the current
    state are no-ops; none of them fail.

    Usage:
        doc = Document()
        doc.add_text("I ate a salad for lunch today")
        doc.request_review()
        doc.approve()
        doc.content()  # "I ate a salad for lunch today"
    """

    def __init__(self):
        self._content = ""
        self._state: DocumentState | None = DocumentState.DRAFT
        self._lock = threading.Lock()
        logger.debug("document_created", state=self._state.value)

    @classmethod
    def new(cls) -> "Document":
        """Create a document in draft with empty content."""
        return cls()

    @property
    def state(self) -> DocumentState:
        """The active editorial state."""
        with self._lock:
            return self._active_state()

    def add_text(self, text: str) -> None:
        """Append text to the content buffer, whatever the state."""
        with self._lock:
            self._content += text

    def content(self) -> str:
        """Return the content as permitted by the current state."""
        with self._lock:
            return visible_content(self._active_state(), self._content)

    def request_review(self) -> None:
        """Submit the document for review."""
        self._transition("request_review")

    def approve(self) -> None:
        """Approve a document that is pending review."""
        self._transition("approve")

    def redact(self) -> None:
        """Replace the content with the current state's redaction of it."""
        with self._lock:
            state = self._active_state()
            before = len(self._content)
            self._content = redact(state, self._content)
            logger.debug(
                "document_redacted",
                state=state.value,
                length_before=before,
                length_after=len(self._content),
            )

    def _active_state(self) -> DocumentState:
        if self._state is None:
            raise StateUnavailableError()
        return self._state

    def _transition(self, trigger: str) -> None:
        """Take the state out of its slot, apply the rule, reinstall the result."""
        rule = TRANSITION_RULES[trigger]
        with self._lock:
            current = self._active_state()
            self._state = None
            try:
                target = rule(current)
                if target is not current:
                    validate_transition(current.value, target.value, trigger)
            except Exception:
                self._state = current
                raise
            self._state = target

        if target is current:
            logger.debug(
                "document_transition_ignored",
                state=current.value,
                trigger=trigger,
            )
        else:
            logger.info(
                "document_state_changed",
                from_state=current.value,
                to_state=target.value,
                trigger=trigger,
            )

    def __repr__(self) -> str:
        return f"<Document state={self._state.value if self._state else None!r}>"
