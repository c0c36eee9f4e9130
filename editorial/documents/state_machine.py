"""Editorial state machine for documents.

States: draft -> pending_review -> published

Every (state, operation) pair not listed in VALID_TRANSITIONS is a self-loop:
the rule returns the state it was given. Nothing here raises for an
unsupported operation.
"""

from enum import Enum

from editorial.documents.exceptions import DocumentStateError
from editorial.documents.redaction import create_redaction


class DocumentState(str, Enum):
    """Editorial states of a document."""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"


# Map of current_status -> list of (target_status, trigger)
VALID_TRANSITIONS: dict[str, list[tuple[str, str]]] = {
    "draft": [
        ("pending_review", "request_review"),
    ],
    "pending_review": [
        ("published", "approve"),
    ],
    "published": [],  # terminal
}


def can_transition(current: str, target: str, trigger: str | None = None) -> bool:
    """Check whether current -> target is an edge of the table.

    With a trigger, the edge must also be labelled with that trigger.
    """
    allowed = VALID_TRANSITIONS.get(current, [])
    return any(t == target and (trigger is None or r == trigger) for t, r in allowed)


def validate_transition(current: str, target: str, trigger: str | None = None) -> None:
    """Validate a state transition, raising DocumentStateError if invalid."""
    if not can_transition(current, target, trigger):
        raise DocumentStateError(current, target, trigger)


def request_review(state: DocumentState) -> DocumentState:
    """Apply the review-request rule."""
    if state is DocumentState.DRAFT:
        return DocumentState.PENDING_REVIEW
    if state is DocumentState.PENDING_REVIEW:
        return state
    # PUBLISHED
    return state


def approve(state: DocumentState) -> DocumentState:
    """Apply the approval rule."""
    if state is DocumentState.DRAFT:
        return state
    if state is DocumentState.PENDING_REVIEW:
        return DocumentState.PUBLISHED
    # PUBLISHED
    return state


def visible_content(state: DocumentState, stored: str) -> str:
    """Return the part of the stored content this state exposes."""
    if state is DocumentState.DRAFT:
        return ""
    if state is DocumentState.PENDING_REVIEW:
        return ""
    # PUBLISHED
    return stored


def redact(state: DocumentState, text: str) -> str:
    """Apply this state's redaction rule to text."""
    if state is DocumentState.DRAFT:
        return text
    if state is DocumentState.PENDING_REVIEW:
        return create_redaction(text)
    # PUBLISHED
    return create_redaction(text)


# Operation name -> transition rule
TRANSITION_RULES = {
    "request_review": request_review,
    "approve": approve,
}
