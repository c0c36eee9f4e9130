"""Documents module - editorial lifecycle of a single document.

Provides the Document, its state machine and the redaction helper.
"""

from editorial.documents.document import Document
from editorial.documents.state_machine import DocumentState

__all__ = ["Document", "DocumentState"]
