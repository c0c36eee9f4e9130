"""Editorial document lifecycle.

A document is written as a draft, submitted for review and approved for
publication. Its visible content and the effect of redaction depend on
which of those states it is in.

Modules:
    - documents: Document, state machine, redaction
    - shared: configuration and structured logging
"""

from editorial.documents import Document, DocumentState

__version__ = "0.1.0"
__all__ = ["Document", "DocumentState"]
