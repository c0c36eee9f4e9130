"""Word redaction for pending and published documents."""

import re

from editorial.documents.config import get_document_settings

# Unicode White_Space: str.isspace() minus the \x1c-\x1f separators
_WHITESPACE = re.compile(r"[^\S\x1c-\x1f]+")


def _byte_length(word: str) -> int:
    return len(word.encode("utf-8"))


def create_redaction(
    text: str,
    marker: str | None = None,
    length: int | None = None,
) -> str:
    """
    Redact every whitespace-delimited word of a given byte length.

    Each word is followed by a single space in the output. A redacted word
    is written as ``marker + " "`` and then gets that trailing space too, so
    it ends up followed by two spaces:

        >>> create_redaction("I ate a salad for lunch today")
        'I ate a =====  for =====  =====  '

    Words are split on Unicode White_Space; the separators U+001C to U+001F
    are part of a word. Whitespace runs collapse and empty input gives "".

    Args:
        text: Text to redact
        marker: Replacement for redacted words (default from DocumentSettings)
        length: UTF-8 byte length that triggers redaction (default from DocumentSettings)

    Returns:
        The redacted text
    """
    settings = get_document_settings()
    marker = settings.redaction_marker if marker is None else marker
    length = settings.redaction_length if length is None else length

    parts: list[str] = []
    for word in _WHITESPACE.split(text):
        if not word:
            continue
        if _byte_length(word) == length:
            parts.append(f"{marker} ")
        else:
            parts.append(word)
        parts.append(" ")
    return "".join(parts)
