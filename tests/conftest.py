"""Global pytest fixtures for the editorial document lifecycle.

This module provides shared fixtures for testing including:
- Documents in each editorial state
- Settings cache isolation
- structlog configuration reset
"""

from collections.abc import Generator

import pytest
import structlog

from editorial.documents.config import get_document_settings
from editorial.documents.document import Document
from editorial.shared.config import get_logging_settings

SAMPLE_TEXT = "I ate a salad for lunch today"


# ===========================================
# SETTINGS / LOGGING ISOLATION
# ===========================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so env overrides apply per test."""
    get_document_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_document_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


# ===========================================
# DOCUMENT FIXTURES
# ===========================================


@pytest.fixture
def draft_document() -> Document:
    """Document in draft holding the sample text."""
    doc = Document()
    doc.add_text(SAMPLE_TEXT)
    return doc


@pytest.fixture
def pending_document(draft_document: Document) -> Document:
    """Document pending review holding the sample text."""
    draft_document.request_review()
    return draft_document


@pytest.fixture
def published_document(pending_document: Document) -> Document:
    """Published document holding the sample text."""
    pending_document.approve()
    return pending_document
