"""Configuration for the document lifecycle."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class DocumentSettings(BaseSettings):
    """Document lifecycle settings."""

    model_config = {"env_prefix": "EDITORIAL_DOCS_", "case_sensitive": False}

    # Redaction
    redaction_marker: str = Field(
        default="=====",
        description="Replacement emitted for every redacted word",
    )
    redaction_length: int = Field(
        default=5,
        ge=1,
        description="UTF-8 byte length of the words that get redacted",
    )


@lru_cache
def get_document_settings() -> DocumentSettings:
    """Get cached document settings."""
    return DocumentSettings()
