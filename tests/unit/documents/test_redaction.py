"""Unit tests for word redaction."""

import pytest
from pydantic import ValidationError

from editorial.documents.config import DocumentSettings
from editorial.documents.redaction import create_redaction


class TestCreateRedaction:
    def test_sample_sentence(self):
        assert create_redaction("I ate a salad for lunch today") == "I ate a =====  for =====  =====  "

    def test_unredacted_words_get_single_trailing_space(self):
        assert create_redaction("I am a big fan") == "I am a big fan "

    def test_empty_input(self):
        assert create_redaction("") == ""
        assert create_redaction(" \t\n ") == ""

    def test_whitespace_runs_collapse(self):
        assert create_redaction("  to\tbe \n or ") == "to be or "

    def test_unicode_whitespace_separates_words(self):
        for sep in ["\t", "\n", "\x0b", "\x0c", "\r", "\x85", "\xa0", "\u2003", "\u2029", "\u3000"]:
            assert create_redaction(f"to{sep}be") == "to be ", repr(sep)

    def test_information_separators_are_part_of_a_word(self):
        assert create_redaction("ab\x1fcd") == "=====  "
        for sep in ["\x1c", "\x1d", "\x1e", "\x1f"]:
            assert create_redaction(f"and{sep}so") == f"and{sep}so "

    def test_length_counts_utf8_bytes(self):
        # "café" is 4 characters but 5 bytes
        assert create_redaction("café") == "=====  "
        # "tests" is 5 bytes, "naïve" is 6
        assert create_redaction("naïve tests") == "naïve =====  "

    def test_marker_is_redacted_again(self):
        once = create_redaction("salad")
        assert create_redaction(once) == "=====  "

    def test_punctuation_counts_towards_length(self):
        assert create_redaction("lunch.") == "lunch. "
        assert create_redaction("lunc.") == "=====  "

    def test_explicit_marker_and_length(self):
        assert create_redaction("to be or not", marker="##", length=2) == "##  ##  ##  not "


class TestRedactionSettings:
    def test_env_overrides_marker(self, monkeypatch):
        monkeypatch.setenv("EDITORIAL_DOCS_REDACTION_MARKER", "XXXXX")
        assert create_redaction("a salad") == "a XXXXX  "

    def test_env_overrides_length(self, monkeypatch):
        monkeypatch.setenv("EDITORIAL_DOCS_REDACTION_LENGTH", "3")
        assert create_redaction("ate salad") == "=====  salad "

    def test_defaults(self):
        settings = DocumentSettings()
        assert settings.redaction_marker == "====="
        assert settings.redaction_length == 5

    def test_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            DocumentSettings(redaction_length=0)
