#!/usr/bin/env python3
"""Walk a document through the editorial lifecycle.

Usage:
    python run.py [--text TEXT] [--log-level LEVEL] [--json-logs]

Examples:
    python run.py                                  # Default sample text
    python run.py --text "Hello there world"       # Custom text
    python run.py --log-level debug                # Show ignored transitions too
"""

import argparse

from editorial import Document
from editorial.shared.utils.logging import configure_logging

DEFAULT_TEXT = "I ate a salad for lunch today"


def main():
    parser = argparse.ArgumentParser(
        description="Walk a document through draft, review, publication and redaction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py                                Default sample text
  python run.py --text "Hello there world"     Custom text
  python run.py --json-logs                    Emit logs as JSON
        """,
    )

    parser.add_argument(
        "--text",
        default=DEFAULT_TEXT,
        help=f"Text to add to the document (default: {DEFAULT_TEXT!r})",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default=None,
        help="Logging level (default: EDITORIAL_LOG_LEVEL or info)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Render logs as JSON",
    )

    args = parser.parse_args()
    configure_logging(level=args.log_level, json_format=args.json_logs)

    doc = Document()
    doc.add_text(args.text)
    print(f"draft:          {doc.content()!r}")

    doc.request_review()
    print(f"pending review: {doc.content()!r}")

    doc.approve()
    print(f"published:      {doc.content()!r}")

    doc.redact()
    print(f"redacted:       {doc.content()!r}")


if __name__ == "__main__":
    main()
