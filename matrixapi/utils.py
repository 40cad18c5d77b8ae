"""
Utility classes and functions for the Matrix admin API client.
"""

import logging
from typing import Any, Optional

from rich.text import Text

CHECK_MARK = "✔"
CROSS_MARK = "✘"
MISSING = "none"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure logging on stderr; DEBUG with --debug, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
    )


class DataFormatter:
    """Format API values for display in tables.

    Values coming from the server are wrapped in Text so that square
    brackets in names or URLs are printed literally, not parsed as markup.
    """

    @staticmethod
    def format_text(value: str) -> Text:
        return Text(value)

    @staticmethod
    def format_flag(value: Any) -> str:
        """Render a boolean-like value as a check or cross mark."""
        return CHECK_MARK if value else CROSS_MARK

    @staticmethod
    def format_optional(value: Optional[str]) -> Text:
        return Text(value if value is not None else MISSING)

    @staticmethod
    def format_admin_flag(value: Any) -> Text:
        """Admins get a red check mark, everybody else a green cross."""
        if value:
            return Text(CHECK_MARK, style="red")
        return Text(CROSS_MARK, style="green")
