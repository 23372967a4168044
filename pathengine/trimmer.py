#!/usr/bin/env python3
"""
Trimmer module for stripping separator runs from the ends of path strings.
Used by the joiner (leading runs) and the name extractor (trailing runs).
"""

from .dialect import Dialect


class Trimmer:
    """Trims every separator the dialect accepts from string ends."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect
        self.trimming_chars = "".join(dialect.separators)

    def trim_leading(self, text: str) -> str:
        """
        Remove a leading run of separators.

        Example:
            >>> Trimmer(WIN32_DIALECT).trim_leading("\\\\/a\\b")
            "a\\b"
        """
        return text.lstrip(self.trimming_chars)

    def trim_trailing(self, text: str) -> str:
        """
        Remove a trailing run of separators.

        Example:
            >>> Trimmer(POSIX_DIALECT).trim_trailing("docs/api//")
            "docs/api"
        """
        return text.rstrip(self.trimming_chars)

    def leading_run(self, text: str) -> int:
        """Number of separators at the start of ``text``."""
        return len(text) - len(self.trim_leading(text))
