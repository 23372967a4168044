#!/usr/bin/env python3
"""
Joiner module: concatenate path segments with the dialect separator and
normalize the result. Joining is lexical only and never fails on text input.
"""

from typing import Any, Optional

from .dialect import Dialect
from .normalizer import Normalizer
from .tokenizer import CURRENT_DIR, PathTokenizer, coerce_path
from .trimmer import Trimmer


class Joiner:
    """Joins segments for one dialect."""

    def __init__(
        self,
        dialect: Dialect,
        normalizer: Optional[Normalizer] = None,
        trimmer: Optional[Trimmer] = None
    ):
        self.dialect = dialect
        self.normalizer = normalizer or Normalizer(dialect)
        self.tokenizer = self.normalizer.tokenizer
        self.trimmer = trimmer or Trimmer(dialect)

    def join(self, *segments: Any) -> str:
        """
        Join segments into one normalized path.

        Empty segments are skipped; no segments (or only empty ones) yield ".".
        Under dialects with UNC support, a UNC root is only kept when the first
        non-empty segment itself starts with one, so ``join("\\\\", "srv", "share")``
        stays root-relative instead of turning into a network path.

        Example:
            >>> Joiner(POSIX_DIALECT).join("users", "docs", "file.txt")
            "users/docs/file.txt"
        """
        parts = [coerce_path(segment, "segment") for segment in segments]
        parts = [part for part in parts if part]
        if not parts:
            return CURRENT_DIR

        joined = self.dialect.separator.join(parts)

        if self.dialect.supports_unc and not self.tokenizer.has_unc_prefix(parts[0]):
            run = self.trimmer.leading_run(joined)
            if run > 1:
                joined = self.dialect.separator + joined[run:]

        return self.normalizer.normalize(joined)
