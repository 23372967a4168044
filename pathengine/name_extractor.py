#!/usr/bin/env python3
"""
Name extractor module for the final-segment helpers: basename, dirname and
extname.

basename and dirname work on the normalized segment sequence. extname reads
the text after the last separator directly, skipping the full parse.
"""

from typing import Any, Optional

from .dialect import Dialect
from .normalizer import Normalizer
from .path_parser import split_extension
from .tokenizer import CURRENT_DIR, coerce_path
from .trimmer import Trimmer


class NameExtractor:
    """basename / dirname / extname for one dialect."""

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

    def basename(self, path: Any, ext: Optional[Any] = None) -> str:
        """
        Last segment of the normalized path, root excluded.

        Args:
            path: Path string
            ext: Optional suffix to strip from the result when it ends with it

        Returns:
            Final segment; "" for empty or root-only input

        Example:
            >>> NameExtractor(POSIX_DIALECT).basename("/docs/api/user.json", ".json")
            "user"
        """
        text = coerce_path(path)
        suffix = None if ext is None else coerce_path(ext, "ext")
        if not text:
            return ""

        tokens = self.tokenizer.tokenize(text)
        segments = self.normalizer.resolve_segments(tokens)
        if not segments:
            return "" if tokens.root else CURRENT_DIR

        base = segments[-1]
        if suffix and base.endswith(suffix):
            base = base[:-len(suffix)]
        return base

    def dirname(self, path: Any) -> str:
        """
        Everything but the last segment of the normalized path.

        Root-only and rooted single-segment paths give the root; a relative
        single segment (or empty input) gives ".".
        """
        text = coerce_path(path)
        if not text:
            return CURRENT_DIR

        tokens = self.tokenizer.tokenize(text)
        segments = self.normalizer.resolve_segments(tokens)
        if len(segments) <= 1:
            return tokens.root or CURRENT_DIR
        return self.normalizer.build(tokens.root, segments[:-1])

    def extname(self, path: Any) -> str:
        """
        Extension of the final segment, read straight from the text.

        Trailing separators are ignored. Returns "" when the final segment has
        no interior dot or consists only of dots.
        """
        _root, rest = self.tokenizer.split_root(path)
        rest = self.trimmer.trim_trailing(rest)
        cut = max(rest.rfind(sep) for sep in self.dialect.separators)
        return split_extension(rest[cut + 1:])[1]
