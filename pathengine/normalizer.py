#!/usr/bin/env python3
"""
Normalizer module for lexical path normalization.

Resolves "." and ".." segments and collapses repeated separators without
consulting the filesystem. Rules:
- "." segments are removed.
- ".." removes the preceding real segment.
- ".." directly under an absolute root is dropped (the root is its own parent).
- ".." at the top of a relative or drive-relative path is kept, in order.
- Trailing separators are dropped unless the result is only the root.
- An empty result is ".".
"""

from typing import Any, List, Optional

from .dialect import Dialect
from .tokenizer import CURRENT_DIR, PARENT_DIR, PathTokenizer, PathTokens


class Normalizer:
    """Lexical normalizer bound to one dialect."""

    def __init__(self, dialect: Dialect, tokenizer: Optional[PathTokenizer] = None):
        self.dialect = dialect
        self.tokenizer = tokenizer or PathTokenizer(dialect)

    def normalize(self, path: Any) -> str:
        """
        Normalize a path string.

        Args:
            path: Path to normalize

        Returns:
            Normalized path; "." for empty input

        Example:
            >>> Normalizer(POSIX_DIALECT).normalize("docs/../src/./app//utils")
            "src/app/utils"
        """
        tokens = self.tokenizer.tokenize(path)
        return self.build(tokens.root, self.resolve_segments(tokens))

    def resolve_segments(self, tokens: PathTokens) -> List[str]:
        """Apply "." and ".." rules to a token sequence."""
        stack: List[str] = []
        for token in tokens.tokens:
            if token.type in ('root', 'current'):
                continue
            if token.type == 'parent':
                if stack and stack[-1] != PARENT_DIR:
                    stack.pop()
                elif not tokens.absolute:
                    stack.append(PARENT_DIR)
                continue
            stack.append(token.value)
        return stack

    def build(self, root: str, segments: List[str]) -> str:
        """Join a normalized root and resolved segments with the primary separator."""
        result = root + self.dialect.separator.join(segments)
        return result or CURRENT_DIR
