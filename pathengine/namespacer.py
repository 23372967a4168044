#!/usr/bin/env python3
"""
Namespacer module: rewrite absolute paths into the long-path namespace of
dialects that have one (win32).

- "C:\\dir\\file"       -> "\\\\?\\C:\\dir\\file"
- "\\\\server\\share\\x" -> "\\\\?\\UNC\\server\\share\\x"

Dialects without a namespace prefix (posix) return the input unchanged.
"""

from typing import Any, Optional

from .dialect import Dialect
from .resolver import PathResolver
from .tokenizer import coerce_path


class Namespacer:
    """Long-path namespacing for one dialect."""

    def __init__(self, dialect: Dialect, resolver: Optional[PathResolver] = None):
        self.dialect = dialect
        self.resolver = resolver or PathResolver(dialect)
        self.tokenizer = self.resolver.tokenizer

    def is_namespaced(self, text: str) -> bool:
        """True for paths already in the "\\\\?\\" or "\\\\.\\" device namespace."""
        sep = self.dialect.separator
        primary = self.dialect.to_primary(text)
        return primary.startswith(sep * 2 + "?" + sep) or primary.startswith(sep * 2 + "." + sep)

    def to_namespaced_path(self, path: Any, cwd: Optional[Any] = None) -> str:
        """
        Convert a path to its namespaced form.

        Args:
            path: Path string
            cwd: Optional absolute base used to resolve relative input first

        Returns:
            Namespaced path, or the input unchanged when it has no drive or UNC
            anchor (and no cwd to supply one), is already namespaced, or the
            dialect has no namespace
        """
        text = coerce_path(path)
        if not self.dialect.namespace_prefix or not text or self.is_namespaced(text):
            return text

        tokens = self.tokenizer.tokenize(text)
        if cwd is None and not (tokens.absolute and tokens.device):
            return text

        resolved = self.resolver.resolve(text, cwd=cwd)
        resolved_tokens = self.tokenizer.tokenize(resolved)

        if resolved_tokens.root_kind == 'unc':
            return self.dialect.unc_namespace_prefix + resolved[2:]
        if resolved_tokens.root_kind == 'drive' and resolved_tokens.absolute:
            return self.dialect.namespace_prefix + resolved
        return text
