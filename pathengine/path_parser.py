#!/usr/bin/env python3
"""
Path parser module: structural decomposition of path strings and the
inverse formatting step.

Splits a path into:
- root (drive + separator, UNC prefix, leading separator, bare drive or "")
- dir (everything before the final segment, root included)
- base (final segment)
- name / ext (base split at its last interior dot)

Parsing works on the normalized path, so redundant separators and "."/".."
segments do not leak into the result. format() is the (lossy) inverse.
"""

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .dialect import Dialect
from .errors import InvalidInputError
from .normalizer import Normalizer
from .tokenizer import CURRENT_DIR, coerce_path


def split_extension(base: str) -> Tuple[str, str]:
    """
    Split a final segment into ``(name, ext)``.

    ``ext`` runs from the last dot to the end. It is empty when there is no
    dot, when the only dot is the leading one (".bashrc"), or when the segment
    is made only of dots (".", "..", "...").

    Example:
        >>> split_extension("archive.tar.gz")
        ("archive.tar", ".gz")
    """
    index = base.rfind(".")
    if index <= 0 or not base.strip("."):
        return base, ""
    return base[:index], base[index:]


@dataclass(frozen=True)
class ParsedPath:
    """Structured result of parsing a path string."""
    root: str = ""
    dir: str = ""
    base: str = ""
    ext: str = ""
    name: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_json(self) -> str:
        """Convert result to JSON format."""
        return json.dumps(self.to_dict())


class PathParser:
    """Parse and format paths for one dialect."""

    def __init__(self, dialect: Dialect, normalizer: Optional[Normalizer] = None):
        self.dialect = dialect
        self.normalizer = normalizer or Normalizer(dialect)
        self.tokenizer = self.normalizer.tokenizer

    def parse(self, path: Any) -> ParsedPath:
        """
        Parse a path into root, dir, base, name and ext.

        Args:
            path: Path string; empty input gives an all-empty ParsedPath

        Returns:
            ParsedPath built from the normalized path

        Example:
            >>> PathParser(POSIX_DIALECT).parse("/home/user/docs/report.pdf")
            ParsedPath(root='/', dir='/home/user/docs', base='report.pdf', ext='.pdf', name='report')
        """
        text = coerce_path(path)
        if not text:
            return ParsedPath()

        tokens = self.tokenizer.tokenize(text)
        segments = self.normalizer.resolve_segments(tokens)
        root = tokens.root

        if not segments:
            if root:
                return ParsedPath(root=root, dir=root)
            return ParsedPath(base=CURRENT_DIR, name=CURRENT_DIR)

        base = segments[-1]
        parent = segments[:-1]
        directory = self.normalizer.build(root, parent) if parent else root
        name, ext = split_extension(base)

        return ParsedPath(root=root, dir=directory, base=base, ext=ext, name=name)

    def format(self, parsed: Union[ParsedPath, Mapping[str, Any]]) -> str:
        """
        Build a path string from parsed components.

        ``base`` takes precedence over ``name`` + ``ext``; an ``ext`` without a
        leading dot gets one. ``dir`` falls back to ``root``. When the directory
        already ends with a separator (or is the root) no separator is added,
        which keeps drive-relative roots such as "C:" intact.

        Raises:
            InvalidInputError: If ``parsed`` is neither a ParsedPath nor a mapping
        """
        if isinstance(parsed, ParsedPath):
            fields = parsed.to_dict()
        elif isinstance(parsed, Mapping):
            fields = parsed
        else:
            raise InvalidInputError(
                f"format expects a ParsedPath or mapping, not {type(parsed).__name__}",
                argument="parsed",
            )

        root = self._field(fields, "root")
        directory = self._field(fields, "dir") or root
        base = self._field(fields, "base")
        if not base:
            ext = self._field(fields, "ext")
            if ext and not ext.startswith("."):
                ext = "." + ext
            base = self._field(fields, "name") + ext

        if not directory:
            return base
        if directory == root or self.dialect.is_separator(directory[-1]):
            return directory + base
        return directory + self.dialect.separator + base

    def _field(self, fields: Mapping[str, Any], key: str) -> str:
        value = fields.get(key)
        if value is None:
            return ""
        return coerce_path(value, key)
