#!/usr/bin/env python3
"""
Path engine: every path operation bound to a single dialect.

Two engines always exist, ``posix`` and ``win32``, regardless of the host.
``default`` is one of them, picked once at import time from the host
platform and never changed afterwards.

Usage:
    from pathengine.engine import posix, win32
    posix.join("users", "docs", "file.txt")     # 'users/docs/file.txt'
    win32.relative("C:\\data\\docs", "C:\\data\\img")  # '..\\img'
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from .dialect import POSIX_DIALECT, WIN32_DIALECT, Dialect, get_dialect, select_default_dialect
from .joiner import Joiner
from .name_extractor import NameExtractor
from .namespacer import Namespacer
from .normalizer import Normalizer
from .path_parser import ParsedPath, PathParser
from .resolver import PathResolver
from .tokenizer import PathTokenizer, PathTokens
from .trimmer import Trimmer

logger = logging.getLogger(__name__)


class PathEngine:
    """Complete set of lexical path operations for one dialect."""

    def __init__(self, dialect: Dialect):
        """
        Build every stage for ``dialect``.

        Stages share one tokenizer and normalizer; none of them hold state
        between calls, so an engine can be shared freely across threads.
        """
        self.dialect = dialect
        self.tokenizer = PathTokenizer(dialect)
        self.normalizer = Normalizer(dialect, self.tokenizer)
        self.trimmer = Trimmer(dialect)
        self.joiner = Joiner(dialect, self.normalizer, self.trimmer)
        self.resolver = PathResolver(dialect, self.normalizer)
        self.path_parser = PathParser(dialect, self.normalizer)
        self.name_extractor = NameExtractor(dialect, self.normalizer, self.trimmer)
        self.namespacer = Namespacer(dialect, self.resolver)

        logger.debug(
            "Built %s path engine (sep=%r, delimiter=%r)",
            dialect.name, dialect.separator, dialect.delimiter,
        )

    def __repr__(self) -> str:
        return f"PathEngine({self.dialect.name!r})"

    @property
    def name(self) -> str:
        return self.dialect.name

    @property
    def sep(self) -> str:
        return self.dialect.separator

    @property
    def delimiter(self) -> str:
        return self.dialect.delimiter

    @classmethod
    def for_dialect(cls, name: str) -> "PathEngine":
        """Shared engine for a dialect name ("posix", "win32" or "default")."""
        return get_engine(name)

    def tokenize(self, path: Any) -> PathTokens:
        return self.tokenizer.tokenize(path)

    def normalize(self, path: Any) -> str:
        return self.normalizer.normalize(path)

    def join(self, *segments: Any) -> str:
        return self.joiner.join(*segments)

    def resolve(self, *segments: Any, cwd: Optional[Any] = None) -> str:
        return self.resolver.resolve(*segments, cwd=cwd)

    def relative(self, from_path: Any, to_path: Any, cwd: Optional[Any] = None) -> str:
        return self.resolver.relative(from_path, to_path, cwd=cwd)

    def is_absolute(self, path: Any) -> bool:
        return self.resolver.is_absolute(path)

    def parse(self, path: Any) -> ParsedPath:
        return self.path_parser.parse(path)

    def format(self, parsed: Union[ParsedPath, Mapping[str, Any]]) -> str:
        return self.path_parser.format(parsed)

    def basename(self, path: Any, ext: Optional[Any] = None) -> str:
        return self.name_extractor.basename(path, ext)

    def dirname(self, path: Any) -> str:
        return self.name_extractor.dirname(path)

    def extname(self, path: Any) -> str:
        return self.name_extractor.extname(path)

    def to_namespaced_path(self, path: Any, cwd: Optional[Any] = None) -> str:
        return self.namespacer.to_namespaced_path(path, cwd=cwd)

    def split_segments(self, path: Any) -> List[str]:
        """Segments of the normalized path, root excluded."""
        return self.normalizer.resolve_segments(self.tokenizer.tokenize(path))


posix = PathEngine(POSIX_DIALECT)
win32 = PathEngine(WIN32_DIALECT)

_ENGINES: Dict[str, PathEngine] = {
    posix.name: posix,
    win32.name: win32,
}


def _engine_for(dialect: Dialect) -> PathEngine:
    return _ENGINES.get(dialect.name) or PathEngine(dialect)


default = _engine_for(select_default_dialect())
logger.debug("Default path engine: %s", default.name)


def get_engine(name: str) -> PathEngine:
    """
    Look up the engine for a dialect name.

    Raises:
        InvalidInputError: If the name is not "default" or a known dialect
    """
    if name == "default":
        return default
    return _engine_for(get_dialect(name))
