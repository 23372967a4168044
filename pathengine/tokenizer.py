#!/usr/bin/env python3
"""
Tokenizer module for splitting path strings into a root and a segment sequence.

The root is recognized first using the dialect's rules (leading separator,
drive letter, UNC share). The remainder is split on every separator the
dialect accepts; empty components produced by repeated separators are
dropped, while "." and ".." are kept as dedicated token types so the
normalizer can resolve them later.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from .dialect import Dialect
from .errors import InvalidInputError

CURRENT_DIR = "."
PARENT_DIR = ".."


def coerce_path(value: Any, argument: str = "path") -> str:
    """
    Return ``value`` as a path string.

    Accepts ``str`` and ``os.PathLike`` objects whose ``__fspath__`` returns
    ``str``. Anything else (including ``bytes`` and ``None``) is rejected.

    Raises:
        InvalidInputError: If the value is not text
    """
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        fspath = os.fspath(value)
        if isinstance(fspath, str):
            return fspath
    raise InvalidInputError(
        f"{argument} must be a string, not {type(value).__name__}",
        argument=argument,
    )


@dataclass
class Token:
    """A single component of a path string."""
    value: str
    type: str  # 'root', 'segment', 'current', 'parent'
    position: int  # Offset in the original string


@dataclass
class PathTokens:
    """Root and segment sequence extracted from one path string."""
    original: str
    root: str = ""
    device: str = ""
    root_kind: str = ""  # '', 'separator', 'drive', 'unc'
    absolute: bool = False
    tokens: List[Token] = field(default_factory=list)

    @property
    def segments(self) -> List[str]:
        """Segment values in order, root excluded."""
        return [token.value for token in self.tokens if token.type != 'root']

    def to_json(self) -> str:
        return json.dumps({
            "original": self.original,
            "root": self.root,
            "device": self.device,
            "root_kind": self.root_kind,
            "absolute": self.absolute,
            "tokens": [
                {"value": token.value, "type": token.type, "position": token.position}
                for token in self.tokens
            ],
        })


class PathTokenizer:
    """Splits path strings into root + segment tokens for one dialect."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def tokenize(self, path: Any) -> PathTokens:
        """
        Tokenize a path string.

        Args:
            path: Path string (or str-returning PathLike)

        Returns:
            PathTokens with the normalized root and one token per non-empty component

        Example:
            >>> PathTokenizer(POSIX_DIALECT).tokenize("/a//./b/..").segments
            ['a', '.', 'b', '..']
        """
        text = coerce_path(path)
        root, device, root_kind, absolute, end = self._split_root(text)

        result = PathTokens(
            original=text,
            root=root,
            device=device,
            root_kind=root_kind,
            absolute=absolute,
        )
        if root:
            result.tokens.append(Token(value=root, type='root', position=0))

        for value, position in self._split_segments(text, end):
            result.tokens.append(Token(value=value, type=self._classify(value), position=position))

        return result

    def split_root(self, path: Any) -> Tuple[str, str]:
        """Return ``(root, rest)`` where ``rest`` is the text following the root."""
        text = coerce_path(path)
        root, _device, _kind, _absolute, end = self._split_root(text)
        return root, text[end:]

    def has_unc_prefix(self, text: str) -> bool:
        """True when ``text`` opens with exactly two separators and a server name."""
        return (
            self.dialect.supports_unc
            and len(text) > 2
            and self.dialect.is_separator(text[0])
            and self.dialect.is_separator(text[1])
            and not self.dialect.is_separator(text[2])
        )

    def _classify(self, value: str) -> str:
        if value == CURRENT_DIR:
            return 'current'
        if value == PARENT_DIR:
            return 'parent'
        return 'segment'

    def _split_segments(self, text: str, start: int) -> List[Tuple[str, int]]:
        """Split ``text[start:]`` on separators, skipping empty components."""
        is_sep = self.dialect.is_separator
        parts = []
        begin = start
        for index in range(start, len(text) + 1):
            if index == len(text) or is_sep(text[index]):
                if index > begin:
                    parts.append((text[begin:index], begin))
                begin = index + 1
        return parts

    def _split_root(self, text: str) -> Tuple[str, str, str, bool, int]:
        """
        Recognize the root of ``text``.

        Returns:
            (root, device, root_kind, absolute, end) where ``end`` is the offset
            just past the root in the original text
        """
        dialect = self.dialect
        sep = dialect.separator
        is_sep = dialect.is_separator
        length = len(text)

        if not text:
            return "", "", "", False, 0

        if self.has_unc_prefix(text):
            server_end = 2
            while server_end < length and not is_sep(text[server_end]):
                server_end += 1
            share_start = server_end
            while share_start < length and is_sep(text[share_start]):
                share_start += 1
            share_end = share_start
            while share_end < length and not is_sep(text[share_end]):
                share_end += 1

            # "\\server" or "\\server\" without a share is not a UNC root
            if share_end > share_start:
                device = sep * 2 + text[2:server_end] + sep + text[share_start:share_end]
                return device + sep, device, 'unc', True, share_end

        if is_sep(text[0]):
            return sep, "", 'separator', True, 1

        if (
            dialect.supports_drives
            and length >= 2
            and text[1] == ":"
            and text[0].isascii()
            and text[0].isalpha()
        ):
            device = text[:2]
            if length > 2 and is_sep(text[2]):
                return device + sep, device, 'drive', True, 3
            return device, device, 'drive', False, 2

        return "", "", "", False, 0
