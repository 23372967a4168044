#!/usr/bin/env python3
"""
Resolver for turning segment lists into absolute paths and for computing
relative paths between two locations.

Rules:
- Segments are scanned right to left; the first absolute one anchors the result.
- Without an absolute segment the caller-supplied cwd anchors it.
- Drive-aware dialects keep scanning past a root-relative segment ("\\a") only
  to pick up a drive or UNC device; segments on another drive are skipped.
- The engine never looks at the process working directory.
"""

from typing import Any, List, Optional

from .dialect import Dialect
from .errors import IncompatibleRootsError, InvalidInputError
from .normalizer import Normalizer
from .tokenizer import CURRENT_DIR, PARENT_DIR, PathTokens, coerce_path


class PathResolver:
    """Absolute/relative resolution for one dialect."""

    def __init__(self, dialect: Dialect, normalizer: Optional[Normalizer] = None):
        self.dialect = dialect
        self.normalizer = normalizer or Normalizer(dialect)
        self.tokenizer = self.normalizer.tokenizer

    def is_absolute(self, path: Any) -> bool:
        """
        True when the path's root carries a separator.

        A bare drive such as "C:a" is drive-relative, not absolute.
        """
        return self.tokenizer.tokenize(path).absolute

    def resolve(self, *segments: Any, cwd: Optional[Any] = None) -> str:
        """
        Resolve segments into a normalized absolute path.

        Args:
            *segments: Path segments, processed right to left
            cwd: Absolute base used when no segment is absolute

        Returns:
            Normalized absolute path

        Raises:
            InvalidInputError: If nothing anchors the result (no absolute segment
                and no cwd), or cwd itself is not absolute
        """
        candidates = [coerce_path(segment, "segment") for segment in segments]
        cwd_text = None if cwd is None else coerce_path(cwd, "cwd")

        pending = list(reversed(candidates))
        if cwd_text is not None:
            pending.append(cwd_text)

        device = ""
        absolute = False
        skipped_absolute = False
        accepted: List[PathTokens] = []

        for candidate in pending:
            if not candidate:
                continue
            tokens = self.tokenizer.tokenize(candidate)

            if tokens.device:
                if device and self.dialect.fold_case(tokens.device) != self.dialect.fold_case(device):
                    skipped_absolute = skipped_absolute or tokens.absolute
                    continue
                if not device:
                    device = tokens.device
            elif absolute:
                continue

            if not absolute:
                accepted.insert(0, tokens)
                absolute = tokens.absolute

            if absolute and (device or not self.dialect.supports_drives):
                break

        # A drive-relative path whose drive has no absolute anchor (another drive's
        # absolute segment or cwd was seen instead) anchors at that drive's root
        if not absolute:
            if cwd_text is None:
                if not (device and skipped_absolute):
                    raise InvalidInputError(
                        "no absolute segment to resolve against; a cwd is required",
                        argument="cwd",
                    )
            elif not device or not self.tokenizer.tokenize(cwd_text).absolute:
                raise InvalidInputError(f"cwd must be an absolute path, got {cwd_text!r}", argument="cwd")

        root = device + self.dialect.separator
        body: List[str] = []
        for tokens in accepted:
            body.extend(tokens.segments)
        return self.normalizer.normalize(root + self.dialect.separator.join(body))

    def relative(self, from_path: Any, to_path: Any, cwd: Optional[Any] = None) -> str:
        """
        Compute the relative path leading from ``from_path`` to ``to_path``.

        Both paths are resolved against ``cwd`` first.

        Raises:
            IncompatibleRootsError: If the resolved paths sit under different roots
            InvalidInputError: If either path cannot be resolved

        Example:
            >>> PathResolver(POSIX_DIALECT).relative("/data/docs", "/data/images/photo.jpg")
            "../images/photo.jpg"
        """
        from_tokens = self.tokenizer.tokenize(self.resolve(from_path, cwd=cwd))
        to_tokens = self.tokenizer.tokenize(self.resolve(to_path, cwd=cwd))

        fold = self.dialect.fold_case
        if fold(from_tokens.root) != fold(to_tokens.root):
            raise IncompatibleRootsError(from_tokens.root, to_tokens.root)

        from_segments = from_tokens.segments
        to_segments = to_tokens.segments

        common = 0
        for left, right in zip(from_segments, to_segments):
            if fold(left) != fold(right):
                break
            common += 1

        parts = [PARENT_DIR] * (len(from_segments) - common) + to_segments[common:]
        return self.dialect.separator.join(parts) or CURRENT_DIR
