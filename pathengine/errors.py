#!/usr/bin/env python3
"""
Exception types raised by the path engine.

Every failure is surfaced synchronously to the caller as one of these types;
no stage falls back to an empty string.
"""

from typing import Optional


class PathEngineError(Exception):
    """Base class for all path engine errors."""


class InvalidInputError(PathEngineError, ValueError):
    """A required argument is missing or has the wrong semantic type."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class IncompatibleRootsError(PathEngineError, ValueError):
    """Two paths resolve under different absolute roots."""

    def __init__(self, from_root: str, to_root: str):
        super().__init__(
            f"cannot compute a relative path between roots {from_root!r} and {to_root!r}"
        )
        self.from_root = from_root
        self.to_root = to_root


class DialectConfigError(PathEngineError):
    """A dialect dictionary is missing or fails validation."""
