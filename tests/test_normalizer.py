#!/usr/bin/env python3
"""
Tests for lexical normalization under both dialects.
"""

import pytest
from pathengine import Normalizer, POSIX_DIALECT, WIN32_DIALECT


@pytest.fixture
def posix_normalizer():
    return Normalizer(POSIX_DIALECT)


@pytest.fixture
def win32_normalizer():
    return Normalizer(WIN32_DIALECT)


@pytest.mark.parametrize("path,expected", [
    ("docs/../src/./app//utils", "src/app/utils"),
    ("", "."),
    (".", "."),
    ("./", "."),
    ("a/..", "."),
    ("../../a", "../../a"),
    ("a/../../b", "../b"),
    ("/..", "/"),
    ("/a/../../b", "/b"),
    ("/a/b/", "/a/b"),
    ("/", "/"),
    ("///", "/"),
    ("//a//b", "/a/b"),
    ("a\x00b/./c", "a\x00b/c"),
])
def test_posix_normalize(posix_normalizer, path, expected):
    assert posix_normalizer.normalize(path) == expected


@pytest.mark.parametrize("path,expected", [
    ("C:/Users//me/./docs/..", "C:\\Users\\me"),
    ("C:\\..\\..", "C:\\"),
    ("C:", "C:"),
    ("C:..\\a", "C:..\\a"),
    ("C:a\\..", "C:"),
    ("\\\\server\\share", "\\\\server\\share\\"),
    ("\\\\server\\share\\..\\x", "\\\\server\\share\\x"),
    ("//server/share/a/", "\\\\server\\share\\a"),
    ("/a/b", "\\a\\b"),
    ("a/b\\..\\c", "a\\c"),
    ("..\\..\\x", "..\\..\\x"),
])
def test_win32_normalize(win32_normalizer, path, expected):
    assert win32_normalizer.normalize(path) == expected


IDEMPOTENCE_CASES = [
    "",
    ".",
    "..",
    "a/./b/../../../c",
    "/x/y/../z/",
    "C:",
    "C:..\\x",
    "C:\\a\\..\\b",
    "\\\\server\\share\\..",
    "\\\\server",
    "//a/b/c//d",
    "\\\\\\a\\b",
]


@pytest.mark.parametrize("path", IDEMPOTENCE_CASES)
def test_posix_normalize_is_idempotent(posix_normalizer, path):
    once = posix_normalizer.normalize(path)
    assert posix_normalizer.normalize(once) == once


@pytest.mark.parametrize("path", IDEMPOTENCE_CASES)
def test_win32_normalize_is_idempotent(win32_normalizer, path):
    once = win32_normalizer.normalize(path)
    assert win32_normalizer.normalize(once) == once


def test_build_returns_dot_for_empty(posix_normalizer):
    assert posix_normalizer.build("", []) == "."
    assert posix_normalizer.build("/", []) == "/"
