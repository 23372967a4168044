#!/usr/bin/env python3
"""Tests for long-path namespacing."""

import pytest
from pathengine import InvalidInputError, Namespacer, POSIX_DIALECT, WIN32_DIALECT


@pytest.fixture
def win32_namespacer():
    return Namespacer(WIN32_DIALECT)


@pytest.mark.parametrize("path,expected", [
    ("C:\\a\\b", "\\\\?\\C:\\a\\b"),
    ("C:/a/../b", "\\\\?\\C:\\b"),
    ("\\\\server\\share\\x", "\\\\?\\UNC\\server\\share\\x"),
    ("//server/share", "\\\\?\\UNC\\server\\share\\"),
])
def test_absolute_paths_are_namespaced(win32_namespacer, path, expected):
    assert win32_namespacer.to_namespaced_path(path) == expected


@pytest.mark.parametrize("path", [
    "\\\\?\\C:\\a",
    "\\\\.\\pipe\\x",
    "//?/C:/a",
    "rel\\x",
    "\\rooted",
    "C:drive-relative",
    "",
])
def test_unanchored_or_namespaced_paths_are_unchanged(win32_namespacer, path):
    assert win32_namespacer.to_namespaced_path(path) == path


def test_relative_path_resolved_against_cwd(win32_namespacer):
    assert win32_namespacer.to_namespaced_path("rel\\x", cwd="C:\\work") == "\\\\?\\C:\\work\\rel\\x"


def test_root_relative_path_takes_cwd_drive(win32_namespacer):
    assert win32_namespacer.to_namespaced_path("\\rooted", cwd="D:\\work") == "\\\\?\\D:\\rooted"


def test_relative_cwd_is_rejected(win32_namespacer):
    with pytest.raises(InvalidInputError):
        win32_namespacer.to_namespaced_path("x", cwd="y")


@pytest.mark.parametrize("path", ["/a/b", "a", "C:\\a", ""])
def test_posix_is_identity(path):
    assert Namespacer(POSIX_DIALECT).to_namespaced_path(path, cwd="/cwd") == path
