#!/usr/bin/env python3
"""
Tests for root detection and segment tokenization.
"""

import json
from pathlib import PurePosixPath

import pytest
from pathengine import InvalidInputError, PathTokenizer, POSIX_DIALECT, WIN32_DIALECT


@pytest.fixture
def posix_tokenizer():
    """Fixture providing a POSIX tokenizer."""
    return PathTokenizer(POSIX_DIALECT)


@pytest.fixture
def win32_tokenizer():
    """Fixture providing a win32 tokenizer."""
    return PathTokenizer(WIN32_DIALECT)


class TestPosixTokenization:
    """Tokenization under the POSIX dialect."""

    def test_absolute_path_segments_and_types(self, posix_tokenizer):
        result = posix_tokenizer.tokenize("/a//./b/..")

        assert result.root == "/"
        assert result.absolute is True
        assert result.segments == ["a", ".", "b", ".."]
        assert [t.type for t in result.tokens] == ["root", "segment", "current", "segment", "parent"]

    def test_token_positions_point_into_original(self, posix_tokenizer):
        result = posix_tokenizer.tokenize("/a//./b/..")

        assert [(t.value, t.position) for t in result.tokens] == [
            ("/", 0), ("a", 1), (".", 4), ("b", 6), ("..", 8)
        ]

    def test_relative_path_has_no_root(self, posix_tokenizer):
        result = posix_tokenizer.tokenize("docs/api")

        assert result.root == ""
        assert result.absolute is False
        assert result.segments == ["docs", "api"]

    def test_backslash_is_plain_character(self, posix_tokenizer):
        result = posix_tokenizer.tokenize("C:\\foo")

        assert result.root == ""
        assert result.segments == ["C:\\foo"]

    def test_empty_string(self, posix_tokenizer):
        result = posix_tokenizer.tokenize("")

        assert result.root == ""
        assert result.tokens == []

    def test_pathlike_input(self, posix_tokenizer):
        result = posix_tokenizer.tokenize(PurePosixPath("/srv/data"))

        assert result.segments == ["srv", "data"]

    def test_to_json(self, posix_tokenizer):
        parsed = json.loads(posix_tokenizer.tokenize("/x").to_json())

        assert parsed["root"] == "/"
        assert parsed["absolute"] is True
        assert parsed["tokens"][1] == {"value": "x", "type": "segment", "position": 1}


class TestWin32Roots:
    """Root detection under the win32 dialect."""

    def test_drive_absolute(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("C:\\Users\\me")

        assert result.root == "C:\\"
        assert result.device == "C:"
        assert result.root_kind == "drive"
        assert result.absolute is True
        assert result.segments == ["Users", "me"]

    def test_drive_relative(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("C:foo")

        assert result.root == "C:"
        assert result.absolute is False
        assert result.segments == ["foo"]

    def test_forward_slash_drive_root_uses_primary_separator(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("d:/tmp")

        assert result.root == "d:\\"

    def test_unc_root(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("//server/share/dir")

        assert result.root == "\\\\server\\share\\"
        assert result.device == "\\\\server\\share"
        assert result.root_kind == "unc"
        assert result.absolute is True
        assert result.segments == ["dir"]

    def test_incomplete_unc_falls_back_to_separator_root(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("\\\\server")

        assert result.root == "\\"
        assert result.root_kind == "separator"
        assert result.segments == ["server"]

    def test_three_leading_separators_are_not_unc(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("\\\\\\server\\share")

        assert result.root == "\\"
        assert result.segments == ["server", "share"]

    def test_mixed_separators(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("a/b\\c")

        assert result.segments == ["a", "b", "c"]

    def test_digit_before_colon_is_not_a_drive(self, win32_tokenizer):
        result = win32_tokenizer.tokenize("1:foo")

        assert result.root == ""
        assert result.segments == ["1:foo"]

    def test_split_root(self, win32_tokenizer):
        assert win32_tokenizer.split_root("C:a\\b") == ("C:", "a\\b")
        assert win32_tokenizer.split_root("\\\\srv\\share\\x") == ("\\\\srv\\share\\", "\\x")


class TestInputValidation:
    """Non-text input is rejected with InvalidInputError."""

    @pytest.mark.parametrize("value", [None, b"/bytes", 42, ["a"]])
    def test_rejects_non_text(self, posix_tokenizer, value):
        with pytest.raises(InvalidInputError) as excinfo:
            posix_tokenizer.tokenize(value)
        assert excinfo.value.argument == "path"

    def test_invalid_input_is_value_error(self, posix_tokenizer):
        with pytest.raises(ValueError):
            posix_tokenizer.tokenize(None)
