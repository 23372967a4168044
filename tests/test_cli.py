#!/usr/bin/env python3
"""
Tests for the command line front end.
"""

from __future__ import annotations

import json

import pytest

from pathengine.cli import DEFAULT_CONFIG, load_config, main, parse_arguments
from pathengine.errors import InvalidInputError


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out.strip(), captured.err.strip()


class TestCommands:

    def test_normalize(self, capsys):
        assert run(capsys, "--dialect", "posix", "normalize", "docs/../src/./app//utils") == (0, "src/app/utils", "")

    def test_join(self, capsys):
        code, out, _ = run(capsys, "--dialect", "win32", "join", "C:/users", "docs", "file.txt")

        assert code == 0
        assert out == "C:\\users\\docs\\file.txt"

    def test_parse(self, capsys):
        code, out, _ = run(capsys, "--dialect", "posix", "parse", "/home/user/report.pdf")

        assert code == 0
        assert json.loads(out) == {
            "root": "/", "dir": "/home/user", "base": "report.pdf", "ext": ".pdf", "name": "report",
        }

    def test_format(self, capsys):
        code, out, _ = run(capsys, "--dialect", "posix", "format", "--dir", "/a", "--name", "b", "--ext", "txt")

        assert code == 0
        assert out == "/a/b.txt"

    def test_basename_with_ext(self, capsys):
        assert run(capsys, "--dialect", "posix", "basename", "/a/b.json", "--ext", ".json")[1] == "b"

    def test_dirname_and_extname(self, capsys):
        assert run(capsys, "--dialect", "posix", "dirname", "/a/b.json")[1] == "/a"
        assert run(capsys, "--dialect", "posix", "extname", "/a/b.json")[1] == ".json"

    def test_is_absolute(self, capsys):
        assert run(capsys, "--dialect", "win32", "is-absolute", "C:\\a")[1] == "true"
        assert run(capsys, "--dialect", "win32", "is-absolute", "C:a")[1] == "false"

    def test_namespace(self, capsys):
        assert run(capsys, "--dialect", "win32", "namespace", "C:\\a")[1] == "\\\\?\\C:\\a"

    def test_namespace_resolves_relative_path_against_cwd(self, capsys):
        code, out, _ = run(capsys, "--dialect", "win32", "--cwd", "C:\\work", "namespace", "rel\\x")

        assert code == 0
        assert out == "\\\\?\\C:\\work\\rel\\x"

    def test_resolve_uses_cwd_flag(self, capsys):
        assert run(capsys, "--dialect", "posix", "--cwd", "/srv", "resolve", "www", "../site") == (0, "/srv/site", "")

    def test_resolve_defaults_to_process_cwd(self, capsys, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        code, out, _ = run(capsys, "--dialect", "posix", "resolve", "x")

        assert code == 0
        assert out.endswith("/x")

    def test_relative(self, capsys):
        assert run(capsys, "--dialect", "posix", "relative", "/data/docs", "/data/img/a.jpg")[1] == "../img/a.jpg"

    def test_relative_across_drives_fails(self, capsys):
        code, out, err = run(capsys, "--dialect", "win32", "--cwd", "C:\\", "relative", "C:\\a", "D:\\b")

        assert code == 1
        assert out == ""
        assert err.startswith("error: cannot compute a relative path")

    def test_constants(self, capsys):
        code, out, _ = run(capsys, "--dialect", "win32", "constants")

        assert code == 0
        assert json.loads(out) == {"dialect": "win32", "sep": "\\", "delimiter": ";"}

    def test_validate_dictionaries(self, capsys):
        assert run(capsys, "validate-dictionaries") == (0, "dialects.json: OK (2 dialects)", "")

    def test_report(self, capsys, tmp_path):
        input_path = tmp_path / "paths.txt"
        input_path.write_text("/a/b.txt\ndocs//c.md\n", encoding="utf-8")
        excel_path = tmp_path / "report.xlsx"
        json_path = tmp_path / "report.json"

        code, out, _ = run(
            capsys, "--dialect", "posix", "--cwd", "/base", "report",
            "--input", str(input_path),
            "--output-excel", str(excel_path),
            "--output-json", str(json_path),
            "--relative-to", "/base",
        )

        assert code == 0
        assert excel_path.exists()
        assert json.loads(out)["total"] == 2
        assert json.loads(json_path.read_text(encoding="utf-8"))["changed_by_normalize"] == 1

    def test_report_missing_input(self, capsys, tmp_path):
        code, _, err = run(
            capsys, "report", "--input", str(tmp_path / "missing.txt"),
            "--output-excel", str(tmp_path / "out.xlsx"),
        )

        assert code == 1
        assert err.startswith("error:")

    def test_unknown_dialect_is_rejected_by_argparse(self):
        with pytest.raises(SystemExit):
            parse_arguments(["--dialect", "vms", "normalize", "a"])


class TestConfig:

    def test_defaults(self):
        assert load_config(None) == DEFAULT_CONFIG

    def test_file_then_flags(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"dialect": "win32", "cwd": "C:\\work", "unknown": 1}), encoding="utf-8")

        from_file = load_config(str(config_path))
        assert from_file["dialect"] == "win32"
        assert from_file["cwd"] == "C:\\work"
        assert "unknown" not in from_file

        args = parse_arguments(["--dialect", "posix", "-v", "normalize", "a"])
        merged = load_config(str(config_path), args)
        assert merged["dialect"] == "posix"
        assert merged["cwd"] == "C:\\work"
        assert merged["log_level"] == "DEBUG"

    def test_config_file_drives_cli(self, capsys, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"dialect": "win32", "cwd": "D:\\work"}), encoding="utf-8")

        assert run(capsys, "--config", str(config_path), "resolve", "x")[1] == "D:\\work\\x"

    @pytest.mark.parametrize("content", ["[1, 2]", "{not json"])
    def test_bad_config_file(self, tmp_path, content):
        config_path = tmp_path / "config.json"
        config_path.write_text(content, encoding="utf-8")

        with pytest.raises(InvalidInputError):
            load_config(str(config_path))

    def test_bad_config_file_exits_with_error(self, capsys, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text("[]", encoding="utf-8")

        code, _, err = run(capsys, "--config", str(config_path), "constants")

        assert code == 1
        assert "JSON object" in err
