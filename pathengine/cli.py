#!/usr/bin/env python3
"""
Command line front end for the path engine.

One subcommand per engine operation, plus:
- report: parse a list of paths (one per line) into an Excel workbook and
  JSON metrics
- validate-dictionaries: check the packaged dialect tables

Settings are merged with precedence (lowest first): built-in defaults, an
optional JSON file given with --config, then command line flags. The CLI is
the embedding application, so it is the one place that supplies the process
working directory as ``cwd``.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from .dialect import DIALECTS_DICTIONARY, check_dialect_tables
from .dictionary_loader import DictionaryLoader
from .engine import PathEngine, get_engine
from .errors import InvalidInputError, PathEngineError
from .report import PathReportBuilder, read_path_list

DEFAULT_CONFIG: Dict[str, Any] = {
    "dialect": "default",
    "cwd": None,
    "relative_to": None,
    "log_level": "WARNING",
}

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str], args: Optional[argparse.Namespace] = None) -> Dict[str, Any]:
    """
    Merge defaults, an optional JSON config file and command line flags.

    Unknown keys in the file are ignored; flags left unset on the command line
    do not override file values.

    Raises:
        InvalidInputError: If the config file does not hold a JSON object
    """
    merged = dict(DEFAULT_CONFIG)

    if config_path:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise InvalidInputError(f"cannot read config file {config_path}: {exc}", argument="config") from exc
        if not isinstance(file_config, dict):
            raise InvalidInputError(f"config file {config_path} must contain a JSON object", argument="config")
        merged.update({key: value for key, value in file_config.items() if key in DEFAULT_CONFIG})

    if args is not None:
        for key in ("dialect", "cwd", "relative_to"):
            value = getattr(args, key, None)
            if value is not None:
                merged[key] = value
        if getattr(args, "verbose", False):
            merged["log_level"] = "DEBUG"

    return merged


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='pathengine',
        description='Lexical path manipulation for POSIX and win32 path dialects'
    )
    parser.add_argument(
        '--dialect',
        choices=['default', 'posix', 'win32'],
        help='Path dialect (default: host platform)'
    )
    parser.add_argument(
        '--cwd',
        help='Absolute base for resolving relative paths (default: process working directory)'
    )
    parser.add_argument(
        '--config',
        help='JSON file with default settings (dialect, cwd, relative_to, log_level)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    for name, help_text in (
        ('normalize', 'Normalize a path'),
        ('dirname', 'Print the directory part of a path'),
        ('extname', 'Print the extension of a path'),
        ('is-absolute', 'Print whether a path is absolute'),
        ('namespace', 'Print the long-path namespaced form (win32)'),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument('path')

    cmd = sub.add_parser('parse', help='Print the parsed structure of a path as JSON')
    cmd.add_argument('path')

    cmd = sub.add_parser('basename', help='Print the final segment of a path')
    cmd.add_argument('path')
    cmd.add_argument('--ext', help='Suffix to strip from the result')

    cmd = sub.add_parser('join', help='Join segments and normalize')
    cmd.add_argument('segments', nargs='*')

    cmd = sub.add_parser('resolve', help='Resolve segments into an absolute path')
    cmd.add_argument('segments', nargs='*')

    cmd = sub.add_parser('relative', help='Print the relative path from one location to another')
    cmd.add_argument('from_path')
    cmd.add_argument('to_path')

    cmd = sub.add_parser('format', help='Build a path from its components')
    for field_name in ('root', 'dir', 'base', 'name', 'ext'):
        cmd.add_argument(f'--{field_name}')

    sub.add_parser('constants', help='Print the separator and delimiter as JSON')

    cmd = sub.add_parser('report', help='Parse a list of paths into an Excel report')
    cmd.add_argument('--input', required=True, help='Text file with one path per line')
    cmd.add_argument('--output-excel', required=True, help='Output .xlsx path')
    cmd.add_argument('--output-json', help='Output JSON metrics path')
    cmd.add_argument('--relative-to', dest='relative_to', help='Base for the "relative" column')

    sub.add_parser('validate-dictionaries', help='Validate the packaged dialect tables')

    return parser.parse_args(argv)


def _print(value: Any) -> int:
    print(value)
    return 0


def _cmd_report(engine: PathEngine, args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    try:
        paths = read_path_list(args.input)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    builder = PathReportBuilder(engine, cwd=settings["cwd"], relative_to=settings["relative_to"])
    rows = builder.build(paths)
    summary = builder.write(rows, args.output_excel, args.output_json)
    print(json.dumps(summary.to_dict(), indent=2))
    return 0


def _cmd_validate(engine: PathEngine, args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    data = DictionaryLoader.load_dictionary(DIALECTS_DICTIONARY, use_cache=False)
    if data is None:
        print(f"error: cannot load {DictionaryLoader.get_dictionary_path(DIALECTS_DICTIONARY)}", file=sys.stderr)
        return 1

    errors = DictionaryLoader.validate(data, DIALECTS_DICTIONARY) or check_dialect_tables(data)
    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        return 1
    print(f"{DIALECTS_DICTIONARY}: OK ({len(data['dialects'])} dialects)")
    return 0


Handler = Callable[[PathEngine, argparse.Namespace, Dict[str, Any]], int]

COMMANDS: Dict[str, Handler] = {
    'normalize': lambda engine, args, settings: _print(engine.normalize(args.path)),
    'join': lambda engine, args, settings: _print(engine.join(*args.segments)),
    'resolve': lambda engine, args, settings: _print(engine.resolve(*args.segments, cwd=settings["cwd"])),
    'relative': lambda engine, args, settings: _print(
        engine.relative(args.from_path, args.to_path, cwd=settings["cwd"])
    ),
    'parse': lambda engine, args, settings: _print(engine.parse(args.path).to_json()),
    'format': lambda engine, args, settings: _print(engine.format({
        key: getattr(args, key) for key in ('root', 'dir', 'base', 'name', 'ext')
    })),
    'basename': lambda engine, args, settings: _print(engine.basename(args.path, args.ext)),
    'dirname': lambda engine, args, settings: _print(engine.dirname(args.path)),
    'extname': lambda engine, args, settings: _print(engine.extname(args.path)),
    'is-absolute': lambda engine, args, settings: _print(json.dumps(engine.is_absolute(args.path))),
    'namespace': lambda engine, args, settings: _print(engine.to_namespaced_path(
        args.path, cwd=settings["cwd"]
    )),
    'constants': lambda engine, args, settings: _print(json.dumps({
        "dialect": engine.name, "sep": engine.sep, "delimiter": engine.delimiter
    })),
    'report': _cmd_report,
    'validate-dictionaries': _cmd_validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)

    try:
        settings = load_config(args.config, args)
    except PathEngineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, str(settings["log_level"]).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if settings["cwd"] is None:
        settings["cwd"] = os.getcwd()

    try:
        engine = get_engine(settings["dialect"])
        logger.debug("Running %s with %r (cwd=%s)", args.command, engine, settings["cwd"])
        return COMMANDS[args.command](engine, args, settings)
    except PathEngineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
