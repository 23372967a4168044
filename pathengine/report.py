#!/usr/bin/env python3
"""
Batch path reports.

Reads a list of paths (one per line), runs each through a path engine and
collects the parsed structure, normalized and resolved forms and, optionally,
the path relative to a base. Results go to an Excel workbook plus a JSON
summary of coverage metrics.

Per-path failures (for example a base on another drive) are recorded on the
row instead of aborting the batch.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .engine import PathEngine
from .errors import PathEngineError
from .excel_writer import ReportSheet, write_report_workbook

INPUT_ENCODINGS = ['utf-8-sig', 'cp1252', 'latin-1']


@dataclass
class PathReportRow:
    """Single row of a path report."""

    input: str
    normalized: str = ""
    absolute: bool = False
    root: str = ""
    dir: str = ""
    base: str = ""
    name: str = ""
    ext: str = ""
    resolved: str = ""
    relative: str = ""
    error: Optional[str] = None

    @property
    def changed(self) -> bool:
        """True when normalization rewrote the input."""
        return self.normalized != self.input

    @staticmethod
    def headers() -> List[str]:
        return [
            "input",
            "normalized",
            "absolute",
            "root",
            "dir",
            "base",
            "name",
            "ext",
            "resolved",
            "relative",
            "error",
        ]

    def to_excel_row(self) -> List[str]:
        return [
            self.input,
            self.normalized,
            "yes" if self.absolute else "no",
            self.root,
            self.dir,
            self.base,
            self.name,
            self.ext,
            self.resolved,
            self.relative,
            self.error or "",
        ]


@dataclass
class ReportSummary:
    """Coverage metrics for one report run."""

    dialect: str
    total: int = 0
    absolute: int = 0
    relative: int = 0
    with_extension: int = 0
    changed_by_normalize: int = 0
    errors: int = 0
    extensions: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def read_path_list(input_path: Path | str) -> List[str]:
    """
    Read one path per line, skipping blank lines.

    Only line endings are stripped; leading and trailing spaces are kept
    since they are legal path characters.
    """
    input_path = Path(input_path)
    last_error: Optional[UnicodeDecodeError] = None
    for encoding in INPUT_ENCODINGS:
        try:
            with input_path.open('r', encoding=encoding, newline='') as handle:
                lines = handle.read().splitlines()
            return [line for line in lines if line]
        except UnicodeDecodeError as exc:
            last_error = exc
            continue
    raise ValueError(f"Could not decode {input_path}: {last_error}")


class PathReportBuilder:
    """Runs paths through an engine and turns them into report rows."""

    def __init__(
        self,
        engine: PathEngine,
        cwd: Optional[str] = None,
        relative_to: Optional[str] = None
    ):
        self.engine = engine
        self.cwd = cwd
        self.relative_to = relative_to
        self.logger = logging.getLogger(__name__)

    def build_row(self, path: str) -> PathReportRow:
        """Build one row; engine errors are stored on the row."""
        row = PathReportRow(input=path)
        try:
            parsed = self.engine.parse(path)
            row.normalized = self.engine.normalize(path)
            row.absolute = self.engine.is_absolute(path)
            row.root = parsed.root
            row.dir = parsed.dir
            row.base = parsed.base
            row.name = parsed.name
            row.ext = parsed.ext
            if self.cwd is not None or row.absolute:
                row.resolved = self.engine.resolve(path, cwd=self.cwd)
            if self.relative_to is not None:
                row.relative = self.engine.relative(self.relative_to, path, cwd=self.cwd)
        except PathEngineError as exc:
            row.error = str(exc)
            self.logger.warning("Failed to process %r: %s", path, exc)
        return row

    def build(self, paths: Iterable[str]) -> List[PathReportRow]:
        paths = list(paths)
        self.logger.info("Building %s path report for %s paths", self.engine.name, len(paths))
        rows = [self.build_row(path) for path in paths]
        self.logger.info("Report built: %s rows, %s errors", len(rows), sum(1 for r in rows if r.error))
        return rows

    def summarize(self, rows: List[PathReportRow]) -> ReportSummary:
        extensions = Counter(row.ext.lower() for row in rows if row.ext and not row.error)
        return ReportSummary(
            dialect=self.engine.name,
            total=len(rows),
            absolute=sum(1 for row in rows if row.absolute and not row.error),
            relative=sum(1 for row in rows if not row.absolute and not row.error),
            with_extension=sum(1 for row in rows if row.ext and not row.error),
            changed_by_normalize=sum(1 for row in rows if row.changed and not row.error),
            errors=sum(1 for row in rows if row.error),
            extensions=dict(extensions.most_common()),
        )

    def write(
        self,
        rows: List[PathReportRow],
        output_excel: Path | str,
        output_json: Optional[Path | str] = None
    ) -> ReportSummary:
        """
        Write the workbook (and optional JSON metrics) for ``rows``.

        The workbook has a "Paths" sheet (rows with errors or normalization
        changes highlighted) and an "Extensions" sheet with counts.
        """
        summary = self.summarize(rows)

        sheets = [
            ReportSheet(
                name="Paths",
                headers=PathReportRow.headers(),
                rows=[row.to_excel_row() for row in rows],
                flagged=[bool(row.error) or row.changed for row in rows],
            ),
            ReportSheet(
                name="Extensions",
                headers=["ext", "count"],
                rows=[[ext, count] for ext, count in summary.extensions.items()],
            ),
        ]
        written = write_report_workbook(output_excel, sheets)
        self.logger.info("Wrote report workbook to %s", written)

        if output_json is not None:
            output_json = Path(output_json)
            output_json.parent.mkdir(parents=True, exist_ok=True)
            with output_json.open('w', encoding='utf-8') as handle:
                json.dump(summary.to_dict(), handle, indent=2)
            self.logger.info("Wrote report metrics to %s", output_json)

        return summary
