"""Command-line interface: argument parsing and report rendering."""

from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence, TextIO

from .counting import LanguageCount, scan

__all__ = [
    "OutputFormat",
    "Report",
    "build_report",
    "render_json",
    "render_table",
    "write_output",
    "parse_args",
    "main",
]

_VERSION = "0.3.14"


class OutputFormat(Enum):
    """How a report is written."""

    JSON = "json"
    TABLE = "table"

    def __str__(self) -> str:
        return self.value


@dataclass
class Report:
    """Per-language counts together with their totals."""

    languages: list[LanguageCount] = field(default_factory=list)
    total_num_files: int = 0
    total_num_lines: int = 0
    elapsed_ms: int | None = None

    def to_dict(self) -> dict:
        """Return the report as plain data; ``elapsed_ms`` only when known."""
        data: dict = {
            "languages": [
                {
                    "language": count.language.value,
                    "num_files": count.files,
                    "num_lines": count.lines,
                }
                for count in self.languages
            ],
            "total_num_files": self.total_num_files,
            "total_num_lines": self.total_num_lines,
        }
        if self.elapsed_ms is not None:
            data["elapsed_ms"] = self.elapsed_ms
        return data


def build_report(
    languages: Iterable[LanguageCount], elapsed_ms: int | None = None
) -> Report:
    """Build a report from per-language counts, adding up the totals."""
    counts = list(languages)
    return Report(
        languages=counts,
        total_num_files=sum(count.files for count in counts),
        total_num_lines=sum(count.lines for count in counts),
        elapsed_ms=elapsed_ms,
    )


def render_json(report: Report) -> str:
    """Render the report as indented JSON."""
    return json.dumps(report.to_dict(), indent=2)


def _format_row(cells: Sequence[str], widths: Sequence[int], right: Sequence[bool]) -> str:
    return "|".join(
        " " + (cell.rjust(width) if align_right else cell.ljust(width)) + " "
        for cell, width, align_right in zip(cells, widths, right)
    )


def render_table(report: Report) -> str:
    """Render the report as a plain text table.

    A total row, set off by a rule, is added unless exactly one language
    was found. The elapsed time follows the table when it is known.
    """
    headers = ("Language", "Files", "Lines")
    rows = [
        (count.language.value, f"{count.files:,}", f"{count.lines:,}")
        for count in report.languages
    ]
    show_total = len(report.languages) != 1
    if show_total:
        rows.append(
            ("Total", f"{report.total_num_files:,}", f"{report.total_num_lines:,}")
        )

    widths = [max(len(row[i]) for row in (headers, *rows)) for i in range(len(headers))]
    rule = "+".join("-" * (width + 2) for width in widths)
    data_align = (False, True, True)

    lines = [_format_row(headers, widths, (False, False, False)), rule]
    lines.extend(_format_row(row, widths, data_align) for row in rows)
    if show_total:
        lines.insert(len(lines) - 1, rule)

    text = "\n".join(lines)
    if report.elapsed_ms is not None:
        text += f"\n\nTook: {report.elapsed_ms}ms"
    return text


def write_output(
    report: Report,
    output_format: OutputFormat = OutputFormat.TABLE,
    stream: TextIO | None = None,
) -> None:
    """Write the report to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    if output_format is OutputFormat.JSON:
        text = render_json(report)
    else:
        text = render_table(report)
    out.write(text + "\n")


def _output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid output format {value!r} (choose 'table' or 'json')"
        ) from None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments into ``output``, ``timing`` and ``path``."""
    parser = argparse.ArgumentParser(prog="lines", description="Count lines of code.")
    parser.add_argument(
        "-o",
        "--output",
        type=_output_format,
        default=OutputFormat.TABLE,
        metavar="FORMAT",
        help='output format ("table" or "json")',
    )
    parser.add_argument(
        "-t", "--timing", action="store_true", help="show timing information"
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {_VERSION}"
    )
    parser.add_argument(
        "path", nargs="?", default=".", help="directory or file to scan"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Scan a path and print the line counts per language."""
    start = time.perf_counter()
    args = parse_args(argv)
    languages = scan(args.path)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    report = build_report(languages, elapsed_ms if args.timing else None)
    write_output(report, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())