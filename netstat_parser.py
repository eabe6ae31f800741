"""
netstat section parser: CLI entry point.

Usage:
    python netstat_parser.py [--input <file>] [--format table|json|html|xlsx] [--output <file>] [<netstat args>]

Runs netstat (or reads previously captured output), splits the output
into titled sections, resolves each section's columns, normalizes the
rows into rectangular tables and renders them in the chosen format.

Without --input, every argument this tool does not define is passed to
netstat as-is, so `netstat_parser.py -tunap` runs `netstat -tunap`.  The
tool only takes long options, leaving netstat's short flags (-i, -o, ...)
to netstat.
"""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

import dotenv
from rich.console import Console

from dto.output import ReportResult, SectionResult
from dto.section import Section
from extractors.report import ReportExtractor
from extractors.table import TableNormalizer
from utils.config import LOG_LEVEL, NETSTAT_BINARY, OUTPUT_FORMAT
from utils.console import render_tables
from utils.html import render_report_html
from utils.netstat import iter_lines, stream_netstat
from utils.xlsx import write_workbook

dotenv.load_dotenv()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_FORMATS = ("table", "json", "html", "xlsx")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

NO_DATA_MESSAGE = "No data received from netstat"


# -------------------------------------------------------------------
# Line sources
# -------------------------------------------------------------------


@contextmanager
def _open_source(
    input_path: Optional[str],
    netstat_args: Sequence[str],
) -> Iterator[Iterator[str]]:
    """Yield the report lines from a file, stdin or a live netstat run."""
    if input_path == "-":
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")
        try:
            yield iter_lines(stdin)
        finally:
            # Leave the real stdin open
            stdin.detach()
    elif input_path:
        with open(input_path, "r", encoding="utf-8", errors="replace") as fh:
            yield iter_lines(fh)
    else:
        with stream_netstat(netstat_args, binary=NETSTAT_BINARY) as lines:
            yield lines


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def parse_report(
    input_path: Optional[str] = None,
    netstat_args: Sequence[str] = (),
) -> ReportResult:
    """
    Parse one netstat report and return a structured ``ReportResult``.

    Reads *input_path* if given (``"-"`` for stdin), otherwise runs
    netstat with *netstat_args*.
    """
    source = input_path or " ".join(["netstat", *netstat_args])
    logger.info("Parsing report from: %s", source)

    extractor = ReportExtractor()
    normalizer = TableNormalizer()

    with _open_source(input_path, netstat_args) as lines:
        sections: List[Section] = extractor.extract_all(lines)

    results = [
        SectionResult(section=section, table=normalizer.normalize(section))
        for section in sections
    ]
    logger.info("  -> %d section(s)", len(results))

    return ReportResult(source=source, sections=results)


def write_report(
    result: ReportResult,
    output_format: str,
    output_path: Optional[str] = None,
) -> None:
    """Render *result* in *output_format* to *output_path* or stdout."""
    tables = [r.table for r in result.sections]

    if output_format == "xlsx":
        if not output_path:
            raise ValueError("xlsx output requires --output")
        write_workbook(tables, output_path)
        return

    if output_format == "table":
        if output_path:
            with open(output_path, "w", encoding="utf-8") as f:
                render_tables(tables, console=Console(file=f, width=250))
        else:
            render_tables(tables)
        return

    if output_format == "json":
        text = result.model_dump_json(indent=2)
    elif output_format == "html":
        text = render_report_html(tables, title=result.source)
    else:
        raise ValueError(f"Unknown output format: {output_format!r}")

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Output written to %s", output_path)
    else:
        sys.stdout.write(text + "\n")


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Split netstat output into sections and render them as tables.",
        epilog="Any other arguments are passed through to netstat.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Read captured netstat output from this file ('-' for stdin) "
        "instead of running netstat",
    )
    parser.add_argument(
        "--format",
        default=OUTPUT_FORMAT if OUTPUT_FORMAT in _FORMATS else "table",
        choices=_FORMATS,
        help="Output format (default: table, or $OUTPUT_FORMAT)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output file path (default: stdout; required for xlsx)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level (default: INFO, or $LOG_LEVEL)",
    )
    args, netstat_args = parser.parse_known_args(argv)

    if args.log_level:
        logging.getLogger().setLevel(args.log_level)

    if "--" in netstat_args:
        netstat_args.remove("--")

    if args.format == "xlsx" and not args.output:
        parser.error("--format xlsx requires --output")

    if args.input and args.input != "-" and not os.path.isfile(args.input):
        logger.error("File not found: %s", args.input)
        sys.exit(1)

    try:
        result = parse_report(args.input, netstat_args)
    except OSError as exc:
        logger.error("Error: %s", exc)
        sys.exit(1)

    if not result.sections:
        print(NO_DATA_MESSAGE)
        sys.exit(0)

    write_report(result, args.format, args.output)


if __name__ == "__main__":
    main()
