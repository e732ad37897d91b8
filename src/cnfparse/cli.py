#!/usr/bin/env python
"""
Command-line interface for parsing DIMACS CNF files.
"""
import argparse
import logging
import sys
import time

from cnfparse.config import ParserConfig
from cnfparse.grammar import parse_problem
from cnfparse.loader import load_file
from cnfparse.utils.exceptions import CNFParseError
from cnfparse.utils.logging_utils import ParseReportLogger, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Parse a DIMACS CNF file and print a summary"
    )

    parser.add_argument("file", type=str, help="CNF file to parse (plain or .gz)")

    parser.add_argument(
        "--config", type=str, default=None, help="YAML configuration file"
    )

    parser.add_argument(
        "--lenient",
        action="store_true",
        help="End a clause at malformed content instead of failing",
    )

    parser.add_argument(
        "--report-dir",
        type=str,
        default=None,
        help="Append a structured parse report to this directory",
    )

    parser.add_argument(
        "--report-format",
        default=None,
        choices=["json", "csv"],
        help="Format of the parse report (default: json)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase verbosity (can be used multiple times)",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = ParserConfig(args.config)
        if args.lenient:
            config.set("parser.strict", False)
        if args.report_dir:
            config.set("report.dir", args.report_dir)
        if args.report_format:
            config.set("report.format", args.report_format)
        config.validate()
    except CNFParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.verbose, config.get("logging.format"))
    if not args.verbose:
        logging.getLogger().setLevel(config.log_level)

    report = None
    if config.get("report.dir"):
        report = ParseReportLogger(
            config.get("report.dir"),
            name=config.get("report.name"),
            format_type=config.get("report.format"),
        )

    start = time.perf_counter()
    try:
        problem = parse_problem(load_file(args.file), config)
    except CNFParseError as e:
        logger.debug(f"Parse of {args.file} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        if report:
            report.log_failure(args.file, e)
            report.close()
        return 1
    duration = time.perf_counter() - start

    logger.info(f"Parsed {args.file} in {duration:.4f}s")
    if report:
        report.log_parse(args.file, problem, duration)
        report.close()

    print("Parsed CNF successfully.")
    print(f"Number of clauses: {problem.nclauses}.")
    print(f"Number of variables: {problem.nvars}.")
    print(f"Number of literals: {problem.num_literals}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
