"""
cnfparse: a DIMACS CNF reader producing immutable in-memory problems.
"""

from typing import BinaryIO, TextIO

from cnfparse.config import ParserConfig
from cnfparse.grammar import parse_clause, parse_header, parse_problem
from cnfparse.loader import decode, load_file
from cnfparse.problem import Clause, Problem
from cnfparse.scanner import Cursor, ScanKind, ScanResult, read_literal, skip_insignificant
from cnfparse.utils.exceptions import (
    AllocationFailureError,
    ClauseCountMismatchError,
    CNFIoError,
    CNFParseError,
    ConfigError,
    LiteralOutOfRangeError,
    MalformedClauseError,
    MalformedHeaderError,
)

__version__ = "0.1.0"


def parse_dimacs(
    source: str | bytes | TextIO | BinaryIO, config: ParserConfig | None = None
) -> Problem:
    """
    Parse a DIMACS CNF formula.

    Args:
        source: DIMACS content as a string, bytes, or text or binary file object
        config: Parser configuration (strict mode by default)

    Returns:
        The parsed Problem
    """
    if not isinstance(source, (str, bytes)):
        source = source.read()
    if isinstance(source, bytes):
        source = decode(source)
    return parse_problem(source, config)


def load_cnf_file(file_path: str, config: ParserConfig | None = None) -> Problem:
    """
    Load and parse a DIMACS CNF file.

    Raises:
        CNFIoError: If the file doesn't exist or cannot be read
        CNFParseError: If the content is invalid
    """
    return parse_problem(load_file(file_path), config)


__all__ = [
    "parse_dimacs",
    "load_cnf_file",
    "parse_problem",
    "parse_header",
    "parse_clause",
    "read_literal",
    "skip_insignificant",
    "load_file",
    "Cursor",
    "ScanKind",
    "ScanResult",
    "Clause",
    "Problem",
    "ParserConfig",
    "CNFParseError",
    "CNFIoError",
    "MalformedHeaderError",
    "MalformedClauseError",
    "AllocationFailureError",
    "LiteralOutOfRangeError",
    "ClauseCountMismatchError",
    "ConfigError",
]
