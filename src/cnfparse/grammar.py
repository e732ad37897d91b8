"""
DIMACS CNF grammar on top of the scanner.

Parsing walks a small state machine: the header is read first, then exactly
`nclauses` zero-terminated clauses in source order. Each clause is
range-checked as soon as it is read, so the first offending literal in source
order is the one reported. Any error aborts the parse; no partial Problem is
ever returned.
"""

import logging
from typing import NamedTuple

from cnfparse.config import ParserConfig
from cnfparse.problem import Clause, Problem
from cnfparse.scanner import Cursor, ScanKind, read_literal, skip_insignificant
from cnfparse.utils.exceptions import (
    AllocationFailureError,
    LiteralOutOfRangeError,
    MalformedClauseError,
    MalformedHeaderError,
)
from cnfparse.validator import assemble_problem, check_clause

logger = logging.getLogger(__name__)


class Header(NamedTuple):
    nvars: int
    nclauses: int
    line: int


def _describe(cursor: Cursor) -> str:
    char = cursor.peek()
    return "end of input" if char == "" else f"unexpected character {char!r}"


def _max_digits(config: ParserConfig) -> int:
    return len(str(config.max_count))


def _read_count(cursor: Cursor, name: str, config: ParserConfig) -> int:
    skip_insignificant(cursor)
    result = read_literal(cursor, _max_digits(config))
    if result.kind is ScanKind.TOO_LARGE:
        raise MalformedHeaderError(
            f"Malformed header line, {name} exceeds {config.max_count}",
            line=cursor.line,
        )
    if not result.is_number:
        raise MalformedHeaderError(
            f"Malformed header line, expected {name} but found {_describe(cursor)}",
            line=cursor.line,
        )
    if result.value < 0:
        raise MalformedHeaderError(
            f"Malformed header line, negative {name} {result.value}", line=cursor.line
        )
    if result.value > config.max_count:
        raise MalformedHeaderError(
            f"Malformed header line, {name} {result.value} exceeds {config.max_count}",
            line=cursor.line,
        )
    return result.value


def parse_header(cursor: Cursor, config: ParserConfig | None = None) -> Header:
    """
    Parse the problem line `p cnf <nvars> <nclauses>`.

    Args:
        cursor: Cursor positioned before the header; comments are skipped
        config: Parser configuration

    Returns:
        Header with the declared counts and the line they were read on

    Raises:
        MalformedHeaderError: If `p` or `cnf` is missing or a count is unusable
    """
    config = config or ParserConfig()

    skip_insignificant(cursor)
    if cursor.peek() != "p":
        raise MalformedHeaderError("Expected 'p' for header line", line=cursor.line)
    cursor.advance()

    skip_insignificant(cursor)
    if not cursor.startswith("cnf"):
        raise MalformedHeaderError(
            "Malformed header line, missing 'cnf'", line=cursor.line
        )
    cursor.advance(3)

    nvars = _read_count(cursor, "variable count", config)
    nclauses = _read_count(cursor, "clause count", config)

    logger.debug(f"Parsed header: {nvars} variables, {nclauses} clauses")
    return Header(nvars=nvars, nclauses=nclauses, line=cursor.line)


def _read_clause(
    cursor: Cursor, config: ParserConfig, index: int
) -> tuple[Clause, str | None]:
    """
    Read one clause.

    Returns:
        Tuple of (clause, recovery); recovery describes the malformed content
        that ended the clause in lenient mode, or is None
    """
    lits: list[int] = []
    recovery = None
    max_digits = _max_digits(config)

    try:
        while True:
            result = read_literal(cursor, max_digits)
            if result.kind is ScanKind.TERMINATOR:
                break
            if result.kind is ScanKind.TOO_LARGE:
                raise LiteralOutOfRangeError(
                    f"Literal exceeds {config.max_count}",
                    clause_index=index,
                    line=cursor.line,
                )
            if result.kind is ScanKind.NOT_A_NUMBER:
                if config.strict:
                    raise MalformedClauseError(
                        f"Malformed clause, {_describe(cursor)}",
                        clause_index=index,
                        line=cursor.line,
                    )
                recovery = f"{_describe(cursor)} at line {cursor.line}"
                break
            lits.append(result.value)
        clause = tuple(lits)
    except MemoryError as e:
        raise AllocationFailureError(line=cursor.line) from e

    return clause, recovery


def parse_clause(
    cursor: Cursor, config: ParserConfig | None = None, index: int = 0
) -> Clause:
    """
    Parse one clause: literals up to and including the terminating `0`.

    In strict mode anything that is not an integer (stray characters, or the
    end of input before the terminator) raises MalformedClauseError. In
    lenient mode it silently ends the clause, as the classic C readers do.

    Args:
        cursor: Cursor positioned before the clause
        config: Parser configuration
        index: Zero-based index of the clause, used in diagnostics

    Returns:
        The clause literals in source order; may be empty
    """
    clause, recovery = _read_clause(cursor, config or ParserConfig(), index)
    if recovery:
        logger.warning(f"Clause {index} ended by {recovery}")
    return clause


def parse_problem(
    source: str | Cursor, config: ParserConfig | None = None
) -> Problem:
    """
    Parse a complete DIMACS CNF buffer.

    Args:
        source: The input text, or a Cursor over it
        config: Parser configuration

    Returns:
        The assembled, immutable Problem

    Raises:
        MalformedHeaderError: If the problem line is invalid
        MalformedClauseError: If a clause is malformed (strict mode)
        LiteralOutOfRangeError: If a literal refers to an undeclared variable
        AllocationFailureError: If memory runs out while building clauses
    """
    config = config or ParserConfig()
    cursor = source if isinstance(source, Cursor) else Cursor(source)

    header = parse_header(cursor, config)

    clauses: list[Clause] = []
    first_recovery = None
    recovered = 0
    for index in range(header.nclauses):
        clause, recovery = _read_clause(cursor, config, index)
        if recovery:
            recovered += 1
            if first_recovery is None:
                first_recovery = f"clause {index} ended by {recovery}"
        check_clause(clause, header.nvars, index, line=cursor.line)
        try:
            clauses.append(clause)
        except MemoryError as e:
            raise AllocationFailureError(
                "Failed to allocate memory for clauses", line=cursor.line
            ) from e

    if recovered:
        logger.warning(
            f"{recovered} clause(s) ended by malformed content; first: {first_recovery}"
        )

    trailing = cursor.copy()
    skip_insignificant(trailing)
    if not trailing.at_end:
        logger.debug(
            f"Ignoring content after clause {header.nclauses} from line {trailing.line}"
        )

    return assemble_problem(header.nvars, header.nclauses, clauses)
