"""
Structural validation and assembly of parsed clauses into a Problem.
"""

import logging
from collections.abc import Sequence

from cnfparse.problem import Clause, Problem
from cnfparse.utils.exceptions import (
    AllocationFailureError,
    ClauseCountMismatchError,
    LiteralOutOfRangeError,
)

logger = logging.getLogger(__name__)


def check_clause(
    clause: Clause, nvars: int, index: int, line: int | None = None
) -> None:
    """
    Check that every literal of a clause refers to a declared variable.

    Args:
        clause: Literals of the clause, in source order
        nvars: Declared number of variables
        index: Zero-based clause index, used in the diagnostic
        line: Line on which the clause ended, if known

    Raises:
        LiteralOutOfRangeError: For the first literal with |lit| < 1 or |lit| > nvars
    """
    for lit in clause:
        var = abs(lit)
        if var < 1 or var > nvars:
            raise LiteralOutOfRangeError(
                literal=lit, clause_index=index, line=line, nvars=nvars
            )


def assemble_problem(
    nvars: int, nclauses: int, clauses: Sequence[Sequence[int]]
) -> Problem:
    """
    Freeze validated clauses into a Problem.

    Args:
        nvars: Declared number of variables
        nclauses: Declared number of clauses
        clauses: The parsed clauses; must contain exactly `nclauses` entries

    Returns:
        The immutable Problem

    Raises:
        ClauseCountMismatchError: If len(clauses) != nclauses
        AllocationFailureError: If the frozen copy cannot be allocated
    """
    if len(clauses) != nclauses:
        raise ClauseCountMismatchError(expected=nclauses, actual=len(clauses))

    try:
        frozen = tuple(tuple(clause) for clause in clauses)
    except MemoryError as e:
        raise AllocationFailureError("Failed to allocate memory for clauses") from e

    logger.debug(f"Assembled problem with {nvars} variables and {nclauses} clauses")
    return Problem(nvars=nvars, nclauses=nclauses, clauses=frozen)
