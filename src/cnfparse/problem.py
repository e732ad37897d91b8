"""
In-memory representation of a parsed CNF problem.

A Problem is created once by the assembler and is read-only afterwards.
Clauses are stored as tuples of literals in source order; no deduplication or
tautology folding is applied.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

Clause = tuple[int, ...]


@dataclass(frozen=True)
class Problem:
    """
    A DIMACS CNF problem.

    Attributes:
        nvars: Declared number of variables
        nclauses: Declared number of clauses
        clauses: Exactly `nclauses` clauses, each a tuple of non-zero literals
    """

    nvars: int
    nclauses: int
    clauses: tuple[Clause, ...] = ()

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    @property
    def num_literals(self) -> int:
        """Total number of literal occurrences across all clauses."""
        return sum(len(clause) for clause in self.clauses)

    @property
    def max_clause_length(self) -> int:
        return max((len(clause) for clause in self.clauses), default=0)

    @property
    def empty_clauses(self) -> list[int]:
        """Indices of clauses with no literals."""
        return [i for i, clause in enumerate(self.clauses) if not clause]

    def variables(self) -> set[int]:
        """Return the set of variables that occur in at least one clause."""
        return {abs(lit) for clause in self.clauses for lit in clause}

    def to_arrays(self, dtype=np.int32) -> tuple[np.ndarray, np.ndarray]:
        """
        Export the clauses as a flat literal array plus clause offsets.

        Clause i occupies literals[offsets[i]:offsets[i + 1]].

        Args:
            dtype: Integer dtype of the literal array

        Returns:
            Tuple of (literals, offsets); offsets has nclauses + 1 entries
        """
        lengths = np.fromiter(
            (len(clause) for clause in self.clauses), dtype=np.int64, count=len(self)
        )
        offsets = np.zeros(len(self) + 1, dtype=np.int64)
        np.cumsum(lengths, out=offsets[1:])

        literals = np.fromiter(
            (lit for clause in self.clauses for lit in clause),
            dtype=dtype,
            count=int(offsets[-1]),
        )
        return literals, offsets

    def summary(self) -> dict[str, Any]:
        return {
            "num_variables": self.nvars,
            "num_clauses": self.nclauses,
            "num_literals": self.num_literals,
            "max_clause_length": self.max_clause_length,
            "num_empty_clauses": len(self.empty_clauses),
        }
