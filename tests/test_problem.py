"""
Unit tests for the Problem data model and the validator/assembler.
"""

import dataclasses
import unittest

import numpy as np

from cnfparse.problem import Problem
from cnfparse.validator import assemble_problem, check_clause
from cnfparse.utils.exceptions import (
    AllocationFailureError,
    ClauseCountMismatchError,
    LiteralOutOfRangeError,
)


class TestCheckClause(unittest.TestCase):
    """Test cases for per-clause range validation."""

    def test_in_range(self):
        check_clause((1, -2, 3), nvars=3, index=0)

    def test_empty_clause_is_valid(self):
        check_clause((), nvars=0, index=0)

    def test_above_range(self):
        with self.assertRaises(LiteralOutOfRangeError) as ctx:
            check_clause((1, -4), nvars=3, index=2, line=7)
        error = ctx.exception
        self.assertEqual(error.literal, -4)
        self.assertEqual(error.clause_index, 2)
        self.assertEqual(error.line, 7)
        self.assertIn("clause 2", str(error))
        self.assertIn("line 7", str(error))

    def test_zero_literal_is_out_of_range(self):
        with self.assertRaises(LiteralOutOfRangeError):
            check_clause((1, 0), nvars=3, index=0)


class ExhaustedClause:
    """A clause whose copy fails as if memory were exhausted."""

    def __iter__(self):
        raise MemoryError


class TestAssembleProblem(unittest.TestCase):
    """Test cases for assemble_problem."""

    def test_assembles_tuples(self):
        problem = assemble_problem(3, 2, [[1, -2], [3]])
        self.assertEqual(problem.clauses, ((1, -2), (3,)))
        self.assertIsInstance(problem.clauses[0], tuple)

    def test_count_mismatch(self):
        with self.assertRaises(ClauseCountMismatchError) as ctx:
            assemble_problem(3, 2, [[1]])
        self.assertEqual(ctx.exception.expected, 2)
        self.assertEqual(ctx.exception.actual, 1)

    def test_memory_error_becomes_allocation_failure(self):
        with self.assertRaises(AllocationFailureError):
            assemble_problem(3, 2, [[1], ExhaustedClause()])


class TestProblem(unittest.TestCase):
    """Test cases for the Problem class."""

    def setUp(self):
        self.problem = Problem(nvars=4, nclauses=3, clauses=((1, -2), (2, 3, -1), ()))

    def test_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.problem.nvars = 10

    def test_statistics(self):
        self.assertEqual(len(self.problem), 3)
        self.assertEqual(self.problem.num_literals, 5)
        self.assertEqual(self.problem.max_clause_length, 3)
        self.assertEqual(self.problem.empty_clauses, [2])
        self.assertEqual(self.problem.variables(), {1, 2, 3})

    def test_summary(self):
        summary = self.problem.summary()
        self.assertEqual(summary["num_variables"], 4)
        self.assertEqual(summary["num_clauses"], 3)
        self.assertEqual(summary["num_literals"], 5)
        self.assertEqual(summary["num_empty_clauses"], 1)

    def test_to_arrays(self):
        literals, offsets = self.problem.to_arrays()
        np.testing.assert_array_equal(literals, [1, -2, 2, 3, -1])
        np.testing.assert_array_equal(offsets, [0, 2, 5, 5])
        self.assertEqual(literals.dtype, np.int32)
        self.assertEqual(list(literals[offsets[1] : offsets[2]]), [2, 3, -1])

    def test_to_arrays_without_clauses(self):
        literals, offsets = Problem(nvars=0, nclauses=0).to_arrays(dtype=np.int64)
        self.assertEqual(literals.shape, (0,))
        np.testing.assert_array_equal(offsets, [0])


if __name__ == "__main__":
    unittest.main()
