"""
Unit tests for logging and error handling components.

Tests the ParseReportLogger and exception classes to ensure they work as expected.
"""

import csv
import json
import logging
import os
import shutil
import tempfile
import unittest

from cnfparse.problem import Problem
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
from cnfparse.utils.logging_utils import ParseReportLogger, setup_logging


class TestExceptions(unittest.TestCase):
    """Test cases for custom exception classes."""

    def test_hierarchy(self):
        for cls in (
            CNFIoError,
            MalformedHeaderError,
            MalformedClauseError,
            AllocationFailureError,
            LiteralOutOfRangeError,
            ClauseCountMismatchError,
            ConfigError,
        ):
            self.assertTrue(issubclass(cls, CNFParseError))

    def test_io_error(self):
        error = CNFIoError()
        self.assertEqual(str(error), "Failed to load file")

        error = CNFIoError(path="missing.cnf")
        self.assertEqual(error.path, "missing.cnf")
        self.assertIn("missing.cnf", str(error))

    def test_malformed_header_error(self):
        error = MalformedHeaderError()
        self.assertEqual(str(error), "Malformed header line")

        error = MalformedHeaderError("Expected 'p' for header line", line=3)
        self.assertEqual(error.line, 3)
        self.assertEqual(str(error), "Expected 'p' for header line at line 3")

    def test_malformed_clause_error(self):
        error = MalformedClauseError(clause_index=1, line=4)
        self.assertEqual(str(error), "Malformed clause (clause 1, line 4)")
        self.assertEqual(error.message, "Malformed clause (clause 1, line 4)")

    def test_literal_out_of_range_error(self):
        error = LiteralOutOfRangeError()
        self.assertEqual(str(error), "Invalid literal value")

        error = LiteralOutOfRangeError(literal=-9, clause_index=0, line=2, nvars=3)
        error_str = str(error)
        self.assertIn("-9", error_str)
        self.assertIn("nvars=3", error_str)
        self.assertIn("clause 0", error_str)
        self.assertIn("line 2", error_str)

    def test_clause_count_mismatch_error(self):
        error = ClauseCountMismatchError(expected=3, actual=2)
        self.assertIn("expected 3, found 2", str(error))

    def test_allocation_failure_error(self):
        error = AllocationFailureError(line=12)
        self.assertEqual(error.line, 12)
        self.assertIn("line 12", str(error))

    def test_config_error(self):
        error = ConfigError("Unknown report format 'xml'", key="report.format")
        self.assertEqual(error.key, "report.format")
        self.assertEqual(str(error), "Unknown report format 'xml' for report.format")


class TestParseReportLogger(unittest.TestCase):
    """Test cases for ParseReportLogger class."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.problem = Problem(nvars=3, nclauses=2, clauses=((1, -2), (2, 3, -1)))

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            ParseReportLogger(self.test_dir, format_type="xml")

    def test_json_reports(self):
        with ParseReportLogger(self.test_dir, name="json_test") as report:
            report.log_parse("a.cnf", self.problem, 0.25)
            report.log_failure("b.cnf", MalformedHeaderError(line=1))

        with open(os.path.join(self.test_dir, "json_test_parse.jsonl")) as f:
            parse_data = json.loads(f.readline())
        self.assertEqual(parse_data["source"], "a.cnf")
        self.assertEqual(parse_data["num_clauses"], 2)
        self.assertEqual(parse_data["num_literals"], 5)
        self.assertEqual(parse_data["duration"], 0.25)

        with open(os.path.join(self.test_dir, "json_test_failure.jsonl")) as f:
            failure_data = json.loads(f.readline())
        self.assertEqual(failure_data["error_type"], "MalformedHeaderError")
        self.assertEqual(failure_data["line"], 1)

    def test_csv_reports_append(self):
        for _ in range(2):
            report = ParseReportLogger(self.test_dir, name="csv_test", format_type="csv")
            report.log_parse("a.cnf", self.problem, 0.1)
            report.close()

        with open(os.path.join(self.test_dir, "csv_test_parse.csv"), newline="") as f:
            rows = list(csv.DictReader(f))
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[0]["num_variables"], "3")


class TestSetupLogging(unittest.TestCase):
    """Test cases for setup_logging."""

    def tearDown(self):
        logging.getLogger().setLevel(logging.WARNING)

    def test_verbosity_levels(self):
        self.assertEqual(setup_logging(0), logging.WARNING)
        self.assertEqual(setup_logging(1), logging.INFO)
        self.assertEqual(setup_logging(2), logging.DEBUG)
        self.assertEqual(setup_logging(5), logging.DEBUG)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
