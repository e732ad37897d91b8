"""
Custom exceptions for the cnfparse package.

This module defines the exception classes raised while loading and parsing
DIMACS CNF input, allowing callers to tell apart I/O problems, malformed
headers and clauses, and literals that violate the declared variable range.
"""


class CNFParseError(Exception):
    """Base class for all cnfparse specific exceptions."""

    def __init__(self, message: str | None = None):
        """
        Initialize the exception.

        Args:
            message: Optional error message
        """
        self.message = message
        super().__init__(message)


class CNFIoError(CNFParseError):
    """
    Exception raised when the source buffer could not be obtained.

    This covers missing files as well as read and decompression failures.
    """

    def __init__(self, message: str = "Failed to load file", path: str | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            path: The path that could not be read
        """
        self.path = path

        if path is not None:
            message = f"{message}: {path}"

        super().__init__(message)


class MalformedHeaderError(CNFParseError):
    """
    Exception raised when the problem line is missing or malformed.

    This occurs when the `p` or `cnf` token is absent, or when one of the
    declared counts is not a usable non-negative number.
    """

    def __init__(self, message: str = "Malformed header line", line: int | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            line: Line number where the problem was detected
        """
        self.line = line

        if line is not None:
            message = f"{message} at line {line}"

        super().__init__(message)


class MalformedClauseError(CNFParseError):
    """
    Exception raised when a clause contains something other than integers.

    Stray characters and input that ends before the terminating `0` both
    raise this error when the parser runs in strict mode.
    """

    def __init__(
        self,
        message: str = "Malformed clause",
        clause_index: int | None = None,
        line: int | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            clause_index: Zero-based index of the clause being parsed
            line: Line number where the problem was detected
        """
        self.clause_index = clause_index
        self.line = line

        details = []
        if clause_index is not None:
            details.append(f"clause {clause_index}")
        if line is not None:
            details.append(f"line {line}")
        if details:
            message = f"{message} ({', '.join(details)})"

        super().__init__(message)


class AllocationFailureError(CNFParseError):
    """Exception raised when memory runs out while growing a clause or the clause list."""

    def __init__(
        self, message: str = "Failed to allocate memory", line: int | None = None
    ):
        self.line = line

        if line is not None:
            message = f"{message} at line {line}"

        super().__init__(message)


class LiteralOutOfRangeError(CNFParseError):
    """
    Exception raised when a literal's magnitude falls outside [1, nvars].

    The clause index, line and offending literal are kept as attributes.
    """

    def __init__(
        self,
        message: str = "Invalid literal value",
        literal: int | None = None,
        clause_index: int | None = None,
        line: int | None = None,
        nvars: int | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            literal: The offending literal
            clause_index: Zero-based index of the clause holding the literal
            line: Line number where the clause ended
            nvars: Declared number of variables
        """
        self.literal = literal
        self.clause_index = clause_index
        self.line = line
        self.nvars = nvars

        if literal is not None:
            message = f"{message} {literal}"
            if nvars is not None:
                message = f"{message} (nvars={nvars})"

        details = []
        if clause_index is not None:
            details.append(f"clause {clause_index}")
        if line is not None:
            details.append(f"line {line}")
        if details:
            message = f"{message} in {', '.join(details)}"

        super().__init__(message)


class ClauseCountMismatchError(CNFParseError):
    """Exception raised when the number of clauses differs from the declared count."""

    def __init__(
        self,
        message: str = "Clause count mismatch",
        expected: int | None = None,
        actual: int | None = None,
    ):
        self.expected = expected
        self.actual = actual

        if expected is not None and actual is not None:
            message = f"{message}: expected {expected}, found {actual}"

        super().__init__(message)


class ConfigError(CNFParseError):
    """Exception raised when a configuration value is invalid."""

    def __init__(self, message: str = "Invalid configuration", key: str | None = None):
        self.key = key

        if key is not None:
            message = f"{message} for {key}"

        super().__init__(message)
