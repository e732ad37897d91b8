"""
Utilities for the cnfparse package.
"""

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

__all__ = [
    "CNFParseError",
    "CNFIoError",
    "MalformedHeaderError",
    "MalformedClauseError",
    "AllocationFailureError",
    "LiteralOutOfRangeError",
    "ClauseCountMismatchError",
    "ConfigError",
]
