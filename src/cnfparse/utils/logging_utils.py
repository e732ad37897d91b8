"""
Logging utilities for the cnfparse package.

This module configures Python's built-in logging for the command line tool
and provides a ParseReportLogger that records one structured entry per parsed
file, in JSON Lines or CSV format.
"""

import csv
import json
import logging
import os
import time
from typing import Any

from cnfparse.problem import Problem

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: int = 0, fmt: str = LOG_FORMAT) -> int:
    """
    Set up logging based on verbosity level.

    Args:
        verbosity: Number of -v flags (0: WARNING, 1: INFO, 2+: DEBUG)
        fmt: Log record format

    Returns:
        The logging level that was applied
    """
    levels = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}
    level = levels.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format=fmt)
    logging.getLogger().setLevel(level)
    return level


class ParseReportLogger:
    """
    A logger for structured parse reports.

    Successful parses go to `<name>_parse.<ext>` and failures to
    `<name>_failure.<ext>`, one record per input file.
    """

    FORMAT_JSON = "json"
    FORMAT_CSV = "csv"

    def __init__(self, output_dir: str, name: str = "cnfparse", format_type: str = "json"):
        """
        Initialize the report logger.

        Args:
            output_dir: Directory to save report files in
            name: Prefix of the report file names
            format_type: Format to save reports in ("json" or "csv")
        """
        if format_type not in (self.FORMAT_JSON, self.FORMAT_CSV):
            raise ValueError(f"Unknown report format: {format_type}")

        self.output_dir = output_dir
        self.name = name
        self.format_type = format_type

        os.makedirs(output_dir, exist_ok=True)

        self.files = {}
        self.write_counts = {}

    def path_for(self, event_type: str) -> str:
        ext = ".jsonl" if self.format_type == self.FORMAT_JSON else ".csv"
        return os.path.join(self.output_dir, f"{self.name}_{event_type}{ext}")

    def _get_file(self, event_type: str) -> tuple:
        """
        Get the file handle for a given event type.

        Returns:
            Tuple of (file_handle, is_new); is_new is True when the file was
            empty, so a CSV header still has to be written
        """
        if event_type not in self.files:
            filepath = self.path_for(event_type)
            is_new = not os.path.exists(filepath) or os.path.getsize(filepath) == 0
            file = open(
                filepath,
                "a",
                newline="" if self.format_type == self.FORMAT_CSV else None,
            )
            self.files[event_type] = file
            self.write_counts[event_type] = 0
            return file, is_new

        return self.files[event_type], False

    def _write_event(self, event_type: str, data: dict[str, Any]):
        file, is_new = self._get_file(event_type)

        if self.format_type == self.FORMAT_JSON:
            file.write(json.dumps(data) + "\n")
        else:
            writer = csv.DictWriter(file, fieldnames=list(data.keys()))
            if is_new:
                writer.writeheader()
            writer.writerow(data)
        file.flush()

        self.write_counts[event_type] += 1

    def log_parse(self, source: str, problem: Problem, duration: float):
        """
        Log a successful parse.

        Args:
            source: Path or name of the parsed input
            problem: The parsed problem
            duration: Seconds spent loading and parsing
        """
        data = {"source": source, **problem.summary(), "duration": duration}
        data["timestamp"] = time.time()
        self._write_event("parse", data)

    def log_failure(self, source: str, error: Exception):
        """
        Log a failed parse.

        Args:
            source: Path or name of the input
            error: The exception that aborted the parse
        """
        data = {
            "source": source,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "line": getattr(error, "line", None),
            "timestamp": time.time(),
        }
        self._write_event("failure", data)

    def close(self):
        """Close all open file handles."""
        for file in self.files.values():
            file.close()
        self.files = {}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
