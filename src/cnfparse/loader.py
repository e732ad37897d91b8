"""
Loading of DIMACS CNF files into an in-memory text buffer.
"""

import gzip
import logging
import os
from pathlib import Path

from cnfparse.utils.exceptions import CNFIoError

logger = logging.getLogger(__name__)

# latin-1 maps every byte to one character, so offsets match the raw file
ENCODING = "latin-1"


def decode(data: bytes) -> str:
    return data.decode(ENCODING)


def load_file(file_path: str | os.PathLike) -> str:
    """
    Read a CNF file completely into memory.

    Files ending in `.gz` are decompressed transparently.

    Args:
        file_path: Path to the CNF file

    Returns:
        The file contents as a string

    Raises:
        CNFIoError: If the file doesn't exist or cannot be read
    """
    path = Path(file_path)
    if not path.is_file():
        raise CNFIoError("CNF file not found", path=str(path))

    try:
        if path.suffix.lower() == ".gz":
            with gzip.open(path, "rb") as f:
                data = f.read()
        else:
            data = path.read_bytes()
    except (OSError, EOFError) as e:
        raise CNFIoError(f"Failed to load file ({e})", path=str(path)) from e

    logger.debug(f"Loaded {len(data)} bytes from {path}")
    return decode(data)
