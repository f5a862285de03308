"""File open/create helpers that raise :class:`FileAccessError` on failure.

Every helper returns a regular file object owned by the caller; use it as a
context manager. None of them ever exits the process.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, TextIO, Union

from .config import get_config
from .exceptions import FileAccessError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _open(path: PathLike, mode: str, encoding: Optional[str] = None) -> IO:
    try:
        if "b" in mode:
            return open(path, mode)
        return open(path, mode, encoding=encoding or get_config().encoding)
    except OSError as exc:
        logger.warning("Could not open %s with mode %r: %s", path, mode, exc)
        raise FileAccessError(path, mode, exc.strerror or str(exc)) from exc
    except LookupError as exc:
        logger.warning("Could not open %s: %s", path, exc)
        raise FileAccessError(path, mode, str(exc)) from exc


def open_text_file(path: PathLike, encoding: Optional[str] = None) -> TextIO:
    return _open(path, "r", encoding)


def create_text_file(path: PathLike, encoding: Optional[str] = None) -> TextIO:
    """Create (or truncate) a text file for writing."""
    return _open(path, "w", encoding)


def open_binary_file(path: PathLike) -> IO[bytes]:
    return _open(path, "rb")


def create_binary_file(path: PathLike) -> IO[bytes]:
    """Create (or truncate) a binary file for writing."""
    return _open(path, "wb")


def read_text_file(path: PathLike, encoding: Optional[str] = None) -> str:
    """Return the whole content of a text file as one string."""
    with open_text_file(path, encoding) as f:
        try:
            return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            raise FileAccessError(path, "r", str(exc)) from exc


__all__ = [
    "create_binary_file",
    "create_text_file",
    "open_binary_file",
    "open_text_file",
    "read_text_file",
]
