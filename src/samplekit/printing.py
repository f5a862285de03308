from __future__ import annotations

import sys
from itertools import islice
from typing import Any, Iterable, Mapping, Optional, TextIO

from .config import get_config


def format_item(value: Any) -> str:
    """String form used by the print helpers; pairs render as ``[first, second]``."""
    if isinstance(value, tuple) and len(value) == 2:
        return f"[{format_item(value[0])}, {format_item(value[1])}]"
    return str(value)


def dash_line(file: Optional[TextIO] = None, width: Optional[int] = None) -> None:
    """Write a newline, a row of dashes and another newline."""
    out = file if file is not None else sys.stdout
    if width is None:
        width = get_config().dash_width
    out.write("\n" + "-" * width + "\n")


def print_items(items: Iterable[Any], sep: Optional[str] = None, file: Optional[TextIO] = None) -> None:
    """Write every item followed by ``sep``, then close with a dash line.

    ``sep`` defaults to the configured separator and ``file`` to stdout.
    A mapping prints its ``[key, value]`` pairs.
    """
    if isinstance(items, Mapping):
        items = items.items()
    out = file if file is not None else sys.stdout
    if sep is None:
        sep = get_config().separator
    for item in items:
        out.write(format_item(item))
        out.write(sep)
    dash_line(out)


def print_range(
    items: Iterable[Any],
    start: int = 0,
    stop: Optional[int] = None,
    sep: Optional[str] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Like :func:`print_items` but only for positions ``start`` to ``stop``."""
    if isinstance(items, Mapping):
        items = items.items()
    print_items(islice(items, start, stop), sep=sep, file=file)


__all__ = ["dash_line", "format_item", "print_items", "print_range"]
