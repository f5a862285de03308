"""Container population helpers.

Both uniqueness-based paths (``rfill`` on a set-like container and
``fill_unique``) can only finish when the producer is able to yield at least
``n`` distinct values. Asking for more is a caller error: with the stall
ceiling disabled (``max_stalled_draws=None``) such a call never returns.
With the ceiling enabled, which is the default, it raises
:class:`~samplekit.exceptions.CapacityExceededError` once that many
consecutive draws have failed to add a new value.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, List, MutableSequence, Optional, Set, TypeVar, Union

from .config import get_config
from .exceptions import CapacityExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

_USE_CONFIG: Any = object()
StallLimit = Union[int, None, Any]


def _resolve_limit(max_stalled_draws: StallLimit) -> Optional[int]:
    if max_stalled_draws is _USE_CONFIG:
        return get_config().max_stalled_draws
    if max_stalled_draws is not None and max_stalled_draws < 1:
        raise ValueError(f"max_stalled_draws must be >= 1 or None, got {max_stalled_draws}")
    return max_stalled_draws


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"Target size must be non-negative, got {n}")


def _inserter(container: Any) -> Callable[[Any], None]:
    add = getattr(container, "add", None)
    if callable(add):
        return add
    append = getattr(container, "append", None)
    if callable(append):
        return append
    raise TypeError(f"Cannot insert into {type(container).__name__}: needs add() or append()")


def rfill(container: Any, n: int, producer: Callable[[], T], *, max_stalled_draws: StallLimit = _USE_CONFIG) -> Any:
    """Insert produced values into ``container`` until ``len(container) == n``.

    Sequences (anything with ``append``) accept duplicates, so every draw
    counts. Set-like containers (anything with ``add``) ignore duplicates and
    a duplicate draw does not count toward progress. A container that already
    holds ``n`` or more elements is left as is.

    Returns the container.
    """
    _check_count(n)
    limit = _resolve_limit(max_stalled_draws)
    insert = _inserter(container)

    stalled = 0
    while len(container) < n:
        before = len(container)
        insert(producer())
        if len(container) > before:
            stalled = 0
            continue
        stalled += 1
        if limit is not None and stalled >= limit:
            logger.warning("rfill stalled at %d/%d after %d draws without a new value", len(container), n, stalled)
            raise CapacityExceededError(n, len(container), limit)

    logger.debug("rfill reached size %d in %s", n, type(container).__name__)
    return container


def rfill_front(container: MutableSequence[T], n: int, producer: Callable[[], T]) -> MutableSequence[T]:
    """Insert exactly ``n`` produced values at the front of ``container``.

    The current size is ignored. Each value is pushed in front of the
    previous one, so the last value produced ends up first.
    """
    _check_count(n)
    appendleft = getattr(container, "appendleft", None)
    for _ in range(n):
        value = producer()
        if appendleft is not None:
            appendleft(value)
        else:
            container.insert(0, value)
    return container


def collect_unique(n: int, producer: Callable[[], H], *, max_stalled_draws: StallLimit = _USE_CONFIG) -> List[H]:
    """Draw until ``n`` distinct values are seen; return them sorted."""
    _check_count(n)
    limit = _resolve_limit(max_stalled_draws)

    seen: Set[H] = set()
    stalled = 0
    while len(seen) < n:
        before = len(seen)
        seen.add(producer())
        if len(seen) > before:
            stalled = 0
            continue
        stalled += 1
        if limit is not None and stalled >= limit:
            logger.warning("fill_unique stalled at %d/%d after %d draws without a new value", len(seen), n, stalled)
            raise CapacityExceededError(n, len(seen), limit)

    return sorted(seen)


def fill_unique(container: Any, n: int, producer: Callable[[], H], *, max_stalled_draws: StallLimit = _USE_CONFIG) -> Any:
    """Replace the contents of ``container`` with exactly ``n`` distinct values.

    Values are gathered in a set and written back in sorted order, so the
    produced type must be hashable and orderable. The previous contents are
    discarded. See the module docstring for the termination contract.

    Returns the container.
    """
    values = collect_unique(n, producer, max_stalled_draws=max_stalled_draws)

    if hasattr(container, "add"):
        container.clear()
        for value in values:
            container.add(value)
    elif isinstance(container, list):
        container[:] = values
    else:
        container.clear()
        container.extend(values)

    logger.debug("fill_unique wrote %d distinct values into %s", n, type(container).__name__)
    return container


__all__ = ["collect_unique", "fill_unique", "rfill", "rfill_front"]
