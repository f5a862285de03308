from __future__ import annotations

from typing import Optional, Sequence

from ._tables import FIRST_NAMES, SURNAMES
from .engine import RandomEngine
from .generators import BoundedIntGenerator


def _pick(table: Sequence[str], engine: Optional[RandomEngine]) -> str:
    return table[BoundedIntGenerator(0, len(table) - 1, engine)()]


def random_name(engine: Optional[RandomEngine] = None) -> str:
    """Return a first name chosen uniformly from FIRST_NAMES."""
    return _pick(FIRST_NAMES, engine)


def random_surname(engine: Optional[RandomEngine] = None) -> str:
    """Return a surname chosen uniformly from SURNAMES."""
    return _pick(SURNAMES, engine)


def random_full_name(engine: Optional[RandomEngine] = None) -> str:
    return f"{random_name(engine)} {random_surname(engine)}"


__all__ = ["FIRST_NAMES", "SURNAMES", "random_full_name", "random_name", "random_surname"]
