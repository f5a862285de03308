from __future__ import annotations

import logging
import random as _random
import threading
from typing import Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomEngine:
    """
    A thin wrapper around random.Random that every generator draws from.

    - seed=None seeds from system entropy (os.urandom where available).
    - An integer seed gives a reproducible stream; pass such an engine
      explicitly to generators that need deterministic output.
    - Draws are not synchronised. Do not share one engine between threads
      without external locking.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = _random.Random(seed)
        if seed is None:
            logger.debug("Initialized RandomEngine from system entropy")
        else:
            logger.debug("Initialized RandomEngine with deterministic seed=%s", seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return an integer N with a <= N <= b."""
        return self._rng.randint(a, b)

    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self._rng.random()

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("RandomEngine.choice() received an empty sequence")
        return seq[self._rng.randrange(len(seq))]


_shared: Optional[RandomEngine] = None
_shared_lock = threading.Lock()


def shared_engine() -> RandomEngine:
    """Return the process-wide engine, creating it on first use.

    The engine is seeded once from system entropy and is never reseeded.
    Only its creation is guarded by a lock; concurrent draws from several
    threads need external locking.
    """
    global _shared
    if _shared is None:
        with _shared_lock:
            if _shared is None:
                _shared = RandomEngine()
                logger.debug("Created shared random engine")
    return _shared


def resolve_engine(engine: Optional[RandomEngine]) -> RandomEngine:
    """Return ``engine`` or the shared engine when it is None."""
    return engine if engine is not None else shared_engine()


__all__ = ["RandomEngine", "resolve_engine", "shared_engine"]
