from __future__ import annotations

import math
import numbers
from typing import Optional, Protocol, TypeVar, runtime_checkable

from .engine import RandomEngine, resolve_engine
from .exceptions import InvalidRangeError

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Producer(Protocol[T_co]):
    """Anything that yields a new value on each zero-argument call."""

    def __call__(self) -> T_co: ...


class BoundedIntGenerator:
    """Uniform integers in the closed range [low, high].

    Draws come from ``engine`` or, when it is None, from the shared engine
    at the time of each draw. The range cannot be changed after
    construction.
    """

    __slots__ = ("_low", "_high", "_engine")

    def __init__(self, low: int, high: int, engine: Optional[RandomEngine] = None) -> None:
        for bound in (low, high):
            if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
                raise TypeError(f"BoundedIntGenerator bounds must be integers, got {bound!r}")
        if low > high:
            raise InvalidRangeError(low, high)
        self._low = int(low)
        self._high = int(high)
        self._engine = engine

    @property
    def low(self) -> int:
        return self._low

    @property
    def high(self) -> int:
        return self._high

    def produce(self) -> int:
        return resolve_engine(self._engine).randint(self._low, self._high)

    __call__ = produce

    def __repr__(self) -> str:
        return f"BoundedIntGenerator({self._low}, {self._high})"


class BoundedRealGenerator:
    """Uniform floats in the half-open range [low, high).

    A degenerate range (low == high) always yields ``low``.
    """

    __slots__ = ("_low", "_high", "_engine")

    def __init__(self, low: float, high: float, engine: Optional[RandomEngine] = None) -> None:
        low = float(low)
        high = float(high)
        if not (math.isfinite(low) and math.isfinite(high)):
            raise InvalidRangeError(low, high, "bounds must be finite")
        if low > high:
            raise InvalidRangeError(low, high)
        self._low = low
        self._high = high
        self._engine = engine

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    def produce(self) -> float:
        if self._low == self._high:
            return self._low
        engine = resolve_engine(self._engine)
        span = self._high - self._low
        while True:
            u = engine.random()
            if math.isfinite(span):
                value = self._low + span * u
            else:
                value = self._low * (1.0 - u) + self._high * u
            # Rounding can land on or past a bound; redraw.
            if self._low <= value < self._high:
                return value

    __call__ = produce

    def __repr__(self) -> str:
        return f"BoundedRealGenerator({self._low!r}, {self._high!r})"


__all__ = ["BoundedIntGenerator", "BoundedRealGenerator", "Producer"]
