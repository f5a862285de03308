from __future__ import annotations


def isprime(val: int) -> bool:
    """Return True if ``val`` is a prime number.

    Anything below 2 is not prime. Multiples of 2, 3 and 5 are settled
    directly; the remaining candidates are trial-divided by odd numbers from
    7 up to the square root of ``val``.
    """
    if val < 2:
        return False
    if val % 2 == 0:
        return val == 2
    if val % 3 == 0:
        return val == 3
    if val % 5 == 0:
        return val == 5

    k = 7
    while k * k <= val:
        if val % k == 0:
            return False
        k += 2
    return True


def ndigit(val: int) -> int:
    """Number of decimal digits in ``val``, ignoring the sign. ndigit(0) == 1."""
    val = abs(val)
    if val == 0:
        return 1

    count = 0
    while val:
        val //= 10
        count += 1
    return count


__all__ = ["isprime", "ndigit"]
