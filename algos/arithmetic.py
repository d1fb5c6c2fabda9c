"""Integer arithmetic bounded to a signed 32-bit result."""

from __future__ import annotations

INT32_MAX = 2**31 - 1


def factorial(n: int) -> int:
    """Return ``n!``.

    Raises ValueError for negative ``n`` and OverflowError when the result
    does not fit in a signed 32-bit integer.
    """
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
        if result > INT32_MAX:
            raise OverflowError(f"factorial({n}) overflows a 32-bit integer")
    return result