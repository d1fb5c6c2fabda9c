"""Binary search over a sorted sequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> bool:
    """Return True if ``target`` occurs in the ascending sequence ``values``."""
    index = bisect_left(values, target)
    return index < len(values) and values[index] == target