"""Checks for whether two elements of a sequence add up to a target."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def hash_set_sum(values: Iterable[int], target: int) -> bool:
    """Return True if two distinct elements of ``values`` sum to ``target``."""
    seen: set[int] = set()
    for value in values:
        if target - value in seen:
            return True
        seen.add(value)
    return False


def two_pointer_sum(values: Sequence[int], target: int) -> bool:
    """Two-pointer pair-sum check.

    Assumes ``values`` is sorted ascending; on unsorted input valid pairs may
    be missed.
    """
    left, right = 0, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False