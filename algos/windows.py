"""Sliding-window algorithms over sequences and strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def max_window_sum(values: Sequence[int], k: int) -> int | None:
    """Return the largest sum of ``k`` consecutive values, or None if no window fits."""
    if k <= 0 or len(values) < k:
        return None
    current = sum(values[:k])
    best = current
    for leaving, entering in zip(values, values[k:]):
        current += entering - leaving
        best = max(best, current)
    return best


def longest_unique_substring(text: str) -> str:
    """Return the first longest substring of ``text`` without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best_start, best_len = 0, 0
    for index, char in enumerate(text):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        length = index - start + 1
        if length > best_len:
            best_start, best_len = start, length
    return text[best_start:best_start + best_len]


def all_substrings(text: str) -> Iterator[str]:
    """Yield every non-empty substring, ordered by start then end position."""
    for start in range(len(text)):
        for end in range(start + 1, len(text) + 1):
            yield text[start:end]


def find_all_unique_substrings(text: str) -> list[str]:
    """Return every substring whose characters are all distinct, by start then end."""
    found: list[str] = []
    for start in range(len(text)):
        seen: set[str] = set()
        for end, char in enumerate(text[start:], start + 1):
            if char in seen:
                break
            seen.add(char)
            found.append(text[start:end])
    return found