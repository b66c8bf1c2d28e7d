"""Character frequencies and Levenshtein edit distance."""

from __future__ import annotations

from collections import Counter

__all__ = ["char_frequency", "edit_distance"]


def char_frequency(text: str) -> dict[str, int]:
    """Return how many times each character occurs in ``text``."""
    return dict(Counter(text))


def edit_distance(first: str, second: str) -> int:
    """Return the minimum number of single-character insertions, deletions and substitutions."""
    previous = list(range(len(second) + 1))
    for i, left in enumerate(first, start=1):
        current = [i]
        for j, right in enumerate(second, start=1):
            if left == right:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]