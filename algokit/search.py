"""Pattern search in strings: naive, KMP, block-based and finite automaton."""

from __future__ import annotations

from math import isqrt

__all__ = [
    "naive_search",
    "prefix_function",
    "kmp_search",
    "kmr_search",
    "build_transition_table",
    "automaton_search",
    "contains_char",
    "contains_substring",
    "contains_char_backwards",
    "exists",
]


def naive_search(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` starts in ``text``, checking each position."""
    size = len(pattern)
    return [
        start
        for start in range(len(text) - size + 1)
        if all(text[start + offset] == char for offset, char in enumerate(pattern))
    ]


def prefix_function(pattern: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` starts in ``text`` (Knuth-Morris-Pratt)."""
    _require_pattern(pattern)
    lps = prefix_function(pattern)
    size = len(pattern)
    found: list[int] = []
    matched = 0
    for position, char in enumerate(text):
        while matched and pattern[matched] != char:
            matched = lps[matched - 1]
        if pattern[matched] == char:
            matched += 1
        if matched == size:
            found.append(position - size + 1)
            matched = lps[matched - 1]
    return found


def kmr_search(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` starts, scanning ``text`` in blocks of about sqrt(n)."""
    size = len(text)
    if not size:
        return []
    block_size = max(isqrt(size), 1)
    width = len(pattern)
    found: list[int] = []
    for block_start in range(0, size, block_size):
        block = range(block_start, min(block_start + block_size, size))
        found.extend(i for i in block if text[i:i + width] == pattern)
    return found


def build_transition_table(pattern: str) -> list[dict[str, int]]:
    """Build the matching automaton: one row per state, mapping a character to the next state.

    Characters missing from a row lead back to state 0.
    """
    _require_pattern(pattern)
    size = len(pattern)
    table: list[dict[str, int]] = [{pattern[0]: 1}]
    fallback = 0
    for state in range(1, size + 1):
        row = dict(table[fallback])
        if state < size:
            row[pattern[state]] = state + 1
            fallback = table[fallback].get(pattern[state], 0)
        table.append(row)
    return table


def automaton_search(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` starts, running ``text`` through the automaton."""
    table = build_transition_table(pattern)
    size = len(pattern)
    found: list[int] = []
    state = 0
    for position, char in enumerate(text):
        state = table[state].get(char, 0)
        if state == size:
            found.append(position - size + 1)
    return found


def contains_char(text: str, char: str) -> bool:
    """Return True if ``char`` occurs in ``text``, scanning from the start."""
    return any(current == char for current in text)


def contains_substring(text: str, sub: str) -> bool:
    """Return True if ``sub`` occurs in ``text``, comparing character by character."""
    return bool(naive_search(text, sub))


def contains_char_backwards(text: str, char: str) -> bool:
    """Return True if ``char`` occurs in ``text``, scanning from the end."""
    return any(current == char for current in reversed(text))


def exists(text: str, sub: str) -> bool:
    """Return True if ``sub`` occurs in ``text``."""
    return sub in text