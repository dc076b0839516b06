"""String puzzles: windows, palindromes, borders, vowels and subsequences."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Sequence
from itertools import product

_VOWELS = frozenset("aeiouAEIOU")


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring with no repeated character."""
    last: dict[str, int] = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        start = max(start, last.get(ch, -1) + 1)
        best = max(best, i - start + 1)
        last[ch] = i
    return best


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest subsequence that reads the same both ways."""
    reversed_s = s[::-1]
    previous = [0] * (len(s) + 1)
    for a in s:
        row = [0]
        for j, b in enumerate(reversed_s):
            row.append(previous[j] + 1 if a == b else max(previous[j + 1], row[j]))
        previous = row
    return previous[-1]


def longest_prefix_suffix(s: str) -> int:
    """Length of the longest proper prefix that is also a suffix."""
    if not s:
        return 0
    border = [0] * len(s)
    for i in range(1, len(s)):
        j = border[i - 1]
        while j > 0 and s[i] != s[j]:
            j = border[j - 1]
        if s[i] == s[j]:
            j += 1
        border[i] = j
    return border[-1]


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels, leaving every other character in place."""
    chars = list(s)
    low, high = 0, len(chars) - 1
    while low < high:
        while low < high and chars[low] not in _VOWELS:
            low += 1
        while low < high and chars[high] not in _VOWELS:
            high -= 1
        chars[low], chars[high] = chars[high], chars[low]
        low += 1
        high -= 1
    return "".join(chars)


def count_vowels_consonants(s: str) -> tuple[int, int]:
    """Count (vowels, consonants) among the ASCII letters of s."""
    letters = [ch for ch in s if ch in string.ascii_letters]
    vowels = sum(1 for ch in letters if ch in _VOWELS)
    return vowels, len(letters) - vowels


def power_set(s: str) -> list[str]:
    """Every subsequence of s, the empty one first.

    For each character, subsequences leaving it out come before those
    keeping it, with earlier characters deciding first.
    """
    return [
        "".join(ch for ch, keep in zip(s, mask) if keep)
        for mask in product((False, True), repeat=len(s))
    ]


def find_substring(text: str, words: Sequence[str]) -> list[int]:
    """Start indices where text holds every word once, concatenated in any order.

    All words must have the same length.
    """
    if not words:
        return []
    width = len(words[0])
    if any(len(word) != width for word in words):
        raise ValueError("all words must have the same length")
    wanted = Counter(words)
    total = width * len(words)
    return [
        i
        for i in range(len(text) - total + 1)
        if Counter(text[i + k * width:i + (k + 1) * width] for k in range(len(words)))
        == wanted
    ]