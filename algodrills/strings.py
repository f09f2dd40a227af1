"""String puzzles: anagrams, reversals, prefixes, isomorphism and searches."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

_VOWELS = frozenset("aeiou")


def is_anagram_sorted(s: str, t: str) -> bool:
    """Whether ``s`` and ``t`` hold the same characters, compared after sorting."""
    return sorted(s) == sorted(t)


def is_anagram(s: str, t: str) -> bool:
    """Whether ``s`` and ``t`` hold the same characters, compared by frequency."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_vowel(ch: str) -> bool:
    return ch in _VOWELS


def _reverse_matching(text: str, matches) -> str:
    picked = reversed([ch for ch in text if matches(ch)])
    return "".join(next(picked) if matches(ch) else ch for ch in text)


def reverse_only_letters(text: str) -> str:
    """Reverse the ASCII letters of ``text``, leaving every other character in place."""
    return _reverse_matching(text, _is_letter)


def reverse_vowels(text: str) -> str:
    """Reverse the lower-case vowels of ``text``, leaving every other character in place."""
    return _reverse_matching(text, _is_vowel)


def longest_common_prefix(strings: Sequence[str]) -> str:
    """The longest prefix shared by every string; empty for no strings."""
    if not strings:
        return ""
    if len(strings) == 1:
        return strings[0]
    prefix = []
    for chars in zip(*strings):
        first = chars[0]
        if any(ch != first for ch in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def reorganize_string(text: str) -> str:
    """Rearrange ``text`` so no two neighbours are equal; empty if that cannot be done.

    The most frequent character (the earliest in order on a tie) fills every
    other slot from the start, then the rest follow in character order.
    """
    if not text:
        return ""
    size = len(text)
    counts = Counter(text)
    order = sorted(counts)
    commonest = max(order, key=counts.__getitem__)

    slots: list[str | None] = [None] * size
    index = 0
    while counts[commonest] and index < size:
        slots[index] = commonest
        counts[commonest] -= 1
        index += 2
    if counts[commonest]:
        return ""

    for ch in order:
        while counts[ch] > 0:
            if index >= size:
                index = 1
            slots[index] = ch
            counts[ch] -= 1
            index += 2
    return "".join(slots)  # type: ignore[arg-type]


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Words grouped by their sorted letters, groups ordered by that key."""
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return [groups[key] for key in sorted(groups)]


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def longest_palindrome(text: str) -> str:
    """The longest palindromic substring; the rightmost one among equals."""
    n = len(text)
    for length in range(n, 0, -1):
        for start in range(n - length, -1, -1):
            candidate = text[start : start + length]
            if _is_palindrome(candidate):
                return candidate
    return ""


def find_substring(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle`` in ``haystack``, or None."""
    for i in range(len(haystack)):
        if haystack.startswith(needle, i):
            return i
    return None