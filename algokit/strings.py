"""String puzzles: windows, anagrams, palindromes, walks and digit sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def length_of_longest_substring(s: str) -> int:
    """Length of the longest run of ``s`` with no repeated character."""
    window: set[str] = set()
    best = 0
    left = 0
    for right, char in enumerate(s):
        while char in window:
            window.discard(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def is_palindrome_text(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    chars = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return chars == chars[::-1]


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the letters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


_MOVES = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def judge_circle(moves: str) -> bool:
    """Tell whether a walk of U/D/L/R steps ends where it began; other characters are ignored."""
    x = y = 0
    for move in moves:
        dx, dy = _MOVES.get(move, (0, 0))
        x += dx
        y += dy
    return x == 0 and y == 0


def _digit_sum(digits: str) -> int:
    return sum(int(d) for d in digits)


def get_lucky(s: str, k: int) -> int:
    """Spell lowercase ``s`` as alphabet positions, then sum the digits ``k`` times."""
    total = _digit_sum("".join(str(ord(c) - ord("a") + 1) for c in s))
    for _ in range(k - 1):
        total = _digit_sum(str(total))
    return total