"""Character-mapping checks on strings: isomorphism, anagrams, unique characters."""

from collections import Counter

__all__ = ["is_isomorphic", "is_anagram", "first_unique_char"]


def is_isomorphic(s: str, t: str) -> bool:
    """Return True if the characters of ``s`` map one-to-one onto those of ``t``.

    Every occurrence of a character in ``s`` must be replaced by the same
    character of ``t``, and no two characters of ``s`` may map to the same
    character of ``t``. Strings of different lengths are never isomorphic.
    """
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for sc, tc in zip(s, t):
        if forward.setdefault(sc, tc) != tc or backward.setdefault(tc, sc) != sc:
            return False
    return True


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the same characters as ``s``."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def first_unique_char(s: str) -> int:
    """Return the index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)