from __future__ import annotations

from itertools import groupby
from typing import List


def remove_palindrome(chars: List[str]) -> bool:
    """
    Keep only the first half of chars when the whole text is a palindrome.

    The comparison ignores case and an odd-length palindrome keeps its middle
    character. Returns True when the text was truncated.
    """
    half = len(chars) // 2 + len(chars) % 2
    forwards = (c.lower() for c in chars[:half])
    backwards = (c.lower() for c in reversed(chars[len(chars) - half :]))
    if all(f == b for f, b in zip(forwards, backwards)):
        del chars[half:]
        return True
    return False


def remove_repeating_characters(chars: List[str]) -> None:
    """Collapse runs of identical adjacent characters into a single one."""
    chars[:] = [char for char, _ in groupby(chars)]


def zeroize(chars: List[str]) -> None:
    """Overwrite the working characters with NUL and empty the list."""
    chars[:] = ["\0"] * len(chars)
    chars.clear()
