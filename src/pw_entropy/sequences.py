from __future__ import annotations

import logging
from typing import Iterable, List

from .charsets import COMMON_SEQUENCES

LOGGER = logging.getLogger(__name__)


def _fold(char: str) -> str:
    # Lower-case without changing the length, so indices stay aligned.
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def find_sequence(chars: List[str], sequence: str, ignore_case: bool = False) -> int:
    """Return the index of the leftmost occurrence of sequence in chars, or -1."""
    if not sequence:
        return -1
    if ignore_case:
        haystack = "".join(_fold(char) for char in chars)
        needle = "".join(_fold(char) for char in sequence)
    else:
        haystack = "".join(chars)
        needle = sequence
    return haystack.find(needle)


def remove_common_sequences(
    chars: List[str],
    sequences: Iterable[str] = COMMON_SEQUENCES,
    ignore_case: bool = False,
) -> int:
    """
    Strip every occurrence of every sequence from chars in place.

    Each sequence is searched again after every deletion, so occurrences that
    only form once a gap closes are removed too. Returns the number of spans
    deleted.
    """
    removed = 0
    for sequence in sequences:
        width = len(sequence)
        position = find_sequence(chars, sequence, ignore_case)
        while position >= 0:
            del chars[position : position + width]
            removed += 1
            position = find_sequence(chars, sequence, ignore_case)
    if removed:
        LOGGER.debug("Removed %d common sequence span(s).", removed)
    return removed
