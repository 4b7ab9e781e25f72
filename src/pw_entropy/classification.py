from __future__ import annotations

from typing import Dict, Iterable, Mapping

from .charsets import CHARACTER_CLASSES


def classify(chars: Iterable[str]) -> Dict[str, bool]:
    """Report, per character class, whether chars holds at least one member."""
    present = set(chars)
    return {
        name: not present.isdisjoint(members) for name, members in CHARACTER_CLASSES
    }


def compute_base(flags: Mapping[str, bool]) -> int:
    """Sum the alphabet sizes of every class flagged as present."""
    return sum(len(members) for name, members in CHARACTER_CLASSES if flags.get(name))
