from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .scoring import compute_entropy, strength_label


@dataclass(frozen=True, slots=True)
class PasswordInfo:
    """Measurements of a password after common sequences, a possible palindrome
    and repeated characters were removed."""

    reduced_length: int
    base: int
    has_replace: bool
    has_separator: bool
    has_other_special: bool
    has_lower: bool
    has_upper: bool
    has_digit: bool

    def entropy(self) -> float:
        """Return log2(base ** reduced_length); -inf when no class matched."""
        return compute_entropy(self.base, self.reduced_length)

    def strength(self) -> str:
        return strength_label(self.entropy())

    def to_dict(self) -> dict[str, Any]:
        """Return the fields plus derived entropy and strength."""
        data = dict(asdict(self))
        data["entropy"] = self.entropy()
        data["strength"] = self.strength()
        return data
