from __future__ import annotations

import logging
from typing import Iterable, List

from .classification import classify, compute_base
from .config import EntropyConfig
from .models import PasswordInfo
from .reduction import remove_palindrome, remove_repeating_characters, zeroize
from .sequences import remove_common_sequences

LOGGER = logging.getLogger(__name__)


def _reduce(chars: List[str], config: EntropyConfig) -> None:
    """Apply the reduction steps to chars in place, in their fixed order."""
    remove_common_sequences(chars, ignore_case=config.ignore_sequence_case)
    if remove_palindrome(chars) and chars:
        LOGGER.debug("Palindrome halved to %d characters.", len(chars))
    remove_repeating_characters(chars)


def reduce_password(password: str, config: EntropyConfig | None = None) -> str:
    """Return the text that remains after all reduction steps."""
    cfg = config or EntropyConfig()
    chars = list(password)
    _reduce(chars, cfg)
    return "".join(chars)


def analyze_password(
    password: str, config: EntropyConfig | None = None
) -> PasswordInfo:
    """
    Measure a password.

    A private copy of the password is stripped of common sequences, halved if
    it is a palindrome and collapsed where characters repeat; the remainder is
    classified. With ``config.zeroize`` the copy is overwritten before it is
    released. The caller's own string is not touched.
    """
    cfg = config or EntropyConfig()
    chars = list(password)
    _reduce(chars, cfg)

    flags = classify(chars)
    reduced_length = len(chars)
    if cfg.zeroize:
        zeroize(chars)

    info = PasswordInfo(
        reduced_length=reduced_length,
        base=compute_base(flags),
        has_replace=flags["replace"],
        has_separator=flags["separator"],
        has_other_special=flags["other_special"],
        has_lower=flags["lower"],
        has_upper=flags["upper"],
        has_digit=flags["digit"],
    )
    LOGGER.debug(
        "Reduced %d characters to %d (base %d).",
        len(password),
        info.reduced_length,
        info.base,
    )
    return info


def analyze_passwords(
    passwords: Iterable[str], config: EntropyConfig | None = None
) -> List[PasswordInfo]:
    """Analyze every password and return the results in input order."""
    results: List[PasswordInfo] = []
    for password in passwords:
        results.append(analyze_password(password, config))
    return results
