"""
pw_entropy estimates the brute-force search space of a password:

    entropy = analyze_password("ThisIsASecret").entropy()
"""

from __future__ import annotations

from .charsets import (
    CHARACTER_CLASSES,
    COMMON_SEQUENCES,
    DIGIT_CHARS,
    LOWER_CHARS,
    OTHER_SPECIAL_CHARS,
    REPLACE_CHARS,
    SEPARATOR_CHARS,
    UPPER_CHARS,
)
from .config import EntropyConfig, config_from_dict, config_from_yaml, load_config
from .models import PasswordInfo
from .pipeline import analyze_password, analyze_passwords, reduce_password
from .scoring import compute_entropy, log_power, strength_label

__all__ = [
    "CHARACTER_CLASSES",
    "COMMON_SEQUENCES",
    "DIGIT_CHARS",
    "LOWER_CHARS",
    "OTHER_SPECIAL_CHARS",
    "REPLACE_CHARS",
    "SEPARATOR_CHARS",
    "UPPER_CHARS",
    "EntropyConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "PasswordInfo",
    "analyze_password",
    "analyze_passwords",
    "reduce_password",
    "compute_entropy",
    "log_power",
    "strength_label",
]

__version__ = "0.1.0"
