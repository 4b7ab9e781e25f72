from __future__ import annotations

import math
from itertools import repeat


def log_power(exp_base: float, power: int, log_base: float = 2.0) -> float:
    """
    Compute log_b(e ** p) without materializing e ** p.

    The logarithm of the base is added once per multiplication step
    (log(M * N) = log(M) + log(N)), so long passwords never overflow.
    A zero base yields -inf for any positive power and 0.0 for power 0.
    """
    if power <= 0:
        return 0.0
    if exp_base == 0:
        # math.log raises on zero; the limit is what callers expect.
        return -math.inf
    if log_base == 2.0:
        step = math.log2(exp_base)
    else:
        step = math.log(exp_base, log_base)
    return math.fsum(repeat(step, power))


def compute_entropy(base: int, length: int) -> float:
    """Return log2(base ** length)."""
    return log_power(float(base), length, 2.0)


def strength_label(entropy: float) -> str:
    """Map entropy bits onto coarse quality bands for strength indicators."""
    if entropy <= 0:
        return "bad"
    if entropy < 40:
        return "poor"
    if entropy < 75:
        return "weak"
    if entropy < 100:
        return "good"
    return "excellent"
