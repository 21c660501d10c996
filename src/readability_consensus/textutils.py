from __future__ import annotations

import math
import re

PUNCTUATION_RE = re.compile(
    r"[\u2000-\u206F\u2E00-\u2E7F\\'!" r'"' r"#$%&()*+,\-./:;<=>?@\[\]^_`{|}~]"
)


def legacy_round(number: float, points: int = 0) -> float:
    """
    Round at ``points`` decimals: scale, add one half carrying the sign of
    ``number``, floor, scale back.

    Halves round away from zero (2.345 -> 2.35, -2.345 -> -2.35), unlike the
    builtin ``round``. Because of the floor, other negative values drop one
    step, so -2.26 becomes -2.27. NaN and infinities are returned unchanged.
    """
    if not math.isfinite(number):
        return number
    p = 10**points
    return math.floor((number * p) + math.copysign(0.5, number)) / p


def remove_punctuation(text: str) -> str:
    """Strip ASCII punctuation plus the general/supplemental punctuation blocks."""
    return PUNCTUATION_RE.sub("", text)


def safe_ratio(numerator: float, denominator: float) -> float:
    """Return numerator / denominator, or 0.0 when that is not a finite number."""
    if not denominator:
        return 0.0
    value = numerator / denominator
    return value if math.isfinite(value) else 0.0
