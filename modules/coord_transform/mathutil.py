"""Trigonometry that follows IEEE semantics for infinite arguments."""

import math


def sin(value: float) -> float:
    """``math.sin``, but ``sin(±inf)`` is NaN instead of a ``ValueError``."""
    return math.sin(value) if math.isfinite(value) else math.nan


def cos(value: float) -> float:
    """``math.cos``, but ``cos(±inf)`` is NaN instead of a ``ValueError``."""
    return math.cos(value) if math.isfinite(value) else math.nan
