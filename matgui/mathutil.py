"""Rounding helpers."""

import math

__all__ = ["round_down", "round_middle"]


def round_down(value: float, factor: float = 1.0) -> float:
    """Round ``value`` down to a multiple of ``factor``."""
    return float(factor * math.floor(value / factor))


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_middle(value: float, factor: float = 1.0) -> float:
    """Round ``value / factor + 0.5`` half away from zero, scaled by ``factor``."""
    return float(factor * _round_half_away(value / factor + 0.5))