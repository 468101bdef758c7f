"""Numeric helpers."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``2.5`` -> ``3``).

    Built-in ``round`` uses banker's rounding, which would shift scores and
    emission figures computed for the browser client by one unit.
    """
    return math.floor(value + 0.5)
