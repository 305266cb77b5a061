"""Numeric helpers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2);
    scores shown to parents always round .5 upwards.
    """
    return math.floor(value + 0.5)
