from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Nearest integer with .5 ties going up, unlike the builtin ``round`` which picks the even neighbour."""
    return int(math.floor(value + 0.5))
