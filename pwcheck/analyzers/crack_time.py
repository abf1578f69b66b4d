"""
Crack Time Estimation
=====================

Converts an entropy estimate into the time an attacker needs to exhaust
the whole search space at a fixed guess rate, and formats that duration
for display.

The default rate of 10^9 guesses/second models an offline attack against
a fast, unsalted hash on commodity GPU hardware.
"""

from __future__ import annotations

import math

DEFAULT_GUESSES_PER_SECOND: float = 1e9

# (upper bound in seconds, divisor, unit) -- first bound that exceeds wins
_UNITS: tuple[tuple[float, float, str], ...] = (
    (60, 1, "seconds"),
    (3600, 60, "minutes"),
    (86400, 3600, "hours"),
    (31536000, 86400, "days"),
)
_SECONDS_PER_YEAR = 31536000


class CrackTimeEstimator:
    """Brute-force crack time at a constant guess rate.

    Args:
        guesses_per_second: Assumed attacker throughput.
    """

    def __init__(self, guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND) -> None:
        if guesses_per_second <= 0:
            raise ValueError("guesses_per_second must be positive")
        self.guesses_per_second = guesses_per_second

    def estimate(self, entropy_bits: float) -> float:
        """Return seconds to try all ``2**entropy_bits`` combinations.

        Very large entropies exceed the float range; the result is then
        ``math.inf`` rather than an ``OverflowError``.
        """
        try:
            combinations = 2.0 ** entropy_bits
        except OverflowError:
            return math.inf
        return combinations / self.guesses_per_second


def format_crack_time(seconds: float) -> str:
    """Render *seconds* in the largest fitting unit with two decimals.

    >>> format_crack_time(90)
    '1.50 minutes'
    >>> format_crack_time(63072000)
    '2.00 years'
    """
    for bound, divisor, unit in _UNITS:
        if seconds < bound:
            return f"{seconds / divisor:.2f} {unit}"
    return f"{seconds / _SECONDS_PER_YEAR:.2f} years"
