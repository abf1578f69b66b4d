"""
Password Entropy Estimator
==========================

Brute-force search-space estimate of a password:

    entropy = length * log2(charset_size)

where the charset size sums a fixed alphabet size for every character
class present (lowercase 26, uppercase 26, digits 10, symbols 32).

Characters outside all four classes (spaces, non-ASCII letters) still
count towards the length but add nothing to the pool.

References:
    - NIST SP 800-63-2 (2013), Appendix A: Estimating Password Entropy.
"""

from __future__ import annotations

import math
import string

from pwcheck.core.models import CharsetProfile

SYMBOLS: frozenset[str] = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?`~")

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


class EntropyEstimator:
    """Computes the character class profile and entropy of a password.

    Usage::

        estimator = EntropyEstimator()
        estimator.estimate("Tr0ub4dor&3")   # 72.10...
    """

    @staticmethod
    def profile(password: str) -> CharsetProfile:
        """Scan *password* once and record which classes occur."""
        has_lower = has_upper = has_digit = has_symbol = False
        for ch in password:
            if ch in _LOWER:
                has_lower = True
            elif ch in _UPPER:
                has_upper = True
            elif ch in _DIGITS:
                has_digit = True
            elif ch in SYMBOLS:
                has_symbol = True
        return CharsetProfile(
            has_lower=has_lower,
            has_upper=has_upper,
            has_digit=has_digit,
            has_symbol=has_symbol,
        )

    def estimate(self, password: str) -> float:
        """Return the entropy of *password* in bits (``0.0`` for ``""``)."""
        charset_size = self.profile(password).charset_size
        if charset_size == 0:
            return 0.0
        return len(password) * math.log2(charset_size)
