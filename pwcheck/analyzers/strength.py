"""
Strength Classification
=======================

Maps entropy bits onto a :class:`StrengthLabel`. Thresholds are strict
lower bounds checked from the top, so exactly 40 bits is Moderate:

    ========  ===========
    entropy   label
    ========  ===========
    > 40      Strong
    > 30      Moderate
    > 20      Weak
    else      Very Weak
    ========  ===========

A password that is (or normalizes to) a common password is always Very
Weak, whatever its entropy.
"""

from __future__ import annotations

from pwcheck.core.models import StrengthLabel

_THRESHOLDS: tuple[tuple[float, StrengthLabel], ...] = (
    (40, StrengthLabel.STRONG),
    (30, StrengthLabel.MODERATE),
    (20, StrengthLabel.WEAK),
)


class StrengthClassifier:
    """Entropy-threshold classifier with the common-password override."""

    @staticmethod
    def from_entropy(entropy_bits: float) -> StrengthLabel:
        for bound, label in _THRESHOLDS:
            if entropy_bits > bound:
                return label
        return StrengthLabel.VERY_WEAK

    def classify(self, entropy_bits: float, *, common: bool = False) -> StrengthLabel:
        """Return the final label; *common* forces :attr:`StrengthLabel.VERY_WEAK`."""
        label = self.from_entropy(entropy_bits)
        if common:
            label = StrengthLabel.VERY_WEAK
        return label
