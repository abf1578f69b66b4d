"""
pwcheck Analyzers
=================

One module per evaluation stage: entropy, crack time, common patterns,
strength classification, and the breach lookup.
"""

from pwcheck.analyzers.breach import BreachChecker
from pwcheck.analyzers.crack_time import CrackTimeEstimator, format_crack_time
from pwcheck.analyzers.entropy import EntropyEstimator
from pwcheck.analyzers.patterns import CommonPatternMatcher
from pwcheck.analyzers.strength import StrengthClassifier

__all__ = [
    "BreachChecker",
    "CommonPatternMatcher",
    "CrackTimeEstimator",
    "EntropyEstimator",
    "StrengthClassifier",
    "format_crack_time",
]
