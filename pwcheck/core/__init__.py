"""
pwcheck Core Module
===================

Data models for the evaluation pipeline. The engine lives in
:mod:`pwcheck.core.engine`.
"""

from pwcheck.core.models import CharsetProfile, EvaluationResult, StrengthLabel

__all__ = [
    "CharsetProfile",
    "EvaluationResult",
    "StrengthLabel",
]
