"""
pwcheck Core Data Models
========================

Pydantic models for the password evaluation pipeline: the character class
profile scanned from a password, the qualitative strength label, and the
immutable :class:`EvaluationResult` returned once per evaluation.
"""

from __future__ import annotations

import enum
import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class StrengthLabel(str, enum.Enum):
    """Qualitative strength rating derived from entropy bits."""

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"


class CharsetProfile(BaseModel):
    """Character classes present in a password.

    Each present class contributes a fixed alphabet size to the search
    space: lowercase 26, uppercase 26, digits 10, symbols 32.
    """

    model_config = ConfigDict(frozen=True)

    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False

    @property
    def charset_size(self) -> int:
        return (
            26 * self.has_lower
            + 26 * self.has_upper
            + 10 * self.has_digit
            + 32 * self.has_symbol
        )


class EvaluationResult(BaseModel):
    """Outcome of one password evaluation.

    A result is immutable; the next evaluation produces a new one. An error
    result (see :meth:`failed`) carries no strength label, an empty crack
    time display, zeroed numbers, and a user-facing ``error_message``.

    Attributes:
        entropy_bits: Brute-force entropy estimate in bits.
        crack_time_seconds: Seconds to exhaust the search space at the
            configured guess rate. May be ``inf`` for very long passwords.
        crack_time_display: Human-readable crack time, e.g. ``"2.00 days"``.
        strength_label: Final rating after the common-password override.
        breach_count: Times the password appears in the breach corpus.
            ``0`` both when absent and when the lookup failed.
        common_pattern: Whether the password is, or normalizes to, a
            common password.
        error_message: Set only when the evaluation itself failed.
    """

    model_config = ConfigDict(frozen=True)

    entropy_bits: float = Field(default=0.0, ge=0.0)
    crack_time_seconds: float = Field(default=0.0, ge=0.0)
    crack_time_display: str = ""
    strength_label: Optional[StrengthLabel] = None
    breach_count: int = Field(default=0, ge=0)
    common_pattern: bool = False
    error_message: Optional[str] = None

    @field_validator("crack_time_seconds", mode="before")
    @classmethod
    def _null_is_infinite(cls, v: Any) -> Any:
        return math.inf if v is None else v

    @field_serializer("crack_time_seconds", when_used="json")
    def _infinite_is_null(self, v: float) -> Optional[float]:
        """JSON has no infinity; an unbounded crack time is written as ``null``."""
        return v if math.isfinite(v) else None

    @classmethod
    def failed(cls, message: str) -> EvaluationResult:
        return cls(error_message=message)

    @property
    def is_error(self) -> bool:
        return self.error_message is not None

    @property
    def is_breached(self) -> bool:
        return self.breach_count > 0

    @property
    def strength_percentage(self) -> int:
        """Meter fill in percent: 80 bits and above is a full bar."""
        if self.entropy_bits > 80:
            return 100
        return min(round(self.entropy_bits / 80 * 100), 100)
