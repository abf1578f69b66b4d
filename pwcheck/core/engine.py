"""
pwcheck Evaluation Engine
=========================

:class:`PasswordEvaluator` runs the evaluation pipeline for one password:

    entropy -> crack time -> common pattern -> breach lookup -> classify/format

Stages run strictly in that order. The breach lookup is the only await
point and fails open to zero. A failure in any other stage aborts the
evaluation and yields an error result instead of a partial one.

The evaluator admits one evaluation at a time; a re-entrant call while
one is outstanding raises :class:`EvaluationInProgressError`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pwcore.config import PwConfig
from pwcore.logger import PwLogger
from pwcore.models import Finding, ScanResult, Severity

from pwcheck.analyzers.breach import BreachChecker
from pwcheck.analyzers.crack_time import CrackTimeEstimator, format_crack_time
from pwcheck.analyzers.entropy import EntropyEstimator
from pwcheck.analyzers.patterns import CommonPatternMatcher
from pwcheck.analyzers.strength import StrengthClassifier
from pwcheck.core.models import EvaluationResult, StrengthLabel

GENERIC_ERROR_MESSAGE = "An error occurred while evaluating the password."

_STRENGTH_SEVERITY: dict[StrengthLabel, Severity] = {
    StrengthLabel.VERY_WEAK: Severity.CRITICAL,
    StrengthLabel.WEAK: Severity.HIGH,
    StrengthLabel.MODERATE: Severity.MEDIUM,
    StrengthLabel.STRONG: Severity.INFO,
}


class EvaluationInProgressError(RuntimeError):
    """Raised when :meth:`PasswordEvaluator.evaluate` is re-entered."""


def mask_password(password: str) -> str:
    """Show the first and last character only (``"p******d"``)."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class PasswordEvaluator:
    """Orchestrates the password evaluation stages.

    Usage::

        async with PasswordEvaluator(config) as evaluator:
            result = await evaluator.evaluate("p4ssw0rd")
            result.strength_label      # StrengthLabel.VERY_WEAK

    Args:
        config:          Configuration; defaults are used when omitted.
        breach_checker:  Checker to use instead of one built from config.
        logger:          Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[PwConfig] = None,
        *,
        breach_checker: Optional[BreachChecker] = None,
        logger: Optional[PwLogger] = None,
    ) -> None:
        self.config = config or PwConfig()
        settings = self.config.evaluator
        self.logger = logger or PwLogger.from_settings(
            "engine", self.config.global_settings
        )

        self._entropy = EntropyEstimator()
        self._crack_time = CrackTimeEstimator(settings.guesses_per_second)
        self._patterns = CommonPatternMatcher(settings.extra_common_passwords)
        self._classifier = StrengthClassifier()

        self._breach: Optional[BreachChecker] = breach_checker
        if self._breach is None and settings.breach_check:
            self._breach = BreachChecker(
                api_url=settings.breach_api_url,
                timeout=settings.breach_timeout,
                padding=settings.breach_padding,
                user_agent=settings.user_agent,
                logger=PwLogger.from_settings("breach", self.config.global_settings),
            )

        self._in_flight = False

    async def __aenter__(self) -> PasswordEvaluator:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._breach is not None:
            await self._breach.close()

    @property
    def busy(self) -> bool:
        """Whether an evaluation is currently outstanding."""
        return self._in_flight

    @property
    def breach_check_enabled(self) -> bool:
        return self._breach is not None

    # ------------------------------------------------------------------ #
    #  Evaluation
    # ------------------------------------------------------------------ #

    async def evaluate(self, password: str) -> EvaluationResult:
        """Evaluate *password* and return an immutable result.

        Raises:
            EvaluationInProgressError: If another evaluation is outstanding.
        """
        if self._in_flight:
            raise EvaluationInProgressError("an evaluation is already in progress")
        self._in_flight = True
        try:
            with self.logger.timed("password evaluation"):
                return await self._run(password)
        finally:
            self._in_flight = False

    async def _run(self, password: str) -> EvaluationResult:
        try:
            entropy = self._entropy.estimate(password)
            seconds = self._crack_time.estimate(entropy)
            common = self._patterns.is_common(password) or self._patterns.matches(password)
        except Exception:
            self.logger.exception("Evaluation aborted", length=len(password))
            return EvaluationResult.failed(GENERIC_ERROR_MESSAGE)

        breach_count = await self._breach.check(password) if self._breach else 0

        try:
            label = self._classifier.classify(entropy, common=common)
            display = format_crack_time(seconds)
        except Exception:
            self.logger.exception("Evaluation aborted", length=len(password))
            return EvaluationResult.failed(GENERIC_ERROR_MESSAGE)

        self.logger.info(
            "Evaluated password: %s, %.2f bits",
            label.value,
            entropy,
            length=len(password),
            breached=breach_count > 0,
        )
        return EvaluationResult(
            entropy_bits=entropy,
            crack_time_seconds=seconds,
            crack_time_display=display,
            strength_label=label,
            breach_count=breach_count,
            common_pattern=common,
        )

    # ------------------------------------------------------------------ #
    #  Scan wrapper for console and report output
    # ------------------------------------------------------------------ #

    async def scan(self, password: str) -> ScanResult:
        """Evaluate *password* and describe the outcome as findings.

        The returned :class:`ScanResult` carries the JSON-mode evaluation
        dump in ``metadata`` plus the masked password, never the password itself.
        """
        result = ScanResult(
            tool_name="pwcheck",
            target="[password]",
            start_time=datetime.now(timezone.utc),
        )
        evaluation = await self.evaluate(password)
        result.metadata = {
            "evaluation": evaluation.model_dump(mode="json"),
            "password_masked": mask_password(password),
            "length": len(password),
            "strength_percentage": evaluation.strength_percentage,
            "breach_check": self.breach_check_enabled,
            "guesses_per_second": self.config.evaluator.guesses_per_second,
        }

        if evaluation.is_error:
            result.add_finding(Finding(
                severity=Severity.HIGH,
                title="Evaluation Error",
                description=evaluation.error_message,
            ))
            return result.finalize(summary=f"Error: {evaluation.error_message}")

        for finding in self._findings(evaluation):
            result.add_finding(finding)

        return result.finalize(
            summary=(
                f"Password strength: {evaluation.strength_label.value}, "
                f"entropy={evaluation.entropy_bits:.2f} bits, "
                f"crack time={evaluation.crack_time_display}, "
                f"breaches={evaluation.breach_count}"
            )
        )

    def _findings(self, evaluation: EvaluationResult) -> list[Finding]:
        label = evaluation.strength_label
        findings = [
            Finding(
                severity=_STRENGTH_SEVERITY[label],
                title=f"Password Strength: {label.value}",
                description=(
                    f"Entropy: {evaluation.entropy_bits:.2f} bits. "
                    f"Estimated brute-force time: {evaluation.crack_time_display} "
                    f"at {self.config.evaluator.guesses_per_second:.0e} guesses/sec."
                ),
                evidence={
                    "entropy_bits": round(evaluation.entropy_bits, 2),
                    "crack_time": evaluation.crack_time_display,
                },
            )
        ]

        if evaluation.common_pattern:
            findings.append(Finding(
                severity=Severity.CRITICAL,
                title="Common Password",
                description=(
                    "The password is a well-known weak password or a simple "
                    "character substitution of one."
                ),
                recommendation="Choose a password that is not on common-password lists.",
            ))

        if evaluation.is_breached:
            findings.append(Finding(
                severity=Severity.CRITICAL,
                title="Data Breach Alert",
                description=(
                    f"This password has been found in {evaluation.breach_count:,} "
                    f"data breaches."
                ),
                recommendation="This password is compromised and should not be used.",
                references=["https://haveibeenpwned.com/Passwords"],
            ))
        elif self.breach_check_enabled:
            findings.append(Finding(
                severity=Severity.INFO,
                title="Breach Check",
                description="No breaches found for this password.",
            ))

        return findings
