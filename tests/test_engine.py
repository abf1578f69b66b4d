import asyncio
import math

import pytest

from pwcheck.analyzers.breach import BreachChecker
from pwcheck.core.engine import (
    GENERIC_ERROR_MESSAGE,
    EvaluationInProgressError,
    PasswordEvaluator,
    mask_password,
)
from pwcheck.core.models import StrengthLabel
from pwcore.config import PwConfig
from pwcore.models import Severity


class FakeBreachChecker:
    """Stands in for :class:`BreachChecker` without any transport."""

    def __init__(self, count: int = 0, gate: asyncio.Event | None = None) -> None:
        self.count = count
        self.gate = gate
        self.seen: list[str] = []
        self.closed = False

    async def check(self, password: str) -> int:
        self.seen.append(password)
        if self.gate is not None:
            await self.gate.wait()
        return self.count

    async def close(self) -> None:
        self.closed = True


def _evaluate(evaluator: PasswordEvaluator, password: str):
    async def run():
        async with evaluator:
            return await evaluator.evaluate(password)

    return asyncio.run(run())


def test_common_password_is_very_weak_despite_entropy(offline_config):
    result = _evaluate(PasswordEvaluator(offline_config), "password")

    assert result.entropy_bits == pytest.approx(37.60, abs=0.01)
    assert result.common_pattern is True
    assert result.strength_label is StrengthLabel.VERY_WEAK
    assert result.breach_count == 0
    assert result.error_message is None


def test_leetspeak_password_is_very_weak(offline_config):
    result = _evaluate(PasswordEvaluator(offline_config), "p4ssw0rd")
    assert result.common_pattern is True
    assert result.strength_label is StrengthLabel.VERY_WEAK


def test_empty_password_when_invoked_directly(offline_config):
    result = _evaluate(PasswordEvaluator(offline_config), "")

    assert result.entropy_bits == 0.0
    assert result.crack_time_display == "0.00 seconds"
    assert result.strength_label is StrengthLabel.VERY_WEAK


def test_strong_password(offline_config):
    result = _evaluate(PasswordEvaluator(offline_config), "Tr0ub4dor&3")

    assert result.entropy_bits == pytest.approx(11 * math.log2(94))
    assert result.strength_label is StrengthLabel.STRONG
    assert result.common_pattern is False
    assert result.crack_time_display.endswith(" years")


def test_extra_common_passwords_from_config():
    config = PwConfig()
    config.evaluator.breach_check = False
    config.evaluator.extra_common_passwords = ["Zq9#mLx2!vB7"]

    result = _evaluate(PasswordEvaluator(config), "Zq9#mLx2!vB7")
    assert result.common_pattern is True
    assert result.strength_label is StrengthLabel.VERY_WEAK


def test_breach_count_is_reported(offline_config):
    checker = FakeBreachChecker(count=12)
    evaluator = PasswordEvaluator(offline_config, breach_checker=checker)

    result = _evaluate(evaluator, "Tr0ub4dor&3")
    assert result.breach_count == 12
    assert result.is_breached
    assert checker.seen == ["Tr0ub4dor&3"]
    assert checker.closed


def test_breach_failure_does_not_block_evaluation(offline_config, range_transport):
    checker = BreachChecker(transport=range_transport(status=503))
    result = _evaluate(PasswordEvaluator(offline_config, breach_checker=checker), "password")

    assert result.breach_count == 0
    assert result.strength_label is StrengthLabel.VERY_WEAK
    assert not result.is_error


def test_breach_check_disabled_builds_no_checker(offline_config):
    assert PasswordEvaluator(offline_config).breach_check_enabled is False
    assert PasswordEvaluator(PwConfig()).breach_check_enabled is True


def test_stages_run_in_order(offline_config, monkeypatch):
    calls: list[str] = []
    evaluator = PasswordEvaluator(
        offline_config, breach_checker=FakeBreachChecker()
    )

    def spy(name, fn):
        def wrapper(*args, **kwargs):
            calls.append(name)
            return fn(*args, **kwargs)
        return wrapper

    async def breach(password):
        calls.append("breach")
        return 0

    monkeypatch.setattr(evaluator._entropy, "estimate", spy("entropy", evaluator._entropy.estimate))
    monkeypatch.setattr(evaluator._crack_time, "estimate", spy("crack_time", evaluator._crack_time.estimate))
    monkeypatch.setattr(evaluator._patterns, "is_common", spy("pattern", evaluator._patterns.is_common))
    monkeypatch.setattr(evaluator._breach, "check", breach)
    monkeypatch.setattr(evaluator._classifier, "classify", spy("classify", evaluator._classifier.classify))

    _evaluate(evaluator, "Tr0ub4dor&3")
    assert calls == ["entropy", "crack_time", "pattern", "breach", "classify"]


def test_stage_failure_yields_error_result(offline_config, monkeypatch):
    checker = FakeBreachChecker()
    evaluator = PasswordEvaluator(offline_config, breach_checker=checker)

    def explode(password):
        raise RuntimeError("boom")

    monkeypatch.setattr(evaluator._entropy, "estimate", explode)
    result = _evaluate(evaluator, "password")

    assert result.is_error
    assert result.error_message == GENERIC_ERROR_MESSAGE
    assert result.strength_label is None
    assert checker.seen == []
    assert not evaluator.busy


def test_reentrant_evaluation_is_rejected(offline_config):
    gate = asyncio.Event()
    evaluator = PasswordEvaluator(
        offline_config, breach_checker=FakeBreachChecker(gate=gate)
    )

    async def run():
        first = asyncio.create_task(evaluator.evaluate("first"))
        await asyncio.sleep(0)
        assert evaluator.busy
        with pytest.raises(EvaluationInProgressError):
            await evaluator.evaluate("second")
        gate.set()
        return await first

    result = asyncio.run(run())
    assert not result.is_error
    assert not evaluator.busy


def test_sequential_evaluations_are_independent(offline_config):
    evaluator = PasswordEvaluator(offline_config)

    async def run():
        return (
            await evaluator.evaluate("password"),
            await evaluator.evaluate("Tr0ub4dor&3"),
        )

    weak, strong = asyncio.run(run())
    assert weak.strength_label is StrengthLabel.VERY_WEAK
    assert strong.strength_label is StrengthLabel.STRONG


@pytest.mark.parametrize(
    "password, masked",
    [("", ""), ("a", "*"), ("ab", "**"), ("abc", "a*c"), ("password", "p******d")],
)
def test_mask_password(password, masked):
    assert mask_password(password) == masked


def test_scan_findings_for_breached_common_password(offline_config):
    evaluator = PasswordEvaluator(
        offline_config, breach_checker=FakeBreachChecker(count=3)
    )
    scan = asyncio.run(evaluator.scan("password"))

    titles = [f.title for f in scan.findings]
    assert titles == [
        "Password Strength: Very Weak",
        "Common Password",
        "Data Breach Alert",
    ]
    assert scan.highest_severity is Severity.CRITICAL
    assert scan.metadata["password_masked"] == "p******d"
    assert scan.metadata["evaluation"]["breach_count"] == 3
    assert "password" not in scan.summary
    assert scan.end_time is not None


def test_scan_findings_for_clean_strong_password(offline_config):
    evaluator = PasswordEvaluator(offline_config, breach_checker=FakeBreachChecker())
    scan = asyncio.run(evaluator.scan("Tr0ub4dor&3"))

    assert [f.title for f in scan.findings] == ["Password Strength: Strong", "Breach Check"]
    assert scan.highest_severity is Severity.INFO


def test_scan_error_finding(offline_config, monkeypatch):
    evaluator = PasswordEvaluator(offline_config)
    monkeypatch.setattr(
        evaluator._patterns, "matches", lambda password: 1 / 0
    )
    scan = asyncio.run(evaluator.scan("Tr0ub4dor&3"))

    assert [f.title for f in scan.findings] == ["Evaluation Error"]
    assert scan.summary == f"Error: {GENERIC_ERROR_MESSAGE}"
