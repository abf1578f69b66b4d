import math

import pytest

from pwcheck.analyzers.crack_time import CrackTimeEstimator, format_crack_time


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0.00 seconds"),
        (30, "30.00 seconds"),
        (59.999, "60.00 seconds"),
        (60, "1.00 minutes"),
        (90, "1.50 minutes"),
        (7200, "2.00 hours"),
        (172800, "2.00 days"),
        (31536000, "1.00 years"),
        (63072000, "2.00 years"),
    ],
)
def test_format_boundaries(seconds, expected):
    assert format_crack_time(seconds) == expected


def test_format_huge_and_infinite_values_fall_through_to_years():
    assert format_crack_time(1e300).endswith(" years")
    assert format_crack_time(math.inf) == "inf years"


def test_estimate_uses_guess_rate():
    estimator = CrackTimeEstimator()
    assert estimator.estimate(0) == pytest.approx(1e-9)
    assert estimator.estimate(30) == pytest.approx(2 ** 30 / 1e9)
    assert CrackTimeEstimator(1e3).estimate(10) == pytest.approx(1.024)


def test_estimate_is_increasing_in_entropy():
    estimator = CrackTimeEstimator()
    values = [estimator.estimate(bits) for bits in (0, 10, 20.5, 40, 80, 128)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_estimate_overflow_is_infinite():
    assert CrackTimeEstimator().estimate(5000) == math.inf


@pytest.mark.parametrize("rate", [0, -1])
def test_rejects_non_positive_rate(rate):
    with pytest.raises(ValueError):
        CrackTimeEstimator(rate)
