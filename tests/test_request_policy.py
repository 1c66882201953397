from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

from inputkit.request import (  # noqa: E402
    DOMAIN_FLOAT,
    DOMAIN_INT,
    EnumPolicyViolation,
    PolicyDiscreteSet,
    PolicyLimit,
    PolicyNone,
    PolicyRange,
    PolicyToleranceSet,
    check_policy,
    format_number,
    validate_policy,
)


def test_no_policy_accepts_anything() -> None:
    assert check_policy(-(2**31), PolicyNone()).ok


@pytest.mark.parametrize("limit", [0, 1, 10, 1000])
def test_non_negative_limit_is_exclusive_upper_bound(limit: int) -> None:
    assert check_policy(limit - 1, PolicyLimit(limit)).ok

    report = check_policy(limit, PolicyLimit(limit))
    assert not report.ok
    assert report.violation is EnumPolicyViolation.LIMIT_UPPER
    assert report.message == (
        "Input was higher than acceptable limit. "
        f"Please enter a value below {limit}."
    )
    assert not check_policy(limit + 5, PolicyLimit(limit)).ok


@pytest.mark.parametrize("limit", [-1, -10, -1000])
def test_negative_limit_is_exclusive_lower_bound(limit: int) -> None:
    assert check_policy(limit + 1, PolicyLimit(limit)).ok

    report = check_policy(limit, PolicyLimit(limit))
    assert not report.ok
    assert report.violation is EnumPolicyViolation.LIMIT_LOWER
    assert report.message == (
        "Input was lower than acceptable limit. "
        f"Please enter a value above {limit}."
    )
    assert not check_policy(limit - 5, PolicyLimit(limit)).ok


def test_range_is_closed_on_both_ends() -> None:
    policy = PolicyRange(1, 10)
    for n_val in (1, 5, 10):
        assert check_policy(n_val, policy).ok

    for n_val in (0, 11):
        report = check_policy(n_val, policy)
        assert not report.ok
        assert report.violation is EnumPolicyViolation.RANGE
        assert report.message == "Input was outside the acceptable range of 1 to 10."


def test_discrete_set_is_reflexive_and_exact() -> None:
    policy = PolicyDiscreteSet([1, 3, 5])
    assert policy.values == (1, 3, 5)
    for n_val in policy.values:
        assert check_policy(n_val, policy).ok

    report = check_policy(2, policy)
    assert not report.ok
    assert report.violation is EnumPolicyViolation.SET_MISMATCH
    assert report.message == "Input did not match any acceptable values."


@pytest.mark.parametrize(
    ("candidate", "ok"),
    [(9.5, True), (10.5, True), (10.0, True), (9.4, False), (10.6, False)],
)
def test_tolerance_set_boundaries(candidate: float, ok: bool) -> None:
    assert check_policy(candidate, PolicyToleranceSet([10.0], 0.5)).ok is ok


def test_tolerance_set_normalizes_negative_precision() -> None:
    policy = PolicyToleranceSet([1.0, 2.0], -0.25)
    assert policy.precision == 0.25
    assert check_policy(2.2, policy).ok
    assert not check_policy(1.5, policy).ok


def test_float_bounds_render_like_console() -> None:
    assert format_number(10.0) == "10"
    assert format_number(0.5) == "0.5"
    assert format_number(-3) == "-3"

    report = check_policy(12.5, PolicyRange(0.5, 10.0))
    assert report.message == "Input was outside the acceptable range of 0.5 to 10."


def test_validate_policy_rejects_tolerance_set_for_int() -> None:
    with pytest.raises(ValueError, match="requires the float kind"):
        validate_policy(PolicyToleranceSet([1.0], 0.1), DOMAIN_INT)


def test_validate_policy_rejects_discrete_set_for_float() -> None:
    with pytest.raises(ValueError, match="requires the int kind"):
        validate_policy(PolicyDiscreteSet([1, 2]), DOMAIN_FLOAT)


def test_validate_policy_rejects_fractional_int_bound() -> None:
    with pytest.raises(ValueError, match=r"\[PolicyLimit\]"):
        validate_policy(PolicyLimit(2.5), DOMAIN_INT)


def test_validate_policy_rejects_non_finite_float_bound() -> None:
    with pytest.raises(ValueError, match="must be finite"):
        validate_policy(PolicyRange(0.0, float("inf")), DOMAIN_FLOAT)


def test_validate_policy_leaves_inverted_range_to_caller() -> None:
    validate_policy(PolicyRange(10, 1), DOMAIN_INT)
    assert not check_policy(5, PolicyRange(10, 1)).ok
