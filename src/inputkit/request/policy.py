import math
from dataclasses import dataclass
from numbers import Real

from .spec import (
    MSG_LIMIT_LOWER,
    MSG_LIMIT_UPPER,
    MSG_RANGE,
    MSG_SET_MISMATCH,
    AcceptancePolicy,
    EnumNumericKind,
    EnumPolicyViolation,
    PolicyDiscreteSet,
    PolicyLimit,
    PolicyNone,
    PolicyRange,
    PolicyToleranceSet,
    SpecNumericDomain,
    format_number,
)


@dataclass(frozen=True, slots=True)
class ReportPolicyCheck:
    ok: bool
    violation: EnumPolicyViolation | None = None
    message: str | None = None


_REPORT_ACCEPT = ReportPolicyCheck(ok=True)


def _reject(violation: EnumPolicyViolation, message: str) -> ReportPolicyCheck:
    return ReportPolicyCheck(ok=False, violation=violation, message=message)


################################################################################
# #region PolicyCheck
def check_policy(
    candidate: int | float, policy: AcceptancePolicy
) -> ReportPolicyCheck:
    """Decide whether a parsed candidate satisfies ``policy``.

    Returns:
        ReportPolicyCheck(ok, violation, message): ``message`` is the
        diagnostic to show the user when ``ok`` is False.
    """
    if isinstance(policy, PolicyNone):
        return _REPORT_ACCEPT

    if isinstance(policy, PolicyLimit):
        c_limit = format_number(policy.bound)
        if policy.if_upper and candidate >= policy.bound:
            return _reject(
                EnumPolicyViolation.LIMIT_UPPER, MSG_LIMIT_UPPER.format(limit=c_limit)
            )
        if not policy.if_upper and candidate <= policy.bound:
            return _reject(
                EnumPolicyViolation.LIMIT_LOWER, MSG_LIMIT_LOWER.format(limit=c_limit)
            )
        return _REPORT_ACCEPT

    if isinstance(policy, PolicyRange):
        if candidate < policy.low or candidate > policy.high:
            return _reject(
                EnumPolicyViolation.RANGE,
                MSG_RANGE.format(
                    low=format_number(policy.low), high=format_number(policy.high)
                ),
            )
        return _REPORT_ACCEPT

    if isinstance(policy, PolicyDiscreteSet):
        if any(candidate == i for i in policy.values):
            return _REPORT_ACCEPT
        return _reject(EnumPolicyViolation.SET_MISMATCH, MSG_SET_MISMATCH)

    if isinstance(policy, PolicyToleranceSet):
        n_prec = policy.precision
        if any(d - n_prec <= candidate <= d + n_prec for d in policy.values):
            return _REPORT_ACCEPT
        return _reject(EnumPolicyViolation.SET_MISMATCH, MSG_SET_MISMATCH)

    raise TypeError(f"Unsupported acceptance policy: {type(policy).__name__}")


# #endregion
################################################################################
# #region PolicyValidation
def _validate_number(
    value: object, *, c_name: str, domain: SpecNumericDomain, errors: list[str]
) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        errors.append(f"`{c_name}` must be a number, got {type(value).__name__}.")
        return

    if domain.kind is EnumNumericKind.INT and not isinstance(value, int):
        errors.append(f"`{c_name}` must be an integer, got {value!r}.")
    elif not math.isfinite(float(value)):
        errors.append(f"`{c_name}` must be finite, got {value!r}.")


def validate_policy(policy: AcceptancePolicy, domain: SpecNumericDomain) -> None:
    """Check that ``policy`` can be applied to values of ``domain``.

    Raises:
        ValueError: If the policy kind does not fit the domain or one of its
            bounds/members is not a usable number. Raised before any prompt
            is written.
    """
    c_policy = type(policy).__name__
    errors: list[str] = []

    if isinstance(policy, PolicyNone):
        pass
    elif isinstance(policy, PolicyLimit):
        _validate_number(policy.bound, c_name="bound", domain=domain, errors=errors)
    elif isinstance(policy, PolicyRange):
        _validate_number(policy.low, c_name="low", domain=domain, errors=errors)
        _validate_number(policy.high, c_name="high", domain=domain, errors=errors)
    elif isinstance(policy, PolicyDiscreteSet):
        if domain.kind is not EnumNumericKind.INT:
            errors.append("exact set membership requires the int kind.")
        for idx, c_val in enumerate(policy.values):
            _validate_number(
                c_val, c_name=f"values[{idx}]", domain=domain, errors=errors
            )
    elif isinstance(policy, PolicyToleranceSet):
        if domain.kind is not EnumNumericKind.FLOAT:
            errors.append("tolerance set membership requires the float kind.")
        _validate_number(
            policy.precision, c_name="precision", domain=domain, errors=errors
        )
        for idx, c_val in enumerate(policy.values):
            _validate_number(
                c_val, c_name=f"values[{idx}]", domain=domain, errors=errors
            )
    else:
        raise TypeError(f"Unsupported acceptance policy: {c_policy}")

    if errors:
        raise ValueError(
            f"[{c_policy}]: invalid for kind {str(domain.kind)!r}:\n"
            + "\n".join(f"- {_err}" for _err in errors)
        )


# #endregion
################################################################################
