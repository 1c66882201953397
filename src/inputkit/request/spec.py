import math
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

################################################################################
# #region Enums
class EnumNumericKind(StrEnum):
    INT = "int"  # signed 32-bit integer
    FLOAT = "float"  # IEEE-754 double


class EnumParseFailure(StrEnum):
    OVERFLOW = "overflow"
    FORMAT_ERROR = "format_error"


class EnumPolicyViolation(StrEnum):
    LIMIT_UPPER = "limit_upper"
    LIMIT_LOWER = "limit_lower"
    RANGE = "range"
    SET_MISMATCH = "set_mismatch"


class EnumAttemptState(StrEnum):
    AWAITING_INPUT = "awaiting_input"
    PARSED = "parsed"
    PARSE_FAILED = "parse_failed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# #endregion
################################################################################
# #region Messages
MSG_OVERFLOW_INT = (
    "Input was out of integer range. "
    "Please enter a positive or negative value below 2,147,483,648"
)
MSG_OVERFLOW_FLOAT = "Input was out of floating point precision range."
MSG_FORMAT_INT = (
    "Input contained characters other than digits. Please enter only a number."
)
MSG_FORMAT_FLOAT = (
    "Input contained characters other than digits. Please enter only a number. "
    "It can contain one decimal point."
)
MSG_LIMIT_UPPER = (
    "Input was higher than acceptable limit. Please enter a value below {limit}."
)
MSG_LIMIT_LOWER = (
    "Input was lower than acceptable limit. Please enter a value above {limit}."
)
MSG_RANGE = "Input was outside the acceptable range of {low} to {high}."
MSG_SET_MISMATCH = "Input did not match any acceptable values."


def format_number(value: int | float) -> str:
    """Render a number for diagnostics.

    Integral floats drop their fractional part (``10.0`` -> ``"10"``), other
    floats use the shortest round-trip form.
    """
    if isinstance(value, float) and math.isfinite(value):
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    return str(value)


# #endregion
################################################################################
# #region NumericDomain
@dataclass(frozen=True, slots=True)
class SpecNumericDomain:
    """Representable range, parse grammar and diagnostics of a numeric kind.

    Attributes:
        kind: Numeric kind this domain describes.
        min_value: Smallest representable value. Doubles as the legacy
            "no value yet" sentinel.
        max_value: Largest representable value.
        pattern: Full-match grammar applied to stripped input text.
        msg_overflow: Diagnostic written on overflow.
        msg_format_error: Diagnostic written on malformed text.
    """

    kind: EnumNumericKind
    min_value: int | float
    max_value: int | float
    pattern: re.Pattern[str]
    msg_overflow: str
    msg_format_error: str

    @property
    def sentinel(self) -> int | float:
        return self.min_value

    def message_for(self, reason: EnumParseFailure) -> str:
        if reason is EnumParseFailure.OVERFLOW:
            return self.msg_overflow
        return self.msg_format_error


DOMAIN_INT = SpecNumericDomain(
    kind=EnumNumericKind.INT,
    min_value=-(2**31),
    max_value=2**31 - 1,
    pattern=re.compile(r"[+-]?[0-9]+"),
    msg_overflow=MSG_OVERFLOW_INT,
    msg_format_error=MSG_FORMAT_INT,
)

DOMAIN_FLOAT = SpecNumericDomain(
    kind=EnumNumericKind.FLOAT,
    min_value=-sys.float_info.max,
    max_value=sys.float_info.max,
    # one decimal point at most, optional decimal exponent
    pattern=re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"),
    msg_overflow=MSG_OVERFLOW_FLOAT,
    msg_format_error=MSG_FORMAT_FLOAT,
)

_DOMAINS: dict[EnumNumericKind, SpecNumericDomain] = {
    EnumNumericKind.INT: DOMAIN_INT,
    EnumNumericKind.FLOAT: DOMAIN_FLOAT,
}


def get_domain(kind: EnumNumericKind | str) -> SpecNumericDomain:
    try:
        return _DOMAINS[EnumNumericKind(kind)]
    except ValueError:
        raise ValueError(
            f"`kind` must be one of {[str(k) for k in EnumNumericKind]}, got {kind!r}"
        ) from None


# #endregion
################################################################################
# #region AcceptancePolicy
@dataclass(frozen=True, slots=True)
class PolicyNone:
    """Accept any successfully parsed value."""


@dataclass(frozen=True, slots=True)
class PolicyLimit:
    """One-sided limit whose sign picks the side.

    ``bound >= 0`` accepts values strictly below it, ``bound < 0`` accepts
    values strictly above it. ``0`` is an upper bound.
    """

    bound: int | float

    @property
    def if_upper(self) -> bool:
        return self.bound >= 0


@dataclass(frozen=True, slots=True)
class PolicyRange:
    """Closed interval ``[low, high]``. ``low <= high`` is not checked."""

    low: int | float
    high: int | float


@dataclass(frozen=True, slots=True, init=False)
class PolicyDiscreteSet:
    """Exact membership in a fixed collection of integers."""

    values: tuple[int, ...]

    def __init__(self, values: Iterable[int]) -> None:
        object.__setattr__(self, "values", tuple(values))


@dataclass(frozen=True, slots=True, init=False)
class PolicyToleranceSet:
    """Membership within ``+/- precision`` of any element (floats only)."""

    values: tuple[float, ...]
    precision: float

    def __init__(self, values: Iterable[float], precision: float = 0.0) -> None:
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "precision", abs(precision))


AcceptancePolicy = (
    PolicyNone | PolicyLimit | PolicyRange | PolicyDiscreteSet | PolicyToleranceSet
)

# #endregion
################################################################################
