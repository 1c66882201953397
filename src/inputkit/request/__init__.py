from .acquirer import Attempt, ReportAcquire, acquire_value, request_double, request_int
from .channel import ConsoleChannel, LineChannel, ScriptedChannel
from .errors import InputExhaustedError
from .parse import Parsed, ParseFailed, parse_raw
from .policy import ReportPolicyCheck, check_policy, validate_policy
from .spec import (
    DOMAIN_FLOAT,
    DOMAIN_INT,
    AcceptancePolicy,
    EnumAttemptState,
    EnumNumericKind,
    EnumParseFailure,
    EnumPolicyViolation,
    PolicyDiscreteSet,
    PolicyLimit,
    PolicyNone,
    PolicyRange,
    PolicyToleranceSet,
    SpecNumericDomain,
    format_number,
    get_domain,
)

__all__ = [
    "request_int",
    "request_double",
    "acquire_value",
    "Attempt",
    "ReportAcquire",
    "LineChannel",
    "ConsoleChannel",
    "ScriptedChannel",
    "InputExhaustedError",
    "Parsed",
    "ParseFailed",
    "parse_raw",
    "ReportPolicyCheck",
    "check_policy",
    "validate_policy",
    "AcceptancePolicy",
    "PolicyNone",
    "PolicyLimit",
    "PolicyRange",
    "PolicyDiscreteSet",
    "PolicyToleranceSet",
    "EnumNumericKind",
    "EnumParseFailure",
    "EnumPolicyViolation",
    "EnumAttemptState",
    "SpecNumericDomain",
    "DOMAIN_INT",
    "DOMAIN_FLOAT",
    "get_domain",
    "format_number",
]
