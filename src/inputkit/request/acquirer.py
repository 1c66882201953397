"""Interactive numeric acquisition: prompt, parse, check, re-prompt.

Every public function here blocks the calling thread until the user enters an
acceptable value. There is no retry cap; the only way out besides an accepted
value is an exhausted input source (:class:`InputExhaustedError`).

Calls sharing one channel must not run concurrently: the interleaving of
prompts and reads is undefined.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import overload

from loguru import logger

from .channel import ConsoleChannel, LineChannel
from .errors import InputExhaustedError
from .parse import ParseFailed, ParseOutcome, parse_raw
from .policy import ReportPolicyCheck, check_policy, validate_policy
from .spec import (
    AcceptancePolicy,
    EnumAttemptState,
    EnumNumericKind,
    PolicyDiscreteSet,
    PolicyLimit,
    PolicyNone,
    PolicyRange,
    PolicyToleranceSet,
    SpecNumericDomain,
    get_domain,
)


################################################################################
# #region Reports
@dataclass(frozen=True, slots=True)
class Attempt:
    index: int
    raw: str
    outcome: ParseOutcome
    check: ReportPolicyCheck | None  # None when parsing failed
    state: EnumAttemptState


@dataclass(frozen=True, slots=True)
class ReportAcquire:
    value: int | float
    attempts: tuple[Attempt, ...]

    @property
    def n_attempts(self) -> int:
        return len(self.attempts)


# #endregion
################################################################################
# #region Loop
def _run_attempt(
    *,
    index: int,
    prompt: str,
    domain: SpecNumericDomain,
    policy: AcceptancePolicy,
    channel: LineChannel,
    if_legacy_sentinel: bool,
) -> Attempt:
    state = EnumAttemptState.AWAITING_INPUT
    channel.write_line(prompt)
    try:
        raw = channel.read_line()
    except EOFError as e:
        logger.warning(f"Input exhausted after {index} attempt(s) for {prompt!r}")
        raise InputExhaustedError(prompt=prompt, n_attempts=index) from e

    outcome = parse_raw(raw, domain, if_legacy_sentinel=if_legacy_sentinel)
    if isinstance(outcome, ParseFailed):
        state = EnumAttemptState.PARSE_FAILED
        logger.debug(f"Attempt {index + 1}: {raw!r} -> {outcome.reason}")
        channel.write_line(domain.message_for(outcome.reason))
        return Attempt(index=index, raw=raw, outcome=outcome, check=None, state=state)

    state = EnumAttemptState.PARSED
    report = check_policy(outcome.value, policy)
    if report.ok:
        state = EnumAttemptState.ACCEPTED
    else:
        state = EnumAttemptState.REJECTED
        logger.debug(f"Attempt {index + 1}: {raw!r} -> {report.violation}")
        assert report.message is not None
        channel.write_line(report.message)

    return Attempt(index=index, raw=raw, outcome=outcome, check=report, state=state)


def acquire_value(
    prompt: str,
    kind: EnumNumericKind | str = EnumNumericKind.INT,
    policy: AcceptancePolicy | None = None,
    *,
    channel: LineChannel | None = None,
    if_legacy_sentinel: bool = False,
) -> ReportAcquire:
    """
    Prompt until a value of ``kind`` passes ``policy`` and report how it went.

    Args:
        prompt (str): Line written before every read.
        kind (EnumNumericKind | str, optional): ``"int"`` or ``"float"``. Defaults to int.
        policy (AcceptancePolicy | None, optional): Acceptance policy. Defaults to ``PolicyNone()``.
        channel (LineChannel | None, optional): Line I/O. Defaults to a new ``ConsoleChannel``.
        if_legacy_sentinel (bool, optional): Reject the domain minimum as an overflow. Defaults to False.

    Raises:
        ValueError: If ``policy`` does not fit ``kind``; raised before prompting.
        InputExhaustedError: If the channel runs out of input.

    Returns:
        ReportAcquire(value, attempts): The accepted value and every attempt made, the last one accepted.
    """
    domain = get_domain(kind)
    policy = PolicyNone() if policy is None else policy
    validate_policy(policy, domain)
    channel = ConsoleChannel() if channel is None else channel

    l_attempts: list[Attempt] = []
    while True:
        attempt = _run_attempt(
            index=len(l_attempts),
            prompt=prompt,
            domain=domain,
            policy=policy,
            channel=channel,
            if_legacy_sentinel=if_legacy_sentinel,
        )
        l_attempts.append(attempt)
        if attempt.state is EnumAttemptState.ACCEPTED:
            break

    assert not isinstance(attempt.outcome, ParseFailed)
    logger.debug(
        f"Accepted {attempt.outcome.value!r} for {prompt!r} after {len(l_attempts)} attempt(s)"
    )
    return ReportAcquire(value=attempt.outcome.value, attempts=tuple(l_attempts))


# #endregion
################################################################################
# #region Requests
def _is_value_set(value: object) -> bool:
    # lists, tuples, sets, frozensets and generators all name a value set
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def _build_int_policy(args: tuple[object, ...]) -> AcceptancePolicy:
    match args:
        case ():
            return PolicyNone()
        case (values,) if _is_value_set(values):
            return PolicyDiscreteSet(values)  # type: ignore[arg-type]
        case (limit,):
            return PolicyLimit(limit)  # type: ignore[arg-type]
        case (low, high):
            return PolicyRange(low, high)  # type: ignore[arg-type]
    raise TypeError(
        f"request_int() takes a prompt plus 0-2 constraint arguments, got {len(args)}"
    )


def _build_double_policy(args: tuple[object, ...]) -> AcceptancePolicy:
    match args:
        case ():
            return PolicyNone()
        case (values,) if _is_value_set(values):
            raise TypeError("request_double() with a value set also needs a precision")
        case (limit,):
            return PolicyLimit(limit)  # type: ignore[arg-type]
        case (values, precision) if _is_value_set(values):
            return PolicyToleranceSet(values, precision)  # type: ignore[arg-type]
        case (low, high):
            return PolicyRange(low, high)  # type: ignore[arg-type]
    raise TypeError(
        f"request_double() takes a prompt plus 0-2 constraint arguments, got {len(args)}"
    )


@overload
def request_int(
    prompt: str, /, *, channel: LineChannel | None = ..., if_legacy_sentinel: bool = ...
) -> int: ...
@overload
def request_int(
    prompt: str,
    limit: int,
    /,
    *,
    channel: LineChannel | None = ...,
    if_legacy_sentinel: bool = ...,
) -> int: ...
@overload
def request_int(
    prompt: str,
    low: int,
    high: int,
    /,
    *,
    channel: LineChannel | None = ...,
    if_legacy_sentinel: bool = ...,
) -> int: ...
@overload
def request_int(
    prompt: str,
    values: Iterable[int],
    /,
    *,
    channel: LineChannel | None = ...,
    if_legacy_sentinel: bool = ...,
) -> int: ...
def request_int(
    prompt: str,
    /,
    *args: object,
    channel: LineChannel | None = None,
    if_legacy_sentinel: bool = False,
) -> int:
    """Request an integer from the user.

    ``request_int(prompt)`` accepts any integer, ``request_int(prompt, limit)``
    a one-sided limit (upper when ``limit >= 0``), ``request_int(prompt, low,
    high)`` a closed range and ``request_int(prompt, [1, 3, 5])`` one of the
    listed values.
    """
    report = acquire_value(
        prompt,
        EnumNumericKind.INT,
        _build_int_policy(args),
        channel=channel,
        if_legacy_sentinel=if_legacy_sentinel,
    )
    return int(report.value)


@overload
def request_double(
    prompt: str, /, *, channel: LineChannel | None = ..., if_legacy_sentinel: bool = ...
) -> float: ...
@overload
def request_double(
    prompt: str,
    limit: float,
    /,
    *,
    channel: LineChannel | None = ...,
    if_legacy_sentinel: bool = ...,
) -> float: ...
@overload
def request_double(
    prompt: str,
    low: float,
    high: float,
    /,
    *,
    channel: LineChannel | None = ...,
    if_legacy_sentinel: bool = ...,
) -> float: ...
@overload
def request_double(
    prompt: str,
    values: Iterable[float],
    precision: float,
    /,
    *,
    channel: LineChannel | None = ...,
    if_legacy_sentinel: bool = ...,
) -> float: ...
def request_double(
    prompt: str,
    /,
    *args: object,
    channel: LineChannel | None = None,
    if_legacy_sentinel: bool = False,
) -> float:
    """Request a floating-point number from the user.

    ``request_double(prompt, [0.25, 0.5], 0.01)`` accepts anything within
    ``0.01`` of a listed value; the other forms mirror :func:`request_int`.
    """
    report = acquire_value(
        prompt,
        EnumNumericKind.FLOAT,
        _build_double_policy(args),
        channel=channel,
        if_legacy_sentinel=if_legacy_sentinel,
    )
    return float(report.value)


# #endregion
################################################################################
