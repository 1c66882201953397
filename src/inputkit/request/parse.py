import math
from dataclasses import dataclass

from .spec import EnumNumericKind, EnumParseFailure, SpecNumericDomain


@dataclass(frozen=True, slots=True)
class Parsed:
    value: int | float


@dataclass(frozen=True, slots=True)
class ParseFailed:
    reason: EnumParseFailure


ParseOutcome = Parsed | ParseFailed


def _convert(c_text: str, kind: EnumNumericKind) -> int | float:
    if kind is EnumNumericKind.INT:
        return int(c_text)
    return float(c_text)


def parse_raw(
    text: str | None,
    domain: SpecNumericDomain,
    *,
    if_legacy_sentinel: bool = False,
) -> ParseOutcome:
    """Convert one line of user text into a candidate of ``domain.kind``.

    Args:
        text: Raw line as read from the channel. ``None`` and blank lines are
            format errors.
        domain: Numeric domain supplying the grammar and representable range.
        if_legacy_sentinel: Report the domain minimum as an overflow. Older
            console helpers used it as a "no value yet" marker.

    Returns:
        ``Parsed(value)`` on success, otherwise ``ParseFailed(reason)``.
    """
    if text is None:
        return ParseFailed(EnumParseFailure.FORMAT_ERROR)

    c_text = text.strip()
    if not domain.pattern.fullmatch(c_text):
        return ParseFailed(EnumParseFailure.FORMAT_ERROR)

    try:
        n_val = _convert(c_text, domain.kind)
    except ValueError:
        # grammar already matched, so only int's digit cap can land here
        return ParseFailed(EnumParseFailure.OVERFLOW)

    if isinstance(n_val, float) and not math.isfinite(n_val):
        return ParseFailed(EnumParseFailure.OVERFLOW)
    if n_val < domain.min_value or n_val > domain.max_value:
        return ParseFailed(EnumParseFailure.OVERFLOW)
    if if_legacy_sentinel and n_val == domain.sentinel:
        return ParseFailed(EnumParseFailure.OVERFLOW)

    return Parsed(n_val)
