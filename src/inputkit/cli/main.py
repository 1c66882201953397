import argparse
import sys
from collections.abc import Sequence

from loguru import logger
from rich.console import Console
from rich.markup import escape

from inputkit.cli.console import CliHeadings
from inputkit.cli.parser import build_parser
from inputkit.request import (
    AcceptancePolicy,
    ConsoleChannel,
    EnumNumericKind,
    InputExhaustedError,
    LineChannel,
    PolicyDiscreteSet,
    PolicyLimit,
    PolicyNone,
    PolicyRange,
    PolicyToleranceSet,
    acquire_value,
    format_number,
    get_domain,
    validate_policy,
)

_KIND_BY_COMMAND: dict[str, EnumNumericKind] = {
    "int": EnumNumericKind.INT,
    "double": EnumNumericKind.FLOAT,
}


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.enable("inputkit")


def build_policy(ns: argparse.Namespace) -> AcceptancePolicy:
    if ns.limit is not None:
        return PolicyLimit(ns.limit)
    if ns.bounds is not None:
        return PolicyRange(*ns.bounds)
    if ns.choices is not None:
        if ns.command == "double":
            return PolicyToleranceSet(ns.choices, ns.precision)
        return PolicyDiscreteSet(ns.choices)
    return PolicyNone()


def describe_policy(policy: AcceptancePolicy) -> str:
    if isinstance(policy, PolicyLimit):
        c_side = "below" if policy.if_upper else "above"
        return f"any value {c_side} {format_number(policy.bound)}"
    if isinstance(policy, PolicyRange):
        return f"from {format_number(policy.low)} to {format_number(policy.high)}"
    if isinstance(policy, PolicyDiscreteSet):
        return "one of " + ", ".join(format_number(v) for v in policy.values)
    if isinstance(policy, PolicyToleranceSet):
        c_values = ", ".join(format_number(v) for v in policy.values)
        return f"within {format_number(policy.precision)} of {c_values}"
    return "any value"


def main(
    argv: Sequence[str] | None = None, *, channel: LineChannel | None = None
) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    if ns.log_level:
        configure_logging(ns.log_level)

    kind = _KIND_BY_COMMAND[ns.command]
    policy = build_policy(ns)
    try:
        validate_policy(policy, get_domain(kind))
    except ValueError as e:
        parser.error(str(e))

    console = Console()
    if channel is None:
        channel = ConsoleChannel(console=console)

    if not ns.quiet:
        headings = CliHeadings(console=console)
        headings.title(f"Request {ns.command}")
        headings.detail(describe_policy(policy))

    try:
        report = acquire_value(
            ns.prompt,
            kind,
            policy,
            channel=channel,
            if_legacy_sentinel=ns.if_legacy_sentinel,
        )
    except InputExhaustedError as e:
        Console(stderr=True).print(f"[red]{escape(str(e))}[/red]")
        return 1

    channel.write_line(format_number(report.value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
