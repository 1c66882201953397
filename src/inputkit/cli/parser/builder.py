import argparse

from .base import SmartFormatter

LEVELS_LOG: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--prompt",
        default="Enter a number",
        help="Line written before every read.",
    )
    parser.add_argument(
        "--legacy-sentinel",
        dest="if_legacy_sentinel",
        action="store_true",
        help="Reject the smallest representable value as out of range.",
    )
    parser.add_argument(
        "--log-level",
        choices=LEVELS_LOG,
        default=None,
        help="Enable library logging on stderr at this level.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the heading above the prompt.",
    )


def _add_constraint_args(
    parser: argparse.ArgumentParser, *, kind_value: type[int] | type[float]
) -> None:
    c_meta = "N" if kind_value is int else "X"
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--limit",
        type=kind_value,
        metavar=c_meta,
        help="Upper limit when >= 0 (value must be below it),\n"
        "lower limit when < 0 (value must be above it).",
    )
    group.add_argument(
        "--range",
        dest="bounds",
        type=kind_value,
        nargs=2,
        metavar=("LOW", "HIGH"),
        help="Closed range of acceptable values.",
    )
    group.add_argument(
        "--choices",
        type=kind_value,
        nargs="+",
        metavar=c_meta,
        help="Acceptable values.",
    )


def build_parser(prog: str = "inputkit") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Prompt until an acceptable number is entered, then print it.",
        formatter_class=SmartFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_int = subparsers.add_parser(
        "int", help="Request an integer.", formatter_class=SmartFormatter
    )
    _add_constraint_args(parser_int, kind_value=int)
    _add_common_args(parser_int)

    parser_double = subparsers.add_parser(
        "double",
        help="Request a floating-point number.",
        formatter_class=SmartFormatter,
    )
    _add_constraint_args(parser_double, kind_value=float)
    parser_double.add_argument(
        "--precision",
        type=float,
        default=0.0,
        help="Tolerance applied to --choices (sign is ignored).",
    )
    _add_common_args(parser_double)

    return parser
