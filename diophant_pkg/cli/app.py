from __future__ import annotations

import argparse

from .. import config as _config
from ..config import VERSION
from ..logging_config import get_logger
from ..logging_config import setup_logging
from ..solver import solve_equation
from ..types import General
from ..utils.formatting import format_equation
from ..utils.formatting import print_result_pretty

_logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diophant",
        description="Find the integer solutions of ax^2 + bxy + cy^2 + dx + ey + f = 0.",
    )
    parser.add_argument(
        "equation",
        nargs="?",
        help="Equation in x and y, e.g. 'x^2 + 2xy + 3y^2 + 3x + 5y = 0'",
    )
    parser.add_argument(
        "-c",
        "--coeffs",
        nargs=6,
        type=int,
        metavar=("A", "B", "C", "D", "E", "F"),
        help="Give the coefficients directly instead of an equation string",
    )
    parser.add_argument(
        "-n",
        "--limit",
        type=int,
        help=f"Pairs shown for infinite families (default: {_config.DISPLAY_LIMIT})",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default=_config.OUTPUT_FORMAT,
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=_config.LOG_LEVEL,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    return parser


def main_entry(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        0 when the equation was solved, 1 on a parse or solver error.
        Usage errors exit through argparse with status 2.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be non-negative")

    if args.coeffs and args.equation:
        parser.error("give either an equation or --coeffs, not both")
    if args.coeffs:
        equation = General(*args.coeffs)
        _logger.info(f"Solving {format_equation(equation)}")
        result = solve_equation(equation, limit=args.limit)
    elif args.equation:
        _logger.info(f"Solving {args.equation}")
        result = solve_equation(args.equation, limit=args.limit)
    else:
        parser.error("an equation or --coeffs is required")

    print_result_pretty(result, output_format=args.format)
    return 0 if result.ok else 1
