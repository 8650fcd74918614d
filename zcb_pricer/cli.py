"""Command-line entry point: interactive zero-coupon bond pricing."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from zcb_pricer.config import DEFAULT_PRECISION, LOG_LEVELS, PricerConfig
from zcb_pricer.errors import InputParseError
from zcb_pricer.logging_setup import configure_logging
from zcb_pricer.pricing import run

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zcb-pricer",
        description=(
            "Price a zero-coupon bond with continuous discounting: "
            "Price = FaceValue * exp(-InterestRate * YearFraction)."
        ),
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=f"significant digits in the report (default: {DEFAULT_PRECISION})",
    )
    parser.add_argument(
        "--retry",
        action="store_true",
        help="re-prompt after an invalid number instead of exiting",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=3,
        help="prompts per field when --retry is set (default: 3)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="diagnostics threshold on stderr (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = PricerConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(config.log_level)

    try:
        run(config=config)
    except InputParseError as exc:
        logger.error("%s [%s]", exc.message, exc.code)
        return EXIT_INPUT_ERROR
    return EXIT_OK
