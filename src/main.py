import argparse
import logging
import sys
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from config.config import LOG_LEVELS, Config
from numbers_game.analytics import ExpressionAnalyzer, analyze_solutions
from numbers_game.exceptions import InputValidationError
from numbers_game.expression_parser import ExpressionParser
from numbers_game.solver import CountdownSolver
from numbers_game.validation import parse_numbers, parse_target
from utils.helpers import (format_analysis, format_check, format_header,
                           format_solutions, format_stats)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_CONFIG = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countdown",
        description="Find every way to reach a target in the Countdown numbers game",
        epilog="Example: countdown 1,3,7,10,25,50 765",
    )
    parser.add_argument("numbers", help="Comma separated source numbers, e.g. 1,3,7,10,25,50")
    parser.add_argument("target", help="Number to reach")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Stop after this many solutions",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print an analysis of the solutions found",
    )
    parser.add_argument(
        "--check",
        metavar="EXPRESSION",
        help="Evaluate your own expression against the numbers and target instead of searching",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Logging level (defaults to COUNTDOWN_LOG_LEVEL or the settings file)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # Load environment variables
    load_dotenv()

    args = build_parser().parse_args(argv)
    try:
        config = Config()
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    # Configure logging
    logging.basicConfig(
        level=args.log_level or config.log_level,
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        numbers = parse_numbers(
            args.numbers,
            max_numbers=config.max_numbers,
            allow_duplicates=config.allow_duplicates,
        )
        target = parse_target(args.target, config.target_min, config.target_max)
        if args.limit is not None and args.limit < 1:
            raise InputValidationError("--limit must be a positive integer")
    except InputValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.check:
        outcome = ExpressionParser().parse_and_validate(args.check, numbers)
        print(format_check(args.check, target, outcome))
        return EXIT_OK

    print(format_header(target, numbers))
    report = CountdownSolver().solve(numbers, target, limit=args.limit)
    print()
    print(format_solutions(report.solutions, report.limit_reached))

    if args.stats and report.found:
        print("\nDetailed Analysis:")
        print(format_analysis(ExpressionAnalyzer(report.solutions)))
        print()
        for stats in analyze_solutions(report.solutions):
            print(format_stats(stats))
            print()

    logger.debug("Search finished in %.3fs", report.elapsed)
    return EXIT_OK


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
