"""
Find the least number for which the bouncy proportion reaches THRESHOLD.

Usage:
    python -m bouncy_numbers.solve [--verbose]

Output (stdout):
    The proportion needed is: 0.990000
    The first number to meet that proportion is:1587000

Reference: Project Euler, Problem 112
"""

import argparse
from typing import List, Optional

from .config import THRESHOLD
from .counter import find_first_over


def format_report(threshold: float, first_over: int) -> str:
    """Two-line answer report, without a trailing newline."""
    return (
        f"The proportion needed is: {threshold:f}\n"
        f"The first number to meet that proportion is:{first_over}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description=f"Least number for which the proportion of bouncy numbers reaches {THRESHOLD}"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Print progress for each digit length"
    )
    args = parser.parse_args(argv)

    state = find_first_over(THRESHOLD, verbose=args.verbose)
    print(format_report(state.threshold, state.first_over))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
