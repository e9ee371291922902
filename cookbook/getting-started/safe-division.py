#!/usr/bin/env python3
"""Recipe: Return division failures as values instead of raising.

Problem:
    ``a / b`` raises ``ZeroDivisionError`` and forces every caller into a
    try/except. Returning ``Err`` makes the failure part of the signature.

Try:
    python -m cookbook getting-started/safe-division --a 4 --b 2
    python -m cookbook getting-started/safe-division --a 4 --b 0
"""

from __future__ import annotations

import argparse

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_result,
    print_section,
)
from fallible import Err, Ok, Result


def divide(a: float, b: float) -> Result[float, str]:
    if b == 0:
        return Err("Division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return Ok(a // b)
    return Ok(a / b)


def number(raw: str) -> float:
    """Parse ``raw`` as an int, or as a float when it is not an integer literal."""
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def main() -> None:
    parser = argparse.ArgumentParser(description="Division that returns a Result")
    parser.add_argument("--a", type=number, default=4, help="Dividend")
    parser.add_argument("--b", type=number, default=0, help="Divisor")
    parser.add_argument(
        "--default", type=float, default=1.0, help="Fallback for a failed division"
    )
    args = parser.parse_args()

    print_header("Safe division")
    result = divide(args.a, args.b)

    print_section("Result")
    print_result(f"{args.a:g} / {args.b:g}", result)
    print_kv_rows(
        [
            ("get_or_none()", result.get_or_none()),
            (f"get_or_default({args.default:g})", result.get_or_default(args.default)),
            ("Doubled", result.map(lambda x: x * 2).fold(str, lambda e: f"skipped ({e})")),
        ]
    )
    print_learning_hints(
        [
            "Next: try --b 0 and compare get_or_none() with get_or_default().",
            "Next: replace Err(str) with a custom exception type and call get_or_raise().",
        ]
    )


if __name__ == "__main__":
    main()
