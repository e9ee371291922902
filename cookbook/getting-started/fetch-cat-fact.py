#!/usr/bin/env python3
"""Recipe: Fetch a random cat fact and handle network failures as values.

Problem:
    An HTTP call can fail at connect time, on a bad status, or while
    decoding JSON. ``attempt_async`` turns all three into a single ``Err``
    so the caller handles one value instead of three exception types.

Try:
    python -m cookbook getting-started/fetch-cat-fact
    python -m cookbook getting-started/fetch-cat-fact --url https://example.invalid/
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Any

import httpx

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from fallible import Result, attempt_async

DEFAULT_URL = "https://cat-fact.herokuapp.com/facts/random"


async def fetch_fact(client: httpx.AsyncClient, url: str = DEFAULT_URL) -> dict[str, Any]:
    """Return the decoded fact; raises on transport or HTTP errors."""
    response = await client.get(url)
    response.raise_for_status()
    return response.json()


async def main_async(
    url: str = DEFAULT_URL,
    *,
    timeout_s: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result[dict[str, Any], Exception]:
    async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
        result = await attempt_async(lambda: fetch_fact(client, url))

    print_section("Result")
    print(result)
    print_kv_rows(
        [
            ("Status", "ok" if result.is_ok else "error"),
            (
                "Fact",
                result.fold(
                    lambda fact: fact.get("text", ""),
                    lambda exc: f"unavailable: {exc}",
                ),
            ),
        ]
    )
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch a cat fact as a Result")
    parser.add_argument("--url", default=DEFAULT_URL, help="Endpoint returning JSON")
    parser.add_argument("--timeout", type=float, default=10.0, help="Seconds")
    parser.add_argument(
        "--debug", action="store_true", help="Log captured exceptions to stderr"
    )
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    print_header("Fetch a cat fact")
    print("Fetching cat facts...")
    asyncio.run(main_async(args.url, timeout_s=args.timeout))
    print_learning_hints(
        [
            "Next: point --url at an unreachable host and watch the Err path.",
            "Next: set FALLIBLE_LOG_TRACEBACKS=1 with --debug to log tracebacks.",
        ]
    )


if __name__ == "__main__":
    main()
