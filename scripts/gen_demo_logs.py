"""Emit a slow stream of demo log lines for trying out logshade.

Usage:
    uv run python scripts/gen_demo_logs.py [count] [delay] | logshade -c demo.txt
"""

# ruff: noqa: S311, PLR2004, T201
from __future__ import annotations

import random
import sys
import time
from datetime import UTC, datetime

LEVELS = ["INFO", "INFO", "INFO", "DEBUG", "WARN", "ERROR"]
MESSAGES = [
    "connection established from 10.0.0.{n}",
    "connection refused by upstream",
    "cache hit for key user:{n}",
    "slow query on orders table took {n}ms",
    "health check passed",
    "request processed in {n}ms",
    "timeout waiting for lock on job {n}",
]


def main() -> None:
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 200
    delay = float(sys.argv[2]) if len(sys.argv) > 2 else 0.25

    for _ in range(count):
        ts = datetime.now(tz=UTC).isoformat(timespec="milliseconds")
        level = random.choice(LEVELS)
        message = random.choice(MESSAGES).format(n=random.randint(1, 999))
        print(f"{ts} {level}: {message}", flush=True)
        time.sleep(delay)


if __name__ == "__main__":
    main()
