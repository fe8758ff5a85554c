"""Days needed to collect a number of geekBits."""

from __future__ import annotations

import sys
from collections.abc import Sequence

PROMPT = "Enter the number of geekBits you want : "


def days_for_geekbits(n: int) -> int:
    """Return the number of days needed to collect ``n`` geekBits.

    One geekBit is earned per day, and every eighth day brings a bonus of
    eight more.
    """
    collected = 0
    days = 0
    for day in range(1, n + 1):
        collected += 1
        days += 1
        if day % 8 == 0:
            collected += 8
        if collected >= n:
            break
    return days


def main(argv: Sequence[str] | None = None) -> int:
    """Read a target count (argument or prompt) and print the days needed."""
    args = sys.argv[1:] if argv is None else list(argv)
    raw = args[0] if args else input(PROMPT)
    try:
        n = int(raw.strip())
    except ValueError:
        print(f"not a whole number: {raw!r}", file=sys.stderr)
        return 1
    days = days_for_geekbits(n)
    print(f"To get{n} geekBits, you need to wait for {days} days")
    return 0


if __name__ == "__main__":
    sys.exit(main())