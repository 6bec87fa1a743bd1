"""Fibonacci guest program with configurable starting values."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable

_U32_MASK = 0xFFFFFFFF
_U32_PATTERN = re.compile(r"\+?[0-9]+")


def fibonacci(n: int, init_a: int, init_b: int) -> int:
    """Step the sequence n times from (init_a, init_b) with 32-bit wrapping."""
    prev, curr = init_a & _U32_MASK, init_b & _U32_MASK
    for _ in range(n):
        prev, curr = curr, (prev + curr) & _U32_MASK
    return curr


def _parse_u32(text: str) -> int:
    cleaned = text.strip()
    if not _U32_PATTERN.fullmatch(cleaned):
        raise ValueError(f"invalid digit found in string: {cleaned!r}")
    value = int(cleaned)
    if value > _U32_MASK:
        raise ValueError("number too large to fit in target type")
    return value


def _parse_or_default(line: str | None) -> int:
    if line is None:
        return 1
    try:
        return _parse_u32(line)
    except ValueError:
        return 1


def parse_inputs(lines: Iterable[str]) -> tuple[int, int, int]:
    """Read n and optional initial values (default 1) from input lines."""
    it = iter(lines)
    first = next(it, None)
    if first is None:
        raise ValueError("No first input provided")
    try:
        n = _parse_u32(first)
    except ValueError as exc:
        raise ValueError(f"Failed to parse first input as u32: {exc}") from exc
    init_a = _parse_or_default(next(it, None))
    init_b = _parse_or_default(next(it, None))
    return n, init_a, init_b


def main(argv: list[str] | None = None) -> int:
    """Read inputs from standard input and print the resulting term."""
    parser = argparse.ArgumentParser(
        prog="fib-input-initial",
        description="Read n, init_a and init_b from stdin and print the n-th step.",
    )
    parser.parse_args(argv)
    try:
        n, init_a, init_b = parse_inputs(sys.stdin)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(fibonacci(n, init_a, init_b))
    return 0


if __name__ == "__main__":
    sys.exit(main())