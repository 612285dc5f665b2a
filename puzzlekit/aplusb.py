"""Sum a counted list of ``a<op>b`` pairs, stopping at a ``0,0`` pair."""

from __future__ import annotations

import argparse
import re
import sys

_COUNT = re.compile(r"\s*([+-]?\d+)")
_PAIR = re.compile(r"\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)")


def add_pairs(text: str) -> list[int]:
    """Return the sums of the pairs in ``text``.

    The text starts with a count, followed by that many pairs written as an
    integer, any single separator character and another integer.  Reading
    stops early at a pair whose operands are both zero.
    """
    match = _COUNT.match(text)
    if match is None:
        raise ValueError("input must start with the number of pairs")
    count = int(match.group(1))
    position = match.end()

    sums: list[int] = []
    for _ in range(count):
        pair = _PAIR.match(text, position)
        if pair is None:
            raise ValueError(f"malformed or missing pair after offset {position}")
        position = pair.end()
        a, b = int(pair.group(1)), int(pair.group(3))
        if a == 0 and b == 0:
            break
        sums.append(a + b)
    return sums


def main(argv: list[str] | None = None) -> int:
    """Read pairs from standard input and print one sum per line."""
    parser = argparse.ArgumentParser(
        description="Add pairs of integers read from standard input."
    )
    parser.parse_args(argv)
    for total in add_pairs(sys.stdin.read()):
        sys.stdout.write(f"{total}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())