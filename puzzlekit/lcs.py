"""Longest common subsequence of two strings."""

from __future__ import annotations

import argparse
import sys


def longest_common_subsequence(a: str, b: str) -> str:
    """Return one longest common subsequence of ``a`` and ``b``.

    When two choices give equally long subsequences, the one reached by
    dropping a character of ``b`` is preferred.
    """
    lengths = [[0] * (len(b) + 1)]
    for ca in a:
        above = lengths[-1]
        row = [0]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                row.append(above[j - 1] + 1)
            else:
                row.append(max(row[j - 1], above[j]))
        lengths.append(row)

    i, j = len(a), len(b)
    picked: list[str] = []
    while i and j:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif lengths[i][j - 1] < lengths[i - 1][j]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def main(argv: list[str] | None = None) -> int:
    """Read two words from standard input; print the LCS length and the LCS."""
    parser = argparse.ArgumentParser(
        description="Print the longest common subsequence of two words."
    )
    parser.parse_args(argv)
    words = sys.stdin.read().split()
    if len(words) < 2:
        raise ValueError("two words are required")
    result = longest_common_subsequence(words[0], words[1])
    sys.stdout.write(f"{len(result)}\n{result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())