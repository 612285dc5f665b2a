"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

import argparse
import sys

DEFAULT_TEXT = "aabcedabcdabcdabcefaaa"
DEFAULT_PATTERN = "abacbbc"


def failure_table(pattern: str) -> list[int]:
    """Return the KMP failure table: ``len(pattern) + 1`` entries, the first -1."""
    fail = [-1]
    j = -1
    for ch in pattern:
        while j > -1 and ch != pattern[j]:
            j = fail[j]
        j += 1
        fail.append(j)
    return fail


def kmp_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    if not pattern:
        return 0
    fail = failure_table(pattern)
    j = 0
    for i, ch in enumerate(text):
        while j >= 0 and ch != pattern[j]:
            j = fail[j]
        j += 1
        if j == len(pattern):
            return i + 1 - j
    return -1


def main(argv: list[str] | None = None) -> int:
    """Search for a pattern in a text and report where it was found."""
    parser = argparse.ArgumentParser(description="Find a pattern in a text.")
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT)
    parser.add_argument("pattern", nargs="?", default=DEFAULT_PATTERN)
    args = parser.parse_args(argv)

    found = kmp_search(args.text, args.pattern)
    if found == -1:
        sys.stdout.write("not found\n")
    else:
        sys.stdout.write(
            f"0123456789\n{args.text}\n{args.pattern}\nfound at {found}\n"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())