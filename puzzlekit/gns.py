"""Sort digits written as three-letter alien words."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable

_WORDS = ("ZRO", "ONE", "TWO", "THR", "FOR", "FIV", "SIX", "SVN", "EGT", "NIN")
_VALUE = {word: value for value, word in enumerate(_WORDS)}

_SPACE = re.compile(r"\s*")
_NON_SPACE_RUN = re.compile(r"\S+")


def sort_words(words: Iterable[str]) -> list[str]:
    """Return the digit words ordered by the digit each one names."""
    words = list(words)
    unknown = [word for word in words if word not in _VALUE]
    if unknown:
        raise ValueError(f"unknown digit word: {unknown[0]!r}")
    return sorted(words, key=_VALUE.__getitem__)


class _Scanner:
    """Reads whitespace-separated items or single characters from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        self._pos = _SPACE.match(self._text, self._pos).end()

    def item(self) -> str:
        self._skip_space()
        match = _NON_SPACE_RUN.match(self._text, self._pos)
        if match is None:
            raise ValueError("unexpected end of input")
        self._pos = match.end()
        return match.group()

    def char(self) -> str:
        self._skip_space()
        if self._pos >= len(self._text):
            raise ValueError("unexpected end of input")
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def integer(self) -> int:
        item = self.item()
        try:
            return int(item)
        except ValueError:
            raise ValueError(f"expected an integer, got {item!r}") from None


def solve(text: str) -> str:
    """Solve every test case in ``text`` and return the formatted output."""
    scanner = _Scanner(text)
    cases = scanner.integer()
    output: list[str] = []
    for case in range(1, cases + 1):
        scanner.item()  # the case label, e.g. "#1"
        size = scanner.integer()
        if size < 0:
            raise ValueError(f"negative word count: {size}")
        words = ["".join(scanner.char() for _ in range(3)) for _ in range(size)]
        line = "".join(f"{word} " for word in sort_words(words))
        output.append(f"#{case}\n{line}\n")
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the sorted words."""
    parser = argparse.ArgumentParser(
        description="Sort three-letter digit words read from standard input."
    )
    parser.parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())