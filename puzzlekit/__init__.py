"""Solvers for small puzzle and algorithm problems: pair sums, digit-word
sorting, KMP search, LCS, Puyo Puyo chains, Go captures and a layered maze."""

__version__ = "0.1.0"
__all__ = ["aplusb", "gns", "kmp", "lcs", "puyo", "baduk", "maze"]