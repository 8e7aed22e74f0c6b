"""Solvers for four sets of programming-contest problems, with a command-line entry point."""

__version__ = "0.1.0"

__all__ = [
    "april9",
    "march19",
    "march26_first",
    "march26_second",
    "nena20_first",
    "nena20_second",
    "nena20_third",
    "cli",
]