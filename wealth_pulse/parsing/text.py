"""
Character-level text parsers built on the combinator engine.
"""

from __future__ import annotations

from wealth_pulse.parsing.base import (
    Failure,
    Parser,
    Result,
    Success,
    char,
    either,
    satisfy,
    string,
)

DIGITS = "0123456789"


def one_of(chars: str, label: str) -> Parser:
    """Match a single character contained in *chars*."""
    allowed = frozenset(chars)
    return satisfy(lambda c: c in allowed, label)


def none_of(chars: str, label: str) -> Parser:
    """Match a single character NOT contained in *chars*."""
    excluded = frozenset(chars)
    return satisfy(lambda c: c not in excluded, label)


space = char(" ")
tab = char("\t")
digit = one_of(DIGITS, "digit")

# "\n" or "\r\n"
newline = either(char("\n"), string("\r\n")).desc("newline")


def fixed_integer(width: int) -> Parser:
    """Match exactly *width* ASCII digits and return them as an ``int``."""
    label = f"{width}-digit number"

    def run(text: str, index: int) -> Result:
        end = index + width
        for i in range(index, end):
            if i >= len(text) or text[i] not in DIGITS:
                return Failure(i, frozenset([label if i == index else "digit"]))
        return Success(end, int(text[index:end]))

    return Parser(run, label)
