"""
Parser-combinator engine for wealth-pulse.

A ``Parser`` wraps a pure function ``(text, index) -> Success | Failure``.
The cursor is threaded explicitly through every call; there is no hidden
stream state, so the same parser object can be reused freely.

Alternatives are ordered and first-match-wins: ``either(a, b)`` only tries
``b`` when ``a`` failed, and always restarts ``b`` from the starting
index (full backtracking, no partial commit).

Error reporting follows the usual "furthest failure" rule. Every result
carries the failure that got furthest into the input so far, including
failures from branches that were backtracked out of. When the whole parse
fails, that furthest failure is what gets reported, with the union of the
labels that were expected at that position.

Semantic checks (``Parser.validate``) are different: once a token has
matched lexically, a failing check raises ``SemanticValidationError``
immediately instead of backtracking into another alternative.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from wealth_pulse.exceptions import SemanticValidationError, StructuralParseError


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Failure:
    """A failed parse attempt at ``index``, listing what was expected there."""

    index: int
    expected: frozenset[str] = frozenset()

    def merge(self, other: Failure | None) -> Failure:
        """Keep whichever failure got further; union labels on a tie."""
        if other is None or other.index < self.index:
            return self
        if other.index > self.index:
            return other
        return Failure(self.index, self.expected | other.expected)


@dataclass(frozen=True)
class Success:
    """A successful parse that produced ``value`` and stopped at ``index``.

    ``furthest`` is the deepest failure seen while producing this result
    (from a backtracked branch or the end of a repetition), if any.
    """

    index: int
    value: Any
    furthest: Failure | None = None


Result = Union[Success, Failure]


def _merge(a: Failure | None, b: Failure | None) -> Failure | None:
    if a is None:
        return b
    return a.merge(b)


# Marker value dropped from ``sequence`` results
_IGNORED = object()


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class Parser:
    """A composable parsing function over a string and a position."""

    def __init__(self, fn: Callable[[str, int], Result], name: str = "") -> None:
        self._fn = fn
        self.name = name

    def __call__(self, text: str, index: int = 0) -> Result:
        return self._fn(text, index)

    def __repr__(self) -> str:
        return f"<Parser {self.name or self._fn.__name__}>"

    def __or__(self, other: Parser) -> Parser:
        return either(self, other)

    def map(self, fn: Callable[[Any], Any]) -> Parser:
        """Transform the value of a successful parse."""
        def run(text: str, index: int) -> Result:
            result = self(text, index)
            if isinstance(result, Failure):
                return result
            return Success(result.index, fn(result.value), result.furthest)

        return Parser(run, self.name)

    def validate(self, fn: Callable[[Any], Any], what: str) -> Parser:
        """Transform the value with a check that may reject it.

        *fn* signals rejection by raising ``ValueError`` or
        ``ArithmeticError`` (which covers ``decimal.InvalidOperation``).
        Rejection raises ``SemanticValidationError`` positioned at the
        start of the matched token; it is not backtracked.
        """
        def run(text: str, index: int) -> Result:
            result = self(text, index)
            if isinstance(result, Failure):
                return result
            try:
                value = fn(result.value)
            except (ValueError, ArithmeticError) as exc:
                token = text[index:result.index]
                raise SemanticValidationError.at(
                    text, index, f"Invalid {what} {token!r}: {exc}"
                ) from exc
            return Success(result.index, value, result.furthest)

        return Parser(run, self.name)

    def desc(self, label: str) -> Parser:
        """Report failures at the start position as *label*."""
        def run(text: str, index: int) -> Result:
            result = self(text, index)
            if isinstance(result, Failure) and result.index == index:
                return Failure(index, frozenset([label]))
            return result

        return Parser(run, label)

    def parse(self, text: str) -> Any:
        """Parse the whole of *text* and return the value.

        Raises:
            StructuralParseError: If the input does not match, or input
                remains after the match.
            SemanticValidationError: If a matched token fails validation.
        """
        result = sequence(self, ignore(eof))(text, 0)
        if isinstance(result, Failure):
            expected = tuple(sorted(result.expected))
            found = _describe_char(text, result.index)
            message = f"Unexpected {found}"
            if expected:
                message += f", expected {' or '.join(expected)}"
            raise StructuralParseError.at(text, result.index, message, expected)
        return result.value[0]


def _describe_char(text: str, index: int) -> str:
    if index >= len(text):
        return "end of input"
    return repr(text[index])


# ---------------------------------------------------------------------------
# Primitive parsers
# ---------------------------------------------------------------------------

def satisfy(predicate: Callable[[str], bool], label: str) -> Parser:
    """Match a single character for which *predicate* is true."""
    def run(text: str, index: int) -> Result:
        if index < len(text) and predicate(text[index]):
            return Success(index + 1, text[index])
        return Failure(index, frozenset([label]))

    return Parser(run, label)


def char(c: str) -> Parser:
    """Match exactly the character *c*."""
    return satisfy(lambda x: x == c, repr(c))


def string(s: str) -> Parser:
    """Match exactly the string *s*."""
    label = repr(s)

    def run(text: str, index: int) -> Result:
        if text.startswith(s, index):
            return Success(index + len(s), s)
        return Failure(index, frozenset([label]))

    return Parser(run, label)


def _eof(text: str, index: int) -> Result:
    if index >= len(text):
        return Success(index, None)
    return Failure(index, frozenset(["end of input"]))


eof = Parser(_eof, "end of input")


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

def ignore(parser: Parser) -> Parser:
    """Run *parser* but leave its value out of an enclosing ``sequence``."""
    return parser.map(lambda _: _IGNORED)


def sequence(*parsers: Parser) -> Parser:
    """Run parsers one after another; the value is the list of their values.

    Values of parsers wrapped in ``ignore()`` are dropped.
    """
    def run(text: str, index: int) -> Result:
        values: list[Any] = []
        furthest: Failure | None = None
        for parser in parsers:
            result = parser(text, index)
            if isinstance(result, Failure):
                return result.merge(furthest)
            furthest = _merge(furthest, result.furthest)
            index = result.index
            if result.value is not _IGNORED:
                values.append(result.value)
        return Success(index, values, furthest)

    return Parser(run, "sequence")


def either(*parsers: Parser) -> Parser:
    """Try parsers in order and return the first success."""
    def run(text: str, index: int) -> Result:
        furthest: Failure | None = None
        for parser in parsers:
            result = parser(text, index)
            if isinstance(result, Success):
                return Success(result.index, result.value, _merge(furthest, result.furthest))
            furthest = result.merge(furthest)
        return furthest if furthest is not None else Failure(index)

    return Parser(run, " | ".join(p.name for p in parsers))


def many(parser: Parser) -> Parser:
    """Match *parser* zero or more times; the value is a list."""
    def run(text: str, index: int) -> Result:
        values: list[Any] = []
        furthest: Failure | None = None
        while True:
            result = parser(text, index)
            if isinstance(result, Failure):
                return Success(index, values, result.merge(furthest))
            furthest = _merge(furthest, result.furthest)
            if result.index == index:
                # zero-width match would loop forever
                return Success(index, values, furthest)
            values.append(result.value)
            index = result.index

    return Parser(run, f"many({parser.name})")


def many1(parser: Parser) -> Parser:
    """Match *parser* one or more times; the value is a list."""
    return sequence(parser, many(parser)).map(lambda v: [v[0], *v[1]])


def option(parser: Parser, default: Any = None) -> Parser:
    """Match *parser* if possible, otherwise succeed with *default*."""
    def run(text: str, index: int) -> Result:
        result = parser(text, index)
        if isinstance(result, Failure):
            return Success(index, default, result)
        return result

    return Parser(run, f"option({parser.name})")


def sep_by(parser: Parser, separator: Parser) -> Parser:
    """Match zero or more *parser* separated by *separator*.

    A separator that is not followed by another item is not consumed.
    """
    def run(text: str, index: int) -> Result:
        first = parser(text, index)
        if isinstance(first, Failure):
            return Success(index, [], first)
        values = [first.value]
        index = first.index
        furthest = first.furthest
        while True:
            sep = separator(text, index)
            if isinstance(sep, Failure):
                return Success(index, values, sep.merge(furthest))
            item = parser(text, sep.index)
            if isinstance(item, Failure):
                return Success(index, values, item.merge(_merge(furthest, sep.furthest)))
            furthest = _merge(furthest, item.furthest)
            values.append(item.value)
            index = item.index

    return Parser(run, f"sep_by({parser.name})")
