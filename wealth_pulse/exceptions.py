"""
Custom exception hierarchy for wealth-pulse.

Callers can catch ``ParseError`` for any grammar failure, or one of its
two subclasses when they need to tell a malformed line
(``StructuralParseError``) from a well-formed line carrying an impossible
value (``SemanticValidationError``).

Parse errors only carry structured position information. Turning them
into a message with a file name is the job of the loader / CLI, which
fill in ``source`` via ``ParseError.with_source()``.
"""

from __future__ import annotations


class WealthPulseError(Exception):
    """Base exception for all wealth-pulse errors."""


class ParseError(WealthPulseError):
    """Raised when a price database text cannot be parsed.

    Attributes:
        message: Human-readable description of the failure.
        offset: 0-based character offset of the failure in the input.
        line: 1-based line number of the failure.
        column: 1-based column number of the failure.
        expected: Labels of the tokens the grammar would have accepted
            at ``offset`` (empty for semantic errors).
        source: Optional file name the text was read from.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        line: int,
        column: int,
        expected: tuple[str, ...] = (),
        source: str | None = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = expected
        self.source = source
        super().__init__(str(self))

    @classmethod
    def at(
        cls,
        text: str,
        offset: int,
        message: str,
        expected: tuple[str, ...] = (),
    ) -> ParseError:
        """Build an error, deriving line/column from *offset* in *text*."""
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        return cls(message, offset, line, column, expected)

    def with_source(self, source: str) -> ParseError:
        """Return a copy of this error tagged with a file name."""
        return type(self)(
            self.message,
            self.offset,
            self.line,
            self.column,
            self.expected,
            source,
        )

    def __reduce__(self):
        return (
            type(self),
            (self.message, self.offset, self.line, self.column, self.expected, self.source),
        )

    def __str__(self) -> str:
        where = f"{self.line}:{self.column}"
        if self.source:
            where = f"{self.source}:{where}"
        return f"{where}: {self.message}"


class StructuralParseError(ParseError):
    """Raised when the input does not match the price database grammar.

    For example a missing ``P`` literal, missing whitespace between
    fields, a malformed date, an unterminated quoted symbol, or
    trailing content after the last record.
    """


class SemanticValidationError(ParseError):
    """Raised when a token matched the grammar but its value is invalid.

    For example ``2016-02-30`` (not a calendar date) or ``1.2.3``
    (not a decimal literal).
    """


class ConfigValidationError(WealthPulseError):
    """Raised when a wealth-pulse YAML config file is empty or unusable."""


class ExportError(WealthPulseError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
