"""
Error types for boolean expression tokenizing, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PointerStyle(StrEnum):
    """Line layout used by the pointer diagram."""

    HTML = "html"
    TEXT = "text"


_BREAKS: dict[PointerStyle, tuple[str, str]] = {
    PointerStyle.HTML: ("<br>", "&#160"),
    PointerStyle.TEXT: ("\n", " "),
}


def format_pointer(source: str, index: int, style: PointerStyle | str = PointerStyle.HTML) -> str:
    """
    Build the two-line diagram pointing at ``source[index]``.

    Example (html):
        "<br>a+2<br>&#160&#160^<br>"
    """
    line_break, pad = _BREAKS[PointerStyle(style)]
    left = max(index, 0)
    right = max(len(source) - left - 1, 0)
    return f"{line_break}{source}{line_break}{pad * left}^{pad * right}{line_break}"


@dataclass(frozen=True)
class PointerContext:
    """
    Location of an error inside an expression string.

    Attributes:
        source: The full expression being read
        index: 0-based index of the offending character
        style: Diagram layout
    """

    source: str
    index: int
    style: PointerStyle = PointerStyle.HTML

    def format(self) -> str:
        return format_pointer(self.source, self.index, self.style)


class BoolTreeError(Exception):
    """Base exception for all booltree errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# ---------------------------------------------------------------------------
# Parse-time errors
# ---------------------------------------------------------------------------


class ExpressionParseError(BoolTreeError):
    """
    Raised when an expression string cannot be turned into an AST.

    The message already embeds the pointer diagram; ``pos``, ``source`` and
    ``pointer`` are kept for callers that lay the error out themselves.
    """

    def __init__(self, message: str, context: PointerContext | None = None) -> None:
        self.context = context
        super().__init__(message)

    @property
    def pos(self) -> int:
        return self.context.index if self.context else 0

    @property
    def source(self) -> str:
        return self.context.source if self.context else ""

    @property
    def pointer(self) -> str:
        return self.context.format() if self.context else ""


class ExpressionTokenError(ExpressionParseError):
    """Raised by the tokenizer for a character it cannot classify."""

    def __init__(self, message: str, symbol: str, context: PointerContext) -> None:
        self.symbol = symbol
        super().__init__(message, context)


class InvalidSymbolError(ExpressionTokenError):
    """A digit from 2 to 9; only 0 and 1 exist in boolean algebra."""


class UnknownSymbolError(ExpressionTokenError):
    """A character outside the printable single-character identifier range."""


class ExpressionSyntaxError(ExpressionParseError):
    """No valid term can start at the current token."""


class NestingTooDeepError(ExpressionSyntaxError):
    """The expression nests deeper than the interpreter stack allows."""


class UnexpectedTokenError(ExpressionParseError):
    """The current token cannot continue the production being parsed."""

    def __init__(self, message: str, expected: str, context: PointerContext | None = None) -> None:
        self.expected = expected
        super().__init__(message, context)


class MissingCloseParenError(UnexpectedTokenError):
    """An open parenthesis was never matched."""


class UnexpectedTrailingInputError(UnexpectedTokenError):
    """Tokens remain after a complete top-level expression."""


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------


class ExpressionEvalError(BoolTreeError):
    """Error during expression evaluation."""


class UndefinedVariableError(ExpressionEvalError):
    """An identifier has no value in the supplied context."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Runtime Error: {symbol} is not defined")


class InvalidBitValueError(ExpressionEvalError):
    """A context value is not one of the two bit symbols."""

    def __init__(self, symbol: str, value: object) -> None:
        self.symbol = symbol
        self.value = value
        super().__init__(f"Invalid value for {symbol}: {value!r} (expected '0' or '1')")


class InvalidVariableNameError(ExpressionEvalError):
    """A context key is not a single character."""

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"Invalid variable name: {symbol!r} (expected a single character)")


class EvaluationTooDeepError(ExpressionEvalError):
    """The tree nests deeper than the interpreter stack allows."""


class InvalidOperatorError(BoolTreeError):
    """
    A node holds an operator outside its legal set.

    Only reachable when a tree is built around validation (e.g. with
    ``model_construct``); the parser never produces one.
    """

    def __init__(self, node_kind: str, op: object) -> None:
        self.op = op
        super().__init__(f"{node_kind} node contains unknown operator: {op}")


class TruthTableError(BoolTreeError):
    """Raised when a truth table cannot be built or queried."""
