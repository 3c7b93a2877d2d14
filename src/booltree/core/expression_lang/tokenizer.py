"""
Tokenizer for boolean expressions.

Reads one character per call and classifies it. Tokens are produced on
demand, so a parser only ever sees as much of the input as it consumed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from booltree.core.errors import (
    InvalidSymbolError,
    PointerContext,
    PointerStyle,
    UnknownSymbolError,
)


class TokenKind(StrEnum):
    """Token types for boolean expressions."""

    UNARY_OPERATOR = auto()
    BINARY_OPERATOR = auto()
    BINARY_CONSTANT = auto()
    IDENTIFIER = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()

    # End of input
    END_OF_INPUT = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token; ``lexeme`` is None only for END_OF_INPUT."""

    kind: TokenKind
    lexeme: str | None
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, pos={self.pos})"


UNARY_OPERATORS = frozenset("!")
BINARY_OPERATORS = frozenset("*+")
BINARY_CONSTANTS = frozenset("01")
INVALID_DIGITS = frozenset("23456789")

_PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
}


class Tokenizer:
    """
    Lazy tokenizer over a single expression string.

    ``advance()`` returns the next token; once the input is exhausted it keeps
    returning END_OF_INPUT. On a bad character the cursor still moves past it
    before the error is raised, so ``pointer()`` lines up with the culprit.
    """

    def __init__(
        self,
        source: str,
        *,
        logger: logging.Logger | None = None,
        pointer_style: PointerStyle | str = PointerStyle.HTML,
    ) -> None:
        self.source = source
        self.index = 0
        self.pointer_style = PointerStyle(pointer_style)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def load_expression(self, source: str) -> None:
        """Point the tokenizer at a new string and rewind."""
        self.source = source
        self.index = 0

    def advance(self) -> Token:
        if self.index >= len(self.source):
            self.logger.debug("End of input reached.")
            return Token(TokenKind.END_OF_INPUT, None, len(self.source))

        c = self.source[self.index]
        pos = self.index
        self.index += 1

        if c in UNARY_OPERATORS:
            kind = TokenKind.UNARY_OPERATOR
        elif c in BINARY_OPERATORS:
            kind = TokenKind.BINARY_OPERATOR
        elif c in BINARY_CONSTANTS:
            kind = TokenKind.BINARY_CONSTANT
        elif c in _PUNCTUATION:
            kind = _PUNCTUATION[c]
        elif c in INVALID_DIGITS:
            raise InvalidSymbolError(
                f"Invalid symbol: {c} at position {self.index}{self.pointer()}",
                c,
                self.context(),
            )
        elif c.isprintable():
            kind = TokenKind.IDENTIFIER
        else:
            raise UnknownSymbolError(
                f"Unknown symbol: {c!r} at position {self.index}{self.pointer()}",
                c,
                self.context(),
            )

        self.logger.debug("Token read: %s %r", kind, c)
        return Token(kind, c, pos)

    def context(self) -> PointerContext:
        """Location of the character most recently consumed."""
        return PointerContext(self.source, max(self.index - 1, 0), self.pointer_style)

    def pointer(self) -> str:
        return self.context().format()

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.advance()
            yield tok
            if tok.kind == TokenKind.END_OF_INPUT:
                return


def tokenize(source: str) -> Iterator[Token]:
    """Lazily tokenize an expression; the last token yielded is END_OF_INPUT."""
    return iter(Tokenizer(source))
