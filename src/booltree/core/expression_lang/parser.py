"""
Precedence-climbing parser for boolean expressions.

Grammar:
    expression  → unary_term (binary_op unary_term)*      (precedence climbing)
    unary_term  → "!" unary_term
                | CONSTANT | IDENTIFIER
                | "(" expression ")"
    binary_op   → "*" (precedence 2) | "+" (precedence 1)

Operators of equal precedence associate to the left; "*" binds tighter
than "+". The top-level expression must consume the whole input.
"""

from __future__ import annotations

import logging

from booltree.core.errors import (
    ExpressionSyntaxError,
    MissingCloseParenError,
    NestingTooDeepError,
    PointerStyle,
    UnexpectedTrailingInputError,
)
from booltree.core.expression_lang.linearizer import linearize
from booltree.core.expression_lang.tokenizer import Token, Tokenizer, TokenKind
from booltree.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Terminal, UnaryExpr, UnaryOp

BINARY_PRECEDENCE: dict[BinaryOp, int] = {
    BinaryOp.AND: 2,
    BinaryOp.OR: 1,
}


def _describe(tok: Token) -> str:
    return tok.lexeme if tok.lexeme is not None else "end of input"


class Parser:
    """
    Builds an AST from one expression string.

    Usage:
        parser = Parser("a+b*!c")
        tree = parser.construct_ast()
        parser.fragments   # binary sub-expressions in post-order
    """

    def __init__(
        self,
        source: str,
        *,
        logger: logging.Logger | None = None,
        pointer_style: PointerStyle | str = PointerStyle.HTML,
    ) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.tokenizer = Tokenizer(source, logger=self.logger, pointer_style=pointer_style)
        self.current: Token | None = None
        self.tree: Expr | None = None
        self.fragments: list[BinaryExpr] = []

    @property
    def source(self) -> str:
        return self.tokenizer.source

    def advance(self) -> Token:
        self.current = self.tokenizer.advance()
        return self.current

    def expect_close_paren(self) -> Token:
        tok = self._token
        if tok.kind != TokenKind.CLOSE_PAREN:
            raise MissingCloseParenError(
                f"Unexpected symbol: {_describe(tok)} {self.tokenizer.pointer()} Expected: )",
                ")",
                self.tokenizer.context(),
            )
        return self.advance()

    @property
    def _token(self) -> Token:
        if self.current is None:
            return self.advance()
        return self.current

    def _binary_op(self) -> BinaryOp | None:
        tok = self._token
        if tok.kind != TokenKind.BINARY_OPERATOR or tok.lexeme is None:
            return None
        return BinaryOp(tok.lexeme)

    # -- Grammar rules --

    def construct_ast(self) -> Expr:
        """Parse the whole input and record its fragments.

        Nothing is stored unless parsing succeeds.

        Raises:
            ExpressionParseError: If the expression is invalid.
            NestingTooDeepError: If the tree is too deep to build on the stack.
        """
        self.tree = None
        self.fragments = []
        self.tokenizer.load_expression(self.tokenizer.source)
        self.advance()

        try:
            tree = self.parse_expression(0, top_level=True)
            fragments = linearize(tree)
            text = tree.to_expression_string()
        except RecursionError:
            raise NestingTooDeepError(
                f"Syntax Error: nesting too deep{self.tokenizer.pointer()}",
                self.tokenizer.context(),
            ) from None

        self.tree = tree
        self.fragments = fragments
        self.logger.debug("Constructed %s with %d fragment(s)", text, len(fragments))
        return tree

    def parse_expression(self, min_precedence: int = 0, *, top_level: bool = False) -> Expr:
        """unary_term (binary_op unary_term)* while precedence > min_precedence"""
        left = self.parse_unary_term()

        op = self._binary_op()
        while op is not None:
            precedence = BINARY_PRECEDENCE[op]
            self.logger.debug("Current operator %s, precedence %d", op, precedence)
            if precedence <= min_precedence:
                break
            self.advance()
            right = self.parse_expression(precedence)
            left = BinaryExpr(op=op, left=left, right=right)
            op = self._binary_op()

        if top_level and self._token.kind != TokenKind.END_OF_INPUT:
            tok = self._token
            raise UnexpectedTrailingInputError(
                f"Unexpected token: {_describe(tok)} {self.tokenizer.pointer()} "
                f"Expected type: {TokenKind.BINARY_OPERATOR}, Received: {tok.kind}",
                TokenKind.BINARY_OPERATOR,
                self.tokenizer.context(),
            )

        return left

    def parse_unary_term(self) -> Expr:
        """'!' unary_term | CONSTANT | IDENTIFIER | '(' expression ')'"""
        tok = self._token
        self.logger.debug("Unary term starts at %r", tok.lexeme)

        if tok.kind == TokenKind.UNARY_OPERATOR:
            self.advance()
            return UnaryExpr(op=UnaryOp(tok.lexeme), operand=self.parse_unary_term())

        if tok.kind in (TokenKind.BINARY_CONSTANT, TokenKind.IDENTIFIER):
            self.advance()
            self.logger.debug("Terminal reached: %s", tok.lexeme)
            return Terminal(symbol=tok.lexeme)

        if tok.kind == TokenKind.OPEN_PAREN:
            self.advance()
            inner = self.parse_expression(0)
            self.expect_close_paren()
            return inner

        raise ExpressionSyntaxError(
            f"Syntax Error:{self.tokenizer.pointer()}", self.tokenizer.context()
        )


def parse_expr(source: str, *, pointer_style: PointerStyle | str = PointerStyle.HTML) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "a*!b+c")
        pointer_style: Layout of the pointer diagram embedded in error messages

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionParseError: If the expression is invalid (tokenizer errors included).
    """
    return Parser(source, pointer_style=pointer_style).construct_ast()
