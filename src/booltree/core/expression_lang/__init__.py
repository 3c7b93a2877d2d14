"""
Boolean expression language.

Tokenizer, parser, linearizer, evaluator, and renderers for expressions
built from !, *, +, parentheses, 0/1 and single-character variables.

Usage:
    from booltree.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("a+b*!c")
    result = evaluate(expr, {"a": "0", "b": "1", "c": "0"})
    # result == "1"
"""

from booltree.core.expression_lang.evaluator import evaluate, evaluate_fragments
from booltree.core.expression_lang.linearizer import linearize
from booltree.core.expression_lang.parser import BINARY_PRECEDENCE, Parser, parse_expr
from booltree.core.expression_lang.render import node_edges, node_index, render_tree, to_html
from booltree.core.expression_lang.tokenizer import Token, Tokenizer, TokenKind, tokenize

__all__ = [
    "BINARY_PRECEDENCE",
    "Parser",
    "Token",
    "TokenKind",
    "Tokenizer",
    "evaluate",
    "evaluate_fragments",
    "linearize",
    "node_edges",
    "node_index",
    "parse_expr",
    "render_tree",
    "to_html",
    "tokenize",
]
