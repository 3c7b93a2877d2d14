"""
Truth tables over boolean expressions.

Enumerates every assignment of N variables, evaluates functions (and
their fragments) row by row, and derives the canonical minterm/maxterm
forms. The forms are canonical only; nothing here simplifies them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from itertools import product

from booltree.core.errors import PointerStyle, TruthTableError
from booltree.core.expression_lang.parser import Parser
from booltree.core.ir.expressions import BIT_ONE, BIT_ZERO, BITS, BinaryExpr, Expr, UnaryOp

logger = logging.getLogger(__name__)

RESERVED_CHARACTERS = frozenset("()+!*01")

DEFAULT_MAX_VARIABLES = 12


def collect_variables(expression: str) -> list[str]:
    """Distinct non-reserved characters of ``expression``, in order of first appearance."""
    names: list[str] = []
    for c in expression:
        if c not in RESERVED_CHARACTERS and c not in names:
            names.append(c)
    return names


def enumerate_assignments(names: Sequence[str]) -> Iterator[dict[str, str]]:
    """
    Yield one context per truth-table row.

    Row ``i`` binds the bits of ``i`` written in binary and zero-padded to
    ``len(names)`` digits; the first name gets the most significant bit.
    """
    for bits in product(BITS, repeat=len(names)):
        yield dict(zip(names, bits, strict=True))


@dataclass
class FunctionColumn:
    """Outputs of one function added to a table."""

    expression: str
    tree: Expr
    fragments: list[BinaryExpr]
    values: list[str] = field(default_factory=list)
    fragment_values: list[list[str]] = field(default_factory=list)

    @property
    def fragment_strings(self) -> list[str]:
        return [f.to_expression_string() for f in self.fragments]

    @property
    def step_indices(self) -> list[int]:
        """Indices of the fragments that are not the whole function."""
        return [i for i, f in enumerate(self.fragments) if f is not self.tree]


class TruthTable:
    """
    A truth table over a fixed, ordered set of variable names.

    Usage:
        table = TruthTable(["a", "b"])
        table.add_function("a*!b")
        table.minterms_of("a*!b")   # "(a*!b)"
    """

    def __init__(self, names: Sequence[str], max_variables: int = DEFAULT_MAX_VARIABLES) -> None:
        if len(names) > max_variables:
            raise TruthTableError(
                f"Too many variables ({len(names)}); the limit is {max_variables}"
            )
        if len(set(names)) != len(names):
            raise TruthTableError(f"Duplicate variable names: {list(names)}")

        self.names = list(names)
        self.inputs: list[list[str]] = [
            [row[name] for name in self.names] for row in enumerate_assignments(self.names)
        ]
        self.minterms = [self._term(row, complement_on=BIT_ZERO, joiner="*") for row in self.inputs]
        self.maxterms = [self._term(row, complement_on=BIT_ONE, joiner="+") for row in self.inputs]
        self.functions: dict[str, FunctionColumn] = {}

    @classmethod
    def for_expression(
        cls, expression: str, max_variables: int = DEFAULT_MAX_VARIABLES
    ) -> TruthTable:
        """Build a table over the variables of ``expression`` and add it as a function."""
        table = cls(collect_variables(expression), max_variables=max_variables)
        table.add_function(expression)
        return table

    def _term(self, row: list[str], complement_on: str, joiner: str) -> str:
        parts = [
            f"{UnaryOp.NOT}{name}" if bit == complement_on else name
            for name, bit in zip(self.names, row, strict=True)
        ]
        return joiner.join(parts)

    def contexts(self) -> Iterator[dict[str, str]]:
        for row in self.inputs:
            yield dict(zip(self.names, row, strict=True))

    def add_function(
        self, expression: str, *, pointer_style: PointerStyle | str = PointerStyle.HTML
    ) -> FunctionColumn:
        """
        Parse ``expression`` once and evaluate it for every row.

        Raises:
            ExpressionParseError: If the expression is invalid.
            UndefinedVariableError: If it uses a variable the table does not define.
        """
        parser = Parser(expression, pointer_style=pointer_style)
        tree = parser.construct_ast()
        column = FunctionColumn(expression=expression, tree=tree, fragments=parser.fragments)

        for context in self.contexts():
            column.values.append(tree.evaluate(context))
            column.fragment_values.append([f.evaluate(context) for f in column.fragments])

        self.functions[expression] = column
        logger.debug("Added %s over %d row(s)", expression, len(self.inputs))
        return column

    def column(self, expression: str) -> FunctionColumn:
        if expression not in self.functions:
            raise TruthTableError(f"Function not in table: {expression}")
        return self.functions[expression]

    def minterms_of(self, expression: str) -> str:
        """Sum of the minterms of the rows where the function is 1."""
        values = self.column(expression).values
        terms = [self.minterms[i] for i, v in enumerate(values) if v == BIT_ONE]
        return "+".join(_wrap(t) for t in terms)

    def maxterms_of(self, expression: str) -> str:
        """Product of the maxterms of the rows where the function is 0."""
        values = self.column(expression).values
        terms = [self.maxterms[i] for i, v in enumerate(values) if v == BIT_ZERO]
        return "*".join(_wrap(t) for t in terms)

    def headers(self, *, fragments: bool = False) -> list[str]:
        headers = list(self.names)
        for column in self.functions.values():
            if fragments:
                strings = column.fragment_strings
                headers.extend(strings[j] for j in column.step_indices)
            headers.append(column.expression)
        return headers

    def rows(self, *, fragments: bool = False) -> list[list[str]]:
        """Input bits followed by each function's output, one list per row."""
        result = []
        for i, inputs in enumerate(self.inputs):
            row = list(inputs)
            for column in self.functions.values():
                if fragments:
                    row.extend(column.fragment_values[i][j] for j in column.step_indices)
                row.append(column.values[i])
            result.append(row)
        return result


def _wrap(term: str) -> str:
    return f"({term})" if term else ""
