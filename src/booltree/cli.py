"""
booltree CLI - entry point.

Commands:
- parse: show the parenthesized form, the tree, and its fragments
- eval: evaluate an expression under one variable assignment
- table: print the full truth table
- vars: list the variables an expression uses
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from booltree._version import get_version
from booltree.config import CONFIG_FILENAME, BoolTreeConfig, load_config
from booltree.core.errors import BoolTreeError
from booltree.core.expression_lang.evaluator import evaluate, evaluate_fragments
from booltree.core.expression_lang.parser import Parser
from booltree.core.expression_lang.render import DEFAULT_ROOT_ID, to_html
from booltree.core.ir.expressions import RenderedNode
from booltree.core.truth_table import TruthTable, collect_variables

console = Console()

app = typer.Typer(
    help="booltree - boolean algebra expressions: parse, evaluate, tabulate.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"booltree {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config: Path = typer.Option(
        CONFIG_FILENAME, "--config", "-c", help="Path to booltree.toml"
    ),
    debug: bool = typer.Option(False, "--debug", help="Log parser and evaluator activity"),
) -> None:
    """booltree CLI main callback for global options."""
    try:
        cfg = load_config(config)
    except ValidationError as e:
        typer.echo(f"Invalid configuration in {config}: {e}", err=True)
        raise typer.Exit(code=1)
    if debug or cfg.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    ctx.obj = cfg


def _config(ctx: typer.Context) -> BoolTreeConfig:
    return ctx.obj if isinstance(ctx.obj, BoolTreeConfig) else BoolTreeConfig()


def _fail(e: BoolTreeError) -> typer.Exit:
    typer.echo(f"Error: {e}", err=True)
    return typer.Exit(code=1)


def _parse(expression: str, cfg: BoolTreeConfig) -> Parser:
    parser = Parser(expression, pointer_style=cfg.pointer_style)
    parser.construct_ast()
    return parser


def _rich_tree(node: RenderedNode, tree: Tree | None = None) -> Tree:
    label = f"{escape(node.symbol)}  [dim]{escape(node.id)}[/dim]"
    branch = Tree(label) if tree is None else tree.add(label)
    for child in node.children:
        _rich_tree(child, branch)
    return branch


def _parse_assignment(item: str) -> tuple[str, str]:
    name, sep, value = item.partition("=")
    if not sep or len(name) != 1:
        raise typer.BadParameter(f"Expected NAME=BIT with a one-character name, got {item!r}")
    return name, value.strip()


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression, e.g. 'a*!b+c'"),
    html: bool = typer.Option(False, "--html", help="Print the tree as nested HTML tables"),
) -> None:
    """Parse an expression and show its tree and binary fragments."""
    cfg = _config(ctx)
    try:
        parser = _parse(expression, cfg)
    except BoolTreeError as e:
        raise _fail(e)

    tree = parser.tree
    assert tree is not None
    typer.echo(tree.to_expression_string())

    if html:
        typer.echo(to_html(tree, DEFAULT_ROOT_ID, padding=cfg.html_padding))
    else:
        console.print(_rich_tree(tree.render(DEFAULT_ROOT_ID)))

    for i, fragment in enumerate(parser.fragments, start=1):
        typer.echo(f"{i}. {fragment.to_expression_string()}")


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    assignments: list[str] = typer.Option(
        [], "--set", "-s", help="Variable assignment NAME=BIT (repeatable)"
    ),
) -> None:
    """Evaluate an expression under one assignment of its variables."""
    cfg = _config(ctx)
    context = dict(_parse_assignment(item) for item in assignments)
    try:
        parser = _parse(expression, cfg)
        assert parser.tree is not None
        result = evaluate(parser.tree, context)
        steps = evaluate_fragments(parser.fragments, context)
    except BoolTreeError as e:
        raise _fail(e)

    for text, bit in steps:
        typer.echo(f"{text} = {bit}")
    typer.echo(f"{parser.tree.to_expression_string()} => {result}")


@app.command("table")
def table_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to tabulate"),
    minterms: bool = typer.Option(False, "--minterms", help="Show the sum of minterms"),
    maxterms: bool = typer.Option(False, "--maxterms", help="Show the product of maxterms"),
    fragments: bool = typer.Option(False, "--fragments", help="Add a column per fragment"),
) -> None:
    """Print the truth table of an expression over all of its variables."""
    cfg = _config(ctx)
    try:
        names = collect_variables(expression)
        truth_table = TruthTable(names, max_variables=cfg.max_variables)
        truth_table.add_function(expression, pointer_style=cfg.pointer_style)
    except BoolTreeError as e:
        raise _fail(e)

    table = Table(show_lines=False)
    for header in truth_table.headers(fragments=fragments):
        table.add_column(escape(header), justify="center")
    for row in truth_table.rows(fragments=fragments):
        table.add_row(*row)
    console.print(table)

    if minterms:
        typer.echo(f"Minterms of {expression}: {truth_table.minterms_of(expression)}")
    if maxterms:
        typer.echo(f"Maxterms of {expression}: {truth_table.maxterms_of(expression)}")


@app.command("vars")
def vars_command(expression: str = typer.Argument(..., help="Expression to scan")) -> None:
    """List the variable names of an expression in order of appearance."""
    names = collect_variables(expression)
    typer.echo(" ".join(names))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
