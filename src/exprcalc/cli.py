"""
exprcalc CLI - Entry point.

Commands:

- eval: parse one expression, print its tree and the answer
- repl: read expressions line by line until end of input
"""

import logging
import os
import platform
import sys
from pathlib import Path

import typer
from rich.console import Console

from exprcalc._version import get_version
from exprcalc.core.config import ExprCalcConfig, load_config
from exprcalc.core.errors import ConfigError, EvalError, ExprCalcError
from exprcalc.core.expression_lang import evaluate, format_number, infer_type, parse_expr, render

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

_QUIT_COMMANDS = {"quit", "exit"}


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"exprcalc {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("EXPRCALC_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""exprcalc – arithmetic expression parser and evaluator

Parses +, -, *, / over integers and decimals, with unary minus and
parentheses, prints the syntax tree and the answer.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """exprcalc CLI main callback for global options."""
    _configure_logging(verbose)


def _load_config_or_exit(config_path: Path | None) -> ExprCalcConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        err_console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(code=1)


def _run_expression(source: str, config: ExprCalcConfig, show_tree: bool) -> bool:
    """Parse, evaluate and print one expression. Returns False on failure."""
    try:
        expr = parse_expr(source, max_depth=config.parser.max_depth)
        answer = evaluate(expr)
    except EvalError as e:
        err_console.print(f"Failed to evaluate: {e}", style="red", markup=False)
        return False
    except ExprCalcError as e:
        err_console.print(f"Failed to parse: {e}", style="red", markup=False)
        return False

    logger.debug("Result type: %s", infer_type(expr))
    if show_tree:
        typer.echo(render(expr, indent=config.display.indent))
        typer.echo("")
    typer.echo(f"answer = {format_number(answer)}")
    return True


@app.command("eval")
def eval_command(
    expression: str | None = typer.Argument(
        None,
        help="Expression to evaluate; '-' reads it from stdin",
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read the expression from a file",
    ),
    no_tree: bool = typer.Option(
        False,
        "--no-tree",
        help="Print only the answer line",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to exprcalc.toml",
    ),
) -> None:
    """
    Evaluate a single expression.

    Prints the syntax tree followed by "answer = <value>". Exits with
    status 1 and prints nothing on stdout if the expression is invalid.

    Expressions starting with a minus sign need a "--" separator:
    exprcalc eval -- "-2 + 3"
    """
    if (expression is None) == (file is None):
        err_console.print(
            "Error: give exactly one of EXPRESSION or --file", style="red", markup=False
        )
        raise typer.Exit(code=1)

    if file is not None:
        source = file.read_text(encoding="utf-8").rstrip()
    elif expression == "-":
        source = sys.stdin.read().rstrip()
    else:
        source = expression

    config = _load_config_or_exit(config_path)
    show_tree = config.display.show_tree and not no_tree

    if not _run_expression(source, config, show_tree):
        raise typer.Exit(code=1)


@app.command("repl")
def repl_command(
    no_tree: bool = typer.Option(
        False,
        "--no-tree",
        help="Print only the answer line",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to exprcalc.toml",
    ),
) -> None:
    """
    Evaluate expressions interactively, one per line.

    Invalid expressions report an error and the prompt continues.
    Leave with quit, exit or end of input (Ctrl-D).
    """
    config = _load_config_or_exit(config_path)
    show_tree = config.display.show_tree and not no_tree

    while True:
        typer.echo(config.repl.prompt, nl=False)
        line = sys.stdin.readline()
        if not line:
            typer.echo("")
            break

        source = line.strip()
        if not source:
            continue
        if source in _QUIT_COMMANDS:
            break

        _run_expression(source, config, show_tree)


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
