"""effectgraph CLI tools."""

import os
import platform
from pathlib import Path
from typing import Annotated, List, Optional

import dotenv
import typer
from rich.console import Console
from rich.table import Table
from typer import Context, Exit

import effectgraph
from effectgraph.exceptions import ConfigurationError, InvalidValueError
from effectgraph.nodes import NodeRegistry
from effectgraph.settings import ENV_PREFIX, Settings
from effectgraph.types import RECT_FIELDS, Rect
from effectgraph.utilities.logging import configure_logging, get_logger

logger = get_logger("cli")
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="effectgraph",
    help="effectgraph CLI",
    add_completion=False,
    no_args_is_help=True,
)


def _parse_rect(value: str) -> Rect:
    """Parse a rectangle written as x,y,width,height."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != len(RECT_FIELDS):
        raise typer.BadParameter(f"Expected x,y,width,height but got '{value}'")
    try:
        rect = Rect.coerce(dict(zip(RECT_FIELDS, parts)))
    except InvalidValueError:
        raise typer.BadParameter(f"Rectangle fields must be numbers: '{value}'") from None
    return rect


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            "-l",
            help="Log level (overrides EFFECTGRAPH_LOG_LEVEL)",
        ),
    ] = None,
    env_file: Annotated[
        Optional[Path],
        typer.Option(
            "--env-file",
            "-f",
            help="Load EFFECTGRAPH_* settings from a .env file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    environ = dict(os.environ)
    if env_file:
        environ |= {k: v for k, v in dotenv.dotenv_values(env_file).items() if v is not None}
    if log_level:
        environ[f"{ENV_PREFIX}LOG_LEVEL"] = log_level

    try:
        settings = Settings.from_env(environ)
    except ConfigurationError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e.message}")
        raise Exit(code=1)

    configure_logging(settings.log_level, rich_tracebacks=settings.rich_tracebacks)
    logger.debug("Settings loaded: %s", settings.model_dump())


@app.command()
def version(ctx: Context) -> None:
    """Show version information."""
    if ctx.resilient_parsing:
        return

    info = {
        "effectgraph version": effectgraph.__version__,
        "Python version": platform.python_version(),
        "Platform": platform.platform(),
    }

    g = Table.grid(padding=(0, 1))
    g.add_column(style="bold", justify="left")
    g.add_column(style="cyan", justify="right")
    for k, v in info.items():
        g.add_row(f"{k}:", str(v).replace("\n", " "))
    console.print(g)


@app.command()
def nodes() -> None:
    """List registered node types."""
    table = Table(title="Registered nodes")
    table.add_column("Type", style="bold")
    table.add_column("Kind")
    table.add_column("Inputs", justify="right")
    table.add_column("Branches", justify="right")
    table.add_column("Description")
    for info in NodeRegistry.describe():
        table.add_row(
            info["node_type"],
            info["kind"],
            str(info["inputs"]),
            str(info["branches"]),
            info["description"],
        )
    console.print(table)


@app.command()
def clamp(
    value: float = typer.Argument(..., help="Value to clamp"),
    bound_a: float = typer.Argument(..., help="First bound"),
    bound_b: float = typer.Argument(..., help="Second bound"),
) -> None:
    """Evaluate a Clamp node with constant inputs."""
    node = NodeRegistry.create("Clamp")
    node.inputs = [lambda: value, lambda: bound_a, lambda: bound_b]
    result = node.evaluate()
    logger.debug("Clamp(%s, %s, %s) -> %s", value, bound_a, bound_b, result)
    typer.echo(result)


@app.command()
def overlap(
    rect_a: Rect = typer.Argument(..., parser=_parse_rect, metavar="X,Y,W,H", help="First rectangle"),
    rect_b: Rect = typer.Argument(..., parser=_parse_rect, metavar="X,Y,W,H", help="Second rectangle"),
) -> None:
    """Evaluate a RectOverlap node and print the branch it takes."""
    taken: List[str] = []
    node = NodeRegistry.create("RectOverlap")
    node.inputs[1] = lambda: rect_a
    node.inputs[2] = lambda: rect_b
    node.nexts = [lambda: taken.append("overlap"), lambda: taken.append("no-overlap")]
    node.evaluate()
    logger.debug("RectOverlap(%r, %r) -> %s", rect_a, rect_b, taken)
    typer.echo(taken[0])
