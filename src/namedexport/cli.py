"""Typer-based CLI for namedexport.

Critical constraint: stdout is reserved for the rewritten source. All
logging, including the ``WARNING: <message>`` diagnostics, goes to stderr.
"""

import logging
import os
import shlex
import sys
from pathlib import Path

import typer

from namedexport import __version__
from namedexport.config import DEFAULT_PRETTIER_COMMAND, TransformConfig, parse_wrapper
from namedexport.cst.pipeline import transform_file
from namedexport.errors import TransformError

app = typer.Typer(
    name="namedexport",
    help="Rewrite a JavaScript/TypeScript file's default export as a named export",
    add_completion=False,
)


def resolve_wrapper(wrapper_flag: str | None) -> tuple[str, str]:
    """Resolve the wrapper call from CLI flag, env var, or default.

    Priority: CLI flag > NAMEDEXPORT_WRAPPER env var > "Scrivito.connect".
    """
    if wrapper_flag:
        return parse_wrapper(wrapper_flag)
    return parse_wrapper(os.getenv("NAMEDEXPORT_WRAPPER", "Scrivito.connect"))


def resolve_prettier(prettier_flag: str | None) -> tuple[str, ...]:
    """Resolve the prettier command from CLI flag, env var, or default.

    Priority: CLI flag > NAMEDEXPORT_PRETTIER env var > "prettier".
    The value is shell-split, so "npx prettier" works.
    """
    value = prettier_flag or os.getenv("NAMEDEXPORT_PRETTIER")
    if value:
        return tuple(shlex.split(value))
    return DEFAULT_PRETTIER_COMMAND


def resolve_format(no_format_flag: bool) -> bool:
    """Resolve whether to run the formatter from CLI flag or env var.

    Priority: --no-format flag > NAMEDEXPORT_FORMAT env var > True default.
    Set NAMEDEXPORT_FORMAT=0 to skip prettier.
    """
    if no_format_flag:
        return False
    return os.getenv("NAMEDEXPORT_FORMAT", "1") != "0"


def setup_logging(log_level: str) -> None:
    """Configure stderr-only logging.

    Args:
        log_level: Logging level (debug, info, warning, error, critical)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Clear existing handlers to prevent duplicates
    root_logger.handlers.clear()

    # Stderr only: stdout carries the transformed source
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(
        logging.Formatter("%(levelname)s: %(message)s"),
    )
    root_logger.addHandler(stderr_handler)


def _version_callback(value: bool) -> None:
    # Prints to stderr, not stdout
    if value:
        typer.echo(f"namedexport {__version__}", err=True)
        raise typer.Exit(0)


@app.command()
def main(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Source file to transform",
    ),
    wrapper: str | None = typer.Option(
        None,
        "--wrapper",
        help="Wrapper call to unwrap, as Namespace.method (overrides NAMEDEXPORT_WRAPPER)",
    ),
    no_format: bool = typer.Option(
        False,
        "--no-format",
        help="Skip the prettier pass",
    ),
    prettier: str | None = typer.Option(
        None,
        "--prettier",
        help="Prettier command (overrides NAMEDEXPORT_PRETTIER)",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (debug, info, warning, error, critical)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Print version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Print FILE with its default export rewritten as a named export.

    The file is never written; redirect stdout to keep the result.
    Diagnostics are printed to stderr as "WARNING: <message>".
    """
    setup_logging(log_level)

    try:
        namespace, method = resolve_wrapper(wrapper)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--wrapper") from exc

    config = TransformConfig(
        wrapper_namespace=namespace,
        wrapper_method=method,
        format_output=resolve_format(no_format),
        prettier_command=resolve_prettier(prettier),
    )

    logger = logging.getLogger(__name__)
    try:
        result = transform_file(str(file), config)
    except TransformError as exc:
        logger.error("%s: %s", file, exc)
        raise typer.Exit(1) from exc

    typer.echo(result.source, nl=False)
