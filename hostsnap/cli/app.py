"""Typer-based CLI application for hostsnap."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from hostsnap import __version__
from hostsnap.core.collector import collect_system_info
from hostsnap.utils.formatters import generate_summary

app = typer.Typer(
    name="hostsnap",
    help="Best-effort snapshots of static host metadata",
    add_completion=False,
)

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Document formats for the show command."""

    YAML = "yaml"
    JSON = "json"


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        typer.echo(f"hostsnap v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
):
    """Hostsnap - Describe the machine you are running on.

    Collects OS identity, Linux distribution, memory, hostname and CPU
    facts. Any fact that cannot be read is reported as empty rather than
    failing the whole snapshot.
    """
    pass


def configure_logging(log_level: str) -> None:
    """Configure logging from a CLI log level.

    Args:
        log_level: One of debug, info, warn, warning, error (any case)

    Raises:
        typer.Exit: If the level is not recognised
    """
    log_level_upper = log_level.upper()
    if log_level_upper not in ["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]:
        typer.echo(
            f"❌ Invalid log level: {log_level}. "
            "Must be debug, info, warn, or error.",
            err=True,
        )
        raise typer.Exit(1)

    # Map WARN to WARNING for Python logging
    if log_level_upper == "WARN":
        log_level_upper = "WARNING"

    logging.basicConfig(
        level=getattr(logging, log_level_upper),
        format="%(message)s",
    )


def write_output(text: str, output: Optional[Path]) -> None:
    """Write text to a file, or to stdout when no path is given.

    Raises:
        typer.Exit: If the file cannot be written
    """
    if output is None:
        typer.echo(text, nl=False)
        return

    try:
        output = output.expanduser().resolve()
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        typer.echo(f"❌ Cannot write output file: {e}", err=True)
        raise typer.Exit(1) from e

    logger.info("Wrote system info to %s", output)


LogLevelOption = Annotated[
    str,
    typer.Option(
        help="Logging level (debug, info, warn, error)",
        case_sensitive=False,
        hidden=True,  # Hide from --help
    ),
]


@app.command()
def show(
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Document format", case_sensitive=False),
    ] = OutputFormat.YAML,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to file instead of stdout"),
    ] = None,
    log_level: LogLevelOption = "warning",
):
    """Print the host snapshot as a key-value document."""
    configure_logging(log_level)

    info = collect_system_info()
    if output_format == OutputFormat.JSON:
        text = info.to_json()
    else:
        text = info.as_yaml()

    write_output(text, output)


@app.command()
def summary(
    log_level: LogLevelOption = "warning",
):
    """Print a short human-readable overview of the host."""
    configure_logging(log_level)

    info = collect_system_info()

    typer.echo("=" * 60)
    typer.echo("🖥️  Hostsnap - System Summary")
    typer.echo("=" * 60)
    typer.echo(generate_summary(info), nl=False)
    typer.echo("=" * 60)
