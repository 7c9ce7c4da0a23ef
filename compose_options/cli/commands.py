"""CLI command implementations for compose-options."""

import logging
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from compose_options.constants import VERSION
from compose_options.exceptions import ConfigError
from compose_options.config import ConfigPathResolver, project_from_options
from compose_options.cli.utils import _build_options, _project_to_dict

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

FILES_HELP = "Compose configuration files ('-' reads standard input)"


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"compose-options v{VERSION}")
        raise typer.Exit()


def main(
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Resolve compose project files, name and environment."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def config(
        files: list[str] | None = typer.Option(None, "--file", "-f", help=FILES_HELP),
        project_name: str | None = typer.Option(None, "--project-name", "-p", help="Project name"),
        project_directory: Path | None = typer.Option(
            None, "--project-directory", file_okay=False, dir_okay=True, resolve_path=True,
            help="Working directory (default: directory of the first config file)"
        ),
        env: list[str] | None = typer.Option(None, "--env", "-e", help="Set a variable as KEY=VALUE"),
        no_dotenv: bool = typer.Option(False, "--no-dotenv", help="Do not read the .env file"),
        no_interpolate: bool = typer.Option(False, "--no-interpolate", help="Do not substitute variables"),
        services: bool = typer.Option(False, "--services", help="Print service names, one per line"),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only validate, print nothing"),
) -> None:
    """Resolve and print the project configuration."""
    console = Console(stderr=True)

    try:
        options = _build_options(
            files, project_name, project_directory, env,
            dotenv=not no_dotenv, interpolate=not no_interpolate,
        )
        project = project_from_options(options)
    except (ConfigError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if quiet:
        return
    if services:
        for name in project.service_names():
            typer.echo(name)
        return
    typer.echo(yaml.safe_dump(_project_to_dict(project), sort_keys=False), nl=False)


def files(
        files: list[str] | None = typer.Option(None, "--file", "-f", help=FILES_HELP),
        project_directory: Path | None = typer.Option(
            None, "--project-directory", file_okay=False, dir_okay=True, resolve_path=True,
            help="Directory to resolve from (default: current directory)"
        ),
) -> None:
    """Print the configuration files that would be loaded."""
    console = Console(stderr=True)

    try:
        resolved = ConfigPathResolver().resolve(
            files or [], str(project_directory) if project_directory else None
        )
    except (ConfigError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    for path in resolved.open_paths:
        typer.echo(path)
