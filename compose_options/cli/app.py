"""CLI application definition for compose-options."""

import typer

from compose_options.cli.commands import main, config, files

app = typer.Typer(
    add_completion=False,
    help="Resolve compose project files, name and environment.",
    no_args_is_help=True,
)

app.callback()(main)

# Register commands
app.command(name="config", help="Resolve and print the project configuration")(config)
app.command(name="files", help="Print the configuration files that would be loaded")(files)
