"""CLI entry point for commithelper.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commithelper.cli.config import config_app
from commithelper.cli.main import main_command, preview_command, types_command

# Main application
app = typer.Typer(
    name="commithelper",
    help="commithelper: step-by-step conventional commits",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("types")(types_command)
app.command("preview")(preview_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "preview_command",
    "types_command",
]
