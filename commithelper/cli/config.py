"""CLI commands for global configuration management."""

import typer

from commithelper import global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commithelper configuration in ~/.commithelper/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Current commithelper configuration ({global_config.get_config_file_path()}):")
    typer.echo()
    typer.echo(f"  Max Subject Length: {config['max_subject_length']}")
    typer.echo(f"  Confirm Before Commit: {config['confirm']}")
    typer.echo(f"  Git Executable: {config['git_executable']}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        ...,
        help="Config key (max_subject_length, confirm, git_executable)",
    ),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a configuration value."""
    try:
        stored = global_config.set_config_value(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to: {stored}")
