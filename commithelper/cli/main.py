"""Main CLI command: build a commit message step by step and commit it."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from commithelper import __version__, global_config
from commithelper.cli.utils import (
    build_fields,
    format_validation_error,
    prompt_commit_type,
    prompt_issue_ref,
    prompt_scope,
    prompt_subject,
    report_outcome,
    show_commit_types,
    show_message_preview,
)
from commithelper.formatters import render_commit_message
from commithelper.git import GitError, execute_commit, get_repo_root
from commithelper.logging_config import configure_logging
from commithelper.styles import COMMIT_TYPES, CommitFields


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commithelper {__version__}")
        raise typer.Exit()


def _load_config_or_exit() -> dict:
    try:
        return global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)


def gather_fields(
    commit_type: Optional[str],
    scope: Optional[str],
    message: Optional[str],
    issue: Optional[str],
    max_subject_length: int,
) -> CommitFields:
    """Collect the four commit fields from flags, prompting for the rest.

    Without --message the flow is interactive and every missing field is
    asked for in order. With --message nothing is prompted; scope and issue
    default to empty and --type is required.

    Raises:
        typer.Abort: If the user cancels a prompt.
        typer.BadParameter: If --type is unknown, or --message is given
            without --type.
        ValidationError: If a field supplied by flag is invalid.
    """
    if commit_type is not None and commit_type.strip() not in COMMIT_TYPES:
        raise typer.BadParameter(
            f"Unknown commit type: {commit_type!r}", param_hint="'--type'"
        )

    if message is None:
        if commit_type is None:
            commit_type = prompt_commit_type()
        if scope is None:
            scope = prompt_scope()
        message = prompt_subject(max_subject_length)
        if issue is None:
            issue = prompt_issue_ref()
    elif commit_type is None:
        raise typer.BadParameter("--type is required when --message is given")

    return build_fields(
        commit_type,
        scope or "",
        message,
        issue or "",
        max_subject_length,
    )


def main_command(
    ctx: typer.Context,
    commit_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Commit type (feat, fix, refactor, perf, docs, style, test, chore, ci, revert)",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        "-s",
        help="Scope of the change, e.g. a module name",
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Commit subject; skips the interactive prompts",
    ),
    issue: Optional[str] = typer.Option(
        None,
        "--issue",
        "-i",
        help="Issue number to reference as 'Resolves: #<n>'",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt and commit immediately",
    ),
    cwd: Optional[Path] = typer.Option(
        None,
        "--cwd",
        help="Repository working directory (defaults to the enclosing git repo)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging on stderr",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Emit logs as JSON lines",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Compose a conventional commit message step by step and commit it."""
    configure_logging(verbose=verbose, log_json=log_json)

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    config = _load_config_or_exit()

    try:
        fields = gather_fields(
            commit_type, scope, message, issue, config["max_subject_length"]
        )
    except typer.Abort:
        typer.echo("\nCommit cancelled.", err=True)
        raise typer.Exit(0)
    except ValidationError as e:
        typer.echo(f"Invalid input:\n{format_validation_error(e)}", err=True)
        raise typer.Exit(1)

    final_message = render_commit_message(fields)
    show_message_preview(final_message)

    if not yes and config["confirm"]:
        typer.echo("")
        try:
            confirmed = typer.confirm("Commit with this message?", default=True)
        except typer.Abort:
            confirmed = False
        if not confirmed:
            typer.echo("Commit cancelled.", err=True)
            raise typer.Exit(0)

    git = config["git_executable"]
    try:
        work_dir = cwd if cwd is not None else get_repo_root(git=git)
        outcome = execute_commit(final_message, work_dir, git=git)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    raise typer.Exit(report_outcome(outcome))


def preview_command(
    commit_type: str = typer.Option(
        ...,
        "--type",
        "-t",
        help="Commit type (feat, fix, refactor, perf, docs, style, test, chore, ci, revert)",
    ),
    message: str = typer.Option(
        ...,
        "--message",
        "-m",
        help="Commit subject",
    ),
    scope: str = typer.Option(
        "",
        "--scope",
        "-s",
        help="Scope of the change, e.g. a module name",
    ),
    issue: str = typer.Option(
        "",
        "--issue",
        "-i",
        help="Issue number to reference as 'Resolves: #<n>'",
    ),
) -> None:
    """Print the commit message the given fields produce, without committing."""
    config = _load_config_or_exit()

    try:
        fields = build_fields(
            commit_type, scope, message, issue, config["max_subject_length"]
        )
    except ValidationError as e:
        typer.echo(f"Invalid input:\n{format_validation_error(e)}", err=True)
        raise typer.Exit(1)

    typer.echo(render_commit_message(fields))


def types_command() -> None:
    """List the available commit types."""
    typer.echo("Available commit types:")
    typer.echo()
    show_commit_types()
