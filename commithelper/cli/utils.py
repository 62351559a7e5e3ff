"""Shared utility functions for CLI commands.

The interactive steps each raise typer.Abort when the user cancels
(Ctrl-C or end of input), which aborts the whole flow.
"""

from typing import Optional

import typer
from pydantic import ValidationError

from commithelper.git import CommitFailure, CommitOutcome, CommitSuccess, NothingToCommit
from commithelper.styles import (
    COMMIT_TYPE_DESCRIPTIONS,
    COMMIT_TYPES,
    CommitFields,
    validate_issue_ref,
    validate_subject,
)


def show_commit_types() -> None:
    """Print the numbered list of commit types."""
    for i, commit_type in enumerate(COMMIT_TYPES, 1):
        typer.echo(f"  {i:2}. {commit_type:<9} {COMMIT_TYPE_DESCRIPTIONS[commit_type]}")


def resolve_commit_type(choice: str) -> Optional[str]:
    """Resolve a menu answer (number or tag) to a commit type.

    Returns:
        The commit type, or None if the answer matches nothing.
    """
    choice = choice.strip().lower()
    if choice.isdigit():
        index = int(choice)
        if 1 <= index <= len(COMMIT_TYPES):
            return COMMIT_TYPES[index - 1]
        return None
    return choice if choice in COMMIT_TYPES else None


def prompt_commit_type() -> str:
    """Step 1/4: pick a commit type from the menu."""
    typer.echo("Step 1/4: Type")
    show_commit_types()
    while True:
        choice = typer.prompt("Select commit type (number or name)")
        commit_type = resolve_commit_type(choice)
        if commit_type:
            return commit_type
        typer.echo(f"Invalid choice: {choice}", err=True)


def prompt_scope() -> str:
    """Step 2/4: optional scope (module or file name)."""
    typer.echo("Step 2/4: Scope (optional)")
    return typer.prompt(
        "Scope, e.g. a module or file name (press Enter to skip)",
        default="",
        show_default=False,
    )


def prompt_subject(max_length: int) -> str:
    """Step 3/4: required subject, re-asked until it validates."""
    typer.echo("Step 3/4: Message")
    while True:
        subject = typer.prompt("Describe the change")
        error = validate_subject(subject, max_length)
        if error is None:
            return subject
        typer.echo(error, err=True)


def prompt_issue_ref() -> str:
    """Step 4/4: optional issue number, re-asked until it is digits only."""
    typer.echo("Step 4/4: Issue (optional)")
    while True:
        issue_ref = typer.prompt(
            "Issue number, added as 'Resolves: #<n>' (press Enter to skip)",
            default="",
            show_default=False,
        )
        error = validate_issue_ref(issue_ref)
        if error is None:
            return issue_ref
        typer.echo(f"{error}, e.g. 303", err=True)


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line per field."""
    lines = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"])
        message = item["msg"]
        # pydantic prefixes ValueError messages with "Value error, "
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        lines.append(f"{field}: {message}")
    return "\n".join(lines)


def build_fields(
    commit_type: str,
    scope: str,
    subject: str,
    issue_ref: str,
    max_subject_length: int,
) -> CommitFields:
    """Validate raw answers into CommitFields.

    Raises:
        ValidationError: If any field is invalid.
    """
    return CommitFields.model_validate(
        {
            "type": commit_type,
            "scope": scope,
            "subject": subject,
            "issue_ref": issue_ref,
        },
        context={"max_subject_length": max_subject_length},
    )


def show_message_preview(message: str) -> None:
    """Print the composed message between rulers."""
    typer.echo("")
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)


def report_outcome(outcome: CommitOutcome) -> int:
    """Print a CommitOutcome for the user.

    Returns:
        The process exit code for the outcome.
    """
    if isinstance(outcome, CommitSuccess):
        typer.echo("✓ Commit successful!", err=True)
        typer.echo(outcome.first_line)
        return 0

    if isinstance(outcome, NothingToCommit):
        typer.echo("⚠ No staged changes. Run 'git add' first.", err=True)
        return 1

    if isinstance(outcome, CommitFailure):
        typer.echo(f"✗ Commit failed: {outcome.message}", err=True)
        return 1

    raise TypeError(f"Unknown commit outcome: {outcome!r}")
