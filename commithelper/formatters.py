"""Commit message composition."""

from commithelper.styles import FOOTER_PREFIX, CommitFields


def compose_message(commit_type: str, scope: str, subject: str, issue_ref: str) -> str:
    """Compose a commit message from its structured fields.

    The header keeps the tool's historical punctuation: no space after the
    type colon, and the scope (when present) is followed by ": ".

    Args:
        commit_type: Commit type tag (already validated by the caller).
        scope: Optional scope, empty or whitespace means none.
        subject: The change description, non-empty after stripping.
        issue_ref: Optional issue number, empty or whitespace means none.

    Returns:
        The commit message, a header line optionally followed by one footer line.

    Example output:
        feat:parser: support nested arrays
        Resolves: #42
    """
    scope = scope.strip()
    scope_part = f"{scope}: " if scope else ""
    header = f"{commit_type}:{scope_part}{subject.strip()}"

    issue_ref = issue_ref.strip()
    if not issue_ref:
        return header
    return f"{header}\n{FOOTER_PREFIX}{issue_ref}"


def render_commit_message(fields: CommitFields) -> str:
    """Render validated CommitFields into a commit message string."""
    return compose_message(fields.type, fields.scope, fields.subject, fields.issue_ref)
