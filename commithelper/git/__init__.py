"""Git integration for commithelper.

This package provides:
- exceptions: GitError, GitSetupError
- runner: _run_git_command, get_repo_root
- commit: CommitOutcome variants, classify_commit_result, execute_commit
"""

# Exceptions
from commithelper.git.exceptions import (
    GitError,
    GitSetupError,
)

# Runner utilities
from commithelper.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Commit execution
from commithelper.git.commit import (
    NOTHING_TO_COMMIT_MARKER,
    CommitFailure,
    CommitOutcome,
    CommitSuccess,
    NothingToCommit,
    classify_commit_result,
    execute_commit,
)


__all__ = [
    # Exceptions
    "GitError",
    "GitSetupError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Commit
    "NOTHING_TO_COMMIT_MARKER",
    "CommitOutcome",
    "CommitSuccess",
    "NothingToCommit",
    "CommitFailure",
    "classify_commit_result",
    "execute_commit",
]
