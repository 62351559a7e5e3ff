"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- GitSetupError: Raised when git cannot be run at all (no usable working
  directory, or the git process could not be spawned)
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class GitSetupError(GitError):
    """Raised when the environment is unusable and no commit was attempted."""

    pass
