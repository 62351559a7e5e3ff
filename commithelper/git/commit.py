"""Commit execution for commithelper.

Contains:
- CommitSuccess, NothingToCommit, CommitFailure: The CommitOutcome variants
- classify_commit_result: Map a finished git process to a CommitOutcome
- execute_commit: Run ``git commit -F -`` with a message and classify the result
"""

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import structlog

from commithelper.git.exceptions import GitSetupError

logger = structlog.get_logger(__name__)

# Substring git prints when the index has nothing staged
NOTHING_TO_COMMIT_MARKER = "nothing to commit"


@dataclass(frozen=True)
class CommitSuccess:
    """git exited 0; first_line is the first line of its stdout."""

    first_line: str


@dataclass(frozen=True)
class NothingToCommit:
    """git refused the commit because nothing was staged."""


@dataclass(frozen=True)
class CommitFailure:
    """git exited non-zero for any other reason; message is its output verbatim."""

    message: str


CommitOutcome = Union[CommitSuccess, NothingToCommit, CommitFailure]


def classify_commit_result(returncode: int, stdout: str, stderr: str) -> CommitOutcome:
    """Classify the result of a finished ``git commit`` process.

    Args:
        returncode: Exit status of the process.
        stdout: Everything the process wrote to stdout.
        stderr: Everything the process wrote to stderr.

    Returns:
        CommitSuccess on exit 0, NothingToCommit when the error text mentions
        "nothing to commit", CommitFailure otherwise.
    """
    if returncode == 0:
        return CommitSuccess(stdout.split("\n", 1)[0])

    # git reports "nothing to commit" on stdout, other errors on stderr
    text = stderr or stdout
    if NOTHING_TO_COMMIT_MARKER in text:
        return NothingToCommit()
    return CommitFailure(text)


def execute_commit(
    message: str,
    cwd: Optional[Union[str, os.PathLike]],
    git: str = "git",
) -> CommitOutcome:
    """Commit the staged changes in cwd with the given message.

    The message is fed to ``git commit -F -`` on stdin. stdin is written and
    closed while stdout and stderr are drained together, so a chatty git
    cannot block on a full pipe. Blocks until git exits.

    Args:
        message: The full commit message.
        cwd: Working directory of the repository.
        git: The git executable to run.

    Returns:
        The classified CommitOutcome.

    Raises:
        GitSetupError: If cwd is missing or not a directory, or git could not
            be started. No commit was attempted in either case.
    """
    if not cwd:
        logger.warning("git_commit_no_working_directory")
        raise GitSetupError("No working directory available.")

    work_dir = Path(cwd)
    if not work_dir.is_dir():
        logger.warning("git_commit_bad_working_directory", cwd=str(work_dir))
        raise GitSetupError(f"Working directory does not exist: {work_dir}")

    args = [git, "commit", "-F", "-"]
    log = logger.bind(cwd=str(work_dir))
    log.debug("git_commit_spawn", args=args)

    try:
        process = subprocess.Popen(
            args,
            cwd=work_dir,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        log.warning("git_commit_spawn_failed", error=str(e))
        raise GitSetupError(f"Could not run {git}: {e}") from e

    stdout, stderr = process.communicate(input=message)
    log.debug("git_commit_finished", returncode=process.returncode)

    outcome = classify_commit_result(process.returncode, stdout or "", stderr or "")
    log.debug("git_commit_classified", outcome=type(outcome).__name__)
    return outcome
