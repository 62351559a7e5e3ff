"""Shared test fixtures and configuration."""

import logging
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture(autouse=True)
def isolated_config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    config_dir = temp_dir / ".commithelper"
    mocker.patch("commithelper.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() calls made by CLI invocations."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    logging.getLogger("commithelper").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def mock_popen(mocker):
    """Patch subprocess.Popen with a stub git process.

    Call the fixture value with the desired exit code and output; it returns
    the Popen mock so tests can inspect how git was spawned.
    """
    popen = mocker.patch("subprocess.Popen")

    def configure(returncode=0, stdout="", stderr=""):
        process = MagicMock()
        process.returncode = returncode
        process.communicate.return_value = (stdout, stderr)
        popen.return_value = process
        return popen

    configure()
    return configure


@pytest.fixture
def sample_commit_output():
    """Sample stdout of a successful git commit."""
    return """[main 1a2b3c4] feat:parser: support nested arrays
 2 files changed, 40 insertions(+), 3 deletions(-)
 create mode 100644 parser/nested.py
"""
