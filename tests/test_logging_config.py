"""Tests for commithelper.logging_config module."""

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from commithelper.git import GitSetupError, execute_commit
from commithelper.logging_config import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_level_is_warning(self):
        """Test that only warnings are shown by default."""
        configure_logging()
        assert logging.getLogger("commithelper").level == logging.WARNING

    def test_verbose_enables_debug(self):
        """Test that verbose mode enables debug output."""
        configure_logging(verbose=True)
        assert logging.getLogger("commithelper").level == logging.DEBUG

    def test_single_stderr_handler(self):
        """Test that repeated configuration does not stack handlers."""
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_output(self, capsys):
        """Test that --log-json emits one JSON object per line."""
        configure_logging(log_json=True)

        structlog.get_logger("commithelper.test").warning("something_happened", key="value")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "something_happened"
        assert record["key"] == "value"
        assert record["level"] == "warning"


class TestCommitLogging:
    """Tests for the events logged while committing."""

    def test_commit_events(self, mock_popen, temp_dir):
        """Test spawn, finish and classification are logged."""
        mock_popen(returncode=0, stdout="ok\n")

        with capture_logs() as logs:
            execute_commit("feat:add", temp_dir)

        events = [entry["event"] for entry in logs]
        assert events == ["git_commit_spawn", "git_commit_finished", "git_commit_classified"]
        assert logs[1]["returncode"] == 0
        assert logs[2]["outcome"] == "CommitSuccess"

    def test_setup_error_logged_as_warning(self):
        """Test a missing working directory is logged before raising."""
        with capture_logs() as logs:
            with pytest.raises(GitSetupError):
                execute_commit("feat:add", None)

        assert logs[0]["event"] == "git_commit_no_working_directory"
        assert logs[0]["log_level"] == "warning"
