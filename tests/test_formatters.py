"""Tests for commithelper.formatters module."""

import pytest

from commithelper.formatters import compose_message, render_commit_message
from commithelper.styles import COMMIT_TYPES, CommitFields


class TestComposeMessage:
    """Tests for compose_message function."""

    def test_full_message(self):
        """Test type, scope, subject and issue together."""
        result = compose_message("feat", "parser", "support nested arrays", "42")
        assert result == "feat:parser: support nested arrays\nResolves: #42"

    @pytest.mark.parametrize("commit_type", COMMIT_TYPES)
    def test_type_and_subject_only(self, commit_type):
        """Test that empty scope and issue give a bare header."""
        result = compose_message(commit_type, "", "update readme", "")
        assert result == f"{commit_type}:update readme"
        assert "\n" not in result

    def test_scope_rendered_after_type_colon(self):
        """Test that the scope follows the type colon with no space."""
        result = compose_message("fix", "udiScan", "handle empty barcode", "")
        assert result == "fix:udiScan: handle empty barcode"

    def test_issue_adds_single_footer_line(self):
        """Test that the issue becomes exactly one footer line."""
        result = compose_message("docs", "", "document flags", "303")
        assert result.count("\n") == 1
        header, footer = result.split("\n")
        assert header == "docs:document flags"
        assert footer == "Resolves: #303"

    def test_whitespace_scope_is_omitted(self):
        """Test that a whitespace-only scope is treated as empty."""
        assert compose_message("chore", "   ", "bump deps", "") == "chore:bump deps"

    def test_whitespace_issue_is_omitted(self):
        """Test that a whitespace-only issue is treated as empty."""
        assert compose_message("chore", "", "bump deps", " \t ") == "chore:bump deps"

    def test_fields_are_stripped(self):
        """Test that scope, subject and issue are stripped."""
        result = compose_message("perf", "  cache  ", "  faster lookups ", " 7 ")
        assert result == "perf:cache: faster lookups\nResolves: #7"

    def test_inner_whitespace_preserved(self):
        """Test that whitespace inside the subject is kept."""
        result = compose_message("style", "", "align  columns", "")
        assert result == "style:align  columns"

    def test_non_ascii_subject(self):
        """Test that non-ASCII text passes through unchanged."""
        result = compose_message("feat", "掃描", "新增條碼解析", "")
        assert result == "feat:掃描: 新增條碼解析"

    def test_is_deterministic(self):
        """Test that identical inputs always give identical output."""
        args = ("refactor", "core", "split module", "12")
        results = {compose_message(*args) for _ in range(5)}
        assert len(results) == 1


class TestRenderCommitMessage:
    """Tests for render_commit_message function."""

    def test_renders_fields(self):
        """Test rendering validated CommitFields."""
        fields = CommitFields(
            type="test", scope=" api ", subject=" cover errors ", issue_ref="9"
        )
        assert render_commit_message(fields) == "test:api: cover errors\nResolves: #9"

    def test_renders_defaults(self):
        """Test rendering with default scope and issue."""
        fields = CommitFields(type="ci", subject="cache pip downloads")
        assert render_commit_message(fields) == "ci:cache pip downloads"
