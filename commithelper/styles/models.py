"""Data models for commithelper styles module.

Contains:
- CommitFields: Pydantic model for the four structured commit inputs
- validate_subject: Standalone subject check used by interactive prompts
- validate_issue_ref: Standalone issue reference check used by interactive prompts
"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from commithelper.styles.constants import (
    COMMIT_TYPES,
    ISSUE_REF_PATTERN,
    MAX_SUBJECT_LENGTH,
)


def validate_subject(value: str, max_length: int = MAX_SUBJECT_LENGTH) -> Optional[str]:
    """Check a raw subject line.

    Args:
        value: The subject as typed by the user.
        max_length: Maximum allowed length of the raw input.

    Returns:
        An error message, or None if the subject is acceptable.
    """
    if not value or not value.strip():
        return "Subject cannot be empty"
    if len(value) > max_length:
        return f"Subject is too long ({len(value)}/{max_length})"
    return None


def validate_issue_ref(value: str) -> Optional[str]:
    """Check a raw issue reference.

    Empty (or whitespace-only) input is allowed and means "no issue".

    Args:
        value: The issue reference as typed by the user.

    Returns:
        An error message, or None if the reference is acceptable.
    """
    if value and value.strip() and not ISSUE_REF_PATTERN.match(value.strip()):
        return "Issue reference must contain digits only"
    return None


class CommitFields(BaseModel):
    """Pydantic model for the structured inputs of a commit message.

    Pass ``max_subject_length`` in the validation context to override the
    default subject bound.

    Attributes:
        type: Commit type tag, one of COMMIT_TYPES.
        scope: Optional scope (module or file name), empty means none.
        subject: Short description of the change.
        issue_ref: Optional issue number (digits only), empty means none.
    """

    type: str
    scope: str = ""
    subject: str
    issue_ref: str = ""

    @field_validator("type")
    @classmethod
    def type_must_be_known(cls, v: str) -> str:
        """Ensure type is one of the known commit types."""
        v = v.strip()
        if v not in COMMIT_TYPES:
            raise ValueError(f"Unknown commit type: {v!r}")
        return v

    @field_validator("scope")
    @classmethod
    def strip_scope(cls, v: str) -> str:
        """Strip whitespace from scope."""
        return v.strip()

    @field_validator("subject")
    @classmethod
    def subject_must_be_valid(cls, v: str, info: ValidationInfo) -> str:
        """Ensure subject is non-empty and within the length bound."""
        max_length = MAX_SUBJECT_LENGTH
        if info.context and "max_subject_length" in info.context:
            max_length = info.context["max_subject_length"]
        error = validate_subject(v, max_length)
        if error:
            raise ValueError(error)
        return v.strip()

    @field_validator("issue_ref")
    @classmethod
    def issue_ref_must_be_digits(cls, v: str) -> str:
        """Ensure issue reference is digits only (or empty)."""
        error = validate_issue_ref(v)
        if error:
            raise ValueError(error)
        return v.strip()
