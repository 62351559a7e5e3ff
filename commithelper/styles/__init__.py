"""Commit types and structured commit fields for commithelper.

This package provides:
- constants: COMMIT_TYPES, COMMIT_TYPE_DESCRIPTIONS, MAX_SUBJECT_LENGTH,
             ISSUE_REF_PATTERN, FOOTER_PREFIX
- models: CommitFields, validate_subject, validate_issue_ref
"""

# Constants
from commithelper.styles.constants import (
    COMMIT_TYPE_DESCRIPTIONS,
    COMMIT_TYPES,
    FOOTER_PREFIX,
    ISSUE_REF_PATTERN,
    MAX_SUBJECT_LENGTH,
)

# Models
from commithelper.styles.models import (
    CommitFields,
    validate_issue_ref,
    validate_subject,
)


__all__ = [
    # Constants
    "COMMIT_TYPES",
    "COMMIT_TYPE_DESCRIPTIONS",
    "MAX_SUBJECT_LENGTH",
    "ISSUE_REF_PATTERN",
    "FOOTER_PREFIX",
    # Models
    "CommitFields",
    "validate_subject",
    "validate_issue_ref",
]
