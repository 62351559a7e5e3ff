"""Constants for commithelper styles module.

Contains:
- COMMIT_TYPES: Closed set of commit type tags, in menu order
- COMMIT_TYPE_DESCRIPTIONS: Short description for each type (for menus/help)
- MAX_SUBJECT_LENGTH: Default upper bound on subject length
- ISSUE_REF_PATTERN: Pattern an issue reference must match
- FOOTER_PREFIX: Prefix of the issue footer line
"""

import re

# Valid commit types (order is the order shown in the type menu)
COMMIT_TYPES = [
    "feat",
    "fix",
    "refactor",
    "perf",
    "docs",
    "style",
    "test",
    "chore",
    "ci",
    "revert",
]

COMMIT_TYPE_DESCRIPTIONS = {
    "feat": "✨ New feature",
    "fix": "🐛 Bug fix",
    "refactor": "♻️  Refactor (no behaviour change)",
    "perf": "⚡ Performance improvement",
    "docs": "📝 Documentation changes",
    "style": "💄 Formatting (no logic change)",
    "test": "✅ Add or update tests",
    "chore": "🔧 Build process or tooling",
    "ci": "👷 CI/CD changes",
    "revert": "⏪ Revert a previous commit",
}

MAX_SUBJECT_LENGTH = 100

ISSUE_REF_PATTERN = re.compile(r"^\d+$")

FOOTER_PREFIX = "Resolves: #"
