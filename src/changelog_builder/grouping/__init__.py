"""
Grouping logic for commit history.

This package classifies log lines by Conventional Commit type and groups
them accordingly. See :mod:`changelog_builder.grouping.commit_classifier`
and :mod:`changelog_builder.grouping.group_model` for details.
"""

from .commit_classifier import classify_commits  # noqa: F401
from .group_model import CommitBuckets  # noqa: F401
