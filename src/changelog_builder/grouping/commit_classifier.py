"""
Classification of commit subjects into changelog sections.

Only ``feat`` and ``fix`` commits are changelog-worthy. A subject is
recognised when it starts with one of those types, optionally followed by
a single whitespace character, and then a colon (``feat: ...``,
``fix : ...``). Everything else is dropped without complaint.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from .group_model import CommitBuckets


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


COMMIT_TYPE_PATTERN = re.compile(r"^(feat|fix)\s?:")


def classify_line(line: str) -> Optional[str]:
    """Return the commit type of ``line``, or ``None`` if it is not reported."""
    match = COMMIT_TYPE_PATTERN.match(line)
    return match.group(1) if match else None


def classify_commits(lines: Iterable[str]) -> CommitBuckets:
    """Group log lines by commit type.

    Parameters
    ----------
    lines : Iterable[str]
        Raw ``git log`` lines, newest first.

    Returns
    -------
    CommitBuckets
        Matching lines prefixed with ``"- "``, keyed by type in first-seen
        order.
    """
    buckets = CommitBuckets()
    for line in lines:
        commit_type = classify_line(line)
        if commit_type is None:
            logger.debug("Skipping commit: %s", line)
            continue
        buckets.add(commit_type, f"- {line}")
    return buckets
