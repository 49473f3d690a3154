"""
Rendering of a changelog section.

A section looks like::

    ## v1.2.0

    ### Features
    - feat: add X [a1b2c3d](https://host/repo/commit/a1b2c3d...)

    ### Fix
    - fix: y [e4f5a6b](https://host/repo/commit/e4f5a6b...)

Commit subjects are passed through unchanged.
"""

from __future__ import annotations

import re
from typing import List, Mapping, Optional

from changelog_builder.grouping.group_model import CommitBuckets


_LEADING_LOWER_RE = re.compile(r"^[a-z]")


def resolve_title(key: str, title_map: Optional[Mapping[str, str]] = None) -> str:
    """Return the section title for commit type ``key``.

    A non-empty entry in ``title_map`` wins; otherwise the first character
    of ``key`` is upper-cased (``feat`` -> ``Feat``).
    """
    title = title_map.get(key) if title_map else None
    if title:
        return title
    return _LEADING_LOWER_RE.sub(lambda m: m.group(0).upper(), key)


def version_heading(version: str) -> str:
    return f"## v{version}"


def render_document(
    version: str,
    buckets: CommitBuckets,
    title_map: Optional[Mapping[str, str]] = None,
) -> str:
    """Render ``buckets`` as the changelog section for ``version``."""
    lines: List[str] = [version_heading(version)]
    for key, entries in buckets.items():
        lines.append(f"\n### {resolve_title(key, title_map)}")
        lines.extend(entries)
    return "\n".join(lines)
