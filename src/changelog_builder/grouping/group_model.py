"""
Data model for grouped commit lines.

:class:`CommitBuckets` keeps changelog lines grouped by Conventional
Commit type. Types are kept in the order they were first seen and lines
in the order they were added.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass
class CommitBuckets:
    """Insertion-ordered mapping of commit type to changelog lines.

    Attributes
    ----------
    buckets : OrderedDict[str, List[str]]
        Lines per commit type, each already prefixed with ``"- "``.
    """

    buckets: "OrderedDict[str, List[str]]" = field(default_factory=OrderedDict)

    def add(self, commit_type: str, line: str) -> None:
        """Append ``line`` to the bucket for ``commit_type``."""
        self.buckets.setdefault(commit_type, []).append(line)

    def types(self) -> List[str]:
        return list(self.buckets)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        return iter(self.buckets.items())
