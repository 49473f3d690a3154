"""
Changelog rendering and file handling.

See :mod:`changelog_builder.changelog.document` for the Markdown layout
and :mod:`changelog_builder.changelog.writer` for how sections are added
to ``CHANGELOG.md``.
"""

from .document import render_document, resolve_title  # noqa: F401
from .writer import ExistingChangelog, write_changelog  # noqa: F401
