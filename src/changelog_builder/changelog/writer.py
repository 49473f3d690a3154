"""
Writing rendered sections into ``CHANGELOG.md``.

New sections are always prepended, separated from the previous content
by one blank line. Existing content is never reordered or deduplicated;
when the version being written already has a heading in the file a
warning is printed and the section is written anyway.

The new file is written next to the old one and moved into place, so a
failed write leaves the previous changelog untouched.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import NamedTuple, Optional

from changelog_builder.report import report_error, report_warning


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CHANGELOG_NAME = "CHANGELOG.md"
NEW_FILE_MODE = 0o644


class ExistingChangelog(NamedTuple):
    """What was found at the changelog path before writing."""

    exists: bool
    content: str


def has_version(content: str, version: str) -> bool:
    """Return True if a ``## v<version>`` heading starts any line of ``content``."""
    pattern = re.compile(rf"^##\sv{re.escape(version)}", re.MULTILINE)
    return pattern.search(content) is not None


def detect_newline(content: str) -> str:
    """Return ``"\\r\\n"`` if ``content`` uses Windows line endings, else ``"\\n"``."""
    return "\r\n" if "\r\n" in content else "\n"


def compose_changelog(document: str, existing: str) -> str:
    """Return ``document`` followed by a blank line and ``existing``.

    The section is written with the line endings already used by ``existing``.
    """
    newline = detect_newline(existing)
    section = document.replace("\n", newline)
    return f"{section}{newline}{newline}{existing}"


def read_changelog(path: Path) -> ExistingChangelog:
    """Read ``path``, treating a missing file as empty.

    ``newline=""`` keeps the existing line endings untouched. Any error other
    than a missing file propagates.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return ExistingChangelog(exists=True, content=handle.read())
    except FileNotFoundError:
        return ExistingChangelog(exists=False, content="")


def write_changelog(working_dir: Optional[Path], document: str, version: str) -> bool:
    """Prepend ``document`` to the changelog in ``working_dir``.

    Returns
    -------
    bool
        True if the file was written, False if reading or writing failed.
        Failures are reported to the user before returning.
    """
    working_dir = Path.cwd() if working_dir is None else Path(working_dir)
    path = working_dir / CHANGELOG_NAME
    tmp_path: Optional[Path] = None
    try:
        existing = read_changelog(path)
        if existing.exists and has_version(existing.content, version):
            report_warning(f"{CHANGELOG_NAME} already has an entry for v{version}")

        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=working_dir,
            prefix=f".{CHANGELOG_NAME}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(compose_changelog(document, existing.content))

        if existing.exists:
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, NEW_FILE_MODE)
        os.replace(tmp_path, path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to write %s: %s", path, exc)
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        report_error(f"Could not write {CHANGELOG_NAME}: {exc}")
        return False

    logger.debug("Wrote %s (existing file: %s)", path, existing.exists)
    return True
