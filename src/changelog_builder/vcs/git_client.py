"""
Git client implementation for changelog_builder.

This module wraps the single Git query the changelog needs: a log of
non-merge commits, one line per commit, each line ending in a Markdown
link to the commit on the repository host. All subprocess calls go
through :meth:`GitClient._run` so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class HistoryFetchError(Exception):
    """Raised when the Git log query fails or writes to stderr."""

    pass


def commit_link_base(repository_url: str) -> str:
    """Return the prefix for commit links, e.g. ``https://host/repo/commit``."""
    return f"{repository_url.rstrip('/')}/commit"


def build_log_command(repository_url: str) -> List[str]:
    """Build the ``git log`` argument list for ``repository_url``.

    Each commit is printed as ``<subject> [<short sha>](<url>/commit/<sha>)``.
    """
    pretty = f"--pretty=format:%s [%h]({commit_link_base(repository_url)}/%H)"
    return [
        "git",
        "log",
        "--no-merges",
        pretty,
        "--abbrev-commit",
        "--date=relative",
    ]


class GitClient:
    """Client for reading history from a Git working tree."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path.cwd() if repo_root is None else Path(repo_root)

    def _run(self, cmd: List[str]) -> subprocess.CompletedProcess:
        """Run ``cmd`` in the repository root.

        Raises
        ------
        HistoryFetchError
            If the command cannot be started, exits with a non-zero status,
            or writes anything to stderr.
        """
        logger.debug("Executing Git command: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",  # Replace invalid characters instead of failing
            )
        except OSError as exc:
            logger.error("Failed to launch Git: %s", exc)
            raise HistoryFetchError(f"Failed to run git: {exc}") from exc

        if result.returncode != 0 or result.stderr:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(cmd),
                result.stdout,
                result.stderr,
            )
            message = result.stderr.strip() or result.stdout.strip()
            raise HistoryFetchError(
                message or f"git exited with status {result.returncode}"
            )
        return result

    def fetch_log(self, repository_url: str) -> List[str]:
        """Return the formatted log, newest commit first.

        Returns
        -------
        List[str]
            One entry per commit. Empty when the repository has no commits
            to report.

        Raises
        ------
        HistoryFetchError
            If the log query fails.
        """
        result = self._run(build_log_command(repository_url))
        lines = result.stdout.splitlines()
        logger.debug("Fetched %d log line(s)", len(lines))
        return lines


def fetch_log(repository_url: str, cwd: Optional[Path] = None) -> List[str]:
    """Shortcut for ``GitClient(cwd).fetch_log(repository_url)``."""
    return GitClient(cwd).fetch_log(repository_url)
