"""
Command line interface for the changelog_builder tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``build-changelog`` command, and
:func:`build_changelog`, which runs one pass: load the manifest, read
the Git log, group ``feat``/``fix`` commits, render the section and
prepend it to ``CHANGELOG.md``. Every step reports its outcome as a
status line; no exception escapes :func:`build_changelog`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from changelog_builder import __version__
from changelog_builder.changelog.document import render_document
from changelog_builder.changelog.writer import CHANGELOG_NAME, write_changelog
from changelog_builder.config.loader import load
from changelog_builder.grouping.commit_classifier import classify_commits
from changelog_builder.report import (
    report_building,
    report_error,
    report_failed,
    report_starting,
    report_success,
)
from changelog_builder.vcs.git_client import HistoryFetchError, fetch_log

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests).
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_changelog(working_dir: Optional[Path] = None) -> bool:
    """Generate the changelog section for the current version.

    Parameters
    ----------
    working_dir : Optional[Path]
        Project root holding ``package.json`` and ``CHANGELOG.md``.
        Defaults to the current working directory.

    Returns
    -------
    bool
        True if the run completed (including when there was nothing to
        record), False if it was aborted or the write failed.
    """
    working_dir = Path.cwd() if working_dir is None else Path(working_dir)
    report_starting("Generating changelog")
    try:
        config = load(working_dir)
        if config is None:
            return False

        try:
            lines = fetch_log(config.repository_url, working_dir)
        except HistoryFetchError as exc:
            report_error(str(exc))
            return False

        if not lines:
            report_success(f"No commits found; {CHANGELOG_NAME} left unchanged")
            return True

        report_building(f"Read {len(lines)} commit(s), building v{config.version}")
        buckets = classify_commits(lines)
        logger.debug("Commit types found: %s", buckets.types())
        document = render_document(config.version, buckets, config.title_map)

        if write_changelog(working_dir, document, config.version):
            report_success(f"Wrote v{config.version} to {CHANGELOG_NAME}")
            return True
        report_failed(f"{CHANGELOG_NAME} was not updated")
        return False

    except Exception as exc:
        # Catch any other unhandled errors
        logger.debug("Unhandled error", exc_info=True)
        report_error(f"Unexpected error: {exc}")
        return False


@click.command()
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="build-changelog")
def main(verbose: bool) -> None:
    """Prepend a changelog section built from feat/fix commits to CHANGELOG.md.

    Reads the version and repository URL from package.json in the current
    directory.
    """
    # Use force=True to ensure handlers are reconfigured on subsequent
    # invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    if verbose:
        # Module loggers do not propagate by default
        for name, item in logging.root.manager.loggerDict.items():
            if name.startswith("changelog_builder") and isinstance(item, logging.Logger):
                item.propagate = True

    ok = build_changelog(Path.cwd())
    raise click.exceptions.Exit(EXIT_SUCCESS if ok else EXIT_FAILURE)
