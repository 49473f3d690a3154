"""
Version control system (VCS) integration.

Contains the Git client used to read commit history for the changelog.
"""

from .git_client import GitClient, HistoryFetchError, fetch_log  # noqa: F401
