"""
Project manifest loader for changelog_builder.

The tool reads the project's ``package.json`` located in the working
directory. Three pieces of information are taken from it:

- ``version``: the version the new changelog section is written for.
- ``changelog.url`` or, as a fallback, ``repository.url``: the HTTP(S)
  address of the repository, used to build commit links.
- ``changelog.text``: an optional mapping of commit type to the title
  displayed for its section.

If the manifest is missing, malformed, or lacks a usable version or
repository URL, a :class:`ConfigError` is raised by :func:`load_config`.
:func:`load` wraps it for callers that only need ``None`` on failure.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from changelog_builder.report import report_error


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings in environments where
# logging has not been configured. The CLI configures the root logger.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


MANIFEST_NAME = "package.json"

_GIT_PREFIX_RE = re.compile(r"^git\+")
_GIT_SUFFIX_RE = re.compile(r"\.git$")
_HTTP_RE = re.compile(r"^https?://")


class ConfigError(Exception):
    """Raised when the project manifest is missing or invalid."""

    pass


class MissingVersionError(ConfigError):
    """Raised when the manifest has no ``version`` field."""

    pass


class MissingRepositoryUrlError(ConfigError):
    """Raised when no HTTP(S) repository URL can be derived from the manifest."""

    pass


@dataclass(frozen=True)
class ProjectConfig:
    """Settings needed to build one changelog section.

    Attributes
    ----------
    version : str
        Current project version, without a leading ``v``.
    repository_url : str
        HTTP(S) address of the repository.
    title_map : Optional[Dict[str, str]]
        Display titles keyed by commit type, or ``None`` for the defaults.
    """

    version: str
    repository_url: str
    title_map: Optional[Dict[str, str]] = None


def normalize_repository_url(url: str) -> str:
    """Strip ``git+`` and ``.git`` decoration from a ``repository.url`` value."""
    url = _GIT_PREFIX_RE.sub("", url.strip())
    return _GIT_SUFFIX_RE.sub("", url)


def _read_manifest(manifest_path: Path) -> Dict[str, Any]:
    if not manifest_path.exists():
        logger.error("Manifest '%s' does not exist", manifest_path)
        raise ConfigError(f"Missing project manifest: {manifest_path}")

    try:
        content = manifest_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse manifest: %s", exc)
        raise ConfigError(f"Invalid JSON in {manifest_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{manifest_path.name} must contain a JSON object")
    return data


def _extract_repository_url(data: Dict[str, Any]) -> Optional[str]:
    changelog = data.get("changelog")
    if isinstance(changelog, dict):
        url = changelog.get("url")
        if isinstance(url, str) and url:
            return url

    repository = data.get("repository")
    # npm accepts either {"type": ..., "url": ...} or a bare string
    if isinstance(repository, dict):
        repository = repository.get("url")
    if isinstance(repository, str) and repository:
        return normalize_repository_url(repository)
    return None


def _extract_title_map(data: Dict[str, Any]) -> Optional[Dict[str, str]]:
    changelog = data.get("changelog")
    if not isinstance(changelog, dict) or changelog.get("text") is None:
        return None

    text = changelog["text"]
    if not isinstance(text, dict):
        raise ConfigError("'changelog.text' must be an object")
    titles: Dict[str, str] = {}
    for key, value in text.items():
        # Unusable titles fall back to the default for that commit type
        if not isinstance(value, str):
            logger.debug("Ignoring non-string title for '%s': %r", key, value)
            continue
        titles[key] = value
    return titles


def load_config(working_dir: Optional[Path] = None) -> ProjectConfig:
    """Load and validate the project manifest.

    Args:
        working_dir: Directory containing ``package.json``. Defaults to the
                     current working directory.

    Returns:
        The validated :class:`ProjectConfig`.

    Raises:
        MissingVersionError: If ``version`` is absent or empty.
        MissingRepositoryUrlError: If no HTTP(S) repository URL is configured.
        ConfigError: If the manifest is missing, malformed, or has fields of
                     the wrong type.
    """
    working_dir = Path.cwd() if working_dir is None else Path(working_dir)
    manifest_path = working_dir / MANIFEST_NAME
    data = _read_manifest(manifest_path)

    version = data.get("version")
    if version is None or version == "":
        raise MissingVersionError(
            f"No 'version' field found; add a version to {MANIFEST_NAME}"
        )
    if not isinstance(version, str):
        raise ConfigError("'version' must be a string")

    url = _extract_repository_url(data)
    if not url or not _HTTP_RE.match(url):
        logger.error("Unusable repository URL: %r", url)
        raise MissingRepositoryUrlError(
            "No valid repository URL; add 'changelog.url' or an HTTP(S) "
            f"'repository.url' to {MANIFEST_NAME}"
        )

    config = ProjectConfig(
        version=version,
        repository_url=url,
        title_map=_extract_title_map(data),
    )
    logger.debug("Loaded project manifest from: %s", manifest_path)
    logger.debug("Configuration: %s", config)
    return config


def load(working_dir: Optional[Path] = None) -> Optional[ProjectConfig]:
    """Return the project configuration, or ``None`` after reporting why not."""
    try:
        return load_config(working_dir)
    except ConfigError as exc:
        report_error(str(exc))
        return None
