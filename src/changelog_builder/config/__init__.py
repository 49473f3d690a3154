"""
Configuration loading for changelog_builder.

Provides a loader for the ``package.json`` manifest located in the
working directory. See :mod:`changelog_builder.config.loader` for
implementation details.
"""

from .loader import (  # noqa: F401
    ConfigError,
    MissingRepositoryUrlError,
    MissingVersionError,
    ProjectConfig,
    load,
    load_config,
)
