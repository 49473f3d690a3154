"""
User-facing status lines for changelog_builder.

Every message printed by the tool has the form::

    [CHANGELOG] <Status> <message>

where the label is blue and the status word is underlined and coloured.
Colours are stripped by :func:`click.echo` when stdout is not a terminal.
"""

from __future__ import annotations

import click


MODULE_LABEL = "[CHANGELOG]"

STARTING = "Starting"
BUILDING = "Building"
SUCCESS = "Success"
FAILED = "Failed"
WARNING = "Warning"
ERROR = "Error"

_STATUS_COLOURS = {
    STARTING: "cyan",
    BUILDING: "cyan",
    SUCCESS: "green",
    FAILED: "red",
    WARNING: "yellow",
    ERROR: "red",
}


def format_status(status: str, message: str) -> str:
    """Return the styled status line for ``status`` and ``message``."""
    label = click.style(MODULE_LABEL, fg="blue")
    word = click.style(status, fg=_STATUS_COLOURS.get(status), underline=True)
    return f"{label} {word} {message}"


def report(status: str, message: str) -> None:
    """Print a status line to stdout."""
    click.echo(format_status(status, message))


def report_starting(message: str) -> None:
    report(STARTING, message)


def report_building(message: str) -> None:
    report(BUILDING, message)


def report_success(message: str) -> None:
    report(SUCCESS, message)


def report_failed(message: str) -> None:
    report(FAILED, message)


def report_warning(message: str) -> None:
    report(WARNING, message)


def report_error(message: str) -> None:
    report(ERROR, message)
