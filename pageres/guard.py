"""Refuse to run with elevated privileges.

Screenshots written as root end up owned by root in the user's working
directory, so the CLI stops before doing anything when run that way.
"""

from __future__ import annotations

import os

import typer

EXIT_ELEVATED = 77

_MESSAGE = (
    "You are not allowed to run pageres with root permissions.\n"
    "If running without sudo doesn't work, set PAGERES_ALLOW_ROOT=1."
)


def is_elevated() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def block_elevated(allow: bool = False) -> None:
    """Exit with code 77 when running as root, unless *allow* is set."""
    if allow or not is_elevated():
        return
    typer.secho(_MESSAGE, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=EXIT_ELEVATED)
