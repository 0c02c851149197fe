"""Exceptions raised while turning arguments into capture jobs."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pageres.args.models import TokenGroup


class PageresError(Exception):
    """Base class for every error pageres raises on purpose."""


class MalformedGroupingError(PageresError):
    """Bracket grouping in the arguments is unbalanced or nested."""


class EmptyUrlError(PageresError):
    """A token group contains no URL to capture."""

    def __init__(self, group: TokenGroup) -> None:
        self.group = group
        super().__init__(f"Specify a url (group: {' '.join(group.tokens) or '<empty>'})")


class RunnerFailure(PageresError):
    """The runner reported a failure instead of raising its own exception."""


class RunnerConfigError(PageresError):
    """The configured runner cannot be imported or is not a Runner."""


class PipedInputError(PageresError):
    """Text piped in on stdin cannot be decoded."""
