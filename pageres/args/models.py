"""Data models for the argument pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class TokenGroup:
    """Tokens that belong to the same capture job.

    ``explicit`` is ``True`` for a ``[ ... ]`` group typed by the user and
    ``False`` for the implicit group collecting every ungrouped token.
    """

    tokens: List[str] = field(default_factory=list)
    explicit: bool = False


@dataclass
class ClassifiedGroup:
    """A :class:`TokenGroup` split into urls, resolutions and keywords."""

    urls: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    source: TokenGroup | None = None

    @property
    def has_sizes(self) -> bool:
        return bool(self.sizes or self.keywords)


@dataclass
class Job:
    """One URL paired with the resolutions and presets to capture it at."""

    url: str
    sizes: List[str] = field(default_factory=list)
