"""The runner boundary: whatever actually renders the screenshots."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from pageres.args.models import Job


@dataclass
class RunOptions:
    """Options passed through from the command line to the runner."""

    delay: float = 0
    crop: bool = False
    dest: Path = field(default_factory=Path.cwd)


@dataclass
class RunStats:
    """Aggregate counts reported by a finished run."""

    screenshots: int
    urls: int
    sizes: int


class Runner(ABC):
    """Abstract base class for a screenshot runner."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable runner name."""

    @abstractmethod
    def run(self, jobs: List[Job], options: RunOptions) -> RunStats:
        """Capture every job and return the counts.

        A failure the runner wants shown as a plain message is raised as
        :class:`~pageres.errors.RunnerFailure`; any other exception is a bug
        and propagates to the caller untouched.
        """
