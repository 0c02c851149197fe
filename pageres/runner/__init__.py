"""Runner package — load the configured runner and hand it the jobs."""

from __future__ import annotations

import importlib
from typing import List

from pageres.args.models import Job
from pageres.errors import RunnerConfigError
from pageres.log import get_logger
from pageres.runner.base import Runner, RunOptions, RunStats

logger = get_logger(__name__)


def load_runner(path: str) -> type[Runner]:
    """Import the :class:`Runner` subclass named by ``"module:Attribute"``.

    Raises:
        RunnerConfigError: If *path* is malformed, cannot be imported, or does
            not name a Runner subclass.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise RunnerConfigError(f"Runner path must look like 'module:Class', got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise RunnerConfigError(f"Cannot import runner module {module_name!r}: {exc}") from exc

    cls = getattr(module, attr, None)
    if not (isinstance(cls, type) and issubclass(cls, Runner)):
        raise RunnerConfigError(f"{path!r} is not a Runner subclass")
    return cls


def run_jobs(jobs: List[Job], runner: Runner, options: RunOptions) -> RunStats:
    """Invoke *runner* once with every job."""
    logger.debug("Running %d job(s) with %s into %s", len(jobs), runner.name, options.dest)
    return runner.run(jobs, options)


__all__ = ["Runner", "RunOptions", "RunStats", "load_runner", "run_jobs"]
