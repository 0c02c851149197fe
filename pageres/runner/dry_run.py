"""Runner that plans the captures without rendering anything."""

from __future__ import annotations

from typing import List

import typer

from pageres.args.models import Job
from pageres.runner.base import Runner, RunOptions, RunStats

DEFAULT_SIZES_LABEL = "<default sizes>"


class DryRunRunner(Runner):
    """Echo one line per planned screenshot and report the counts.

    A job without sizes counts as a single capture at the downstream default
    resolutions.
    """

    @property
    def name(self) -> str:
        return "dry-run"

    def run(self, jobs: List[Job], options: RunOptions) -> RunStats:
        screenshots = 0
        urls: set[str] = set()
        sizes: set[str] = set()

        for job in jobs:
            urls.add(job.url)
            sizes.update(job.sizes)
            for size in job.sizes or [DEFAULT_SIZES_LABEL]:
                typer.echo(f"  {job.url}  {size}  → {options.dest}")
                screenshots += 1

        if options.delay or options.crop:
            typer.echo(f"  (delay={options.delay:g}s, crop={'yes' if options.crop else 'no'})")

        return RunStats(screenshots=screenshots, urls=len(urls), sizes=len(sizes))
