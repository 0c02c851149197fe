"""Utilities for rendering run results in the CLI."""

from __future__ import annotations

from pageres.runner.base import RunStats


def plural(count: int, singular: str, plural_form: str | None = None) -> str:
    """Return *singular* for a count of one, the plural form otherwise."""
    if count == 1:
        return singular
    return plural_form or f"{singular}s"


def render_summary(stats: RunStats) -> str:
    """Render the one-line success summary for a finished run."""
    return (
        f"Successfully generated {stats.screenshots} "
        f"{plural(stats.screenshots, 'screenshot')} from "
        f"{stats.urls} {plural(stats.urls, 'url')} and "
        f"{stats.sizes} {plural(stats.sizes, 'resolution')}"
    )
