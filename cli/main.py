"""pageres CLI — get screenshots of websites in different resolutions.

Usage:
    pageres --help

Tokens can be given in any order; urls, resolutions and preset keywords are
told apart by their shape.  Group tokens with ``[ ]`` to give each url its
own set of resolutions.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from pageres import __version__
from pageres.args import merge_tokens, parse_jobs, read_piped_tokens
from pageres.config import settings
from pageres.errors import (
    EmptyUrlError,
    MalformedGroupingError,
    PipedInputError,
    RunnerConfigError,
    RunnerFailure,
)
from pageres.guard import block_elevated
from pageres.log import setup_logging
from pageres.runner import RunOptions, load_runner, run_jobs

from cli.rendering import render_summary

EXIT_USAGE = 2

app = typer.Typer(name="pageres", add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _show_help(ctx: typer.Context) -> None:
    # The rich formatter prints the help itself and returns an empty string.
    help_text = ctx.get_help()
    if help_text:
        typer.echo(help_text)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    ctx: typer.Context,
    tokens: Optional[List[str]] = typer.Argument(
        None, help="Urls, resolutions and preset keywords, optionally grouped with [ ]."
    ),
    delay: float = typer.Option(0, "-d", "--delay", help="Delay capturing the screenshot (seconds)."),
    crop: bool = typer.Option(False, "-c", "--crop", help="Crop to the set height."),
    version: bool = typer.Option(
        False, "-v", "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Get screenshots of websites in different resolutions.

    Specify urls and screen resolutions as arguments. Order doesn't matter.
    Group arguments with [ ]. Screenshots are saved in the current directory.
    <url> can also be a local file path.

    \b
    Examples:
      pageres todomvc.com yeoman.io 1366x768 1600x900
      pageres [ yeoman.io 1366x768 1600x900 ] [ todomvc.com 1024x768 480x320 ]
      pageres --delay 3 1366x768 < urls.txt
      pageres unicorn.html 1366x768
      cat screen-resolutions.txt | pageres todomvc.com yeoman.io

    You can also pipe in a newline separated list of urls and screen
    resolutions which will get merged with the arguments. If no screen
    resolutions are specified it will fall back to the ten most popular ones
    according to w3counter.
    """
    setup_logging(settings.log_level)
    block_elevated(allow=settings.allow_root)

    try:
        all_tokens = merge_tokens(tokens or [], read_piped_tokens())
        if not all_tokens:
            _show_help(ctx)
            return
        jobs = parse_jobs(all_tokens, notify=typer.echo)
    except (PipedInputError, MalformedGroupingError, EmptyUrlError) as exc:
        typer.secho(str(exc), fg=typer.colors.YELLOW, err=True)
        _show_help(ctx)
        raise typer.Exit(code=EXIT_USAGE)

    try:
        runner = load_runner(settings.runner)()
    except RunnerConfigError as exc:
        typer.secho(f"❌ {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    options = RunOptions(delay=delay, crop=crop, dest=settings.dest_dir)

    try:
        stats = run_jobs(jobs, runner, options)
    except RunnerFailure as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(typer.style("\n✔", fg=typer.colors.GREEN) + " " + render_summary(stats))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
