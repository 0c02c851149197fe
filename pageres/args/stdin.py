"""Supplementary tokens piped in on standard input.

``cat urls.txt | pageres 1366x768`` merges every line of ``urls.txt`` with the
command-line tokens.  The read is skipped entirely when stdin is an
interactive terminal.  It blocks until end-of-stream with no timeout, so a
pipe that never closes hangs the invocation.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from pageres.errors import PipedInputError
from pageres.log import get_logger

logger = get_logger(__name__)


def is_interactive(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def read_piped_tokens(stream: Optional[TextIO] = None) -> List[str]:
    """Return the non-blank lines piped into *stream* (``sys.stdin`` by default).

    Raises:
        PipedInputError: If the piped bytes are not UTF-8 text.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None or is_interactive(stream):
        logger.debug("stdin is a terminal; not reading piped input")
        return []

    # Strict UTF-8 regardless of the locale stdin was opened with.
    buffer = getattr(stream, "buffer", None)
    try:
        data = buffer.read() if buffer is not None else stream.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise PipedInputError(
            f"Piped input is not UTF-8 text (byte {exc.start}: {exc.reason})"
        ) from exc

    lines = [line.strip() for line in data.strip().splitlines()]
    tokens = [line for line in lines if line]
    logger.debug("Read %d token(s) from stdin", len(tokens))
    return tokens


def merge_tokens(argv_tokens: Sequence[str], piped_tokens: Sequence[str]) -> List[str]:
    """Command-line tokens first, then the piped ones."""
    return [*argv_tokens, *piped_tokens]
