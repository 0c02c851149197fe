"""Split the raw token stream into capture groups.

Groups are written with brackets, either as standalone tokens
(``[ yeoman.io 1366x768 ]``) or glued to the first/last token
(``[yeoman.io 1366x768]``).  Every token outside a bracket pair ends up in a
single implicit group that follows the explicit ones.
"""

from __future__ import annotations

from typing import Iterable, List

from pageres.args.models import TokenGroup
from pageres.errors import MalformedGroupingError
from pageres.log import get_logger

logger = get_logger(__name__)

OPEN = "["
CLOSE = "]"


def _split_brackets(token: str) -> List[str]:
    """Peel glued brackets off *token*: ``"[a.com"`` → ``["[", "a.com"]``."""
    parts: List[str] = []
    while token.startswith(OPEN) and token != OPEN:
        parts.append(OPEN)
        token = token[1:]
    trailing = 0
    while token.endswith(CLOSE) and token != CLOSE:
        trailing += 1
        token = token[:-1]
    if token:
        parts.append(token)
    parts.extend([CLOSE] * trailing)
    return parts


def group_tokens(tokens: Iterable[str]) -> List[TokenGroup]:
    """Return the ordered :class:`TokenGroup` list for *tokens*.

    Raises:
        MalformedGroupingError: On an unmatched or nested bracket.
    """
    explicit: List[TokenGroup] = []
    loose: List[str] = []
    current: TokenGroup | None = None

    for raw in tokens:
        for token in _split_brackets(raw):
            if token == OPEN:
                if current is not None:
                    raise MalformedGroupingError("Groups cannot be nested: unexpected '['")
                current = TokenGroup(explicit=True)
            elif token == CLOSE:
                if current is None:
                    raise MalformedGroupingError("Unexpected ']' without a matching '['")
                explicit.append(current)
                current = None
            elif current is not None:
                current.tokens.append(token)
            else:
                loose.append(token)

    if current is not None:
        raise MalformedGroupingError("Missing ']' to close the last group")

    groups = list(explicit)
    if loose:
        groups.append(TokenGroup(tokens=loose, explicit=False))

    logger.debug("Grouped tokens into %d explicit and %d implicit group(s)", len(explicit), int(bool(loose)))
    return groups
