"""Decide what each token is: a url, a resolution or a preset keyword."""

from __future__ import annotations

import re
from typing import Iterable, List

from pageres.args.models import ClassifiedGroup, TokenGroup
from pageres.log import get_logger

logger = get_logger(__name__)

# Anything host- or file-like: ``todomvc.com``, ``localhost:9000``, ``unicorn.html``.
_URL_RE = re.compile(r"\.|localhost")
_SIZE_RE = re.compile(r"^\d{3,4}x\d{3,4}$", re.IGNORECASE)


def is_url(token: str) -> bool:
    """Return ``True`` if *token* looks like a host, URL or local file path."""
    return bool(_URL_RE.search(token))


def is_size(token: str) -> bool:
    """Return ``True`` if *token* is a ``WIDTHxHEIGHT`` resolution."""
    return bool(_SIZE_RE.match(token))


def _unique(items: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def classify_tokens(tokens: List[str]) -> ClassifiedGroup:
    """Partition *tokens* into urls, sizes and keywords.

    ``urls`` and ``sizes`` are deduplicated keeping the first occurrence.
    ``keywords`` keeps every remaining token in its original order.
    """
    urls = _unique(t for t in tokens if is_url(t))
    sizes = _unique(t for t in tokens if is_size(t))
    taken = set(urls) | set(sizes)
    keywords = [t for t in tokens if t not in taken]
    return ClassifiedGroup(urls=urls, sizes=sizes, keywords=keywords)


def classify_group(group: TokenGroup) -> ClassifiedGroup:
    """Classify the tokens of one :class:`TokenGroup`."""
    classified = classify_tokens(group.tokens)
    classified.source = group
    logger.debug(
        "Classified %d token(s): urls=%s sizes=%s keywords=%s",
        len(group.tokens),
        classified.urls,
        classified.sizes,
        classified.keywords,
    )
    return classified


def classify_groups(groups: Iterable[TokenGroup]) -> List[ClassifiedGroup]:
    return [classify_group(g) for g in groups]
