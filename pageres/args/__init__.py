"""Argument pipeline — group, classify and assemble capture jobs."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from pageres.args.aggregator import DEFAULT_SIZES_NOTICE, build_jobs
from pageres.args.classifier import classify_group, classify_groups, is_size, is_url
from pageres.args.grouper import group_tokens
from pageres.args.models import ClassifiedGroup, Job, TokenGroup
from pageres.args.stdin import merge_tokens, read_piped_tokens


def parse_jobs(
    tokens: Sequence[str],
    notify: Optional[Callable[[str], None]] = None,
) -> List[Job]:
    """Run the full pipeline on an already merged token list."""
    return build_jobs(classify_groups(group_tokens(tokens)), notify=notify)


__all__ = [
    "parse_jobs",
    "group_tokens",
    "classify_group",
    "classify_groups",
    "is_url",
    "is_size",
    "build_jobs",
    "read_piped_tokens",
    "merge_tokens",
    "DEFAULT_SIZES_NOTICE",
    "TokenGroup",
    "ClassifiedGroup",
    "Job",
]
