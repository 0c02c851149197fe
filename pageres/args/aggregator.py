"""Turn classified groups into the job list handed to the runner."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from pageres.args.models import ClassifiedGroup, Job, TokenGroup
from pageres.errors import EmptyUrlError
from pageres.log import get_logger

logger = get_logger(__name__)

DEFAULT_SIZES_NOTICE = (
    "No sizes specified. Falling back to the ten most popular screen "
    "resolutions according to w3counter."
)


def build_jobs(
    groups: Iterable[ClassifiedGroup],
    notify: Optional[Callable[[str], None]] = None,
) -> List[Job]:
    """Expand *groups* into one :class:`Job` per url.

    Every group is validated before anything is returned, so a single group
    without a url fails the whole invocation.  Keywords are appended to the
    sizes untouched; the runner resolves them against its own presets.

    Args:
        groups: Output of the classifier, in group order.
        notify: Called with :data:`DEFAULT_SIZES_NOTICE` for each group that
            names no size at all.

    Raises:
        EmptyUrlError: If a group has no url.
    """
    jobs: List[Job] = []
    for group in groups:
        if not group.urls:
            raise EmptyUrlError(group.source or TokenGroup(tokens=group.sizes + group.keywords))

        if not group.has_sizes:
            logger.info("Group %s has no sizes; using the runner defaults", group.urls)
            if notify is not None:
                notify(DEFAULT_SIZES_NOTICE)

        sizes = group.sizes + group.keywords
        for url in group.urls:
            jobs.append(Job(url=url, sizes=list(sizes)))

    logger.debug("Built %d job(s)", len(jobs))
    return jobs
