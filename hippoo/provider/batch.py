from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from result import Err, Ok, Result

from hippoo.models.errors import FetchError, FetchResult
from hippoo.models.package import PackageMetrics

logger = logging.getLogger(__name__)


def fetch_all(
    fetch: Callable[[str], FetchResult],
    names: Sequence[str],
    workers: int = 4,
) -> Result[list[PackageMetrics], FetchError]:
    """Fetch every package concurrently, all-or-nothing.

    ``Executor.map`` yields in submission order, so result *i* belongs to
    ``names[i]`` whatever order the requests finish in.  The first failure in
    input order fails the batch; successes are discarded.
    """
    if not names:
        return Ok([])

    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(names)))) as pool:
        results = list(pool.map(fetch, names))

    metrics: list[PackageMetrics] = []
    for result in results:
        if isinstance(result, Err):
            logger.debug("batch of %d failed on %s", len(names), result.err_value.package)
            return result
        metrics.append(result.ok_value)
    return Ok(metrics)
