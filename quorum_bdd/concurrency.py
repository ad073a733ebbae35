"""Scatter/gather over a bounded worker pool.

Used for the I/O-bound JSON-RPC calls of a batch: every call is submitted to
a ThreadPoolExecutor, then the caller blocks on a join barrier until all of
them have resolved.
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Callable, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_concurrently(
    calls: Sequence[Callable[[], T]],
    max_workers: int = 10,
    timeout: float | None = None,
) -> list[T]:
    """Run ``calls`` in parallel and return their results in submission order.

    The batch fails as a whole: the first exception raised by any call is
    re-raised once the pool has been shut down, and calls that have not
    started yet are cancelled. Calls already running are not interrupted.

    Args:
        calls: Zero-argument callables, one per unit of work.
        max_workers: Upper bound on calls running at the same time.
        timeout: Seconds to wait for the whole batch, or None to wait forever.

    Returns:
        One result per call, ``results[i]`` belonging to ``calls[i]``.

    Raises:
        TimeoutError: If the batch did not finish within ``timeout``.
    """
    if not calls:
        return []

    executor = ThreadPoolExecutor(
        max_workers=max(1, min(max_workers, len(calls))),
        thread_name_prefix="quorum-bdd",
    )
    futures: list[Future] = []
    try:
        futures = [executor.submit(call) for call in calls]
        done, pending = wait(futures, timeout=timeout, return_when=FIRST_EXCEPTION)

        failed = next(
            (f for f in futures if f in done and not f.cancelled() and f.exception()),
            None,
        )
        if failed is not None:
            logger.debug(
                "Batch of %d failed, cancelling %d pending calls", len(calls), len(pending)
            )
            raise failed.exception()
        if pending:
            raise TimeoutError(
                f"{len(pending)} of {len(calls)} calls did not finish within {timeout}s"
            )
        return [f.result() for f in futures]
    finally:
        # Drop queued work but never block on calls stuck in I/O
        executor.shutdown(wait=False, cancel_futures=True)
