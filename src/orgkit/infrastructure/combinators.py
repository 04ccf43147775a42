"""Run several operations concurrently, each with its own retry session."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, List

from orgkit.domain.config.retry import RetryOptions, RetryOptionsLike, merge_retry_options
from orgkit.domain.models.settled import SettledResult
from orgkit.infrastructure.retry import Operation, retry

logger = logging.getLogger(__name__)


def _start_sessions(operations: Iterable[Operation], options: RetryOptions) -> List[asyncio.Task]:
    return [asyncio.ensure_future(retry(operation, options)) for operation in operations]


def _cancel_pending(tasks: List[asyncio.Task]) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()
        elif not task.cancelled():
            # Mark late failures as retrieved; the race has already been decided
            task.exception()


async def retry_all(
    operations: Iterable[Operation], options: RetryOptionsLike = None, **overrides: Any
) -> List[Any]:
    """Retry every operation; return all results in input order.

    The first session to exhaust its retries propagates its final failure and
    the remaining sessions are cancelled.
    """
    resolved = merge_retry_options(options, **overrides)
    tasks = _start_sessions(operations, resolved)
    if not tasks:
        return []

    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        _cancel_pending(tasks)
        raise


async def retry_race(operations: Iterable[Operation], options: RetryOptionsLike = None, **overrides: Any) -> Any:
    """Retry every operation; return the first successful result.

    A session that fails is ignored while others are still running. If every
    session fails, the failure of the first one to give up is raised. The
    remaining sessions are cancelled once the race is decided.

    Raises:
        ValueError: If no operations are given
    """
    resolved = merge_retry_options(options, **overrides)
    tasks = _start_sessions(operations, resolved)
    if not tasks:
        raise ValueError("retry_race() needs at least one operation")

    first_error: BaseException | None = None
    try:
        for next_settled in asyncio.as_completed(tasks):
            try:
                return await next_settled
            except Exception as e:
                logger.debug(f"Race contender gave up: {e!r}")
                if first_error is None:
                    first_error = e
        raise first_error
    finally:
        _cancel_pending(tasks)


async def _settle(operation: Operation, options: RetryOptions) -> SettledResult:
    try:
        return SettledResult.fulfilled(await retry(operation, options))
    except Exception as e:
        return SettledResult.rejected(e)


async def retry_all_settled(
    operations: Iterable[Operation], options: RetryOptionsLike = None, **overrides: Any
) -> List[SettledResult]:
    """Retry every operation; collect each outcome in input order.

    Never raises for operation failures: a session that exhausts its retries
    is reported as a rejected SettledResult carrying its final failure.
    """
    resolved = merge_retry_options(options, **overrides)
    results = await asyncio.gather(*(_settle(operation, resolved) for operation in operations))
    settled = list(results)
    rejected = sum(1 for result in settled if result.is_rejected)
    if rejected:
        logger.info(f"{rejected} of {len(settled)} operations failed after retries")
    return settled
