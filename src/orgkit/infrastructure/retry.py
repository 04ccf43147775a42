"""Async retry with exponential backoff, built on tenacity.

The engine runs one operation with a bounded number of retries. The preset
factory and the function wrapper in this module, and the combinators in
``orgkit.infrastructure.combinators``, all delegate to ``retry``.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, TypeVar, Union

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_base,
    stop_after_attempt,
    wait_exponential,
)

from orgkit.domain.config.retry import RetryOptions, RetryOptionsLike, merge_retry_options

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[int], Union[Awaitable[T], T]]

DEFAULT_TIMEOUT_MESSAGE = "Operation timed out"


class OperationTimeoutError(TimeoutError):
    """An attempt exceeded its time bound."""

    code = "TIMEOUT"

    def __init__(self, message: str = DEFAULT_TIMEOUT_MESSAGE):
        super().__init__(message)
        self.message = message


async def _sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


class retry_if_allowed(retry_base):
    """Retry an Exception while budget remains and should_retry agrees."""

    def __init__(self, options: RetryOptions) -> None:
        self.max_retries = options.max_retries
        self.should_retry = options.should_retry

    def __call__(self, retry_state: RetryCallState) -> bool:
        outcome = retry_state.outcome
        if outcome is None or not outcome.failed:
            return False
        exception = outcome.exception()
        # CancelledError, KeyboardInterrupt and friends propagate untouched
        if not isinstance(exception, Exception):
            return False
        attempt = retry_state.attempt_number - 1
        if attempt >= self.max_retries:
            return False
        if self.should_retry is None:
            return True
        return bool(self.should_retry(exception, attempt))


def _before_retry(options: RetryOptions) -> Callable[[RetryCallState], None]:
    """Build the before-sleep hook: log, then notify on_retry."""

    def _hook(retry_state: RetryCallState) -> None:
        if retry_state.outcome is None or retry_state.next_action is None:
            return
        exception = retry_state.outcome.exception()
        attempt = retry_state.attempt_number - 1
        delay = retry_state.next_action.sleep
        logger.debug(
            f"Attempt {attempt + 1}/{options.max_retries + 1} failed: {exception!r}. "
            f"Retrying in {delay:.3f}s"
        )
        if options.on_retry is None:
            return
        try:
            options.on_retry(exception, attempt, delay)
        except Exception as e:
            logger.warning(f"on_retry callback failed on attempt {attempt}: {e!r}", exc_info=True)

    return _hook


async def _run_attempt(operation: Operation, attempt: int, options: RetryOptions) -> Any:
    result = operation(attempt)
    if not inspect.isawaitable(result):
        return result
    if options.timeout is None:
        return await result

    # Own task, so a TimeoutError raised by the operation is not mistaken for expiry
    task = asyncio.ensure_future(result)
    try:
        done, _ = await asyncio.wait({task}, timeout=options.timeout)
    except BaseException:
        task.cancel()
        raise
    if task in done:
        return task.result()

    task.cancel()
    await asyncio.wait({task})
    if not task.cancelled():
        # Finished while being cancelled; its outcome is dropped for the timeout
        task.exception()
    raise OperationTimeoutError(options.timeout_message or DEFAULT_TIMEOUT_MESSAGE)


def _create_retrying(options: RetryOptions) -> AsyncRetrying:
    # Delay after attempt i: min(initial_delay * backoff_factor ^ i, max_delay)
    wait = wait_exponential(
        multiplier=options.initial_delay,
        exp_base=options.backoff_factor,
        max=options.max_delay,
    )
    return AsyncRetrying(
        sleep=_sleep,
        stop=stop_after_attempt(options.max_retries + 1),
        wait=wait,
        retry=retry_if_allowed(options),
        before_sleep=_before_retry(options),
        reraise=True,
    )


async def retry(operation: Operation, options: RetryOptionsLike = None, **overrides: Any) -> Any:
    """Run an operation, retrying failures with exponential backoff.

    The operation is called with the zero-based attempt index. The first
    attempt runs immediately; each failed attempt is followed by a delay
    unless the retry budget is spent or ``should_retry`` declines.

    Args:
        operation: Callable taking the attempt index, returning an awaitable
        options: Retry options (RetryOptions, mapping, or None for defaults)
        **overrides: Individual option fields, taking precedence over options

    Returns:
        The operation's first successful result

    Raises:
        Exception: The most recent failure, unwrapped, once retrying stops
        OperationTimeoutError: If the last attempt exceeded ``timeout``
    """
    resolved = merge_retry_options(options, **overrides)
    async for attempt in _create_retrying(resolved):
        with attempt:
            return await _run_attempt(operation, attempt.retry_state.attempt_number - 1, resolved)
    raise RuntimeError("Retry loop exited without a result")  # pragma: no cover


def create_retry(
    defaults: RetryOptionsLike = None, **default_overrides: Any
) -> Callable[..., Awaitable[Any]]:
    """Create a reusable retry function with preset options.

    Args:
        defaults: Preset options
        **default_overrides: Individual preset fields

    Returns:
        Async function ``(operation, overrides=None, **kwargs)`` whose options
        are the preset with per-call overrides applied field by field
    """
    preset = merge_retry_options(defaults, **default_overrides)

    async def bound_retry(operation: Operation, overrides: RetryOptionsLike = None, **kwargs: Any) -> Any:
        return await retry(operation, merge_retry_options(preset, overrides, **kwargs))

    bound_retry.options = preset  # type: ignore[attr-defined]
    return bound_retry


def with_retry(fn: Callable[..., Awaitable[T]] | None = None, options: RetryOptionsLike = None, **overrides: Any):
    """Wrap an async function so every call is retried on failure.

    Usable directly (``with_retry(fetch, max_retries=2)``) or as a decorator
    factory (``@with_retry(max_retries=2)``). Each call of the wrapped
    function is an independent retry session that re-invokes ``fn`` with the
    same arguments.
    """
    if fn is None:
        return functools.partial(with_retry, options=options, **overrides)

    resolved = merge_retry_options(options, **overrides)

    @functools.wraps(fn)
    async def wrapped(*args: Any, **kwargs: Any) -> T:
        return await retry(lambda _attempt: fn(*args, **kwargs), resolved)

    return wrapped
