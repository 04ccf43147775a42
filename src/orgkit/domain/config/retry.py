"""Retry configuration model."""

from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RetryOptions(BaseModel):
    """Configuration for a retry session.

    Delays are in seconds. Instances are immutable; derive new ones with
    ``merge_retry_options``.

    Attributes:
        max_retries: Number of retries after the initial attempt
        initial_delay: Delay before the first retry
        max_delay: Upper bound on any delay
        backoff_factor: Multiplier applied to the delay after each failure
        on_retry: Observer called as (error, attempt_index, next_delay)
        should_retry: Predicate called as (error, attempt_index)
        timeout: Optional time bound for each attempt
        timeout_message: Message used when an attempt times out
    """

    max_retries: int = Field(3, ge=0)
    initial_delay: float = Field(1.0, ge=0.0)
    max_delay: float = Field(30.0, ge=0.0)
    backoff_factor: float = Field(2.0, gt=0.0)
    on_retry: Optional[Callable[[Exception, int, float], Any]] = None
    should_retry: Optional[Callable[[Exception, int], bool]] = None
    timeout: Optional[float] = Field(None, gt=0.0)
    timeout_message: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    def delay_for(self, attempt: int) -> float:
        """Delay slept after a failed attempt with the given zero-based index."""
        try:
            delay = self.initial_delay * (self.backoff_factor ** attempt)
        except OverflowError:
            return self.max_delay
        return min(delay, self.max_delay)


RetryOptionsLike = Union[RetryOptions, Mapping[str, Any], None]


def _explicit_fields(layer: RetryOptionsLike) -> Dict[str, Any]:
    if layer is None:
        return {}
    if isinstance(layer, RetryOptions):
        return {name: getattr(layer, name) for name in layer.model_fields_set}
    return dict(layer)


def merge_retry_options(*layers: RetryOptionsLike, **overrides: Any) -> RetryOptions:
    """Merge option layers left to right into a new RetryOptions.

    Only explicitly set fields of each layer are copied, so a later layer
    replaces earlier values field by field and never resets them to defaults.
    Keyword overrides are applied last.

    Args:
        *layers: RetryOptions instances, mappings of field values, or None
        **overrides: Individual field values

    Returns:
        Resolved RetryOptions

    Raises:
        pydantic.ValidationError: If a merged value is invalid
    """
    data: Dict[str, Any] = {}
    for layer in layers:
        data.update(_explicit_fields(layer))
    data.update(overrides)
    return RetryOptions(**data)
