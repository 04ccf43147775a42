"""Configuration models with Pydantic validation."""

from orgkit.domain.config.app import AppConfig
from orgkit.domain.config.retry import RetryOptions, RetryOptionsLike, merge_retry_options

__all__ = [
    "AppConfig",
    "RetryOptions",
    "RetryOptionsLike",
    "merge_retry_options",
]
