"""orgkit - async retry with backoff, color and text utilities"""

from orgkit.domain.colors import (
    darken,
    get_contrast_ratio,
    hex_to_rgb,
    is_valid_hex,
    is_valid_rgb,
    lighten,
    random_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from orgkit.domain.config import RetryOptions, merge_retry_options
from orgkit.domain.models import HslColor, RgbColor, SettledResult, SettleStatus
from orgkit.domain.text import capitalize, slugify
from orgkit.infrastructure.combinators import retry_all, retry_all_settled, retry_race
from orgkit.infrastructure.retry import OperationTimeoutError, create_retry, retry, with_retry

__version__ = "0.1.0"

__all__ = [
    "retry",
    "create_retry",
    "with_retry",
    "retry_all",
    "retry_race",
    "retry_all_settled",
    "RetryOptions",
    "merge_retry_options",
    "OperationTimeoutError",
    "SettledResult",
    "SettleStatus",
    "RgbColor",
    "HslColor",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "darken",
    "lighten",
    "is_valid_hex",
    "is_valid_rgb",
    "get_contrast_ratio",
    "random_hex",
    "capitalize",
    "slugify",
]
