"""Main application configuration model."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from orgkit.domain.config.retry import RetryOptions


class AppConfig(BaseModel):
    """Main application configuration.

    Root model for ``.orgkit.yml``. Validation is performed at load time to
    fail fast on configuration errors.

    Attributes:
        retry: Base retry options applied to every preset
        presets: Named partial retry options merged over ``retry``
    """

    retry: RetryOptions = Field(default_factory=RetryOptions)
    presets: Dict[str, RetryOptions] = Field(default_factory=dict)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "retry": {
                    "max_retries": 3,
                    "initial_delay": 1.0,
                    "max_delay": 30.0,
                    "backoff_factor": 2.0,
                },
                "presets": {
                    "fast": {"max_retries": 5, "initial_delay": 0.1, "max_delay": 2.0},
                    "patient": {"max_retries": 10, "timeout": 15.0},
                },
            }
        },
    )
