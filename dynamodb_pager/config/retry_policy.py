import os
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ErrorKind


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


class RetryPolicy(BaseModel):
    """Exponential backoff schedule applied to every single wire call.

    The n-th wait is ``initial_interval * multiplier ** (n - 1)``, capped at
    ``max_interval``, plus up to ``jitter_seconds`` of random delay. The
    schedule gives up once ``max_elapsed_seconds`` have passed since the
    first attempt, or after ``max_attempts`` attempts when that is set.
    """

    initial_interval: float = Field(
        default_factory=lambda: _env_float("DYNAMODB_BACKOFF_INITIAL_INTERVAL", 0.5),
        description="First wait in seconds"
    )

    multiplier: float = Field(
        default_factory=lambda: _env_float("DYNAMODB_BACKOFF_MULTIPLIER", 1.5),
        description="Growth factor between consecutive waits"
    )

    max_interval: float = Field(
        default_factory=lambda: _env_float("DYNAMODB_BACKOFF_MAX_INTERVAL", 60.0),
        description="Upper bound for a single wait in seconds"
    )

    max_elapsed_seconds: float = Field(
        default_factory=lambda: _env_float("DYNAMODB_BACKOFF_MAX_ELAPSED", 900.0),
        description="Give up once this much time has passed since the first attempt"
    )

    max_attempts: Optional[int] = Field(
        default_factory=lambda: _env_optional_int("DYNAMODB_BACKOFF_MAX_ATTEMPTS"),
        description="Optional cap on attempts per call"
    )

    jitter_seconds: float = Field(
        default=0.0,
        description="Maximum random delay added to each wait"
    )

    retriable_error_kinds: FrozenSet[ErrorKind] = Field(
        default=frozenset({ErrorKind.CAPACITY_EXHAUSTED}),
        description="Error kinds that trigger a retry; everything else fails on first occurrence"
    )

    @field_validator('initial_interval', 'max_interval', 'max_elapsed_seconds', 'jitter_seconds')
    @classmethod
    def validate_non_negative(cls, v):
        """Validate durations."""
        if v < 0:
            raise ValueError("Backoff durations cannot be negative")
        return v

    @field_validator('multiplier')
    @classmethod
    def validate_multiplier(cls, v):
        """Validate backoff growth factor."""
        if v < 1:
            raise ValueError("Backoff multiplier must be at least 1")
        return v

    @field_validator('max_attempts')
    @classmethod
    def validate_max_attempts(cls, v):
        """Validate attempt cap."""
        if v is not None and v < 1:
            raise ValueError("max_attempts must be at least 1")
        return v

    def is_retriable(self, kind: Optional[ErrorKind]) -> bool:
        return kind in self.retriable_error_kinds

    @classmethod
    def from_env(cls) -> 'RetryPolicy':
        """Create a retry policy from DYNAMODB_BACKOFF_* environment variables."""
        return cls()

    model_config = ConfigDict(frozen=True)
