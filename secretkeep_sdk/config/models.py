from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    DEFAULT_INITIAL_INTERVAL,
    DEFAULT_MAX_ELAPSED_TIME,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MULTIPLIER,
    DEFAULT_RANDOMIZATION_FACTOR,
)


class BackoffPolicy(BaseModel):
    """
    Exponential backoff configuration.

    Successive intervals grow by ``multiplier`` up to ``max_interval``, each
    one jittered by ``randomization_factor``. A sequence stops once the next
    wait would push the elapsed time past ``max_elapsed_time``.
    """
    model_config = ConfigDict(validate_assignment=True)

    initial_interval: float = Field(
        default=DEFAULT_INITIAL_INTERVAL, gt=0, description="Delay before the first retry (seconds)"
    )
    max_interval: float = Field(
        default=DEFAULT_MAX_INTERVAL, gt=0, description="Ceiling on any single delay (seconds)"
    )
    max_elapsed_time: float = Field(
        default=DEFAULT_MAX_ELAPSED_TIME, ge=0, description="Ceiling on total retry time, 0 = unbounded"
    )
    multiplier: float = Field(
        default=DEFAULT_MULTIPLIER, ge=1.0, description="Growth factor per successive delay"
    )
    randomization_factor: float = Field(
        default=DEFAULT_RANDOMIZATION_FACTOR, ge=0.0, le=1.0, description="Jitter fraction, 0 = deterministic"
    )

    @property
    def unbounded(self) -> bool:
        return self.max_elapsed_time == 0
