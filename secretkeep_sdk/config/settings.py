"""Environment-driven retry settings."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .constants import (
    INITIAL_INTERVAL_ENV_VAR,
    MAX_ELAPSED_TIME_ENV_VAR,
    MAX_INTERVAL_ENV_VAR,
    MULTIPLIER_ENV_VAR,
    RANDOMIZATION_FACTOR_ENV_VAR,
)
from .models import BackoffPolicy

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

_ENV_FIELDS = {
    "initial_interval": INITIAL_INTERVAL_ENV_VAR,
    "max_interval": MAX_INTERVAL_ENV_VAR,
    "max_elapsed_time": MAX_ELAPSED_TIME_ENV_VAR,
    "multiplier": MULTIPLIER_ENV_VAR,
    "randomization_factor": RANDOMIZATION_FACTOR_ENV_VAR,
}


def _read_float(env_var: str) -> Optional[float]:
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring {env_var}={raw!r}: not a number")
        return None


def load_retry_settings() -> BackoffPolicy:
    """
    Build the default BackoffPolicy, applying environment overrides.

    Each override is validated on its own; an invalid value is logged and
    the built-in default is kept for that field.

    Returns:
        BackoffPolicy with defaults from ``config.constants``
    """
    policy = BackoffPolicy()
    for field_name, env_var in _ENV_FIELDS.items():
        value = _read_float(env_var)
        if value is None:
            continue
        try:
            setattr(policy, field_name, value)
        except ValidationError as e:
            logger.warning(f"Ignoring {env_var}={value}: {e.errors()[0]['msg']}")
    return policy
