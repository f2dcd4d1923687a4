"""
Retry defaults and configuration variable names.

Durations are in seconds. Every default can be overridden through the
environment variable listed next to it (see ``config.settings``).
"""

# Initial wait between retries
DEFAULT_INITIAL_INTERVAL = 0.5
# Ceiling on any single wait
DEFAULT_MAX_INTERVAL = 3.0
# Ceiling on the cumulative retry time (0 disables it)
DEFAULT_MAX_ELAPSED_TIME = 30.0
# Growth factor between successive waits
DEFAULT_MULTIPLIER = 2.0
# Jitter applied to each wait (0 is deterministic)
DEFAULT_RANDOMIZATION_FACTOR = 0.5

INITIAL_INTERVAL_ENV_VAR = "SECRETKEEP_RETRY_INITIAL_INTERVAL"
MAX_INTERVAL_ENV_VAR = "SECRETKEEP_RETRY_MAX_INTERVAL"
MAX_ELAPSED_TIME_ENV_VAR = "SECRETKEEP_RETRY_MAX_ELAPSED_TIME"
MULTIPLIER_ENV_VAR = "SECRETKEEP_RETRY_MULTIPLIER"
RANDOMIZATION_FACTOR_ENV_VAR = "SECRETKEEP_RETRY_RANDOMIZATION_FACTOR"
