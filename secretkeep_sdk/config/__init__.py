"""Configuration module for the SDK."""

from .constants import *  # noqa: F401,F403
from .models import BackoffPolicy
from .settings import load_retry_settings

__all__ = [
    "BackoffPolicy",
    "load_retry_settings",
]
