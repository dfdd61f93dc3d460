"""Common utilities and configuration for the Twitter client."""

from common.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, TwitterConfig, get_secret, setup_logging


__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "TwitterConfig",
    "get_secret",
    "setup_logging",
]
