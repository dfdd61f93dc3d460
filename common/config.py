"""Configuration management for the Twitter client."""

from dataclasses import dataclass, field
import logging
from os import getenv
from pathlib import Path

import structlog


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "twitter-client/0.1.0"
DEFAULT_TIMEOUT = 30.0


def get_secret(name: str, default: str | None = None) -> str | None:
    """Read a secret from ``<NAME>_FILE`` (Docker secrets) or the ``<NAME>`` environment variable.

    Args:
        name: Environment variable name
        default: Value returned when neither variable is set

    Returns:
        The secret with surrounding whitespace stripped, or ``default``

    Raises:
        ValueError: if ``<NAME>_FILE`` is set but the file cannot be read
    """
    file_path = getenv(f"{name}_FILE")
    if file_path:
        try:
            return Path(file_path).read_text().strip()
        except OSError as e:
            raise ValueError(f"Cannot read secret file for {name}: {e}") from e

    value = getenv(name)
    if value is not None:
        return value
    return default


@dataclass(frozen=True)
class TwitterConfig:
    """Configuration for the Twitter API client."""

    consumer_key: str
    consumer_secret: str = field(repr=False)
    access_token: str
    access_token_secret: str = field(repr=False)
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "TwitterConfig":
        """Create configuration from environment variables."""
        consumer_key = get_secret("TWITTER_CONSUMER_KEY")
        consumer_secret = get_secret("TWITTER_CONSUMER_SECRET")
        access_token = get_secret("TWITTER_ACCESS_TOKEN")
        access_token_secret = get_secret("TWITTER_ACCESS_TOKEN_SECRET")

        missing_vars = []
        if not consumer_key:
            missing_vars.append("TWITTER_CONSUMER_KEY")
        if not consumer_secret:
            missing_vars.append("TWITTER_CONSUMER_SECRET")
        if not access_token:
            missing_vars.append("TWITTER_ACCESS_TOKEN")
        if not access_token_secret:
            missing_vars.append("TWITTER_ACCESS_TOKEN_SECRET")

        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

        timeout = DEFAULT_TIMEOUT
        timeout_env = getenv("TWITTER_TIMEOUT")
        if timeout_env:
            try:
                timeout = float(timeout_env)
                if timeout <= 0:
                    logger.warning(f"⚠️ Invalid TWITTER_TIMEOUT value: {timeout_env}. Using default of {DEFAULT_TIMEOUT}s.")
                    timeout = DEFAULT_TIMEOUT
            except ValueError:
                logger.warning(f"⚠️ Invalid TWITTER_TIMEOUT value: {timeout_env}. Using default of {DEFAULT_TIMEOUT}s.")
                timeout = DEFAULT_TIMEOUT

        return cls(
            consumer_key=consumer_key,  # type: ignore
            consumer_secret=consumer_secret,  # type: ignore
            access_token=access_token,  # type: ignore
            access_token_secret=access_token_secret,  # type: ignore
            user_agent=getenv("TWITTER_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=timeout,
            log_level=getenv("LOG_LEVEL", "INFO"),
        )


def setup_logging(
    service_name: str,
    level: str = "INFO",
    log_file: Path | None = None,
) -> None:
    """Send stdlib and structlog records to stderr and, when given, a UTF-8 log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=f"%(asctime)s - {service_name} - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )

    # Route structlog through the stdlib handlers configured above
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    # Suppress verbose HTTP client logs, they would print request URLs at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info(f"✅ Logging configured for {service_name}")
