"""Shared pytest fixtures and configuration."""

from collections.abc import Callable

import httpx
import pytest
import structlog

from signer import Credentials, OAuth1Signer
from twitter_client import TwitterClient


# Published example from Twitter's "Creating a signature" documentation
TWITTER_DOC_CREDENTIALS = Credentials(
    consumer_key="xvz1evFS4wEEPTGEFPHBog",
    consumer_secret="kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",  # noqa: S106
    access_token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",  # noqa: S106
    access_token_secret="LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",  # noqa: S106
)
TWITTER_DOC_NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"
TWITTER_DOC_TIMESTAMP = "1318622958"
TWITTER_DOC_STATUS = "Hello Ladies + Gentlemen, a signed OAuth request!"
TWITTER_DOC_SIGNATURE = "hCtSmYh+iHYCEqBWrE7C7hYmtUk="


@pytest.fixture(scope="session", autouse=True)
def _structlog_to_stdlib() -> None:
    """Send structlog output through stdlib logging so it never lands on stdout."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def credentials() -> Credentials:
    """Credentials from Twitter's signing documentation."""
    return TWITTER_DOC_CREDENTIALS


@pytest.fixture
def fixed_signer(credentials: Credentials) -> OAuth1Signer:
    """Signer with a pinned nonce and timestamp so signatures are reproducible."""
    return OAuth1Signer(
        credentials,
        nonce_factory=lambda: TWITTER_DOC_NONCE,
        timestamp_factory=lambda: TWITTER_DOC_TIMESTAMP,
    )


@pytest.fixture
def captured_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(fixed_signer: OAuth1Signer, captured_requests: list[httpx.Request]) -> Callable[..., TwitterClient]:
    """Build a TwitterClient whose HTTP traffic goes to ``handler`` instead of the network."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> TwitterClient:
        def _record(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return TwitterClient(
            "ck",
            "cs",
            "at",
            "ats",
            http_client=http_client,
            signer=fixed_signer,
            user_agent="TestAgent/1.0",
        )

    return _make
