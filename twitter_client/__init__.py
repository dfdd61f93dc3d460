"""Twitter REST API client using OAuth 1.0a request signing."""

from twitter_client.client import SEARCH_TWEETS_URL, STATUSES_UPDATE_URL, TWITTER_API_BASE, TwitterClient
from twitter_client.errors import (
    DecodeError,
    EncodingError,
    Failure,
    Success,
    TransportError,
    TwitterError,
    TwitterResult,
)


__all__ = [
    "SEARCH_TWEETS_URL",
    "STATUSES_UPDATE_URL",
    "TWITTER_API_BASE",
    "DecodeError",
    "EncodingError",
    "Failure",
    "Success",
    "TransportError",
    "TwitterClient",
    "TwitterError",
    "TwitterResult",
]
