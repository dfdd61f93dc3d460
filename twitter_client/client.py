"""Asynchronous Twitter REST API client signed with OAuth 1.0a.

Each call signs the request inline (no awaits during signing) and then hands
it to a single ``httpx.AsyncClient`` owned by the :class:`TwitterClient`.
Calls never raise for request failures; they return a :class:`Success` or a
:class:`Failure` carrying one of the errors from :mod:`twitter_client.errors`.
"""

from collections.abc import Iterable, Mapping
from types import TracebackType
from typing import Any, Self

import httpx
import structlog

from common.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, TwitterConfig
from signer import Credentials, InvalidURLError, OAuth1Signer, as_pairs, encode_pairs, split_url
from twitter_client.errors import DecodeError, EncodingError, Failure, Success, TransportError, TwitterResult


logger = structlog.get_logger(__name__)

TWITTER_API_BASE = "https://api.twitter.com/1.1"
SEARCH_TWEETS_URL = f"{TWITTER_API_BASE}/search/tweets.json"
STATUSES_UPDATE_URL = f"{TWITTER_API_BASE}/statuses/update.json"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

Params = Mapping[str, Any] | Iterable[tuple[str, Any]] | None


class TwitterClient:
    """Client for the Twitter REST API using user-context OAuth 1.0a credentials."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        access_token: str,
        access_token_secret: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        signer: OAuth1Signer | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            consumer_key: Application consumer key
            consumer_secret: Application consumer secret
            access_token: User access token
            access_token_secret: User access token secret
            http_client: Client to send requests with; it is not closed by ``aclose()``
            timeout: Request timeout in seconds for the client created here
            user_agent: User-Agent header sent with every request
            signer: Signer to use instead of one built from the credentials
        """
        self.signer = signer or OAuth1Signer(
            Credentials(
                consumer_key=consumer_key,
                consumer_secret=consumer_secret,
                access_token=access_token,
                access_token_secret=access_token_secret,
            )
        )
        self.user_agent = user_agent
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: TwitterConfig, **kwargs: Any) -> "TwitterClient":
        """Create a client from a :class:`TwitterConfig`."""
        kwargs.setdefault("timeout", config.timeout)
        kwargs.setdefault("user_agent", config.user_agent)
        return cls(
            config.consumer_key,
            config.consumer_secret,
            config.access_token,
            config.access_token_secret,
            **kwargs,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def get(self, url: str, params: Params = None) -> TwitterResult:
        """Send a signed GET request.

        Parameters already in the URL's query string are kept (first) and
        ``params`` are appended; all of them are signed.
        """
        try:
            base_url, query = split_url(url)
            all_params = query + as_pairs(params)
            query_string = encode_pairs(all_params)
            authorization = self.signer.authorization_header("GET", base_url, all_params)
        except InvalidURLError as e:
            return self._encoding_failure("GET", e.url, e.reason, e)
        except UnicodeEncodeError as e:
            return self._encoding_failure("GET", url, f"parameter has no UTF-8 form: {e.reason}", e)

        request_url = f"{base_url}?{query_string}" if query_string else base_url
        return await self._send("GET", request_url, {"Authorization": authorization})

    async def post(self, url: str, params: Params = None) -> TwitterResult:
        """Send a signed POST request with ``params`` as a form-encoded body."""
        body_params = as_pairs(params)
        try:
            authorization = self.signer.authorization_header("POST", url, body_params)
        except InvalidURLError as e:
            return self._encoding_failure("POST", e.url, e.reason, e)
        except UnicodeEncodeError as e:
            return self._encoding_failure("POST", url, f"parameter has no UTF-8 form: {e.reason}", e)

        headers = {
            "Authorization": authorization,
            "Content-Type": FORM_CONTENT_TYPE,
        }
        return await self._send("POST", url, headers, encode_pairs(body_params).encode("ascii"))

    async def search_tweets(self, query: str, **params: Any) -> TwitterResult:
        """Search recent tweets (GET search/tweets)."""
        return await self.get(SEARCH_TWEETS_URL, [("q", query), *params.items()])

    async def update_status(self, status: str, **params: Any) -> TwitterResult:
        """Post a tweet (POST statuses/update)."""
        return await self.post(STATUSES_UPDATE_URL, [("status", status), *params.items()])

    def _encoding_failure(self, method: str, url: str, reason: str, cause: Exception) -> Failure:
        logger.error("❌ Cannot encode request", method=method, url=url, reason=reason)
        failure = EncodingError(url, reason)
        failure.__cause__ = cause
        return Failure(failure)

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> TwitterResult:
        headers = {
            **headers,
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }
        logger.debug("🐦 Sending request", method=method, url=url)

        try:
            response = await self._http_client.request(method, url, headers=headers, content=body)
        except httpx.InvalidURL as e:
            return self._encoding_failure(method, url, str(e), e)
        except httpx.RequestError as e:
            logger.error("❌ Request to Twitter failed", method=method, url=url, error=str(e))
            transport_error = TransportError(method, url, str(e) or type(e).__name__)
            transport_error.__cause__ = e
            return Failure(transport_error)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("❌ Response is not valid JSON", method=method, url=url, status=response.status_code)
            decode_error = DecodeError(response.content, response.status_code, str(e))
            decode_error.__cause__ = e
            return Failure(decode_error)

        result = Success(data=data, status_code=response.status_code, headers=dict(response.headers))
        if not result.ok:
            logger.warning("⚠️ Twitter API error", method=method, url=url, status=response.status_code)
        return result
