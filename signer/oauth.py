"""OAuth 1.0a request signing.

Ties the pipeline together: protocol parameters are generated fresh for every
request, merged with the request's own parameters (including any query string
on the URL), normalized, turned into a signature base string and signed with a
key derived from the consumer and token secrets. Nothing derived here outlives
a single call, so one signer can be shared freely between tasks and threads.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
import os
import time
from typing import Any

import structlog

from signer.header import build_oauth_header
from signer.params import as_pairs, normalize_parameters, split_url
from signer.signature import (
    HmacSha1SignatureMethod,
    SignatureMethod,
    build_signature_base_string,
    build_signing_key,
)


logger = structlog.get_logger(__name__)

OAUTH_VERSION = "1.0"


@dataclass(frozen=True)
class Credentials:
    """Long-lived OAuth credentials. The token pair is optional (two-legged flow)."""

    consumer_key: str
    consumer_secret: str = field(repr=False)
    access_token: str | None = None
    access_token_secret: str | None = field(default=None, repr=False)


def generate_nonce() -> str:
    """Return a fresh random nonce (16 bytes from the OS CSPRNG, hex-encoded)."""
    return os.urandom(16).hex()


def generate_timestamp() -> str:
    """Return the current Unix time in whole seconds."""
    return str(int(time.time()))


class OAuth1Signer:
    """Signs requests with a fixed set of credentials."""

    def __init__(
        self,
        credentials: Credentials,
        signature_method: SignatureMethod | None = None,
        nonce_factory: Callable[[], str] = generate_nonce,
        timestamp_factory: Callable[[], str] = generate_timestamp,
    ) -> None:
        self.credentials = credentials
        self.signature_method = signature_method or HmacSha1SignatureMethod()
        self._nonce_factory = nonce_factory
        self._timestamp_factory = timestamp_factory

    def protocol_parameters(self) -> dict[str, str]:
        """Return the unsigned ``oauth_*`` parameters for a new request."""
        params = {
            "oauth_consumer_key": self.credentials.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": self.signature_method.name,
            "oauth_timestamp": self._timestamp_factory(),
            "oauth_version": OAUTH_VERSION,
        }
        if self.credentials.access_token:
            params["oauth_token"] = self.credentials.access_token
        return params

    def sign(
        self,
        method: str,
        url: str,
        params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> dict[str, str]:
        """Compute the OAuth parameters, including ``oauth_signature``, for a request.

        Args:
            method: HTTP method
            url: Request URL; parameters in its query string are signed too
            params: Additional request parameters (query or form body)

        Returns:
            The protocol parameters with ``oauth_signature`` added

        Raises:
            InvalidURLError: if the URL is malformed
        """
        base_url, query_params = split_url(url)
        request_params = query_params + as_pairs(params)

        oauth_params = self.protocol_parameters()
        normalized = normalize_parameters(oauth_params, request_params)
        base_string = build_signature_base_string(method, base_url, normalized)
        key = build_signing_key(self.credentials.consumer_secret, self.credentials.access_token_secret)

        oauth_params["oauth_signature"] = self.signature_method.sign(base_string, key)
        logger.debug("🔏 Request signed", method=method.upper(), base_url=base_url, param_count=len(request_params))
        return oauth_params

    def authorization_header(
        self,
        method: str,
        url: str,
        params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> str:
        """Return the ``Authorization`` header value for a request."""
        return build_oauth_header(self.sign(method, url, params))
