"""Signature base string, signing key and signature methods (RFC 5849 section 3.4)."""

from abc import ABC, abstractmethod
from base64 import b64encode
import hashlib
import hmac
from typing import ClassVar

from signer.encoding import percent_encode
from signer.params import split_url


def build_signature_base_string(method: str, url: str, normalized_params: str) -> str:
    """Assemble ``METHOD&encoded-base-url&encoded-params``.

    The URL is reduced to its base string URI; any query it carries is dropped
    here, so query parameters must already be part of ``normalized_params``.

    Raises:
        InvalidURLError: if the URL is malformed
    """
    base_url, _ = split_url(url)
    return "&".join(
        [
            method.upper(),
            percent_encode(base_url),
            percent_encode(normalized_params),
        ]
    )


def build_signing_key(consumer_secret: str, token_secret: str | None = None) -> bytes:
    """Build the HMAC key ``encoded(consumer_secret)&encoded(token_secret)``.

    The ``&`` separator is kept even when there is no token secret.
    """
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}".encode("ascii")


class SignatureMethod(ABC):
    """Strategy that turns a signing key and base string into ``oauth_signature``."""

    name: ClassVar[str]

    @abstractmethod
    def sign(self, base_string: str, key: bytes) -> str:
        """Return the signature for ``base_string``, not yet percent-encoded."""


class HmacSha1SignatureMethod(SignatureMethod):
    """HMAC-SHA1 signatures, base64-encoded with padding."""

    name = "HMAC-SHA1"

    def sign(self, base_string: str, key: bytes) -> str:
        digest = hmac.new(key, base_string.encode("ascii"), hashlib.sha1).digest()
        return b64encode(digest).decode("ascii")


SIGNATURE_METHODS: dict[str, type[SignatureMethod]] = {
    HmacSha1SignatureMethod.name: HmacSha1SignatureMethod,
}


def get_signature_method(name: str) -> SignatureMethod:
    """Look up a signature method by its ``oauth_signature_method`` name."""
    try:
        return SIGNATURE_METHODS[name.upper()]()
    except KeyError:
        raise ValueError(f"Unsupported signature method: {name}") from None
