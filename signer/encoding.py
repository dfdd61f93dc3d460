"""OAuth 1.0a percent-encoding (RFC 5849 section 3.6).

Only the RFC 3986 unreserved characters ``A-Z a-z 0-9 - . _ ~`` pass through
unchanged. Every other byte of the UTF-8 encoding becomes an uppercase ``%XX``
triplet, so a space is always ``%20`` and never ``+``.
"""

from collections.abc import Iterable
import urllib.parse


def percent_encode(value: str | bytes) -> str:
    """Percent-encode a string for OAuth signatures (RFC 3986).

    ``bytes`` are encoded octet by octet. A ``str`` holding lone surrogates has
    no UTF-8 form and raises ``UnicodeEncodeError``.
    """
    return urllib.parse.quote(value, safe="")


def encode_pairs(pairs: Iterable[tuple[str | bytes, str | bytes]]) -> str:
    """Serialize pairs as ``key=value&key=value`` using :func:`percent_encode`.

    Used for both query strings and ``application/x-www-form-urlencoded``
    request bodies so that what is sent matches what was signed.
    """
    return "&".join(f"{percent_encode(k)}={percent_encode(v)}" for k, v in pairs)
