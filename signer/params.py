"""Request parameter handling and normalization (RFC 5849 section 3.4.1.3)."""

from collections.abc import Iterable, Mapping
from typing import Any
import urllib.parse

import httpx

from signer.encoding import percent_encode


Value = str | bytes
Param = tuple[Value, Value]

DEFAULT_PORTS = {"http": 80, "https": 443}


class InvalidURLError(ValueError):
    """Raised when a request URL cannot be used as a signature base URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


def _to_value(value: Any) -> Value:
    # bytes pass through untouched so arbitrary octets can be percent-encoded
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, bytes)):
        return value
    return str(value)


def as_pairs(params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None) -> list[Param]:
    """Flatten request parameters into an ordered list of ``(name, value)`` pairs.

    Accepts ``None``, a mapping or an iterable of pairs. Mapping values that are
    sequences (other than strings) are unpacked into one pair per element, since
    OAuth allows repeated parameter names and sorts them by value. ``bytes``
    names and values are kept as bytes.
    """
    if params is None:
        return []

    items = params.items() if isinstance(params, Mapping) else params
    pairs: list[Param] = []
    for name, value in items:
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((_to_value(name), _to_value(v)) for v in value)
        else:
            pairs.append((_to_value(name), _to_value(value)))
    return pairs


def split_url(url: str) -> tuple[str, list[Param]]:
    """Split a request URL into its base string URI and decoded query parameters.

    The base URL is taken from the form httpx puts on the wire: the path is
    percent-encoded and an internationalized host is IDNA-encoded, so the
    server rebuilds the same base string from the request it receives.

    Args:
        url: Absolute http(s) URL, possibly with a query string and fragment

    Returns:
        Tuple of (base URL, query parameters). The base URL has a lower-cased
        scheme and host, no default port, no user-info, no query and no fragment.

    Raises:
        InvalidURLError: if the URL is unparseable, not http(s), has no host,
            or its query string does not decode as UTF-8
    """
    if any(c.isspace() for c in url):
        raise InvalidURLError(url, "contains whitespace")

    try:
        parts = urllib.parse.urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e

    if parts.scheme.lower() not in DEFAULT_PORTS:
        raise InvalidURLError(url, "scheme must be http or https")
    if not parts.hostname:
        raise InvalidURLError(url, "missing host")

    try:
        wire_url = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidURLError(url, str(e)) from e

    scheme = wire_url.raw_scheme.decode("ascii")
    host = wire_url.raw_host.decode("ascii").lower()
    if ":" in host:
        host = f"[{host}]"
    if wire_url.port is not None:
        host = f"{host}:{wire_url.port}"

    path = wire_url.raw_path.decode("ascii").partition("?")[0]
    base_url = f"{scheme}://{host}{path or '/'}"

    try:
        query = urllib.parse.parse_qsl(parts.query, keep_blank_values=True, errors="strict")
    except UnicodeDecodeError as e:
        raise InvalidURLError(url, f"query string is not valid UTF-8: {e.reason}") from e
    return base_url, query


def normalize_parameters(
    oauth_params: Mapping[str, str],
    request_params: Iterable[Param] = (),
) -> str:
    """Build the normalized parameter string that goes into the signature base string.

    Every name and value is percent-encoded, the pairs are sorted by encoded
    name and then by encoded value, and joined as ``name=value`` with ``&``.
    Repeated names stay separate entries. ``oauth_signature`` is never part of
    the signed set.
    """
    encoded = [(percent_encode(k), percent_encode(v)) for k, v in oauth_params.items() if k != "oauth_signature"]
    encoded.extend((percent_encode(k), percent_encode(v)) for k, v in request_params)
    encoded.sort()
    return "&".join(f"{k}={v}" for k, v in encoded)
