"""Error taxonomy and result types for Twitter API calls.

Every call returns either :class:`Success` or :class:`Failure`. A failure
always holds exactly one of the three :class:`TwitterError` kinds below.
Signature problems are not errors at this level: the server answers them with
a 401-class status, which is visible on the :class:`Success` value.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Never


class TwitterError(Exception):
    """Base class for failures of a Twitter API call."""

    kind: ClassVar[str] = "unknown"


class EncodingError(TwitterError):
    """The request URL or a parameter could not be encoded for signing. Nothing was sent."""

    kind = "encoding"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Cannot sign request for {url!r}: {reason}")
        self.url = url
        self.reason = reason


class TransportError(TwitterError):
    """Connecting, sending or reading the response failed. Never retried."""

    kind = "transport"

    def __init__(self, method: str, url: str, reason: str) -> None:
        super().__init__(f"{method} {url} failed: {reason}")
        self.method = method
        self.url = url
        self.reason = reason


class DecodeError(TwitterError):
    """The response body was not valid JSON. The raw body is preserved."""

    kind = "decode"

    def __init__(self, body: bytes, status_code: int, reason: str) -> None:
        super().__init__(f"Could not decode JSON from server (HTTP {status_code}): {reason}")
        self.body = body
        self.status_code = status_code
        self.reason = reason


@dataclass(frozen=True)
class Success:
    """A decoded response. ``ok`` is False when the server rejected the request."""

    data: Any
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def unwrap(self) -> Any:
        return self.data


@dataclass(frozen=True)
class Failure:
    """A call that produced no usable response."""

    error: TwitterError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Never:
        raise self.error


TwitterResult = Success | Failure
