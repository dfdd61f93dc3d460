"""Authorization header assembly (RFC 5849 section 3.5.1)."""

from collections.abc import Mapping

from signer.encoding import percent_encode


def build_oauth_header(params: Mapping[str, str]) -> str:
    """Build an OAuth Authorization header value from a dict of parameters.

    Parameters are sorted by name so the header is deterministic; every name
    and value is percent-encoded and values are double-quoted.
    """
    parts = [f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(params.items())]
    return "OAuth " + ", ".join(parts)
