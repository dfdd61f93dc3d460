"""OAuth 1.0a request signing."""

from signer.encoding import encode_pairs, percent_encode
from signer.header import build_oauth_header
from signer.oauth import Credentials, OAuth1Signer, generate_nonce, generate_timestamp
from signer.params import InvalidURLError, as_pairs, normalize_parameters, split_url
from signer.signature import (
    HmacSha1SignatureMethod,
    SignatureMethod,
    build_signature_base_string,
    build_signing_key,
    get_signature_method,
)


__all__ = [
    "Credentials",
    "HmacSha1SignatureMethod",
    "InvalidURLError",
    "OAuth1Signer",
    "SignatureMethod",
    "as_pairs",
    "build_oauth_header",
    "build_signature_base_string",
    "build_signing_key",
    "encode_pairs",
    "generate_nonce",
    "generate_timestamp",
    "get_signature_method",
    "normalize_parameters",
    "percent_encode",
    "split_url",
]
