"""
Cryptographic helpers for octjwk
Canonical DER encoding and digest primitives
"""

from .der import encode_length, encode_utf8_string, encode_sequence
from .hash import digest_bytes, secure_hash, sha256_digest

__all__ = [
    "encode_length",
    "encode_utf8_string",
    "encode_sequence",
    "digest_bytes",
    "secure_hash",
    "sha256_digest",
]
