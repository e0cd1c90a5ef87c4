"""
Hashing utilities for octjwk
Digest primitive behind key fingerprints and thumbprints
"""

from cryptography.hazmat.primitives import hashes
import structlog

from ..constants import DigestDefaults
from ..exceptions import DigestError

logger = structlog.get_logger(__name__)


_ALGORITHMS = {
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
    'sha512': hashes.SHA512,
}


def digest_bytes(data: bytes, algorithm: str = DigestDefaults.ALGORITHM) -> bytes:
    """
    Compute a raw digest of data

    Args:
        data: Bytes to hash
        algorithm: Hash algorithm (sha256, sha384, sha512)

    Returns:
        Digest bytes

    Raises:
        DigestError: If the algorithm is unsupported or data is not bytes
    """
    if algorithm not in DigestDefaults.SUPPORTED_ALGORITHMS:
        raise DigestError(f"Unsupported hash algorithm: {algorithm}", algorithm=str(algorithm))

    if not isinstance(data, (bytes, bytearray)):
        raise DigestError(f"Cannot hash {type(data).__name__}, expected bytes", algorithm=algorithm)

    hasher = hashes.Hash(_ALGORITHMS[algorithm]())
    hasher.update(bytes(data))
    return hasher.finalize()


def secure_hash(data: bytes, algorithm: str = DigestDefaults.ALGORITHM) -> str:
    """Hex-encoded digest of data"""
    return digest_bytes(data, algorithm).hex()


def sha256_digest(data: bytes) -> bytes:
    """Raw SHA-256 digest, as required by RFC 7638 thumbprints"""
    return digest_bytes(data, DigestDefaults.THUMBPRINT_ALGORITHM)
