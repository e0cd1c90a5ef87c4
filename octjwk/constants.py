"""
Constants for the octjwk package

Key type identifiers, key element groupings and
digest and key generation defaults.
"""

from typing import Final, Tuple

# =============================================================================
# KEY TYPES
# =============================================================================

class KeyTypes:
    """JWK 'kty' values (RFC 7518 section 6.1)"""
    OCT: Final[str] = "oct"
    RSA: Final[str] = "RSA"
    EC: Final[str] = "EC"
    OKP: Final[str] = "OKP"


# =============================================================================
# KEY ELEMENTS
# =============================================================================

class HMACKeyElements:
    """Cryptographic members of a symmetric key (RFC 7518 section 6.4)"""
    PUBLIC: Final[Tuple[str, ...]] = ("kty",)
    PRIVATE: Final[Tuple[str, ...]] = ("k",)

    # Protected against overwrite; also the members() view
    ALL: Final[Tuple[str, ...]] = PRIVATE + PUBLIC


# =============================================================================
# DIGEST CONFIGURATION
# =============================================================================

class DigestDefaults:
    """Fingerprint and thumbprint parameters"""
    ALGORITHM: Final[str] = "sha256"
    SUPPORTED_ALGORITHMS: Final[Tuple[str, ...]] = ("sha256", "sha384", "sha512")

    # RFC 7638 always uses SHA-256
    THUMBPRINT_ALGORITHM: Final[str] = "sha256"


class KeyGenerationDefaults:
    """Random secret generation parameters"""
    KEY_SIZE_BITS: Final[int] = 256
    MIN_KEY_SIZE_BITS: Final[int] = 128
    MAX_KEY_SIZE_BITS: Final[int] = 4096

