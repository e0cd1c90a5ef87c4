"""
JSON Web Key classes for octjwk
Key construction, validation, export and fingerprinting
"""

from collections.abc import Mapping
from typing import Dict, Optional, Type

import structlog

from ..constants import KeyTypes
from ..exceptions import ArgumentShapeError, UnsupportedKeyTypeError
from .attributes import KeyAttribute, canonical_name, canonicalize, is_registered
from .base import KeyBase
from .hmac import OctKeyMaterial, SymmetricJWK
from .kid import KidAsKeyDigest, KidAsThumbprint, resolve_kid_generator

logger = structlog.get_logger(__name__)

# Key class per 'kty'
KEY_CLASSES: Dict[str, Type[KeyBase]] = {
    KeyTypes.OCT: SymmetricJWK,
}


def import_jwk(jwk_data: Mapping, options: Optional[Mapping] = None) -> KeyBase:
    """
    Build a key object from a decoded JWK

    Args:
        jwk_data: JWK object as a mapping
        options: Options bag passed to the key class

    Returns:
        Key instance of the class registered for its 'kty'

    Raises:
        ArgumentShapeError: If jwk_data is not a mapping
        UnsupportedKeyTypeError: If 'kty' is missing or unknown
    """
    if not isinstance(jwk_data, Mapping):
        raise ArgumentShapeError("JWK data must be a mapping", received=type(jwk_data).__name__)

    jwk_data = canonicalize(jwk_data)
    kty = jwk_data.get('kty')

    if not kty:
        raise UnsupportedKeyTypeError("Key type (kty) not provided")
    if not isinstance(kty, str):
        raise UnsupportedKeyTypeError(f"Key type must be a string, got {type(kty).__name__}")

    key_class = KEY_CLASSES.get(kty)
    if key_class is None:
        logger.warning("Unsupported JWK key type", kty=kty)
        raise UnsupportedKeyTypeError(
            f"Key type {kty} not supported",
            kty=kty,
            supported=list(KEY_CLASSES)
        )

    return key_class(jwk_data, options=options)


__all__ = [
    "KeyAttribute",
    "canonical_name",
    "canonicalize",
    "is_registered",
    "KeyBase",
    "OctKeyMaterial",
    "SymmetricJWK",
    "KidAsKeyDigest",
    "KidAsThumbprint",
    "resolve_kid_generator",
    "KEY_CLASSES",
    "import_jwk",
]
