"""
octjwk
Symmetric (oct) JSON Web Keys: construction, validation, export and fingerprints
"""

__version__ = "0.1.0"

# Core exports
from .config import JWKSettings, get_settings, update_settings, configure_logging

# Keys
from .jwk import (
    KeyAttribute, KeyBase, SymmetricJWK,
    KidAsKeyDigest, KidAsThumbprint, import_jwk
)

# Errors
from .exceptions import (
    JWKError, ArgumentShapeError, ProtectedAttributeError,
    SchemaMismatchError, MissingKeyMaterialError,
    UnsupportedKeyTypeError, DigestError, ConfigurationError,
    ValidationError
)

__all__ = [
    # Config
    "JWKSettings",
    "get_settings",
    "update_settings",
    "configure_logging",

    # Keys
    "KeyAttribute",
    "KeyBase",
    "SymmetricJWK",
    "KidAsKeyDigest",
    "KidAsThumbprint",
    "import_jwk",

    # Errors
    "JWKError",
    "ArgumentShapeError",
    "ProtectedAttributeError",
    "SchemaMismatchError",
    "MissingKeyMaterialError",
    "UnsupportedKeyTypeError",
    "DigestError",
    "ConfigurationError",
    "ValidationError",
]
