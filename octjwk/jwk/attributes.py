"""
JWK parameter names

Registered names from RFC 7517 section 4 (plus the symmetric 'k')
and the single canonicalization step applied to every incoming
attribute name.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Union

from ..exceptions import ArgumentShapeError


class KeyAttribute(str, Enum):
    """Registered JWK parameter names"""
    KTY = "kty"
    USE = "use"
    KEY_OPS = "key_ops"
    ALG = "alg"
    KID = "kid"
    X5U = "x5u"
    X5C = "x5c"
    X5T = "x5t"
    X5T_S256 = "x5t#S256"
    K = "k"                 # Symmetric key value (RFC 7518 section 6.4.1)


AttributeName = Union[KeyAttribute, str, bytes]

_REGISTERED = frozenset(member.value for member in KeyAttribute)


def canonical_name(name: AttributeName) -> str:
    """Return the canonical string form of an attribute name"""
    if isinstance(name, KeyAttribute):
        return name.value
    if isinstance(name, str):
        return name
    if isinstance(name, bytes):
        try:
            return name.decode('utf-8')
        except UnicodeDecodeError:
            raise ArgumentShapeError("Attribute name is not valid UTF-8", received="bytes")

    raise ArgumentShapeError(
        "Attribute name must be a string",
        received=type(name).__name__
    )


def canonicalize(attributes: Any) -> Dict[str, Any]:
    """Copy a mapping with every key in canonical form, preserving order"""
    if not isinstance(attributes, Mapping):
        raise ArgumentShapeError(
            "Attributes must be a mapping",
            received=type(attributes).__name__
        )
    return {canonical_name(name): value for name, value in attributes.items()}


def is_registered(name: AttributeName) -> bool:
    return canonical_name(name) in _REGISTERED
