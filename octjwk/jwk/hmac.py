"""
Symmetric (HMAC) JSON Web Key

A key of type "oct" (RFC 7518 section 6.4). The key value 'k' and
the type 'kty' are fixed at construction; all other parameters
(kid, use, alg, ...) are ordinary metadata.
"""

import json
import secrets
from collections.abc import Mapping
from typing import Any, Dict, Literal, Optional, Union

import structlog
from jwt.utils import base64url_encode
from pydantic import BaseModel, ConfigDict

from ..config import get_settings
from ..constants import DigestDefaults, HMACKeyElements, KeyTypes
from ..crypto.der import encode_sequence, encode_utf8_string
from ..crypto.hash import secure_hash, sha256_digest
from ..exceptions import (
    ArgumentShapeError,
    MissingKeyMaterialError,
    ProtectedAttributeError,
    SchemaMismatchError,
)
from ..utils.validators import validate_key_id, validate_key_size
from .attributes import canonicalize
from .base import KeyBase

logger = structlog.get_logger(__name__)

Secret = Union[str, bytes]


class OctKeyMaterial(BaseModel):
    """The protected members of a symmetric key"""
    model_config = ConfigDict(frozen=True, strict=True)

    kty: Literal["oct"]
    k: Secret


class SymmetricJWK(KeyBase):
    """
    Symmetric JWK holding an HMAC secret

    Args:
        keypair: The bare secret (str or bytes) or a JWK mapping with at
            least 'kty' and 'k'
        params: Extra JWK parameters; a str is taken as the 'kid'
        options: Options bag ('kid', 'kid_generator')

    Raises:
        ArgumentShapeError: keypair or params has an unsupported type
        ProtectedAttributeError: params try to set 'k' or 'kty'
        SchemaMismatchError: 'kty' is not "oct"
        MissingKeyMaterialError: 'k' is missing or empty
    """

    KTY = KeyTypes.OCT
    PROTECTED_ATTRIBUTES = HMACKeyElements.ALL

    def __init__(self, keypair: Union[Secret, Mapping], params: Union[None, str, Mapping] = None,
                 options: Optional[Mapping] = None):
        keypair = self._normalize_keypair(keypair)
        params = self._normalize_params(params)

        try:
            self._check_jwk(keypair, params)
        except (ProtectedAttributeError, SchemaMismatchError, MissingKeyMaterialError) as e:
            logger.warning("Rejected symmetric JWK", error=e.error_code)
            raise

        attributes = {**keypair, **params}
        self._material = OctKeyMaterial(kty=attributes.pop('kty'), k=attributes.pop('k'))

        super().__init__(options, attributes)

        logger.debug("Constructed symmetric JWK", kid=self.kid)

    # -- alternate constructors -----------------------------------------------

    @classmethod
    def from_secret(cls, secret: Secret, params: Union[None, str, Mapping] = None,
                    options: Optional[Mapping] = None) -> "SymmetricJWK":
        """Build a key from a bare secret"""
        if not isinstance(secret, (str, bytes)):
            raise ArgumentShapeError("secret must be str or bytes", received=type(secret).__name__)
        return cls(secret, params, options)

    @classmethod
    def from_mapping(cls, keypair: Mapping, params: Union[None, str, Mapping] = None,
                     options: Optional[Mapping] = None) -> "SymmetricJWK":
        """Build a key from a decoded JWK object"""
        if not isinstance(keypair, Mapping):
            raise ArgumentShapeError("keypair must be a mapping", received=type(keypair).__name__)
        return cls(keypair, params, options)

    @classmethod
    def import_jwk(cls, jwk_data: Mapping) -> "SymmetricJWK":
        """Entry point used by key-set loaders, one call per JWK object"""
        return cls(jwk_data)

    @classmethod
    def generate(cls, key_size: Optional[int] = None, params: Union[None, str, Mapping] = None,
                 options: Optional[Mapping] = None) -> "SymmetricJWK":
        """
        Create a key with a fresh random secret

        Args:
            key_size: Secret size in bits (default from settings)
            params: Extra JWK parameters
            options: Options bag

        Returns:
            New key whose 'k' is the base64url encoded secret
        """
        key_size = validate_key_size(key_size if key_size is not None else get_settings().generated_key_size)
        secret = base64url_encode(secrets.token_bytes(key_size // 8)).decode('ascii')

        logger.info("Generated symmetric JWK secret", key_size=key_size)
        return cls(secret, params, options)

    # -- accessors ------------------------------------------------------------

    def key_material(self) -> Secret:
        """The secret 'k', verbatim"""
        return self._material.k

    # for backwards compatibility
    signing_key = key_material
    keypair = key_material

    def is_private(self) -> bool:
        return True

    def public_key(self) -> None:
        return None

    def _key_parameters(self) -> Dict[str, Any]:
        return {'kty': self._material.kty, 'k': self._material.k}

    # -- export ---------------------------------------------------------------

    def export(self, include_private: bool = False) -> Dict[str, Any]:
        """
        Export the key as a JWK mapping (RFC 7517 appendix A.3)

        Args:
            include_private: Include the secret 'k'

        Returns:
            New dict; 'k' is left out unless include_private is True
        """
        exported = self.parameters()
        if not (self.is_private() and include_private is True):
            for name in HMACKeyElements.PRIVATE:
                exported.pop(name, None)
        return exported

    def members(self) -> Dict[str, Any]:
        """Exactly the key elements 'k' and 'kty'"""
        return {name: self[name] for name in HMACKeyElements.ALL}

    # -- fingerprints ---------------------------------------------------------

    def key_digest(self) -> str:
        """
        Stable fingerprint of the key value

        Hex digest of DER SEQUENCE { UTF8String(k), UTF8String("oct") }.
        Always SHA-256; depends only on the secret, never on metadata
or settings.
        """
        sequence = encode_sequence(encode_utf8_string(self.signing_key()),
                                   encode_utf8_string(self.KTY))
        return secure_hash(sequence, DigestDefaults.ALGORITHM)

    def thumbprint(self) -> str:
        """RFC 7638 JWK thumbprint (SHA-256, base64url without padding)"""
        required = {}
        for name, value in self.members().items():
            if isinstance(value, bytes):
                value = base64url_encode(value).decode('ascii')
            required[name] = value

        canonical = json.dumps(required, sort_keys=True, separators=(',', ':'), ensure_ascii=False)
        return base64url_encode(sha256_digest(canonical.encode('utf-8'))).decode('ascii')

    # -- construction helpers -------------------------------------------------

    def _normalize_keypair(self, keypair: Any) -> Dict[str, Any]:
        if isinstance(keypair, (str, bytes)):
            return {'kty': self.KTY, 'k': keypair}
        if isinstance(keypair, Mapping):
            return canonicalize(keypair)

        raise ArgumentShapeError(
            "keypair must be a mapping or a str/bytes secret",
            received=type(keypair).__name__
        )

    def _normalize_params(self, params: Any) -> Dict[str, Any]:
        if params is None:
            return {}
        # kid used to be passed as a plain string
        if isinstance(params, str):
            return {'kid': validate_key_id(params)}
        if isinstance(params, Mapping):
            return canonicalize(params)

        raise ArgumentShapeError(
            "params must be a mapping or a kid string",
            received=type(params).__name__
        )

    def _check_jwk(self, keypair: Dict[str, Any], params: Dict[str, Any]) -> None:
        protected = [name for name in HMACKeyElements.ALL if name in params]
        if protected:
            raise ProtectedAttributeError(protected)

        if keypair.get('kty') != self.KTY:
            raise SchemaMismatchError(keypair.get('kty'), self.KTY)

        k = keypair.get('k')
        if k is None or (isinstance(k, (str, bytes)) and len(k) == 0):
            raise MissingKeyMaterialError()
        if not isinstance(k, (str, bytes)):
            raise MissingKeyMaterialError("Key format is invalid for HMAC: 'k' must be str or bytes")
