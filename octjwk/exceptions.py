"""
Custom Exceptions for the octjwk package

Provides a unified exception hierarchy for key construction,
attribute protection, fingerprinting and configuration.
"""

from typing import Optional, Dict, Any, List


class JWKError(Exception):
    """
    Base exception for all JWK errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional context about the error (never key material)
    """

    def __init__(
        self,
        message: str,
        error_code: str = "JWK_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        result: Dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# CONSTRUCTION ERRORS
# =============================================================================

class ArgumentShapeError(JWKError):
    """Raised when a keypair, params map or attribute name has an unsupported type"""

    def __init__(
        self,
        message: str,
        received: Optional[str] = None
    ):
        details: Dict[str, Any] = {}
        if received:
            details["received"] = received
        super().__init__(message, "ARGUMENT_SHAPE", details)


class ProtectedAttributeError(JWKError):
    """Raised on any attempt to set 'k' or 'kty' outside of construction"""

    def __init__(
        self,
        attributes: Optional[List[str]] = None
    ):
        details: Dict[str, Any] = {}
        if attributes:
            details["attributes"] = attributes
        super().__init__(
            message="cannot overwrite cryptographic key attributes",
            error_code="PROTECTED_ATTRIBUTE",
            details=details
        )


class SchemaMismatchError(JWKError):
    """Raised when the 'kty' value does not match the key class"""

    def __init__(
        self,
        kty: Any,
        expected: str
    ):
        super().__init__(
            message=f"Incorrect 'kty' value: {kty}, expected {expected}",
            error_code="SCHEMA_MISMATCH",
            details={"kty": kty, "expected": expected}
        )


class MissingKeyMaterialError(JWKError):
    """Raised when 'k' is absent or empty"""

    def __init__(self, message: str = "Key format is invalid for HMAC"):
        super().__init__(message, "MISSING_KEY_MATERIAL")


class UnsupportedKeyTypeError(JWKError):
    """Raised when importing a JWK whose 'kty' has no key class"""

    def __init__(
        self,
        message: str,
        kty: Optional[Any] = None,
        supported: Optional[List[str]] = None
    ):
        details: Dict[str, Any] = {}
        if kty is not None:
            details["kty"] = kty
        if supported:
            details["supported"] = supported
        super().__init__(message, "UNSUPPORTED_KEY_TYPE", details)


# =============================================================================
# DIGEST ERRORS
# =============================================================================

class DigestError(JWKError):
    """Raised when a digest cannot be computed"""

    def __init__(
        self,
        message: str,
        algorithm: Optional[str] = None
    ):
        details: Dict[str, Any] = {}
        if algorithm:
            details["algorithm"] = algorithm
        super().__init__(message, "DIGEST_ERROR", details)


# =============================================================================
# CONFIGURATION AND VALIDATION ERRORS
# =============================================================================

class ConfigurationError(JWKError):
    """Raised when a setting or option has an unusable value"""

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None
    ):
        details: Dict[str, Any] = {}
        if setting:
            details["setting"] = setting
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ValidationError(JWKError):
    """Raised when input validation fails"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
