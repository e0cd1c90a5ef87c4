"""
Validators for the octjwk package

Input checks for key ids and generated key sizes.
"""

import logging
from typing import Optional, Any

from ..constants import KeyGenerationDefaults
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

MAX_KEY_ID_LENGTH = 256


def validate_key_id(
    key_id: Any,
    field_name: str = "kid",
    required: bool = True
) -> Optional[str]:
    """
    Validate a JWK key id.

    RFC 7517 leaves the 'kid' format to the application, so only
    the type and a sane length are enforced.

    Args:
        key_id: Key ID to validate
        field_name: Field name for error messages
        required: Whether the field is required

    Returns:
        Validated key ID string or None

    Raises:
        ValidationError: If validation fails
    """
    if key_id is None or (isinstance(key_id, str) and not key_id.strip()):
        if required:
            raise ValidationError(f"{field_name} is required", field=field_name)
        return None

    if not isinstance(key_id, str):
        raise ValidationError(f"{field_name} must be a string", field=field_name)

    if len(key_id) > MAX_KEY_ID_LENGTH:
        logger.warning(f"Rejected {field_name} of length {len(key_id)}")
        raise ValidationError(
            f"{field_name} exceeds maximum length",
            field=field_name,
            details={"max_length": MAX_KEY_ID_LENGTH}
        )

    return key_id


def validate_key_size(
    key_size: Any,
    field_name: str = "key_size"
) -> int:
    """
    Validate the size of a secret to generate.

    Args:
        key_size: Size in bits
        field_name: Field name for error messages

    Returns:
        Validated size in bits

    Raises:
        ValidationError: If not an int, not byte aligned or out of range
    """
    if isinstance(key_size, bool) or not isinstance(key_size, int):
        raise ValidationError(f"{field_name} must be an integer", field=field_name)

    if key_size % 8:
        raise ValidationError(f"{field_name} must be a multiple of 8", field=field_name)

    if not KeyGenerationDefaults.MIN_KEY_SIZE_BITS <= key_size <= KeyGenerationDefaults.MAX_KEY_SIZE_BITS:
        raise ValidationError(
            f"{field_name} must be between {KeyGenerationDefaults.MIN_KEY_SIZE_BITS} "
            f"and {KeyGenerationDefaults.MAX_KEY_SIZE_BITS} bits",
            field=field_name,
            details={
                "min": KeyGenerationDefaults.MIN_KEY_SIZE_BITS,
                "max": KeyGenerationDefaults.MAX_KEY_SIZE_BITS,
            }
        )

    return key_size
