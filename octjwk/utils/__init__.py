"""
Utility functions for octjwk
Input validation helpers
"""

from .validators import validate_key_id, validate_key_size

__all__ = [
    "validate_key_id",
    "validate_key_size",
]
