"""
Key id generators

A generator is constructed with the key and produces the value
stored as its 'kid' when none was supplied.
"""

from typing import Any, Optional, Type, Union

from ..config import KidGenerator
from ..exceptions import ConfigurationError


class KidAsKeyDigest:
    """Use the key fingerprint as its id"""

    def __init__(self, jwk: Any):
        self.jwk = jwk

    def generate(self) -> str:
        return self.jwk.key_digest()


class KidAsThumbprint:
    """Use the RFC 7638 thumbprint as the key id"""

    def __init__(self, jwk: Any):
        self.jwk = jwk

    def generate(self) -> str:
        return self.jwk.thumbprint()


_GENERATORS = {
    KidGenerator.NONE: None,
    KidGenerator.KEY_DIGEST: KidAsKeyDigest,
    KidGenerator.THUMBPRINT: KidAsThumbprint,
}


def resolve_kid_generator(value: Union[None, str, KidGenerator, Type]) -> Optional[Type]:
    """
    Turn a configured generator into a generator class

    Args:
        value: None, a KidGenerator (or its string value), or a class
            exposing generate() when constructed with the key

    Returns:
        Generator class, or None when no kid should be generated

    Raises:
        ConfigurationError: For unknown generator names or objects
    """
    if value is None:
        return None

    if isinstance(value, type):
        if not callable(getattr(value, 'generate', None)):
            raise ConfigurationError(
                f"kid generator {value.__name__} has no generate() method",
                setting="kid_generator"
            )
        return value

    if isinstance(value, str):
        try:
            return _GENERATORS[KidGenerator(value)]
        except ValueError:
            raise ConfigurationError(
                f"Unknown kid generator: {value}",
                setting="kid_generator"
            )

    raise ConfigurationError(
        f"Unsupported kid generator: {type(value).__name__}",
        setting="kid_generator"
    )
