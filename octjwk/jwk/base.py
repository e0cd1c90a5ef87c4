"""
Base class for JWK key types

Stores the non-cryptographic JWK parameters in an ordered
side-table, applies the options bag (explicit or generated 'kid'),
and guards every write path against the subclass's protected
attribute names.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Tuple

import structlog

from ..config import get_settings
from ..exceptions import ArgumentShapeError, ProtectedAttributeError
from ..utils.validators import validate_key_id
from .attributes import AttributeName, canonical_name, canonicalize, is_registered
from .kid import resolve_kid_generator

logger = structlog.get_logger(__name__)


class KeyBase(ABC):
    """Common behaviour of all JWK key classes"""

    # Attribute names that may never be written after construction
    PROTECTED_ATTRIBUTES: Tuple[str, ...] = ()

    def __init__(self, options: Optional[Mapping] = None, metadata: Optional[Mapping] = None):
        if options is not None and not isinstance(options, Mapping):
            raise ArgumentShapeError("options must be a mapping", received=type(options).__name__)

        self._options: Dict[str, Any] = dict(options or {})
        self._metadata: Dict[str, Any] = dict(metadata or {})
        self._check_metadata(self._metadata)
        self._apply_kid_defaults()

    # -- subclass interface ---------------------------------------------------

    @abstractmethod
    def _key_parameters(self) -> Dict[str, Any]:
        """The protected key members, in export order"""
        ...

    @abstractmethod
    def key_digest(self) -> str:
        ...

    @abstractmethod
    def export(self, include_private: bool = False) -> Dict[str, Any]:
        ...

    @abstractmethod
    def members(self) -> Dict[str, Any]:
        ...

    @abstractmethod
    def is_private(self) -> bool:
        ...

    @abstractmethod
    def public_key(self) -> Any:
        ...

    # -- attribute access -----------------------------------------------------

    def parameters(self) -> Dict[str, Any]:
        """Copy of every attribute: key members first, then metadata"""
        params = self._key_parameters()
        params.update(self._metadata)
        return params

    def __getitem__(self, name: AttributeName) -> Any:
        name = canonical_name(name)
        key_params = self._key_parameters()
        if name in key_params:
            return key_params[name]
        return self._metadata.get(name)

    def get(self, name: AttributeName, default: Any = None) -> Any:
        return self[name] if name in self else default

    def __contains__(self, name: object) -> bool:
        try:
            name = canonical_name(name)  # type: ignore[arg-type]
        except ArgumentShapeError:
            return False
        return name in self._key_parameters() or name in self._metadata

    def __setitem__(self, name: AttributeName, value: Any) -> None:
        name = canonical_name(name)
        self._guard([name])
        self._check_metadata({name: value})
        self._metadata[name] = value

        if not is_registered(name):
            logger.debug("Set custom JWK parameter", attribute=name, kid=self.kid)

    def __delitem__(self, name: AttributeName) -> None:
        name = canonical_name(name)
        self._guard([name])
        del self._metadata[name]

    def update(self, attributes: Optional[Mapping] = None, **kwargs: Any) -> None:
        """Set several attributes; nothing is written if any name is protected"""
        updates = canonicalize(attributes or {})
        updates.update(kwargs)
        self._guard(updates)
        self._check_metadata(updates)
        self._metadata.update(updates)

    def _guard(self, names: Iterable[str]) -> None:
        refused = [name for name in names if name in self.PROTECTED_ATTRIBUTES]
        if refused:
            logger.warning("Refused write to protected key attributes",
                           attributes=refused, kid=self._metadata.get('kid'))
            raise ProtectedAttributeError(refused)

    def _check_metadata(self, attributes: Mapping) -> None:
        # None clears the kid; any other value must be a usable id
        if attributes.get('kid') is not None:
            validate_key_id(attributes['kid'], field_name='kid')

    @property
    def kid(self) -> Optional[str]:
        return self['kid']

    # -- options --------------------------------------------------------------

    def _apply_kid_defaults(self) -> None:
        if self._metadata.get('kid') is not None:
            return

        kid = self._options.get('kid')
        if kid is None:
            generator = resolve_kid_generator(
                self._options.get('kid_generator', get_settings().kid_generator)
            )
            if generator is not None:
                kid = generator(self).generate()

        if kid is not None:
            self._metadata['kid'] = validate_key_id(kid, field_name='kid')

    # -- comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.key_digest() == other.key_digest() and self.kid == other.kid

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.key_digest()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kty={self['kty']!r}, kid={self.kid!r})"
