"""Resource class capability — the namespace a local name is minted for."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from localname.core.errors import ConfigurationError, InvalidArgumentError


class Resource(ABC):
    """Abstract base for resource classes that can receive minted local names.

    Subclasses set ``base_uri`` and implement ``id_persisted`` as a
    classmethod. The minter only ever works with the class itself, never an
    instance. Any class exposing the same two members is accepted as well;
    inheriting from ``Resource`` is not required.
    """

    base_uri: ClassVar[str | None] = None

    @classmethod
    @abstractmethod
    def id_persisted(cls, local_name: str) -> bool:
        """Return True if ``local_name`` is already in use under ``base_uri``."""


def validate_resource_class(resource_class: Any) -> type:
    """Check that ``resource_class`` can be minted for and return it unchanged.

    Raises InvalidArgumentError if it is not a class, and ConfigurationError
    if it has no base_uri or no callable id_persisted.
    """
    if not isinstance(resource_class, type):
        raise InvalidArgumentError(
            f"resource_class must be a class, got {type(resource_class).__name__}"
        )
    if not getattr(resource_class, "base_uri", None):
        raise ConfigurationError(
            f"Resource class '{resource_class.__name__}' must define base_uri"
        )
    if not callable(getattr(resource_class, "id_persisted", None)):
        raise ConfigurationError(
            f"Resource class '{resource_class.__name__}' must define a callable id_persisted"
        )
    return resource_class
