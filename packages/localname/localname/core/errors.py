"""Core error hierarchy for localname."""

from __future__ import annotations

from typing import Any


class LocalNameError(Exception):
    """Base exception for all localname errors."""


class InvalidArgumentError(LocalNameError):
    """Raised when an argument to the minter is malformed (max_tries, class, minter)."""


class ConfigurationError(LocalNameError):
    """Raised when a resource class lacks the capabilities needed for minting."""


class ExhaustedRetriesError(LocalNameError):
    """Raised when every candidate in the retry budget was already persisted."""

    def __init__(self, message: str, *, max_tries: int, resource_class: Any = None) -> None:
        super().__init__(message)
        self.max_tries = max_tries
        self.resource_class = resource_class
