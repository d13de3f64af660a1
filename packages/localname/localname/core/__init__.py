"""localname core — identifiers and errors."""

from localname.core.errors import (
    ConfigurationError,
    ExhaustedRetriesError,
    InvalidArgumentError,
    LocalNameError,
)
from localname.core.identifiers import LocalName, default_minter, generate_id

__all__ = [
    "ConfigurationError",
    "ExhaustedRetriesError",
    "InvalidArgumentError",
    "LocalName",
    "LocalNameError",
    "default_minter",
    "generate_id",
]
