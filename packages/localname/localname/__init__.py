"""localname — mint unused local names for resource classes."""

from localname.core.errors import (
    ConfigurationError,
    ExhaustedRetriesError,
    InvalidArgumentError,
    LocalNameError,
)
from localname.core.identifiers import LocalName, default_minter, generate_id
from localname.minter import Minter, generate_local_name
from localname.resource import Resource, validate_resource_class
from localname.settings import MinterSettings

__all__ = [
    "ConfigurationError",
    "ExhaustedRetriesError",
    "InvalidArgumentError",
    "LocalName",
    "LocalNameError",
    "Minter",
    "MinterSettings",
    "Resource",
    "default_minter",
    "generate_id",
    "generate_local_name",
    "validate_resource_class",
]
