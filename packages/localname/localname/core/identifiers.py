"""Core identifier types and the default minter."""

from __future__ import annotations

import uuid
from typing import Any, NewType

LocalName = NewType("LocalName", str)


def generate_id() -> str:
    """Generate a unique identifier (UUID4)."""
    return str(uuid.uuid4())


def default_minter(*args: Any) -> LocalName:
    """Mint a UUID4 local name. Arguments are accepted and ignored."""
    return LocalName(generate_id())
