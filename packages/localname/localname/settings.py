"""Minter settings — defaults applied when a call does not override them."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MAX_TRIES = 10


class MinterSettings(BaseModel):
    """Minting defaults held by a Minter."""

    default_max_tries: int = Field(
        default=DEFAULT_MAX_TRIES,
        ge=1,
        description="Attempts made before giving up on finding an unused local name",
    )
