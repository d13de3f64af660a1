"""Minter — generate a local name that is not yet persisted for a resource class."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from localname.core.errors import ExhaustedRetriesError, InvalidArgumentError
from localname.core.identifiers import LocalName, default_minter
from localname.resource import validate_resource_class
from localname.settings import DEFAULT_MAX_TRIES, MinterSettings

logger = logging.getLogger(__name__)

MinterFunc = Callable[..., str]


def generate_local_name(
    resource_class: type,
    max_tries: int = DEFAULT_MAX_TRIES,
    *minter_args: Any,
    minter: MinterFunc | None = None,
) -> LocalName:
    """Mint a local name that ``resource_class`` reports as unused.

    Each attempt calls ``minter(*minter_args)`` and then
    ``resource_class.id_persisted(candidate)``. The first candidate that is
    not persisted is returned. Nothing is reserved, so the result is only
    known to be free at the moment of the check.

    Raises InvalidArgumentError or ConfigurationError before any attempt if
    the arguments are unusable, and ExhaustedRetriesError if all
    ``max_tries`` candidates were taken. Errors from ``id_persisted``
    propagate unchanged.
    """
    if isinstance(max_tries, bool) or not isinstance(max_tries, int):
        raise InvalidArgumentError(
            f"max_tries must be an integer, got {type(max_tries).__name__}"
        )
    if max_tries < 1:
        raise InvalidArgumentError(f"max_tries must be >= 1, got {max_tries}")
    validate_resource_class(resource_class)
    if minter is not None and not callable(minter):
        raise InvalidArgumentError(
            f"minter must be callable, got {type(minter).__name__}"
        )
    mint = minter if minter is not None else default_minter

    for attempt in range(1, max_tries + 1):
        candidate = mint(*minter_args)
        if not resource_class.id_persisted(candidate):
            return LocalName(candidate)
        logger.debug(
            "Local name %r already persisted for %s (attempt %d/%d)",
            candidate, resource_class.__name__, attempt, max_tries,
        )

    logger.warning(
        "No available local name for %s after %d attempts",
        resource_class.__name__, max_tries,
    )
    raise ExhaustedRetriesError(
        f"Available local name not found for '{resource_class.__name__}': "
        f"exceeded maximum tries ({max_tries})",
        max_tries=max_tries,
        resource_class=resource_class,
    )


class Minter:
    """Mints local names with a configured retry budget and minter function.

    The instance holds defaults only; every call is independent and the same
    Minter can be shared between callers.
    """

    def __init__(
        self,
        settings: MinterSettings | None = None,
        minter: MinterFunc | None = None,
    ) -> None:
        if minter is not None and not callable(minter):
            raise InvalidArgumentError(
                f"minter must be callable, got {type(minter).__name__}"
            )
        self._settings = settings or MinterSettings()
        self._minter = minter

    @property
    def settings(self) -> MinterSettings:
        return self._settings

    @property
    def max_tries(self) -> int:
        return self._settings.default_max_tries

    def generate_local_name(
        self,
        resource_class: type,
        max_tries: int | None = None,
        *minter_args: Any,
        minter: MinterFunc | None = None,
    ) -> LocalName:
        """Mint a local name; None for max_tries or minter uses this instance's defaults."""
        return generate_local_name(
            resource_class,
            self.max_tries if max_tries is None else max_tries,
            *minter_args,
            minter=self._minter if minter is None else minter,
        )
