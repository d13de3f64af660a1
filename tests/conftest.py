"""Shared test fixtures for localname."""

from __future__ import annotations

from typing import Any

import pytest

from localname.resource import Resource


# ── Fake Resource Classes ──────────────────────────────────────────


def make_resource_class(
    persisted: list[bool] | None = None,
    base_uri: str | None = "http://example.org/ns/",
    name: str = "DummyResource",
) -> type:
    """Build a resource class whose id_persisted answers from a script.

    ``persisted`` is consumed one answer per check; once exhausted the last
    answer repeats. Every checked candidate is recorded in ``checked``.
    """
    answers = list(persisted) if persisted else [False]

    class _Scripted(Resource):
        checked: list[str] = []

        @classmethod
        def id_persisted(cls, local_name: str) -> bool:
            idx = min(len(cls.checked), len(answers) - 1)
            cls.checked.append(local_name)
            return answers[idx]

    _Scripted.base_uri = base_uri
    _Scripted.checked = []
    _Scripted.__name__ = name
    return _Scripted


class CountingMinter:
    """Minter callable returning sequential names and recording its arguments."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> str:
        self.calls.append(args)
        return f"{self._prefix}-{len(self.calls)}"


# ── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture()
def free_resource() -> type:
    """Resource class that never reports a candidate as persisted."""
    return make_resource_class([False])


@pytest.fixture()
def full_resource() -> type:
    """Resource class that reports every candidate as persisted."""
    return make_resource_class([True])


@pytest.fixture()
def counting_minter() -> CountingMinter:
    return CountingMinter()
