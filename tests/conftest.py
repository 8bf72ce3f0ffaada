"""Shared fixtures for strmatch tests.

Provides a registry with a small custom matcher type registered, used by
the registry and conformance tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from strmatch import Registry, RegistryBuilder

TEST_TYPE_URL = "strmatch.test.v1.MaxLength"


@dataclass(frozen=True, slots=True)
class MaxLengthMatcher:
    """Matches any text no longer than ``max_length`` characters."""

    max_length: int

    def matches(self, value: str, /) -> bool:
        return len(value) <= self.max_length


def _max_length_factory(config: dict[str, Any]) -> MaxLengthMatcher:
    max_length = config.get("max_length")
    if not isinstance(max_length, int):
        msg = "MaxLength requires a 'max_length' field (int)"
        raise ValueError(msg)
    return MaxLengthMatcher(max_length)


@pytest.fixture
def registry() -> Registry:
    return RegistryBuilder().matcher(TEST_TYPE_URL, _max_length_factory).build()
