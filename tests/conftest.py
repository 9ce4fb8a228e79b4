from __future__ import annotations

from copy import deepcopy

import pytest

from funcutil.control import default_cache

BASE_TEMPLATE: dict = {"x": 3, "n": 4, "p": "Test"}

BASE_RECORDS: list[dict] = [
    {"id": "u1", "name": "alex", "city": "berlin"},
    {"id": "u2", "name": "maria", "city": "lisbon"},
    {"id": "u3", "name": "ivan", "city": "riga"},
]


@pytest.fixture(autouse=True)
def clean_default_cache():
    """Each test starts and ends with an empty process-wide memo cache."""
    default_cache.clear()
    yield
    default_cache.clear()


@pytest.fixture()
def template() -> dict:
    return deepcopy(BASE_TEMPLATE)


@pytest.fixture()
def records() -> list[dict]:
    return deepcopy(BASE_RECORDS)


@pytest.fixture()
def ragged_sequences() -> list[list[int]]:
    """Sequences of different lengths for zip policy tests."""
    return [[5, 6, 8, 2], [7, 9, 0]]


@pytest.fixture()
def call_counter():
    """Factory for zero-argument callables that count their invocations."""

    class Counter:
        def __init__(self, result: object):
            self.result = result
            self.calls = 0

        def __call__(self) -> object:
            self.calls += 1
            return self.result

    return Counter
