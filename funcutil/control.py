"""Safety and control-flow helpers.

Provides the `MISSING` marker used across the package to represent "no value
produced", distinct from a `None` business value.

Provides `has_property`/`get_property` for safe property lookup, `unthrow` to turn
a fallible call into an optional result, and `MemoCache`/`cached` for single-key
memoization.

Also includes small combinators (`pass_back`, `pipe`, `noop`, `fake_use`),
`init_array` for nested list construction, `panic` and `is_json`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Hashable, Mapping, Sequence
from enum import Enum
from typing import Any, Literal, NoReturn, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class Missing(Enum):
    """Single-member enum whose only value marks an absent result."""

    MISSING = "MISSING"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING
MissingType = Literal[Missing.MISSING]

DEFAULT_PANIC_MESSAGE = 'Unknown Internal Error, caused by "panic"'


class PanicError(RuntimeError):
    """Raised by `panic` for conditions treated as programmer errors."""


def panic(message: str = DEFAULT_PANIC_MESSAGE) -> NoReturn:
    """Raise `PanicError` with the given message. Never returns."""
    raise PanicError(message)


def get_property(obj: Any, key: Hashable) -> Any:
    """Resolve `key` on `obj` without raising.

    Mappings are resolved by item lookup, everything else by attribute lookup
    (inherited attributes included). Non-string keys never resolve as attributes.

    Args:
        obj: Object to inspect. None and MISSING never have properties.
        key: Mapping key or attribute name.

    Returns:
        The resolved value, or MISSING when the property is absent.

    Examples:
        >>> get_property({2: "test"}, 2)
        'test'
        >>> get_property({2: "test"}, "ok")
        MISSING
        >>> get_property(None, "x")
        MISSING
    """
    if obj is None or obj is MISSING:
        return MISSING
    if isinstance(obj, Mapping):
        try:
            return obj[key]
        except (KeyError, TypeError):
            return MISSING
    if not isinstance(key, str):
        return MISSING
    return getattr(obj, key, MISSING)


def has_property(obj: Any, key: Hashable) -> bool:
    """Return True if `key` resolves on `obj` to a value other than MISSING."""
    return get_property(obj, key) is not MISSING


def unthrow(func: Callable[[], T]) -> T | MissingType:
    """Call `func` and return its result, or MISSING if it raised.

    Only `Exception` subclasses are absorbed; the error detail is dropped.
    `KeyboardInterrupt` and `SystemExit` propagate.

    Examples:
        >>> unthrow(lambda: int("42"))
        42
        >>> unthrow(lambda: int("x"))
        MISSING
    """
    try:
        return func()
    except Exception as exc:
        logger.debug("unthrow discarded %s", type(exc).__name__)
        return MISSING


class MemoCache:
    """Key -> result memo table with no eviction and no locking.

    Safe only under single-threaded use or external synchronization.
    """

    def __init__(self) -> None:
        self._store: dict[Hashable, Any] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: Hashable, default: Any = MISSING) -> Any:
        return self._store.get(key, default)

    def set(self, key: Hashable, value: Any) -> None:
        self._store[key] = value

    def clear(self) -> None:
        logger.debug("memo cache cleared (%d entries)", len(self._store))
        self._store.clear()

    def get_or_compute(self, key: Hashable, func: Callable[[], T]) -> T:
        """Return the stored result for `key`, computing and storing it on a miss.

        A stored result of None or MISSING is still a hit.
        """
        if key in self._store:
            logger.debug("memo cache hit: %r", key)
            return self._store[key]
        logger.debug("memo cache miss: %r", key)
        value = func()
        self._store[key] = value
        return value


# Process-wide table used by `cached` when no cache is passed
default_cache = MemoCache()


def cached(func: Callable[[], T], key: Hashable, *, cache: MemoCache | None = None) -> T:
    """Memoize the result of `func` under `key`.

    Args:
        func: Zero-argument callable, invoked only on the first call per key.
        key: Cache key. Callers pick distinct keys for distinct computations.
        cache: Table to use. Defaults to the process-wide `default_cache`.

    Returns:
        The stored result for `key`.
    """
    if cache is None:
        cache = default_cache
    return cache.get_or_compute(key, func)


def init_array(initial_value: T, dimensions: Sequence[int]) -> Any:
    """Build nested lists shaped by `dimensions` with every leaf set to `initial_value`.

    All leaves reference the same `initial_value` object; a mutable value is
    shared, not copied. Inner lists themselves are distinct objects.

    Args:
        initial_value: Value placed in every leaf slot.
        dimensions: Sizes from outermost to innermost. Empty means the value itself.

    Returns:
        Nested list structure, or `initial_value` when `dimensions` is empty.

    Raises:
        ValueError: If any dimension is negative.

    Examples:
        >>> init_array(0, [2, 3])
        [[0, 0, 0], [0, 0, 0]]
        >>> init_array("x", [])
        'x'
    """
    if any(size < 0 for size in dimensions):
        raise ValueError("dimensions cannot be negative")

    def build(level: int) -> Any:
        if level == len(dimensions):
            return initial_value
        return [build(level + 1) for _ in range(dimensions[level])]

    return build(0)


def pass_back(value: T, func: Callable[[T], Any]) -> T:
    """Call `func(value)` for its effect and return `value` unchanged."""
    func(value)
    return value


def pipe(value: T, func: Callable[[T], R]) -> R:
    """Return `func(value)`."""
    return func(value)


def noop(*_args: Any, **_kwargs: Any) -> None:
    """Accept anything and do nothing. Usable as a default callback."""


def fake_use(_value: Any) -> None:
    """Do nothing with `_value`."""


def is_json(text: str | bytes) -> bool:
    """Return True if `text` parses as a JSON document."""
    try:
        json.loads(text)
    except (ValueError, TypeError):
        return False
    return True
