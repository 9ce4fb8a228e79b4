"""Mapping reshape utilities.

Provides key/entry extraction (`typed_keys`, `typed_entries`) with numeric variants
that parse keys as floats, and `typed_from_entries` to build a dict back.

Provides `map_keys`, `map_values` and `map_entries` (plus numeric-key variants) that
build a new dict by transforming each entry. When two entries map to the same key,
the later one in iteration order wins.

Also includes `cover` for template-based overlay, `nullableobj_to_partial`,
`index_by`, and two in-place helpers: `object_assign_if_truthy` and
`ensure_delete_from_set`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Hashable, Iterable, Mapping, MutableMapping, MutableSet, Sequence
from collections.abc import Set as AbcSet
from typing import Any, TypeVar

from .control import MISSING

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
NK = TypeVar("NK", bound=Hashable)
NV = TypeVar("NV")


def _parse_number_key(key: Any, strict: bool) -> float:
    """Parse a mapping key as a float.

    In non-strict mode a malformed key becomes NaN; in strict mode it raises.
    """
    try:
        # bool keys are not numerals even though float(True) works
        if isinstance(key, bool):
            raise ValueError(f"not a numeric key: {key!r}")
        return float(key)
    except (ValueError, TypeError) as err:
        if strict:
            raise ValueError(f"not a numeric key: {key!r}") from err
        logger.debug("numeric key %r could not be parsed, using NaN", key)
        return math.nan


def typed_keys(mapping: Mapping[K, Any]) -> list[K]:
    return list(mapping.keys())


def typed_number_keys(mapping: Mapping[Any, Any], *, strict: bool = False) -> list[float]:
    """Return the keys of `mapping` parsed as floats.

    Args:
        mapping: Mapping whose keys are numerals (e.g. "7", "0.5") or numbers.
        strict: If True, raise on a malformed key instead of returning NaN for it.

    Raises:
        ValueError: In strict mode when a key is not a numeral.

    Examples:
        >>> typed_number_keys({"7": "a", 4: "b"})
        [7.0, 4.0]
    """
    return [_parse_number_key(k, strict) for k in mapping]


def typed_entries(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    return list(mapping.items())


def typed_number_entries(mapping: Mapping[Any, V], *, strict: bool = False) -> list[tuple[float, V]]:
    """Return `(key, value)` pairs with keys parsed as floats (see `typed_number_keys`)."""
    return [(_parse_number_key(k, strict), v) for k, v in mapping.items()]


def typed_from_entries(entries: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a dict from `(key, value)` pairs; duplicate keys keep the last value."""
    return dict(entries)


def map_keys(mapping: Mapping[K, V], func: Callable[[K], NK]) -> dict[NK, V]:
    """Return a new dict with `func` applied to every key.

    Examples:
        >>> map_keys({"a": 1, "b": 2}, str.upper)
        {'A': 1, 'B': 2}
        >>> map_keys({"a": 1, "b": 2}, lambda k: "same")
        {'same': 2}
    """
    return typed_from_entries((func(k), v) for k, v in mapping.items())


def map_number_keys(
    mapping: Mapping[Any, V], func: Callable[[float], NK], *, strict: bool = False
) -> dict[NK, V]:
    """Like `map_keys`, but keys are parsed as floats before `func` sees them."""
    return typed_from_entries((func(k), v) for k, v in typed_number_entries(mapping, strict=strict))


def map_values(mapping: Mapping[K, V], func: Callable[[V], NV]) -> dict[K, NV]:
    """Return a new dict with `func` applied to every value.

    Examples:
        >>> map_values({"x": 2, 4: 6}, lambda n: n - 4)
        {'x': -2, 4: 2}
    """
    return {k: func(v) for k, v in mapping.items()}


def map_entries(mapping: Mapping[K, V], func: Callable[[tuple[K, V]], tuple[NK, NV]]) -> dict[NK, NV]:
    """Return a new dict built from `func((key, value))` for every entry."""
    return typed_from_entries(func(entry) for entry in mapping.items())


def map_number_entries(
    mapping: Mapping[Any, V],
    func: Callable[[tuple[float, V]], tuple[NK, NV]],
    *,
    strict: bool = False,
) -> dict[NK, NV]:
    """Like `map_entries`, but keys are parsed as floats before `func` sees them.

    Examples:
        >>> map_number_entries({"7": 2, "4": 6, "0": 8}, lambda e: (e[1] - 2, e[0] + 2))
        {0: 9.0, 4: 6.0, 6: 2.0}
    """
    return typed_from_entries(func(entry) for entry in typed_number_entries(mapping, strict=strict))


def cover(template: Mapping[K, V], overlay: Mapping[Any, Any]) -> dict[K, V]:
    """Overlay `overlay` onto `template`, keeping exactly the template's keys.

    A key explicitly present in `overlay` takes the overlay value (even if it is
    None); other template keys keep their value. Keys only in `overlay` are
    ignored. This is a shallow merge.

    Examples:
        >>> cover({"x": 3, "n": 4, "p": "Test"}, {"n": 7})
        {'x': 3, 'n': 7, 'p': 'Test'}
    """

    def pick(entry: tuple[K, V]) -> tuple[K, V]:
        key, value = entry
        if key in overlay:
            return key, overlay[key]
        return key, value

    return map_entries(template, pick)


def nullableobj_to_partial(mapping: Mapping[K, Any]) -> dict[K, Any]:
    """Return a new dict without entries whose value is None or MISSING.

    Falsy values such as 0, False and "" are kept.
    """
    return typed_from_entries((k, v) for k, v in mapping.items() if v is not None and v is not MISSING)


def index_by(records: Sequence[Any], field: str) -> dict[Any, Any]:
    """Map each record's `field` value to the record itself.

    Records may be mappings (item lookup) or objects (attribute lookup). Duplicate
    field values keep the last record.

    Raises:
        KeyError: If a mapping record has no `field`.
        AttributeError: If an object record has no `field`.

    Examples:
        >>> index_by([{"id": "a", "n": 1}, {"id": "b", "n": 2}], "id")
        {'a': {'id': 'a', 'n': 1}, 'b': {'id': 'b', 'n': 2}}
    """

    def field_of(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record[field]
        return getattr(record, field)

    return typed_from_entries((field_of(record), record) for record in records)


def object_assign_if_truthy(mapping: MutableMapping[K, V], key: K, value: V) -> None:
    """Set `mapping[key] = value` if `value` is truthy, otherwise remove `key`.

    Mutates `mapping` in place. Removing an absent key is not an error.
    """
    if value:
        mapping[key] = value
    else:
        mapping.pop(key, None)


def _deep_equal(left: Any, right: Any, seen: set[tuple[int, int]] | None = None) -> bool:
    """Structural equality that also compares plain objects by their attributes.

    NaN matches NaN. A pair of objects already under comparison counts as equal,
    so self-referencing structures terminate.
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return left == right
    if isinstance(left, float):
        return left == right or (math.isnan(left) and math.isnan(right))
    if seen is None:
        seen = set()
    pair = (id(left), id(right))
    if pair in seen:
        return True
    seen.add(pair)
    if isinstance(left, Mapping):
        if left.keys() != right.keys():
            return False
        return all(_deep_equal(left[k], right[k], seen) for k in left)
    if isinstance(left, Sequence) and not isinstance(left, str | bytes | bytearray):
        if len(left) != len(right):
            return False
        return all(_deep_equal(a, b, seen) for a, b in zip(left, right))
    if isinstance(left, AbcSet):
        return left == right
    if left == right:
        return True
    if hasattr(left, "__dict__") and hasattr(right, "__dict__"):
        return _deep_equal(vars(left), vars(right), seen)
    return False


def ensure_delete_from_set(target: MutableSet[Any], value: Any) -> bool:
    """Remove `value` from `target`, falling back to a structural-equality scan.

    Direct membership is tried first. If that misses (or `value` is unhashable),
    the set is scanned and the first element structurally equal to `value` is
    removed. Mutates `target` in place.

    Returns:
        True if an element was removed.
    """
    try:
        if value in target:
            target.discard(value)
            return True
    except TypeError:
        # unhashable value, only the scan can match it
        pass

    for element in target:
        if _deep_equal(element, value):
            target.discard(element)
            return True
    return False
