"""Sequence utilities.

Provides `int_range` for ascending or descending integer ranges, `zip_shortest` and
`zip_longest` to align ragged sequences, and `pairs`/`cyclic_pairs` for adjacent
element pairs built on top of zipping.

Provides cyclic positional helpers: `at` for wrap-around indexing, `cycle` for
left/right rotation, and `find_from`/`find_index_from` for linear or cyclic search
from an arbitrary start position.

Also includes `fold`, `apply` and `final_join`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Literal, TypeVar

from .control import MISSING, MissingType

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

Direction = Literal["left", "right"]


def _require_int(value: Any, label: str) -> int:
    # bool is an int subclass but never a valid bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an int, got {type(value).__name__}")
    return value


def int_range(start_or_end: int, end: int | None = None) -> list[int]:
    """Return consecutive integers from start up to (not including) end.

    With one argument the range starts at 0. The step is +1 when start <= end and
    -1 when start > end, so reverse ranges work without an explicit step.

    Args:
        start_or_end: End bound when `end` is omitted, otherwise the start bound.
        end: Exclusive end bound.

    Returns:
        List of length abs(end - start).

    Raises:
        TypeError: If a bound is not an int (bool is rejected too).

    Examples:
        >>> int_range(6)
        [0, 1, 2, 3, 4, 5]
        >>> int_range(-4)
        [0, -1, -2, -3]
        >>> int_range(3, -3)
        [3, 2, 1, 0, -1, -2]
        >>> int_range(5, 5)
        []
    """
    if end is None:
        start, stop = 0, _require_int(start_or_end, "end")
    else:
        start, stop = _require_int(start_or_end, "start"), _require_int(end, "end")
    step = 1 if start <= stop else -1
    return list(range(start, stop, step))


def zip_shortest(sequences: Sequence[Sequence[T]]) -> list[tuple[T, ...]]:
    """Align sequences index by index, truncated to the shortest one.

    Examples:
        >>> zip_shortest([[5, 6, 8, 2], [7, 9, 0]])
        [(5, 7), (6, 9), (8, 0)]
        >>> zip_shortest([[1, 2]])
        [(1,), (2,)]
        >>> zip_shortest([])
        []
    """
    if len(sequences) == 0:
        return []
    length = min(len(seq) for seq in sequences)
    return [tuple(seq[i] for seq in sequences) for i in range(length)]


def zip_longest(sequences: Sequence[Sequence[T]]) -> list[tuple[T | MissingType, ...]]:
    """Align sequences index by index up to the longest one.

    Positions past the end of a shorter sequence hold MISSING.

    Examples:
        >>> zip_longest([[5, 6, 8], [7, 9, 0, 9]])
        [(5, 7), (6, 9), (8, 0), (MISSING, 9)]
    """
    if len(sequences) == 0:
        return []
    length = max(len(seq) for seq in sequences)
    return [tuple(seq[i] if i < len(seq) else MISSING for seq in sequences) for i in range(length)]


def pairs(sequence: Sequence[T]) -> list[tuple[T, T]]:
    """Return overlapping adjacent pairs `(s[i], s[i + 1])`.

    Examples:
        >>> pairs([5, 6, 8, 2])
        [(5, 6), (6, 8), (8, 2)]
        >>> pairs([1])
        []
    """
    return zip_shortest([sequence[:-1], sequence[1:]])  # type: ignore[return-value]


def cyclic_pairs(sequence: Sequence[T]) -> list[tuple[T, T]]:
    """Return adjacent pairs plus the wrap-around pair `(last, first)`.

    A single element pairs with itself; an empty sequence gives no pairs.

    Examples:
        >>> cyclic_pairs([1, 2, 3])
        [(1, 2), (2, 3), (3, 1)]
        >>> cyclic_pairs(["a"])
        [('a', 'a')]
    """
    if len(sequence) == 0:
        return []
    return pairs(sequence) + [(sequence[-1], sequence[0])]


def at(sequence: Sequence[T], index: int) -> T | MissingType:
    """Return the element at `index` modulo the sequence length, or MISSING if empty.

    Negative indices wrap from the end, and so do indices past the end.

    Examples:
        >>> at([1, 2, 3], 4)
        2
        >>> at([1, 2, 3], -4)
        3
        >>> at([], 0)
        MISSING
    """
    if len(sequence) == 0:
        return MISSING
    return sequence[index % len(sequence)]


def cycle(sequence: Sequence[T], n: int, direction: Direction = "left") -> list[T] | tuple[T, ...]:
    """Rotate a sequence by `n` positions to the left or right.

    The rotation amount is taken modulo the length. A tuple input gives a tuple,
    anything else gives a new list.

    Args:
        sequence: Sequence to rotate. Not mutated.
        n: Rotation amount; negative values rotate the opposite way.
        direction: "left" moves elements towards the front, "right" towards the back.

    Raises:
        ValueError: If direction is not "left" or "right".
        TypeError: If n is not an int.

    Examples:
        >>> cycle([1, 2, 3, 4], 1, "left")
        [2, 3, 4, 1]
        >>> cycle([1, 2, 3, 4], 1, "right")
        [4, 1, 2, 3]
    """
    if direction not in ("left", "right"):
        raise ValueError('direction must be "left" or "right"')
    _require_int(n, "n")

    items = list(sequence)
    if items:
        shift = n % len(items) if direction == "left" else -n % len(items)
        items = items[shift:] + items[:shift]
    if isinstance(sequence, tuple):
        return tuple(items)
    return items


def find_index_from(
    sequence: Sequence[T],
    predicate: Callable[[T], bool],
    start_index: int = 0,
    cyclic: bool = False,
) -> int | None:
    """Return the first position at or after `start_index` whose element matches.

    `start_index` wraps like `at`. With `cyclic=True` the scan continues from the
    beginning and visits every position exactly once; otherwise it stops at the end.

    Returns:
        Matching position in [0, len(sequence)), or None.
    """
    length = len(sequence)
    if length == 0:
        return None
    start = start_index % length
    steps = length if cyclic else length - start
    for offset in range(steps):
        position = (start + offset) % length
        if predicate(sequence[position]):
            return position
    return None


def find_from(
    sequence: Sequence[T],
    predicate: Callable[[T], bool],
    start_index: int = 0,
    cyclic: bool = False,
) -> T | MissingType:
    """Return the first element found by `find_index_from`, or MISSING.

    Examples:
        >>> find_from([1, 2, 3, 4], lambda v: v % 2 == 1, 2)
        3
        >>> find_from([1, 2, 3, 4], lambda v: v < 2, 2)
        MISSING
        >>> find_from([1, 2, 3, 4], lambda v: v < 2, 2, cyclic=True)
        1
    """
    position = find_index_from(sequence, predicate, start_index, cyclic)
    if position is None:
        return MISSING
    return sequence[position]


def fold(value: A, values: Sequence[B], func: Callable[[A, B], A]) -> A:
    """Left fold: apply `func(acc, item)` over `values` starting from `value`.

    Examples:
        >>> fold("2", [1, 2, 3], lambda acc, v: acc + str(v))
        '2123'
    """
    for item in values:
        value = func(value, item)
    return value


def apply(value: A, steps: Sequence[tuple[B, Callable[[A, B], A]]]) -> A:
    """Fold with a separate function per step; each step is `(operand, func)`.

    Examples:
        >>> import operator
        >>> apply(7, [(1, operator.add), (2, operator.sub), (3, operator.mul)])
        18
    """
    for operand, func in steps:
        value = func(value, operand)
    return value


def final_join(items: Sequence[str], separator: str, final_separator: str) -> str:
    """Join strings, using `final_separator` between the last two.

    Examples:
        >>> final_join(["1", "2", "3", "4"], ", ", " and ")
        '1, 2, 3 and 4'
        >>> final_join(["1"], ", ", " and ")
        '1'
    """
    if len(items) == 0:
        return ""
    if len(items) == 1:
        return items[0]
    tail = final_separator.join(items[-2:])
    if len(items) == 2:
        return tail
    return separator.join(items[:-2]) + separator + tail
