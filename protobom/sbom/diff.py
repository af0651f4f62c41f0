"""Helpers that compute what was added and removed between two values."""

from __future__ import annotations

import math
from collections.abc import Hashable, Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Flattenable(Protocol):
    def flat_string(self) -> str: ...


F = TypeVar("F", bound=_Flattenable)


def _zero_like(value: Any) -> Any:
    if value is None:
        return None
    cls = type(value)
    try:
        return cls()
    except TypeError:
        pass
    try:
        return cls(0)
    except (TypeError, ValueError):
        return None


def diff_values(v1: T, v2: T) -> tuple[T, T, int]:
    """Compare two scalar values.

    Returns ``(added, removed, count)``: ``v2`` is added when it changed to a
    non-empty value, ``v1`` is removed when ``v2`` is empty.
    """
    zero = _zero_like(v1 if v1 is not None else v2)
    if v1 == v2:
        return zero, zero, 0
    if v2 == zero:
        return zero, v1, 1
    return v2, zero, 1


def _unix(moment: datetime) -> int:
    return math.floor(moment.timestamp())


def diff_dates(
    d1: datetime | None, d2: datetime | None
) -> tuple[datetime | None, datetime | None, int]:
    """Compare two dates at one-second resolution.

    Returns ``(added, removed, count)``.
    """
    if (d1 is not None and d2 is not None and _unix(d1) != _unix(d2)) or (
        d1 is None and d2 is not None
    ):
        return d2, None, 1
    if d1 is not None and d2 is None:
        return None, d1, 1
    return None, None, 0


def diff_map(map1: Mapping[K, V], map2: Mapping[K, V]) -> tuple[dict[K, V], dict[K, V], int]:
    """Return entries new or changed in ``map2`` and keys missing from it."""
    added = {k: v for k, v in map2.items() if k not in map1 or map1[k] != v}
    removed = {k: v for k, v in map1.items() if k not in map2}
    return added, removed, int(bool(added or removed))


def diff_slice(arr1: Sequence[T], arr2: Sequence[T]) -> tuple[list[T], list[T], int]:
    """Return items only in ``arr2`` (added) and only in ``arr1`` (removed)."""
    added = [item for item in arr2 if item not in arr1]
    removed = [item for item in arr1 if item not in arr2]
    return added, removed, int(bool(added or removed))


def diff_list(list1: Sequence[F], list2: Sequence[F]) -> tuple[list[F], list[F], int]:
    """Like :func:`diff_slice`, comparing elements by their flat string."""
    keys1 = {item.flat_string() for item in list1}
    keys2 = {item.flat_string() for item in list2}
    added = [item for item in list2 if item.flat_string() not in keys1]
    removed = [item for item in list1 if item.flat_string() not in keys2]
    return added, removed, int(bool(added or removed))