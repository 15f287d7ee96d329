"""In-place sorting of flat coordinate lists."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, MutableSequence, Sequence

from flatgeom.base import Layout

__all__ = ["IsLess", "is_less_2d", "sort_flat_coords", "sort_flat_coords_2d"]

IsLess = Callable[[Sequence[float], Sequence[float]], bool]


def is_less_2d(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """Order coordinates by X, then by Y."""
    if v1[0] != v2[0]:
        return v1[0] < v2[0]
    return v1[1] < v2[1]


def sort_flat_coords(
    layout: Layout, coords: MutableSequence[float], is_less: IsLess
) -> MutableSequence[float]:
    """Sort the coordinates held in ``coords`` in place using ``is_less``.

    Trailing values that do not make up a whole coordinate are left alone.
    Returns ``coords``.
    """
    stride = Layout(layout).stride()
    if stride <= 0:
        raise ValueError(f"cannot sort coordinates of layout {Layout(layout)}")
    count = len(coords) // stride
    chunks = [list(coords[i * stride : (i + 1) * stride]) for i in range(count)]

    def compare(a: Sequence[float], b: Sequence[float]) -> int:
        if is_less(a, b):
            return -1
        if is_less(b, a):
            return 1
        return 0

    chunks.sort(key=cmp_to_key(compare))
    coords[: count * stride] = [value for chunk in chunks for value in chunk]
    return coords


def sort_flat_coords_2d(layout: Layout, coords: MutableSequence[float]) -> MutableSequence[float]:
    """Sort the coordinates in ``coords`` in place by X, then by Y."""
    return sort_flat_coords(layout, coords, is_less_2d)