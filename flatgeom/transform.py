"""Ordered coordinate sets and removal of duplicate coordinates."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from flatgeom.base import Coord, Layout
from flatgeom.sorting import is_less_2d

__all__ = ["Compare", "TreeSet", "unique_coords"]


class Compare:
    """Equality and ordering strategy for coordinates.

    The default compares on X and Y only; subclasses may override either method.
    """

    def is_equal(self, x: Sequence[float], y: Sequence[float]) -> bool:
        return x[0] == y[0] and x[1] == y[1]

    def is_less(self, x: Sequence[float], y: Sequence[float]) -> bool:
        return is_less_2d(x, y)


class _Node:
    __slots__ = ("left", "value", "right")

    def __init__(self, value: Coord) -> None:
        self.left: Optional[_Node] = None
        self.value = value
        self.right: Optional[_Node] = None


class TreeSet:
    """A set of coordinates kept in the order given by a ``Compare`` strategy."""

    def __init__(self, layout: Layout, compare: Compare) -> None:
        self.layout = Layout(layout)
        self.stride = self.layout.stride()
        self.compare = compare
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, coord: Sequence[float]) -> bool:
        """Add ``coord``; return False if an equal coordinate is already present."""
        if len(coord) < self.stride:
            raise ValueError(
                "coordinate inserted into tree does not have a sufficient number of "
                f"ordinates for the layout: got {len(coord)}, want {self.stride}"
            )
        value = Coord(coord)
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        node = self._root
        while True:
            if self.compare.is_equal(value, node.value):
                return False
            if self.compare.is_less(value, node.value):
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
        self._size += 1
        return True

    def __iter__(self) -> Iterator[Coord]:
        stack: list = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def to_flat_list(self) -> list:
        """Return all coordinates, in order, as one flat list."""
        return [value for coord in self for value in coord[: self.stride]]


def unique_coords(layout: Layout, compare: Compare, coord_data: Sequence[float]) -> list:
    """Return the coordinates of ``coord_data`` without duplicates, in input order."""
    stride = Layout(layout).stride()
    if stride <= 0:
        raise ValueError(f"cannot split coordinates of layout {Layout(layout)}")
    seen = TreeSet(layout, compare)
    result: list = []
    for start in range(0, len(coord_data), stride):
        coord = coord_data[start : start + stride]
        if seen.insert(coord):
            result.extend(coord)
    return result