"""Layouts, coordinates and errors shared by all geometry types."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, Callable, Iterable, Protocol, Sequence

__all__ = [
    "Layout",
    "Coord",
    "GeomError",
    "LayoutMismatchError",
    "StrideMismatchError",
    "UnsupportedLayoutError",
    "UnsupportedTypeError",
    "transform_in_place",
]


_LAYOUT_NAMES = {
    0: "NoLayout",
    1: "XY",
    2: "XYZ",
    3: "XYM",
    4: "XYZM",
}


class Layout(IntEnum):
    """The meaning of the ordinates of an N-dimensional coordinate.

    ``Layout(n)`` for ``n > 4`` is accepted: the first ordinates are then
    X, Y, Z and M and the remaining ones have no special meaning.
    """

    NO_LAYOUT = 0
    XY = 1
    XYZ = 2
    XYM = 3
    XYZM = 4

    @classmethod
    def _missing_(cls, value: object) -> "Layout | None":
        if isinstance(value, int) and not isinstance(value, bool) and value > 4:
            member = int.__new__(cls, value)
            member._name_ = f"Layout({value})"
            member._value_ = value
            return member
        return None

    def __str__(self) -> str:
        return _LAYOUT_NAMES.get(int(self), f"Layout({int(self)})")

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def stride(self) -> int:
        """Return the number of ordinates in a coordinate of this layout."""
        value = int(self)
        if value == 0:
            return 0
        if value == 1:
            return 2
        if value in (2, 3):
            return 3
        if value == 4:
            return 4
        return value

    def m_index(self) -> int:
        """Return the index of the M ordinate, or -1 if there is none."""
        value = int(self)
        if value in (0, 1, 2):
            return -1
        if value == 3:
            return 2
        return 3

    def z_index(self) -> int:
        """Return the index of the Z ordinate, or -1 if there is none."""
        if int(self) in (0, 1, 3):
            return -1
        return 2


def _layout_text(layout: int) -> str:
    try:
        return str(Layout(layout))
    except ValueError:
        return f"Layout({int(layout)})"


class GeomError(Exception):
    """Base class of all errors raised by this package."""


class LayoutMismatchError(GeomError):
    """Raised when geometries with different layouts cannot be combined."""

    def __init__(self, got: int, want: int) -> None:
        self.got = got
        self.want = want
        super().__init__(
            f"geom: layout mismatch, got {_layout_text(got)}, want {_layout_text(want)}"
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.got, self.want) == (other.got, other.want)

    def __hash__(self) -> int:
        return hash((type(self), self.got, self.want))


class StrideMismatchError(GeomError):
    """Raised when a coordinate does not have the expected stride."""

    def __init__(self, got: int, want: int) -> None:
        self.got = got
        self.want = want
        super().__init__(f"geom: stride mismatch, got {got}, want {want}")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.got, self.want) == (other.got, other.want)

    def __hash__(self) -> int:
        return hash((type(self), self.got, self.want))


class UnsupportedLayoutError(GeomError):
    """Raised when the requested layout is not supported."""

    def __init__(self, layout: int) -> None:
        self.layout = layout
        super().__init__(f"geom: unsupported layout {_layout_text(layout)}")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.layout == other.layout

    def __hash__(self) -> int:
        return hash((type(self), self.layout))


class UnsupportedTypeError(GeomError):
    """Raised when a value of an unsupported type is given."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"geom: unsupported type {type(value).__name__}")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value is other.value

    def __hash__(self) -> int:
        return hash((type(self), id(self.value)))


class Coord(list):
    """An N-dimensional coordinate: a list of floats."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        super().__init__(values)

    def clone(self) -> "Coord":
        """Return a copy that shares nothing with this coordinate."""
        return Coord(self)

    def x(self) -> float:
        """Return the first ordinate."""
        return self[0]

    def y(self) -> float:
        """Return the second ordinate."""
        return self[1]

    def set(self, other: Sequence[float]) -> None:
        """Copy as many ordinates from ``other`` as both coordinates hold."""
        n = min(len(self), len(other))
        self[:n] = other[:n]

    def equal(self, layout: Layout, other: Sequence[float]) -> bool:
        """Compare the ordinates of both coordinates under ``layout``.

        NaN ordinates compare equal to each other.
        """
        stride = Layout(layout).stride()
        num_ords = min(len(self), stride)
        if (len(self) < stride or len(other) < stride) and len(self) != len(other):
            return False
        for a, b in zip(self[:num_ords], other[:num_ords]):
            a_nan, b_nan = math.isnan(a), math.isnan(b)
            if a_nan or b_nan:
                if not (a_nan and b_nan):
                    return False
            elif a != b:
                return False
        return True


class _FlatGeometry(Protocol):
    flat_coords: list
    stride: int


def transform_in_place(g: _FlatGeometry, f: Callable[[Coord], None]) -> _FlatGeometry:
    """Replace every coordinate of ``g`` with the result of ``f`` applied to it.

    ``f`` receives each coordinate and modifies it in place.
    """
    flat = g.flat_coords
    stride = g.stride
    if stride <= 0:
        return g
    for start in range(0, len(flat), stride):
        coord = Coord(flat[start : start + stride])
        f(coord)
        flat[start : start + stride] = coord
    return g