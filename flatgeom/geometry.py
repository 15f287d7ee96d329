"""Single geometries stored as flat coordinate lists."""

from __future__ import annotations

import bisect
import copy
import math
import struct
from typing import Any, Iterable, Optional, Sequence

from flatgeom.base import (
    Coord,
    Layout,
    LayoutMismatchError,
    StrideMismatchError,
    UnsupportedTypeError,
)

__all__ = [
    "POINT_EMPTY_COORD_BITS",
    "Geometry",
    "Point",
    "LineString",
    "LinearRing",
    "Polygon",
    "point_empty_coord",
    "set_srid",
]

# Bit pattern of the quiet NaN that marks an empty coordinate.
POINT_EMPTY_COORD_BITS = 0x7FF8000000000000
_EMPTY_COORD_BYTES = POINT_EMPTY_COORD_BITS.to_bytes(8, "little")


def point_empty_coord() -> float:
    """Return the NaN value that represents an empty coordinate."""
    return struct.unpack("<d", _EMPTY_COORD_BYTES)[0]


def _is_empty_marker(value: float) -> bool:
    return struct.pack("<d", value) == _EMPTY_COORD_BYTES


def _checked(coord: Optional[Sequence[float]], stride: int) -> list:
    values = list(coord) if coord is not None else []
    if len(values) != stride:
        raise StrideMismatchError(len(values), stride)
    return values


def _flatten(coords: Optional[Iterable[Sequence[float]]], stride: int) -> list:
    flat: list = []
    for coord in coords or ():
        flat.extend(_checked(coord, stride))
    return flat


def _inflate(flat: Sequence[float], start: int, end: int, stride: int) -> list:
    if stride <= 0:
        return []
    return [Coord(flat[i : i + stride]) for i in range(start, end, stride)]


def _length(flat: Sequence[float], start: int, end: int, stride: int) -> float:
    if stride <= 0:
        return 0.0
    total = 0.0
    for i in range(start + stride, end, stride):
        total += math.hypot(flat[i] - flat[i - stride], flat[i + 1] - flat[i + 1 - stride])
    return total


def _double_area(flat: Sequence[float], start: int, end: int, stride: int) -> float:
    if stride <= 0:
        return 0.0
    total = 0.0
    for i in range(start + stride, end, stride):
        x0, y0 = flat[i - stride], flat[i - stride + 1]
        x1, y1 = flat[i], flat[i + 1]
        total += x0 * y1 - x1 * y0
    return total


def _reverse_span(flat: list, start: int, end: int, stride: int) -> None:
    if stride <= 0:
        return
    chunks = [flat[i : i + stride] for i in range(start, end, stride)]
    flat[start:end] = [value for chunk in reversed(chunks) for value in chunk]


def _coord_at(flat: Sequence[float], i: int, stride: int) -> Coord:
    start = i * stride
    return Coord(flat[start : start + stride])


def _count(flat: Sequence[float], stride: int) -> int:
    return len(flat) // stride if stride else 0


class Geometry:
    """Common state of all geometries: layout, flat coordinates and SRID."""

    def __init__(
        self,
        layout: Layout = Layout.NO_LAYOUT,
        flat_coords: Optional[Iterable[float]] = None,
        ends: Optional[Iterable[int]] = None,
        endss: Optional[Iterable[Iterable[int]]] = None,
        srid: int = 0,
    ) -> None:
        self.layout = Layout(layout)
        self.stride = self.layout.stride()
        self.flat_coords: list = list(flat_coords) if flat_coords is not None else []
        self.ends: list = list(ends) if ends is not None else []
        self.endss: list = [list(e) for e in endss] if endss is not None else []
        self.srid = srid

    def set_srid(self, srid: int) -> "Geometry":
        """Set the SRID and return this geometry."""
        self.srid = srid
        return self

    def clone(self) -> "Geometry":
        """Return a deep copy that shares no lists with this geometry."""
        return copy.deepcopy(self)

    def swap(self, other: "Geometry") -> None:
        """Exchange the contents of this geometry and ``other``."""
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__

    def is_empty(self) -> bool:
        """Return whether the geometry has no coordinates."""
        return not self.flat_coords

    def _key(self) -> tuple:
        return (self.layout, self.stride, self.flat_coords, self.ends, self.endss, self.srid)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.layout}, {self.flat_coords!r})"


def set_srid(g: Any, srid: int) -> Any:
    """Set the SRID of any geometry and return it."""
    method = getattr(g, "set_srid", None)
    if not isinstance(g, Geometry) and not callable(method):
        raise UnsupportedTypeError(g)
    return g.set_srid(srid)


class Point(Geometry):
    """A single point. Without coordinates all ordinates are zero."""

    def __init__(
        self,
        layout: Layout,
        flat_coords: Optional[Iterable[float]] = None,
        srid: int = 0,
    ) -> None:
        layout = Layout(layout)
        if flat_coords is None:
            flat_coords = [0.0] * layout.stride()
        super().__init__(layout, flat_coords, srid=srid)

    @classmethod
    def new_empty(cls, layout: Layout) -> "Point":
        """Return a point with no coordinates."""
        return cls(layout, [])

    @classmethod
    def from_flat_maybe_empty(cls, layout: Layout, flat_coords: Sequence[float]) -> "Point":
        """Return a point, empty if every ordinate is the empty-coordinate NaN."""
        if all(_is_empty_marker(value) for value in flat_coords):
            return cls.new_empty(layout)
        return cls(layout, flat_coords)

    def set_coords(self, coords: Optional[Sequence[float]]) -> "Point":
        """Set the coordinate; its length must equal the stride."""
        self.flat_coords = _checked(coords, self.stride)
        return self

    def coords(self) -> Coord:
        return Coord(self.flat_coords)

    def num_coords(self) -> int:
        return 1

    def area(self) -> float:
        return 0.0

    def length(self) -> float:
        return 0.0

    def x(self) -> float:
        return self.flat_coords[0]

    def y(self) -> float:
        return self.flat_coords[1]

    def z(self) -> float:
        """Return the Z ordinate, or zero if the layout has none."""
        index = self.layout.z_index()
        return 0.0 if index == -1 else self.flat_coords[index]

    def m(self) -> float:
        """Return the M ordinate, or zero if the layout has none."""
        index = self.layout.m_index()
        return 0.0 if index == -1 else self.flat_coords[index]


class LineString(Geometry):
    """A line through zero or more control points."""

    def __init__(
        self,
        layout: Layout,
        flat_coords: Optional[Iterable[float]] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, srid=srid)

    def set_coords(self, coords: Optional[Iterable[Sequence[float]]]) -> "LineString":
        """Set the coordinates; each must have exactly ``stride`` ordinates."""
        self.flat_coords = _flatten(coords, self.stride)
        return self

    def coords(self) -> list:
        return _inflate(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def coord(self, i: int) -> Coord:
        return _coord_at(self.flat_coords, i, self.stride)

    def num_coords(self) -> int:
        return _count(self.flat_coords, self.stride)

    def area(self) -> float:
        return 0.0

    def length(self) -> float:
        return _length(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def interpolate(self, val: float, dim: int) -> tuple:
        """Return the index and fraction at which ordinate ``dim`` reaches ``val``."""
        flat, stride = self.flat_coords, self.stride
        n = len(flat)
        if n == 0:
            raise ValueError("geom: empty linestring")
        if val <= flat[dim]:
            return 0, 0.0
        if flat[n - stride + dim] <= val:
            return (n - 1) // stride, 0.0
        low = bisect.bisect_right(range(n // stride), val, key=lambda i: flat[i * stride + dim])
        low -= 1
        val0 = flat[low * stride + dim]
        if val == val0:
            return low, 0.0
        val1 = flat[(low + 1) * stride + dim]
        return low, (val - val0) / (val1 - val0)

    def sub_line_string(self, start: int, stop: int) -> "LineString":
        """Return the line from coordinate ``start`` up to, not including, ``stop``."""
        return LineString(
            self.layout, self.flat_coords[start * self.stride : stop * self.stride]
        )

    def reverse(self) -> None:
        """Reverse the order of the coordinates in place."""
        _reverse_span(self.flat_coords, 0, len(self.flat_coords), self.stride)


class LinearRing(Geometry):
    """A closed ring of coordinates."""

    def __init__(
        self,
        layout: Layout,
        flat_coords: Optional[Iterable[float]] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, srid=srid)

    def set_coords(self, coords: Optional[Iterable[Sequence[float]]]) -> "LinearRing":
        """Set the coordinates; each must have exactly ``stride`` ordinates."""
        self.flat_coords = _flatten(coords, self.stride)
        return self

    def coords(self) -> list:
        return _inflate(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def coord(self, i: int) -> Coord:
        return _coord_at(self.flat_coords, i, self.stride)

    def num_coords(self) -> int:
        return _count(self.flat_coords, self.stride)

    def area(self) -> float:
        """Return the signed area; counter-clockwise rings are positive."""
        return _double_area(self.flat_coords, 0, len(self.flat_coords), self.stride) / 2

    def length(self) -> float:
        return _length(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def reverse(self) -> None:
        """Reverse the order of the coordinates in place."""
        _reverse_span(self.flat_coords, 0, len(self.flat_coords), self.stride)


class Polygon(Geometry):
    """An outer ring followed by zero or more holes."""

    def __init__(
        self,
        layout: Layout,
        flat_coords: Optional[Iterable[float]] = None,
        ends: Optional[Iterable[int]] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, ends, srid=srid)

    def set_coords(self, coords: Optional[Iterable[Iterable[Sequence[float]]]]) -> "Polygon":
        """Set the rings; every coordinate must have ``stride`` ordinates."""
        flat: list = []
        ends: list = []
        for ring in coords or ():
            flat.extend(_flatten(ring, self.stride))
            ends.append(len(flat))
        self.flat_coords, self.ends = flat, ends
        return self

    def _spans(self):
        start = 0
        for end in self.ends:
            yield start, end
            start = end

    def coords(self) -> list:
        return [_inflate(self.flat_coords, s, e, self.stride) for s, e in self._spans()]

    def area(self) -> float:
        """Return the area of the outer ring less the area of the holes."""
        total = 0.0
        for index, (start, end) in enumerate(self._spans()):
            double = _double_area(self.flat_coords, start, end, self.stride)
            total = double if index == 0 else total - abs(double)
        return total / 2

    def length(self) -> float:
        return sum(_length(self.flat_coords, s, e, self.stride) for s, e in self._spans())

    def linear_ring(self, i: int) -> LinearRing:
        offset = self.ends[i - 1] if i > 0 else 0
        return LinearRing(self.layout, self.flat_coords[offset : self.ends[i]])

    def num_linear_rings(self) -> int:
        return len(self.ends)

    def push(self, ring: LinearRing) -> None:
        """Append a ring with the same layout."""
        if ring.layout != self.layout:
            raise LayoutMismatchError(ring.layout, self.layout)
        self.flat_coords.extend(ring.flat_coords)
        self.ends.append(len(self.flat_coords))

    def reverse(self) -> None:
        """Reverse every ring in place."""
        for start, end in list(self._spans()):
            _reverse_span(self.flat_coords, start, end, self.stride)