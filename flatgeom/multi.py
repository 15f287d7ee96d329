"""Collections of geometries: multi-points, multi-lines, multi-polygons and mixed collections."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence

from flatgeom.base import Coord, Layout, LayoutMismatchError
from flatgeom.geometry import (
    Geometry,
    LineString,
    Point,
    Polygon,
    _checked,
    _flatten,
    _inflate,
    _length,
    _reverse_span,
)

__all__ = [
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
]


class MultiPoint(Geometry):
    """A collection of points, some of which may be empty.

    An empty point is recorded as an end equal to the previous end.
    """

    def __init__(
        self,
        layout: Layout,
        flat_coords: Optional[Iterable[float]] = None,
        ends: Optional[Iterable[int]] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, ends, srid=srid)
        if ends is None and self.flat_coords:
            count = len(self.flat_coords) // self.stride if self.stride > 0 else 0
            self.ends = [(i + 1) * self.stride for i in range(count)]

    def set_coords(self, coords: Optional[Iterable[Optional[Sequence[float]]]]) -> "MultiPoint":
        """Set the points; ``None`` stands for an empty point."""
        flat: list = []
        ends: list = []
        for coord in coords or ():
            if coord is not None:
                flat.extend(_checked(coord, self.stride))
            ends.append(len(flat))
        self.flat_coords, self.ends = flat, ends
        return self

    def _spans(self) -> Iterator[tuple]:
        start = 0
        for end in self.ends:
            yield start, end
            start = end

    def coords(self) -> list:
        """Return every coordinate, with ``None`` for empty points."""
        return [
            None if start == end else Coord(self.flat_coords[start:end])
            for start, end in self._spans()
        ]

    def coord(self, i: int) -> Optional[Coord]:
        """Return the ith coordinate, or ``None`` if that point is empty."""
        before = self.ends[i - 1] if i > 0 else 0
        if self.ends[i] == before:
            return None
        return Coord(self.flat_coords[before : self.ends[i]])

    def num_coords(self) -> int:
        return len(self.ends)

    def num_points(self) -> int:
        return len(self.ends)

    def point(self, i: int) -> Point:
        """Return the ith point."""
        coord = self.coord(i)
        if coord is None:
            return Point.new_empty(self.layout)
        return Point(self.layout, coord)

    def push(self, point: Point) -> "MultiPoint":
        """Append a point with the same layout."""
        if point.layout != self.layout:
            raise LayoutMismatchError(point.layout, self.layout)
        if not point.is_empty():
            self.flat_coords.extend(point.flat_coords)
        self.ends.append(len(self.flat_coords))
        return self

    def area(self) -> float:
        return 0.0

    def length(self) -> float:
        return 0.0

    def reverse(self) -> None:
        """Reverse each point in place, which leaves the collection unchanged."""


class MultiLineString(Geometry):
    """A collection of line strings."""

    def __init__(
        self,
        layout: Layout,
        flat_coords: Optional[Iterable[float]] = None,
        ends: Optional[Iterable[int]] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, ends, srid=srid)

    def set_coords(
        self, coords: Optional[Iterable[Iterable[Sequence[float]]]]
    ) -> "MultiLineString":
        """Set the lines; every coordinate must have ``stride`` ordinates."""
        flat: list = []
        ends: list = []
        for line in coords or ():
            flat.extend(_flatten(line, self.stride))
            ends.append(len(flat))
        self.flat_coords, self.ends = flat, ends
        return self

    def _spans(self) -> Iterator[tuple]:
        start = 0
        for end in self.ends:
            yield start, end
            start = end

    def coords(self) -> list:
        return [_inflate(self.flat_coords, s, e, self.stride) for s, e in self._spans()]

    def line_string(self, i: int) -> LineString:
        """Return the ith line string."""
        offset = self.ends[i - 1] if i > 0 else 0
        if offset == self.ends[i]:
            return LineString(self.layout)
        return LineString(self.layout, self.flat_coords[offset : self.ends[i]])

    def num_line_strings(self) -> int:
        return len(self.ends)

    def push(self, line: LineString) -> "MultiLineString":
        """Append a line string with the same layout."""
        if line.layout != self.layout:
            raise LayoutMismatchError(line.layout, self.layout)
        self.flat_coords.extend(line.flat_coords)
        self.ends.append(len(self.flat_coords))
        return self

    def area(self) -> float:
        return 0.0

    def length(self) -> float:
        """Return the sum of the lengths of the line strings."""
        return sum(_length(self.flat_coords, s, e, self.stride) for s, e in self._spans())

    def reverse(self) -> None:
        """Reverse every line string in place."""
        for start, end in list(self._spans()):
            _reverse_span(self.flat_coords, start, end, self.stride)


class MultiPolygon(Geometry):
    """A collection of polygons."""

    def __init__(
        self,
        layout: Layout,
        flat_coords: Optional[Iterable[float]] = None,
        endss: Optional[Iterable[Iterable[int]]] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, endss=endss, srid=srid)

    def set_coords(
        self, coords: Optional[Iterable[Iterable[Iterable[Sequence[float]]]]]
    ) -> "MultiPolygon":
        """Set the polygons; every coordinate must have ``stride`` ordinates."""
        flat: list = []
        endss: list = []
        for polygon in coords or ():
            ends: list = []
            for ring in polygon:
                flat.extend(_flatten(ring, self.stride))
                ends.append(len(flat))
            endss.append(ends)
        self.flat_coords, self.endss = flat, endss
        return self

    def _polygon_spans(self) -> Iterator[tuple]:
        offset = 0
        for ends in self.endss:
            yield offset, ends
            if ends:
                offset = ends[-1]

    def _ring_spans(self) -> Iterator[tuple]:
        for offset, ends in self._polygon_spans():
            start = offset
            for end in ends:
                yield start, end
                start = end

    def coords(self) -> list:
        result = []
        for offset, ends in self._polygon_spans():
            rings = []
            start = offset
            for end in ends:
                rings.append(_inflate(self.flat_coords, start, end, self.stride))
                start = end
            result.append(rings)
        return result

    def polygon(self, i: int) -> Polygon:
        """Return the ith polygon."""
        ends = self.endss[i]
        if not ends:
            return Polygon(self.layout)
        offset = next((e[-1] for e in reversed(self.endss[:i]) if e), 0)
        return Polygon(
            self.layout,
            self.flat_coords[offset : ends[-1]],
            [end - offset for end in ends],
        )

    def num_polygons(self) -> int:
        return len(self.endss)

    def push(self, polygon: Polygon) -> "MultiPolygon":
        """Append a polygon with the same layout."""
        if polygon.layout != self.layout:
            raise LayoutMismatchError(polygon.layout, self.layout)
        offset = len(self.flat_coords)
        self.endss.append([end + offset for end in polygon.ends])
        self.flat_coords.extend(polygon.flat_coords)
        return self

    def area(self) -> float:
        """Return the sum of the areas of the polygons."""
        return sum(self.polygon(i).area() for i in range(len(self.endss)))

    def length(self) -> float:
        """Return the sum of the perimeters of the polygons."""
        return sum(_length(self.flat_coords, s, e, self.stride) for s, e in self._ring_spans())

    def reverse(self) -> None:
        """Reverse every ring of every polygon in place."""
        for start, end in list(self._ring_spans()):
            _reverse_span(self.flat_coords, start, end, self.stride)


class GeometryCollection:
    """A collection of arbitrary geometries sharing one SRID."""

    def __init__(self, *geoms: Any, srid: int = 0) -> None:
        self._layout = Layout.NO_LAYOUT
        self._geoms: list = list(geoms)
        self.srid = srid

    @property
    def layout(self) -> Layout:
        """The fixed layout, or the smallest layout covering all geometries."""
        if self._layout != Layout.NO_LAYOUT:
            return self._layout
        widest = Layout.NO_LAYOUT
        for geom in self._geoms:
            layout = Layout(geom.layout)
            if layout == Layout.XYZ and widest == Layout.XYM:
                widest = Layout.XYZM
            elif layout == Layout.XYM and widest == Layout.XYZ:
                widest = Layout.XYZM
            elif layout > widest:
                widest = layout
        return widest

    @property
    def stride(self) -> int:
        return self.layout.stride()

    @property
    def flat_coords(self) -> list:
        raise TypeError("flat_coords is not defined on a GeometryCollection")

    @property
    def ends(self) -> list:
        raise TypeError("ends is not defined on a GeometryCollection")

    @property
    def endss(self) -> list:
        raise TypeError("endss is not defined on a GeometryCollection")

    def geom(self, i: int) -> Any:
        return self._geoms[i]

    def geoms(self) -> list:
        return list(self._geoms)

    def num_geoms(self) -> int:
        return len(self._geoms)

    def is_empty(self) -> bool:
        """Return whether every geometry in the collection is empty."""
        return all(geom.is_empty() for geom in self._geoms)

    def check_layout(self, layout: Layout) -> None:
        """Raise if any geometry does not have ``layout``."""
        layout = Layout(layout)
        if layout == Layout.NO_LAYOUT:
            return
        for geom in self._geoms:
            if geom.layout != layout:
                raise LayoutMismatchError(layout, geom.layout)

    def set_layout(self, layout: Layout) -> "GeometryCollection":
        """Fix the layout that every geometry must have."""
        self.check_layout(layout)
        self._layout = Layout(layout)
        return self

    def push(self, *args: Any) -> "GeometryCollection":
        """Append geometries; with a fixed layout they must all match it."""
        if self._layout != Layout.NO_LAYOUT:
            for geom in args:
                if geom.layout != self._layout:
                    raise LayoutMismatchError(geom.layout, self._layout)
        self._geoms.extend(args)
        return self

    def set_srid(self, srid: int) -> "GeometryCollection":
        self.srid = srid
        return self

    def __repr__(self) -> str:
        return f"GeometryCollection({self._geoms!r})"