# flatgeom

Geometry types for geospatial work. Every geometry keeps its coordinates in
a single flat list of floats (`flat_coords`), together with a `Layout` that
says how many ordinates each coordinate has: `Layout.XY`, `Layout.XYZ`,
`Layout.XYM`, `Layout.XYZM`, or `Layout(n)` for `n > 4`. Multi-part
geometries record where each part ends in `ends` (or `endss` for
multi-polygons).

The package has no dependencies outside the standard library.

## Installation

```
pip install flatgeom
```

## Geometries

- `flatgeom.geometry`: `Point`, `LineString`, `LinearRing`, `Polygon`
- `flatgeom.multi`: `MultiPoint`, `MultiLineString`, `MultiPolygon`,
  `GeometryCollection`

```python
from flatgeom.base import Layout
from flatgeom.geometry import Polygon

square = Polygon(Layout.XY).set_coords(
    [[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]]
)
print(square.area())    # 1.0
print(square.length())  # 4.0
```

`set_coords` returns the geometry, so calls can be chained. Each geometry
also offers `coords()`, `set_srid()`, `clone()` (a deep copy), `swap()` and
`is_empty()`; the line and polygon types have `reverse()`, which reverses
each line or ring in place.

- `Point(layout)` starts with every ordinate zero; `Point.new_empty(layout)`
  has no coordinates, and `Point.from_flat_maybe_empty(layout, flat)` gives
  an empty point when every ordinate is the NaN returned by
  `point_empty_coord()`. `x()`, `y()`, `z()` and `m()` read the ordinates;
  `z()` and `m()` return 0 when the layout has no such ordinate.
- `LineString.interpolate(val, dim)` returns the index and fraction at which
  ordinate `dim` reaches `val`; it raises `ValueError` on an empty line.
  `sub_line_string(start, stop)` returns part of the line.
- `LinearRing.area()` is signed: counter-clockwise rings are positive.
  `Polygon.area()` subtracts the areas of the holes from the outer ring.
- `Polygon.push(ring)`, `MultiLineString.push(line)`,
  `MultiPoint.push(point)` and `MultiPolygon.push(polygon)` append a part of
  the same layout.

Coordinates whose length does not match the layout raise
`StrideMismatchError`; combining geometries of different layouts raises
`LayoutMismatchError`. Both derive from `GeomError` in `flatgeom.base`.
`flatgeom.geometry.set_srid(g, srid)` raises `UnsupportedTypeError` for
values that are not geometries.

A `MultiPoint` may hold empty points, given as `None`:

```python
from flatgeom.base import Layout
from flatgeom.multi import MultiPoint

mp = MultiPoint(Layout.XY).set_coords([None, (1, 2), None])
print(mp.coords())  # [None, [1, 2], None]
print(mp.ends)      # [0, 2, 2]
```

`GeometryCollection(*geoms)` holds geometries of any type. Its `layout` is
the smallest one covering all of its members (an `XYZ` point and an `XYM`
point together give `XYZM`), unless `set_layout()` has fixed it, after which
`push()` accepts only geometries of that layout. It has no flat coordinates:
reading `flat_coords`, `ends` or `endss` raises `TypeError`.

## Other helpers

- `flatgeom.base.transform_in_place(g, f)` calls `f` on every coordinate of
  `g` as a `Coord`, which `f` changes in place, and writes the results back.
- `flatgeom.base.Coord` is a list of floats with `x()`, `y()`, `set()` and
  `equal(layout, other)`, under which NaN ordinates compare equal.
- `flatgeom.units` converts between radians, degrees and metres on a sphere
  of radius `EARTH_RADIUS` (`radians_to_length`, `length_to_radians`,
  `degrees_to_radians`, `radians_to_degrees`), normalises angles with
  `bearing_to_azimuth` (0 to 360) and `azimuth_to_bearing` (-180 to 180),
  and formats distances with `format_meters` (`"12.500 m"`).
- `flatgeom.sorting.sort_flat_coords(layout, coords, is_less)` sorts a flat
  coordinate list in place; `sort_flat_coords_2d(layout, coords)` sorts by
  x, then y, using `is_less_2d`.
- `flatgeom.transform.unique_coords(layout, compare, coord_data)` drops
  repeated coordinates, keeping first occurrences in input order.
  `TreeSet(layout, compare)` holds coordinates ordered by a `Compare`
  strategy (by default x, then y); `insert()` returns whether the coordinate
  was new and `to_flat_list()` returns them in order.
- `flatgeom.geomtest.coords_equal_rel(c1, c2, epsilon)` compares coordinates
  within a relative tolerance.

## What it does not do

The package holds and measures geometries; it does not read or write any
file or wire format (WKT, WKB, GeoJSON and the like), does not compute
bounding boxes, and has no great-circle distance, bearing or simplification
functions. Lengths and areas are planar, computed on the x and y ordinates.
There is no command-line tool.

## Tests

```
pip install -e ".[test]"
pytest
```