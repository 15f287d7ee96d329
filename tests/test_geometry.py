import math

import pytest

from flatgeom.base import (
    Coord,
    Layout,
    LayoutMismatchError,
    StrideMismatchError,
    UnsupportedTypeError,
    transform_in_place,
)
from flatgeom.geometry import (
    LinearRing,
    LineString,
    Point,
    Polygon,
    point_empty_coord,
    set_srid,
)

XY, XYZ, XYM, XYZM = Layout.XY, Layout.XYZ, Layout.XYM, Layout.XYZM

SQUARE = [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]
FIVE_GON = [[-3, -2], [-1, 4], [6, 1], [3, 10], [-4, 9], [-3, -2]]
HOLE = [[0, 6], [0, 8], [2, 8], [2, 6], [0, 6]]


@pytest.mark.parametrize(
    "geometry, want",
    [
        (Point(XY), 0),
        (LineString(XY), 0),
        (LinearRing(XY), 0),
        (LinearRing(XY).set_coords(SQUARE), 1),
        (LinearRing(XY).set_coords([[0, 0], [1, 1], [1, 0], [0, 0]]), -0.5),
        (LinearRing(XY).set_coords(FIVE_GON), 60),
        (Polygon(XY), 0),
        (Polygon(XY).set_coords([SQUARE]), 1),
        (Polygon(XY).set_coords([[[0, 0], [1, 1], [1, 0], [0, 0]]]), -0.5),
        (Polygon(XY).set_coords([FIVE_GON]), 60),
        (Polygon(XY).set_coords([FIVE_GON, HOLE]), 56),
        (
            Polygon(XY).set_coords(
                [
                    [[0, 0], [3, 0], [3, 3], [0, 3], [0, 0]],
                    [[1, 1], [1, 2], [2, 2], [2, 1], [1, 1]],
                ]
            ),
            8,
        ),
    ],
)
def test_area(geometry, want):
    assert geometry.area() == want


INNER = [[0.25, 0.25], [0.75, 0.25], [0.75, 0.75], [0.25, 0.75], [0.25, 0.25]]


@pytest.mark.parametrize(
    "geometry, want",
    [
        (Point(XY), 0),
        (LineString(XY), 0),
        (LineString(XY).set_coords([[0, 0], [1, 0]]), 1),
        (LinearRing(XY), 0),
        (LinearRing(XY).set_coords(SQUARE), 4),
        (Polygon(XY), 0),
        (Polygon(XY).set_coords([SQUARE]), 4),
        (Polygon(XY).set_coords([SQUARE, INNER]), 6),
    ],
)
def test_length(geometry, want):
    assert geometry.length() == want


def test_transform_in_place():
    def bump(coord):
        for i in range(len(coord)):
            coord[i] += i + 1

    assert transform_in_place(Point(XY).set_coords([0, 0]), bump) == Point(XY, [1, 2])
    assert transform_in_place(Point(XYZ).set_coords([0, 0, 0]), bump) == Point(XYZ, [1, 2, 3])


def test_set_srid_unsupported():
    with pytest.raises(UnsupportedTypeError):
        set_srid(None, 4326)


@pytest.mark.parametrize("cls", [Point, LineString, LinearRing, Polygon])
def test_set_srid(cls):
    assert cls(Layout.NO_LAYOUT).set_srid(4326).srid == 4326
    assert set_srid(cls(Layout.NO_LAYOUT), 4326).srid == 4326


def test_reverse_linear_ring_and_line_string():
    for cls in (LinearRing, LineString):
        g = cls(XYZM).set_coords([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
        g.reverse()
        assert g == cls(XYZM).set_coords([[9, 10, 11, 12], [5, 6, 7, 8], [1, 2, 3, 4]])


def test_reverse_polygon():
    p = Polygon(XY).set_coords([[[1, 2], [3, 4], [5, 6]], [[7, 8], [9, 10], [11, 12]]])
    p.reverse()
    assert p == Polygon(XY).set_coords([[[5, 6], [3, 4], [1, 2]], [[11, 12], [9, 10], [7, 8]]])


@pytest.mark.parametrize(
    "point, layout, stride, flat",
    [
        (Point(XY), XY, 2, [0, 0]),
        (Point(XY).set_coords([1, 2]), XY, 2, [1, 2]),
        (Point(XYZ), XYZ, 3, [0, 0, 0]),
        (Point(XYZ).set_coords([1, 2, 3]), XYZ, 3, [1, 2, 3]),
        (Point(XYM), XYM, 3, [0, 0, 0]),
        (Point(XYM).set_coords([1, 2, 3]), XYM, 3, [1, 2, 3]),
        (Point(XYZM), XYZM, 4, [0, 0, 0, 0]),
        (Point(XYZM).set_coords([1, 2, 3, 4]), XYZM, 4, [1, 2, 3, 4]),
    ],
)
def test_point(point, layout, stride, flat):
    assert point.layout == layout
    assert point.stride == stride
    assert point.flat_coords == flat
    assert point.ends == []
    assert point.endss == []
    assert point.num_coords() == 1
    assert point.coords() == Coord(flat)
    clone = point.clone()
    assert clone == point
    assert clone.flat_coords is not point.flat_coords


@pytest.mark.parametrize(
    "coords, got", [(None, 0), ([], 0), ([1], 1), ([1, 2, 3], 3)]
)
def test_point_stride_mismatch(coords, got):
    with pytest.raises(StrideMismatchError) as info:
        Point(XY).set_coords(coords)
    assert info.value == StrideMismatchError(got, 2)


def test_point_stride_ok():
    assert Point(XY).set_coords([1, 2]).flat_coords == [1, 2]


def test_point_clone_and_swap():
    p1 = Point(XY).set_coords([1, 2])
    p2 = Point(XYZM).set_coords([3, 4, 5, 6])
    p1_clone, p2_clone = p1.clone(), p2.clone()
    p1.swap(p2)
    assert p1 == p2_clone
    assert p2 == p1_clone
    p1.swap(p2)
    assert p1 == p1_clone
    assert p2 == p2_clone


@pytest.mark.parametrize(
    "point, x, y, z, m",
    [
        (Point(XY).set_coords([1, 2]), 1, 2, 0, 0),
        (Point(XYZ).set_coords([1, 2, 3]), 1, 2, 3, 0),
        (Point(XYM).set_coords([1, 2, 3]), 1, 2, 0, 3),
        (Point(XYZM).set_coords([1, 2, 3, 4]), 1, 2, 3, 4),
    ],
)
def test_point_xyzm(point, x, y, z, m):
    assert (point.x(), point.y(), point.z(), point.m()) == (x, y, z, m)


def test_point_empty():
    empty_value = point_empty_coord()
    assert math.isnan(empty_value)
    p = Point.from_flat_maybe_empty(XY, [empty_value, empty_value])
    assert p.is_empty()
    assert p.flat_coords == []
    q = Point.from_flat_maybe_empty(XY, [empty_value, 1.0])
    assert not q.is_empty()
    assert q.flat_coords[1] == 1.0
    assert Point.new_empty(XYZ).is_empty()
    assert not Point(XYZ).is_empty()


LINEAR_CASES = [
    (XY, [[1, 2], [3, 4], [5, 6]], 2),
    (XYZ, [[1, 2, 3], [4, 5, 6], [7, 8, 9]], 3),
    (XYM, [[1, 2, 3], [4, 5, 6], [7, 8, 9]], 3),
    (XYZM, [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]], 4),
]


@pytest.mark.parametrize("cls", [LineString, LinearRing])
@pytest.mark.parametrize("layout, coords, stride", LINEAR_CASES)
def test_linear(cls, layout, coords, stride):
    g = cls(layout).set_coords(coords)
    assert g.layout == layout
    assert g.stride == stride
    assert g.flat_coords == [v for c in coords for v in c]
    assert g.ends == []
    assert g.endss == []
    assert g.coords() == coords
    assert g.num_coords() == len(coords)
    for i, c in enumerate(coords):
        assert g.coord(i) == c
    clone = g.clone()
    assert clone == g
    clone.flat_coords[0] = 100
    assert g.flat_coords[0] == 1


@pytest.mark.parametrize("cls", [LineString, LinearRing])
@pytest.mark.parametrize(
    "coords, got",
    [([[1, 2], []], 0), ([[1, 2], [1]], 1), ([[1, 2], [3, 4, 5]], 3)],
)
def test_linear_stride_mismatch(cls, coords, got):
    with pytest.raises(StrideMismatchError) as info:
        cls(XY).set_coords(coords)
    assert info.value == StrideMismatchError(got, 2)


@pytest.mark.parametrize("cls", [LineString, LinearRing])
@pytest.mark.parametrize("coords", [None, [], [[1, 2], [3, 4]]])
def test_linear_stride_ok(cls, coords):
    g = cls(XY).set_coords(coords)
    assert g.coords() == (coords or [])


@pytest.mark.parametrize(
    "val, i, f",
    [
        (-0.5, 0, 0.0),
        (0.0, 0, 0.0),
        (0.5, 0, 0.5),
        (1.0, 1, 0.0),
        (1.5, 1, 0.5),
        (2.0, 2, 0.0),
        (2.5, 2, 0.0),
    ],
)
def test_line_string_interpolate(val, i, f):
    ls = LineString(XYM).set_coords([[1, 2, 0], [2, 4, 1], [3, 8, 2]])
    assert ls.interpolate(val, 2) == (i, f)


def test_line_string_interpolate_empty():
    with pytest.raises(ValueError):
        LineString(XYM).interpolate(0, 0)


def test_sub_line_string():
    ls = LineString(XY).set_coords([[0, 1], [2, 3], [4, 5]])
    sub = ls.sub_line_string(0, 1)
    assert sub.coords() == [[0, 1]]
    assert ls.sub_line_string(1, 3).coords() == [[2, 3], [4, 5]]


def test_polygon():
    rings = [[[1, 2], [3, 4], [5, 6]], [[7, 8], [9, 10], [11, 12]]]
    p = Polygon(XY).set_coords(rings)
    assert p.layout == XY
    assert p.stride == 2
    assert p.coords() == rings
    assert p.flat_coords == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    assert p.ends == [6, 12]
    assert p.endss == []
    assert p.num_linear_rings() == 2
    for i, ring in enumerate(rings):
        assert p.linear_ring(i) == LinearRing(XY).set_coords(ring)
    clone = p.clone()
    assert clone == p
    clone.ends.append(99)
    assert p.ends == [6, 12]


@pytest.mark.parametrize(
    "coords, got",
    [([[[1, 2], []]], 0), ([[[1, 2], [1]]], 1), ([[[1, 2], [3, 4, 5]]], 3)],
)
def test_polygon_stride_mismatch(coords, got):
    with pytest.raises(StrideMismatchError) as info:
        Polygon(XY).set_coords(coords)
    assert info.value == StrideMismatchError(got, 2)


@pytest.mark.parametrize("coords", [None, [], [[[1, 2], [3, 4]]]])
def test_polygon_stride_ok(coords):
    assert Polygon(XY).set_coords(coords).coords() == (coords or [])


def test_polygon_push():
    p = Polygon(XY)
    assert p.is_empty()
    p.push(LinearRing(XY).set_coords(SQUARE))
    assert p.ends == [10]
    assert p.area() == 1
    assert not p.is_empty()
    with pytest.raises(LayoutMismatchError) as info:
        p.push(LinearRing(XYZ))
    assert info.value == LayoutMismatchError(XYZ, XY)