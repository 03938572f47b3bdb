"""Tests for geometry/box.py"""

import pytest

from geometry.box import Box
from geometry.pos import Pos
from geometry.ranges import Range
from geometry.vector import Vector


class TestBasics:
    def test_corners_and_ranges(self):
        a = Box.from_ranges(Range(5, 10), Range(12, 42))
        assert a.min == Vector(5, 12)
        assert a.max == Vector(10, 42)
        assert a.ranges() == [Range(5, 10), Range(12, 42)]
        assert a.dim == 2
        assert str(a) == "[(5, 12) .. (10, 42)]"

    def test_accepts_positions(self):
        b = Box(Pos(8, 24), Pos(20, 30))
        assert b.min == Vector(8, 24)
        assert isinstance(b.max, Vector)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError, match="dimensions"):
            Box(Vector(0, 0), Vector(1, 1, 1))

    def test_count(self):
        assert Box.from_ranges(Range(5, 10), Range(12, 42)).count == 6 * 31
        assert len(Box(Pos(8, 24), Pos(20, 30))) == 13 * 7
        assert Box(Vector(0, 0, 0), Vector(1, 2, 3)).count == 2 * 3 * 4

    def test_empty(self):
        assert Box(Vector(0, 0), Vector(0, -1)).is_empty()
        assert Box(Vector(0, 0), Vector(0, -1)).count == 0
        assert Box(Vector(5, 0), Vector(0, 5)).count == 0
        assert not Box(Vector(0, 0), Vector(0, 0)).is_empty()

    def test_contains(self):
        a = Box.from_ranges(Range(5, 10), Range(12, 42))
        assert not a.contains(Pos(10, 50))
        assert a.contains(Pos(10, 40))
        assert a.contains(a.min) and a.contains(a.max)
        assert Pos(7, 20) in a
        assert "x" not in a

    def test_contains_rejects_other_dimension(self):
        with pytest.raises(ValueError):
            Box(Vector(0, 0), Vector(1, 1)).contains(Vector(0, 0, 0))
        assert Vector(0, 0, 0) not in Box(Vector(0, 0), Vector(1, 1))


class TestIteration:
    def test_order(self):
        assert list(Box.from_ranges(Range(10, 13), Range(20, 22))) == [
            Vector(x, y) for x in range(10, 14) for y in range(20, 23)
        ]

    def test_stream_law(self):
        box = Box(Vector(-1, 2, 0), Vector(1, 4, 2))
        points = list(box.stream())
        assert len(points) == box.count
        assert points == sorted(points)
        assert len(set(points)) == len(points)
        assert all(box.contains(p) for p in points)
        assert box.contains_all(points)

    def test_small_boxes(self):
        assert list(Box.from_ranges(Range(10, 10), Range(20, 10))) == []
        assert list(Box.from_ranges(Range(10, 10), Range(20, 20))) == [Vector(10, 20)]
        assert list(Box.from_ranges(Range(10, 11), Range(20, 20))) == [
            Vector(10, 20),
            Vector(11, 20),
        ]


class TestBound:
    def test_bound(self):
        points = [Pos(42, 10), Pos(42, 11), Pos(43, 10), Pos(43, 11), Pos(44, 10), Pos(44, 11)]
        assert list(Box.bound([Pos(44, 10), Pos(42, 11)])) == [Vector(*p) for p in points]
        assert Box.bound(points) == Box(Pos(42, 10), Pos(44, 11))

    def test_bound_rejects_empty(self):
        with pytest.raises(ValueError):
            Box.bound([])

    def test_bound_rejects_mixed_dimensions(self):
        with pytest.raises(ValueError):
            Box.bound([(0, 0), (1, 1, 1)])


class TestOperations:
    def setup_method(self):
        self.a = Box.from_ranges(Range(5, 12), Range(8, 42))
        self.b = Box(Pos(8, 24), Pos(20, 30))
        self.c = Box.from_ranges(Range(8, 12), Range(24, 30))
        self.d = Box(Pos(5, 8), Pos(20, 42))

    def test_intersection(self):
        assert self.a.intersection(self.b) == self.c
        assert self.b.intersection(self.a) == self.c
        assert self.a.overlaps(self.b)
        assert self.a.overlaps(self.a)

    def test_disjoint_intersection_is_empty(self):
        e = Box(Pos(1, 1), Pos(5, 8))
        f = Box(Pos(10, 10), Pos(12, 12))
        assert e.intersection(f).is_empty()
        assert not e.overlaps(f)

    def test_contains_all(self):
        assert self.a.contains_all(self.c)
        assert self.b.contains_all(self.c)
        assert not self.c.contains_all(self.a)
        assert self.a.contains_all(list(self.c))
        assert not self.c.contains_all(list(self.a))

    def test_span(self):
        assert self.a.span(self.b) == self.d
        assert self.b.span(self.a) == self.d
        assert self.d.contains_all(self.a) and self.d.contains_all(self.b)

    def test_shift(self):
        assert self.d.contains_all(self.c.shift((8, 8)))
        assert not self.d.contains_all(self.c.shift((10, 10)))
        assert self.a.shift(Pos(100, 3000)) == Box.from_ranges(Range(105, 112), Range(3008, 3042))

    def test_extend(self):
        assert self.a.extend(3) == Box.from_ranges(Range(2, 15), Range(5, 45))
        assert self.a.extend(-2, 5) == Box.from_ranges(Range(7, 10), Range(3, 47))
        with pytest.raises(ValueError):
            self.a.extend(1, 2, 3)
