"""Tests for geometry/vector.py"""

import pytest

from geometry.vector import Vector


class TestBasics:
    def test_coordinates(self):
        v = Vector(1, 2, 3)
        assert (v.x, v.y, v.z) == (1, 2, 3)
        assert v.dim == 3
        assert v[1] == 2
        assert str(v) == "(1, 2, 3)"
        assert repr(v) == "Vector(1, 2, 3)"

    def test_needs_two_coordinates(self):
        with pytest.raises(ValueError):
            Vector(1)
        with pytest.raises(ValueError):
            Vector()

    def test_origin_and_with_coord(self):
        assert Vector.origin(4) == Vector(0, 0, 0, 0)
        v = Vector(1, 2, 3)
        assert v.with_coord(1, 42) == Vector(1, 42, 3)
        assert v == Vector(1, 2, 3)

    def test_lexicographic_order_and_hash(self):
        assert sorted([Vector(1, 2), Vector(0, 5), Vector(1, 0)]) == [
            Vector(0, 5),
            Vector(1, 0),
            Vector(1, 2),
        ]
        assert len({Vector(1, 2), Vector(1, 2)}) == 1

    def test_copy_keeps_type(self):
        import copy

        v = Vector(1, 2)
        assert copy.deepcopy(v) == v
        assert isinstance(copy.deepcopy(v), Vector)


class TestArithmetic:
    def test_operations(self):
        a, b = Vector(1, 2, 3), Vector(10, 20, 30)
        assert a + b == a.plus(b) == Vector(11, 22, 33)
        assert b - a == Vector(9, 18, 27)
        assert -a == a.opposite() == Vector(-1, -2, -3)
        assert a * 3 == 3 * a == Vector(3, 6, 9)

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError, match="dimensions"):
            Vector(1, 2) + Vector(1, 2, 3)
        with pytest.raises(ValueError):
            Vector(1, 2, 3).minus(Vector(1, 2))

    def test_distances(self):
        a = Vector(1, -2, 2)
        assert a.dist1() == 5
        assert a.dist_max() == 2
        assert a.dist_sq() == 9
        assert a.dist2() == 3.0
        assert a.dist1(Vector(0, 0, 0)) == 5
        assert Vector(1, 1).dist_max(Vector(4, -1)) == 3


class TestNeighbors:
    def test_neighbors(self):
        v = Vector(5, 5, 5)
        neighbors = list(v.neighbors())
        assert len(neighbors) == 6
        assert neighbors == sorted(neighbors)
        assert all(v.dist1(n) == 1 for n in neighbors)
        assert list(v.neighbors_and_self()) == sorted([*neighbors, v])

    @pytest.mark.parametrize("dim", [2, 3, 4])
    def test_extended_neighbors(self, dim):
        v = Vector.origin(dim)
        extended = list(v.extended_neighbors())
        assert len(extended) == 3**dim - 1
        assert extended == sorted(extended)
        assert all(v.dist_max(n) == 1 for n in extended)
        assert len(list(v.extended_neighbors_and_self())) == 3**dim
