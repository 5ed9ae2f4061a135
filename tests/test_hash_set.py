"""
Tests for HashSet

Tests verify:
- Basic operations (add, has, delete, clear)
- Insertion order and stored key identity
- Cloning and iteration shapes
- Set algebra (union, intersection, difference, symmetric_difference)
- Set predicates (issubset, issuperset, isdisjoint)
"""

import pytest
from pyhashkey import HashSet, hash_tuple


def hash_point(p):
    return hash_tuple(p['x'], p['y'])


def equal_points(a, b):
    return a['x'] == b['x'] and a['y'] == b['y']


def point(x, y):
    return {'x': x, 'y': y}


def make_points(*coords):
    return HashSet(hash_point, equal_points, (point(x, y) for x, y in coords))


def coords(points):
    return [(p['x'], p['y']) for p in points]


class TestHashSetBasics:
    """Test basic operations on HashSet"""

    def test_empty_set(self):
        s = HashSet(hash_point, equal_points)
        assert len(s) == 0
        assert s.size == 0
        assert point(0, 0) not in s

    def test_add_and_has(self):
        s = HashSet(hash_point, equal_points)
        s.add(point(1, 2)).add(point(1, 3)).add(point(2, 1))

        assert s.has(point(1, 2))
        assert s.has(point(1, 3))
        assert s.has(point(2, 1))
        assert not s.has(point(3, 3))
        assert point(2, 1) in s

    def test_add_existing_item(self):
        """Adding an equal item keeps the size and the first instance"""
        first = point(1, 2)
        s = HashSet(hash_point, equal_points)
        s.add(first).add(point(5, 5))

        s.add(point(1, 2))

        assert s.size == 2
        assert next(iter(s)) is first

    def test_add_returns_self(self):
        s = HashSet(hash_point, equal_points)
        assert s.add(point(1, 2)) is s

    def test_delete(self):
        s = make_points((1, 2), (1, 3), (2, 1), (4, 4))

        assert s.delete(point(1, 2)) is True
        assert s.delete(point(9, 9)) is False

        assert s.size == 3
        assert not s.has(point(1, 2))
        assert s.has(point(1, 3))

    def test_discard(self):
        s = make_points((1, 2))
        s.discard(point(1, 2))
        s.discard(point(1, 2))
        assert len(s) == 0

    def test_clear(self):
        s = make_points((1, 2), (1, 3))
        s.clear()
        assert s.size == 0
        assert not s.has(point(1, 2))

    def test_initial_items_deduplicated(self):
        s = make_points((1, 1), (2, 2), (1, 1))
        assert coords(s) == [(1, 1), (2, 2)]

    def test_rejects_non_callable_functions(self):
        with pytest.raises(TypeError):
            HashSet(hash_point, None)


class TestHashSetIteration:
    """Test iteration shapes and order"""

    def test_keeps_original_insertion_order(self):
        s = HashSet(lambda n: n % 10, lambda a, b: a == b)
        for n in (1, 2, 3, 11, 22, 33):
            s.add(n)
        assert list(s) == [1, 2, 3, 11, 22, 33]

        s.add(2).add(11).add(4)
        assert list(s) == [1, 2, 3, 11, 22, 33, 4]

    def test_keys_values_entries(self):
        s = make_points((1, 2), (3, 4))
        assert coords(s.keys()) == [(1, 2), (3, 4)]
        assert coords(s.values()) == [(1, 2), (3, 4)]
        for key, value in s.entries():
            assert key is value
        assert len(list(s.entries())) == 2

    def test_for_each(self):
        s = make_points((1, 2), (3, 4), (5, 6))
        seen = []

        def callback(value, key, collection):
            assert value is key
            assert collection is s
            seen.append(key)

        s.for_each(callback)
        assert coords(seen) == [(1, 2), (3, 4), (5, 6)]


class TestHashSetClone:
    """Test clone independence"""

    def test_clone_survives_clearing_original(self):
        s = make_points((1, 2), (1, 3), (2, 1), (4, 4))

        clone = s.clone()
        s.clear()

        assert clone.size == 4
        assert clone.has(point(1, 2))

    def test_mutating_clone_leaves_original(self):
        s = make_points((1, 2), (1, 3))
        clone = s.clone()
        clone.add(point(7, 7))
        clone.delete(point(1, 2))

        assert coords(s) == [(1, 2), (1, 3)]
        assert coords(clone) == [(1, 3), (7, 7)]
        assert s.copy() == s


class TestHashSetOperations:
    """Test set algebra"""

    def test_union(self):
        s1 = make_points((1, 1), (2, 2))
        s2 = make_points((2, 2), (3, 3))
        assert coords(s1.union(s2)) == [(1, 1), (2, 2), (3, 3)]
        assert coords(s1 | s2) == [(1, 1), (2, 2), (3, 3)]
        assert len(s1) == 2

    def test_union_with_plain_iterable(self):
        s = make_points((1, 1))
        assert coords(s.union([point(1, 1), point(4, 4)])) == [(1, 1), (4, 4)]

    def test_intersection(self):
        s1 = make_points((1, 1), (2, 2), (3, 3))
        s2 = make_points((3, 3), (2, 2), (9, 9))
        assert coords(s1 & s2) == [(2, 2), (3, 3)]
        assert coords(s1.intersection([point(1, 1)])) == [(1, 1)]

    def test_difference(self):
        s1 = make_points((1, 1), (2, 2), (3, 3))
        s2 = make_points((2, 2))
        assert coords(s1 - s2) == [(1, 1), (3, 3)]
        assert coords(s1.difference([point(1, 1)])) == [(2, 2), (3, 3)]

    def test_symmetric_difference(self):
        s1 = make_points((1, 1), (2, 2))
        s2 = make_points((2, 2), (3, 3))
        assert coords(s1 ^ s2) == [(1, 1), (3, 3)]

    def test_predicates(self):
        small = make_points((1, 1))
        big = make_points((1, 1), (2, 2))
        other = make_points((5, 5))

        assert small.issubset(big)
        assert small <= big
        assert not big.issubset(small)
        assert big.issuperset(small)
        assert big >= small
        assert small.isdisjoint(other)
        assert not small.isdisjoint(big)

    def test_equality(self):
        assert make_points((1, 1), (2, 2)) == make_points((2, 2), (1, 1))
        assert make_points((1, 1)) != make_points((1, 1), (2, 2))
        assert make_points((1, 1)) != {(1, 1)}

    def test_operators_reject_other_types(self):
        with pytest.raises(TypeError):
            make_points((1, 1)) | [point(2, 2)]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(make_points((1, 1)))
