import copy

import pytest

from drillbook.vector import Vector


def test_empty_vector():
    vector = Vector()
    assert len(vector) == 0
    assert vector.capacity() == 0
    assert list(vector) == []


def test_built_from_values_has_matching_capacity():
    vector = Vector([1, 2, 3, 4, 5])
    assert len(vector) == 5
    assert vector.capacity() == 5
    assert list(vector) == [1, 2, 3, 4, 5]


def test_push_back_growth_from_empty():
    vector = Vector()
    capacities = []
    for value in range(1, 11):
        vector.push_back(value)
        capacities.append(vector.capacity())
    assert list(vector) == list(range(1, 11))
    assert capacities[0] == 1
    assert vector.capacity() == 16
    for before, after in zip(capacities, capacities[1:]):
        assert after in (before, 2 * before)


def test_capacity_never_below_size():
    vector = Vector([7, 8])
    for value in range(20):
        vector.push_back(value)
        assert vector.capacity() >= len(vector)


def test_push_back_doubles_full_vector():
    vector = Vector([1, 2, 3])
    vector.push_back(4)
    assert vector.capacity() == 2 * 3
    assert list(vector) == [1, 2, 3, 4]


def test_clear_keeps_capacity():
    vector = Vector()
    for value in range(5):
        vector.push_back(value)
    capacity = vector.capacity()
    vector.clear()
    assert len(vector) == 0
    assert not list(vector)
    assert vector.capacity() == capacity


def test_push_after_clear_overwrites():
    vector = Vector([1, 2, 3])
    vector.clear()
    vector.push_back(9)
    assert list(vector) == [9]
    assert vector.capacity() == 3


def test_getitem_and_negative_index():
    vector = Vector([10, 20, 30])
    assert vector[0] == 10
    assert vector[-1] == 30
    assert vector[1:] == [20, 30]


def test_getitem_out_of_range():
    vector = Vector([1, 2, 3])
    vector.clear()
    with pytest.raises(IndexError):
        vector[0]
    with pytest.raises(IndexError):
        Vector([1])[5]


def test_swap_exchanges_contents_and_capacity():
    first = Vector()
    second = Vector([1, 2, 3, 4, 5])
    first.swap(second)
    assert list(first) == [1, 2, 3, 4, 5]
    assert first.capacity() == 5
    assert list(second) == []
    assert second.capacity() == 0


def test_copy_is_independent():
    original = Vector([1, 2, 3])
    duplicate = copy.copy(original)
    duplicate.push_back(4)
    assert list(original) == [1, 2, 3]
    assert duplicate == Vector([1, 2, 3, 4])
    assert original.capacity() == 3