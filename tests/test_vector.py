import pytest

from redic.vector import CAPACITY_STEP, Vector


def test_vector_push_back():
    v = Vector()
    v.append(123)
    assert len(v) == 1
    assert v.capacity == CAPACITY_STEP
    assert v[0] == 123


def test_vector_at():
    v = Vector()
    v.append(123)
    v.append(321)
    assert v[0] == 123
    assert v[1] == 321


def test_vector_erase_1():
    v = Vector()
    for item in (111, 222, 333, 444, 555):
        v.append(item)
    assert len(v) == 5
    assert v[1] == 222
    v.erase(2, 2)
    assert len(v) == 3
    assert v[1] == 222
    assert v[2] == 555


def test_vector_erase_2():
    v = Vector()
    for item in (111, 222, 333):
        v.append(item)
    assert len(v) == 3
    assert v[1] == 222
    v.erase(1, 2)
    assert len(v) == 1
    assert v[0] == 111


def test_clear():
    v = Vector()
    for item in (111, 222, 333):
        v.append(item)
    assert len(v) == 3
    v.clear()
    assert len(v) == 0


def test_append():
    v = Vector()
    v.extend([123, 456, 789])
    assert len(v) == 3
    assert v[0] == 123
    assert v[1] == 456
    assert v[2] == 789


def test_resize():
    v = Vector()
    v.extend([123, 456, 789])
    assert len(v) == 3
    assert v.capacity == 4
    v.resize(5)
    assert len(v) == 5
    assert v.capacity == 8


def test_resize_shrinks_and_keeps_capacity():
    v = Vector([1, 2, 3, 4, 5])
    v.resize(2)
    assert list(v) == [1, 2]
    assert v.capacity == 8


def test_constructor_and_iteration():
    v = Vector(range(6))
    assert list(v) == [0, 1, 2, 3, 4, 5]
    assert v.capacity == 8


def test_erase_out_of_range():
    v = Vector([1, 2, 3])
    with pytest.raises(IndexError):
        v.erase(2, 2)


def test_resize_negative():
    v = Vector()
    with pytest.raises(ValueError):
        v.resize(-1)


def test_clear_keeps_capacity():
    v = Vector(range(9))
    capacity = v.capacity
    v.clear()
    assert v.capacity == capacity
    assert list(v) == []