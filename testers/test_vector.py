# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from numvec.core.errors import (
    ConversionError,
    DimensionError,
    DomainError,
    ElementTypeError,
    IndexOutOfRange,
)
from numvec.math.vector import Vector
from numvec.math.vector3d import Vector3d


# ----------------------------------------------------------------------
# Конструирование
# ----------------------------------------------------------------------
def test_dimensions_are_derived():
    v = Vector([1, 2, 3, 4, 5])
    assert v.dimensions == 5
    assert len(v) == 5
    assert v.dtype == np.float64


def test_from_numpy_and_generators():
    assert Vector(np.array([1.0, 2.0])) == Vector([1, 2])
    assert Vector(x * 2 for x in range(3)) == Vector([0, 2, 4])


def test_empty_vector_rejected():
    with pytest.raises(DimensionError):
        Vector([])


def test_zero():
    z = Vector.zero(4)
    assert z == Vector([0, 0, 0, 0])
    assert Vector.zero(2, dtype=np.float32).dtype == np.float32
    with pytest.raises(DimensionError):
        Vector.zero(0)


def test_bad_components():
    with pytest.raises(TypeError):
        Vector([1, "a"])
    with pytest.raises(ElementTypeError):
        Vector([1, 2], dtype="int32")
    with pytest.raises(ConversionError):
        Vector([1, 1e6], dtype=np.float16)


def test_from_vector3d_and_back():
    v3 = Vector3d(1, 2, 3, dtype=np.float32)
    v = Vector.from_vector3d(v3)
    assert v == Vector([1, 2, 3])
    assert v.dtype == np.float32
    assert Vector3d.from_iter(v) == v3


def test_repr():
    assert repr(Vector([1, -2.5, 3])) == "Vector([1, -2.5, 3])"


# ----------------------------------------------------------------------
# Арифметика
# ----------------------------------------------------------------------
def test_elementwise_ops():
    a = Vector([1, 2, 3, 4])
    b = Vector([4, 3, 2, 1])
    assert a + b == Vector([5, 5, 5, 5])
    assert a - b == Vector([-3, -1, 1, 3])
    assert a * 2 == Vector([2, 4, 6, 8])
    assert 2 * a == a * 2
    assert a / 4 == Vector([0.25, 0.5, 0.75, 1])
    assert -a == Vector([-1, -2, -3, -4])


def test_properties_hold():
    a = Vector([0.5, -1.25, 3, 8])
    b = Vector([2, 0.1, -7, 1e-3])
    c = Vector([-3, 4, 0.3, 2])
    assert a + b == b + a
    assert ((a + b) + c).is_close(a + (b + c))
    assert a + Vector.zero(4) == a
    assert ((a * 3.3) / 3.3).is_close(a)


def test_dimension_mismatch():
    with pytest.raises(DimensionError):
        Vector([1, 2]) + Vector([1, 2, 3])
    with pytest.raises(DimensionError):
        Vector([1, 2]).dot(Vector([1, 2, 3]))


def test_no_mixing_with_vector3d():
    with pytest.raises(TypeError):
        Vector([1, 2, 3]) + Vector3d(1, 2, 3)
    assert Vector([1, 2, 3]) != Vector3d(1, 2, 3)


def test_divide_by_zero():
    with pytest.raises(DomainError):
        Vector([1, 2]) / 0
    v = Vector([1, 2])
    with pytest.raises(DomainError):
        v /= 0.0
    assert v == Vector([1, 2])


def test_in_place_equivalent_to_pure():
    a = Vector([0.3, 1.7, -2.2])
    b = Vector([1.1, -0.4, 5.0])
    expected = ((a + b) - b * 0.5) * 2.5 / 3
    alias = a
    a += b
    a -= b * 0.5
    a *= 2.5
    a /= 3
    assert a is alias
    assert a == expected
    assert a.dimensions == 3


def test_index():
    v = Vector([1, 2, 3, 4])
    assert v[3] == 4
    v[3] = 10
    assert v[3] == 10
    with pytest.raises(IndexOutOfRange):
        v[4]
    with pytest.raises(IndexOutOfRange):
        v[-1]


# ----------------------------------------------------------------------
# Геометрия (оба backend‑а kernels)
# ----------------------------------------------------------------------
def test_magnitude(kernel_backend):
    assert Vector([3, 4]).magnitude() == 5
    assert Vector([1, 2, 2, 4]).magnitude() == 5
    assert Vector([1, 2, 3]).magnitude() == pytest.approx(3.7416573)


def test_dot(kernel_backend):
    a = Vector([1, 2, 3, 4])
    b = Vector([5, 6, 7, 8])
    assert a.dot(b) == 70
    assert a.dot(b) == b.dot(a)


def test_unit_vector(kernel_backend):
    unit = Vector([3, 4]).unit_vector()
    assert unit.is_close(Vector([0.6, 0.8]))
    assert unit.magnitude() == pytest.approx(1.0)
    assert Vector([1, -7, 0.5, 2, 9]).unit_vector().magnitude() == pytest.approx(1.0)


def test_unit_vector_of_zero(kernel_backend):
    with pytest.raises(DomainError):
        Vector.zero(5).unit_vector()


def test_angle(kernel_backend):
    assert Vector([1, 0]).angle_rad(Vector([0, 1])) == pytest.approx(math.pi / 2)
    a = Vector([1, 2, 3, 4, 5])
    assert a.angle_rad(a) == pytest.approx(0.0, abs=1e-6)
    with pytest.raises(DomainError):
        a.angle_rad(Vector.zero(5))


def test_project(kernel_backend):
    result = Vector.project(Vector([1, 0, 0, 0]), Vector([1, 1, 0, 0]))
    assert result == Vector([0.5, 0.5, 0, 0])
    with pytest.raises(DomainError):
        Vector.project(Vector([1, 0]), Vector.zero(2))


def test_float32_results(kernel_backend):
    v = Vector([3, 4], dtype=np.float32)
    assert isinstance(v.magnitude(), np.float32)
    assert isinstance(v.dot(v), np.float32)
    assert v.unit_vector().dtype == np.float32


@pytest.mark.parametrize("scale", [1e200, 1e-200])
def test_extreme_magnitudes(kernel_backend, scale):
    v = Vector([scale, scale])
    assert v.magnitude() == pytest.approx(math.sqrt(2) * scale, rel=1e-12)
    assert v.unit_vector().magnitude() == pytest.approx(1.0)
    assert v.angle_rad(v) == pytest.approx(0.0, abs=1e-6)
    assert v.angle_rad(Vector([scale, 0])) == pytest.approx(math.pi / 4)


def test_overflow_in_float64():
    v = Vector([1e308, -1e308, 1])
    with pytest.raises(ConversionError):
        v * 10
    with pytest.raises(ConversionError):
        v - Vector([-1e308, 1e308, 0])
    with pytest.raises(ConversionError):
        v * 10 ** 400


def test_only_flat_arrays():
    with pytest.raises(DimensionError):
        Vector(np.zeros((2, 2)))
    with pytest.raises(DimensionError):
        Vector(np.array(1.0))


# ----------------------------------------------------------------------
# Лексикографический порядок
# ----------------------------------------------------------------------
def test_ordering():
    assert Vector([1, 2, 3]) < Vector([1, 2, 4])
    assert Vector([1, 5, 0]) > Vector([1, 2, 9])
    assert Vector([1, 2, 3]) <= Vector([1, 2, 3])
    assert Vector([1, 2, 3]) >= Vector([1, 2, 3])
    assert not Vector([1, 2, 3]) < Vector([1, 2, 3])
    assert sorted([Vector([2, 0]), Vector([1, 9]), Vector([1, 1])]) == [
        Vector([1, 1]), Vector([1, 9]), Vector([2, 0])
    ]


def test_ordering_with_nan_is_partial():
    a = Vector([float("nan"), 1])
    b = Vector([0, 1])
    assert not a < b
    assert not a <= b
    assert not a > b
    assert not a >= b
    # NaN дальше первой различающейся компоненты не участвует
    assert Vector([0, 1, float("nan")]) < Vector([0, 2, 0])


def test_ordering_requires_same_shape():
    with pytest.raises(DimensionError):
        Vector([1, 2]) < Vector([1, 2, 3])
    with pytest.raises(TypeError):
        Vector([1, 2, 3]) < Vector3d(1, 2, 3)
