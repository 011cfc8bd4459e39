# numvec/math/basis.py
"""
Фабрики канонических векторов: нулевой вектор и орты î, ĵ, k̂,
плюс орт N‑мерного пространства. Каждый вызов возвращает новый объект.
"""

from numvec.core.errors import DimensionError, IndexOutOfRange
from numvec.math.vector import Vector
from numvec.math.vector3d import Vector3d


def zero(dtype=None) -> Vector3d:
    return Vector3d(0.0, 0.0, 0.0, dtype=dtype)


def i_hat(dtype=None) -> Vector3d:
    return Vector3d(1.0, 0.0, 0.0, dtype=dtype)


def j_hat(dtype=None) -> Vector3d:
    return Vector3d(0.0, 1.0, 0.0, dtype=dtype)


def k_hat(dtype=None) -> Vector3d:
    return Vector3d(0.0, 0.0, 1.0, dtype=dtype)


def vec3(*components, dtype=None) -> Vector3d:
    """vec3() → нулевой вектор, vec3(i, j, k) → Vector3d(i, j, k)."""
    if not components:
        return zero(dtype)
    if len(components) != 3:
        raise DimensionError(f"vec3 takes zero or three components, got {len(components)}")
    return Vector3d(*components, dtype=dtype)


def basis(n: int, axis: int, dtype=None) -> Vector:
    """Орт длины `n` с единицей на позиции `axis`."""
    if n < 1:
        raise DimensionError(f"Vector dimension must be positive, got {n}")
    if not 0 <= axis < n:
        raise IndexOutOfRange(axis, n)
    components = [0.0] * n
    components[axis] = 1.0
    return Vector(components, dtype=dtype)
