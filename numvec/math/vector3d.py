# numvec/math/vector3d.py
"""
Трёхмерный вектор (i, j, k) на базе NumPy.

Компоненты хранятся в массиве типа элемента (float16/32/64); длина,
скалярное и векторное произведения считаются по именованным
компонентам в float64 и сужаются обратно в тип элемента.
"""

from typing import Iterable

import numpy as np

from numvec.core.errors import DimensionError
from numvec.math import numeric
from numvec.math.base import VectorBase

# i, j, k с комбинируемой циркумфлексой (U+0302)
BASIS_LABELS = ("î", "ĵ", "k̂")


class Vector3d(VectorBase):
    """Вектор в базисе î, ĵ, k̂."""

    __slots__ = ()

    def __init__(self, i: float = 0.0, j: float = 0.0, k: float = 0.0, dtype=None):
        dtype = numeric.resolve_dtype(dtype)
        self._v = np.array(
            [numeric.to_element(c, dtype) for c in (i, j, k)], dtype=dtype
        )
        self._borrow = None

    @classmethod
    def from_iter(cls, values: Iterable[float], dtype=None) -> "Vector3d":
        """Ровно три значения; тип элемента берётся у исходного вектора, если он вектор."""
        if dtype is None and isinstance(values, VectorBase):
            dtype = values.dtype
        items = list(values)
        if len(items) != 3:
            raise DimensionError(f"Vector3d requires exactly three components, got {len(items)}")
        return cls(*items, dtype=dtype)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def i(self):
        return self._v[0]

    @i.setter
    def i(self, value: float) -> None:
        self[0] = value

    @property
    def j(self):
        return self._v[1]

    @j.setter
    def j(self, value: float) -> None:
        self[1] = value

    @property
    def k(self):
        return self._v[2]

    @k.setter
    def k(self, value: float) -> None:
        self[2] = value

    # -----------------------------------------------------------------
    # редукции по именованным компонентам
    # -----------------------------------------------------------------
    def _sum_squares(self, work: np.ndarray) -> float:
        i, j, k = (float(c) for c in work)
        return i * i + j * j + k * k

    def _dot(self, work: np.ndarray, other_work: np.ndarray) -> float:
        i1, j1, k1 = (float(c) for c in work)
        i2, j2, k2 = (float(c) for c in other_work)
        return i1 * i2 + j1 * j2 + k1 * k2

    def cross(self, other: "Vector3d") -> "Vector3d":
        """Векторное произведение (правило правой руки); не коммутативно."""
        self._check_compatible(other)
        i1, j1, k1 = self.to_tuple()
        i2, j2, k2 = other.to_tuple()
        work = np.array([
            j1 * k2 - k1 * j2,
            k1 * i2 - i1 * k2,
            i1 * j2 - j1 * i2,
        ], dtype=numeric.WORK_DTYPE)
        return self._from_work(work, self._result_dtype(other), other._v)

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        i, j, k = self._v
        return (
            f"{numeric.format_scalar(i)}{BASIS_LABELS[0]}"
            f" {numeric.format_scalar(j, sign=True)}{BASIS_LABELS[1]}"
            f" {numeric.format_scalar(k, sign=True)}{BASIS_LABELS[2]}"
        )

    def __repr__(self) -> str:
        parts = ", ".join(numeric.format_scalar(c) for c in self._v)
        return f"Vector3d({parts})"
