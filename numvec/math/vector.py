# numvec/math/vector.py
"""
N‑мерный вектор. Размерность задаётся при создании и больше не
меняется; она не хранится отдельно, а берётся из длины массива.
Редукции (скалярное произведение, сумма квадратов) идут через
numvec.math.kernels (numba или NumPy, см. Config()["use_numba"]).
"""

import operator
from typing import Iterable

from numvec.core.errors import DimensionError
from numvec.math import kernels, numeric
from numvec.math.base import VectorBase


class Vector(VectorBase):
    __slots__ = ()

    def __init__(self, components: Iterable[float], dtype=None):
        dtype = numeric.resolve_dtype(dtype)
        array = numeric.to_element_array(components, dtype)
        if array.shape[0] == 0:
            raise DimensionError("Vector requires at least one component")
        self._v = array
        self._borrow = None

    @classmethod
    def zero(cls, n: int, dtype=None) -> "Vector":
        if n < 1:
            raise DimensionError(f"Vector dimension must be positive, got {n}")
        return cls([0.0] * n, dtype=dtype)

    @classmethod
    def from_vector3d(cls, vector) -> "Vector":
        return cls._wrap(vector.as_np())

    @property
    def dimensions(self) -> int:
        return len(self)

    def _sum_squares(self, work) -> float:
        return kernels.sum_squares(work)

    def _dot(self, work, other_work) -> float:
        return kernels.dot(work, other_work)

    # -----------------------------------------------------------------
    # лексикографический порядок (частичный: с NaN ни одно из <, <=, >,
    # >= не выполняется)
    # -----------------------------------------------------------------
    def _compare(self, other, op):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        a, b = self.to_tuple(), other.to_tuple()
        for x, y in zip(a, b):
            if x != y:
                return op(x, y)
        return op(0, 0)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __repr__(self) -> str:
        parts = ", ".join(numeric.format_scalar(c) for c in self._v)
        return f"Vector([{parts}])"
