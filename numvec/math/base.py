# numvec/math/base.py
"""
Общая часть Vector3d и Vector: хранение (numpy‑массив типа элемента),
индексирование, итераторы, арифметика и геометрия.

Подклассы задают только две редукции по float64‑массивам – _sum_squares()
и _dot() – и собственное представление. Геометрия передаёт в них
компоненты, при крайних величинах отмасштабированные к max|x| = 1
(см. _scaled).
"""

import math
import numbers
import operator
import weakref

import numpy as np

from numvec.core.errors import BorrowError, DimensionError, DomainError, IndexOutOfRange
from numvec.math import numeric
from numvec.math.iterators import Iter, IntoIter, IterMut
from numvec.utils.logger import logger


# диапазон max|x|, в котором редукции не масштабируются
_SCALE_LO, _SCALE_HI = 1e-150, 1e150


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class VectorBase:
    __slots__ = ("_v", "_borrow")

    # -----------------------------------------------------------------
    # конструирование без проверок (из уже суженного массива)
    # -----------------------------------------------------------------
    @classmethod
    def _wrap(cls, array: np.ndarray):
        obj = cls.__new__(cls)
        obj._v = array
        obj._borrow = None
        return obj

    def _from_work(self, work: np.ndarray, dtype, *sources):
        """
        Новый вектор того же типа из float64‑результата. Операнды – self и
        `sources`; если все они конечны, а результат нет – ConversionError.
        """
        return self._wrap(numeric.narrow_array(work, dtype, self._v, *sources))

    def _work(self) -> np.ndarray:
        return self._v.astype(numeric.WORK_DTYPE)

    # -----------------------------------------------------------------
    # редукции (float64) – задаются подклассами
    # -----------------------------------------------------------------
    def _sum_squares(self, work: np.ndarray) -> float:
        raise NotImplementedError

    def _dot(self, work: np.ndarray, other_work: np.ndarray) -> float:
        raise NotImplementedError

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def dtype(self) -> np.dtype:
        return self._v.dtype

    def __len__(self) -> int:
        return self._v.shape[0]

    def _check_compatible(self, other) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Expected {type(self).__name__}, got {type(other).__name__}"
            )
        if len(self) != len(other):
            raise DimensionError(
                f"Dimension mismatch: {len(self)} != {len(other)}"
            )

    def _result_dtype(self, other) -> np.dtype:
        return np.result_type(self.dtype, other.dtype)

    # -----------------------------------------------------------------
    # эксклюзивный заём (IterMut)
    # -----------------------------------------------------------------
    def _borrower(self):
        """Живой IterMut, держащий заём, или None (заём хранится weakref‑ом)."""
        if self._borrow is None:
            return None
        owner = self._borrow()
        if owner is None:
            self._borrow = None
        return owner

    def _ensure_unborrowed(self, action: str) -> None:
        if self._borrower() is not None:
            raise BorrowError(
                f"Cannot {action}: {type(self).__name__} is mutably borrowed"
            )

    def _acquire(self, owner) -> None:
        self._ensure_unborrowed("create a mutable iterator")
        self._borrow = weakref.ref(owner)
        logger.debug(f"[{type(self).__name__}] mutable borrow acquired")

    def _release(self, owner) -> None:
        if self._borrow is None:
            return
        # из финализатора weakref может быть уже мёртв
        current = self._borrow()
        if current is None or current is owner:
            self._borrow = None
            logger.debug(f"[{type(self).__name__}] mutable borrow released")

    # -----------------------------------------------------------------
    # индексирование (0 <= index < N, без отрицательных индексов)
    # -----------------------------------------------------------------
    def _check_index(self, index) -> int:
        try:
            idx = operator.index(index)
        except TypeError:
            raise TypeError(
                f"{type(self).__name__} indices must be integers, "
                f"not {type(index).__name__}"
            ) from None
        if not 0 <= idx < len(self):
            raise IndexOutOfRange(index, len(self))
        return idx

    def _get(self, idx: int):
        return self._v[idx]

    def _store(self, idx: int, value) -> None:
        self._v[idx] = numeric.to_element(value, self.dtype)

    def __getitem__(self, index):
        return self._get(self._check_index(index))

    def __setitem__(self, index, value) -> None:
        idx = self._check_index(index)
        self._ensure_unborrowed("assign a component")
        self._store(idx, value)

    # -----------------------------------------------------------------
    # итераторы
    # -----------------------------------------------------------------
    def iter(self) -> Iter:
        self._ensure_unborrowed("create a shared iterator")
        return Iter(self)

    def into_iter(self) -> IntoIter:
        self._ensure_unborrowed("create an owning iterator")
        return IntoIter(self)

    def iter_mut(self) -> IterMut:
        return IterMut(self)

    def __iter__(self) -> Iter:
        return self.iter()

    def __reversed__(self):
        return reversed(self.iter())

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def is_close(self, other, rel_tol: float = None, abs_tol: float = None) -> bool:
        """Покомпонентное сравнение с допуском (по умолчанию из Config)."""
        self._check_compatible(other)
        rel, abs_ = numeric.tolerances(rel_tol, abs_tol)
        return bool(np.allclose(self._work(), other._work(), rtol=rel, atol=abs_))

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._check_compatible(other)
        with numeric.work_errstate():
            work = self._work() + other._work()
        return self._from_work(work, self._result_dtype(other), other._v)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._check_compatible(other)
        with numeric.work_errstate():
            work = self._work() - other._work()
        return self._from_work(work, self._result_dtype(other), other._v)

    def __neg__(self):
        return self._wrap(-self._v)

    def __pos__(self):
        return self.copy()

    def __mul__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        factor = numeric.to_work(scalar)
        with numeric.work_errstate():
            work = self._work() * factor
        return self._from_work(work, self.dtype, factor)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        divisor = numeric.to_work(scalar)
        if numeric.is_zero_divisor(divisor):
            raise DomainError(f"Cannot divide {type(self).__name__} by zero")
        with numeric.work_errstate():
            work = self._work() / divisor
        return self._from_work(work, self.dtype, divisor)

    # -----------------------------------------------------------------
    # арифметика на месте (форма и тип элемента не меняются)
    # -----------------------------------------------------------------
    def _assign(self, result) -> None:
        self._v[:] = numeric.to_element_array(result._v, self.dtype)

    def __iadd__(self, other):
        self._ensure_unborrowed("add in place")
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __isub__(self, other):
        self._ensure_unborrowed("subtract in place")
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __imul__(self, scalar):
        self._ensure_unborrowed("scale in place")
        result = self.__mul__(scalar)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __itruediv__(self, scalar):
        self._ensure_unborrowed("divide in place")
        result = self.__truediv__(scalar)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    # -----------------------------------------------------------------
    # геометрия
    # -----------------------------------------------------------------
    def _scaled(self):
        """
        (s, x / s) в float64 для редукций. Пока max|x| в [1e-150, 1e150],
        квадраты и попарные произведения – нормальные конечные float64, и
        s = 1.0 (компоненты как есть). Вне этого диапазона s = max|x|, и
        компоненты после деления в [-1, 1]. Нулевой вектор → (0.0, x);
        с inf/NaN → (1.0, x).
        """
        work = self._work()
        scale = float(np.max(np.abs(work)))
        if scale == 0.0:
            return 0.0, work
        if not math.isfinite(scale) or _SCALE_LO <= scale <= _SCALE_HI:
            return 1.0, work
        return scale, work / scale

    def magnitude(self):
        """Евклидова длина, в типе элемента."""
        scale, scaled = self._scaled()
        with numeric.work_errstate():
            length = scale * numeric.sqrt(self._sum_squares(scaled))
        return numeric.narrow_scalar(length, self.dtype, self._v)

    def dot(self, other):
        """Скалярное произведение, в типе элемента."""
        self._check_compatible(other)
        scale_a, a = self._scaled()
        scale_b, b = other._scaled()
        with numeric.work_errstate():
            value = self._dot(a, b) * min(scale_a, scale_b) * max(scale_a, scale_b)
        return numeric.narrow_scalar(value, self._result_dtype(other), self._v, other._v)

    def unit_vector(self):
        """Нормализованная копия; DomainError для нулевого вектора."""
        scale, scaled = self._scaled()
        if scale == 0.0:
            raise DomainError(f"Cannot normalize a zero-length {type(self).__name__}")
        with numeric.work_errstate():
            work = scaled / numeric.sqrt(self._sum_squares(scaled))
        return self._from_work(work, self.dtype)

    def angle_rad(self, other):
        """Угол между векторами в радианах; DomainError, если один из них нулевой."""
        self._check_compatible(other)
        scale_a, a = self._scaled()
        scale_b, b = other._scaled()
        if scale_a == 0.0 or scale_b == 0.0:
            raise DomainError("Angle is undefined for a zero-length vector")
        with numeric.work_errstate():
            len_a = numeric.sqrt(self._sum_squares(a))
            len_b = numeric.sqrt(other._sum_squares(b))
            cos_angle = self._dot(a, b) / (len_a * len_b)
        return numeric.to_element(numeric.acos(cos_angle), self._result_dtype(other))

    @staticmethod
    def project(u, v):
        """Проекция `u` на `v`: (u·v / v·v) * v."""
        if not isinstance(u, VectorBase):
            raise TypeError(f"Expected a vector, got {type(u).__name__}")
        u._check_compatible(v)
        scale_u, a = u._scaled()
        scale_v, b = v._scaled()
        if scale_v == 0.0:
            raise DomainError("Cannot project onto a zero-length vector")
        with numeric.work_errstate():
            # u = s_u·a, v = s_v·b: масштаб s_v сокращается
            factor = u._dot(a, b) / v._sum_squares(b) * scale_u
            work = b * factor
        return v._from_work(work, u._result_dtype(v), u._v)

    # -----------------------------------------------------------------
    # приведение
    # -----------------------------------------------------------------
    def copy(self):
        return self._wrap(self._v.copy())

    def as_np(self) -> np.ndarray:
        """Копия массива компонент (тип элемента)."""
        return self._v.copy()

    def to_tuple(self) -> tuple:
        return tuple(float(x) for x in self._v)
