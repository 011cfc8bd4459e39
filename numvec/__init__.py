"""
numvec – векторы фиксированной размерности для Python.

Vector3d (i, j, k) и N‑мерный Vector поверх NumPy: арифметика,
скалярное/векторное произведение, проекция, нормализация, угол,
двусторонние итераторы.
"""

from numvec.utils import logger, enable_console_logging, Config
from numvec.core.errors import (
    VecMathError,
    DomainError,
    IndexOutOfRange,
    ConversionError,
    DimensionError,
    ElementTypeError,
    BorrowError,
)
from numvec.math import (
    Vector3d, Vector, Iter, IntoIter, IterMut, Slot,
    zero, i_hat, j_hat, k_hat, vec3, basis,
)

__version__ = "1.0.0"

__all__ = [
    "Vector3d",
    "Vector",
    "Iter",
    "IntoIter",
    "IterMut",
    "Slot",
    "zero",
    "i_hat",
    "j_hat",
    "k_hat",
    "vec3",
    "basis",
    "VecMathError",
    "DomainError",
    "IndexOutOfRange",
    "ConversionError",
    "DimensionError",
    "ElementTypeError",
    "BorrowError",
    "Config",
    "logger",
    "enable_console_logging",
]
