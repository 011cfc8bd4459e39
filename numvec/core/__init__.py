"""
Базовые примитивы пакета: исключения.
"""

from .errors import (
    VecMathError,
    DomainError,
    IndexOutOfRange,
    ConversionError,
    DimensionError,
    ElementTypeError,
    BorrowError,
)

__all__ = [
    "VecMathError",
    "DomainError",
    "IndexOutOfRange",
    "ConversionError",
    "DimensionError",
    "ElementTypeError",
    "BorrowError",
]
