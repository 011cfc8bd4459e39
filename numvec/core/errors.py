# numvec/core/errors.py
"""
Иерархия исключений numvec.

Каждая ошибка наследует ещё и ближайшее встроенное исключение, поэтому
ловить можно как VecMathError, так и, например, ValueError / IndexError.
"""


class VecMathError(Exception):
    """Базовый класс всех ошибок numvec."""


class DomainError(VecMathError, ValueError):
    """Операция не определена для операндов (нулевой вектор, деление на ноль)."""


class IndexOutOfRange(VecMathError, IndexError):
    """Индекс компоненты вне ``[0, N)``."""

    def __init__(self, index, length: int):
        super().__init__(f"Index out of bounds for vector of length {length}: {index}")
        self.index = index
        self.length = length


class ConversionError(VecMathError, OverflowError):
    """Вычисленное значение не представимо в типе элемента вектора."""


class DimensionError(VecMathError, ValueError):
    """Неверное число компонент или векторы разной длины."""


class ElementTypeError(VecMathError, TypeError):
    """Запрошенный dtype элемента не поддерживается."""


class BorrowError(VecMathError, RuntimeError):
    """Вектор эксклюзивно занят живым изменяемым итератором."""
