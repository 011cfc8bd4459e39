"""
    numvec – ядра редукций

    Скалярное произведение и сумма квадратов по 1‑D массивам float64 для
    N‑мерного Vector. Каждое ядро есть в двух вариантах: JIT‑цикл numba и
    обычный NumPy; диспетчер выбирает по Config()["use_numba"].

"""

from numba import njit
import numpy as np

from numvec.utils.config import Config
from numvec.utils.logger import logger

##########################################################################################
# Ядра numba JIT
##########################################################################################

@njit(fastmath=False)
def dot_nb_core(
    vec1,
    vec2):
    """
    Скалярное произведение двух 1D векторов
    vec1, vec2: форма (N,)
    возвращает: float64
    """
    out = 0.0
    for n in range(vec1.shape[0]):
        out += vec1[n] * vec2[n]
    return out


@njit(fastmath=False)
def sum_squares_nb_core(
    vec):
    """
    Сумма квадратов компонент 1D вектора
    vec: форма (N,)
    возвращает: float64
    """
    out = 0.0
    for n in range(vec.shape[0]):
        out += vec[n] * vec[n]
    return out


##########################################################################################
# Запасной вариант на NumPy
##########################################################################################

def dot_np_core(vec1, vec2):
    return float(np.dot(vec1, vec2))


def sum_squares_np_core(vec):
    return float(np.dot(vec, vec))


##########################################################################################
# Диспетчер
##########################################################################################

_backend = None


def _use_numba() -> bool:
    global _backend
    use_numba = bool(Config()["use_numba"])
    backend = "numba" if use_numba else "numpy"
    if backend != _backend:
        logger.debug(f"[kernels] reduction backend: {backend}")
        _backend = backend
    return use_numba


def _as_work(vec) -> np.ndarray:
    return np.ascontiguousarray(vec, dtype=np.float64)


def dot(vec1, vec2) -> float:
    """Скалярное произведение в float64."""
    a, b = _as_work(vec1), _as_work(vec2)
    if _use_numba():
        return float(dot_nb_core(a, b))
    return dot_np_core(a, b)


def sum_squares(vec) -> float:
    """Сумма квадратов в float64."""
    a = _as_work(vec)
    if _use_numba():
        return float(sum_squares_nb_core(a))
    return sum_squares_np_core(a)
