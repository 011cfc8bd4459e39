# numvec/math/numeric.py
"""
Числовой «тип элемента» векторов.

Элемент – numpy‑float (float16 / float32 / float64). Все промежуточные
вычисления идут в float64, а результат сужается обратно через
to_element / to_element_array. Сужение, при котором конечное значение
превращается в ±inf, считается ошибкой (ConversionError), а не тихим
переполнением.
"""

import math
import numbers
from typing import Iterable, Optional, Tuple

import numpy as np

from numvec.core.errors import ConversionError, DimensionError, ElementTypeError
from numvec.utils.config import Config

SUPPORTED_DTYPES = (
    np.dtype(np.float16),
    np.dtype(np.float32),
    np.dtype(np.float64),
)

# рабочая точность промежуточных вычислений
WORK_DTYPE = np.dtype(np.float64)


def resolve_dtype(dtype=None) -> np.dtype:
    """Привести `dtype` (None → Config()["dtype"]) к поддерживаемому np.dtype."""
    if dtype is None:
        dtype = Config()["dtype"]
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ElementTypeError(f"Unknown element type: {dtype!r}") from exc
    if resolved not in SUPPORTED_DTYPES:
        names = ", ".join(d.name for d in SUPPORTED_DTYPES)
        raise ElementTypeError(
            f"Unsupported element type {resolved.name!r}; expected one of: {names}"
        )
    return resolved


def _check_real(value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")


def to_element(value, dtype) -> np.floating:
    """Сузить скаляр до типа элемента."""
    _check_real(value)
    dtype = np.dtype(dtype)
    try:
        with np.errstate(over="ignore", invalid="ignore"):
            converted = dtype.type(value)
    except OverflowError as exc:
        raise ConversionError(f"{value!r} is not representable as {dtype.name}") from exc
    if not np.isfinite(converted) and math.isfinite(value):
        raise ConversionError(f"{value!r} is not representable as {dtype.name}")
    return converted


def to_element_array(values: Iterable, dtype) -> np.ndarray:
    """Сузить последовательность до 1‑D массива типа элемента."""
    dtype = np.dtype(dtype)
    if isinstance(values, np.ndarray):
        if values.dtype.kind not in "iuf":
            raise TypeError(f"Expected a real-valued array, got dtype {values.dtype.name}")
        if values.ndim != 1:
            raise DimensionError(f"Expected a 1-D array of components, got shape {values.shape}")
        items = values
    else:
        items = list(values)
        for item in items:
            _check_real(item)
    try:
        source = np.asarray(items, dtype=WORK_DTYPE)
    except OverflowError as exc:
        raise ConversionError(f"Value not representable as {dtype.name}: {exc}") from exc
    with np.errstate(over="ignore", invalid="ignore"):
        converted = source.astype(dtype)
    overflow = np.isfinite(source) & ~np.isfinite(converted)
    if overflow.any():
        bad = float(source[overflow][0])
        raise ConversionError(f"{bad!r} is not representable as {dtype.name}")
    return converted


# ----------------------------------------------------------------------
# Вычисления в рабочей точности (float64)
# ----------------------------------------------------------------------
def work_errstate():
    """Переполнение в float64 не предупреждение: его ловят narrow_* ниже."""
    return np.errstate(over="ignore", invalid="ignore", under="ignore")


def to_work(value) -> float:
    """Скаляр‑операнд в float64; слишком большое целое → ConversionError."""
    _check_real(value)
    try:
        return float(value)
    except OverflowError as exc:
        raise ConversionError(f"{value!r} is not representable as float64") from exc


def _all_finite(sources) -> bool:
    return all(bool(np.isfinite(s).all()) for s in sources)


def narrow_scalar(value, dtype, *sources) -> np.floating:
    """
    Сузить результат вычисления. ±inf / NaN, полученные из конечных
    операндов `sources`, – ConversionError (переполнение float64).
    """
    if not math.isfinite(value) and _all_finite(sources):
        raise ConversionError(f"Result is not representable as {np.dtype(dtype).name}")
    return to_element(value, dtype)


def narrow_array(work: np.ndarray, dtype, *sources) -> np.ndarray:
    """То же для массива компонент."""
    if not np.isfinite(work).all() and _all_finite(sources):
        raise ConversionError(f"Result is not representable as {np.dtype(dtype).name}")
    return to_element_array(work, dtype)


def zero(dtype=None) -> np.floating:
    return resolve_dtype(dtype).type(0.0)


def one(dtype=None) -> np.floating:
    return resolve_dtype(dtype).type(1.0)


def sqrt(x) -> float:
    return math.sqrt(float(x))


def acos(x) -> float:
    """acos с зажимом аргумента в [-1, 1] (погрешность округления)."""
    return math.acos(max(-1.0, min(1.0, float(x))))


def is_zero_divisor(x) -> bool:
    return float(x) == 0.0


def tolerances(rel_tol: Optional[float] = None,
               abs_tol: Optional[float] = None) -> Tuple[float, float]:
    """Подставить недостающие допуски из конфигурации."""
    cfg = Config()
    rel = cfg["rel_tol"] if rel_tol is None else rel_tol
    abs_ = cfg["abs_tol"] if abs_tol is None else abs_tol
    return float(rel), float(abs_)


def format_scalar(value, sign: bool = False) -> str:
    """Кратчайшая позиционная запись: 1.0 → "1", 2.5 → "2.5"."""
    return np.format_float_positional(value, sign=sign, trim="-")
