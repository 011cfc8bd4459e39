# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.

Каждый тест получает собственный экземпляр Config (файл во временной
папке), чтобы случайный numvec.json в рабочем каталоге не влиял на
результат.
"""

import sys
from pathlib import Path

import pytest

# Add path to numvec
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from numvec.utils.config import Config


# ----------------------------------------------------------------------
# Изолированная конфигурация
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def config(tmp_path) -> Config:
    """Чистый Config с путём во временной папке."""
    Config.reset()
    cfg = Config(str(tmp_path / "numvec.json"))
    yield cfg
    Config.reset()


# ----------------------------------------------------------------------
# Backend редукций: numba и NumPy
# ----------------------------------------------------------------------
@pytest.fixture(params=["numba", "numpy"])
def kernel_backend(request, config) -> str:
    """Прогоняет тест на обоих backend‑ах kernels."""
    config["use_numba"] = request.param == "numba"
    return request.param
