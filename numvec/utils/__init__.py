# numvec/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger                 – logging.Logger пакета ("numvec")
    * enable_console_logging – включить консольный вывод
    * Config                 – JSON‑конфигурация (singleton)
"""

from .logger import logger, enable_console_logging
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "enable_console_logging", "Config", "DEFAULT_CONFIG"]
