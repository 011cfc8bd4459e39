"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл на диск не пишется, пока не вызван save()).
"""

import json
from pathlib import Path
from numvec.utils.logger import logger

DEFAULT_CONFIG = {
    "dtype": "float64",
    "use_numba": True,
    "rel_tol": 1e-6,
    "abs_tol": 1e-9,
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "numvec.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр: следующий Config() перечитает файл."""
        cls._instance = None

    def _load(self):
        self.data = DEFAULT_CONFIG.copy()
        if not self.path.is_file():
            logger.debug("[Config] No config file – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"[Config] Ignoring {self.path}: top level is not an object")
            return
        self.data.update(loaded)
        logger.info(f"[Config] Loaded configuration from {self.path}.")

    def save(self):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
