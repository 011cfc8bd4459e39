# numvec/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Библиотека сама ничего не печатает – консольный
# вывод включается явно через enable_console_logging().
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger() -> logging.Logger:
    log = logging.getLogger("numvec")
    if not any(isinstance(h, logging.NullHandler) for h in log.handlers):
        log.addHandler(logging.NullHandler())
    return log


logger = init_logger()


def enable_console_logging(level: int = logging.INFO) -> logging.Logger:
    """Включить вывод в консоль в формате движка."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger
