"""
Настройка логирования приложения.

``setup_logging`` подключает к корневому логгеру консольный и, при
необходимости, файловый обработчик. Повторный вызов ничего не делает,
поэтому функцию безопасно вызывать при каждом создании приложения.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Настройка корневого логгера.

    Parameters
    ----------
    level : str
        Имя уровня логирования (``"DEBUG"``, ``"INFO"``), регистр не важен.
    logfile : Optional[str]
        Путь к файлу лога. Если не указан, файловый обработчик не создается.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
