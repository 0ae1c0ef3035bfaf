"""
Налаштування логування для простору імен 'ncube'.
Бібліотека лише пише в logging.getLogger(__name__); обробники вмикає застосунок.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Консольний обробник (stdout) + опційний файл.

    Args:
        level: рівень логування (logging.DEBUG, logging.INFO, ...)
        log_file: шлях до файлу логу, якщо потрібен.
    """
    logger = logging.getLogger("ncube")
    logger.setLevel(level)

    # повторний виклик не дублює обробники
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
