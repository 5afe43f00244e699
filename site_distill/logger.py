# site_distill/logger.py
"""
Логирование SiteDistill.

Все модули пишут в логгер ``SiteDistill``: строки ``Crawling: <url>``,
предупреждения о пропущенных страницах и итог обхода. По умолчанию вывод
идёт в stdout; CLI может добавить файл с ротацией (``--log-file``).

Движку этот модуль не обязателен: :class:`~site_distill.crawler.crawler.AsyncCrawler`
принимает любой :class:`logging.Logger`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteDistill"

#: rotate the log file at 5 MiB, keep three old files
MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUPS: Final[int] = 3

Level = Union[int, str]
PathLike = Union[str, Path]


def _handlers(fmt: str, log_file: Optional[PathLike]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file), maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
            )
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: Level = "INFO",
    log_file: Optional[PathLike] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Настроить логгер ``SiteDistill`` и вернуть его.

    ``replace_handlers=False`` добавляет обработчики к уже установленным
    вместо того, чтобы закрыть и заменить их.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    if replace_handlers:
        for old in list(lg.handlers):
            lg.removeHandler(old)
            old.close()
    for handler in _handlers(log_format, log_file):
        lg.addHandler(handler)
    lg.propagate = False
    return lg


def init_logging(
    level: Level = "INFO",
    log_file: Optional[PathLike] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Используется CLI: заменить обработчики и применить настройки."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
