"""
log — логирование hdfsbox через loguru.

Принцип:
- библиотека по умолчанию молчит (logger.disable("hdfsbox") в hdfsbox/__init__.py)
- приложение включает логи одним вызовом setup_logger()

Использование:
    from hdfsbox.base.log import get_logger
    log = get_logger(__name__)
    log.debug("WebHDFS request", verb="GET", url=url)
"""

from __future__ import annotations

import sys

from loguru import logger

_PACKAGE = "hdfsbox"
_HANDLER_IDS: list[int] = []


def get_logger(name: str):
    """Логгер модуля: общий loguru logger с привязанным полем module."""
    return logger.bind(module=name)


def setup_logger(level: str = "INFO", sink=None, serialize: bool = False):
    """
    Включает логи hdfsbox и добавляет sink (по умолчанию stderr).

    Повторный вызов заменяет ранее добавленные этой функцией sink'и,
    чужие sink'и приложения не трогает.
    """
    for handler_id in _HANDLER_IDS:
        logger.remove(handler_id)
    _HANDLER_IDS.clear()

    handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[module]}</cyan> | "
            "{message} | {extra}"
        ),
        filter=lambda record: (record["name"] or "").startswith(_PACKAGE) and "module" in record["extra"],
        serialize=serialize,
    )
    _HANDLER_IDS.append(handler_id)
    logger.enable(_PACKAGE)
    return get_logger(_PACKAGE)


def disable() -> None:
    """Выключает логи hdfsbox и снимает sink'и, добавленные setup_logger()."""
    for handler_id in _HANDLER_IDS:
        logger.remove(handler_id)
    _HANDLER_IDS.clear()
    logger.disable(_PACKAGE)
