"""
errors — корневые исключения hdfsbox, нужные инфраструктурному слою.

Остальная таксономия (RemoteError, DecodeError, UsageError, ...) — в hdfsbox.webhdfs.errors.
"""

from __future__ import annotations


class WebHdfsError(Exception):
    """Базовый класс всех ошибок hdfsbox."""


class TransportError(WebHdfsError):
    """Транспорт не смог выполнить запрос (исходное исключение — в __cause__)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.message = message
        self.url = url
