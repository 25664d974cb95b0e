"""
errors — таксономия ошибок клиента WebHDFS и классификация HTTP-ответов.

Виды ошибок:
- TransportError: соединение/таймаут/TLS (ошибка транспорта, до ответа NameNode)
- RemoteError: ответ не 2xx; содержимое RemoteException сохраняется как есть
- DecodeError: ответ 2xx, но тело не совпадает с конвертом операции
- UsageError: неверный аргумент на границе API (отклоняется до сетевого вызова)
- CatalogError: неизвестная операция (ошибка программиста, не пользователя)

Принцип:
- ни одна ошибка не глотается и не подменяется значением по умолчанию
"""

from __future__ import annotations

import json

from hdfsbox.base.errors import TransportError, WebHdfsError

__all__ = [
    "WebHdfsError",
    "TransportError",
    "DecodeError",
    "UsageError",
    "CatalogError",
    "RemoteError",
    "RemoteFileNotFoundError",
    "RemoteAccessControlError",
    "RemoteFileAlreadyExistsError",
    "RemoteIllegalArgumentError",
    "RemoteSecurityError",
    "classify",
    "raise_for_status",
    "remote_error",
    "is_success",
]


class DecodeError(WebHdfsError):
    """Тело успешного ответа не соответствует схеме операции."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.message = message
        self.body = body


class UsageError(WebHdfsError, ValueError):
    """Аргумент несовместим с операцией."""


class CatalogError(WebHdfsError, LookupError):
    """Операция отсутствует в каталоге."""


class RemoteError(WebHdfsError):
    """
    NameNode/DataNode вернул ответ не 2xx.

    Поля exception/java_class_name/message берутся из конверта RemoteException
    без изменений; если конверта нет — message содержит текст тела.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        exception: str | None = None,
        java_class_name: str | None = None,
    ):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.exception = exception
        self.java_class_name = java_class_name


class RemoteFileNotFoundError(RemoteError):
    pass


class RemoteAccessControlError(RemoteError):
    pass


class RemoteFileAlreadyExistsError(RemoteError):
    pass


class RemoteIllegalArgumentError(RemoteError):
    pass


class RemoteSecurityError(RemoteError):
    pass


_REMOTE_CLASSES: dict[str, type[RemoteError]] = {
    "FileNotFoundException": RemoteFileNotFoundError,
    "AccessControlException": RemoteAccessControlError,
    "FileAlreadyExistsException": RemoteFileAlreadyExistsError,
    "IllegalArgumentException": RemoteIllegalArgumentError,
    "SecurityException": RemoteSecurityError,
}


def _body_text(body: bytes | str | None) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def remote_error(status_code: int, body: bytes | str | None, reason: str | None = None) -> RemoteError:
    """
    Собирает RemoteError из ответа не 2xx.

    Ожидаемый формат тела:
        {"RemoteException": {"exception": ..., "javaClassName": ..., "message": ...}}

    Если тело не JSON или конверта нет — сообщение = текст тела
    (или reason, если тело пустое).
    """
    text = _body_text(body).strip()

    payload = None
    if text:
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict) and isinstance(parsed.get("RemoteException"), dict):
            payload = parsed["RemoteException"]

    if payload is None:
        return RemoteError(status_code=status_code, message=text or (reason or ""))

    exception = payload.get("exception")
    cls = _REMOTE_CLASSES.get(exception or "", RemoteError)
    return cls(
        status_code=status_code,
        message=str(payload.get("message", "")),
        exception=exception,
        java_class_name=payload.get("javaClassName"),
    )


def classify(status_code: int, body: bytes | str | None, reason: str | None = None) -> RemoteError | None:
    """
    Классифицирует ответ по статусу.

    Возвращает:
    - None для 2xx (дальше работает декодер)
    - RemoteError для остальных кодов (вызывающий код поднимает его)
    """
    if is_success(status_code):
        return None
    return remote_error(status_code, body, reason=reason)


def raise_for_status(status_code: int, body: bytes | str | None, reason: str | None = None) -> None:
    """Поднимает RemoteError, если ответ не 2xx."""
    err = classify(status_code, body, reason=reason)
    if err is not None:
        raise err
