"""
operations — закрытый каталог операций WebHDFS.

Каждая операция статически связана с:
- HTTP-глаголом
- кодом операции (значение параметра op=...)
- списком параметров в объявленном порядке (порядок = порядок в query string)
- конвертом ответа

Каталог не расширяется во время выполнения.
Полнота каталога проверяется при импорте модуля.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hdfsbox.webhdfs.errors import CatalogError


class HttpVerb(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class Envelope(str, Enum):
    """Ключ верхнего уровня, под которым лежит результат операции."""

    BOOLEAN = "Boolean"
    FILE_STATUS = "FileStatus"
    FILE_STATUSES = "FileStatuses"
    CONTENT_SUMMARY = "ContentSummary"
    FILE_CHECKSUM = "FileChecksum"
    PATH = "Path"
    EMPTY = ""  # успешный ответ без тела


class Operation(str, Enum):
    # чтение метаданных
    GETFILESTATUS = "GETFILESTATUS"
    LISTSTATUS = "LISTSTATUS"
    GETCONTENTSUMMARY = "GETCONTENTSUMMARY"
    GETFILECHECKSUM = "GETFILECHECKSUM"
    GETHOMEDIRECTORY = "GETHOMEDIRECTORY"
    # изменения
    RENAME = "RENAME"
    MKDIRS = "MKDIRS"
    CREATESYMLINK = "CREATESYMLINK"
    DELETE = "DELETE"
    SETPERMISSION = "SETPERMISSION"
    SETOWNER = "SETOWNER"
    SETREPLICATION = "SETREPLICATION"
    SETTIMES = "SETTIMES"
    TRUNCATE = "TRUNCATE"


@dataclass(frozen=True)
class Param:
    name: str
    required: bool = True


@dataclass(frozen=True)
class OperationSpec:
    """Описание операции в каталоге.

    empty_ok:
      - True: пустое тело 2xx считается успехом без значения
    """
    verb: HttpVerb
    code: str
    params: tuple[Param, ...]
    envelope: Envelope
    empty_ok: bool = False

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params)


def _spec(
    op: Operation,
    verb: HttpVerb,
    envelope: Envelope,
    *params: Param,
    empty_ok: bool = False,
) -> tuple[Operation, OperationSpec]:
    return op, OperationSpec(verb=verb, code=op.value, params=tuple(params), envelope=envelope, empty_ok=empty_ok)


_CATALOG: dict[Operation, OperationSpec] = dict(
    [
        _spec(Operation.GETFILESTATUS, HttpVerb.GET, Envelope.FILE_STATUS),
        _spec(Operation.LISTSTATUS, HttpVerb.GET, Envelope.FILE_STATUSES),
        _spec(Operation.GETCONTENTSUMMARY, HttpVerb.GET, Envelope.CONTENT_SUMMARY),
        _spec(Operation.GETFILECHECKSUM, HttpVerb.GET, Envelope.FILE_CHECKSUM),
        _spec(Operation.GETHOMEDIRECTORY, HttpVerb.GET, Envelope.PATH),
        _spec(Operation.RENAME, HttpVerb.PUT, Envelope.BOOLEAN, Param("destination")),
        _spec(Operation.MKDIRS, HttpVerb.PUT, Envelope.BOOLEAN, Param("permission")),
        _spec(
            Operation.CREATESYMLINK,
            HttpVerb.PUT,
            Envelope.BOOLEAN,
            Param("destination"),
            Param("createParent"),
            empty_ok=True,
        ),
        _spec(Operation.DELETE, HttpVerb.DELETE, Envelope.BOOLEAN, Param("recursive")),
        _spec(Operation.SETPERMISSION, HttpVerb.PUT, Envelope.EMPTY, Param("permission"), empty_ok=True),
        _spec(
            Operation.SETOWNER,
            HttpVerb.PUT,
            Envelope.EMPTY,
            Param("owner", required=False),
            Param("group", required=False),
            empty_ok=True,
        ),
        _spec(Operation.SETREPLICATION, HttpVerb.PUT, Envelope.BOOLEAN, Param("replication")),
        _spec(
            Operation.SETTIMES,
            HttpVerb.PUT,
            Envelope.EMPTY,
            Param("modificationtime", required=False),
            Param("accesstime", required=False),
            empty_ok=True,
        ),
        _spec(Operation.TRUNCATE, HttpVerb.POST, Envelope.BOOLEAN, Param("newlength")),
    ]
)

_missing = [op.name for op in Operation if op not in _CATALOG]
if _missing:
    raise CatalogError(f"Operations without catalog entry: {', '.join(_missing)}")
del _missing


def spec_for(op: Operation) -> OperationSpec:
    """Возвращает описание операции; неизвестная операция — CatalogError."""
    # строка "RENAME" равна Operation.RENAME по значению, поэтому тип проверяется явно
    if not isinstance(op, Operation) or op not in _CATALOG:
        raise CatalogError(f"Unknown WebHDFS operation: {op!r}")
    return _CATALOG[op]


def verb_for(op: Operation) -> HttpVerb:
    return spec_for(op).verb


def code_for(op: Operation) -> str:
    return spec_for(op).code


def is_read_only(op: Operation) -> bool:
    return spec_for(op).verb is HttpVerb.GET
