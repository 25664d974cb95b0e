"""
decode — разбор JSON-конвертов ответов WebHDFS в типизированные значения.

Принцип:
- схему ответа определяет операция, а не содержимое тела
- имена полей протокола сопоставляются точно (с учётом регистра)
- неизвестные поля игнорируются (совместимость с новыми версиями NameNode)
- несовпадение схемы — DecodeError, значения по умолчанию не подставляются

Конверты:
    Boolean          {"Boolean": true}  (документация Hadoop пишет "boolean" — принимаются оба)
    FileStatus       {"FileStatus": {...}}
    FileStatuses     {"FileStatuses": {"FileStatus": [...]}}
    ContentSummary   {"ContentSummary": {...}}
    FileChecksum     {"FileChecksum": {...}}
    Path             {"Path": "/user/name"}
"""

from __future__ import annotations

import json
from typing import Any

from hdfsbox.webhdfs.errors import DecodeError
from hdfsbox.webhdfs.operations import Envelope, Operation, spec_for
from hdfsbox.webhdfs.types import BooleanResult, ContentSummary, FileChecksum, FileStatus, FileType, Path

# (атрибут, поле протокола, тип, обязательное)
_FILE_STATUS_FIELDS: tuple[tuple[str, str, type, bool], ...] = (
    ("access_time", "accessTime", int, True),
    ("block_size", "blockSize", int, True),
    ("group", "group", str, True),
    ("length", "length", int, True),
    ("modification_time", "modificationTime", int, True),
    ("owner", "owner", str, True),
    ("path_suffix", "pathSuffix", str, True),
    ("permission", "permission", str, True),
    ("replication", "replication", int, True),
    ("symlink", "symlink", str, False),
    ("children_num", "childrenNum", int, False),
    ("file_id", "fileId", int, False),
)

_CONTENT_SUMMARY_FIELDS: tuple[tuple[str, str, type, bool], ...] = (
    ("directory_count", "directoryCount", int, True),
    ("file_count", "fileCount", int, True),
    ("length", "length", int, True),
    ("quota", "quota", int, True),
    ("space_consumed", "spaceConsumed", int, True),
    ("space_quota", "spaceQuota", int, True),
)

_FILE_CHECKSUM_FIELDS: tuple[tuple[str, str, type, bool], ...] = (
    ("algorithm", "algorithm", str, True),
    ("bytes", "bytes", str, True),
    ("length", "length", int, True),
)


def _text(body: bytes | str | None) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response body is not UTF-8: {e}") from e
    return body


def _fields(obj: Any, fields: tuple[tuple[str, str, type, bool], ...], where: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise DecodeError(f"{where}: expected JSON object, got {type(obj).__name__}")

    out: dict[str, Any] = {}
    for attr, key, kind, required in fields:
        if key not in obj:
            if required:
                raise DecodeError(f"{where}: missing field '{key}'")
            continue
        value = obj[key]
        # bool в Python является подклассом int; для числовых полей он не подходит
        if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            raise DecodeError(f"{where}: field '{key}' must be {kind.__name__}, got {value!r}")
        out[attr] = value
    return out


def _envelope(doc: dict, key: str) -> Any:
    if key not in doc:
        raise DecodeError(f"Response is missing '{key}' envelope (keys: {sorted(doc)})")
    return doc[key]


def file_status(obj: Any) -> FileStatus:
    kw = _fields(obj, _FILE_STATUS_FIELDS, "FileStatus")
    raw_type = obj.get("type")
    try:
        kw["type"] = FileType(raw_type)
    except ValueError:
        raise DecodeError(f"FileStatus: unknown type {raw_type!r}") from None
    return FileStatus(**kw)


def content_summary(obj: Any) -> ContentSummary:
    return ContentSummary(**_fields(obj, _CONTENT_SUMMARY_FIELDS, "ContentSummary"))


def file_checksum(obj: Any) -> FileChecksum:
    return FileChecksum(**_fields(obj, _FILE_CHECKSUM_FIELDS, "FileChecksum"))


def boolean(doc: dict) -> BooleanResult:
    if "Boolean" in doc:
        value = doc["Boolean"]
    elif "boolean" in doc:
        value = doc["boolean"]
    else:
        raise DecodeError(f"Response is missing 'Boolean' envelope (keys: {sorted(doc)})")
    if not isinstance(value, bool):
        raise DecodeError(f"Boolean envelope must hold true/false, got {value!r}")
    return BooleanResult(value=value)


def file_statuses(doc: dict) -> list[FileStatus]:
    outer = _envelope(doc, Envelope.FILE_STATUSES.value)
    if not isinstance(outer, dict):
        raise DecodeError("FileStatuses: expected JSON object")
    items = _envelope(outer, "FileStatus")
    if not isinstance(items, list):
        raise DecodeError("FileStatuses.FileStatus: expected JSON array")
    # порядок как прислал NameNode
    return [file_status(item) for item in items]


def parse_json(body: bytes | str | None) -> Any:
    text = _text(body)
    try:
        return json.loads(text)
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}", body=text[:512]) from e


def decode(op: Operation, body: bytes | str | None) -> Any:
    """
    Разбирает тело успешного ответа операции op.

    Возвращает:
    - BooleanResult / FileStatus / list[FileStatus] / ContentSummary / FileChecksum / Path
    - None, если операция допускает пустое тело и тело пустое
    """
    spec = spec_for(op)
    text = _text(body)

    if not text.strip():
        if spec.empty_ok:
            return None
        raise DecodeError(f"{op.value}: empty response body")

    doc = parse_json(text)
    if not isinstance(doc, dict):
        raise DecodeError(f"{op.value}: expected JSON object, got {type(doc).__name__}", body=text[:512])

    try:
        envelope = spec.envelope
        if envelope is Envelope.EMPTY:
            return None
        if envelope is Envelope.BOOLEAN:
            return boolean(doc)
        if envelope is Envelope.FILE_STATUS:
            return file_status(_envelope(doc, envelope.value))
        if envelope is Envelope.FILE_STATUSES:
            return file_statuses(doc)
        if envelope is Envelope.CONTENT_SUMMARY:
            return content_summary(_envelope(doc, envelope.value))
        if envelope is Envelope.FILE_CHECKSUM:
            return file_checksum(_envelope(doc, envelope.value))
        if envelope is Envelope.PATH:
            value = _envelope(doc, envelope.value)
            if not isinstance(value, str):
                raise DecodeError(f"Path envelope must hold a string, got {value!r}")
            return Path(value)
    except DecodeError as e:
        if e.body is None:
            e.body = text[:512]
        raise
    raise DecodeError(f"{op.value}: no decoder for envelope {spec.envelope!r}")
