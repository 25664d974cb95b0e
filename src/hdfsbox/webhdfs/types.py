"""
types — типы данных WebHDFS.

Назначение:
- Path: удалённый путь (просто носитель строки, равенство по значению)
- FileStatus / ContentSummary / FileChecksum: снимки метаданных из ответов NameNode
- BooleanResult: единый конверт операций, чей результат — один флаг

Принцип:
- все типы неизменяемые; это снимки, а не "живые" дескрипторы
- имена полей — snake_case, соответствие полям протокола задаётся в decode.py
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Path:
    """Удалённый путь в пространстве имён HDFS."""

    path: str

    def __str__(self) -> str:
        return self.path

    def join(self, name: str) -> "Path":
        # корень "/" не должен давать "//name"
        if self.path == "/":
            return Path(f"/{name}")
        return Path(f"{self.path.rstrip('/')}/{name}")

    @property
    def name(self) -> str:
        return posixpath.basename(self.path.rstrip("/"))


class FileType(str, Enum):
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    SYMLINK = "SYMLINK"


@dataclass(frozen=True, slots=True)
class FileStatus:
    """Метаданные файла/каталога (GETFILESTATUS, элемент LISTSTATUS).

    Времена — миллисекунды от эпохи.
    permission — восьмеричная строка без ведущего нуля ("755").
    symlink/children_num/file_id отдаются не всеми версиями NameNode.
    """

    access_time: int
    block_size: int
    group: str
    length: int
    modification_time: int
    owner: str
    path_suffix: str
    permission: str
    replication: int
    type: FileType
    symlink: str | None = None
    children_num: int | None = None
    file_id: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.type is FileType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.type is FileType.FILE

    @property
    def is_symlink(self) -> bool:
        return self.type is FileType.SYMLINK


@dataclass(frozen=True, slots=True)
class ContentSummary:
    """Сводка по поддереву (GETCONTENTSUMMARY). quota/space_quota = -1 — не задано."""

    directory_count: int
    file_count: int
    length: int
    quota: int
    space_consumed: int
    space_quota: int


@dataclass(frozen=True, slots=True)
class FileChecksum:
    """Контрольная сумма файла (GETFILECHECKSUM).

    length — длина дескриптора дайджеста в байтах, а не длина файла.
    """

    algorithm: str
    bytes: str
    length: int


@dataclass(frozen=True, slots=True)
class BooleanResult:
    value: bool

    def __bool__(self) -> bool:
        return self.value
