"""
FileSystem — публичная точка входа клиента WebHDFS.

Каждый метод = один цикл:
    request.build() -> Transport.send() -> errors.raise_for_status() -> decode.decode()

Принципы:
- состояния между вызовами нет; Configuration неизменяема,
  поэтому один экземпляр можно использовать из нескольких потоков
  (пул соединений — забота requests.Session)
- повторов нет: один вызов метода = один HTTP-запрос
- ошибки не глотаются: TransportError / RemoteError / DecodeError / UsageError

Пример:
    from hdfsbox.webhdfs import Configuration, FileSystem, Path

    fs = FileSystem(Configuration(address="namenode:9870"))
    for st in fs.list_status(Path("/data")):
        print(st.path_suffix, st.type.value, st.length)
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Tuple

import requests

from hdfsbox.base.log import get_logger
from hdfsbox.base.net.http import Transport
from hdfsbox.webhdfs import decode as decoder
from hdfsbox.webhdfs import request as builder
from hdfsbox.webhdfs.config import Configuration
from hdfsbox.webhdfs.errors import RemoteFileNotFoundError, WebHdfsError, raise_for_status
from hdfsbox.webhdfs.operations import Operation
from hdfsbox.webhdfs.types import ContentSummary, FileChecksum, FileStatus, Path

log = get_logger(__name__)

PathLike = Path | str


def _as_path(path: PathLike) -> Path:
    return path if isinstance(path, Path) else Path(str(path))


class FileSystem:
    """Клиент WebHDFS (метаданные файловой системы)."""

    def __init__(
        self,
        config: Configuration,
        session: requests.Session | None = None,
        transport: Transport | None = None,
    ):
        self._config = config
        self._transport = transport or Transport(session=session, timeout=config.timeout)

    @property
    def config(self) -> Configuration:
        return self._config

    # --- Ядро ---

    def call(self, op: Operation, path: PathLike, params: Mapping[str, Any] | None = None) -> Any:
        """Выполняет операцию и возвращает разобранный результат (см. decode.decode)."""
        req = builder.build(self._config, op, _as_path(path), params)
        log.debug("WebHDFS call", op=op.value, verb=req.verb.value, url=req.url)

        try:
            rsp = self._transport.send(req.verb.value, req.url)
            raise_for_status(rsp.status_code, rsp.content, reason=rsp.reason)
            return decoder.decode(op, rsp.content)
        except WebHdfsError as e:
            log.debug("WebHDFS call failed", op=op.value, url=req.url, error_kind=type(e).__name__, error=str(e))
            raise

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "FileSystem":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- Изменения ---

    def rename(self, source: PathLike, destination: PathLike) -> bool:
        """Переименовывает/перемещает source в destination."""
        return self.call(Operation.RENAME, source, {"destination": _as_path(destination)}).value

    def mkdirs(self, path: PathLike, permission: int | None = None) -> bool:
        """Создаёт каталог (рекурсивно). permission по умолчанию — из Configuration."""
        if permission is None:
            permission = self._config.default_permission
        return self.call(Operation.MKDIRS, path, {"permission": permission}).value

    def create_symlink(self, destination: PathLike, link: PathLike, create_parent: bool = False) -> bool:
        """
        Создаёт симлинк link -> destination.

        NameNode может ответить пустым телом — это успех.
        """
        result = self.call(
            Operation.CREATESYMLINK,
            link,
            {"destination": _as_path(destination), "createParent": create_parent},
        )
        return True if result is None else result.value

    def delete(self, path: PathLike, recursive: bool = False) -> bool:
        return self.call(Operation.DELETE, path, {"recursive": recursive}).value

    def set_permission(self, path: PathLike, permission: int) -> None:
        self.call(Operation.SETPERMISSION, path, {"permission": permission})

    def set_owner(self, path: PathLike, owner: str | None = None, group: str | None = None) -> None:
        self.call(Operation.SETOWNER, path, {"owner": owner, "group": group})

    def set_replication(self, path: PathLike, replication: int | None = None) -> bool:
        if replication is None:
            replication = self._config.default_replication
        return self.call(Operation.SETREPLICATION, path, {"replication": replication}).value

    def set_times(
        self,
        path: PathLike,
        modification_time: int | None = None,
        access_time: int | None = None,
    ) -> None:
        """Времена — миллисекунды от эпохи; -1 оставляет значение без изменений."""
        self.call(
            Operation.SETTIMES,
            path,
            {"modificationtime": modification_time, "accesstime": access_time},
        )

    def truncate(self, path: PathLike, new_length: int) -> bool:
        """True — усечение завершено сразу; False — идёт восстановление последнего блока."""
        return self.call(Operation.TRUNCATE, path, {"newlength": new_length}).value

    # --- Чтение метаданных ---

    def get_file_status(self, path: PathLike) -> FileStatus:
        return self.call(Operation.GETFILESTATUS, path)

    def list_status(self, path: PathLike) -> list[FileStatus]:
        return self.call(Operation.LISTSTATUS, path)

    def get_content_summary(self, path: PathLike) -> ContentSummary:
        return self.call(Operation.GETCONTENTSUMMARY, path)

    def get_file_checksum(self, path: PathLike) -> FileChecksum:
        return self.call(Operation.GETFILECHECKSUM, path)

    def get_home_directory(self) -> Path:
        return self.call(Operation.GETHOMEDIRECTORY, Path("/"))

    # --- Дефолтные "удобные" методы ---

    def exists(self, path: PathLike) -> bool:
        """Проверяет существование пути (FileNotFoundException -> False)."""
        try:
            self.get_file_status(path)
        except RemoteFileNotFoundError:
            return False
        return True

    def listdir(self, path: PathLike) -> list[str]:
        """Возвращает имена (без путей) внутри каталога, в порядке NameNode."""
        return [st.path_suffix for st in self.list_status(path)]

    def walk(self, top: PathLike) -> Iterator[Tuple[str, list[str], list[str]]]:
        """Рекурсивный обход каталога (аналог os.walk, сверху вниз).

        Возвращает:
        - dirpath: путь каталога
        - dirnames: имена подкаталогов
        - filenames: имена файлов и симлинков

        Изменение dirnames на месте ограничивает дальнейший обход, как в os.walk.
        """
        stack: list[Path] = [_as_path(top)]

        while stack:
            current = stack.pop()
            dirnames: list[str] = []
            filenames: list[str] = []

            statuses = self.list_status(current)
            # LISTSTATUS файла отдаёт его собственный статус с пустым pathSuffix
            if len(statuses) == 1 and not statuses[0].is_dir and not statuses[0].path_suffix:
                continue

            for st in statuses:
                if st.is_dir:
                    dirnames.append(st.path_suffix)
                else:
                    filenames.append(st.path_suffix)

            yield current.path, dirnames, filenames

            for d in reversed(dirnames):
                stack.append(current.join(d))
