"""
webhdfs — клиент протокола WebHDFS (операции с метаданными HDFS по HTTP).

Рекомендованный импорт:
    from hdfsbox.webhdfs import Configuration, FileSystem, Path
"""

from hdfsbox.webhdfs.errors import (
    CatalogError,
    DecodeError,
    RemoteAccessControlError,
    RemoteError,
    RemoteFileAlreadyExistsError,
    RemoteFileNotFoundError,
    RemoteIllegalArgumentError,
    RemoteSecurityError,
    TransportError,
    UsageError,
    WebHdfsError,
)
from hdfsbox.webhdfs.types import BooleanResult, ContentSummary, FileChecksum, FileStatus, FileType, Path
from hdfsbox.webhdfs.operations import HttpVerb, Operation
from hdfsbox.webhdfs.config import Configuration
from hdfsbox.webhdfs.filesystem import FileSystem

__all__ = [
    "Configuration",
    "FileSystem",
    "Path",
    "FileStatus",
    "FileType",
    "ContentSummary",
    "FileChecksum",
    "BooleanResult",
    "Operation",
    "HttpVerb",
    "WebHdfsError",
    "TransportError",
    "RemoteError",
    "RemoteFileNotFoundError",
    "RemoteAccessControlError",
    "RemoteFileAlreadyExistsError",
    "RemoteIllegalArgumentError",
    "RemoteSecurityError",
    "DecodeError",
    "UsageError",
    "CatalogError",
]
