# tests/conftest.py
"""
Общие фикстуры: образцы ответов NameNode и поддельная requests.Session.
"""

import pytest
import requests
from unittest.mock import MagicMock

from hdfsbox.webhdfs import Configuration, FileSystem


LIST_STATUS_RSP = """
{
  "FileStatuses":
  {
    "FileStatus":
    [
      {
        "accessTime"      : 1320171722771,
        "blockSize"       : 33554432,
        "group"           : "supergroup",
        "length"          : 24930,
        "modificationTime": 1320171722771,
        "owner"           : "webuser",
        "pathSuffix"      : "a.patch",
        "permission"      : "644",
        "replication"     : 1,
        "type"            : "FILE"
      },
      {
        "accessTime"      : 0,
        "blockSize"       : 0,
        "group"           : "supergroup",
        "length"          : 0,
        "modificationTime": 1320895981256,
        "owner"           : "szetszwo",
        "pathSuffix"      : "bar",
        "permission"      : "711",
        "replication"     : 0,
        "type"            : "DIRECTORY"
      }
    ]
  }
}
"""

FILE_STATUS_RSP = """
{
  "FileStatus":
  {
    "accessTime"      : 0,
    "blockSize"       : 0,
    "group"           : "supergroup",
    "length"          : 0,
    "modificationTime": 1320173277227,
    "owner"           : "webuser",
    "pathSuffix"      : "",
    "permission"      : "777",
    "replication"     : 0,
    "type"            : "DIRECTORY"
  }
}
"""

CONTENT_SUMMARY_RSP = """
{
  "ContentSummary":
  {
    "directoryCount": 2,
    "fileCount"     : 1,
    "length"        : 24930,
    "quota"         : -1,
    "spaceConsumed" : 24930,
    "spaceQuota"    : -1
  }
}
"""

FILE_CHECKSUM_RSP = """
{
  "FileChecksum":
  {
    "algorithm": "MD5-of-1MD5-of-512CRC32",
    "bytes"    : "eadb10de24aa315748930df6e185c0d ...",
    "length"   : 28
  }
}
"""

FILE_NOT_FOUND_RSP = """
{
  "RemoteException":
  {
    "exception"    : "FileNotFoundException",
    "javaClassName": "java.io.FileNotFoundException",
    "message"      : "File does not exist: /foo/a.patch"
  }
}
"""


def make_response(status_code: int = 200, body: str | bytes = "", reason: str = "OK") -> requests.Response:
    """Настоящий requests.Response с заданным статусом и телом."""
    r = requests.Response()
    r.status_code = status_code
    r._content = body.encode("utf-8") if isinstance(body, str) else body
    r.reason = reason
    return r


def make_session(*responses: requests.Response) -> MagicMock:
    """Поддельная Session: request() отдаёт ответы по очереди."""
    session = MagicMock(spec=requests.Session)
    if len(responses) == 1:
        session.request.return_value = responses[0]
    else:
        session.request.side_effect = list(responses)
    return session


def sent_request(session: MagicMock, index: int = -1) -> tuple[str, str]:
    """(verb, url) запроса, ушедшего в транспорт."""
    call = session.request.call_args_list[index]
    return call.args[0], call.args[1]


@pytest.fixture
def config():
    return Configuration(address="namenode:9870")


@pytest.fixture
def make_fs(config):
    """Фабрика FileSystem поверх поддельной сессии: make_fs(response) -> (fs, session)."""
    def _make(*responses: requests.Response, cfg: Configuration | None = None):
        session = make_session(*responses)
        return FileSystem(cfg or config, session=session), session
    return _make
