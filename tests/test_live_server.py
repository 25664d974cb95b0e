# tests/test_live_server.py
"""
Настоящий HTTP-обмен с подставным NameNode (http.server в отдельном потоке).

Подставной сервер только записывает запросы и отдаёт заготовленный ответ;
все проверки формы запроса — обычные assert в тесте, а не падение процесса.
"""

import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
import requests

from conftest import FILE_NOT_FOUND_RSP, LIST_STATUS_RSP

from hdfsbox.base.net.url import parse_path, parse_query
from hdfsbox.webhdfs import Configuration, FileSystem, Path, RemoteFileNotFoundError, TransportError


class _NameNodeHandler(BaseHTTPRequestHandler):
    def _handle(self):
        self.server.seen.append((self.command, self.path))
        status, body = self.server.reply
        data = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    do_GET = do_PUT = do_POST = do_DELETE = _handle

    def log_message(self, format, *args):
        pass


@pytest.fixture
def namenode():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _NameNodeHandler)
    server.seen = []
    server.reply = (200, "")
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


def _fs_for(address: str) -> FileSystem:
    session = requests.Session()
    session.trust_env = False  # прокси из окружения не должны перехватывать 127.0.0.1
    return FileSystem(Configuration(address=address, timeout=5), session=session)


def test_rename_over_http(namenode):
    namenode.reply = (200, '{"Boolean":true}')
    fs = _fs_for(f"127.0.0.1:{namenode.server_address[1]}")

    assert fs.rename(Path("/testing"), Path("/testing/newname")) is True

    assert len(namenode.seen) == 1
    method, raw_path = namenode.seen[0]
    assert method == "PUT"
    assert parse_path(raw_path) == "/testing"
    assert parse_query(raw_path) == [("op", "RENAME"), ("destination", "/testing/newname")]


def test_list_status_over_http(namenode):
    namenode.reply = (200, LIST_STATUS_RSP)
    fs = _fs_for(f"127.0.0.1:{namenode.server_address[1]}")

    statuses = fs.list_status(Path("/test"))

    assert [s.path_suffix for s in statuses] == ["a.patch", "bar"]
    assert namenode.seen == [("GET", "/webhdfs/v1/test?op=LISTSTATUS")]


def test_remote_error_over_http(namenode):
    namenode.reply = (404, FILE_NOT_FOUND_RSP)
    fs = _fs_for(f"127.0.0.1:{namenode.server_address[1]}")

    with pytest.raises(RemoteFileNotFoundError) as exc:
        fs.get_file_status("/foo/a.patch")
    assert exc.value.message == "File does not exist: /foo/a.patch"


def test_connection_refused_is_transport_error():
    # свободный порт: занять и сразу отпустить
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]

    fs = _fs_for(f"127.0.0.1:{port}")
    with pytest.raises(TransportError):
        fs.get_file_status("/test")
