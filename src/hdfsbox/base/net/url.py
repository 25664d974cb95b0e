"""
url — сборка и разбор URL запросов WebHDFS.

Задача:
- один раз процент-кодировать путь и значения параметров
- сохранить порядок параметров (op первым, дальше объявленный порядок)
- уметь прочитать параметры обратно (для проверок и отладки)
"""

from __future__ import annotations

from typing import Iterable
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, unquote


def quote_path(path: str) -> str:
    """Кодирует путь как есть; '/' остаётся разделителем, остальные символы (в т.ч. '\\') экранируются."""
    return quote(str(path), safe="/")


def encode_query(params: Iterable[tuple[str, str]]) -> str:
    # safe="/": пути в destination остаются читаемыми: /testing/newname
    return urlencode(list(params), quote_via=quote, safe="/")


def url(base: str, path: str, params: Iterable[tuple[str, str]] = ()) -> str:
    """
    Собирает URL вида <base><path>?<query>.

    Пример:
        url("http://nn:9870/webhdfs/v1", "/tmp", [("op", "LISTSTATUS")])
        -> "http://nn:9870/webhdfs/v1/tmp?op=LISTSTATUS"
    """
    query = encode_query(params)
    out = base.rstrip("/") + quote_path(path)
    if query:
        out += "?" + query
    return out


def parse_query(raw_url: str) -> list[tuple[str, str]]:
    """Возвращает параметры query string в исходном порядке (декодированные)."""
    return parse_qsl(urlsplit(raw_url).query, keep_blank_values=True)


def parse_path(raw_url: str, base_path: str = "/webhdfs/v1") -> str:
    """Возвращает декодированный путь HDFS из URL (без префикса /webhdfs/v1)."""
    path = unquote(urlsplit(raw_url).path)
    if path.startswith(base_path):
        path = path[len(base_path):]
    return path or "/"
