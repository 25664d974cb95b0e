"""
net — сетевой слой hdfsbox.

Назначение:
- дать единый транспорт HTTP (один запрос = одна попытка, без повторов)
- дать единые функции сборки/разбора URL
"""
from .http import HttpResponse, Transport  # noqa: F401
from .url import encode_query, parse_path, parse_query, quote_path, url  # noqa: F401
