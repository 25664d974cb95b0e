"""
http — транспорт HTTP поверх requests.

Ключевые детали:
- один вызов send() = ровно один HTTP-запрос, повторов нет
- ошибки соединения/таймауты/TLS превращаются в TransportError
  (исходное исключение requests сохраняется в __cause__)
- статус ответа здесь не интерпретируется: это делает errors.classify()
- редиректы не выполняются (на DataNode ходит только потоковая запись/чтение)
"""

from __future__ import annotations

from dataclasses import dataclass

import requests

from hdfsbox.base.log import get_logger
from hdfsbox.base.errors import TransportError

log = get_logger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """
    Ответ транспорта.
    """
    status_code: int
    content: bytes
    reason: str | None = None
    url: str | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport:
    """
    Транспорт запросов.

    session:
      - requests.Session (может быть выдана плагином с аутентификацией)
      - если не задана — создаётся своя, и close() её закрывает
    timeout:
      - передаётся в requests как есть
    """

    def __init__(self, session: requests.Session | None = None, timeout: float | None = None):
        self._own_session = session is None
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def send(self, verb: str, url: str) -> HttpResponse:
        log.debug("HTTP request", verb=verb, url=url)
        try:
            r = self._session.request(
                verb,
                url,
                timeout=self._timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            log.debug("HTTP transport failure", verb=verb, url=url, error=f"{type(e).__name__}: {e}")
            raise TransportError(f"{type(e).__name__}: {e}", url=url) from e

        content = r.content or b""
        log.debug("HTTP response", verb=verb, url=url, status_code=r.status_code, size=len(content))
        return HttpResponse(status_code=r.status_code, content=content, reason=r.reason, url=url)

    def close(self) -> None:
        if self._own_session:
            self._session.close()
