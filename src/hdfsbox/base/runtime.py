"""
runtime — единственная точка, где определяется:
- установлен hdfsbox-plugin или нет
- какую requests.Session использовать как транспорт (plugin: с корпоративной аутентификацией)
- какой FileSystem отдавать по умолчанию

Доменный код не должен импортировать hdfsbox-plugin напрямую.

Переменные окружения:
- HDFSBOX_USE_PLUGIN=0 — не искать плагин
- HDFSBOX_DEBUG_PLUGIN=1 — печатать traceback ошибок загрузки плагина
- HDFSBOX_ADDR / HDFSBOX_USER / ... — см. hdfsbox.webhdfs.config
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib.metadata import entry_points

import requests

from hdfsbox.base.log import get_logger
from hdfsbox.webhdfs.config import Configuration
from hdfsbox.webhdfs.filesystem import FileSystem

log = get_logger(__name__)


@dataclass(frozen=True)
class Providers:
    session: requests.Session
    source: str  # "plugin" | "local"


_PROVIDERS: Providers | None = None
_FILESYSTEM: FileSystem | None = None


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip() not in ("0", "false", "False")


def _load_plugin_providers() -> Providers | None:
    """Пытается загрузить транспорт из hdfsbox-plugin через entry-points."""
    try:
        eps = entry_points().select(group="hdfsbox.plugin", name="providers")
        loaded_any = False
        for ep in eps:
            loaded_any = True
            factory = ep.load()
            result = factory()
            # 1) dict{"session": ...}
            if isinstance(result, dict):
                session = result.get("session")
                if isinstance(session, requests.Session):
                    return Providers(session=session, source="plugin")

            # 2) сразу Session
            if isinstance(result, requests.Session):
                return Providers(session=result, source="plugin")

        if loaded_any:
            # entry-point существует, но формат ответа не распознан
            log.warning("Plugin entrypoint found but providers not recognized; expected dict with key 'session'")
    except Exception as e:
        # Плагин может отсутствовать или быть сломан в среде.
        # В этом случае hdfsbox переходит на local-режим.
        if _flag("HDFSBOX_DEBUG_PLUGIN", "0"):
            log.opt(exception=e).error("Failed to load plugin providers")
        else:
            log.warning("Plugin providers load failed; set HDFSBOX_DEBUG_PLUGIN=1 to see details")
        return None
    return None


def _build_local_providers() -> Providers:
    """Локальный транспорт: обычная requests.Session."""
    return Providers(session=requests.Session(), source="local")


def get_providers(force_reload: bool = False) -> Providers:
    """Возвращает активные провайдеры. Кэшируется на время процесса."""
    global _PROVIDERS
    if _PROVIDERS is not None and not force_reload:
        return _PROVIDERS

    if _flag("HDFSBOX_USE_PLUGIN", "1"):
        plugin_providers = _load_plugin_providers()
        if plugin_providers is not None:
            _PROVIDERS = plugin_providers
            log.info("Providers loaded from plugin")
            return _PROVIDERS

    _PROVIDERS = _build_local_providers()
    log.info("Providers loaded from local")
    return _PROVIDERS


def get_filesystem(force_reload: bool = False) -> FileSystem:
    """FileSystem по умолчанию: Configuration.from_env() + сессия из провайдеров."""
    global _FILESYSTEM
    if _FILESYSTEM is not None and not force_reload:
        return _FILESYSTEM

    config = Configuration.from_env()
    _FILESYSTEM = FileSystem(config, session=get_providers(force_reload=force_reload).session)
    log.info("Default filesystem configured", address=config.address)
    return _FILESYSTEM