"""
config — параметры подключения к NameNode.

Configuration создаётся один раз и дальше только читается.
Владелец — экземпляр FileSystem, построенный из неё.

Переменные окружения (from_env, префикс HDFSBOX_ по умолчанию):
- HDFSBOX_ADDR: host:port NameNode (по умолчанию localhost:9870)
- HDFSBOX_USER: user.name для запросов (опционально)
- HDFSBOX_TIMEOUT: таймаут транспорта в секундах (опционально)
- HDFSBOX_PERMISSION: права по умолчанию, восьмеричная строка ("755")
- HDFSBOX_REPLICATION: фактор репликации по умолчанию
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from hdfsbox.webhdfs.errors import UsageError

DEFAULT_ADDRESS = "localhost:9870"
DEFAULT_PERMISSION = 0o755
DEFAULT_REPLICATION = 3
MAX_PERMISSION = 0o1777

_ADDRESS_RE = re.compile(r"^(?:\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9._\-]+):\d{1,5}$")


@dataclass(frozen=True)
class Configuration:
    """
    Параметры подключения.

    address:
      - "host:port" или "[ipv6]:port" без схемы и пути (схема всегда http)
    timeout:
      - секунды, строго > 0; None — без таймаута
    """
    address: str
    user_name: str | None = None
    timeout: float | None = None
    default_permission: int = DEFAULT_PERMISSION
    default_replication: int = DEFAULT_REPLICATION

    def __post_init__(self) -> None:
        addr = (self.address or "").strip()
        if not addr:
            raise UsageError("Configuration.address must be a non-empty host:port string")
        if "://" in addr or "/" in addr or not _ADDRESS_RE.match(addr):
            raise UsageError(f"Configuration.address must be host:port, got {self.address!r}")
        object.__setattr__(self, "address", addr)

        if self.timeout is not None and self.timeout <= 0:
            raise UsageError(f"Configuration.timeout must be > 0, got {self.timeout!r}")
        validate_permission(self.default_permission)
        if self.default_replication < 1:
            raise UsageError(f"Configuration.default_replication must be >= 1, got {self.default_replication!r}")

    @property
    def base_url(self) -> str:
        return f"http://{self.address}/webhdfs/v1"

    @classmethod
    def from_env(cls, prefix: str = "HDFSBOX_") -> "Configuration":
        """Собирает Configuration из переменных окружения."""
        address = os.getenv(f"{prefix}ADDR", DEFAULT_ADDRESS)
        user_name = os.getenv(f"{prefix}USER") or None

        timeout_raw = os.getenv(f"{prefix}TIMEOUT")
        perm_raw = os.getenv(f"{prefix}PERMISSION")
        repl_raw = os.getenv(f"{prefix}REPLICATION")

        try:
            timeout = float(timeout_raw) if timeout_raw else None
            permission = int(perm_raw, 8) if perm_raw else DEFAULT_PERMISSION
            replication = int(repl_raw) if repl_raw else DEFAULT_REPLICATION
        except ValueError as e:
            raise UsageError(f"Invalid {prefix}* environment value: {e}") from e

        return cls(
            address=address,
            user_name=user_name,
            timeout=timeout,
            default_permission=permission,
            default_replication=replication,
        )


def validate_permission(permission: int) -> int:
    # bool является подклассом int, но правами не является
    if isinstance(permission, bool) or not isinstance(permission, int):
        raise UsageError(f"Permission must be an int (e.g. 0o755), got {permission!r}")
    if not 0 <= permission <= MAX_PERMISSION:
        raise UsageError(f"Permission out of range 0..0o1777: {oct(permission)}")
    return permission
