"""
request — сборка запроса WebHDFS из операции, пути и аргументов.

Результат build():
- verb: HTTP-глагол из каталога
- url: http://<address>/webhdfs/v1<path>?op=<CODE>&<параметры операции>[&user.name=...]

Правила:
- op всегда первый, дальше параметры в порядке, объявленном в каталоге
- набор параметров определяет операция: лишние/недостающие — UsageError
- значения кодируются ровно один раз (base.net.url)
- булевы значения — "true"/"false", права — восьмеричная строка без ведущего нуля
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from hdfsbox.base.net.url import parse_query, url as build_url
from hdfsbox.webhdfs.config import Configuration, validate_permission
from hdfsbox.webhdfs.errors import UsageError
from hdfsbox.webhdfs.operations import HttpVerb, Operation, spec_for
from hdfsbox.webhdfs.types import Path


@dataclass(frozen=True)
class Request:
    op: Operation
    verb: HttpVerb
    url: str

    @property
    def params(self) -> list[tuple[str, str]]:
        """Параметры query string в порядке следования (декодированные)."""
        return parse_query(self.url)


# --- Рендеринг значений параметров ---

def _require_path(value: Any, name: str) -> str:
    if isinstance(value, Path):
        value = value.path
    if not isinstance(value, str) or not value.startswith("/"):
        raise UsageError(f"{name} must be an absolute path, got {value!r}")
    return value


def _render_path(value: Any) -> str:
    return _require_path(value, "destination")


def _render_bool(value: Any) -> str:
    if not isinstance(value, bool):
        raise UsageError(f"Expected bool, got {value!r}")
    return "true" if value else "false"


def _render_permission(value: Any) -> str:
    # 0o744 -> "744", 0 -> "0"
    return format(validate_permission(value), "o")


def _render_int(minimum: int) -> Callable[[Any], str]:
    def render(value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise UsageError(f"Expected int, got {value!r}")
        if value < minimum:
            raise UsageError(f"Expected int >= {minimum}, got {value!r}")
        return str(value)

    return render


def _render_name(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise UsageError(f"Expected non-empty string, got {value!r}")
    return value


_RENDERERS: dict[str, Callable[[Any], str]] = {
    "destination": _render_path,
    "permission": _render_permission,
    "createParent": _render_bool,
    "recursive": _render_bool,
    "owner": _render_name,
    "group": _render_name,
    "replication": _render_int(1),
    "modificationtime": _render_int(-1),
    "accesstime": _render_int(-1),
    "newlength": _render_int(0),
}


def render_params(op: Operation, params: Mapping[str, Any] | None = None) -> list[tuple[str, str]]:
    """
    Проверяет аргументы операции и переводит их в пары (имя, строка).

    None у необязательного параметра = параметр не передаётся.
    """
    spec = spec_for(op)
    params = dict(params or {})

    unknown = sorted(set(params) - set(spec.param_names))
    if unknown:
        raise UsageError(f"{op.value} does not accept parameter(s): {', '.join(unknown)}")

    out: list[tuple[str, str]] = []
    for p in spec.params:
        value = params.get(p.name)
        if value is None:
            if p.required:
                raise UsageError(f"{op.value} requires parameter '{p.name}'")
            continue
        out.append((p.name, _RENDERERS[p.name](value)))

    # операция только с необязательными параметрами (SETOWNER, SETTIMES) без единого бессмысленна
    if spec.params and not out:
        names = ", ".join(spec.param_names)
        raise UsageError(f"{op.value} requires at least one of: {names}")
    return out


def build(
    config: Configuration,
    op: Operation,
    path: Path | str,
    params: Mapping[str, Any] | None = None,
) -> Request:
    """Собирает Request; ошибки аргументов поднимаются до сетевого вызова."""
    spec = spec_for(op)
    target = _require_path(path, "path")

    query: list[tuple[str, str]] = [("op", spec.code)]
    query.extend(render_params(op, params))
    if config.user_name:
        query.append(("user.name", config.user_name))

    return Request(op=op, verb=spec.verb, url=build_url(config.base_url, target, query))
