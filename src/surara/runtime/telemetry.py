"""Structured logging for the editor, built on telelog.

The editor owns the terminal while it runs, so console output stays off
unless ``SURARA_LOG_CONSOLE`` asks for it. Callers use ``record_event`` for
one-off records and ``span`` to profile a block.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SURARA_"
DEFAULT_LOGGER_NAME = "surara"

# preset -> (min level, json records, default log file)
PRESETS: Dict[str, Tuple[str, bool, str]] = {
    "production": ("INFO", False, "surara.log"),
    "performance": ("DEBUG", True, "surara-performance.log"),
}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _build_config(preset: Optional[str]) -> Any:
    config = tl.Config()
    config.with_profiling(True)

    if preset is not None:
        try:
            level, as_json, default_file = PRESETS[preset.lower()]
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None
        config.with_min_level(level)
        config.with_console_output(False)
        config.with_buffering(True)
        config.with_json_format(as_json)
        config.with_file_output(_env("LOG_FILE") or default_file)
        return config

    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    console = (_env("LOG_CONSOLE") or "").lower() in {"1", "true", "yes", "on"}
    config.with_console_output(console)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the telelog configuration.

    With ``preset`` (``"production"`` or ``"performance"``) records go to a
    file only; otherwise the ``SURARA_LOG_*`` environment variables decide.
    Cached loggers are dropped so the next ``get_logger`` picks it up.
    """

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = _build_config(preset)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_config(None)
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, _format_pairs(payload))
        return
    method = getattr(log, level, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit an ``event::<name>`` record carrying ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level.lower(), f"event::{name}", {"event": name, **(data or {})})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: bool = False,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile a block, optionally tracked as a component of the same name.

    ``metadata`` is attached as logger context for the duration of the block.
    Exceptions are logged as ``span::fail`` and re-raised unchanged.
    """

    log = get_logger(logger_name)
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(name))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            _emit(log, "error", "span::fail", {"span": name, **context, "reason": str(exc)})
            raise
        finally:
            for key in context:
                log.remove_context(key)


__all__ = ["PRESETS", "configure", "get_logger", "record_event", "span"]
