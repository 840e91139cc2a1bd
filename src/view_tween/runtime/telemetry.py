"""Logging for view_tween, built on telelog.

Two kinds of callers use this module. Host-facing operations (cursor
placement, a whole scroll step) wrap themselves in ``span`` and report
outcomes with ``record_event``. The per-frame arithmetic calls ``trace``,
which formats nothing unless debug output is switched on, since an animation
may resolve a delta every few milliseconds.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VIEW_TWEEN_"
DEFAULT_LOGGER_NAME = "view_tween"

# preset -> (min level, console, json, default log file)
PRESETS: Dict[str, tuple[str, bool, bool, str]] = {
    "development": ("DEBUG", True, False, ""),
    "production": ("INFO", False, False, "view_tween.log"),
    "performance": ("DEBUG", False, True, "view_tween-performance.log"),
}

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None
_LEVEL = "INFO"


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _build_config(level: str, *, console: bool, json: bool, log_file: str) -> Any:
    config = tl.Config()
    config.with_min_level(level)
    config.with_console_output(console)
    if console:
        config.with_colored_output(_env("NO_COLOR") is None)
    if json:
        config.with_json_format(True)
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def configure(*, preset: Optional[str] = None, level: Optional[str] = None) -> None:
    """Rebuild the telelog config and drop cached loggers.

    Without a ``preset`` the config comes from the environment:
    ``VIEW_TWEEN_LOG_LEVEL`` (default ``INFO``), ``VIEW_TWEEN_LOG_FILE``,
    ``VIEW_TWEEN_DISABLE_CONSOLE`` and ``VIEW_TWEEN_NO_COLOR``. ``level``
    overrides whichever level would otherwise apply.
    """

    global _CONFIG, _LEVEL
    log_file = _env("LOG_FILE") or ""
    if preset is not None:
        try:
            preset_level, console, json, preset_file = PRESETS[preset.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown telemetry preset '{preset}'.") from None
        log_file = log_file or preset_file
    else:
        preset_level = _env("LOG_LEVEL") or "INFO"
        console = _env("DISABLE_CONSOLE") is None
        json = False

    _LEVEL = (level or preset_level).upper()
    _CONFIG = _build_config(_LEVEL, console=console, json=json, log_file=log_file)
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        if _CONFIG is None:
            configure()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def debug_enabled() -> bool:
    return _LEVEL == "DEBUG"


def trace(logger_name: str, template: str, *args: object) -> None:
    """Debug line for hot paths; ``template % args`` runs only at DEBUG."""

    if _LEVEL != "DEBUG":
        return
    get_logger(logger_name).debug(template % args)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, _pairs(data))
    else:
        getattr(log, level)(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level.lower(), f"event::{name}", dict(data or {}))


@dataclass
class SpanHandle:
    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = str(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.name, "reason": reason, **self.metadata}
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked under ``component``.

    ``metadata`` is attached as logger context while the block runs. An
    exception is logged through ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, name=name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
        log.add_context(key, handle.metadata[key])

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in metadata or {}:
                log.remove_context(key)


configure()
logger = get_logger()

__all__ = [
    "SpanHandle",
    "configure",
    "debug_enabled",
    "get_logger",
    "logger",
    "record_event",
    "span",
    "trace",
]
