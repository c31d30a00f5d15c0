"""Structured logging and profiling for the engine, backed by telelog.

Configuration comes from ``configure`` (a ready ``telelog.Config`` or one of
``PRESETS``) or, by default, from ``CARET_ENGINE_*`` environment variables.
Call sites use ``record_event`` for one-off events and ``span`` around work
worth timing.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CARET_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "caret_engine")

_PRESET_SETTINGS: Dict[str, Dict[str, Any]] = {
    "development": {
        "min_level": "DEBUG",
        "console_output": True,
        "colored_output": True,
    },
    "production": {
        "min_level": "INFO",
        "console_output": False,
        "buffering": True,
        "file_output": "caret_engine.log",
    },
    "performance": {
        "min_level": "DEBUG",
        "console_output": False,
        "json_format": True,
        "buffering": True,
        "file_output": "caret_engine-performance.log",
    },
}
PRESETS = tuple(_PRESET_SETTINGS)

_TRUTHY = {"1", "true", "yes", "on"}

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _enabled(name: str) -> bool:
    return (_setting(name) or "").strip().lower() in _TRUTHY


def _env_settings() -> Dict[str, Any]:
    settings: Dict[str, Any] = {
        "min_level": (_setting("LOG_LEVEL") or "INFO").upper(),
        "console_output": not _enabled("DISABLE_CONSOLE"),
    }
    if settings["console_output"]:
        settings["colored_output"] = not _enabled("NO_COLOR")
    if _enabled("LOG_JSON"):
        settings["json_format"] = True
    if _setting("LOG_FILE"):
        settings["file_output"] = _setting("LOG_FILE")
    if _enabled("LOG_BUFFERED"):
        settings["buffering"] = True
        settings["buffer_size"] = int(_setting("LOG_BUFFER_SIZE") or "2048")
    return settings


def _build_config(settings: Dict[str, Any]) -> Any:
    config = tl.Config()
    for option, value in settings.items():
        getattr(config, f"with_{option}")(value)
    config.with_profiling(True)
    return config


def _preset_settings(preset: str) -> Dict[str, Any]:
    try:
        settings = dict(_PRESET_SETTINGS[preset.lower()])
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'.") from None
    if "file_output" in settings and _setting("LOG_FILE"):
        settings["file_output"] = _setting("LOG_FILE")
    return settings


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog configuration and drop cached loggers.

    ``config`` and ``preset`` are mutually exclusive; with neither, settings
    are read from the environment.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        config = _build_config(_preset_settings(preset))
    _config = config if config is not None else _build_config(_env_settings())
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    name = name or DEFAULT_LOGGER_NAME
    if name not in _loggers:
        if _config is None:
            configure()
        _loggers[name] = tl.Logger.with_config(name, _config)
    return _loggers[name]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects metadata reported if the block fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the enclosed block, tracking it as a component when asked.

    ``component=True`` uses ``name`` as the component id. Entries in
    ``metadata`` become logger context for the block. An exception escaping
    the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _text(value) for key, value in (metadata or {}).items()},
    )
    context = list(handle.metadata.items())

    with ExitStack() as stack:
        for key, value in context:
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
