"""Toolbar telemetry on top of telelog.

Configuration comes from ``MARKDOWN_TOOLBAR_*`` environment variables or one
of ``PRESETS``. Toolbar code reports through ``toolbar_span`` (every registry
mutation and button press) and ``record_applied`` (one ``toolbar.applied``
event per committed format).
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

from markdown_toolbar.buffer.snapshot import FormatResult

tl = cast(Any, telelog)

ENV_PREFIX = "MARKDOWN_TOOLBAR_"
COMPONENT = "toolbar"

# Each preset is a list of ``telelog.Config`` builder calls.
_PRESET_SETTINGS: Dict[str, list[tuple[str, Any]]] = {
    "development": [
        ("with_min_level", "DEBUG"),
        ("with_console_output", True),
        ("with_colored_output", True),
        ("with_json_format", False),
    ],
    "production": [
        ("with_min_level", "INFO"),
        ("with_console_output", False),
        ("with_file_output", "markdown_toolbar.log"),
        ("with_buffering", True),
    ],
    "performance": [
        ("with_min_level", "DEBUG"),
        ("with_console_output", False),
        ("with_buffering", True),
        ("with_json_format", True),
        ("with_file_output", "markdown_toolbar-performance.log"),
    ],
}
PRESETS = tuple(_PRESET_SETTINGS)

_LOGGERS: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _env_settings() -> list[tuple[str, Any]]:
    console = not _env_flag("DISABLE_CONSOLE")
    settings: list[tuple[str, Any]] = [
        ("with_min_level", (_env("LOG_LEVEL") or "INFO").upper()),
        ("with_console_output", console),
    ]
    if console:
        settings.append(("with_colored_output", not _env_flag("NO_COLOR")))
    if _env_flag("LOG_JSON"):
        settings.append(("with_json_format", True))
    if _env_flag("LOG_BUFFERED"):
        settings.append(("with_buffering", True))
        buffer_size = int(_env("LOG_BUFFER_SIZE") or "2048")
        settings.append(("with_buffer_size", buffer_size))
    return settings


def _build_config(settings: list[tuple[str, Any]]) -> Any:
    config = tl.Config()
    log_file = _env("LOG_FILE")
    for method, value in settings:
        if method == "with_file_output" and log_file:
            value = log_file
        getattr(config, method)(value)
    if log_file and all(method != "with_file_output" for method, _ in settings):
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog config and drop cached loggers.

    ``preset`` names one of ``PRESETS``; ``config`` is an explicit
    ``telelog.Config``. With neither, settings are re-read from the
    environment. ``MARKDOWN_TOOLBAR_LOG_FILE`` overrides any preset file.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        key = preset.lower()
        if key not in _PRESET_SETTINGS:
            raise ValueError(f"Unknown preset '{preset}'.")
        config = _build_config(_PRESET_SETTINGS[key])
    _config = config if config is not None else _build_config(_env_settings())
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or _env("LOGGER") or "markdown_toolbar"
    if logger_name not in _LOGGERS:
        if _config is None:
            configure()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _LOGGERS[logger_name]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Prefer telelog's ``<level>_with`` pair API, else inline the payload."""

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
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


def applied_payload(button_id: str, result: FormatResult) -> Dict[str, Any]:
    """Fields attached to ``toolbar.applied``."""

    return {
        "button": button_id,
        "kind": result.kind.name,
        "text_length": len(result.text),
        "selection": (result.selection_start, result.selection_end),
    }


def record_applied(button_id: str, result: FormatResult) -> None:
    record_event(
        "toolbar.applied", level="debug", data=applied_payload(button_id, result)
    )


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects metadata and records at most one failure."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    failure: Optional[str] = None

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        if self.failure is not None:
            return
        self.failure = reason
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
    """Profile a block; ``metadata`` is pushed as logger context meanwhile.

    ``component=True`` tracks the block under its own name, a string tracks
    it under that component. An escaping exception is recorded on the handle
    before it propagates.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(logger=log, span_name=name, component_name=component_name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
        log.add_context(key, handle.metadata[key])

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in metadata or {}:
                log.remove_context(key)


def toolbar_span(
    action: str, *, logger_name: Optional[str] = None, **metadata: Any
):
    """``span`` named ``toolbar::<action>`` and tracked under the toolbar component."""

    return span(
        f"{COMPONENT}::{action}",
        logger_name=logger_name,
        component=COMPONENT,
        metadata=metadata,
    )


__all__ = [
    "PRESETS",
    "SpanHandle",
    "applied_payload",
    "configure",
    "get_logger",
    "record_applied",
    "record_event",
    "span",
    "toolbar_span",
]
