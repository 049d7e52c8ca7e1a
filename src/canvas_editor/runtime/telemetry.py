"""Editor telemetry on top of telelog.

Loggers are per component (``buffer``, ``dispatch``, ``animation``,
``keymaps``, ``protocol``, ``session``) under the ``canvas_editor`` root.
Events are routed to the logger named by their prefix, so
``record_event("animation.spawn", ...)`` lands on
``canvas_editor.animation``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CANVAS_EDITOR_"
ROOT_LOGGER = os.getenv(f"{ENV_PREFIX}LOGGER", "canvas_editor")


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TelemetrySettings:
    """Everything needed to build a ``tl.Config``."""

    level: str = "INFO"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        buffer_size = None
        if _env_flag("LOG_BUFFERED"):
            buffer_size = int(_env("LOG_BUFFER_SIZE") or "2048")
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            console=not _env_flag("DISABLE_CONSOLE"),
            color=not _env_flag("NO_COLOR"),
            json=_env_flag("LOG_JSON"),
            log_file=_env("LOG_FILE") or "",
            buffer_size=buffer_size,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        # Spans rely on ``logger.profile``.
        config.with_profiling(True)
        return config


_PRESETS: Mapping[str, Callable[[TelemetrySettings], TelemetrySettings]] = {
    "development": lambda s: replace(
        s, level="DEBUG", console=True, color=True, json=False
    ),
    "production": lambda s: replace(
        s,
        level="INFO",
        console=False,
        log_file=s.log_file or "canvas_editor.log",
        buffer_size=s.buffer_size or 2048,
    ),
    "performance": lambda s: replace(
        s,
        level="DEBUG",
        console=False,
        json=True,
        log_file=s.log_file or "canvas_editor-performance.log",
        buffer_size=s.buffer_size or 2048,
    ),
}

PRESETS = tuple(_PRESETS)

_settings: Optional[TelemetrySettings] = None
_loggers: Dict[str, Any] = {}


def configure(
    *,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> TelemetrySettings:
    """Rebuild every logger from ``settings`` (default: environment) and ``preset``."""

    global _settings
    resolved = settings or TelemetrySettings.from_env()
    if preset is not None:
        try:
            resolved = _PRESETS[preset](resolved)
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None
    _settings = resolved
    _loggers.clear()
    return resolved


def get_logger(component: Optional[str] = None) -> Any:
    """Return the cached logger for ``component`` (the root logger if ``None``)."""

    name = f"{ROOT_LOGGER}.{component}" if component else ROOT_LOGGER
    logger = _loggers.get(name)
    if logger is None:
        settings = _settings or configure()
        logger = _loggers[name] = tl.Logger.with_config(name, settings.to_config())
    return logger


def _emit(logger: Any, level: str, message: str, fields: Mapping[str, Any]) -> None:
    pairs = [(str(key), str(value)) for key, value in fields.items()]
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(name: str, *, level: str = "info", **fields: Any) -> None:
    """Emit ``event::<name>`` on the logger of the event's component prefix."""

    component = name.split(".", 1)[0]
    _emit(get_logger(component), level.lower(), f"event::{name}", fields)


@dataclass
class Span:
    """Live span handle; ``note`` attaches fields reported on failure."""

    name: str
    component: str
    logger: Any
    notes: Dict[str, str]

    def note(self, key: str, value: Any) -> None:
        self.notes[key] = str(value)

    def fail(self, reason: str) -> None:
        _emit(
            self.logger,
            "error",
            "span::fail",
            {"span": self.name, "component": self.component, "reason": reason, **self.notes},
        )


@contextmanager
def span(name: str, *, component: str, **context: Any) -> Iterator[Span]:
    """Profile and component-track a block on ``component``'s logger.

    ``context`` fields are attached to the logger for the duration of the
    block. An exception escaping the block is reported before re-raising.
    """

    logger = get_logger(component)
    handle = Span(name=name, component=component, logger=logger, notes={})
    with ExitStack() as stack:
        for key, value in context.items():
            logger.add_context(key, str(value))
            stack.callback(logger.remove_context, key)
        stack.enter_context(logger.track_component(component))
        stack.enter_context(logger.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "Span",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
