"""Structured logging for the editing core, built on telelog.

Everything the engine logs goes through two helpers:

``record_event(name, ...)`` writes one ``event::<name>`` line with key/value data.
``span(name, ...)`` profiles a block, tags it with a component, and carries
metadata as logger context while the block runs.

Output is configured once from ``ZENOTE_ENGINE_*`` environment variables and
can be replaced at runtime with :func:`configure`.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "ZENOTE_ENGINE_"
DEFAULT_LOGGER = "zenote_engine"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Logging knobs gathered from ``ZENOTE_ENGINE_*`` variables."""

    logger_name: str = DEFAULT_LOGGER
    level: str = "INFO"
    log_file: str = ""
    console: bool = True
    color: bool = True
    json: bool = False
    buffer_size: int = 0
    rejected: tuple[str, ...] = ()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            raw = env.get(f"{ENV_PREFIX}{name}")
            return raw.strip() if raw is not None else None

        rejected: list[str] = []

        def enabled(name: str) -> bool:
            raw = read(name)
            return raw is not None and raw.lower() in _TRUTHY

        def count(name: str) -> int:
            raw = read(name)
            if not raw:
                return 0
            try:
                value = int(raw)
            except ValueError:
                value = -1
            if value < 0:
                rejected.append(f"{ENV_PREFIX}{name}={raw}")
                return 0
            return value

        return cls(
            logger_name=read("LOGGER") or DEFAULT_LOGGER,
            level=(read("LOG_LEVEL") or "INFO").upper(),
            log_file=read("LOG_FILE") or "",
            console=not enabled("QUIET"),
            color=not enabled("NO_COLOR"),
            json=enabled("LOG_JSON"),
            buffer_size=count("LOG_BUFFER"),
            rejected=tuple(rejected),
        )


def build_config(settings: TelemetrySettings) -> Any:
    """Translate ``settings`` into a ``telelog.Config`` with profiling on."""

    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color and not settings.json)
    config.with_json_format(settings.json)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffer_size > 0:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


class _Registry:
    """Active configuration plus one cached logger per name."""

    def __init__(self, settings: TelemetrySettings) -> None:
        self.settings = settings
        self.config: Any = build_config(settings)
        self.loggers: Dict[str, Any] = {}

    def replace(self, settings: TelemetrySettings, config: Any) -> None:
        self.settings = settings
        self.config = config
        self.loggers.clear()

    def logger(self, name: Optional[str]) -> Any:
        key = name or self.settings.logger_name
        if key not in self.loggers:
            self.loggers[key] = tl.Logger.with_config(key, self.config)
        return self.loggers[key]


_REGISTRY = _Registry(TelemetrySettings.from_env())


def configure(
    settings: Optional[TelemetrySettings] = None, *, config: Optional[Any] = None
) -> None:
    """Swap the active configuration; cached loggers are rebuilt on next use.

    ``config`` takes a ready ``telelog.Config`` and wins over ``settings``.
    """

    settings = settings or _REGISTRY.settings
    _REGISTRY.replace(settings, config if config is not None else build_config(settings))


def get_logger(name: Optional[str] = None) -> Any:
    return _REGISTRY.logger(name)


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _write(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(key), _text(value)) for key, value in data.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _write(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


if _REGISTRY.settings.rejected:
    record_event(
        "telemetry.invalid_setting",
        level="warning",
        data={"ignored": list(_REGISTRY.settings.rejected)},
    )


@dataclass
class SpanHandle:
    """Lets the block inside :func:`span` attach results before it closes."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        data: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            data["component"] = self.component
        _write(self.logger, "error", "span::fail", data)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block; an escaping exception is logged then re-raised."""

    log = get_logger(logger_name)
    handle = SpanHandle(
        logger=log,
        name=name,
        component=component,
        metadata={key: _text(value) for key, value in (metadata or {}).items()},
    )
    context_keys = list(handle.metadata)
    for key in context_keys:
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
            for key in context_keys:
                log.remove_context(key)


__all__ = [
    "SpanHandle",
    "TelemetrySettings",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
