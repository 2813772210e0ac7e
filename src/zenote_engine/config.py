"""Explicit editor configuration handed to a session at construction."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from zenote_engine.commands.title import (
    DEFAULT_TITLE_MAX_LENGTH,
    DEFAULT_TITLE_PLACEHOLDER,
)
from zenote_engine.commands.toolbar import ToolbarConfig
from zenote_engine.transforms import DEFAULT_TIMESTAMP_FORMAT

ENV_PREFIX = "ZENOTE_"


@dataclass(frozen=True, slots=True)
class FontSizeSettings:
    size: int = 16
    minimum: int = 12
    maximum: int = 32
    step: int = 2

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError("font size minimum exceeds maximum")
        if self.step <= 0:
            raise ValueError("font size step must be positive")
        if not self.minimum <= self.size <= self.maximum:
            raise ValueError(
                f"font size {self.size} outside [{self.minimum}, {self.maximum}]"
            )

    def increased(self) -> "FontSizeSettings":
        return replace(self, size=min(self.size + self.step, self.maximum))

    def decreased(self) -> "FontSizeSettings":
        return replace(self, size=max(self.size - self.step, self.minimum))


@dataclass(frozen=True, slots=True)
class EditorConfig:
    history_debounce_ms: int = 800
    title_placeholder: str = DEFAULT_TITLE_PLACEHOLDER
    title_max_length: int = DEFAULT_TITLE_MAX_LENGTH
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    font_size: FontSizeSettings = field(default_factory=FontSizeSettings)
    toolbar: ToolbarConfig = field(default_factory=ToolbarConfig)

    def __post_init__(self) -> None:
        if self.history_debounce_ms < 0:
            raise ValueError("history_debounce_ms must be >= 0")
        if self.title_max_length <= 0:
            raise ValueError("title_max_length must be positive")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EditorConfig":
        """Build a config from settings persisted by the storage layer.

        Missing keys keep their defaults; ``toolbar`` is a list of command ids.
        """

        defaults = cls()
        toolbar = defaults.toolbar
        if "toolbar" in data:
            toolbar = ToolbarConfig.from_list(data["toolbar"])
        font_size = defaults.font_size
        if "font_size" in data:
            font_size = replace(font_size, size=int(data["font_size"]))
        return cls(
            history_debounce_ms=int(
                data.get("history_debounce_ms", defaults.history_debounce_ms)
            ),
            title_placeholder=str(
                data.get("title_placeholder", defaults.title_placeholder)
            ),
            title_max_length=int(data.get("title_max_length", defaults.title_max_length)),
            timestamp_format=str(data.get("timestamp_format", defaults.timestamp_format)),
            font_size=font_size,
            toolbar=toolbar,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for key in ("history_debounce_ms", "title_placeholder", "timestamp_format", "font_size"):
            raw = env.get(f"{ENV_PREFIX}{key.upper()}")
            if raw is not None:
                data[key] = raw
        return cls.from_mapping(data)

    def to_mapping(self) -> dict[str, Any]:
        return {
            "history_debounce_ms": self.history_debounce_ms,
            "title_placeholder": self.title_placeholder,
            "title_max_length": self.title_max_length,
            "timestamp_format": self.timestamp_format,
            "font_size": self.font_size.size,
            "toolbar": self.toolbar.to_list(),
        }


__all__ = ["EditorConfig", "FontSizeSettings"]
