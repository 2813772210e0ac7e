"""Command enumeration, transform table, and the dispatching engine."""

from .engine import CommandEngine, ControlEffect, DispatchResult
from .events import EventBus
from .models import (
    COMMAND_DESCRIPTIONS,
    CONTROL_COMMANDS,
    Command,
    UnknownCommandError,
    parse_command,
)
from .table import TransformContext, apply_transform
from .title import DEFAULT_TITLE_MAX_LENGTH, DEFAULT_TITLE_PLACEHOLDER, derive_title
from .toolbar import DEFAULT_TOOLBAR, ToolbarConfig

__all__ = [
    "Command",
    "CONTROL_COMMANDS",
    "COMMAND_DESCRIPTIONS",
    "UnknownCommandError",
    "parse_command",
    "TransformContext",
    "apply_transform",
    "CommandEngine",
    "ControlEffect",
    "DispatchResult",
    "EventBus",
    "derive_title",
    "DEFAULT_TITLE_PLACEHOLDER",
    "DEFAULT_TITLE_MAX_LENGTH",
    "ToolbarConfig",
    "DEFAULT_TOOLBAR",
]
