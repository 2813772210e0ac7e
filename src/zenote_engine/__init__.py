"""UI-agnostic markdown note editing core."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "config",
    "pagination",
    "runtime",
    "search",
    "session",
    "transforms",
]

__version__ = "0.1.0"
