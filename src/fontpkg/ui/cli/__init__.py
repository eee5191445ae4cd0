"""Public CLI exports for fontpkg."""

from __future__ import annotations

from .app import app, main
from .commands import EXIT_FAILURE, generate
from .state import debug_enabled, emit_error, emit_warning, get_cli_state


__all__ = [
    "EXIT_FAILURE",
    "app",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "generate",
    "get_cli_state",
    "main",
]
