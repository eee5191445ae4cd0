"""CLI command implementations exposed via `fontpkg.ui.cli`."""

from __future__ import annotations

from .generate import EXIT_FAILURE, generate


__all__ = ["EXIT_FAILURE", "generate"]
