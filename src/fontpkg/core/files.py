"""Filesystem helpers used while writing the generated package."""

from __future__ import annotations

from pathlib import Path
import shutil
from typing import IO

from .diagnostics import DiagnosticEmitter, NullEmitter


def ensure_directory(path: Path, emitter: DiagnosticEmitter | None = None) -> bool:
    """Create ``path``; return ``False`` when it already existed.

    Only the final component is created, so a missing parent still raises.
    """
    try:
        path.mkdir()
    except FileExistsError:
        (emitter or NullEmitter()).event("directory_exists", {"path": str(path)})
        return False
    return True


def copy_to_disk(source: IO[bytes], target: Path) -> None:
    """Stream ``source`` into ``target``, creating or truncating it."""
    with target.open("wb") as handle:
        shutil.copyfileobj(source, handle)


def write_text(target: Path, content: str) -> None:
    target.write_text(content, encoding="utf-8", newline="\n")


__all__ = ["copy_to_disk", "ensure_directory", "write_text"]
