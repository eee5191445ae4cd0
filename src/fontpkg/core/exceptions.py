"""Custom exception hierarchy for the font package generator."""

from __future__ import annotations


class FontPackageError(RuntimeError):
    """Base exception for package generation failures."""


class ArchiveError(FontPackageError):
    """Raised when the source archive is missing or cannot be read."""


class ConfigError(FontPackageError):
    """Raised when a configuration file cannot be loaded or validated."""


class VariantError(FontPackageError):
    """Raised when a font variant sub-package cannot be written."""

    def __init__(self, message: str, *, file_name: str) -> None:
        super().__init__(message)
        self.file_name = file_name


class LicenseError(FontPackageError):
    """Raised when the license file cannot be copied out of the archive."""

    def __init__(self, message: str, *, file_name: str) -> None:
        super().__init__(message)
        self.file_name = file_name


class AssemblyError(FontPackageError):
    """Raised when one of the post-walk assembly steps fails."""

    def __init__(self, message: str, *, step: str) -> None:
        super().__init__(f"{step}: {message}")
        self.step = step


class CommandError(FontPackageError):
    """Raised when an external executable cannot be invoked at all."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "ArchiveError",
    "AssemblyError",
    "CommandError",
    "ConfigError",
    "FontPackageError",
    "LicenseError",
    "VariantError",
    "exception_messages",
]
