"""Capabilities wrapping the external module and version-control tools."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import shutil
import subprocess
from typing import Protocol, runtime_checkable

from fontpkg.core.exceptions import CommandError
from fontpkg.core.models import PackageDescriptor
from fontpkg.core.templates import render_pyproject


PYPROJECT_FILENAME = "pyproject.toml"
LICENSE_FILES_KEY = "license-files"


class CommandStatus(Enum):
    """Outcome of a capability call."""

    SUCCESS = "success"
    ALREADY_INITIALIZED = "already initialized"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Status of a capability call plus the details needed to report it."""

    status: CommandStatus
    command: tuple[str, ...] = ()
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not CommandStatus.FAILED

    def describe(self) -> str:
        label = " ".join(self.command) or "command"
        message = f"'{label}' {self.status.value}"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message


class CommandRunner:
    """Run external executables, resolving them on PATH once."""

    def __init__(self) -> None:
        self._resolved: dict[str, str] = {}

    def run(self, args: Sequence[str], *, cwd: Path) -> CommandResult:
        """Execute ``args`` inside ``cwd`` and map the exit status to a result."""
        if not args:
            raise CommandError("Cannot run an empty command.")
        command = tuple(args)
        executable = self._resolve_executable(command[0])
        try:
            process = subprocess.run(
                [executable, *command[1:]],
                check=False,
                capture_output=True,
                text=True,
                cwd=cwd,
            )
        except FileNotFoundError as exc:
            self._resolved.pop(command[0], None)
            raise CommandError(f"Executable '{command[0]}' could not be located.") from exc
        except OSError as exc:
            raise CommandError(f"Failed to invoke '{command[0]}': {exc}") from exc

        if process.returncode != 0:
            detail = (process.stderr or "").strip() or (process.stdout or "").strip()
            if not detail:
                detail = f"exit code {process.returncode}"
            return CommandResult(CommandStatus.FAILED, command, detail)
        return CommandResult(CommandStatus.SUCCESS, command)

    def _resolve_executable(self, name: str) -> str:
        cached = self._resolved.get(name)
        if cached:
            return cached
        executable = shutil.which(name)
        if executable is None:
            raise CommandError(f"'{name}' is required but was not found on PATH.")
        self._resolved[name] = executable
        return executable


@runtime_checkable
class ModuleInitializer(Protocol):
    """Create the distribution metadata and resolve its dependencies."""

    def initialize(self, directory: Path, descriptor: PackageDescriptor) -> CommandResult: ...

    def resolve(self, directory: Path) -> CommandResult: ...


@runtime_checkable
class VersionControl(Protocol):
    """Repository operations needed to stage a generated package."""

    def initialize(self, directory: Path) -> CommandResult: ...

    def set_remote(self, directory: Path, name: str, url: str) -> CommandResult: ...

    def stage_all(self, directory: Path) -> CommandResult: ...


def _without_license_files(text: str) -> list[str]:
    return [line for line in text.splitlines() if not line.startswith(LICENSE_FILES_KEY)]


class PyprojectModuleInitializer:
    """Write ``pyproject.toml`` once and lock dependencies with an external tool."""

    def __init__(
        self,
        *,
        resolve_command: Sequence[str] = ("uv", "lock"),
        fonttools_requirement: str = "fonttools>=4.33",
        requires_python: str = ">=3.10",
        font_extensions: Sequence[str] = ("otf", "ttf"),
        runner: CommandRunner | None = None,
    ) -> None:
        self.resolve_command = tuple(resolve_command)
        self.fonttools_requirement = fonttools_requirement
        self.requires_python = requires_python
        self.font_extensions = tuple(font_extensions)
        self.runner = runner or CommandRunner()

    def initialize(self, directory: Path, descriptor: PackageDescriptor) -> CommandResult:
        """Write ``pyproject.toml`` unless one exists.

        An existing file is left alone, except when it differs from a fresh
        rendering only by its ``license-files`` entry; it is then rewritten so
        the license declaration follows the archive.
        """
        target = directory / PYPROJECT_FILENAME
        command = ("write", PYPROJECT_FILENAME)
        content = render_pyproject(
            descriptor,
            fonttools_requirement=self.fonttools_requirement,
            requires_python=self.requires_python,
            font_extensions=self.font_extensions,
        )
        try:
            if target.exists():
                current = target.read_text(encoding="utf-8")
                stale_license = current != content and (
                    _without_license_files(current) == _without_license_files(content)
                )
                if not stale_license:
                    return CommandResult(CommandStatus.ALREADY_INITIALIZED, command)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            return CommandResult(CommandStatus.FAILED, command, str(exc))
        return CommandResult(CommandStatus.SUCCESS, command)

    def resolve(self, directory: Path) -> CommandResult:
        if not self.resolve_command:
            return CommandResult(CommandStatus.SUCCESS)
        return self.runner.run(self.resolve_command, cwd=directory)


class GitVersionControl:
    """Drive the ``git`` executable."""

    def __init__(self, *, executable: str = "git", runner: CommandRunner | None = None) -> None:
        self.executable = executable
        self.runner = runner or CommandRunner()

    def initialize(self, directory: Path) -> CommandResult:
        if (directory / ".git").exists():
            return CommandResult(CommandStatus.ALREADY_INITIALIZED, (self.executable, "init"))
        return self.runner.run((self.executable, "init"), cwd=directory)

    def set_remote(self, directory: Path, name: str, url: str) -> CommandResult:
        return self.runner.run((self.executable, "remote", "add", name, url), cwd=directory)

    def stage_all(self, directory: Path) -> CommandResult:
        return self.runner.run((self.executable, "add", "-A"), cwd=directory)


__all__ = [
    "PYPROJECT_FILENAME",
    "CommandResult",
    "CommandRunner",
    "CommandStatus",
    "GitVersionControl",
    "ModuleInitializer",
    "PyprojectModuleInitializer",
    "VersionControl",
]
