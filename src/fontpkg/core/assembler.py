"""Write the package-level files once every variant has been emitted."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fontpkg.adapters.commands import (
    CommandResult,
    CommandStatus,
    ModuleInitializer,
    VersionControl,
)

from .config import GeneratorConfig
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import AssemblyError, CommandError
from .files import write_text
from .models import PackageDescriptor
from .templates import TemplateError, render_readme, render_root_source


ROOT_SOURCE_FILENAME = "__init__.py"
README_FILENAME = "README.md"
REMOTE_NAME = "origin"


def _require(result: CommandResult, step: str, *, allow_initialized: bool = False) -> None:
    if result.status is CommandStatus.SUCCESS:
        return
    if allow_initialized and result.status is CommandStatus.ALREADY_INITIALIZED:
        return
    raise AssemblyError(result.describe(), step=step)


def _call(step: str, func: Callable[..., CommandResult], *args: Any) -> CommandResult:
    try:
        return func(*args)
    except CommandError as exc:
        raise AssemblyError(str(exc), step=step) from exc


def _write_root_source(descriptor: PackageDescriptor) -> None:
    step = "writing root package source"
    try:
        write_text(descriptor.output_dir / ROOT_SOURCE_FILENAME, render_root_source(descriptor))
    except (OSError, TemplateError) as exc:
        raise AssemblyError(str(exc), step=step) from exc


def _initialize_module(
    descriptor: PackageDescriptor,
    initializer: ModuleInitializer,
    emitter: DiagnosticEmitter,
) -> None:
    directory = descriptor.output_dir
    step = "initializing package metadata"
    result = _call(step, initializer.initialize, directory, descriptor)
    _require(result, step, allow_initialized=True)
    emitter.event("module_initialized", {"path": str(directory), "status": result.status.value})
    step = "resolving dependencies"
    _require(_call(step, initializer.resolve, directory), step)


def _write_readme(descriptor: PackageDescriptor) -> None:
    try:
        write_text(descriptor.output_dir / README_FILENAME, render_readme(descriptor))
    except (OSError, TemplateError) as exc:
        raise AssemblyError(str(exc), step="writing readme") from exc


def _stage_repository(
    descriptor: PackageDescriptor,
    vcs: VersionControl,
    emitter: DiagnosticEmitter,
) -> None:
    directory = descriptor.output_dir
    step = "initializing repository"
    result = _call(step, vcs.initialize, directory)
    _require(result, step, allow_initialized=True)
    emitter.event("vcs_initialized", {"path": str(directory), "status": result.status.value})
    if result.status is CommandStatus.SUCCESS:
        step = "configuring repository remote"
        _require(_call(step, vcs.set_remote, directory, REMOTE_NAME, descriptor.remote_url), step)
    step = "staging generated files"
    _require(_call(step, vcs.stage_all, directory), step)


def _touch_website_marker(descriptor: PackageDescriptor, config: GeneratorConfig) -> None:
    marker = descriptor.root / config.website_dir / f"{descriptor.name}.md"
    try:
        marker.touch(exist_ok=True)
    except OSError as exc:
        raise AssemblyError(str(exc), step="making website entry") from exc


def assemble_package(
    descriptor: PackageDescriptor,
    *,
    module_initializer: ModuleInitializer,
    version_control: VersionControl,
    config: GeneratorConfig | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> None:
    """Render the root package, metadata and README, then stage the result.

    Steps run in order and the first failure raises :class:`AssemblyError`.
    """
    config = config or GeneratorConfig()
    emitter = emitter or NullEmitter()

    descriptor.sort_variants()
    _write_root_source(descriptor)
    _initialize_module(descriptor, module_initializer, emitter)
    _write_readme(descriptor)
    _stage_repository(descriptor, version_control, emitter)
    if config.website_marker:
        _touch_website_marker(descriptor, config)
        emitter.event(
            "website_marker",
            {"path": str(config.website_dir / f"{descriptor.name}.md")},
        )


__all__ = ["README_FILENAME", "REMOTE_NAME", "ROOT_SOURCE_FILENAME", "assemble_package"]
