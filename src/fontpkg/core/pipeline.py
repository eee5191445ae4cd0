"""End-to-end generation of a font package from a zip archive."""

from __future__ import annotations

from pathlib import Path

from fontpkg.adapters.archive import open_archive
from fontpkg.adapters.commands import (
    CommandRunner,
    GitVersionControl,
    ModuleInitializer,
    PyprojectModuleInitializer,
    VersionControl,
)

from .assembler import assemble_package
from .config import GeneratorConfig
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import FontPackageError
from .files import ensure_directory
from .models import PackageDescriptor
from .walker import walk_archive


def default_module_initializer(
    config: GeneratorConfig, runner: CommandRunner | None = None
) -> PyprojectModuleInitializer:
    return PyprojectModuleInitializer(
        resolve_command=config.resolve_command,
        fonttools_requirement=config.fonttools_requirement,
        requires_python=config.requires_python,
        font_extensions=config.font_extensions,
        runner=runner,
    )


def generate_package(
    archive_path: str | Path,
    *,
    prefix: str = "",
    output_root: Path | None = None,
    config: GeneratorConfig | None = None,
    emitter: DiagnosticEmitter | None = None,
    module_initializer: ModuleInitializer | None = None,
    version_control: VersionControl | None = None,
) -> PackageDescriptor:
    """Generate the package for ``archive_path`` and return its descriptor.

    The output directory is created under ``output_root`` (the working
    directory by default) and named after the archive. Running twice on the
    same archive refreshes the generated files in place.
    """
    config = config or GeneratorConfig()
    emitter = emitter or NullEmitter()
    root = (output_root or Path.cwd()).resolve()
    runner = CommandRunner()
    module_initializer = module_initializer or default_module_initializer(config, runner)
    version_control = version_control or GitVersionControl(runner=runner)

    descriptor = PackageDescriptor.from_archive(archive_path, config=config, root=root)
    emitter.event("package_name", {"name": descriptor.name})

    with open_archive(archive_path) as archive:
        try:
            ensure_directory(descriptor.output_dir, emitter)
        except OSError as exc:
            raise FontPackageError(
                f"creating output directory '{descriptor.output_dir}': {exc}"
            ) from exc
        walk_archive(archive.entries(), prefix, descriptor, config=config, emitter=emitter)

    assemble_package(
        descriptor,
        module_initializer=module_initializer,
        version_control=version_control,
        config=config,
        emitter=emitter,
    )
    return descriptor


__all__ = ["default_module_initializer", "generate_package"]
