"""Primary public API for fontpkg."""

from __future__ import annotations

from fontpkg.adapters.archive import ArchiveEntry, ZipArchive, open_archive
from fontpkg.adapters.commands import (
    CommandResult,
    CommandRunner,
    CommandStatus,
    GitVersionControl,
    ModuleInitializer,
    PyprojectModuleInitializer,
    VersionControl,
)
from fontpkg.core.assembler import assemble_package
from fontpkg.core.config import GeneratorConfig, load_config
from fontpkg.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from fontpkg.core.emitter import emit_variant
from fontpkg.core.exceptions import (
    ArchiveError,
    AssemblyError,
    CommandError,
    ConfigError,
    FontPackageError,
    LicenseError,
    VariantError,
)
from fontpkg.core.license import collect_license, is_license_file
from fontpkg.core.models import PackageDescriptor, VariantDescriptor
from fontpkg.core.names import derive_name
from fontpkg.core.pipeline import generate_package
from fontpkg.core.walker import walk_archive
from fontpkg.version import get_version


__version__ = get_version()

__all__ = [
    "ArchiveEntry",
    "ArchiveError",
    "AssemblyError",
    "CommandError",
    "CommandResult",
    "CommandRunner",
    "CommandStatus",
    "ConfigError",
    "DiagnosticEmitter",
    "FontPackageError",
    "GeneratorConfig",
    "GitVersionControl",
    "LicenseError",
    "LoggingEmitter",
    "ModuleInitializer",
    "NullEmitter",
    "PackageDescriptor",
    "PyprojectModuleInitializer",
    "VariantDescriptor",
    "VariantError",
    "VersionControl",
    "ZipArchive",
    "__version__",
    "assemble_package",
    "collect_license",
    "derive_name",
    "emit_variant",
    "generate_package",
    "get_version",
    "is_license_file",
    "load_config",
    "open_archive",
    "walk_archive",
]
