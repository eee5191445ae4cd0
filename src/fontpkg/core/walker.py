"""Classify archive entries and dispatch them to the emitters."""

from __future__ import annotations

from collections.abc import Iterable

from fontpkg.adapters.archive import ArchiveEntry

from .config import GeneratorConfig
from .diagnostics import DiagnosticEmitter, NullEmitter
from .emitter import emit_variant
from .license import collect_license, is_license_file
from .models import PackageDescriptor
from .names import file_extension


LICENSE_EXTENSION = "txt"


def walk_archive(
    entries: Iterable[ArchiveEntry],
    prefix: str,
    descriptor: PackageDescriptor,
    *,
    config: GeneratorConfig | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> None:
    """Process ``entries`` in archive order, filling ``descriptor``.

    Entries outside ``prefix`` are ignored. The first failing entry aborts the
    walk; files written before it are left in place.
    """
    config = config or GeneratorConfig()
    emitter = emitter or NullEmitter()
    package_dir = descriptor.output_dir
    seen: dict[str, str] = {}

    for entry in entries:
        if not entry.name.startswith(prefix):
            continue
        if entry.is_dir:
            emitter.event("skip_entry", {"name": entry.name, "reason": "directory"})
            continue
        extension = file_extension(entry.basename).lower()

        if extension == LICENSE_EXTENSION:
            if is_license_file(entry.name, config.license_token):
                collect_license(package_dir, entry, descriptor, emitter=emitter)
            else:
                emitter.event("skip_entry", {"name": entry.name, "reason": "not a license"})
            continue

        if extension in config.font_extensions:
            variant = emit_variant(package_dir, entry, emitter=emitter)
            previous = seen.get(variant.package_name)
            if previous is not None:
                emitter.warning(
                    f"'{entry.basename}' and '{previous}' both map to package "
                    f"'{variant.package_name}'; the later file replaces the earlier one."
                )
            seen[variant.package_name] = entry.basename
            descriptor.variants.append(variant)
            continue

        emitter.event("skip_entry", {"name": entry.name})


__all__ = ["LICENSE_EXTENSION", "walk_archive"]
