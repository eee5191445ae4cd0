"""Materialise one font variant as a sub-package of the generated package."""

from __future__ import annotations

from pathlib import Path

from fontpkg.adapters.archive import READ_ERRORS, ArchiveEntry

from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import VariantError
from .files import copy_to_disk, ensure_directory, write_text
from .models import VariantDescriptor
from .names import derive_name, file_extension
from .templates import render_variant_source


VARIANT_SOURCE_FILENAME = "__init__.py"


def emit_variant(
    package_dir: Path,
    entry: ArchiveEntry,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> VariantDescriptor:
    """Write the font file and its exporting module under ``package_dir``.

    The sub-directory is named after the derived package name. Re-running on
    the same directory overwrites both files.
    """
    emitter = emitter or NullEmitter()
    file_name = entry.basename
    variant = VariantDescriptor(
        font_file_name=file_name,
        package_name=derive_name(file_name),
        data_var_name=file_extension(file_name).upper(),
    )

    variant_dir = package_dir / variant.package_name
    try:
        ensure_directory(variant_dir, emitter)
    except OSError as exc:
        raise VariantError(
            f"creating directory '{variant_dir}': {exc}", file_name=file_name
        ) from exc

    try:
        with entry.open() as source:
            copy_to_disk(source, variant_dir / file_name)
    except READ_ERRORS as exc:
        raise VariantError(f"copying font file '{file_name}': {exc}", file_name=file_name) from exc

    try:
        write_text(variant_dir / VARIANT_SOURCE_FILENAME, render_variant_source(variant))
    except OSError as exc:
        raise VariantError(
            f"writing variant source for '{file_name}': {exc}", file_name=file_name
        ) from exc

    emitter.event("variant_emitted", {"package": variant.package_name, "file": file_name})
    return variant


__all__ = ["VARIANT_SOURCE_FILENAME", "emit_variant"]
