"""Detect and copy the font license shipped in the archive."""

from __future__ import annotations

from pathlib import Path

from fontpkg.adapters.archive import READ_ERRORS, ArchiveEntry

from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import LicenseError
from .files import copy_to_disk
from .models import PackageDescriptor
from .names import base_name, strip_extension


DEFAULT_LICENSE_TOKEN = "ofl"


def is_license_file(name: str, token: str = DEFAULT_LICENSE_TOKEN) -> bool:
    """Return whether ``name`` is the license entry (``OFL.txt``, ``ofl.TXT`` ...)."""
    return strip_extension(base_name(name)).lower() == token


def collect_license(
    package_dir: Path,
    entry: ArchiveEntry,
    descriptor: PackageDescriptor,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> None:
    """Copy ``entry`` verbatim next to the generated sources.

    The original file name is kept. A later license entry replaces an earlier
    one, both on disk and on the descriptor.
    """
    file_name = entry.basename
    try:
        with entry.open() as source:
            copy_to_disk(source, package_dir / file_name)
    except READ_ERRORS as exc:
        raise LicenseError(
            f"copying license file '{file_name}': {exc}", file_name=file_name
        ) from exc

    descriptor.license_file = file_name
    (emitter or NullEmitter()).event("license_found", {"file": file_name})


__all__ = ["DEFAULT_LICENSE_TOKEN", "collect_license", "is_license_file"]
