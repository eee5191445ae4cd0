"""Read-only access to the zip archives holding font sources."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO
import zipfile
import zlib

from fontpkg.core.exceptions import ArchiveError
from fontpkg.core.names import base_name


# Errors raised while reading member data (truncated or corrupted entries).
READ_ERRORS: tuple[type[Exception], ...] = (OSError, zipfile.BadZipFile, zlib.error)


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """Single member of a zip archive."""

    name: str
    _archive: zipfile.ZipFile
    _info: zipfile.ZipInfo

    @property
    def basename(self) -> str:
        return base_name(self.name)

    @property
    def is_dir(self) -> bool:
        return self._info.is_dir()

    def open(self) -> IO[bytes]:
        """Return a binary stream over the member contents."""
        return self._archive.open(self._info)


class ZipArchive:
    """Thin wrapper exposing zip members in their stored order."""

    def __init__(self, archive: zipfile.ZipFile, path: Path) -> None:
        self._archive = archive
        self.path = path

    def entries(self) -> Iterator[ArchiveEntry]:
        for info in self._archive.infolist():
            yield ArchiveEntry(info.filename, self._archive, info)

    def close(self) -> None:
        self._archive.close()


@contextmanager
def open_archive(path: str | Path) -> Iterator[ZipArchive]:
    """Open ``path`` as a zip archive for the duration of the context."""
    archive_path = Path(path)
    try:
        handle = zipfile.ZipFile(archive_path)
    except FileNotFoundError as exc:
        raise ArchiveError(f"Archive '{archive_path}' does not exist.") from exc
    except zipfile.BadZipFile as exc:
        raise ArchiveError(f"'{archive_path}' is not a valid zip archive.") from exc
    except OSError as exc:
        raise ArchiveError(f"Unable to open archive '{archive_path}': {exc}") from exc

    archive = ZipArchive(handle, archive_path)
    try:
        yield archive
    finally:
        archive.close()


__all__ = ["READ_ERRORS", "ArchiveEntry", "ZipArchive", "open_archive"]
