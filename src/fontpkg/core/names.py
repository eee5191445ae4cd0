"""Derive package identifiers from font and archive file names."""

from __future__ import annotations

from pathlib import PurePosixPath


def base_name(raw: str) -> str:
    """Return the final path segment of an archive member name."""
    return PurePosixPath(raw).name if raw else raw


def strip_extension(raw: str) -> str:
    """Drop the text after the last ``.`` of ``raw``, keeping dotless names intact."""
    head, sep, tail = raw.rpartition("/")
    index = tail.rfind(".")
    if index < 0:
        return raw
    return f"{head}{sep}{tail[:index]}"


def file_extension(raw: str) -> str:
    """Return the extension of ``raw`` without its leading dot (``""`` when absent)."""
    tail = raw.rpartition("/")[2]
    index = tail.rfind(".")
    if index < 0:
        return ""
    return tail[index + 1 :]


def derive_name(raw: str) -> str:
    """Turn a file name into a canonical package name.

    The extension is stripped, the result lowercased and every hyphen removed.
    Spaces, punctuation and non-ASCII characters pass through untouched, so
    ``"Vegur-Bold.otf"`` becomes ``"vegurbold"``.
    """
    return strip_extension(raw).lower().replace("-", "")


__all__ = ["base_name", "derive_name", "file_extension", "strip_extension"]
