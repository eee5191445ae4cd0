"""Descriptors shared by the generation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .config import GeneratorConfig
from .names import base_name, derive_name


@dataclass(frozen=True, slots=True)
class VariantDescriptor:
    """One font variant turned into a sub-package."""

    font_file_name: str  # Source file, e.g. "Vegur-Bold.otf"
    package_name: str  # Derived from the file name, e.g. "vegurbold"
    data_var_name: str  # Upper-cased extension, e.g. "OTF"


@dataclass(slots=True)
class PackageDescriptor:
    """The font package being generated."""

    name: str
    dir_name: str
    module_path: str
    remote_url: str
    root: Path = field(default_factory=Path.cwd)
    variants: list[VariantDescriptor] = field(default_factory=list)
    license_file: str | None = None

    @classmethod
    def from_archive(
        cls,
        archive_path: str | Path,
        *,
        config: GeneratorConfig | None = None,
        root: Path | None = None,
    ) -> PackageDescriptor:
        """Build the descriptor from the archive file name."""
        config = config or GeneratorConfig()
        name = derive_name(base_name(Path(archive_path).as_posix()))
        return cls(
            name=name,
            dir_name=f"{config.dir_prefix}{name}",
            module_path=config.format(config.module_path, name),
            remote_url=config.format(config.remote_url, name),
            root=root if root is not None else Path.cwd(),
        )

    @property
    def output_dir(self) -> Path:
        return self.root / self.dir_name

    @property
    def distribution_name(self) -> str:
        return self.dir_name

    @property
    def display_name(self) -> str:
        """Human-readable family label used in generated documentation."""
        return self.name.capitalize()

    def sort_variants(self) -> None:
        """Order variants by package name; ties keep their archive order."""
        self.variants.sort(key=lambda variant: variant.package_name)


__all__ = ["PackageDescriptor", "VariantDescriptor"]
