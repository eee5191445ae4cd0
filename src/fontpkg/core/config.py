"""Configuration model for the package generator.

GeneratorConfig

`dir_prefix` (`str`)
: Prefix prepended to the canonical package name to form the output
  directory (and distribution) name.

`module_path` (`str`)
: Import path of the generated root package. `{name}` expands to the
  canonical package name.

`remote_url` (`str`)
: Address configured as the `origin` remote of a freshly initialised
  repository. `{name}` expands to the canonical package name.

`license_token` (`str`)
: Lowercase stem identifying the license entry inside the archive.

`font_extensions` (`list[str]`)
: Lowercase extensions routed to variant sub-packages.

`website_dir` (`Path`)
: Directory, relative to the output root, receiving the empty routing
  marker named after the package.

`website_marker` (`bool`)
: Toggle the website marker step.

`resolve_command` (`list[str]`)
: Command resolving the generated package dependencies inside the output
  directory. An empty list skips dependency resolution.

`fonttools_requirement` (`str`)
: Requirement string written into the generated `pyproject.toml`.

`requires_python` (`str`)
: Interpreter constraint written into the generated `pyproject.toml`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigError


class GeneratorConfig(BaseModel):
    """Settings shared by every stage of a generation run."""

    model_config = ConfigDict(extra="forbid")

    dir_prefix: str = "font-"
    module_path: str = "{name}"
    remote_url: str = "git@github.com:fontpkg/font-{name}.git"
    license_token: str = "ofl"
    font_extensions: list[str] = Field(default_factory=lambda: ["otf", "ttf"])
    website_dir: Path = Path("website/content/fonts")
    website_marker: bool = True
    resolve_command: list[str] = Field(default_factory=lambda: ["uv", "lock"])
    fonttools_requirement: str = "fonttools>=4.33"
    requires_python: str = ">=3.10"

    @field_validator("module_path", "remote_url")
    @classmethod
    def _require_name_placeholder(cls, value: str) -> str:
        if "{name}" not in value:
            raise ValueError("must contain the '{name}' placeholder")
        return value

    @field_validator("license_token")
    @classmethod
    def _lowercase_token(cls, value: str) -> str:
        token = value.strip().lower()
        if not token:
            raise ValueError("must not be empty")
        return token

    @field_validator("font_extensions")
    @classmethod
    def _normalise_extensions(cls, values: list[str]) -> list[str]:
        extensions = [value.strip().lstrip(".").lower() for value in values]
        if not all(extensions):
            raise ValueError("extensions must not be empty")
        return extensions

    def format(self, template: str, name: str) -> str:
        """Expand a ``{name}`` template with the canonical package name."""
        return template.replace("{name}", name)


def load_config(path: Path | None = None, **overrides: Any) -> GeneratorConfig:
    """Load a configuration file (YAML) and apply keyword overrides."""
    data: dict[str, Any] = {}
    if path is not None:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Unable to read configuration file '{path}': {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file '{path}': {exc}") from exc
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Configuration file '{path}' must contain a mapping.")
        data.update(raw)
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        source = f"'{path}'" if path is not None else "overrides"
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


__all__ = ["GeneratorConfig", "load_config"]
