"""Jinja2 rendering of the generated package sources and documents."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .models import PackageDescriptor, VariantDescriptor


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

VARIANT_SOURCE_TEMPLATE = "variant_init.py.jinja"
ROOT_SOURCE_TEMPLATE = "root_init.py.jinja"
README_TEMPLATE = "README.md.jinja"
PYPROJECT_TEMPLATE = "pyproject.toml.jinja"


def _toml_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared environment loading the packaged templates."""
    environment = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    environment.filters.setdefault("toml", _toml_string)
    return environment


def render(template_name: str, **context: Any) -> str:
    """Render one of the packaged templates."""
    return get_environment().get_template(template_name).render(context)


def render_variant_source(variant: VariantDescriptor) -> str:
    """Render the ``__init__.py`` exporting a variant's font bytes."""
    return render(
        VARIANT_SOURCE_TEMPLATE,
        package_name=variant.package_name,
        font_file_name=variant.font_file_name,
        data_var_name=variant.data_var_name,
    )


def render_root_source(descriptor: PackageDescriptor) -> str:
    """Render the aggregator ``__init__.py`` registering every variant."""
    return render(ROOT_SOURCE_TEMPLATE, font=descriptor, variants=descriptor.variants)


def render_readme(descriptor: PackageDescriptor) -> str:
    return render(README_TEMPLATE, font=descriptor, variants=descriptor.variants)


def render_pyproject(
    descriptor: PackageDescriptor,
    *,
    fonttools_requirement: str,
    requires_python: str,
    font_extensions: Sequence[str] = ("otf", "ttf"),
) -> str:
    """Render the generated distribution metadata."""
    patterns: list[str] = []
    for extension in font_extensions:
        for candidate in (extension.lower(), extension.upper()):
            if candidate not in patterns:
                patterns.append(candidate)
    return render(
        PYPROJECT_TEMPLATE,
        font=descriptor,
        source_prefix=descriptor.module_path.replace(".", "/"),
        font_extensions=patterns,
        fonttools_requirement=fonttools_requirement,
        requires_python=requires_python,
    )


__all__ = [
    "PYPROJECT_TEMPLATE",
    "README_TEMPLATE",
    "ROOT_SOURCE_TEMPLATE",
    "TEMPLATE_DIR",
    "TemplateError",
    "VARIANT_SOURCE_TEMPLATE",
    "get_environment",
    "render",
    "render_pyproject",
    "render_readme",
    "render_root_source",
    "render_variant_source",
]
