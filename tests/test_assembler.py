from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakeModuleInitializer, FakeVersionControl, RecordingEmitter
from fontpkg.adapters.commands import CommandResult, CommandStatus
from fontpkg.core.assembler import assemble_package
from fontpkg.core.config import GeneratorConfig
from fontpkg.core.exceptions import AssemblyError, CommandError
from fontpkg.core.models import PackageDescriptor, VariantDescriptor


def _descriptor(root: Path) -> PackageDescriptor:
    descriptor = PackageDescriptor.from_archive("Vegur.zip", root=root)
    descriptor.output_dir.mkdir(parents=True)
    descriptor.variants = [
        VariantDescriptor("Vegur-Regular.otf", "vegurregular", "OTF"),
        VariantDescriptor("Vegur-Bold.otf", "vegurbold", "OTF"),
    ]
    descriptor.license_file = "OFL.txt"
    return descriptor


def test_assemble_writes_package_files(workspace: Path) -> None:
    descriptor = _descriptor(workspace)
    initializer = FakeModuleInitializer()
    vcs = FakeVersionControl()

    assemble_package(descriptor, module_initializer=initializer, version_control=vcs)

    assert [variant.package_name for variant in descriptor.variants] == [
        "vegurbold",
        "vegurregular",
    ]
    root_source = (descriptor.output_dir / "__init__.py").read_text(encoding="utf-8")
    assert root_source.index("vegurbold") < root_source.index("vegurregular")
    assert (descriptor.output_dir / "README.md").exists()
    assert (workspace / "website" / "content" / "fonts" / "vegur.md").read_bytes() == b""
    assert initializer.calls == [
        ("initialize", descriptor.output_dir),
        ("resolve", descriptor.output_dir),
    ]
    assert vcs.calls == [
        ("init",),
        ("remote", "origin", "git@github.com:fontpkg/font-vegur.git"),
        ("stage",),
    ]


def test_sort_is_stable_for_equal_names(workspace: Path) -> None:
    descriptor = _descriptor(workspace)
    descriptor.variants = [
        VariantDescriptor("B.otf", "b", "OTF"),
        VariantDescriptor("a-1.ttf", "a1", "TTF"),
        VariantDescriptor("A1.otf", "a1", "OTF"),
    ]

    assemble_package(
        descriptor,
        module_initializer=FakeModuleInitializer(),
        version_control=FakeVersionControl(),
    )

    assert [variant.font_file_name for variant in descriptor.variants] == [
        "a-1.ttf",
        "A1.otf",
        "B.otf",
    ]


def test_already_initialized_steps_are_tolerated(workspace: Path) -> None:
    descriptor = _descriptor(workspace)
    emitter = RecordingEmitter()
    vcs = FakeVersionControl(init_status=CommandStatus.ALREADY_INITIALIZED)

    assemble_package(
        descriptor,
        module_initializer=FakeModuleInitializer(init_status=CommandStatus.ALREADY_INITIALIZED),
        version_control=vcs,
        emitter=emitter,
    )

    assert vcs.calls == [("init",), ("stage",)]
    statuses = {
        name: payload["status"]
        for name, payload in emitter.events
        if name in {"module_initialized", "vcs_initialized"}
    }
    assert statuses == {
        "module_initialized": "already initialized",
        "vcs_initialized": "already initialized",
    }


@pytest.mark.parametrize(
    ("initializer", "vcs", "step"),
    [
        (
            FakeModuleInitializer(init_status=CommandStatus.FAILED),
            FakeVersionControl(),
            "initializing package metadata",
        ),
        (
            FakeModuleInitializer(resolve_status=CommandStatus.FAILED),
            FakeVersionControl(),
            "resolving dependencies",
        ),
        (
            FakeModuleInitializer(),
            FakeVersionControl(init_status=CommandStatus.FAILED),
            "initializing repository",
        ),
        (
            FakeModuleInitializer(),
            FakeVersionControl(remote_status=CommandStatus.FAILED),
            "configuring repository remote",
        ),
        (
            FakeModuleInitializer(),
            FakeVersionControl(stage_status=CommandStatus.FAILED),
            "staging generated files",
        ),
        (
            FakeModuleInitializer(resolve_status=CommandStatus.ALREADY_INITIALIZED),
            FakeVersionControl(),
            "resolving dependencies",
        ),
    ],
)
def test_failing_steps_abort(
    workspace: Path,
    initializer: FakeModuleInitializer,
    vcs: FakeVersionControl,
    step: str,
) -> None:
    descriptor = _descriptor(workspace)

    with pytest.raises(AssemblyError) as excinfo:
        assemble_package(descriptor, module_initializer=initializer, version_control=vcs)

    assert excinfo.value.step == step
    assert str(excinfo.value).startswith(f"{step}: ")
    assert not (workspace / "website" / "content" / "fonts" / "vegur.md").exists()


def test_missing_website_directory_is_fatal(tmp_path: Path) -> None:
    descriptor = _descriptor(tmp_path)

    with pytest.raises(AssemblyError) as excinfo:
        assemble_package(
            descriptor,
            module_initializer=FakeModuleInitializer(),
            version_control=FakeVersionControl(),
        )

    assert excinfo.value.step == "making website entry"


def test_website_marker_can_be_disabled(tmp_path: Path) -> None:
    descriptor = _descriptor(tmp_path)

    assemble_package(
        descriptor,
        module_initializer=FakeModuleInitializer(),
        version_control=FakeVersionControl(),
        config=GeneratorConfig(website_marker=False),
    )

    assert not (tmp_path / "website").exists()
    assert (descriptor.output_dir / "README.md").exists()


class _MissingToolInitializer(FakeModuleInitializer):
    def initialize(self, directory: Path, descriptor: PackageDescriptor) -> CommandResult:
        raise CommandError("'hatch' is required but was not found on PATH.")


class _MissingGit(FakeVersionControl):
    def set_remote(self, directory: Path, name: str, url: str) -> CommandResult:
        raise CommandError("'git' is required but was not found on PATH.")


@pytest.mark.parametrize(
    ("initializer", "vcs", "step"),
    [
        (_MissingToolInitializer(), FakeVersionControl(), "initializing package metadata"),
        (FakeModuleInitializer(), _MissingGit(), "configuring repository remote"),
    ],
)
def test_missing_executable_names_failing_step(
    workspace: Path,
    initializer: FakeModuleInitializer,
    vcs: FakeVersionControl,
    step: str,
) -> None:
    descriptor = _descriptor(workspace)

    with pytest.raises(AssemblyError) as excinfo:
        assemble_package(descriptor, module_initializer=initializer, version_control=vcs)

    assert excinfo.value.step == step
    assert isinstance(excinfo.value.__cause__, CommandError)
    assert "not found on PATH" in str(excinfo.value)
