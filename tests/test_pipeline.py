from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakeModuleInitializer, FakeVersionControl, RecordingEmitter, build_zip
from fontpkg.core.exceptions import ArchiveError
from fontpkg.core.pipeline import generate_package


def _generate(archive: Path, root: Path, prefix: str = "", **kwargs):
    kwargs.setdefault("module_initializer", FakeModuleInitializer())
    kwargs.setdefault("version_control", FakeVersionControl())
    return generate_package(archive, prefix=prefix, output_root=root, **kwargs)


def test_vegur_end_to_end(vegur_zip: Path, workspace: Path) -> None:
    emitter = RecordingEmitter()
    descriptor = _generate(vegur_zip, workspace, emitter=emitter)

    output = workspace / "font-vegur"
    assert descriptor.name == "vegur"
    assert descriptor.output_dir == output.resolve()
    assert [variant.package_name for variant in descriptor.variants] == [
        "vegurbold",
        "vegurregular",
    ]
    assert descriptor.license_file == "OFL.txt"

    assert (output / "vegurbold" / "Vegur-Bold.otf").read_bytes() == b"bold-font-bytes"
    assert (output / "vegurregular" / "Vegur-Regular.otf").exists()
    assert (output / "vegurbold" / "__init__.py").exists()
    assert (output / "OFL.txt").read_bytes() == b"SIL Open Font License"
    assert not (output / "FONTLOG.txt").exists()

    root_source = (output / "__init__.py").read_text(encoding="utf-8")
    assert root_source.index("from . import vegurbold") < root_source.index(
        "from . import vegurregular"
    )
    assert (workspace / "website" / "content" / "fonts" / "vegur.md").exists()
    assert emitter.names()[0] == "package_name"


def test_output_is_independent_of_archive_order(tmp_path: Path, workspace: Path) -> None:
    members = [
        ("Vegur-Bold.otf", b"b"),
        ("Vegur-Light.otf", b"l"),
        ("Vegur-Regular.otf", b"r"),
        ("OFL.txt", b"license"),
    ]
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    forward = build_zip(tmp_path / "a" / "Vegur.zip", members)
    backward = build_zip(tmp_path / "b" / "Vegur.zip", list(reversed(members)))

    first_root = workspace
    second_root = tmp_path / "second"
    (second_root / "website" / "content" / "fonts").mkdir(parents=True)

    _generate(forward, first_root)
    _generate(backward, second_root)

    for name in ("__init__.py", "README.md"):
        assert (first_root / "font-vegur" / name).read_bytes() == (
            second_root / "font-vegur" / name
        ).read_bytes()


def test_rerun_into_same_directory(vegur_zip: Path, workspace: Path) -> None:
    _generate(vegur_zip, workspace)
    first = (workspace / "font-vegur" / "__init__.py").read_bytes()

    emitter = RecordingEmitter()
    descriptor = _generate(vegur_zip, workspace, emitter=emitter)

    assert len(descriptor.variants) == 2
    assert (workspace / "font-vegur" / "__init__.py").read_bytes() == first
    existing = [payload["path"] for name, payload in emitter.events if name == "directory_exists"]
    assert len(existing) == 3


def test_prefix_filter_without_matches(tmp_path: Path, workspace: Path) -> None:
    archive = build_zip(
        tmp_path / "Vegur.zip",
        [
            ("other/Vegur-Bold.otf", b"b"),
            ("other/Vegur-Regular.otf", b"r"),
            ("other/OFL.txt", b"l"),
        ],
    )

    descriptor = _generate(archive, workspace, prefix="fonts/")

    assert descriptor.variants == []
    assert descriptor.license_file is None
    assert sorted(path.name for path in descriptor.output_dir.iterdir()) == [
        "README.md",
        "__init__.py",
    ]


def test_archive_name_is_normalised(tmp_path: Path, workspace: Path) -> None:
    archive = build_zip(tmp_path / "Go-Mono.zip", [("Go-Mono.ttf", b"m")])

    descriptor = _generate(archive, workspace)

    assert descriptor.name == "gomono"
    assert descriptor.dir_name == "font-gomono"
    assert descriptor.module_path == "gomono"


def test_missing_archive_fails_before_writing(tmp_path: Path, workspace: Path) -> None:
    with pytest.raises(ArchiveError):
        _generate(tmp_path / "Missing.zip", workspace)

    assert not (workspace / "font-missing").exists()
