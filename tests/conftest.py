from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import importlib.util
import io
from pathlib import Path
import sys
from types import ModuleType
import zipfile

import pytest

from fontpkg.adapters.commands import CommandResult, CommandStatus
from fontpkg.core.models import PackageDescriptor


def build_zip(path: Path, members: Iterable[tuple[str, bytes]]) -> Path:
    """Write a zip archive holding ``members`` in the given order."""
    with zipfile.ZipFile(path, "w") as archive:
        for name, data in members:
            archive.writestr(name, data)
    return path


def make_font_bytes(family: str = "Test", style: str = "Regular") -> bytes:
    """Build a minimal but valid TrueType font."""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    glyph = pen.glyph()

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder([".notdef", "A"])
    builder.setupCharacterMap({ord("A"): "A"})
    builder.setupGlyf({".notdef": glyph, "A": glyph})
    builder.setupHorizontalMetrics({".notdef": (600, 100), "A": (600, 100)})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": family, "styleName": style})
    builder.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    buffer = io.BytesIO()
    builder.save(buffer)
    return buffer.getvalue()


def load_generated_package(directory: Path, module_name: str) -> ModuleType:
    """Import a generated output directory as package ``module_name``."""
    spec = importlib.util.spec_from_file_location(
        module_name,
        directory / "__init__.py",
        submodule_search_locations=[str(directory)],
    )
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


@dataclass
class FakeModuleInitializer:
    init_status: CommandStatus = CommandStatus.SUCCESS
    resolve_status: CommandStatus = CommandStatus.SUCCESS
    calls: list[tuple[str, Path]] = field(default_factory=list)

    def initialize(self, directory: Path, descriptor: PackageDescriptor) -> CommandResult:
        self.calls.append(("initialize", directory))
        return CommandResult(self.init_status, ("init",), "init detail")

    def resolve(self, directory: Path) -> CommandResult:
        self.calls.append(("resolve", directory))
        return CommandResult(self.resolve_status, ("resolve",), "resolve detail")


@dataclass
class FakeVersionControl:
    init_status: CommandStatus = CommandStatus.SUCCESS
    remote_status: CommandStatus = CommandStatus.SUCCESS
    stage_status: CommandStatus = CommandStatus.SUCCESS
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def initialize(self, directory: Path) -> CommandResult:
        self.calls.append(("init",))
        return CommandResult(self.init_status, ("git", "init"))

    def set_remote(self, directory: Path, name: str, url: str) -> CommandResult:
        self.calls.append(("remote", name, url))
        return CommandResult(self.remote_status, ("git", "remote", "add", name, url))

    def stage_all(self, directory: Path) -> CommandResult:
        self.calls.append(("stage",))
        return CommandResult(self.stage_status, ("git", "add", "-A"))


@dataclass
class RecordingEmitter:
    debug_enabled: bool = False
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    events: list[tuple[str, dict]] = field(default_factory=list)

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append(message)

    def event(self, name: str, payload) -> None:
        self.events.append((name, dict(payload)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Output root with the website tree the generator expects."""
    root = tmp_path / "work"
    (root / "website" / "content" / "fonts").mkdir(parents=True)
    return root


@pytest.fixture
def vegur_zip(tmp_path: Path) -> Path:
    return build_zip(
        tmp_path / "Vegur.zip",
        [
            ("Vegur-Regular.otf", b"regular-font-bytes"),
            ("Vegur-Bold.otf", b"bold-font-bytes"),
            ("OFL.txt", b"SIL Open Font License"),
            ("FONTLOG.txt", b"changes"),
            ("specimen.pdf", b"%PDF"),
        ],
    )
