"""Implementation of the `fontpkg` generation command."""

from __future__ import annotations

from typing import Annotated

import click
import typer

from fontpkg.core.config import load_config
from fontpkg.core.exceptions import FontPackageError
from fontpkg.core.pipeline import generate_package
from fontpkg.version import get_version

from .._options import (
    DIAGNOSTICS_PANEL,
    ConfigOption,
    DebugOption,
    OutputRootOption,
    VerboseOption,
    ZipDirOption,
    ZipPathOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_package_summary
from ..state import debug_enabled, emit_error, set_cli_state


EXIT_FAILURE = 2


def _print_version(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def generate(
    zip_path: ZipPathOption,
    zipdir: ZipDirOption = "",
    output_root: OutputRootOption = None,
    config_path: ConfigOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the fontpkg version and exit.",
            callback=_print_version,
            is_eager=True,
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
) -> None:
    """Generate a Python font package from a zip archive of OTF/TTF files."""

    ctx = click.get_current_context(silent=True)
    typer_ctx = ctx if isinstance(ctx, typer.Context) else None
    state = set_cli_state(ctx=typer_ctx, verbosity=verbose, debug=debug)

    try:
        config = load_config(config_path)
        descriptor = generate_package(
            zip_path,
            prefix=zipdir,
            output_root=output_root,
            config=config,
            emitter=CliEmitter(state),
        )
    except FontPackageError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    present_package_summary(state, descriptor)


__all__ = ["EXIT_FAILURE", "generate"]
