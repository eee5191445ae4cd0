"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

ZipPathOption = Annotated[
    Path,
    typer.Option(
        "--zip",
        help="Path of the zip file containing the fonts.",
        dir_okay=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ZipDirOption = Annotated[
    str,
    typer.Option(
        "--zipdir",
        help="Only process files that match this path prefix within the zip.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

OutputRootOption = Annotated[
    Path | None,
    typer.Option(
        "--output-root",
        "-o",
        help=(
            "Directory receiving the generated package directory. "
            "Defaults to the current working directory."
        ),
        file_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file overriding the generator settings.",
        exists=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Print info on each step as it happens. Repeat for error details.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
