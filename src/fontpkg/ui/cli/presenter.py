"""Rich presentation helpers for CLI summaries."""

from __future__ import annotations

from rich import box
from rich.table import Table

from fontpkg.core.models import PackageDescriptor

from .state import CLIState


def present_package_summary(state: CLIState, descriptor: PackageDescriptor) -> None:
    """Print the generated variants and where the package was written."""
    console = state.console
    if not descriptor.variants:
        console.print(
            f"[yellow]No font variants found[/]; wrote an empty package to {descriptor.output_dir}"
        )
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
    table.add_column("Package")
    table.add_column("Font file")
    table.add_column("Data")
    for variant in descriptor.variants:
        table.add_row(
            f"{descriptor.module_path}.{variant.package_name}",
            variant.font_file_name,
            variant.data_var_name,
        )
    console.print(table)

    license_note = descriptor.license_file or "none"
    console.print(
        f"[green]Generated[/] {descriptor.dir_name} "
        f"({len(descriptor.variants)} variants, license: {license_note})"
    )


__all__ = ["present_package_summary"]
