"""Show command for displaying a single section."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from kss.cli.commands.parse import load_styleguide, source_options

console = Console()


@click.command("show")
@click.argument("reference")
@click.argument("sources", nargs=-1)
@source_options
def show_command(
    reference: str,
    sources: tuple[str, ...],
    config_path: str | None,
    mask: str | None,
    markdown: bool | None,
    header: bool | None,
    typos: bool | None,
    custom: tuple[str, ...],
) -> None:
    """Show the section with a given reference.

    REFERENCE is a style guide reference such as 2.1.3. SOURCES are
    directories (or files) to search for stylesheets.
    """
    styleguide = load_styleguide(sources, config_path, mask, markdown, header, typos, custom)

    section = styleguide.section(reference)
    if section is None:
        console.print(f"[red]Error:[/red] Section '{reference}' not found")
        raise SystemExit(1)

    lines = [f"[bold]Reference:[/bold] {escape(section.reference)}"]
    if section.deprecated:
        lines.append("[red]Deprecated[/red]")
    if section.experimental:
        lines.append("[yellow]Experimental[/yellow]")
    if section.weight:
        lines.append(f"[bold]Weight:[/bold] {section.weight}")
    if section.description:
        lines.append("")
        lines.append(escape(section.description.strip()))
    for name, value in section.custom.items():
        lines.append(f"[bold]{escape(name.title())}:[/bold] {escape(value)}")

    console.print(Panel("\n".join(lines), title=escape(section.header), expand=False))

    if section.markup is not None:
        console.print("\n[bold]Markup:[/bold]")
        console.print(section.markup, markup=False)

    entries = section.modifiers or section.parameters
    if entries:
        table = Table(title="Modifiers" if section.modifiers else "Parameters", show_header=True)
        table.add_column("Name", style="cyan")
        table.add_column("Description")
        for entry in entries:
            table.add_row(escape(entry.name), escape(entry.description))
        console.print(table)
