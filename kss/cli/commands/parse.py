"""Parse command for listing the sections of a style guide."""

from __future__ import annotations

import json
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kss.config import load_config
from kss.errors import KssError
from kss.styleguide import StyleGuide
from kss.traverse import traverse

console = Console()


def source_options(command: Callable) -> Callable:
    """Add the options shared by commands that parse stylesheets."""
    decorators = [
        click.option("--config", "config_path", default=None, help="Path to a YAML config file"),
        click.option("--mask", default=None, help="File name patterns to parse, separated by '|'"),
        click.option("--markdown/--no-markdown", default=None, help="Render descriptions as Markdown"),
        click.option("--header/--no-header", default=None, help="Remove the header from descriptions"),
        click.option("--typos/--no-typos", default=None, help="Accept misspelled labels and keywords"),
        click.option("--custom", multiple=True, help="Extra property label to extract (repeatable)"),
    ]
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


def load_styleguide(
    sources: tuple[str, ...],
    config_path: str | None,
    mask: str | None,
    markdown: bool | None,
    header: bool | None,
    typos: bool | None,
    custom: tuple[str, ...],
) -> StyleGuide:
    """Build a style guide from command line arguments and the config file.

    Command line values take precedence over the config file.
    """
    try:
        config = load_config(config_path)
        options = config.options.merge(
            markdown=markdown,
            header=header,
            typos=typos,
            custom=custom or None,
        )
        directories = list(sources) or config.source
        if not directories:
            console.print("[red]Error:[/red] No source directories given")
            raise SystemExit(1)
        styleguide = traverse(directories, options, mask=mask or config.mask)
    except (KssError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not styleguide.sections:
        console.print("[yellow]No KSS documentation found in the given sources[/yellow]")
        raise SystemExit(1)
    return styleguide


@click.command("parse")
@click.argument("sources", nargs=-1)
@source_options
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--sorted", "sort_sections", is_flag=True, help="Order sections by reference")
def parse_command(
    sources: tuple[str, ...],
    config_path: str | None,
    mask: str | None,
    markdown: bool | None,
    header: bool | None,
    typos: bool | None,
    custom: tuple[str, ...],
    output_json: bool,
    sort_sections: bool,
) -> None:
    """Parse stylesheets and list their documented sections.

    SOURCES are directories (or files) to search for stylesheets.

    Examples:

        kss parse styles/

        kss parse styles/ --json --no-markdown

        kss parse styles/ --custom Colors --typos
    """
    styleguide = load_styleguide(sources, config_path, mask, markdown, header, typos, custom)

    if output_json:
        data = styleguide.to_dict(sort=sort_sections)
        click.echo(json.dumps(data, indent=2))
        return

    sections = styleguide.sorted_sections() if sort_sections else styleguide.sections

    table = Table(title="Style Guide Sections", show_header=True)
    table.add_column("Reference", style="cyan")
    table.add_column("Header")
    table.add_column("Modifiers")
    table.add_column("Parameters")
    table.add_column("Status")

    for section in sections:
        status = []
        if section.deprecated:
            status.append("[red]deprecated[/red]")
        if section.experimental:
            status.append("[yellow]experimental[/yellow]")
        table.add_row(
            escape(section.reference),
            escape(section.header),
            str(len(section.modifiers)) if section.modifiers else "-",
            str(len(section.parameters)) if section.parameters else "-",
            ", ".join(status) or "-",
        )

    console.print(table)
    console.print(f"\n{len(styleguide.sections)} sections in {len(styleguide.files)} files")
