"""Main CLI entry point for kss."""

import logging

import click

from kss import __version__
from kss.cli.commands.parse import parse_command
from kss.cli.commands.show import show_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages")
def cli(verbose: bool) -> None:
    """KSS - Style guides from documented stylesheets.

    Reads the KSS documentation comments of CSS, Less, Sass and Stylus
    files and lists the style guide sections they describe.

    \b
    EXAMPLES:
      kss parse styles/                  List all documented sections
      kss parse styles/ --json           Output sections as JSON
      kss show 2.1.3 styles/             Show a single section
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(parse_command, name="parse")
cli.add_command(show_command, name="show")


if __name__ == "__main__":
    cli()
