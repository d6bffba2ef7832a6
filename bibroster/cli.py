"""CLI interface for bibroster using Click.

Loads a roster and a bibliography, lists the publications of one
author, and reports that author's average co-author count.
"""

from __future__ import annotations

import logging
import sys

import click
import orjson
import pydantic
import yaml

from bibroster.core import BibRoster
from bibroster.exceptions import BibRosterError
from bibroster.export.bibtex import publications_to_bibtex
from bibroster.export.json_export import publications_to_json
from bibroster.export.report import format_publication
from bibroster.normalize import normalize_name


class _RosterCommand(click.Command):
    """Command that exits with status 1 on argument errors."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


@click.command(cls=_RosterCommand)
@click.argument("roster", type=click.Path(dir_okay=False))
@click.argument("bibliography", type=click.Path(dir_okay=False))
@click.argument("author")
@click.option(
    "-c",
    "--config",
    default=None,
    help="Path to a bibroster.yaml with affiliation labels.",
    type=click.Path(dir_okay=False),
)
@click.option(
    "--format",
    "output_format",
    default="text",
    type=click.Choice(["text", "json", "bibtex"]),
    help="Output format for matching publications.",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def main(
    roster: str,
    bibliography: str,
    author: str,
    config: str | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Search BIBLIOGRAPHY for publications by AUTHOR.

    ROSTER lists the institute's affiliated people, one per line.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        engine = BibRoster.from_roster_file(roster, config_path=config)
        publications = engine.parse_file(bibliography)
    except (FileNotFoundError, BibRosterError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except (yaml.YAMLError, pydantic.ValidationError) as exc:
        click.echo(f"Error: Invalid config file {config}: {exc}", err=True)
        sys.exit(1)

    query = normalize_name(author)
    matches = engine.search(publications, query)
    average = engine.average_coauthors(publications, author)

    if output_format == "json":
        report = {
            "query": author,
            "publications": publications_to_json(matches),
            "average_coauthors": average,
        }
        click.echo(orjson.dumps(report, option=orjson.OPT_INDENT_2).decode())
        return
    if output_format == "bibtex":
        click.echo(publications_to_bibtex(matches))
    else:
        click.echo(f'Searching for publications by "{query}"...')
        for pub in matches:
            click.echo(format_publication(pub))
        if not matches:
            click.echo(f'No publications found for "{query}".')

    click.echo(f'Average number of co-authors for "{author}": {average:g}')
