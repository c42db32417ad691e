"""Click-based CLI entry point for spectrumdirect."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from spectrumdirect.config import ADMIN_AREAS, DEFAULT_COMPANY_CD, DEFAULT_METRO, DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", count=True, help="Log progress (-v) or debug detail (-vv).")
def cli(verbose: int):
    """Spectrum Direct licence data: parse, map, and estimate tower range."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.option("--output", "fmt", type=click.Choice(OUTPUT_FORMATS), default=DEFAULT_OUTPUT_FORMAT, help="Output format.")
@click.option("--show-duplicates", is_flag=True, default=False, help="Show every station, not one per location.")
@click.option("--metro", default=DEFAULT_METRO, show_default=True, help="Metro area to keep.")
@click.option("--company", "company_cd", default=DEFAULT_COMPANY_CD, show_default=True, help="Licensee company code.")
@click.option(
    "--input",
    "inputs",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read saved dumps instead of fetching (repeatable).",
)
def towers(fmt: str, show_duplicates: bool, metro: str, company_cd: str, inputs: tuple[Path, ...]):
    """Fetch licensed stations and list the towers in one metro area."""
    from spectrumdirect.analysis.towers import collect_towers
    from spectrumdirect.harmonize.metro_areas import metro_names
    from spectrumdirect.output.renderers import render
    from spectrumdirect.parsers.document_parser import read_document

    if metro not in metro_names():
        raise click.BadParameter(f"choose from {', '.join(metro_names())}", param_hint="--metro")

    if inputs:
        documents = {str(path): read_document(path) for path in inputs}
    else:
        from spectrumdirect.storage.fetch import fetch_regions

        documents = fetch_regions(ADMIN_AREAS, company_cd=company_cd)
    if not documents:
        raise click.ClickException("No data could be retrieved.")

    df = collect_towers(documents, metro, show_duplicates=show_duplicates)
    click.echo(render(df, fmt))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def legend(path: Path):
    """Show the column legend of a saved dump."""
    from spectrumdirect.parsers.document_parser import read_document
    from spectrumdirect.parsers.legend_parser import parse_document_legend

    columns = parse_document_legend(read_document(path))
    if not columns:
        raise click.ClickException(f"No legend found in {path}")
    for col in columns:
        click.echo(f"{col.key:45s} {col.start + 1:4d} - {col.end:4d}  {col.unit or ''}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse(path: Path):
    """Decode a saved dump and print its records as JSON."""
    from spectrumdirect.parsers.document_parser import parse_file
    from spectrumdirect.parsers.record_decoder import ParseError

    try:
        parsed = parse_file(path)
    except ParseError as e:
        raise click.ClickException(f"{path}: {e}") from e

    click.echo(json.dumps(parsed.records, indent=2, ensure_ascii=False))
    click.echo(parsed.summary(), err=True)


if __name__ == "__main__":
    cli()
