"""Command-line interface for imagescout."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click
import structlog

from imagescout import __version__
from imagescout.config.config import load_config
from imagescout.exceptions import ConfigurationError, FetchError
from imagescout.observability.logging import configure_logging
from imagescout.scraper import ImageSearchScraper
from imagescout.utils.atomic import atomic_write_json

logger = structlog.get_logger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.argument("query", required=False)
@click.argument("max_images", type=click.IntRange(min=0), required=False)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the configuration file)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the JSON report to this file",
)
@click.option("--compact", is_flag=True, help="Print the report on a single line")
def cli(
    query: Optional[str],
    max_images: Optional[int],
    config_path: Optional[Path],
    log_level: Optional[str],
    output: Optional[Path],
    compact: bool,
) -> None:
    """Search images for QUERY and print a JSON report of up to MAX_IMAGES results."""
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if log_level:
        config.monitoring.log_level = log_level.upper()
    configure_logging(config.monitoring)

    if query is None:
        query = config.scraper.default_query
    if max_images is None:
        max_images = config.scraper.default_max_images

    try:
        report = asyncio.run(ImageSearchScraper(config).search(query, max_images))
    except FetchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    indent = None if compact else 2
    click.echo(report.to_json(indent=indent))

    if output:
        try:
            atomic_write_json(output, report.to_dict(), indent=indent)
        except OSError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        logger.info("Report saved", path=str(output))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
