"""
CLI command: lookup

Resolves the current region and timezone through a GeoIP service.
"""

import logging
from typing import Optional

import click

from geozone.geoip import ConfigurationError, GeoIPResolver
from geozone.settings import Settings

# Configure module-level logger
logger = logging.getLogger("geozone.cli.lookup")


@click.command("lookup")
@click.option("--style", type=click.STRING, default=None, help="none, json or xml")
@click.option("--url", type=click.STRING, default=None, help="GeoIP service URL")
@click.option("--selector", type=click.STRING, default=None, help="Response selector")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with a geoip section",
)
@click.option("--raw", is_flag=True, help="Print the unparsed service response")
@click.option(
    "--background/--foreground",
    default=False,
    help="Run the lookup on a worker thread",
)
def cli(
    style: Optional[str],
    url: Optional[str],
    selector: Optional[str],
    config_file: Optional[str],
    raw: bool,
    background: bool,
) -> None:
    """
    Look up the region and timezone of this machine.

    Options not given on the command line come from the GEOZONE_DEFAULT_*
    environment settings, or from the geoip section of --config.
    """
    if config_file:
        try:
            resolver = GeoIPResolver.from_yaml(config_file)
        except (FileNotFoundError, ConfigurationError) as e:
            logger.error("Cannot load GeoIP settings: %s", e)
            click.echo(f"Error: {e}")
            raise click.Abort()
    else:
        settings = Settings()
        resolver = GeoIPResolver(
            style if style is not None else settings.default_style,
            url if url is not None else settings.default_url,
            selector if selector is not None else settings.default_selector,
        )

    if not resolver.is_valid():
        click.echo("Error: GeoIP lookup is not configured (style is 'none').")
        raise click.Abort()

    logger.info("Looking up location with %r", resolver)

    if raw:
        body = resolver.query_raw().result() if background else resolver.get_raw()
        click.echo(body)
        return

    pair = resolver.query().result() if background else resolver.get()
    click.echo(str(pair))
