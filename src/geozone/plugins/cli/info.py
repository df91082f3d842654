"""
CLI command: info

Displays GeoZone package version and the supported GeoIP styles.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

import click

from geozone.geoip import HandlerKind, list_extractor_kinds, xml_supported

# Configure module-level logger
logger = logging.getLogger("geozone.cli.info")


@click.command("info")
def cli() -> None:
    """
    Show package metadata and the available GeoIP styles.
    """
    # Retrieve package version, fallback if not installed
    try:
        pkg_version = version("geozone")
        logger.debug("Retrieved package version: %s", pkg_version)
    except PackageNotFoundError:
        pkg_version = "0.0.0-dev"
        logger.warning(
            "Package 'geozone' not found; using development version placeholder."
        )

    click.echo(f"GeoZone version: {pkg_version}")

    click.echo("\nAvailable GeoIP styles:")
    click.echo(f"  - {HandlerKind.NONE.value} (lookup disabled)")
    for kind in list_extractor_kinds():
        click.echo(f"  - {kind.value}")

    click.echo(f"\nXML support: {'yes' if xml_supported() else 'no (install lxml)'}")
