"""
CLI command: config

Configuration management commands.
"""

import logging

import click

from geozone.settings import settings

# Configure module-level logger
logger = logging.getLogger("geozone.cli.config")


@click.group("config")
def cli():
    """
    Configuration management commands.
    """
    pass


@cli.command("show")
def show_config():
    """
    Show current configuration.
    """
    click.echo("GeoZone Configuration")
    click.echo("=" * 30)
    click.echo(f"Default Style: {settings.default_style}")
    click.echo(f"Default URL: {settings.default_url}")
    click.echo(f"Default Selector: {settings.default_selector}")
    click.echo(f"Request Timeout: {settings.request_timeout}")
    click.echo(f"Max Workers: {settings.max_workers}")
    click.echo(f"Log Level: {settings.log_level}")
