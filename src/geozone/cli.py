"""
Core GeoZone CLI: dynamically loads commands from plugins/cli.

Global options adjust the shared settings that lookups read, so
``geozone --timeout 5 lookup ...`` bounds the GeoIP request.
"""

import importlib
import logging
import pathlib
import pkgutil

import click

from geozone.geoip.dispatch import shutdown_dispatcher
from geozone.settings import settings

# Logging configuration for every geozone.* logger
logger = logging.getLogger("geozone")
handler = logging.StreamHandler()
formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(getattr(logging, settings.log_level.upper()))


@click.group()
@click.option("--log-level", default=settings.log_level, help="Set logging level")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=settings.request_timeout,
    help="GeoIP request timeout in seconds",
)
@click.pass_context
def main(ctx, log_level, timeout):
    """
    GeoZone CLI
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    ctx.obj["timeout"] = timeout

    logger.setLevel(getattr(logging, log_level.upper()))
    settings.log_level = log_level
    settings.request_timeout = timeout

    # Background lookups run on the shared dispatcher; release its workers
    ctx.call_on_close(shutdown_dispatcher)


def load_commands():
    """
    Auto-discover and register click commands from src/geozone/plugins/cli/*.py
    Each plugin module must define a top-level `cli` click.Command.
    """
    plugins_path = pathlib.Path(__file__).parent / "plugins" / "cli"
    package = "geozone.plugins.cli"
    for _, module_name, _ in pkgutil.iter_modules([str(plugins_path)]):
        full_name = f"{package}.{module_name}"
        try:
            module = importlib.import_module(full_name)
            cmd = getattr(module, "cli", None)
            if isinstance(cmd, click.Command):
                main.add_command(cmd)
        except Exception as e:
            logger.error(f"Failed to load plugin {full_name}: {e}")


load_commands()

if __name__ == "__main__":
    main()
