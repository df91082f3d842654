"""
Loading of GeoIP settings blocks from YAML files.

The expected shape is::

    geoip:
        style:    "json"
        url:      "https://geoip.kde.org/v1/calamares"
        selector: ""
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_geoip_config(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load the ``geoip`` section of a YAML settings file.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"GeoIP settings file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or not isinstance(data, dict):
        raise ConfigurationError(f"Empty or invalid YAML file: {file_path}")

    section = data.get("geoip")
    if not isinstance(section, dict):
        raise ConfigurationError(f"No 'geoip' section in {file_path}")

    logger.debug(f"Loaded GeoIP settings from {file_path}: {section}")
    return section
