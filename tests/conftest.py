"""
Fixtures and test configuration for the GeoZone test suite.
"""

import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests
import yaml

from geozone.geoip.dispatch import TaskDispatcher
from geozone.settings import Settings


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def test_settings():
    """Create test settings with small limits."""
    return Settings(
        log_level="DEBUG",
        max_workers=2,
        request_timeout=5,
    )


@pytest.fixture
def dispatcher():
    """Create a private dispatcher that is shut down after the test."""
    with TaskDispatcher(max_workers=4) as d:
        yield d


@pytest.fixture
def json_body():
    """Sample answer of a JSON GeoIP service."""
    return b'{"country": "NL", "timezone": "Europe/Amsterdam"}'


@pytest.fixture
def nested_json_body():
    """Sample JSON answer with the timezone nested one level down."""
    return (
        b'{"ip": "192.0.2.1", "location": {"time_zone": "America/Argentina/Cordoba",'
        b' "accuracy_radius": 100}, "country": {"iso_code": "AR"}}'
    )


@pytest.fixture
def xml_body():
    """Sample answer of an XML GeoIP service."""
    return (
        b"<?xml version='1.0' encoding='UTF-8'?>\n"
        b"<Response><Ip>192.0.2.1</Ip><CountryCode>NL</CountryCode>"
        b"<TimeZone>Europe/Amsterdam</TimeZone></Response>"
    )


@pytest.fixture
def mock_fetch():
    """Replace the network fetch used by the resolver with a Mock."""
    with patch("geozone.geoip.handler.fetch_url") as fetch:
        fetch.return_value = b""
        yield fetch


@pytest.fixture
def geoip_yaml(temp_dir):
    """Write a settings file with a geoip section."""
    path = temp_dir / "welcome.conf"
    data = {
        "showSupportUrl": True,
        "geoip": {
            "style": "json",
            "url": "https://geoip.example/lookup",
            "selector": "country,timezone",
        },
    }
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def failing_response():
    """A requests response whose raise_for_status fails."""
    response = Mock()
    response.content = b"Service Unavailable"
    response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
    return response
