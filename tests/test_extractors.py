"""
Tests for the GeoIP response extractors and their registry.
"""

import pytest

from geozone.geoip.extract import (
    BaseExtractor,
    ExtractorRegistry,
    JsonExtractor,
    XmlExtractor,
    create_extractor,
    list_extractor_kinds,
    register_extractor,
)
from geozone.geoip.types import HandlerKind, RegionZonePair

requires_xml = pytest.mark.skipif(XmlExtractor is None, reason="lxml not installed")


class TestJsonExtractor:
    """Test cases for JsonExtractor."""

    def test_kind(self):
        assert JsonExtractor().kind is HandlerKind.JSON

    def test_two_field_selector(self, json_body):
        pair = JsonExtractor().extract(json_body, "country,timezone")
        assert pair == RegionZonePair(region="NL", zone="Europe/Amsterdam")

    def test_selector_whitespace_is_ignored(self, json_body):
        pair = JsonExtractor().extract(json_body, " country , timezone ")
        assert pair == RegionZonePair(region="NL", zone="Europe/Amsterdam")

    def test_timezone_selector_is_split(self, json_body):
        pair = JsonExtractor().extract(json_body, "timezone")
        assert pair == RegionZonePair(region="Europe", zone="Amsterdam")

    def test_default_selector(self):
        body = b'{"time_zone": "Europe/Amsterdam"}'
        pair = JsonExtractor().extract(body, "")
        assert pair == RegionZonePair(region="Europe", zone="Amsterdam")

    def test_nested_selector(self, nested_json_body):
        pair = JsonExtractor().extract(nested_json_body, "location.time_zone")
        assert pair == RegionZonePair(region="America", zone="Argentina/Cordoba")

    def test_nested_two_field_selector(self, nested_json_body):
        pair = JsonExtractor().extract(
            nested_json_body, "country.iso_code,location.time_zone"
        )
        assert pair.region == "AR"
        assert pair.zone == "America/Argentina/Cordoba"

    def test_missing_field_is_partial(self, json_body):
        pair = JsonExtractor().extract(json_body, "country,tz")
        assert pair == RegionZonePair(region="NL", zone=None)

    def test_missing_timezone_is_empty(self, json_body):
        assert JsonExtractor().extract(json_body, "time_zone") == RegionZonePair()

    def test_non_scalar_value_is_ignored(self, nested_json_body):
        pair = JsonExtractor().extract(nested_json_body, "country,location")
        assert pair == RegionZonePair()

    def test_numeric_value_is_rendered(self):
        body = b'{"region": 42, "zone": "Pacific/Auckland"}'
        pair = JsonExtractor().extract(body, "region,zone")
        assert pair == RegionZonePair(region="42", zone="Pacific/Auckland")

    def test_null_value_is_ignored(self):
        body = b'{"time_zone": null}'
        assert JsonExtractor().extract(body, "") == RegionZonePair()

    def test_top_level_array(self):
        body = b'["Europe/Amsterdam"]'
        assert JsonExtractor().extract(body, "") == RegionZonePair()

    def test_malformed_body(self):
        assert JsonExtractor().extract(b"{not json", "") == RegionZonePair()

    def test_invalid_utf8_body(self):
        assert JsonExtractor().extract(b"\xff\xfe\xfa", "") == RegionZonePair()

    def test_empty_body(self):
        assert JsonExtractor().extract(b"", "country,timezone") == RegionZonePair()

    @pytest.mark.parametrize("body", [b"[" * 200000, b'{"a":' * 200000])
    def test_deeply_nested_body(self, body):
        assert JsonExtractor().extract(body, "country,timezone") == RegionZonePair()

    @pytest.mark.parametrize("selector", ["timezone,", ",timezone", " timezone , "])
    def test_selector_with_empty_half_is_single_locator(self, json_body, selector):
        pair = JsonExtractor().extract(json_body, selector)
        assert pair == RegionZonePair(region="Europe", zone="Amsterdam")

    def test_selector_with_only_comma_uses_default(self):
        body = b'{"time_zone": "Europe/Amsterdam"}'
        pair = JsonExtractor().extract(body, ",")
        assert pair == RegionZonePair(region="Europe", zone="Amsterdam")

    def test_quoted_timezone_is_cleaned(self):
        body = b'{"time_zone": "\\"America/New York\\""}'
        pair = JsonExtractor().extract(body, "")
        assert pair == RegionZonePair(region="America", zone="New_York")

    def test_passthrough(self, json_body):
        assert JsonExtractor().passthrough(json_body) == json_body.decode()

    def test_passthrough_invalid_bytes(self):
        text = JsonExtractor().passthrough(b"abc\xffdef")
        assert text.startswith("abc")
        assert text.endswith("def")


@requires_xml
class TestXmlExtractor:
    """Test cases for XmlExtractor."""

    def test_kind(self):
        assert XmlExtractor().kind is HandlerKind.XML

    def test_default_selector(self, xml_body):
        pair = XmlExtractor().extract(xml_body, "")
        assert pair == RegionZonePair(region="Europe", zone="Amsterdam")

    def test_two_field_selector(self, xml_body):
        pair = XmlExtractor().extract(xml_body, "CountryCode,TimeZone")
        assert pair == RegionZonePair(region="NL", zone="Europe/Amsterdam")

    def test_first_non_empty_element_wins(self):
        body = (
            b"<Response><TimeZone></TimeZone>"
            b"<TimeZone>Asia/Kolkata</TimeZone>"
            b"<TimeZone>Asia/Tokyo</TimeZone></Response>"
        )
        pair = XmlExtractor().extract(body, "TimeZone")
        assert pair == RegionZonePair(region="Asia", zone="Kolkata")

    def test_namespaced_document(self):
        body = (
            b'<geo:Response xmlns:geo="urn:example:geo">'
            b"<geo:TimeZone>Africa/Nairobi</geo:TimeZone></geo:Response>"
        )
        pair = XmlExtractor().extract(body, "TimeZone")
        assert pair == RegionZonePair(region="Africa", zone="Nairobi")

    def test_trailing_comma_selector(self, xml_body):
        pair = XmlExtractor().extract(xml_body, "TimeZone,")
        assert pair == RegionZonePair(region="Europe", zone="Amsterdam")

    def test_missing_element(self, xml_body):
        assert XmlExtractor().extract(xml_body, "Zone") == RegionZonePair()

    def test_malformed_body(self):
        body = b"<Response><TimeZone>Europe/Paris</Response>"
        assert XmlExtractor().extract(body, "") == RegionZonePair()

    def test_json_body(self, json_body):
        assert XmlExtractor().extract(json_body, "") == RegionZonePair()

    def test_empty_body(self):
        assert XmlExtractor().extract(b"", "") == RegionZonePair()

    def test_passthrough(self, xml_body):
        assert XmlExtractor().passthrough(xml_body) == xml_body.decode()


class DummyExtractor(BaseExtractor):
    """Extractor that treats the whole body as the timezone."""

    default_selector = "body"

    @property
    def kind(self):
        return HandlerKind.JSON

    def parse(self, body):
        return body.decode()

    def locate(self, document, locator):
        return document


class TestExtractorRegistry:
    """Test cases for ExtractorRegistry."""

    def test_json_is_registered(self):
        assert HandlerKind.JSON in list_extractor_kinds()
        assert ExtractorRegistry.is_supported(HandlerKind.JSON) is True

    def test_none_is_never_registered(self):
        assert HandlerKind.NONE not in list_extractor_kinds()
        assert ExtractorRegistry.is_supported(HandlerKind.NONE) is False

    @requires_xml
    def test_xml_is_registered(self):
        assert HandlerKind.XML in list_extractor_kinds()

    def test_create_extractor(self):
        extractor = create_extractor(HandlerKind.JSON)
        assert isinstance(extractor, JsonExtractor)

    def test_create_extractor_returns_fresh_instances(self):
        first = create_extractor(HandlerKind.JSON)
        second = create_extractor(HandlerKind.JSON)
        assert first is not second

    def test_create_extractor_for_none(self):
        with pytest.raises(ValueError):
            create_extractor(HandlerKind.NONE)

    def test_register_rejects_non_extractor(self):
        with pytest.raises(ValueError, match="BaseExtractor"):
            ExtractorRegistry.register(HandlerKind.JSON, dict)

    def test_register_rejects_none_kind(self):
        with pytest.raises(ValueError):
            ExtractorRegistry.register(HandlerKind.NONE, DummyExtractor)

    def test_register_and_unregister(self):
        original = ExtractorRegistry._extractors.get(HandlerKind.JSON)
        try:
            register_extractor(HandlerKind.JSON, DummyExtractor)
            extractor = create_extractor(HandlerKind.JSON)
            assert isinstance(extractor, DummyExtractor)
            assert extractor.extract(b"Europe/Oslo", "") == RegionZonePair(
                region="Europe", zone="Oslo"
            )

            ExtractorRegistry.unregister(HandlerKind.JSON)
            assert ExtractorRegistry.is_supported(HandlerKind.JSON) is False
        finally:
            ExtractorRegistry.register(HandlerKind.JSON, original)

    def test_register_as_decorator(self):
        original = ExtractorRegistry._extractors.get(HandlerKind.JSON)
        try:

            @register_extractor(HandlerKind.JSON)
            class DecoratedExtractor(DummyExtractor):
                pass

            assert isinstance(create_extractor(HandlerKind.JSON), DecoratedExtractor)
        finally:
            ExtractorRegistry.register(HandlerKind.JSON, original)

    def test_string_representations(self):
        extractor = JsonExtractor()
        assert "JsonExtractor" in str(extractor)
        assert "json" in str(extractor)
        assert repr(extractor) == "JsonExtractor()"
