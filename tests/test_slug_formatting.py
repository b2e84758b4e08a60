"""Tests for property slugs and display formatting."""

from types import SimpleNamespace

import pytest

from estatehub.services.formatting import DEFAULT_IMAGE, format_location, format_price, get_first_image
from estatehub.services.slug import parse_property_id_from_slug, to_property_slug


class TestSlug:
    @pytest.mark.parametrize(
        ("title", "property_id", "expected"),
        [
            ("Luxury Villa!", 123, "luxury-villa-123"),
            ("  2 BHK -- Sea View  ", 7, "2-bhk-sea-view-7"),
            ("", 123, "123"),
            (None, 5, "5"),
            ("!!!", 9, "9"),
        ],
    )
    def test_to_property_slug(self, title, property_id, expected):
        assert to_property_slug(title, property_id) == expected

    @pytest.mark.parametrize(
        ("slug", "expected"),
        [
            ("luxury-villa-123", 123),
            ("123", 123),
            (" 42 ", 42),
            ("abc", None),
            ("villa-abc", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse_property_id(self, slug, expected):
        assert parse_property_id_from_slug(slug) == expected

    def test_slug_round_trip_keeps_id(self):
        assert parse_property_id_from_slug(to_property_slug("Sea Facing 3 BHK", 88)) == 88


class TestFormatPrice:
    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            (26_000_000, "2.6 Cr+"),
            (9_500_000, "95.0 Lakh"),
            (45_000, "45.0 K"),
            (1_500, "1.5 K"),
            (2.6, "2.6 Cr+"),
            (5, "5 Cr+"),
            (0.17, "17.0 Lakh"),
            (None, "—"),
        ],
    )
    def test_notation(self, price, expected):
        assert format_price(price) == expected


class TestFormatLocation:
    def test_skips_empty_parts(self):
        location = SimpleNamespace(streetaddress="", city="Pune", state="Maharashtra", zip_code="411001")
        assert format_location(location) == "Pune, Maharashtra, 411001"

    def test_missing_location(self):
        assert format_location(None) == ""


class TestFirstImage:
    def test_first_media_url(self):
        media = [SimpleNamespace(file_url="/media/a.jpg"), SimpleNamespace(file_url="/media/b.jpg")]
        assert get_first_image(media) == "/media/a.jpg"

    def test_placeholder(self):
        assert get_first_image([]) == DEFAULT_IMAGE
