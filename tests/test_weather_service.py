"""Tests for input validation helpers."""

import pytest

from app.core.errors import ApiError
from app.services.weather_service import normalize_state, parse_coordinate


class TestNormalizeState:
    def test_uppercases(self):
        assert normalize_state("wa") == "WA"

    @pytest.mark.parametrize("raw", ["", "w", "was"])
    def test_wrong_length(self, raw):
        with pytest.raises(ApiError) as exc:
            normalize_state(raw)
        assert exc.value.status_code == 400


class TestParseCoordinate:
    def test_valid(self):
        assert parse_coordinate("39.7456", " -97.0892 ") == (39.7456, -97.0892)

    @pytest.mark.parametrize("lat, lon", [("90", "180"), ("-90", "-180"), ("0", "0")])
    def test_bounds_are_inclusive(self, lat, lon):
        assert parse_coordinate(lat, lon) == (float(lat), float(lon))

    @pytest.mark.parametrize(
        "lat, lon",
        [
            (None, "0"),
            ("0", None),
            ("abc", "0"),
            ("NaN", "1"),
            ("inf", "0"),
            ("4_5", "0"),
            ("\uff14\uff15", "0"),
            ("0", "1_0"),
            (" ", "0"),
        ],
    )
    def test_unparseable(self, lat, lon):
        with pytest.raises(ApiError, match="Valid latitude and longitude are required"):
            parse_coordinate(lat, lon)

    def test_parse_failure_wins_over_range(self):
        with pytest.raises(ApiError, match="Valid latitude"):
            parse_coordinate("200", "abc")

    def test_latitude_checked_before_longitude(self):
        with pytest.raises(ApiError, match="Latitude"):
            parse_coordinate("-91", "500")

    def test_infinity_fails_range_check(self):
        with pytest.raises(ApiError, match="Longitude"):
            parse_coordinate("0", "-Infinity")

    @pytest.mark.parametrize("raw, expected", [("5.", 5.0), (".5", 0.5), ("+1.5e1", 15.0), ("-0", 0.0)])
    def test_accepted_spellings(self, raw, expected):
        assert parse_coordinate(raw, "0")[0] == expected
