"""
Tests for transit step normalization
"""

from datetime import datetime, timezone

import pytest

from transitroute.core.models import VehicleType
from transitroute.directions.normalizer import TransitStepNormalizer, hex_color


@pytest.fixture
def normalizer(fixed_clock):
    return TransitStepNormalizer(language="pl", clock=fixed_clock)


class TestNormalizeStep:
    """Test step-level normalization"""

    def test_walking_step(self, normalizer, walking_step):
        """Test walking steps carry no transit details"""
        step = normalizer.normalize(walking_step())

        assert step.instructions == "Idź do stacji Stephansplatz"
        assert step.duration == "3 min"
        assert step.distance == "250 m"
        assert step.travel_mode == "WALKING"
        assert step.transit is None

    def test_transit_step(self, normalizer, transit_step, departure):
        """Test a fully populated transit step"""
        step = normalizer.normalize(transit_step())
        details = step.transit

        assert step.is_transit
        assert details.line == "U1"
        assert details.line_name == "Leopoldau - Oberlaa"
        assert details.vehicle_type == VehicleType.SUBWAY
        assert details.vehicle_label == "Metro"
        assert details.agency_name == "Wiener Linien"
        assert details.stops == 5
        assert details.color == "#e3000f"
        assert details.text_color == "#ffffff"
        assert details.departure == "10:03"
        assert details.arrival == "10:15"
        assert details.departure_time == datetime.fromtimestamp(departure + 180, tz=timezone.utc)
        assert details.arrival_time == datetime.fromtimestamp(departure + 900, tz=timezone.utc)
        assert details.headsign == "Oberlaa"
        assert details.times_estimated is False

    def test_other_mode_preserved(self, normalizer, walking_step, transit_step):
        """Test unknown travel modes are kept verbatim without transit details"""
        raw = walking_step()
        raw["travel_mode"] = "DRIVING"
        raw["transit_details"] = transit_step()["transit_details"]

        step = normalizer.normalize(raw)

        assert step.travel_mode == "DRIVING"
        assert step.transit is None
        assert not step.is_transit

    def test_missing_labels(self, normalizer):
        """Test absent duration and distance become empty labels"""
        step = normalizer.normalize({"travel_mode": "WALKING"})

        assert step.instructions == ""
        assert step.duration == ""
        assert step.distance == ""

    def test_plain_instructions_key(self, normalizer):
        """Test records using the plain instructions key"""
        step = normalizer.normalize({"instructions": "Walk to Karlsplatz", "travel_mode": "WALKING"})

        assert step.instructions == "Walk to Karlsplatz"

    def test_transit_mode_without_details(self, normalizer):
        """Test TRANSIT steps always get transit details"""
        step = normalizer.normalize({"travel_mode": "TRANSIT"})

        assert step.transit is not None
        assert step.transit.vehicle_type == VehicleType.OTHER
        assert step.transit.times_estimated is True


class TestNormalizeTransit:
    """Test transit sub-record normalization"""

    def test_missing_vehicle_type(self, normalizer, transit_step):
        """Test missing vehicle type yields OTHER and the generic label"""
        raw = transit_step()["transit_details"]
        del raw["line"]["vehicle"]

        details = normalizer.normalize_transit(raw)

        assert details.vehicle_type == VehicleType.OTHER
        assert details.vehicle_label == "Transport publiczny"

    def test_unrecognized_vehicle_type(self, normalizer, transit_step):
        """Test unknown vehicle types fall back to OTHER"""
        raw = transit_step(vehicle_type="HOVERCRAFT")["transit_details"]

        assert normalizer.normalize_transit(raw).vehicle_type == VehicleType.OTHER

    def test_line_name_fallbacks(self, normalizer, transit_step):
        """Test line identifier prefers short name, then full name"""
        raw = transit_step(short_name="", name="Badner Bahn")["transit_details"]
        details = normalizer.normalize_transit(raw)
        assert details.line == "Badner Bahn"
        assert details.line_name == "Badner Bahn"

        raw = transit_step(short_name="WLB", name="")["transit_details"]
        details = normalizer.normalize_transit(raw)
        assert details.line == "WLB"
        assert details.line_name == "WLB"

        raw = transit_step()["transit_details"]
        raw["line"] = {}
        details = normalizer.normalize_transit(raw)
        assert details.line == ""
        assert details.agency_name == ""

    def test_missing_optional_fields(self, normalizer, transit_step):
        """Test defaults for stops, colors and agency"""
        raw = transit_step()["transit_details"]
        del raw["num_stops"]
        del raw["line"]["color"]
        del raw["line"]["text_color"]
        raw["line"]["agencies"] = []

        details = normalizer.normalize_transit(raw)

        assert details.stops == 0
        assert details.color is None
        assert details.text_color is None
        assert details.agency_name == ""

    def test_missing_timestamps_default_to_now(self, normalizer, transit_step, fixed_now):
        """Test missing times default to the clock and are flagged"""
        raw = transit_step()["transit_details"]
        del raw["arrival_time"]

        details = normalizer.normalize_transit(raw)

        assert details.departure_time == fixed_now
        assert details.arrival_time == fixed_now
        assert details.arrival == ""
        assert details.times_estimated is True

    def test_english_labels(self, fixed_clock, transit_step):
        """Test the configured locale selects the label table"""
        normalizer = TransitStepNormalizer(language="en", clock=fixed_clock)
        raw = transit_step(vehicle_type="TRAM")["transit_details"]

        assert normalizer.normalize_transit(raw).vehicle_label == "Tram"

    def test_unknown_language_uses_default(self, fixed_clock, transit_step):
        """Test languages without a table use Polish labels"""
        normalizer = TransitStepNormalizer(language="de", clock=fixed_clock)
        raw = transit_step(vehicle_type="BUS")["transit_details"]

        assert normalizer.normalize_transit(raw).vehicle_label == "Autobus"


class TestHexColor:
    """Test color normalization"""

    @pytest.mark.parametrize("raw,expected", [
        ("e3000f", "#e3000f"),
        ("#e3000f", "#e3000f"),
        (" FFF ", "#FFF"),
        ("", None),
        (None, None),
        ("not a color", None),
        ("#e3000", None),
        ("red", None),
        (0xE3000F, None),
    ])
    def test_hex_color(self, raw, expected):
        assert hex_color(raw) == expected

    def test_non_hex_line_color_uses_vehicle_default(self, normalizer, transit_step):
        """Test an unusable line color falls back to the vehicle default"""
        raw = transit_step(vehicle_type="TRAM")["transit_details"]
        raw["line"]["color"] = "not a color"

        details = normalizer.normalize_transit(raw)

        assert details.color is None
        assert details.display_color == "#10b981"
