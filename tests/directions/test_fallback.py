"""
Tests for fallback route synthesis
"""

from datetime import timedelta, timezone

import pytest

from transitroute.core.models import Coordinate, VehicleType
from transitroute.directions.fallback import FallbackRouteSynthesizer

ORIGIN = Coordinate.from_lat_lng(48.2082, 16.3738)
DESTINATION = Coordinate.from_lat_lng(48.1845, 16.3122)


@pytest.fixture
def synthesizer(fixed_clock):
    return FallbackRouteSynthesizer(language="pl", clock=fixed_clock, tz=timezone.utc)


class TestFallbackRouteSynthesizer:
    """Test FallbackRouteSynthesizer"""

    def test_estimate_labels(self, synthesizer):
        """Test fixed estimate labels"""
        route = synthesizer.synthesize(ORIGIN, DESTINATION, "Katedra", "Schönbrunn")

        assert route.duration == "Szacowany czas: 20-30 min"
        assert route.distance == "Szacowany dystans: 5-10 km"
        assert route.is_fallback is True
        assert route.alternatives == []
        assert route.polyline == ""

    def test_timing(self, synthesizer, fixed_now):
        """Test departure now and arrival after the fixed offset"""
        route = synthesizer.synthesize(ORIGIN, DESTINATION)

        assert route.departure_time == fixed_now
        assert route.arrival_time == fixed_now + timedelta(minutes=25)

    def test_straight_line_geometry(self, synthesizer):
        """Test geometry is the two-point line between endpoints"""
        route = synthesizer.synthesize(ORIGIN, DESTINATION)

        assert route.geometry == [ORIGIN, DESTINATION]

    def test_three_step_itinerary(self, synthesizer, fixed_now):
        """Test walk, generic transit ride, walk"""
        route = synthesizer.synthesize(ORIGIN, DESTINATION, "Katedra", "Schönbrunn")

        assert [step.travel_mode for step in route.steps] == ["WALKING", "TRANSIT", "WALKING"]
        assert "Katedra" in route.steps[0].instructions
        assert "Schönbrunn" in route.steps[2].instructions
        assert route.steps[0].transit is None
        assert route.steps[2].transit is None

        ride = route.steps[1].transit
        assert ride.vehicle_type == VehicleType.BUS
        assert ride.vehicle_label == "Autobus"
        assert ride.line == "Różne linie"
        assert ride.agency_name == "Różni przewoźnicy"
        assert ride.stops == 8
        assert ride.times_estimated is True
        assert ride.departure_time == fixed_now
        assert ride.arrival_time == fixed_now + timedelta(minutes=20)
        assert ride.departure == "12:00"
        assert ride.arrival == "12:20"

    def test_default_names(self, synthesizer):
        """Test placeholder names when none are given"""
        route = synthesizer.synthesize(ORIGIN, DESTINATION)

        assert "punkt początkowy" in route.steps[0].instructions
        assert "punkt docelowy" in route.steps[2].instructions

    def test_english_locale(self, fixed_clock):
        """Test English estimate labels"""
        route = FallbackRouteSynthesizer(language="en", clock=fixed_clock).synthesize(
            ORIGIN, DESTINATION
        )

        assert route.duration == "Estimated time: 20-30 min"
        assert route.steps[1].transit.vehicle_label == "Bus"

    def test_clock_labels_in_configured_zone(self, fixed_clock, fixed_now):
        """Test ride labels are local clock time while timestamps stay UTC"""
        vienna_summer = timezone(timedelta(hours=2))
        synthesizer = FallbackRouteSynthesizer(clock=fixed_clock, tz=vienna_summer)

        ride = synthesizer.synthesize(ORIGIN, DESTINATION).steps[1].transit

        assert ride.departure == "14:00"
        assert ride.arrival == "14:20"
        assert ride.departure_time == fixed_now

    def test_clock_labels_default_to_system_local_time(self, fixed_clock, fixed_now):
        """Test labels use system local time when no zone is configured"""
        ride = FallbackRouteSynthesizer(clock=fixed_clock).synthesize(
            ORIGIN, DESTINATION
        ).steps[1].transit

        assert ride.departure == fixed_now.astimezone().strftime("%H:%M")
