"""
Shared provider fixtures for directions tests
"""

from datetime import datetime, timezone

import pytest

REFERENCE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"

# 2026-05-04 08:00:00 UTC
DEPARTURE = 1777881600
FIXED_NOW = datetime(2026, 5, 4, 12, 0, tzinfo=timezone.utc)


def _walking_step(text="Idź do stacji Stephansplatz", minutes=3):
    return {
        "html_instructions": text,
        "travel_mode": "WALKING",
        "duration": {"text": f"{minutes} min", "value": minutes * 60},
        "distance": {"text": "250 m", "value": 250},
    }


def _transit_step(
    short_name="U1",
    name="Leopoldau - Oberlaa",
    vehicle_type="SUBWAY",
    departure=DEPARTURE + 180,
    arrival=DEPARTURE + 900,
    num_stops=5,
):
    return {
        "html_instructions": f"Metro w kierunku {name}",
        "travel_mode": "TRANSIT",
        "duration": {"text": "12 min", "value": 720},
        "distance": {"text": "5,8 km", "value": 5800},
        "transit_details": {
            "line": {
                "short_name": short_name,
                "name": name,
                "vehicle": {"type": vehicle_type, "name": "Metro"},
                "agencies": [{"name": "Wiener Linien"}, {"name": "ÖBB"}],
                "color": "e3000f",
                "text_color": "ffffff",
            },
            "departure_time": {"text": "10:03", "value": departure},
            "arrival_time": {"text": "10:15", "value": arrival},
            "num_stops": num_stops,
            "headsign": "Oberlaa",
        },
    }


def _provider_route(
    polyline=REFERENCE_POLYLINE,
    duration_text="25 min",
    duration_value=1500,
    distance_text="6.5 km",
    distance_value=6500,
    steps=None,
    summary="",
):
    if steps is None:
        steps = [_walking_step(), _transit_step(), _walking_step("Dojdź do celu", 4)]
    return {
        "summary": summary,
        "overview_polyline": {"points": polyline},
        "legs": [{
            "duration": {"text": duration_text, "value": duration_value},
            "distance": {"text": distance_text, "value": distance_value},
            "departure_time": {"text": "10:00", "value": DEPARTURE},
            "arrival_time": {"text": "10:25", "value": DEPARTURE + duration_value},
            "steps": steps,
        }],
    }


@pytest.fixture
def reference_polyline():
    """Encoded three-point reference geometry"""
    return REFERENCE_POLYLINE


@pytest.fixture
def departure():
    """Epoch seconds of the reference route's departure"""
    return DEPARTURE


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed instant"""
    return lambda: FIXED_NOW


@pytest.fixture
def walking_step():
    """Factory for provider walking step records"""
    return _walking_step


@pytest.fixture
def transit_step():
    """Factory for provider transit step records"""
    return _transit_step


@pytest.fixture
def provider_route():
    """Factory for provider route records"""
    return _provider_route


@pytest.fixture
def three_routes():
    """Provider response routes: one primary and two alternatives"""
    return [
        _provider_route(summary="U1", duration_text="25 min", duration_value=1500),
        _provider_route(
            polyline="_p~iF~ps|U",
            summary="U4",
            duration_text="22 min",
            duration_value=1320,
            steps=[_walking_step(), _transit_step("U4"), _walking_step(), _transit_step("13A", vehicle_type="BUS")],
        ),
        _provider_route(
            polyline="_ulLnnqC_mqNvxq`@",
            summary="D",
            duration_text="31 min",
            duration_value=1860,
            steps=[_walking_step(), _transit_step("D", vehicle_type="TRAM")],
        ),
    ]
