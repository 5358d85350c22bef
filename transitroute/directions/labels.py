"""
Locale label tables for normalized routes
"""

from typing import Dict

from transitroute.core.models import VehicleType

DEFAULT_LANGUAGE = "pl"

VEHICLE_LABELS: Dict[str, Dict[VehicleType, str]] = {
    "pl": {
        VehicleType.BUS: "Autobus",
        VehicleType.TRAM: "Tramwaj",
        VehicleType.SUBWAY: "Metro",
        VehicleType.RAIL: "Pociąg",
        VehicleType.FERRY: "Prom",
        VehicleType.CABLE_CAR: "Kolejka linowa",
        VehicleType.GONDOLA_LIFT: "Gondola",
        VehicleType.FUNICULAR: "Kolej linowo-terenowa",
    },
    "en": {
        VehicleType.BUS: "Bus",
        VehicleType.TRAM: "Tram",
        VehicleType.SUBWAY: "Subway",
        VehicleType.RAIL: "Train",
        VehicleType.FERRY: "Ferry",
        VehicleType.CABLE_CAR: "Cable car",
        VehicleType.GONDOLA_LIFT: "Gondola lift",
        VehicleType.FUNICULAR: "Funicular",
    },
}

GENERIC_VEHICLE_LABELS: Dict[str, str] = {
    "pl": "Transport publiczny",
    "en": "Public transport",
}

# Placeholder texts for synthesized routes
FALLBACK_TEXT: Dict[str, Dict[str, str]] = {
    "pl": {
        "duration": "Szacowany czas: 20-30 min",
        "distance": "Szacowany dystans: 5-10 km",
        "start": "Rozpocznij podróż z lokalizacji: {name}",
        "transit": "Skorzystaj z komunikacji publicznej (autobus lub tramwaj)",
        "finish": "Dojdź do celu: {name}",
        "line": "Różne linie",
        "line_name": "Autobus/Tramwaj",
        "agency": "Różni przewoźnicy",
        "origin": "punkt początkowy",
        "destination": "punkt docelowy",
    },
    "en": {
        "duration": "Estimated time: 20-30 min",
        "distance": "Estimated distance: 5-10 km",
        "start": "Start your journey at: {name}",
        "transit": "Take public transport (bus or tram)",
        "finish": "Walk to your destination: {name}",
        "line": "Various lines",
        "line_name": "Bus/Tram",
        "agency": "Various operators",
        "origin": "starting point",
        "destination": "destination",
    },
}


def _language(language: str) -> str:
    code = (language or DEFAULT_LANGUAGE).split("-")[0].lower()
    return code if code in VEHICLE_LABELS else DEFAULT_LANGUAGE


def vehicle_label(vehicle_type: VehicleType, language: str = DEFAULT_LANGUAGE) -> str:
    """Human-readable label for a vehicle classification"""
    code = _language(language)
    return VEHICLE_LABELS[code].get(vehicle_type, GENERIC_VEHICLE_LABELS[code])


def fallback_text(language: str = DEFAULT_LANGUAGE) -> Dict[str, str]:
    return FALLBACK_TEXT[_language(language)]
