"""
Normalization of provider step records into route steps
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from transitroute.core.models import RouteStep, TransitDetails, TravelMode, VehicleType

from .labels import DEFAULT_LANGUAGE, vehicle_label

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def text_of(raw: Optional[Dict[str, Any]]) -> str:
    """Text label of a provider {text, value} pair"""
    if not raw:
        return ""
    return str(raw.get("text") or "")


def value_of(raw: Optional[Dict[str, Any]]) -> Optional[int]:
    """Numeric value of a provider {text, value} pair"""
    if not raw or raw.get("value") is None:
        return None
    try:
        return int(raw["value"])
    except (TypeError, ValueError):
        return None


def timestamp_of(raw: Optional[Dict[str, Any]]) -> Optional[datetime]:
    """Timestamp of a provider time record (epoch seconds)"""
    seconds = value_of(raw)
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def hex_color(raw: Optional[str]) -> Optional[str]:
    """'#'-prefixed hex RGB color, or None when absent or not hex"""
    if not isinstance(raw, str):
        return None
    match = _HEX_COLOR_RE.match(raw.strip())
    if not match:
        return None
    return f"#{match.group(1)}"


class TransitStepNormalizer:
    """
    Maps provider step records onto RouteStep

    Transit timestamps missing from the provider default to the current
    time and are flagged with times_estimated.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.language = language
        self.clock = clock or utc_now
        self.logger = logging.getLogger(__name__)

    def normalize(self, raw_step: Dict[str, Any]) -> RouteStep:
        """
        Normalize one provider step

        Args:
            raw_step: Step record from a route leg

        Returns:
            RouteStep with transit details for TRANSIT steps
        """
        travel_mode = str(raw_step.get("travel_mode") or "")
        instructions = raw_step.get("html_instructions") or raw_step.get("instructions") or ""

        transit = None
        if travel_mode == TravelMode.TRANSIT.value:
            raw_transit = raw_step.get("transit_details") or raw_step.get("transit") or {}
            if not raw_transit:
                self.logger.warning("Transit step without transit details, using defaults")
            transit = self.normalize_transit(raw_transit)

        return RouteStep(
            instructions=str(instructions),
            duration=text_of(raw_step.get("duration")),
            distance=text_of(raw_step.get("distance")),
            travel_mode=travel_mode,
            transit=transit,
        )

    def normalize_transit(self, raw_transit: Dict[str, Any]) -> TransitDetails:
        """Normalize a provider transit sub-record"""
        line = raw_transit.get("line") or {}
        vehicle = line.get("vehicle") or {}
        agencies = line.get("agencies") or []

        vehicle_type = VehicleType.parse(vehicle.get("type"))

        short_name = line.get("short_name") or ""
        full_name = line.get("name") or ""

        agency_name = ""
        if agencies:
            agency_name = agencies[0].get("name") or ""

        stops = raw_transit.get("num_stops")
        try:
            stops = max(int(stops), 0) if stops is not None else 0
        except (TypeError, ValueError):
            stops = 0

        raw_departure = raw_transit.get("departure_time")
        raw_arrival = raw_transit.get("arrival_time")
        departure_time = timestamp_of(raw_departure)
        arrival_time = timestamp_of(raw_arrival)

        times_estimated = departure_time is None or arrival_time is None
        if times_estimated:
            now = self.clock()
            departure_time = now
            arrival_time = now

        return TransitDetails(
            line=short_name or full_name,
            line_name=full_name or short_name,
            vehicle_type=vehicle_type,
            vehicle_label=vehicle_label(vehicle_type, self.language),
            departure=text_of(raw_departure),
            arrival=text_of(raw_arrival),
            departure_time=departure_time,
            arrival_time=arrival_time,
            stops=stops,
            agency_name=agency_name,
            color=hex_color(line.get("color")),
            text_color=hex_color(line.get("text_color")),
            headsign=raw_transit.get("headsign") or None,
            times_estimated=times_estimated,
        )
