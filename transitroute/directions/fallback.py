"""
Synthetic fallback routes for when the provider has no answer
"""

import logging
from datetime import datetime, timedelta, tzinfo
from typing import Callable, Optional

from transitroute.core.models import (
    Coordinate,
    RouteResult,
    RouteStep,
    TransitDetails,
    TravelMode,
    VehicleType,
)

from .labels import DEFAULT_LANGUAGE, fallback_text, vehicle_label
from .normalizer import utc_now

ESTIMATED_ARRIVAL = timedelta(minutes=25)
ESTIMATED_RIDE = timedelta(minutes=20)
ESTIMATED_STOPS = 8


class FallbackRouteSynthesizer:
    """
    Produces a placeholder walk-ride-walk route between two points

    The result is an approximation, flagged with is_fallback, with a
    straight-line geometry and fixed estimate labels. Clock labels are
    rendered in the given zone, or in system local time when it is None.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        clock: Optional[Callable[[], datetime]] = None,
        tz: Optional[tzinfo] = None,
    ):
        self.language = language
        self.clock = clock or utc_now
        self.tz = tz
        self.logger = logging.getLogger(__name__)

    def _clock_label(self, moment: datetime) -> str:
        return moment.astimezone(self.tz).strftime("%H:%M")

    def synthesize(
        self,
        origin: Coordinate,
        destination: Coordinate,
        origin_name: Optional[str] = None,
        destination_name: Optional[str] = None,
    ) -> RouteResult:
        """
        Build the fallback route

        Args:
            origin: Start coordinate
            destination: End coordinate
            origin_name: Display name of the start
            destination_name: Display name of the end

        Returns:
            Single RouteResult without alternatives
        """
        text = fallback_text(self.language)
        origin_name = origin_name or text["origin"]
        destination_name = destination_name or text["destination"]

        self.logger.info(f"Synthesizing fallback route from {origin_name} to {destination_name}")

        departure_time = self.clock()
        ride_arrival = departure_time + ESTIMATED_RIDE

        ride = TransitDetails(
            line=text["line"],
            line_name=text["line_name"],
            vehicle_type=VehicleType.BUS,
            vehicle_label=vehicle_label(VehicleType.BUS, self.language),
            departure=self._clock_label(departure_time),
            arrival=self._clock_label(ride_arrival),
            departure_time=departure_time,
            arrival_time=ride_arrival,
            stops=ESTIMATED_STOPS,
            agency_name=text["agency"],
            times_estimated=True,
        )

        steps = [
            RouteStep(
                instructions=text["start"].format(name=origin_name),
                duration="2 min",
                distance="200 m",
                travel_mode=TravelMode.WALKING.value,
            ),
            RouteStep(
                instructions=text["transit"],
                duration="15-25 min",
                distance="4-9 km",
                travel_mode=TravelMode.TRANSIT.value,
                transit=ride,
            ),
            RouteStep(
                instructions=text["finish"].format(name=destination_name),
                duration="3 min",
                distance="300 m",
                travel_mode=TravelMode.WALKING.value,
            ),
        ]

        return RouteResult(
            duration=text["duration"],
            distance=text["distance"],
            steps=steps,
            geometry=[origin, destination],
            departure_time=departure_time,
            arrival_time=departure_time + ESTIMATED_ARRIVAL,
            is_fallback=True,
        )
