"""
Route candidate assembly from provider responses
"""

import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from transitroute.core.models import RankingPreference, RouteResult
from transitroute.core.polyline import FormatError, PolylineCodec

from .normalizer import TransitStepNormalizer, text_of, timestamp_of, value_of


def rank_candidates(
    candidates: List[RouteResult],
    preference: RankingPreference = RankingPreference.PROVIDER,
) -> List[RouteResult]:
    """
    Order candidate routes by preference

    Sorting is stable, so equal candidates keep provider order. Candidates
    without the numeric value a preference needs sort last.
    """
    if preference == RankingPreference.PROVIDER:
        return list(candidates)

    def duration_key(route: RouteResult):
        missing = route.duration_seconds is None
        return (missing, route.duration_seconds or 0)

    if preference == RankingPreference.FASTEST:
        return sorted(candidates, key=duration_key)

    if preference == RankingPreference.FEWEST_TRANSFERS:
        return sorted(candidates, key=lambda route: (route.transfer_count, *duration_key(route)))

    raise ValueError(f"Unsupported ranking preference: {preference}")


class RouteCandidateBuilder:
    """
    Builds normalized RouteResult objects from provider route records
    Performs no I/O; output depends only on the records and the normalizer
    """

    def __init__(self, normalizer: Optional[TransitStepNormalizer] = None):
        self.normalizer = normalizer or TransitStepNormalizer()
        self.logger = logging.getLogger(__name__)

    def build_route(self, raw_route: Any) -> RouteResult:
        """
        Build a single route

        Args:
            raw_route: Provider route record

        Returns:
            RouteResult without alternatives

        Raises:
            FormatError: If the geometry or the record is malformed
        """
        if not isinstance(raw_route, dict):
            raise FormatError(f"Route record must be an object, got {type(raw_route).__name__}")

        overview = raw_route.get("overview_polyline")
        points = overview.get("points") if isinstance(overview, dict) else overview
        geometry = PolylineCodec.decode(points)

        legs = raw_route.get("legs") or []
        if not isinstance(legs, list) or not legs:
            raise FormatError("Route record has no legs")

        try:
            steps = [
                self.normalizer.normalize(raw_step)
                for leg in legs
                for raw_step in leg.get("steps") or []
            ]

            first_leg = legs[0]
            last_leg = legs[-1]

            if len(legs) == 1:
                duration = text_of(first_leg.get("duration"))
                distance = text_of(first_leg.get("distance"))
            else:
                duration = " + ".join(text_of(leg.get("duration")) for leg in legs)
                distance = " + ".join(text_of(leg.get("distance")) for leg in legs)

            duration_seconds = self._total(legs, "duration")
            distance_meters = self._total(legs, "distance")

            departure_time = timestamp_of(first_leg.get("departure_time"))
            arrival_time = timestamp_of(last_leg.get("arrival_time"))
            if departure_time is None:
                departure_time = self.normalizer.clock()
            if arrival_time is None:
                arrival_time = departure_time + timedelta(seconds=duration_seconds or 0)

            return RouteResult(
                duration=duration,
                distance=distance,
                duration_seconds=duration_seconds,
                distance_meters=distance_meters,
                steps=steps,
                geometry=geometry,
                polyline=points,
                departure_time=departure_time,
                arrival_time=arrival_time,
                summary=raw_route.get("summary") or "",
            )
        except (ValidationError, KeyError, TypeError, AttributeError) as e:
            raise FormatError(f"Malformed route record: {e}") from e

    @staticmethod
    def _total(legs: List[Dict[str, Any]], field: str) -> Optional[int]:
        values = [value_of(leg.get(field)) for leg in legs]
        if any(value is None for value in values):
            return None
        return sum(values)

    def build(self, raw_routes: List[Any]) -> List[RouteResult]:
        """
        Build all usable routes in provider order

        Records with malformed geometry are logged and skipped.

        Raises:
            FormatError: If no record could be built
        """
        routes = []
        errors = []

        for index, raw_route in enumerate(raw_routes):
            try:
                routes.append(self.build_route(raw_route))
            except FormatError as e:
                self.logger.error(f"Skipping route record {index}: {e}")
                errors.append(e)

        if not routes:
            if errors:
                raise FormatError(f"All {len(errors)} route records were malformed") from errors[-1]
            raise FormatError("No route records to build")

        return routes

    def build_primary(
        self,
        raw_routes: List[Any],
        preference: RankingPreference = RankingPreference.PROVIDER,
    ) -> RouteResult:
        """Build the primary route with the remaining candidates as alternatives"""
        candidates = rank_candidates(self.build(raw_routes), preference)
        primary, alternatives = candidates[0], candidates[1:]
        return primary.model_copy(update={"alternatives": alternatives})
