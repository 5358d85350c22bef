"""
Directions resolver
Orchestrates one route request from provider query to final RouteResult
"""

import logging
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from transitroute.core.models import Coordinate, RankingPreference, RouteResult
from transitroute.core.polyline import FormatError

from .builder import RouteCandidateBuilder
from .client import DirectionsClient
from .errors import EmptyResult, ProviderQueryFailed, ProviderUnavailable
from .fallback import FallbackRouteSynthesizer
from .normalizer import TransitStepNormalizer


class QueryStatus(str, Enum):
    """Outcome of a provider query"""

    OK = "ok"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"
    EMPTY = "empty"


class QueryOutcome(BaseModel):
    """Tagged result of a provider query"""

    model_config = ConfigDict(frozen=True)

    status: QueryStatus = Field(description="Query outcome")
    routes: List[Any] = Field(default_factory=list, description="Raw route records, validated by the builder")
    error: Optional[str] = Field(None, description="Reason for a non-OK outcome")

    @property
    def ok(self) -> bool:
        return self.status == QueryStatus.OK

    def raise_for_status(self) -> None:
        """Raise the matching DirectionsError for a non-OK outcome"""
        if self.status == QueryStatus.UNAVAILABLE:
            raise ProviderUnavailable(self.error or "Directions provider unavailable")
        if self.status == QueryStatus.FAILED:
            raise ProviderQueryFailed(self.error or "Directions query failed")
        if self.status == QueryStatus.EMPTY:
            raise EmptyResult(self.error or "Provider returned no routes")


class DirectionsResolver:
    """
    Resolves transit routes with a degraded fallback

    Holds no per-request state, so concurrent resolve calls are
    independent and callers may drop stale results freely.
    """

    def __init__(
        self,
        client: DirectionsClient,
        builder: Optional[RouteCandidateBuilder] = None,
        fallback: Optional[FallbackRouteSynthesizer] = None,
        ready_timeout: Optional[float] = None,
        ranking: Optional[RankingPreference] = None,
    ):
        settings = client.settings
        self.client = client
        self.builder = builder or RouteCandidateBuilder(
            TransitStepNormalizer(language=settings.language)
        )
        self.fallback = fallback or FallbackRouteSynthesizer(
            language=settings.language, tz=settings.zone()
        )
        self.ready_timeout = ready_timeout if ready_timeout is not None else settings.ready_timeout
        self.ranking = ranking or settings.ranking
        self.logger = logging.getLogger(__name__)

    async def query(self, origin: Coordinate, destination: Coordinate) -> QueryOutcome:
        """
        Query the provider once

        Returns:
            QueryOutcome tagged OK, UNAVAILABLE, FAILED or EMPTY
        """
        try:
            await self.client.wait_until_ready(self.ready_timeout)
        except ProviderUnavailable as e:
            self.logger.warning(f"Directions provider unavailable: {e}")
            return QueryOutcome(status=QueryStatus.UNAVAILABLE, error=str(e))

        try:
            routes = await self.client.fetch_routes(origin, destination)
        except ProviderQueryFailed as e:
            return QueryOutcome(status=QueryStatus.FAILED, error=str(e))

        if not routes:
            return QueryOutcome(status=QueryStatus.EMPTY, error="Provider returned no routes")

        return QueryOutcome(status=QueryStatus.OK, routes=routes)

    async def resolve(
        self,
        origin: Coordinate,
        destination: Coordinate,
        origin_name: Optional[str] = None,
        destination_name: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> RouteResult:
        """
        Resolve the preferred route between two points

        Args:
            origin: Start coordinate
            destination: End coordinate
            origin_name: Display name used by the fallback route
            destination_name: Display name used by the fallback route
            request_id: Identifier echoed on the result

        Returns:
            Primary RouteResult with alternatives, or a fallback route
        """
        outcome = await self.query(origin, destination)

        result = None
        if outcome.ok:
            try:
                result = self.builder.build_primary(outcome.routes, self.ranking)
            except FormatError as e:
                self.logger.error(f"Provider routes unusable, falling back: {e}")
        else:
            self.logger.warning(f"Using fallback route ({outcome.status.value}): {outcome.error}")

        if result is None:
            result = self.fallback.synthesize(origin, destination, origin_name, destination_name)

        if request_id is not None:
            result = result.model_copy(update={"request_id": request_id})

        return result
