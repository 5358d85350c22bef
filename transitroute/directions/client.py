"""
Directions API client for transit route queries
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from transitroute.config.models import DirectionsSettings
from transitroute.core.models import Coordinate

from .errors import ProviderQueryFailed, ProviderUnavailable


class ProviderReadiness:
    """
    One-shot readiness gate for the directions provider

    The first call to mark_ready or mark_failed decides the outcome;
    later calls are ignored.
    """

    def __init__(self):
        self._event = asyncio.Event()
        self._failure: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self._event.is_set() and self._failure is None

    @property
    def is_settled(self) -> bool:
        return self._event.is_set()

    @property
    def failure(self) -> Optional[str]:
        return self._failure

    def mark_ready(self) -> None:
        if not self._event.is_set():
            self._event.set()

    def mark_failed(self, reason: str) -> None:
        if not self._event.is_set():
            self._failure = reason
            self._event.set()

    async def wait(self, timeout: float) -> None:
        """
        Wait until the provider is ready

        Raises:
            ProviderUnavailable: On timeout or failed initialization
        """
        try:
            await asyncio.wait_for(self._event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            raise ProviderUnavailable(f"Directions provider not ready after {timeout}s")

        if self._failure is not None:
            raise ProviderUnavailable(f"Directions provider failed to initialize: {self._failure}")


class DirectionsClient:
    """
    Async client for the transit directions API
    Constructed once at startup and shared by resolvers
    """

    def __init__(
        self,
        settings: Optional[DirectionsSettings] = None,
        readiness: Optional[ProviderReadiness] = None,
    ):
        self.settings = settings or DirectionsSettings.from_env()
        self.readiness = readiness or ProviderReadiness()
        self.logger = logging.getLogger(__name__)

    async def initialize(self) -> bool:
        """
        Complete provider initialization

        Returns:
            True if the provider is ready for queries
        """
        if not self.settings.api_key:
            self.logger.error("Directions API key missing. Set GOOGLE_MAPS_API_KEY")
            self.readiness.mark_failed("missing API key")
        else:
            self.readiness.mark_ready()

        return self.readiness.is_ready

    async def wait_until_ready(self, timeout: Optional[float] = None) -> None:
        """Block until ready, raising ProviderUnavailable after the timeout"""
        if timeout is None:
            timeout = self.settings.ready_timeout
        await self.readiness.wait(timeout)

    def build_params(self, origin: Coordinate, destination: Coordinate) -> Dict[str, str]:
        """Query parameters for a transit directions request"""
        return {
            "origin": origin.as_lat_lng(),
            "destination": destination.as_lat_lng(),
            "mode": "transit",
            "transit_mode": "|".join(self.settings.transit_modes),
            "transit_routing_preference": self.settings.routing_preference,
            "alternatives": "true" if self.settings.alternatives else "false",
            "language": self.settings.language,
            "region": self.settings.region,
            "key": self.settings.api_key or "",
        }

    async def fetch_routes(
        self, origin: Coordinate, destination: Coordinate
    ) -> List[Dict[str, Any]]:
        """
        Query transit routes between two points

        Args:
            origin: Start coordinate
            destination: End coordinate

        Returns:
            Raw route records in provider order, empty for ZERO_RESULTS

        Raises:
            ProviderQueryFailed: On HTTP errors or a non-success status
        """
        try:
            async with httpx.AsyncClient(timeout=self.settings.request_timeout) as client:
                response = await client.get(
                    self.settings.base_url,
                    params=self.build_params(origin, destination),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            self.logger.error(f"HTTP error querying directions: {e}")
            raise ProviderQueryFailed(f"HTTP error querying directions: {e}") from e
        except ValueError as e:
            self.logger.error(f"Invalid directions response body: {e}")
            raise ProviderQueryFailed(f"Invalid directions response body: {e}") from e

        if not isinstance(data, dict):
            self.logger.error(f"Directions response is not an object: {type(data).__name__}")
            raise ProviderQueryFailed("Invalid directions response body: expected an object")

        status = data.get("status", "")
        if status == "ZERO_RESULTS":
            self.logger.warning(
                f"No transit routes from {origin.as_lat_lng()} to {destination.as_lat_lng()}"
            )
            return []

        if status != "OK":
            message = data.get("error_message") or "no error message"
            self.logger.error(f"Directions request failed: {status} ({message})")
            raise ProviderQueryFailed(f"Directions request failed: {status}", status=status)

        routes = data.get("routes") or []
        if not isinstance(routes, list):
            self.logger.error(f"Directions response routes is not a list: {type(routes).__name__}")
            raise ProviderQueryFailed("Invalid directions response body: routes is not a list")

        return routes
