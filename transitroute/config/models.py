"""
Configuration models for transitroute
Settings for the directions provider and route resolution
"""

import os
from datetime import tzinfo
from enum import Enum
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from transitroute.core.models import RankingPreference


class ConfigFormat(str, Enum):
    """Supported configuration file formats"""

    YAML = "yaml"
    JSON = "json"


VALID_TRANSIT_MODES = {"bus", "tram", "subway", "rail", "train"}
VALID_ROUTING_PREFERENCES = {"fewer_transfers", "less_walking"}


class DirectionsSettings(BaseModel):
    """Directions provider and resolver settings"""

    api_key: Optional[str] = Field(
        None,
        description="Directions API key"
    )
    base_url: str = Field(
        "https://maps.googleapis.com/maps/api/directions/json",
        description="Directions endpoint"
    )

    # Query preferences
    language: str = Field(
        "pl",
        description="Language for instructions and labels"
    )
    region: str = Field(
        "at",
        description="Region bias for the provider"
    )
    transit_modes: List[str] = Field(
        default=["bus", "tram", "subway", "rail"],
        description="Transit modes the provider may use"
    )
    routing_preference: str = Field(
        "fewer_transfers",
        description="Provider transit routing preference"
    )
    alternatives: bool = Field(
        True,
        description="Request alternative routes"
    )

    # Timeouts in seconds
    request_timeout: float = Field(
        10.0,
        description="HTTP timeout for a provider query",
        gt=0
    )
    ready_timeout: float = Field(
        10.0,
        description="Maximum wait for provider readiness",
        gt=0
    )

    ranking: RankingPreference = Field(
        RankingPreference.PROVIDER,
        description="Ordering of candidate routes"
    )
    timezone: Optional[str] = Field(
        None,
        description="IANA zone for estimated clock labels, system local time if unset"
    )

    @field_validator('transit_modes')
    def validate_transit_modes(cls, v):
        """Validate transit modes"""
        if not v:
            raise ValueError("At least one transit mode is required")
        modes = [mode.lower() for mode in v]
        for mode in modes:
            if mode not in VALID_TRANSIT_MODES:
                raise ValueError(f"Invalid transit mode: {mode}. Must be one of {sorted(VALID_TRANSIT_MODES)}")
        return modes

    @field_validator('routing_preference')
    def validate_routing_preference(cls, v):
        """Validate routing preference"""
        if v.lower() not in VALID_ROUTING_PREFERENCES:
            raise ValueError(f"Invalid routing preference: {v}")
        return v.lower()

    @field_validator('timezone')
    def validate_timezone(cls, v):
        """Validate timezone name"""
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    def zone(self) -> Optional[tzinfo]:
        """Zone for clock labels, None meaning system local time"""
        return ZoneInfo(self.timezone) if self.timezone else None

    @classmethod
    def from_env(cls, **overrides) -> "DirectionsSettings":
        """
        Build settings from environment variables

        Reads GOOGLE_MAPS_API_KEY, TRANSITROUTE_LANGUAGE, TRANSITROUTE_REGION
        TRANSITROUTE_READY_TIMEOUT and TRANSITROUTE_TIMEZONE. Explicit overrides win.
        """
        values = {}

        api_key = os.getenv("GOOGLE_MAPS_API_KEY")
        if api_key:
            values["api_key"] = api_key

        language = os.getenv("TRANSITROUTE_LANGUAGE")
        if language:
            values["language"] = language

        region = os.getenv("TRANSITROUTE_REGION")
        if region:
            values["region"] = region

        ready_timeout = os.getenv("TRANSITROUTE_READY_TIMEOUT")
        if ready_timeout:
            values["ready_timeout"] = float(ready_timeout)

        zone = os.getenv("TRANSITROUTE_TIMEZONE")
        if zone:
            values["timezone"] = zone

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
