"""
Core route data models for transitroute
Normalized, provider-independent representation of transit routes
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class VehicleType(str, Enum):
    """Transit vehicle classification"""

    BUS = "BUS"
    TRAM = "TRAM"
    SUBWAY = "SUBWAY"
    RAIL = "RAIL"
    FERRY = "FERRY"
    CABLE_CAR = "CABLE_CAR"
    GONDOLA_LIFT = "GONDOLA_LIFT"
    FUNICULAR = "FUNICULAR"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "VehicleType":
        """Map a raw provider vehicle type to a classification, OTHER if unknown"""
        if not raw:
            return cls.OTHER

        value = str(raw).strip().upper()
        try:
            return cls(value)
        except ValueError:
            return VEHICLE_SUBTYPES.get(value, cls.OTHER)


# Provider subtypes folded into the closest classification
VEHICLE_SUBTYPES: Dict[str, VehicleType] = {
    "HEAVY_RAIL": VehicleType.RAIL,
    "COMMUTER_TRAIN": VehicleType.RAIL,
    "HIGH_SPEED_TRAIN": VehicleType.RAIL,
    "LONG_DISTANCE_TRAIN": VehicleType.RAIL,
    "MONORAIL": VehicleType.RAIL,
    "METRO_RAIL": VehicleType.SUBWAY,
    "INTERCITY_BUS": VehicleType.BUS,
    "TROLLEYBUS": VehicleType.BUS,
    "SHARE_TAXI": VehicleType.BUS,
}

HEX_COLOR_PATTERN = r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$"

# Default line colors per classification when the provider sends none
VEHICLE_COLORS: Dict[VehicleType, str] = {
    VehicleType.BUS: "#f59e0b",
    VehicleType.TRAM: "#10b981",
    VehicleType.SUBWAY: "#3b82f6",
    VehicleType.RAIL: "#8b5cf6",
    VehicleType.FERRY: "#06b6d4",
    VehicleType.CABLE_CAR: "#f97316",
    VehicleType.GONDOLA_LIFT: "#ef4444",
    VehicleType.FUNICULAR: "#84cc16",
    VehicleType.OTHER: "#6b7280",
}


class TravelMode(str, Enum):
    """Step travel modes meaningful to route rendering"""

    WALKING = "WALKING"
    TRANSIT = "TRANSIT"


class RankingPreference(str, Enum):
    """How candidate routes are ordered"""

    PROVIDER = "provider"
    FASTEST = "fastest"
    FEWEST_TRANSFERS = "fewest_transfers"


class Coordinate(BaseModel):
    """WGS84 position, longitude first"""

    model_config = ConfigDict(frozen=True)

    lng: float = Field(description="Longitude in degrees", ge=-180.0, le=180.0)
    lat: float = Field(description="Latitude in degrees", ge=-90.0, le=90.0)

    @classmethod
    def from_lat_lng(cls, lat: float, lng: float) -> "Coordinate":
        return cls(lng=lng, lat=lat)

    def as_lat_lng(self) -> str:
        """Format as the "lat,lng" string used in provider queries"""
        return f"{self.lat},{self.lng}"


class TransitDetails(BaseModel):
    """Transit-specific information for a single ride"""

    model_config = ConfigDict(frozen=True)

    line: str = Field("", description="Line identifier (short name preferred)")
    line_name: str = Field("", description="Full display name of the line")
    vehicle_type: VehicleType = Field(VehicleType.OTHER, description="Vehicle classification")
    vehicle_label: str = Field("", description="Human-readable vehicle label")
    departure: str = Field("", description="Departure time label")
    arrival: str = Field("", description="Arrival time label")
    departure_time: datetime = Field(description="Departure timestamp")
    arrival_time: datetime = Field(description="Arrival timestamp")
    stops: int = Field(0, description="Number of stops on the ride", ge=0)
    agency_name: str = Field("", description="Operating agency")
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN, description="Line color as #RRGGBB")
    text_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN, description="Line text color as #RRGGBB")
    headsign: Optional[str] = Field(None, description="Direction shown on the vehicle")
    times_estimated: bool = Field(
        False, description="Timestamps were defaulted, not reported by the provider"
    )

    @model_validator(mode="after")
    def check_timestamps(self):
        """Departure must not follow arrival for reported times"""
        if not self.times_estimated and self.departure_time > self.arrival_time:
            raise ValueError("departure_time must not be later than arrival_time")
        return self

    @property
    def display_color(self) -> str:
        return self.color or VEHICLE_COLORS[self.vehicle_type]


class RouteStep(BaseModel):
    """One instruction within a route itinerary"""

    model_config = ConfigDict(frozen=True)

    instructions: str = Field("", description="Instruction text, may contain markup")
    duration: str = Field("", description="Duration label")
    distance: str = Field("", description="Distance label")
    travel_mode: str = Field("", description="Raw travel mode tag")
    transit: Optional[TransitDetails] = Field(None, description="Transit details for TRANSIT steps")

    @property
    def is_transit(self) -> bool:
        return self.travel_mode == TravelMode.TRANSIT.value

    @property
    def is_walking(self) -> bool:
        return self.travel_mode == TravelMode.WALKING.value


class RouteResult(BaseModel):
    """
    Normalized route ready for rendering
    The primary route carries its alternatives; alternatives carry none
    """

    model_config = ConfigDict(frozen=True)

    duration: str = Field("", description="Total duration label")
    distance: str = Field("", description="Total distance label")
    duration_seconds: Optional[int] = Field(None, description="Total duration in seconds")
    distance_meters: Optional[int] = Field(None, description="Total distance in meters")
    steps: List[RouteStep] = Field(default_factory=list, description="Steps in itinerary order")
    geometry: List[Coordinate] = Field(default_factory=list, description="Decoded route geometry")
    polyline: str = Field("", description="Encoded overview geometry as received")
    departure_time: datetime = Field(description="Departure timestamp")
    arrival_time: datetime = Field(description="Arrival timestamp")
    summary: str = Field("", description="Provider route summary")
    alternatives: List["RouteResult"] = Field(
        default_factory=list, description="Alternative routes, provider order"
    )
    is_fallback: bool = Field(False, description="Synthesized locally, not provider data")
    request_id: Optional[str] = Field(None, description="Caller's request identifier")

    @model_validator(mode="after")
    def check_alternatives_depth(self):
        """Alternatives may not nest"""
        for alternative in self.alternatives:
            if alternative.alternatives:
                raise ValueError("alternative routes cannot carry their own alternatives")
        return self

    @property
    def candidates(self) -> List["RouteResult"]:
        """Primary route followed by its alternatives"""
        return [self, *self.alternatives]

    @property
    def transit_steps(self) -> List[RouteStep]:
        return [step for step in self.steps if step.is_transit]

    @property
    def transfer_count(self) -> int:
        return max(len(self.transit_steps) - 1, 0)

    def to_geojson(self) -> Dict[str, Any]:
        """GeoJSON LineString feature for map sources"""
        return {
            "type": "Feature",
            "properties": {
                "duration": self.duration,
                "distance": self.distance,
                "fallback": self.is_fallback,
            },
            "geometry": {
                "type": "LineString",
                "coordinates": [[point.lng, point.lat] for point in self.geometry],
            },
        }


RouteResult.model_rebuild()
