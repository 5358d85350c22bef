"""
Core route models and geometry codec for transitroute
"""

from .landmarks import VIENNA_LANDMARKS, Landmark, find_landmark
from .models import (
    Coordinate,
    RankingPreference,
    RouteResult,
    RouteStep,
    TransitDetails,
    TravelMode,
    VehicleType,
)
from .polyline import FormatError, PolylineCodec

__all__ = [
    # Models
    "Coordinate",
    "VehicleType",
    "TravelMode",
    "RankingPreference",
    "TransitDetails",
    "RouteStep",
    "RouteResult",
    # Geometry
    "PolylineCodec",
    "FormatError",
    # Landmarks
    "Landmark",
    "VIENNA_LANDMARKS",
    "find_landmark",
]
