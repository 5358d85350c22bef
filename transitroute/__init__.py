"""
transitroute: Transit Route Resolution Engine

Turns transit directions provider responses into normalized, renderable
routes, with a synthesized fallback when the provider has no answer.
"""

__version__ = "0.1.0"

from .core.models import Coordinate, RouteResult, RouteStep, TransitDetails, VehicleType
from .core.polyline import FormatError, PolylineCodec
from .directions.client import DirectionsClient
from .directions.resolver import DirectionsResolver

__all__ = [
    "Coordinate",
    "RouteResult",
    "RouteStep",
    "TransitDetails",
    "VehicleType",
    "PolylineCodec",
    "FormatError",
    "DirectionsClient",
    "DirectionsResolver",
]
