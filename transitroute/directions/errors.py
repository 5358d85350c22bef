"""
Directions provider error taxonomy
"""

from typing import Optional

from transitroute.core.polyline import FormatError


class DirectionsError(Exception):
    """Base class for directions provider errors"""
    pass


class ProviderUnavailable(DirectionsError):
    """Provider did not become ready in time or failed to initialize"""
    pass


class ProviderQueryFailed(DirectionsError):
    """Provider answered with an error or could not be reached"""

    def __init__(self, message: str, status: Optional[str] = None):
        super().__init__(message)
        self.status = status


class EmptyResult(DirectionsError):
    """Provider succeeded but returned no routes"""
    pass


__all__ = [
    "DirectionsError",
    "ProviderUnavailable",
    "ProviderQueryFailed",
    "EmptyResult",
    "FormatError",
]
