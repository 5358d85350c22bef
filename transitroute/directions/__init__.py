"""
Transit directions: provider client, normalization and route resolution
"""

from .builder import RouteCandidateBuilder, rank_candidates
from .client import DirectionsClient, ProviderReadiness
from .errors import (
    DirectionsError,
    EmptyResult,
    FormatError,
    ProviderQueryFailed,
    ProviderUnavailable,
)
from .fallback import FallbackRouteSynthesizer
from .normalizer import TransitStepNormalizer
from .resolver import DirectionsResolver, QueryOutcome, QueryStatus

__all__ = [
    "DirectionsClient",
    "ProviderReadiness",
    "DirectionsResolver",
    "QueryOutcome",
    "QueryStatus",
    "RouteCandidateBuilder",
    "rank_candidates",
    "TransitStepNormalizer",
    "FallbackRouteSynthesizer",
    "DirectionsError",
    "ProviderUnavailable",
    "ProviderQueryFailed",
    "EmptyResult",
    "FormatError",
]
