"""
Geographic context for suitability scoring.

Provides coastal distance and tier classification, onshore/offshore wind
analysis, shelter and topographic multipliers.
"""

from .coastal import (
    CoastalAnalyzer,
    COASTAL_MODIFIERS,
    COASTAL_TIERS,
    STRONGLY_COASTAL,
    COASTAL,
    TRANSITIONAL,
    WEAKLY_INLAND,
    STRONGLY_INLAND,
)
from .geodesy import haversine_km, initial_bearing
from .modifier import GeographicModifier
from .reference import CoastalReferenceData, load_reference_data, parse_reference_data
from .shelter import ShelterAnalyzer

__all__ = [
    "CoastalAnalyzer",
    "COASTAL_MODIFIERS",
    "COASTAL_TIERS",
    "STRONGLY_COASTAL",
    "COASTAL",
    "TRANSITIONAL",
    "WEAKLY_INLAND",
    "STRONGLY_INLAND",
    "haversine_km",
    "initial_bearing",
    "GeographicModifier",
    "CoastalReferenceData",
    "load_reference_data",
    "parse_reference_data",
    "ShelterAnalyzer",
]
