"""
Weather Suitability System

This package scores hourly weather forecasts for outdoor laundry drying and
woodburner ignition, finds the best time windows and produces a headline
recommendation.
"""

__version__ = "0.1.0"
__description__ = "Weather suitability scoring for laundry drying and woodburner ignition"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "SuitabilityApp":
        from .main import SuitabilityApp
        return SuitabilityApp
    if name == "SuitabilityEngine":
        from .engine import SuitabilityEngine
        return SuitabilityEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "SuitabilityApp",
    "SuitabilityEngine",
]
