"""
Domain configurations.

Each domain is one immutable AlgorithmConfig: weights, thresholds, rules and
the subscore function table. Overrides produce new instances and never touch
the shared ones.
"""

from dataclasses import replace
from typing import Any, Dict, Optional

from ..models import AlgorithmConfig
from .burning import BURNING_CONFIG, lifestyle_bonus, burning_hazards, burning_tips, practical_hours_mask
from .drying import DRYING_CONFIG, daylight_mask, describe_drying_window


DOMAINS: Dict[str, AlgorithmConfig] = {
    DRYING_CONFIG.name: DRYING_CONFIG,
    BURNING_CONFIG.name: BURNING_CONFIG,
}

THRESHOLD_OVERRIDES = ("excellent", "suitable", "min_window_hours")
FEATURE_OVERRIDES = ("coastal_intelligence", "wind_analysis", "topographic_adjustment", "temporal_weighting")


def get_domain_config(name: str, overrides: Optional[Dict[str, Any]] = None) -> AlgorithmConfig:
    """
    Get a domain configuration, optionally with tuning overrides.

    Supported overrides:
        thresholds: {excellent, suitable, min_window_hours}
        features: {coastal_intelligence, wind_analysis, topographic_adjustment, temporal_weighting}
        max_alternatives: int
        practical_hours_only: bool (restrict windows to morning/evening hours)

    Args:
        name: Domain name ('drying' or 'burning')
        overrides: Override dictionary (e.g. from config.json 'domains.<name>')

    Returns:
        AlgorithmConfig

    Raises:
        ValueError: If the domain or an override key is unknown
    """
    if name not in DOMAINS:
        raise ValueError(f"Unknown domain: {name} (expected one of {', '.join(sorted(DOMAINS))})")

    config = DOMAINS[name]
    if not overrides:
        return config

    unknown = set(overrides) - {"thresholds", "features", "max_alternatives", "practical_hours_only"}
    if unknown:
        raise ValueError(f"Unknown override(s) for domain {name}: {', '.join(sorted(unknown))}")

    changes: Dict[str, Any] = {}

    thresholds = overrides.get("thresholds") or {}
    invalid = set(thresholds) - set(THRESHOLD_OVERRIDES)
    if invalid:
        raise ValueError(f"Unknown threshold override(s): {', '.join(sorted(invalid))}")
    if thresholds:
        changes["thresholds"] = replace(config.thresholds, **thresholds)

    features = overrides.get("features") or {}
    invalid = set(features) - set(FEATURE_OVERRIDES)
    if invalid:
        raise ValueError(f"Unknown feature override(s): {', '.join(sorted(invalid))}")
    if features:
        changes["features"] = replace(config.features, **features)

    if "max_alternatives" in overrides:
        changes["max_alternatives"] = int(overrides["max_alternatives"])

    if overrides.get("practical_hours_only"):
        changes["window_mask"] = practical_hours_mask

    return replace(config, **changes)


__all__ = [
    "DOMAINS",
    "DRYING_CONFIG",
    "BURNING_CONFIG",
    "get_domain_config",
    "daylight_mask",
    "describe_drying_window",
    "lifestyle_bonus",
    "burning_hazards",
    "burning_tips",
    "practical_hours_mask",
]
