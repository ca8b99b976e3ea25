"""
Coastal reference dataset.

The curated table of place distances to the coast, the interpolation reference
points and the coastal bearing points. Loaded once from packaged JSON and
passed by reference; the loaded structure is read-only.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


DEFAULT_DATA_FILE = Path(__file__).parent / "data" / "coastal_reference.json"


@dataclass(frozen=True)
class ReferencePoint:
    """Place with known coordinates and coastal distance."""

    name: str
    latitude: float
    longitude: float
    coastal_distance_km: float


@dataclass(frozen=True)
class CoastPoint:
    """Representative point on the coastline used for wind bearings."""

    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CoastalReferenceData:
    """Immutable coastal lookup tables."""

    version: str
    distances: Mapping[str, float]  # lower-cased place name -> km
    reference_points: Tuple[ReferencePoint, ...]
    coast_points: Tuple[CoastPoint, ...]

    def lookup(self, name: Optional[str]) -> Optional[float]:
        """
        Exact (case-insensitive) lookup of a place's coastal distance.

        The full name is tried first, then its first comma-separated part, so
        'Brighton, East Sussex, UK' matches 'Brighton'.

        Args:
            name: Location display name

        Returns:
            Coastal distance in km, or None if the place is not in the table
        """
        if not name:
            return None

        candidates = [name.strip().lower(), name.split(",")[0].strip().lower()]
        for candidate in candidates:
            if candidate in self.distances:
                return self.distances[candidate]
        return None


def parse_reference_data(raw: dict) -> CoastalReferenceData:
    """
    Build the reference dataset from its JSON structure.

    Args:
        raw: Parsed JSON document

    Returns:
        CoastalReferenceData

    Raises:
        ValueError: If required sections are missing or a distance is negative
    """
    for section in ("reference_points", "coast_points"):
        if section not in raw:
            raise ValueError(f"Coastal reference data missing section: {section}")

    reference_points = tuple(
        ReferencePoint(
            name=point["name"],
            latitude=float(point["lat"]),
            longitude=float(point["lon"]),
            coastal_distance_km=float(point["coastal_distance_km"]),
        )
        for point in raw["reference_points"]
    )
    coast_points = tuple(
        CoastPoint(name=point["name"], latitude=float(point["lat"]), longitude=float(point["lon"]))
        for point in raw["coast_points"]
    )

    distances = {point.name.lower(): point.coastal_distance_km for point in reference_points}
    for name, distance in raw.get("places", {}).items():
        distances[name.lower()] = float(distance)

    negative = [name for name, distance in distances.items() if distance < 0]
    if negative:
        raise ValueError(f"Negative coastal distances in reference data: {', '.join(negative)}")

    if not coast_points:
        raise ValueError("Coastal reference data must contain at least one coast point")

    return CoastalReferenceData(
        version=str(raw.get("version", "unknown")),
        distances=MappingProxyType(distances),
        reference_points=reference_points,
        coast_points=coast_points,
    )


def load_reference_data(path: Optional[str] = None) -> CoastalReferenceData:
    """
    Load the coastal reference dataset.

    The packaged default is parsed once and cached; custom files are parsed
    on every call.

    Args:
        path: Optional path to a JSON file with the same structure

    Returns:
        CoastalReferenceData
    """
    if path is None:
        return _load_default()
    return _load_file(Path(path))


@lru_cache(maxsize=1)
def _load_default() -> CoastalReferenceData:
    return _load_file(DEFAULT_DATA_FILE)


def _load_file(path: Path) -> CoastalReferenceData:
    if not path.exists():
        raise FileNotFoundError(f"Coastal reference data not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_reference_data(json.load(f))
