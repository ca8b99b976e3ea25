"""
Laundry drying domain configuration.

YES (70-100): excellent drying, hang washing with confidence
MAYBE (50-69): marginal but acceptable, watch the weather
NO (0-49): poor drying, indoor drying recommended
"""

from datetime import datetime

from ..algorithms.drying import DRYING_SUBSCORES, pressure_multiplier
from ..algorithms.solar import SolarGeometry
from ..models import HARD, SOFT, AlgorithmConfig, DisqualificationRule, FeatureFlags, Location, Thresholds


YES = "YES"
MAYBE = "MAYBE"
NO = "NO"

DRYING_WEIGHTS = {
    "vapor_pressure_deficit": 0.30,  # primary evaporation driver
    "wind_speed": 0.20,
    "wet_bulb_temperature": 0.10,
    "sunshine_duration": 0.09,
    "temperature": 0.08,
    "shortwave_radiation": 0.08,
    "evapotranspiration": 0.05,  # cross-check
    "wind_direction": 0.05,
    "dew_point_spread": 0.05,  # condensation risk
}

DRYING_THRESHOLDS = Thresholds(
    excellent=70,
    suitable=50,
    status_tiers=((YES, 70), (MAYBE, 50)),
    fallback_status=NO,
    min_window_hours=2,
)

RAIN_RISK_LIMIT = 0.2
CONDENSATION_SPREAD = 1.0
VERY_HIGH_HUMIDITY = 95.0
EXTREME_WIND_KMH = 50.0

DRYING_RULES = (
    DisqualificationRule(
        name="RAIN_DETECTED",
        predicate=lambda obs, ctx: obs.precipitation > 0,
        severity=HARD,
        reason="Rain forecast",
    ),
    DisqualificationRule(
        name="HIGH_RAIN_RISK",
        predicate=lambda obs, ctx: obs.rain_risk > RAIN_RISK_LIMIT,
        severity=HARD,
        reason="High risk of rain",
    ),
    DisqualificationRule(
        name="CONDENSATION_RISK",
        predicate=lambda obs, ctx: obs.dew_point_spread < CONDENSATION_SPREAD,
        severity=HARD,
        reason="Air near saturation, condensation likely",
    ),
    DisqualificationRule(
        name="VERY_HIGH_HUMIDITY",
        predicate=lambda obs, ctx: obs.humidity > VERY_HIGH_HUMIDITY and obs.vapor_pressure_deficit is None,
        severity=SOFT,
        reason="Very high humidity",
        penalty=30,
    ),
    DisqualificationRule(
        name="EXTREME_WIND",
        predicate=lambda obs, ctx: obs.wind_speed > EXTREME_WIND_KMH,
        severity=SOFT,
        reason="Extreme wind, washing may blow away",
        penalty=20,
    ),
)

DRYING_WARNING_MESSAGES = {
    "RAIN_DETECTED": "Rain forecast. Keep washing indoors while it rains.",
    "HIGH_RAIN_RISK": "Significant chance of rain. Be ready to bring washing in.",
    "CONDENSATION_RISK": "Air is close to saturation. Washing may get damper, not drier.",
    "VERY_HIGH_HUMIDITY": "Very humid air. Drying will be slow.",
    "EXTREME_WIND": "Very strong wind. Peg washing securely or keep it indoors.",
}

DRYING_STATUS_MESSAGES = {
    YES: ("Get the washing out", "Excellent drying conditions"),
    MAYBE: ("Keep your eye on it", "Decent drying, watch the weather"),
    NO: ("Indoor drying only", "Poor conditions for outdoor drying"),
}


def daylight_mask(local_time: datetime, location: Location) -> bool:
    """Only daylight hours may belong to a drying window."""
    return SolarGeometry.is_daylight(local_time, location.latitude, location.longitude)


def describe_drying_window(average_score: int) -> str:
    """Short quality description for a drying window average."""
    if average_score >= 80:
        return "excellent"
    if average_score >= 70:
        return "very good"
    if average_score >= 60:
        return "good"
    if average_score >= 55:
        return "decent"
    return "acceptable"


DRYING_CONFIG = AlgorithmConfig(
    name="drying",
    version="2.1.0",
    weights=DRYING_WEIGHTS,
    subscores=DRYING_SUBSCORES,
    thresholds=DRYING_THRESHOLDS,
    rules=DRYING_RULES,
    features=FeatureFlags(),
    multipliers={"pressure": pressure_multiplier},
    window_mask=daylight_mask,
    describe_window=describe_drying_window,
    warning_messages=DRYING_WARNING_MESSAGES,
    status_messages=DRYING_STATUS_MESSAGES,
    max_alternatives=2,
    status_from_best_window=True,
)
