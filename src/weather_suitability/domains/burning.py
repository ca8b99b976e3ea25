"""
Woodburner ignition domain configuration.

Five tiers: EXCELLENT (75+), GOOD (60-74), MARGINAL (45-59), POOR (30-44)
and AVOID (below 30). Windows are ranked with a lifestyle bonus so that
morning and evening fires beat overnight ones.
"""

from datetime import datetime
from typing import Optional, Sequence, Tuple

from ..algorithms.burning import BURNING_SUBSCORES, temperature_differential
from ..core.date_utils import SUMMER, DateUtils
from ..models import (
    DECISION_ACCEPTABLE,
    DECISION_EXCELLENT,
    DECISION_POOR,
    HARD,
    SOFT,
    AlgorithmConfig,
    DisqualificationRule,
    FeatureFlags,
    HourlyObservation,
    Location,
    ScoringContext,
    Thresholds,
    Window,
)


EXCELLENT = "EXCELLENT"
GOOD = "GOOD"
MARGINAL = "MARGINAL"
POOR = "POOR"
AVOID = "AVOID"

BURNING_WEIGHTS = {
    "temperature_differential": 0.50,  # stack effect
    "pressure": 0.15,
    "humidity": 0.15,
    "wind_speed": 0.10,
    "precipitation": 0.10,
}

BURNING_THRESHOLDS = Thresholds(
    excellent=75,
    suitable=60,
    status_tiers=((EXCELLENT, 75), (GOOD, 60), (MARGINAL, 45), (POOR, 30)),
    fallback_status=AVOID,
    min_window_hours=2,
)

# Practical hours of day (local, half-open)
MORNING_HOURS = (6, 11)
EVENING_HOURS = (17, 23)

MORNING_BONUS = 10.0
EVENING_BONUS = 15.0
SPANS_BOTH_BONUS = 5.0
PARTIAL_OVERLAP_BONUS = 3.0
OUTSIDE_PRACTICAL_PENALTY = -20.0

BURNING_RULES = (
    DisqualificationRule(
        name="TEMPERATURE_INVERSION",
        predicate=lambda obs, ctx: temperature_differential(obs, ctx) < 0,
        severity=HARD,
        reason="Outside warmer than inside, backdraft risk",
    ),
    DisqualificationRule(
        name="STORM_PRESSURE",
        predicate=lambda obs, ctx: obs.pressure is not None and obs.pressure < 980,
        severity=HARD,
        reason="Storm pressure",
    ),
    DisqualificationRule(
        name="LOW_PRESSURE",
        predicate=lambda obs, ctx: obs.pressure is not None and obs.pressure < 990,
        severity=SOFT,
        reason="Very low pressure",
        penalty=30,
    ),
    DisqualificationRule(
        name="HEAVY_RAIN",
        predicate=lambda obs, ctx: obs.precipitation > 5,
        severity=SOFT,
        reason="Heavy rain",
        penalty=20,
    ),
    DisqualificationRule(
        name="FOG",
        predicate=lambda obs, ctx: obs.humidity > 95,
        severity=SOFT,
        reason="Fog",
        penalty=15,
    ),
)

BURNING_WARNING_MESSAGES = {
    "TEMPERATURE_INVERSION": (
        "SEVERE BACKDRAFT RISK: Outside temperature exceeds indoor temperature. Do not light stove."
    ),
    "SUMMER_CHIMNEY_SYNDROME": (
        "Summer chimney syndrome likely. Pre-warm chimney essential before attempting ignition."
    ),
    "COLD_CHIMNEY_MORNING": (
        "Cold chimney from overnight cooling. Use newspaper torch to pre-warm flue before lighting."
    ),
    "VERY_DAMP_CONDITIONS": "Very damp conditions. Use only dry kindling (<15% moisture content).",
    "FOG_CONDITIONS": "Fog/mist present. Expect difficult ignition and poor smoke dispersion.",
    "STORM_PRESSURE": "Storm pressure. Strong gusts may force smoke back down the flue.",
    "LOW_PRESSURE": "Low pressure. Expect a weak draft.",
    "HEAVY_RAIN": "Heavy rain. Expect a cold, damp flue.",
    "FOG": "Fog. Smoke will linger near the ground.",
}

BURNING_STATUS_MESSAGES = {
    EXCELLENT: ("Perfect for lighting!", "Easy ignition, strong draft expected"),
    GOOD: ("Light normally", "Standard ignition procedure should work"),
    MARGINAL: ("Take precautions", "Pre-warm chimney, use dry kindling"),
    POOR: ("Not recommended", "Difficult ignition, expect smoking"),
    AVOID: ("Do NOT light", "Backdraft or severe smoking risk"),
}


def burning_hazards(obs: HourlyObservation, ctx: ScoringContext) -> Tuple[str, ...]:
    """
    Hazard codes for one hour beyond the disqualification rules.

    Args:
        obs: Forecast hour
        ctx: Scoring context (indoor temperature, season, local hour)

    Returns:
        Tuple of hazard codes in a fixed order
    """
    differential = temperature_differential(obs, ctx)
    hour = ctx.local_hour
    hazards = []

    if differential < 0:
        hazards.append("TEMPERATURE_INVERSION")

    if (
        ctx.season == SUMMER
        and obs.pressure is not None
        and obs.pressure > 1020
        and obs.wind_speed < 5
        and differential < 5
    ):
        hazards.append("SUMMER_CHIMNEY_SYNDROME")

    if 6 <= hour < 9 and differential < 8:
        hazards.append("COLD_CHIMNEY_MORNING")

    if obs.humidity > 85 and differential < 10:
        hazards.append("VERY_DAMP_CONDITIONS")

    if obs.humidity > 95:
        hazards.append("FOG_CONDITIONS")

    return tuple(hazards)


def lifestyle_bonus(start_hour: int, end_hour: int) -> float:
    """
    Ranking adjustment for when a fire would be lit.

    Args:
        start_hour: Local hour the window starts
        end_hour: Local hour the window ends

    Returns:
        +10 morning, +15 evening, +5 spanning both, +3 partial overlap,
        -20 fully outside practical hours
    """
    morning_start, morning_end = MORNING_HOURS
    evening_start, evening_end = EVENING_HOURS

    if start_hour >= morning_start and end_hour <= morning_end:
        return MORNING_BONUS
    if start_hour >= evening_start and end_hour <= evening_end:
        return EVENING_BONUS
    if start_hour >= morning_start and end_hour >= evening_start:
        return SPANS_BOTH_BONUS
    if (start_hour < morning_end and end_hour > morning_start) or (
        start_hour < evening_end and end_hour > evening_start
    ):
        return PARTIAL_OVERLAP_BONUS
    return OUTSIDE_PRACTICAL_PENALTY


def practical_hours_mask(local_time: datetime, location: Location) -> bool:
    """Only morning (06-11) and evening (17-23) hours may belong to a window."""
    hour = local_time.hour
    return MORNING_HOURS[0] <= hour < MORNING_HOURS[1] or EVENING_HOURS[0] <= hour < EVENING_HOURS[1]


def burning_tips(decision: str, best: Optional[Window], windows: Sequence[Window]) -> Tuple[str, ...]:
    """
    Lighting advice for the current verdict.

    Args:
        decision: Coarse verdict on the current hour
        best: Best window, if any
        windows: All windows

    Returns:
        Tips in display order
    """
    tips = []
    if decision == DECISION_EXCELLENT:
        tips.append("Excellent draft conditions - standard ignition procedure will work")
    elif decision == DECISION_ACCEPTABLE:
        tips.append("Good conditions - ensure chimney is clean and use dry kindling")
    elif decision == DECISION_POOR:
        tips.append("Marginal conditions - pre-warm chimney with newspaper torch before lighting")
        tips.append("Use very dry kindling (<15% moisture) and fire starter blocks")
        if best is not None:
            tips.append(f"Wait until {DateUtils.format_clock(best.start)} for better conditions")

    if len(windows) > 1:
        tips.append("Multiple good windows available - choose based on your schedule")
    return tuple(tips)


BURNING_CONFIG = AlgorithmConfig(
    name="burning",
    version="2.0.0",
    weights=BURNING_WEIGHTS,
    subscores=BURNING_SUBSCORES,
    thresholds=BURNING_THRESHOLDS,
    rules=BURNING_RULES,
    features=FeatureFlags(coastal_intelligence=False, wind_analysis=False),
    ranking_bonus=lifestyle_bonus,
    hazard_check=burning_hazards,
    warning_messages=BURNING_WARNING_MESSAGES,
    status_messages=BURNING_STATUS_MESSAGES,
    tips=burning_tips,
    max_alternatives=2,
    needs_indoor_temperature=True,
)
