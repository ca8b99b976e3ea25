"""
Application-wide constants for weather suitability scoring.

This module defines default values and physical constants used throughout the
application. Domain-specific curve breakpoints, weights and thresholds live in
the domain configuration modules.
"""

# Score range
MIN_SCORE = 0.0
MAX_SCORE = 100.0

# Weight map tolerance (sum of weights must be 1.0 within this value)
WEIGHT_SUM_TOLERANCE = 0.001

# Forecast horizon
MAX_FORECAST_HOURS = 72
DEFAULT_FORECAST_HOURS = 72

# Default timezone for local hour and season determination
DEFAULT_TIMEZONE = "Europe/London"

# Geodesy
EARTH_RADIUS_KM = 6371.0

# Coastal influence decay length for exp(-d / k)
COASTAL_INFLUENCE_DECAY_KM = 15.0

# Coastal tier upper bounds (km, half-open)
STRONGLY_COASTAL_MAX_KM = 5.0
COASTAL_MAX_KM = 10.0
TRANSITIONAL_MAX_KM = 20.0
WEAKLY_INLAND_MAX_KM = 40.0

# Onshore/offshore tolerance around the bearing to the coast
OFFSHORE_TOLERANCE_DEG = 60.0

# Number of reference points used for inverse-distance interpolation
INTERPOLATION_NEIGHBOURS = 3

# Boundary heuristic (UK/Ireland bounding box)
UK_BOUNDS_NORTH = 60.8
UK_BOUNDS_SOUTH = 49.9
UK_BOUNDS_EAST = 1.8
UK_BOUNDS_WEST = -8.2
KM_PER_DEGREE_LAT = 111.0
KM_PER_DEGREE_LON = 69.0  # approximate at UK latitudes

# Seasonal coastal influence scaling
SUMMER_COASTAL_SCALE = 0.25
WINTER_COASTAL_SCALE = 0.08
SHOULDER_COASTAL_SCALE = 0.15

# Coastal winds lose up to 10% effectiveness (marine moisture)
COASTAL_WIND_DAMPING = 0.1

# Vapor Pressure Constants (Tetens formula)
TETENS_A = 0.6108  # kPa
TETENS_B = 17.27
TETENS_C = 237.3  # °C

# Magnus dew point coefficients
MAGNUS_A = 17.27
MAGNUS_B = 237.7  # °C

# Standard sea level pressure
STANDARD_PRESSURE_HPA = 1013.25  # hPa (mb)

# Solar Geometry Constants (FAO-56)
SOLAR_DECLINATION_AMPLITUDE = 0.409
SOLAR_DECLINATION_PHASE = 1.39  # radians

# Unit conversions
SECONDS_PER_HOUR = 3600.0
HOURS_PER_DAY = 24.0
MS_TO_KMH = 3.6
