"""
Date and timezone utilities.

Centralizes all date/time operations with proper timezone handling: local
hour-of-day, meteorological season and clock-time formatting for
recommendation text.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
import pytz
from pytz.tzinfo import BaseTzInfo


WINTER = "winter"
SPRING = "spring"
SUMMER = "summer"
AUTUMN = "autumn"


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/London', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def to_local(dt: datetime, timezone_str: str) -> datetime:
        """
        Express a timestamp in the given timezone.

        Naive timestamps are taken to already be local wall-clock time and are
        localized; aware timestamps are converted.

        Args:
            dt: Datetime (naive or aware)
            timezone_str: Target timezone string

        Returns:
            Timezone-aware datetime in the target timezone
        """
        tz = DateUtils.parse_timezone(timezone_str)
        if dt.tzinfo is None:
            return tz.localize(dt)
        return dt.astimezone(tz)

    @staticmethod
    def add_hours(dt: datetime, hours: int) -> datetime:
        """
        Add whole hours to a timestamp, keeping pytz offsets correct.

        Plain timedelta arithmetic keeps the original UTC offset, so the
        result is normalized when it crosses a daylight saving change.

        Args:
            dt: Datetime (naive or pytz-aware)
            hours: Hours to add

        Returns:
            Shifted datetime
        """
        shifted = dt + timedelta(hours=hours)
        tz = dt.tzinfo
        if tz is not None and hasattr(tz, "normalize"):
            return tz.normalize(shifted)
        return shifted

    @staticmethod
    def local_hour(dt: datetime, timezone_str: str) -> int:
        """
        Get the local hour of day (0-23) for a timestamp.

        Args:
            dt: Datetime (naive or aware)
            timezone_str: Timezone string

        Returns:
            Hour of day in the target timezone
        """
        return DateUtils.to_local(dt, timezone_str).hour

    @staticmethod
    def season_for_month(month: int) -> str:
        """
        Get meteorological season for a month (northern hemisphere).

        Args:
            month: Month number (1-12)

        Returns:
            One of 'winter', 'spring', 'summer', 'autumn'
        """
        if month == 12 or month <= 2:
            return WINTER
        if month <= 5:
            return SPRING
        if month <= 8:
            return SUMMER
        return AUTUMN

    @staticmethod
    def season(dt: datetime, timezone_str: str) -> str:
        """
        Get meteorological season for a timestamp in the given timezone.

        Args:
            dt: Datetime (naive or aware)
            timezone_str: Timezone string

        Returns:
            Season name
        """
        return DateUtils.season_for_month(DateUtils.to_local(dt, timezone_str).month)

    @staticmethod
    def format_hour_12(hour: int) -> str:
        """
        Format an hour of day as a short 12-hour clock label.

        Args:
            hour: Hour of day (0-23)

        Returns:
            Label such as '6am', '12pm', '11pm'
        """
        suffix = "pm" if hour >= 12 else "am"
        return f"{hour % 12 or 12}{suffix}"

    @staticmethod
    def format_clock(dt: datetime) -> str:
        """Format a timestamp as HH:MM."""
        return dt.strftime("%H:%M")
