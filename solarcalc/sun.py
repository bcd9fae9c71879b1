"""
Sun event engine.

Solves for solar noon and for the instants the sun crosses a given angle
relative to the horizon, using a two-pass estimate: the first pass is
evaluated at midnight UTC, the second at the first pass's time of day.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from solarcalc.config import MINUTES_PER_DAY
from solarcalc.logger import get_logger
from solarcalc.solar_math import (
    equation_of_time,
    hour_angle,
    julian_date_from,
    rad_to_deg,
    sun_declination,
    to_julian_century,
)

logger = get_logger("sun")


def to_timestamp(day: date, minutes: float) -> datetime:
    """
    Convert minutes after midnight UTC of `day` into an aware UTC datetime.

    Sub-second precision is dropped. Values below 0 or past 1440 roll over
    into the neighbouring days.
    """
    whole_minutes = math.floor(minutes)
    seconds = int((minutes - whole_minutes) * 60)
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return midnight + timedelta(minutes=whole_minutes, seconds=seconds)


def event_time_utc_minutes(rising: bool, angle: float, jd: float, latitude: float, longitude: float) -> float:
    """UTC minute of day for an angle crossing; NaN if the sun never gets there."""
    t = to_julian_century(jd)
    eq_time = equation_of_time(t)
    declination = sun_declination(t)

    ha = hour_angle(angle, latitude, declination)
    if not rising:
        ha = -ha

    delta = longitude + rad_to_deg(ha)
    return 720 - (4.0 * delta) - eq_time


def solve_event(
    rising: bool,
    angle: float,
    jd: float,
    day: date,
    latitude: float,
    longitude: float,
) -> Optional[datetime]:
    """
    Time the sun crosses `angle` degrees below the horizon on `day`.

    Args:
        rising: True for the morning crossing, False for the evening one
        angle: Degrees below the horizon (negative = above)
        jd: Julian date of `day` at 00:00 UTC
        day: Calendar date the result is anchored to
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees (east positive)

    Returns:
        Aware UTC datetime, or None when there is no crossing (polar day/night)
        or the crossing falls outside the years datetime can hold
    """
    first = event_time_utc_minutes(rising, angle, jd, latitude, longitude)
    refined = event_time_utc_minutes(rising, angle, jd + first / MINUTES_PER_DAY, latitude, longitude)

    if not math.isfinite(refined):
        logger.debug(
            f"No {'rising' if rising else 'setting'} crossing at {angle} deg "
            f"on {day.isoformat()} for lat={latitude}, lon={longitude}"
        )
        return None

    try:
        return to_timestamp(day, refined)
    except OverflowError:
        logger.debug(f"Crossing at {angle} deg on {day.isoformat()} is outside the datetime range")
        return None


def solar_noon(jd: float, longitude: float, day: date) -> datetime:
    """
    Meridian transit of the sun on `day` as an aware UTC datetime.

    The result always falls within `day`, so it exists for every date
    datetime can hold.
    """
    t_noon = to_julian_century(jd - longitude / 360.0)
    offset = 720.0 - (longitude * 4) - equation_of_time(t_noon)

    t_refined = to_julian_century(jd + offset / MINUTES_PER_DAY)
    noon = 720 - (longitude * 4) - equation_of_time(t_refined)

    while noon < 0.0:
        noon += MINUTES_PER_DAY
    while noon >= MINUTES_PER_DAY:
        noon -= MINUTES_PER_DAY

    return to_timestamp(day, noon)


class Sun:
    """
    Solar event calculator for one date and location.

    The Julian date is computed once at construction; every query
    re-evaluates the solar position from it, so an instance never changes
    and can be shared between threads.

    Coordinates are not validated here. Latitude must lie in [-90, 90] and
    longitude in [-180, 180] (east positive); anything else gives
    unspecified results.
    """

    def __init__(self, day: date, latitude: float, longitude: float):
        self.date = day
        self.latitude = latitude
        self.longitude = longitude
        self.julian_date = julian_date_from(day)
        logger.debug(f"Sun for {day.isoformat()} at ({latitude}, {longitude}): JD {self.julian_date}")

    @property
    def solar_noon(self) -> datetime:
        return solar_noon(self.julian_date, self.longitude, self.date)

    def time_at_angle(self, angle: float, rising: bool = False) -> Optional[datetime]:
        """Crossing of `angle` degrees below the horizon, or None if it never happens."""
        return solve_event(rising, angle, self.julian_date, self.date, self.latitude, self.longitude)
