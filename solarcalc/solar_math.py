"""
Solar position math (NOAA sunrise/sunset approximations).

Every function here is pure. Angles are stored and returned in degrees;
trigonometric calls always take radians.
"""

import math
from datetime import date

from solarcalc.config import J2000_JULIAN_DATE, DAYS_PER_JULIAN_CENTURY


def rad_to_deg(angle_rad: float) -> float:
    return 180.0 * angle_rad / math.pi


def deg_to_rad(angle_deg: float) -> float:
    return math.pi * angle_deg / 180.0


# ============================================================================
# Time scales
# ============================================================================

def to_julian_date(year: int, month: int, day: int) -> float:
    """
    Julian date at 00:00 UTC of a proleptic Gregorian calendar date.

    January and February count as months 13 and 14 of the previous year.
    Results before the 1582 calendar reform are computed the same way but
    have no historical meaning.

    Example:
        >>> to_julian_date(2000, 1, 1)
        2451544.5
    """
    if month < 3:
        year -= 1
        month += 12

    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def julian_date_from(day: date) -> float:
    """Julian date of a date/datetime; time of day is ignored."""
    return to_julian_date(day.year, day.month, day.day)


def to_julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000_JULIAN_DATE) / DAYS_PER_JULIAN_CENTURY


# ============================================================================
# Solar position chain (t = Julian century)
# ============================================================================

def geom_mean_long_sun(t: float) -> float:
    """Geometric mean longitude of the sun, degrees in [0, 360)."""
    l0 = 280.46646 + t * (36000.76983 + t * 0.0003032)
    while l0 >= 360.0:
        l0 -= 360.0
    while l0 < 0.0:
        l0 += 360.0
    return l0


def geom_mean_anomaly_sun(t: float) -> float:
    """Geometric mean anomaly of the sun, degrees (not reduced)."""
    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def eccentricity_earth_orbit(t: float) -> float:
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def sun_eq_of_center(t: float) -> float:
    """Equation of center, degrees."""
    mrad = deg_to_rad(geom_mean_anomaly_sun(t))
    sinm = math.sin(mrad)
    sin2m = math.sin(mrad + mrad)
    sin3m = math.sin(mrad + mrad + mrad)
    return (
        sinm * (1.914602 - t * (0.004817 + 0.000014 * t))
        + sin2m * (0.019993 - 0.000101 * t)
        + sin3m * 0.000289
    )


def sun_true_long(t: float) -> float:
    return geom_mean_long_sun(t) + sun_eq_of_center(t)


def _omega(t: float) -> float:
    # Longitude of the moon's ascending node, drives nutation
    return 125.04 - 1934.136 * t


def sun_apparent_long(t: float) -> float:
    """Apparent longitude (true longitude corrected for nutation and aberration)."""
    return sun_true_long(t) - 0.00569 - 0.00478 * math.sin(deg_to_rad(_omega(t)))


def mean_obliquity_of_ecliptic(t: float) -> float:
    seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + (seconds / 60.0)) / 60.0


def obliquity_correction(t: float) -> float:
    return mean_obliquity_of_ecliptic(t) + 0.00256 * math.cos(deg_to_rad(_omega(t)))


def sun_declination(t: float) -> float:
    """Solar declination, degrees."""
    sint = math.sin(deg_to_rad(obliquity_correction(t))) * math.sin(deg_to_rad(sun_apparent_long(t)))
    return rad_to_deg(math.asin(sint))


def equation_of_time(t: float) -> float:
    """
    Equation of time in minutes (apparent minus mean solar time).

    Combines the eccentricity of the orbit with the obliquity term
    y = tan²(ε/2) and harmonics of the mean longitude and anomaly.
    """
    epsilon = obliquity_correction(t)
    l0 = geom_mean_long_sun(t)
    e = eccentricity_earth_orbit(t)
    m = geom_mean_anomaly_sun(t)

    y = math.tan(deg_to_rad(epsilon) / 2.0)
    y *= y

    sin2l0 = math.sin(2.0 * deg_to_rad(l0))
    sinm = math.sin(deg_to_rad(m))
    cos2l0 = math.cos(2.0 * deg_to_rad(l0))
    sin4l0 = math.sin(4.0 * deg_to_rad(l0))
    sin2m = math.sin(2.0 * deg_to_rad(m))

    etime = (
        y * sin2l0
        - 2.0 * e * sinm
        + 4.0 * e * y * sinm * cos2l0
        - 0.5 * y * y * sin4l0
        - 1.25 * e * e * sin2m
    )
    return rad_to_deg(etime) * 4.0


# ============================================================================
# Hour angle
# ============================================================================

def hour_angle(angle: float, latitude: float, declination: float) -> float:
    """
    Hour angle (radians) at which the sun sits `angle` degrees below the horizon.

    Args:
        angle: Degrees below the horizon (negative = above)
        latitude: Observer latitude in degrees
        declination: Solar declination in degrees

    Returns:
        Hour angle in radians for the rising event (negate for setting),
        or NaN when the sun never reaches that angle on this day.
    """
    lat_rad = deg_to_rad(latitude)
    dec_rad = deg_to_rad(declination)
    ha_arg = (
        math.cos(deg_to_rad(90 + angle)) / (math.cos(lat_rad) * math.cos(dec_rad))
        - math.tan(lat_rad) * math.tan(dec_rad)
    )
    # Polar day or polar night: no crossing
    if not -1.0 <= ha_arg <= 1.0:
        return math.nan
    return math.acos(ha_arg)
