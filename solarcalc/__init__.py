"""Sunrise, sunset, solar noon, twilight and golden hour times (NOAA approximations)."""

from solarcalc.models import Location
from solarcalc.solar_calc import SolarCalc
from solarcalc.sun import Sun

__all__ = ["Location", "SolarCalc", "Sun"]
