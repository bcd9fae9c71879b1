"""Shared pytest fixtures for all tests."""

import pytest
from datetime import date

from solarcalc.solar_calc import SolarCalc


# Raleigh, North Carolina
RALEIGH = (35.78, -78.649999)
# Alert, Nunavut (polar day in June)
ALERT = (82.4508, -62.5056)


@pytest.fixture
def raleigh_calc():
    """SolarCalc for 2015-03-08 in Raleigh."""
    return SolarCalc(date(2015, 3, 8), *RALEIGH)


@pytest.fixture
def polar_day_calc():
    """SolarCalc for 2015-06-23 at Alert, where the sun never sets."""
    return SolarCalc(date(2015, 6, 23), *ALERT)
