"""
Named solar events for a date and location.

Thin layer over `Sun`: each event is a fixed (angle, rising) pair from
`solarcalc.events`. Events that do not happen on the given day
(polar day or polar night) are None.
"""

from datetime import date, datetime
from typing import Any, Optional

from solarcalc.events import EVENTS
from solarcalc.models import Location
from solarcalc.sun import Sun


class SolarCalc:
    """
    Solar event times for one calendar date and location.

    Args:
        day: Calendar date (a datetime's time of day is ignored)
        latitude: Degrees, -90 to 90
        longitude: Degrees, -180 to 180, east positive

    Raises:
        pydantic.ValidationError: If the coordinates are out of range

    Example:
        calc = SolarCalc(date(2015, 3, 8), 35.78, -78.649999)
        calc.sunrise  # datetime(2015, 3, 8, 11, 35, 30, tzinfo=timezone.utc)
    """

    def __init__(self, day: date, latitude: float, longitude: float):
        self.location = Location(latitude=latitude, longitude=longitude)
        self.date = day
        self.sun = Sun(day, self.location.latitude, self.location.longitude)

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    def _at(self, name: str) -> Optional[datetime]:
        angle, rising = EVENTS[name]
        return self.sun.time_at_angle(angle, rising)

    @property
    def solar_noon(self) -> datetime:
        return self.sun.solar_noon

    @property
    def sunrise(self) -> Optional[datetime]:
        return self._at("sunrise")

    @property
    def sunset(self) -> Optional[datetime]:
        return self._at("sunset")

    @property
    def sunrise_end(self) -> Optional[datetime]:
        return self._at("sunrise_end")

    @property
    def sunset_start(self) -> Optional[datetime]:
        return self._at("sunset_start")

    @property
    def civil_dawn(self) -> Optional[datetime]:
        return self._at("civil_dawn")

    @property
    def dawn(self) -> Optional[datetime]:
        return self.civil_dawn

    @property
    def civil_dusk(self) -> Optional[datetime]:
        return self._at("civil_dusk")

    @property
    def dusk(self) -> Optional[datetime]:
        return self.civil_dusk

    @property
    def nautical_dawn(self) -> Optional[datetime]:
        return self._at("nautical_dawn")

    @property
    def nautical_dusk(self) -> Optional[datetime]:
        return self._at("nautical_dusk")

    @property
    def astronomical_dawn(self) -> Optional[datetime]:
        return self._at("astronomical_dawn")

    @property
    def night_end(self) -> Optional[datetime]:
        return self.astronomical_dawn

    @property
    def astronomical_dusk(self) -> Optional[datetime]:
        return self._at("astronomical_dusk")

    @property
    def night_start(self) -> Optional[datetime]:
        return self.astronomical_dusk

    @property
    def golden_hour_start(self) -> Optional[datetime]:
        return self._at("golden_hour_start")

    @property
    def golden_hour_end(self) -> Optional[datetime]:
        return self._at("golden_hour_end")

    def event(self, name: str) -> Optional[datetime]:
        """
        Look up an event by name.

        Args:
            name: "solar_noon" or any key of `solarcalc.events.EVENTS`

        Returns:
            Aware UTC datetime, or None if the event does not occur

        Raises:
            ValueError: If the name is unknown
        """
        if name == "solar_noon":
            return self.solar_noon
        if name not in EVENTS:
            raise ValueError(f"Unknown solar event: {name}")
        return self._at(name)

    def get_snapshot(self) -> dict[str, Any]:
        """
        All events for this date and location.

        Returns:
            dict: date, coordinates and every event as an ISO string (None if absent)
        """
        snapshot = {
            "date": date(self.date.year, self.date.month, self.date.day).isoformat(),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "solar_noon": self.solar_noon.isoformat(),
        }
        for name in EVENTS:
            when = self.event(name)
            snapshot[name] = when.isoformat() if when else None
        return snapshot
