"""
Horizon angles and the named solar events built on them.
"""

# Degrees of the sun's center below the horizon (negative = above)
DEGREES_BELOW_HORIZON = {
    "sunrise": 0.833,        # upper limb touches horizon, standard refraction
    "sunrise_end": 0.3,      # lower limb clears horizon
    "twilight": 6,           # civil
    "nautical_twilight": 12,
    "night": 18,             # astronomical
    "golden_hour": -6,
}

# Event name -> (angle, rising)
EVENTS = {
    "sunrise":           (DEGREES_BELOW_HORIZON["sunrise"], True),
    "sunset":            (DEGREES_BELOW_HORIZON["sunrise"], False),
    "sunrise_end":       (DEGREES_BELOW_HORIZON["sunrise_end"], True),
    "sunset_start":      (DEGREES_BELOW_HORIZON["sunrise_end"], False),
    "civil_dawn":        (DEGREES_BELOW_HORIZON["twilight"], True),
    "civil_dusk":        (DEGREES_BELOW_HORIZON["twilight"], False),
    "nautical_dawn":     (DEGREES_BELOW_HORIZON["nautical_twilight"], True),
    "nautical_dusk":     (DEGREES_BELOW_HORIZON["nautical_twilight"], False),
    "astronomical_dawn": (DEGREES_BELOW_HORIZON["night"], True),
    "astronomical_dusk": (DEGREES_BELOW_HORIZON["night"], False),
    "golden_hour_start": (DEGREES_BELOW_HORIZON["golden_hour"], False),
    "golden_hour_end":   (DEGREES_BELOW_HORIZON["golden_hour"], True),
}

ALIASES = {
    "dawn": "civil_dawn",
    "dusk": "civil_dusk",
    "night_end": "astronomical_dawn",
    "night_start": "astronomical_dusk",
}

EVENTS.update({alias: EVENTS[target] for alias, target in ALIASES.items()})
