"""
Configuration management with environment variable support.

Settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

# Load .env file from project root (one level up from solarcalc/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# Time scale constants
MINUTES_PER_DAY: float = 1440.0
J2000_JULIAN_DATE: float = 2451545.0  # 2000-01-01 12:00 TT
DAYS_PER_JULIAN_CENTURY: float = 36525.0
