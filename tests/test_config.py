"""Tests for configuration management."""

import pytest
import os
from pathlib import Path
from unittest.mock import patch


class TestConfigDefaults:
    """Tests for default configuration values."""

    def test_default_log_level(self):
        """Should default to INFO log level."""
        with patch.dict(os.environ, {}, clear=True):
            from importlib import reload
            import solarcalc.config as config
            reload(config)
            assert config.LOG_LEVEL == "INFO"


class TestConfigEnvironmentOverrides:
    """Tests for environment variable overrides."""

    def test_override_log_level(self):
        """Should override LOG_LEVEL from environment."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            from importlib import reload
            import solarcalc.config as config
            reload(config)
            assert config.LOG_LEVEL == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        """Should load LOG_LEVEL from the .env file at the project root."""
        import dotenv
        from importlib import reload
        import solarcalc.config as config

        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=WARNING\n")
        real_load_dotenv = dotenv.load_dotenv
        project_env = Path(config.__file__).parent.parent / ".env"

        def load_tmp_env(dotenv_path):
            return real_load_dotenv(dotenv_path=env_file)

        with patch.dict(os.environ, {}, clear=True), \
                patch("dotenv.load_dotenv", side_effect=load_tmp_env) as mock_load:
            reload(config)
            mock_load.assert_called_once_with(dotenv_path=project_env)
            assert config.LOG_LEVEL == "WARNING"

        reload(config)


class TestConfigConstants:
    """Tests for hardcoded configuration constants."""

    def test_time_scale_constants(self):
        """Should have correct time scale constants."""
        from solarcalc.config import MINUTES_PER_DAY, J2000_JULIAN_DATE, DAYS_PER_JULIAN_CENTURY
        assert MINUTES_PER_DAY == 1440.0
        assert J2000_JULIAN_DATE == 2451545.0
        assert DAYS_PER_JULIAN_CENTURY == 36525.0
