"""
Unit tests for parse options and settings.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from halo_personnummer import (
    FixedClock,
    ParseOptions,
    PersonnummerWarning,
    SystemClock,
    build_options,
    valid,
)
from halo_personnummer import config
from halo_personnummer.config import Settings


class TestBuildOptions:
    """Tests for option normalization."""

    def test_defaults(self):
        opts = build_options()
        assert opts.allow_coordination_number is True
        assert isinstance(opts.clock, SystemClock)

    def test_alias_and_field_name(self):
        assert not build_options({"allowCoordinationNumber": False}).allow_coordination_number
        assert not build_options(allow_coordination_number=False).allow_coordination_number

    def test_parse_options_passthrough(self):
        opts = ParseOptions(allow_coordination_number=False)
        assert build_options(opts) is opts

    def test_kwargs_override_parse_options(self):
        clock = FixedClock(date(2020, 1, 1))
        opts = build_options(ParseOptions(allow_coordination_number=False), clock=clock)
        assert opts.clock is clock
        assert opts.allow_coordination_number is False

    def test_unknown_option_warns_and_is_ignored(self):
        with pytest.warns(PersonnummerWarning, match="invalidOption"):
            opts = build_options({"invalidOption": True})
        assert opts.allow_coordination_number is True

    def test_invalid_clock(self):
        with pytest.raises(ValidationError):
            build_options(clock="2020-01-01")

    def test_invalid_options_type(self):
        with pytest.raises(TypeError):
            build_options(["allowCoordinationNumber"])

    def test_frozen(self):
        opts = build_options()
        with pytest.raises(ValidationError):
            opts.allow_coordination_number = False


class TestFixedClock:
    def test_date_means_midnight(self):
        assert FixedClock(date(2020, 1, 1)).now() == datetime(2020, 1, 1)

    def test_datetime_passes_through(self):
        instant = datetime(2020, 1, 1, 12, 0)
        assert FixedClock(instant).now() == instant


class TestSettings:
    """Tests for environment-driven defaults."""

    def test_defaults(self):
        settings = Settings()
        assert settings.allow_coordination_number is True
        assert settings.log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PERSONNUMMER_ALLOW_COORDINATION_NUMBER", "false")
        monkeypatch.setenv("PERSONNUMMER_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.allow_coordination_number is False
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_settings_drive_option_default(self, monkeypatch):
        monkeypatch.setattr(config, "settings", Settings(allow_coordination_number=False))
        assert build_options().allow_coordination_number is False
        assert not valid("1212621211")
        # Explicit option still wins
        assert valid("1212621211", allowCoordinationNumber=True)
