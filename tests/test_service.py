"""
tests/test_service.py

Covers:
  - Wiring from settings (real store, cache and calculator on disk)
  - Boundary operations end to end
  - Read-only config root: write acknowledged as not persisted, cache still updated
  - regenerate_cache after a config file changes on disk
"""

import json
from datetime import date
from unittest import mock

import pytest

from workcal import (
    ConfigurationNotFoundError,
    DateOutOfRangeError,
    InvalidConfigurationError,
    InvalidPathError,
    WorkdayService,
    ZoneNotFoundError,
)
from workcal.settings import Settings


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def settings(config_root, cache_root):
    return Settings(config_dir=config_root, cache_dir=cache_root, log_level="DEBUG")


@pytest.fixture
def service(settings, clock):
    return WorkdayService.from_settings(settings, clock=clock)


# ── Queries ───────────────────────────────────────────────────────────────────

class TestQueries:

    def test_is_workday(self, service):
        assert service.is_workday("nl", "2020-01-02") is True
        assert service.is_workday("nl", "2021-04-27") is False
        assert service.is_workday("be", "2021-04-27") is True

    def test_get_workday(self, service):
        assert service.get_workday("nl", "2020-01-02", 10) == date(2020, 1, 16)
        assert service.get_workday("nl", "2021-04-26", 1) == date(2021, 4, 28)
        assert service.get_workday("be", "2021-04-26", 1) == date(2021, 4, 27)

    def test_out_of_range(self, service):
        with pytest.raises(DateOutOfRangeError,
                           match="1980-01-01T00:00:00.000Z was not found in the cache"):
            service.get_workday("nl", "1980-01-01", 10)

    def test_first_read_populates_disk_cache(self, service, cache_root):
        service.is_workday("nl", "2020-01-02")
        assert (cache_root / "nl.npz").exists()
        assert not (cache_root / "be.npz").exists()

    def test_unknown_ref(self, service):
        with pytest.raises(ConfigurationNotFoundError):
            service.is_workday("xyz", "2020-01-02")


# ── Configuration ─────────────────────────────────────────────────────────────

class TestConfiguration:

    def test_get_configuration(self, service):
        assert service.get_configuration("nl") == {
            "zone": "nl",
            "workdays": [1, 2, 3, 4, 5],
            "numberOfYears": 10,
            "exclude": [],
            "excludeHolidays": [],
        }

    def test_get_unknown_configuration(self, service):
        with pytest.raises(ConfigurationNotFoundError,
                           match='The config for ref "xyz" could not be found'):
            service.get_configuration("xyz")

    def test_write_configuration(self, service, config_root):
        record = {"zone": "nl", "workdays": [1, 2, 3, 4, 5], "numberOfYears": 10,
                  "exclude": [], "excludeHolidays": ["koningsdag"]}

        assert service.is_workday("nl", "2021-04-27") is False
        assert service.write_configuration("nl", record) is True

        assert json.loads((config_root / "nl.json").read_text()) == record
        assert service.is_workday("nl", "2021-04-27") is True

    def test_write_new_ref(self, service, config_root):
        record = {"zone": "be", "workdays": [1, 2, 3, 4, 5], "numberOfYears": 2}
        assert service.write_configuration("team-be", record) is True
        assert (config_root / "team-be.json").exists()
        assert service.get_workday("team-be", "2021-04-26", 1) == date(2021, 4, 27)

    def test_read_only_write_updates_cache_only(self, service, config_root):
        record = {"zone": "nl", "workdays": [1, 2, 3, 4, 5], "numberOfYears": 10,
                  "excludeHolidays": ["koningsdag"]}
        assert service.is_workday("nl", "2021-04-27") is False

        with mock.patch.object(service.store, "is_writable", return_value=False):
            assert service.write_configuration("nl", record) is False

        assert json.loads((config_root / "nl.json").read_text())["excludeHolidays"] == []
        assert service.is_workday("nl", "2021-04-27") is True

    def test_ack_matches_what_was_written(self, service, config_root):
        record = {"zone": "nl", "workdays": [1, 2, 3, 4, 5], "numberOfYears": 10,
                  "excludeHolidays": ["koningsdag"]}
        with mock.patch.object(service.store, "is_writable", side_effect=[False, True]) as probe:
            assert service.write_configuration("nl", record) is False

        probe.assert_called_once()
        assert json.loads((config_root / "nl.json").read_text())["excludeHolidays"] == []

    def test_nested_ref_is_rejected(self, service, config_root):
        record = {"zone": "nl", "workdays": [1, 2, 3, 4, 5], "numberOfYears": 1}
        with pytest.raises(InvalidPathError):
            service.write_configuration("team/nl", record)
        assert not (config_root / "team").exists()

    def test_invalid_record(self, service):
        with pytest.raises(InvalidConfigurationError):
            service.write_configuration("nl", {"zone": "nl", "workdays": [9], "numberOfYears": 1})

    def test_is_writable(self, service):
        assert service.is_writable() is True


# ── Maintenance ───────────────────────────────────────────────────────────────

class TestRegenerateCache:

    def test_picks_up_edited_config_file(self, service, config_root, cache_root):
        assert service.regenerate_cache() is True
        assert service.is_workday("nl", "2021-04-27") is False
        written = (cache_root / "nl.npz").stat().st_mtime_ns

        data = json.loads((config_root / "nl.json").read_text())
        data["excludeHolidays"] = ["koningsdag"]
        (config_root / "nl.json").write_text(json.dumps(data))

        assert service.regenerate_cache() is True
        assert service.is_workday("nl", "2021-04-27") is True
        assert (cache_root / "be.npz").exists()
        assert (cache_root / "nl.npz").stat().st_mtime_ns >= written

    def test_in_sync_sweep_does_not_flush(self, service):
        service.regenerate_cache()
        with mock.patch.object(service.workdays, "flush") as flush:
            assert service.regenerate_cache() is True
        flush.assert_not_called()

    def test_unknown_zone_reports_false(self, service, config_root):
        (config_root / "fr.json").write_text(
            json.dumps({"zone": "fr", "workdays": [1, 2, 3, 4, 5], "numberOfYears": 1})
        )
        assert service.regenerate_cache() is False


# ── Holidays ──────────────────────────────────────────────────────────────────

class TestHolidays:

    def test_zone_holidays(self, service):
        assert service.holidays("nl")[:4] == [
            "nieuwjaar", "eerste paasdag", "tweede paasdag", "koningsdag",
        ]

    def test_unknown_zone(self, service):
        with pytest.raises(ZoneNotFoundError, match="Zone fr not found"):
            service.holidays("fr")
