"""
workcal
~~~~~~~

Cached workday calendars.  For every configuration ("ref") a multi-year
sequence of daily workday flags is generated once, persisted to disk, and
used to answer "is this a workday?" and "which date is N workdays later?".

Basic usage::

    from workcal import WorkdayService

    service = WorkdayService.from_settings()        # WORKCAL_CONFIG_DIR / WORKCAL_CACHE_DIR
    service.is_workday("nl", "2021-04-27")          # False
    service.get_workday("nl", "2021-04-26", 1)      # date(2021, 4, 28)

Public API
----------
WorkdayService   Boundary facade wiring store, cache and calculator.
Configuration    Per-ref configuration record.
WorkcalError     Base exception for all workcal errors.
"""

from __future__ import annotations

from workcal._exceptions import (
    ConfigurationNotFoundError,
    DateOutOfRangeError,
    InvalidConfigurationError,
    InvalidPathError,
    WorkcalError,
    ZoneNotFoundError,
)
from workcal.cache import DiskCache
from workcal.calculator import Workdays
from workcal.config import ConfigStore, Configuration
from workcal.generator import WorkdaySequence, generate
from workcal.service import WorkdayService

__all__ = [
    "ConfigStore",
    "Configuration",
    "ConfigurationNotFoundError",
    "DateOutOfRangeError",
    "DiskCache",
    "InvalidConfigurationError",
    "InvalidPathError",
    "WorkcalError",
    "WorkdaySequence",
    "WorkdayService",
    "Workdays",
    "ZoneNotFoundError",
    "generate",
]
