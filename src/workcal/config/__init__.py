"""
workcal.config
~~~~~~~~~~~~~~

Per-ref workday configuration: the immutable :class:`Configuration` record
and the :class:`ConfigStore` that persists it as ``<root>/<ref>.json``.

File format::

    {
      "zone": "nl",
      "workdays": [1, 2, 3, 4, 5],
      "numberOfYears": 10,
      "exclude": ["2022-02-02"],
      "excludeHolidays": ["koningsdag"]
    }

Weekdays are numbered 0 (Sunday) through 6 (Saturday).
"""

from workcal.config.configuration import WEEKDAYS, Configuration
from workcal.config.store import ConfigStore, read_configuration

__all__ = [
    "WEEKDAYS",
    "ConfigStore",
    "Configuration",
    "read_configuration",
]
