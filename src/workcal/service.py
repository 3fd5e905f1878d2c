"""Boundary operations for an outer (HTTP, CLI, ...) layer."""

from __future__ import annotations

import functools
import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from workcal.cache import DiskCache
from workcal.calculator import DateLike, Workdays
from workcal.config import ConfigStore, Configuration, read_configuration
from workcal.settings import Settings, get_settings
from workcal.zones import holiday_names

logger = logging.getLogger(__name__)


class WorkdayService:

    def __init__(self, store: ConfigStore, workdays: Workdays) -> None:
        self._store = store
        self._workdays = workdays

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        clock: Callable[[], date] = date.today,
    ) -> "WorkdayService":
        settings = settings or get_settings()
        logging.getLogger("workcal").setLevel(settings.log_level)

        cache = DiskCache(
            settings.cache_dir,
            loader=functools.partial(read_configuration, settings.config_dir),
            clock=clock,
        )
        workdays = Workdays(cache)
        store = ConfigStore(settings.config_dir, cache, workdays)
        logger.debug(
            "Service ready (config_dir=%s, cache_dir=%s)",
            settings.config_dir, settings.cache_dir,
        )
        return cls(store, workdays)

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def workdays(self) -> Workdays:
        return self._workdays

    def is_workday(self, ref: str, when: DateLike) -> bool:
        return self._workdays.is_workday(ref, when)

    def get_workday(self, ref: str, when: DateLike, add: int) -> date:
        return self._workdays.get_workday(ref, when, add)

    def get_configuration(self, ref: str) -> dict[str, Any]:
        return self._store.get(ref).to_dict()

    def write_configuration(self, ref: str, record: Configuration | Mapping[str, Any]) -> bool:
        """
        Store ``record`` for ``ref``.  Returns False when the config root is
        read-only; the cache and the in-process memo are updated either way.
        """
        configuration = (
            record if isinstance(record, Configuration) else Configuration.from_dict(record)
        )
        return self._store.write(ref, configuration)

    def is_writable(self) -> bool:
        return self._store.is_writable()

    def regenerate_cache(self) -> bool:
        return self._store.regenerate_cache()

    def holidays(self, zone: str) -> list[str]:
        return holiday_names(zone)
