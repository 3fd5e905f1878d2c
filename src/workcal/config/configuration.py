from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from .._exceptions import InvalidConfigurationError

WEEKDAYS = frozenset(range(7))  # 0 = Sunday ... 6 = Saturday


def _as_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(
            f"Excluded date must be an ISO date; got {value!r}."
        ) from None


@dataclass(frozen=True)
class Configuration:
    """
    Workday configuration for a single ref.

    Collections are normalised to frozensets, so two configurations compare
    equal regardless of the order their members were listed in.
    """

    zone: str
    workdays: frozenset[int] = frozenset({1, 2, 3, 4, 5})
    number_of_years: int = 10
    exclude: frozenset[date] = field(default_factory=frozenset)
    exclude_holidays: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.zone, str) or not self.zone:
            raise InvalidConfigurationError(f"Zone must be a non-empty string; got {self.zone!r}.")

        n = self.number_of_years
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidConfigurationError(f"numberOfYears must be a positive integer; got {n!r}.")

        workdays = self._frozen(self.workdays, "workdays")
        for day in workdays:
            if isinstance(day, bool) or not isinstance(day, int) or day not in WEEKDAYS:
                raise InvalidConfigurationError(f"Workdays must be within 0-6; got {day!r}.")

        exclude_holidays = self._frozen(self.exclude_holidays, "excludeHolidays")
        if not all(isinstance(h, str) for h in exclude_holidays):
            raise InvalidConfigurationError("excludeHolidays must only contain strings.")

        exclude = frozenset(_as_date(d) for d in self._frozen(self.exclude, "exclude"))

        object.__setattr__(self, "workdays", workdays)
        object.__setattr__(self, "exclude", exclude)
        object.__setattr__(self, "exclude_holidays", exclude_holidays)

    @staticmethod
    def _frozen(values: Iterable[Any], name: str) -> frozenset:
        if isinstance(values, (str, bytes)):
            raise InvalidConfigurationError(f"{name} must be a list; got {values!r}.")
        try:
            return frozenset(values)
        except TypeError:
            raise InvalidConfigurationError(f"{name} must be a list; got {values!r}.") from None

    # ── JSON mapping ─────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        missing = [k for k in ("zone", "workdays", "numberOfYears") if k not in data]
        if missing:
            raise InvalidConfigurationError(f"Missing configuration fields: {', '.join(missing)}.")
        return cls(
            zone=data["zone"],
            workdays=data["workdays"],
            number_of_years=data["numberOfYears"],
            exclude=data.get("exclude", ()),
            exclude_holidays=data.get("excludeHolidays", ()),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "zone": self.zone,
            "workdays": sorted(self.workdays),
            "numberOfYears": self.number_of_years,
            "exclude": [d.isoformat() for d in sorted(self.exclude)],
            "excludeHolidays": sorted(self.exclude_holidays),
        }
