class WorkcalError(Exception):
    """Base exception for all workcal errors."""


class ConfigurationNotFoundError(WorkcalError):
    pass


class InvalidConfigurationError(WorkcalError, ValueError):
    pass


class DateOutOfRangeError(WorkcalError):
    pass


class ZoneNotFoundError(WorkcalError):
    pass


class InvalidPathError(WorkcalError):
    pass
