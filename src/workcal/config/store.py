from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from .._exceptions import ConfigurationNotFoundError
from .._paths import is_writable, resolve_within
from .configuration import Configuration

if TYPE_CHECKING:
    from ..cache import DiskCache
    from ..calculator import Workdays

logger = logging.getLogger(__name__)

SUFFIX = ".json"


def read_configuration(root: str | os.PathLike, ref: str) -> Configuration:
    path = resolve_within(root, f"{ref}{SUFFIX}")
    if not path.is_file():
        raise ConfigurationNotFoundError(f'The config for ref "{ref}" could not be found')
    with path.open(encoding="utf-8") as fh:
        return Configuration.from_dict(json.load(fh))


class ConfigStore:
    """
    One JSON configuration file per ref under ``root``.

    Writes always regenerate the cache entry and flush the calculator, even
    when the root is read-only and the file itself could not be persisted.
    """

    def __init__(self, root: str | os.PathLike, cache: "DiskCache", calculator: "Workdays") -> None:
        self._root = Path(root)
        self._cache = cache
        self._calculator = calculator

    @property
    def root(self) -> Path:
        return self._root

    def get(self, ref: str) -> Configuration:
        return read_configuration(self._root, ref)

    def refs(self) -> list[str]:
        if not self._root.is_dir():
            return []
        return sorted(p.stem for p in self._root.glob(f"*{SUFFIX}") if p.is_file())

    def is_writable(self) -> bool:
        return is_writable(self._root)

    def write(self, ref: str, configuration: Configuration) -> bool:
        """Returns True if the configuration file itself was persisted."""
        path = resolve_within(self._root, f"{ref}{SUFFIX}")
        persisted = self.is_writable()
        if persisted:
            with path.open("w", encoding="utf-8") as fh:
                json.dump(configuration.to_dict(), fh, indent=2)
                fh.write("\n")
            logger.info("Wrote configuration for ref %r to %s", ref, path)

        self._cache.write(ref, configuration)
        self._calculator.flush(ref)
        return persisted

    def regenerate_cache(self) -> bool:
        """
        Re-sync the cache for every known ref whose cached configuration
        differs from its file.  Never raises; returns False if any ref failed.
        """
        ok = True
        for ref in self.refs():
            try:
                configuration = self.get(ref)
                if self._cache.get_config(ref) == configuration:
                    continue
                logger.info("Cache for ref %r is out of date, regenerating", ref)
                self.write(ref, configuration)
            except Exception:
                logger.exception("Failed to regenerate cache for ref %r", ref)
                ok = False
        return ok

    def __repr__(self) -> str:
        return f"ConfigStore(root={str(self._root)!r})"
