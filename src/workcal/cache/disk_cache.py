from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Callable, Optional

import numpy as np

from .._paths import resolve_within
from ..config.configuration import Configuration
from ..generator import WorkdaySequence, generate

logger = logging.getLogger(__name__)

ConfigLoader = Callable[[str], Configuration]


class DiskCache:
    """
    Durable per-ref store of ``{configuration, sequence}``.

    Every record is a single ``<root>/<ref>.npz`` archive holding the start
    date, the flag array and the JSON configuration snapshot it was generated
    from.  Records are replaced by writing a temporary file next to the target
    and renaming it into place, so readers see either the old or the new
    record, never a mix.
    """

    SUFFIX: str = ".npz"

    def __init__(
        self,
        root: str | os.PathLike,
        loader: ConfigLoader,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._root = Path(root)
        self._loader = loader
        self._clock = clock

    @property
    def root(self) -> Path:
        return self._root

    def get(self, ref: str) -> WorkdaySequence:
        """
        Cached sequence for ``ref``, generated through the loader if absent.

        An existing record is returned as is, even when the configuration
        file has changed since; stale records are repaired by
        ``ConfigStore.regenerate_cache()`` or by a write.
        """
        path = self._path(ref)
        if not path.exists():
            logger.info("No cached sequence for ref %r, generating one", ref)
            return self._store(path, self._loader(ref))
        sequence, _ = self._read(path)
        return sequence

    def get_config(self, ref: str) -> Optional[Configuration]:
        path = self._path(ref)
        if not path.exists():
            return None
        _, configuration = self._read(path)
        return configuration

    def write(self, ref: str, configuration: Configuration) -> None:
        self._store(self._path(ref), configuration)

    # ── storage ──────────────────────────────────────────────────────────

    def _path(self, ref: str) -> Path:
        return resolve_within(self._root, f"{ref}{self.SUFFIX}")

    def _store(self, path: Path, configuration: Configuration) -> WorkdaySequence:
        sequence = generate(configuration, today=self._clock())
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as fh:
                np.savez(
                    fh,
                    start=np.datetime64(sequence.start, "D"),
                    flags=sequence.flags,
                    config=np.array(json.dumps(configuration.to_dict())),
                )
            os.replace(tmp, path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

        logger.info(
            "Cached %d days (%s .. %s) for %s",
            len(sequence), sequence.start, sequence.end, path.name,
        )
        return sequence

    @staticmethod
    def _read(path: Path) -> tuple[WorkdaySequence, Configuration]:
        with np.load(path, allow_pickle=False) as data:
            start: date = data["start"].item()
            flags = data["flags"]
            raw = data["config"].item()
        return WorkdaySequence(start, flags), Configuration.from_dict(json.loads(raw))

    def __repr__(self) -> str:
        return f"DiskCache(root={str(self._root)!r})"
