"""Storage-root helpers shared by the config store and the disk cache."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ._exceptions import InvalidPathError

logger = logging.getLogger(__name__)


def resolve_within(root: str | os.PathLike, name: str) -> Path:
    """
    Resolve ``name`` directly below ``root`` and reject anything else.

    Storage roots are flat: the result must be an immediate child of
    ``root``, so nested names are rejected along with escaping ones.
    """
    base = Path(root).resolve()
    candidate = (base / name).resolve()
    if candidate.parent != base:
        raise InvalidPathError("Invalid data requested")
    return candidate


def is_writable(root: str | os.PathLike) -> bool:
    base = Path(root).resolve()
    if os.access(base, os.W_OK):
        return True
    logger.info('Directory "%s" is not writable', base)
    return False
