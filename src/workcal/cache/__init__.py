"""
workcal.cache
~~~~~~~~~~~~~

Durable, per-ref cache of generated workday sequences together with the
configuration snapshot they were generated from.

Basic usage::

    from workcal.cache import DiskCache

    cache = DiskCache("cache", loader=store.get)
    seq = cache.get("nl")            # generated and persisted on first access
    cache.get_config("nl")           # snapshot used for drift detection
    cache.write("nl", new_config)    # regenerate and replace wholesale
"""

from workcal.cache.disk_cache import ConfigLoader, DiskCache

__all__ = [
    "ConfigLoader",
    "DiskCache",
]
