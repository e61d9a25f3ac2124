"""
@meta
name: config_cache
type: utility
domain: config
responsibility:
  - Persist the fully merged configuration as a YAML snapshot
  - Load the snapshot back, treating any decode problem as a miss
inputs:
  - Cache file path (optional; caching is off without it)
  - Merged configuration mapping
outputs:
  - Cached configuration mapping or None
tags:
  - utility
  - config
  - cache
lifecycle:
  status: active
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..common.shared.yaml_utils import load_yaml, save_yaml
from ..common.shared.logging_utils import get_logger

logger = get_logger(__name__)


class ConfigCache:
    """
    Snapshot store for the merged configuration.

    Presence of the file is the only validity check: a snapshot is trusted
    until it is deleted. Without a ``cache_file`` every operation is a no-op.
    """

    def __init__(self, cache_file: Optional[Path] = None):
        self.cache_file = Path(cache_file) if cache_file is not None else None

    @property
    def enabled(self) -> bool:
        return self.cache_file is not None

    def try_load(self) -> Optional[Dict[str, Any]]:
        """
        Return the cached mapping, or ``None`` on a miss.

        Disabled cache, missing file, unreadable or undecodable content and
        empty or non-mapping snapshots are all misses; nothing is raised.
        """
        if not self.enabled or not self.cache_file.is_file():
            return None

        try:
            data = load_yaml(self.cache_file)
        except (yaml.YAMLError, ValueError, OSError, RecursionError) as exc:
            # UnicodeDecodeError is a ValueError
            logger.warning(f"Ignoring unreadable configuration cache {self.cache_file}: {exc}")
            return None

        if not data or not isinstance(data, dict):
            logger.warning(f"Ignoring empty or malformed configuration cache {self.cache_file}")
            return None

        return data

    def save(self, conf_vars: Mapping[str, Any]) -> bool:
        """
        Write ``conf_vars`` to the cache file, overwriting previous content.

        Returns:
            True if the snapshot was written. Failures are logged, not raised.
        """
        if not self.enabled:
            return False

        try:
            save_yaml(self.cache_file, conf_vars)
        except (yaml.YAMLError, OSError, RecursionError) as exc:
            logger.warning(f"Could not write configuration cache {self.cache_file}: {exc}")
            return False

        logger.debug(f"Wrote configuration cache: {self.cache_file}")
        return True

    def clear(self) -> bool:
        """Delete the cache file. Returns True if a file was removed."""
        if not self.enabled or not self.cache_file.exists():
            return False
        self.cache_file.unlink()
        logger.info(f"Removed configuration cache: {self.cache_file}")
        return True
