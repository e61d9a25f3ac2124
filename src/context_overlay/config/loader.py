"""
@meta
name: context_config_loader
type: utility
domain: config
responsibility:
  - Register context-driven and plain configuration fragment paths
  - Resolve fragments along the context chain and deep-merge them
  - Reuse or rebuild the merged-configuration cache
  - Tag the site name with the active context outside production
inputs:
  - Application context (or APP_CONTEXT)
  - Fragment files under registered prefixes
  - Caller-owned configuration mapping
outputs:
  - The same mapping, updated in place
tags:
  - utility
  - config
  - loading
lifecycle:
  status: active
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..common.shared.logging_utils import get_logger
from ..constants import (
    DEFAULT_CACHE_RELATIVE_PATH,
    DEFAULT_FRAGMENT_SUFFIX,
    DEFAULT_SITENAME_KEY,
)
from ..context.application_context import ApplicationContext, build_context_chain
from ..errors import LoaderStateError
from .cache import ConfigCache
from .fragments import FragmentParser, load_fragment
from .merging import apply_contribution
from .nested import get_nested, set_nested
from .resolver import resolve_candidates, resolve_context_paths

logger = get_logger(__name__)


class ContextConfigLoader:
    """
    Load configuration overlays for the active application context.

    For ``APP_CONTEXT=Production/Live/Server1`` and a registered context path
    ``conf/AdditionalConfiguration`` the loader tries, in order::

        conf/AdditionalConfiguration/Production.yaml
        conf/AdditionalConfiguration/Production/Live.yaml
        conf/AdditionalConfiguration/Production/Live/Server1.yaml

    followed by every plain path registered with :meth:`add_configuration`.
    Existing fragments are deep-merged into the caller's mapping, so more
    specific files win.

    A loader runs once. Register paths and toggle caching first, then call
    :meth:`load_configuration`; any further registration or load raises
    :class:`LoaderStateError`.

    .. code-block:: python

        conf_vars = {"SYS": {"sitename": "Site"}}
        (ContextConfigLoader()
            .use_cache_in_production()
            .add_context_configuration("conf/AdditionalConfiguration")
            .add_configuration("conf/local.yaml")
            .load_configuration(conf_vars))
    """

    def __init__(
        self,
        context: Optional[Any] = None,
        *,
        parser: Optional[FragmentParser] = None,
        site_root: Optional[Path] = None,
        fragment_suffix: str = DEFAULT_FRAGMENT_SUFFIX,
    ):
        self.context = context if context is not None else ApplicationContext.from_environment()
        self.context_chain = build_context_chain(self.context)
        self.site_root = Path(site_root) if site_root is not None else Path.cwd()
        self.fragment_suffix = fragment_suffix
        self._parser = parser
        self._context_paths: List[str] = []
        self._plain_paths: List[str] = []
        self._cache = ConfigCache()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        """Whether :meth:`load_configuration` has run."""
        return self._loaded

    @property
    def cache_file(self) -> Optional[Path]:
        return self._cache.cache_file

    def _ensure_not_loaded(self, operation: str) -> None:
        if self._loaded:
            raise LoaderStateError(f"Cannot {operation}: configuration has already been loaded")

    def use_cache(self, cache_file: Optional[Path] = None) -> "ContextConfigLoader":
        """Cache the merged configuration (default: under ``site_root``)."""
        self._ensure_not_loaded("enable the cache")
        if cache_file is None:
            cache_file = self.site_root / DEFAULT_CACHE_RELATIVE_PATH
        self._cache = ConfigCache(cache_file)
        return self

    def use_cache_in_production(self, cache_file: Optional[Path] = None) -> "ContextConfigLoader":
        """Cache the merged configuration only for production contexts."""
        self._ensure_not_loaded("enable the cache")
        if self.context.is_production:
            self.use_cache(cache_file)
        return self

    def add_context_configuration(self, path: str | Path) -> "ContextConfigLoader":
        """Register a directory holding one fragment per context level."""
        self._ensure_not_loaded("add a context configuration path")
        self._context_paths.append(str(path))
        return self

    def add_configuration(self, path: str | Path) -> "ContextConfigLoader":
        """Register a single fragment file, loaded after all context fragments."""
        self._ensure_not_loaded("add a configuration path")
        self._plain_paths.append(str(path))
        return self

    def resolve_candidates(self) -> List[Path]:
        """Ordered fragment paths the load pass will try."""
        return resolve_candidates(
            self.context_chain,
            self._context_paths,
            self._plain_paths,
            self.fragment_suffix,
        )

    def load_configuration(self, conf_vars: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply the configuration overlays to ``conf_vars`` in place.

        On a cache hit the mapping is replaced by the cached snapshot and no
        fragment is read. Otherwise context fragments and then plain
        fragments are merged in order and, if caching is enabled, the result
        is written to the cache.

        Args:
            conf_vars: Caller-owned configuration mapping.

        Returns:
            ``conf_vars`` itself.

        Raises:
            LoaderStateError: If this loader already ran.
            FragmentParseError: If an existing fragment cannot be parsed.
                Fragments merged before the failure stay applied.
        """
        self._ensure_not_loaded("load the configuration")
        self._loaded = True

        cached = self._cache.try_load()
        if cached is not None:
            conf_vars.clear()
            conf_vars.update(cached)
            logger.info(f"Loaded configuration for context '{self.context}' from cache {self.cache_file}")
            return conf_vars

        applied = self._load_context_configuration(conf_vars)
        applied += self._load_file_configuration(conf_vars)
        logger.info(
            f"Applied {applied} configuration fragment(s) for context '{self.context}'"
        )

        self._cache.save(conf_vars)
        return conf_vars

    def _load_context_configuration(self, conf_vars: Dict[str, Any]) -> int:
        paths = resolve_context_paths(self.context_chain, self._context_paths, self.fragment_suffix)
        return sum(self._load_configuration_file(conf_vars, path) for path in paths)

    def _load_file_configuration(self, conf_vars: Dict[str, Any]) -> int:
        return sum(self._load_configuration_file(conf_vars, Path(path)) for path in self._plain_paths)

    def _load_configuration_file(self, conf_vars: Dict[str, Any], path: Path) -> bool:
        contribution = load_fragment(path, self._parser)
        if contribution is None:
            return False
        apply_contribution(conf_vars, contribution)
        logger.debug(f"Applied configuration fragment: {path}")
        return True

    def append_context_name_to_sitename(
        self,
        conf_vars: Dict[str, Any],
        key: str = DEFAULT_SITENAME_KEY,
    ) -> "ContextConfigLoader":
        """
        Append ``[[CONTEXT]]`` to the site name unless running in plain production.

        ``Production/Live`` turns ``"Site"`` into ``"Site [[PRODUCTION/LIVE]]"``;
        the bare ``Production`` root leaves it unchanged.
        """
        if self.context.is_production and self.context.parent is None:
            return self
        sitename = get_nested(conf_vars, key) or ""
        set_nested(conf_vars, key, f"{sitename} [[{str(self.context).upper()}]]")
        return self
