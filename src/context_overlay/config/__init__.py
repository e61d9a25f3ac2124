"""Fragment resolution, merging, caching and the context configuration loader."""

from .merging import merge_configs_with_precedence, apply_contribution
from .nested import get_nested, set_nested
from .resolver import sanitize_context_name, resolve_candidates
from .fragments import load_fragment, parse_fragment
from .cache import ConfigCache
from .loader import ContextConfigLoader

__all__ = [
    "merge_configs_with_precedence",
    "apply_contribution",
    "get_nested",
    "set_nested",
    "sanitize_context_name",
    "resolve_candidates",
    "load_fragment",
    "parse_fragment",
    "ConfigCache",
    "ContextConfigLoader",
]
