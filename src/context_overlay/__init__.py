"""Context-driven configuration overlays.

Loads configuration fragments along a general-to-specific context chain
(``Production`` -> ``Production/Live`` -> ``Production/Live/Server1``),
deep-merges them into a caller-owned mapping and optionally caches the
merged result.
"""

from .config.loader import ContextConfigLoader
from .context.application_context import ApplicationContext, build_context_chain
from .errors import (
    ContextOverlayError,
    ContextError,
    FragmentParseError,
    LoaderStateError,
)

__version__ = "0.3.0"

__all__ = [
    "ContextConfigLoader",
    "ApplicationContext",
    "build_context_chain",
    "ContextOverlayError",
    "ContextError",
    "FragmentParseError",
    "LoaderStateError",
]
