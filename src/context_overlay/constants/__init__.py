"""Shared constants module.

This module provides stable defaults shared by the loader, the context
provider and the CLI.
"""

from .defaults import (
    CONTEXT_ENV_VAR,
    DEFAULT_CONTEXT,
    ROOT_CONTEXTS,
    PRODUCTION_CONTEXT,
    DEVELOPMENT_CONTEXT,
    TESTING_CONTEXT,
    DEFAULT_FRAGMENT_SUFFIX,
    DEFAULT_CACHE_RELATIVE_PATH,
    DEFAULT_SITENAME_KEY,
)

__all__ = [
    "CONTEXT_ENV_VAR",
    "DEFAULT_CONTEXT",
    "ROOT_CONTEXTS",
    "PRODUCTION_CONTEXT",
    "DEVELOPMENT_CONTEXT",
    "TESTING_CONTEXT",
    "DEFAULT_FRAGMENT_SUFFIX",
    "DEFAULT_CACHE_RELATIVE_PATH",
    "DEFAULT_SITENAME_KEY",
]
