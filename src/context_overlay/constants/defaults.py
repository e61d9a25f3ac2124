"""Default identifiers and locations used across the package."""

from pathlib import Path

# Context selection
CONTEXT_ENV_VAR = "APP_CONTEXT"
PRODUCTION_CONTEXT = "Production"
DEVELOPMENT_CONTEXT = "Development"
TESTING_CONTEXT = "Testing"
ROOT_CONTEXTS = (PRODUCTION_CONTEXT, DEVELOPMENT_CONTEXT, TESTING_CONTEXT)
DEFAULT_CONTEXT = PRODUCTION_CONTEXT

# Fragments
DEFAULT_FRAGMENT_SUFFIX = ".yaml"

# Cache (relative to the site root)
DEFAULT_CACHE_RELATIVE_PATH = Path("var/cache/context_overlay/context_conf.yaml")

# Global configuration keys
DEFAULT_SITENAME_KEY = "SYS.sitename"
