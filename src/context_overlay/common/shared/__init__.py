"""Shared utilities used by the loader and the CLI."""

from .json_cache import load_json
from .yaml_utils import load_yaml, dump_yaml, save_yaml
from .logging_utils import get_logger, set_package_log_level

__all__ = [
    "load_json",
    "load_yaml",
    "dump_yaml",
    "save_yaml",
    "get_logger",
    "set_package_log_level",
]
