"""
@meta
name: context_overlay_cli
type: script
domain: config
responsibility:
  - Parse command-line arguments for a context overlay load
  - Run the loader against a base configuration and print the result
inputs:
  - Command-line arguments
  - Base configuration file (YAML/JSON)
outputs:
  - Merged configuration as YAML on stdout
tags:
  - cli
  - entrypoint
  - config
lifecycle:
  status: active
"""

"""Command-line entry point for loading context configuration overlays."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .common.shared.argument_parsing import (
    add_context_argument,
    add_log_level_argument,
    parse_key_value,
)
from .common.shared.logging_utils import set_package_log_level
from .common.shared.yaml_utils import dump_yaml
from .config.cache import ConfigCache
from .config.fragments import load_fragment
from .config.loader import ContextConfigLoader
from .config.nested import set_nested
from .context.application_context import ApplicationContext
from .errors import ContextOverlayError

CACHE_MODES = ("never", "always", "production")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``context-overlay``."""
    parser = argparse.ArgumentParser(
        description="Merge context-specific configuration fragments and print the result",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    add_context_argument(parser)
    parser.add_argument(
        "--base",
        type=Path,
        default=None,
        help="Initial configuration file (YAML or JSON)",
    )
    parser.add_argument(
        "--context-path",
        dest="context_paths",
        action="append",
        default=[],
        help="Directory with one fragment per context level (repeatable)",
    )
    parser.add_argument(
        "--path",
        dest="plain_paths",
        action="append",
        default=[],
        help="Single fragment file, applied after context fragments (repeatable)",
    )
    parser.add_argument(
        "--cache",
        choices=CACHE_MODES,
        default="never",
        help="When to cache the merged configuration",
    )
    parser.add_argument(
        "--cache-file",
        type=Path,
        default=None,
        help="Cache file location (default: var/cache/context_overlay/context_conf.yaml)",
    )
    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Delete the cache file before loading",
    )
    parser.add_argument(
        "--append-sitename",
        action="store_true",
        help="Append the context name to SYS.sitename outside plain production",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        type=parse_key_value,
        metavar="KEY=VALUE",
        help="Override a dotted key after loading; VALUE is read as YAML (repeatable)",
    )
    parser.add_argument(
        "--suffix",
        default=".yaml",
        help="File suffix of context fragments",
    )
    add_log_level_argument(parser)
    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a load pass for parsed arguments and return the YAML dump."""
    context = (
        ApplicationContext(args.context)
        if args.context
        else ApplicationContext.from_environment()
    )
    loader = ContextConfigLoader(context, fragment_suffix=args.suffix)

    if args.cache == "always":
        loader.use_cache(args.cache_file)
    elif args.cache == "production":
        loader.use_cache_in_production(args.cache_file)

    if args.clear_cache:
        ConfigCache(loader.cache_file).clear()

    for path in args.context_paths:
        loader.add_context_configuration(path)
    for path in args.plain_paths:
        loader.add_configuration(path)

    conf_vars = {}
    if args.base is not None:
        if not args.base.is_file():
            raise ContextOverlayError(f"Base configuration not found: {args.base}")
        conf_vars = load_fragment(args.base) or {}

    loader.load_configuration(conf_vars)

    if args.append_sitename:
        loader.append_context_name_to_sitename(conf_vars)

    for key, raw_value in args.overrides:
        set_nested(conf_vars, key, yaml.safe_load(raw_value) if raw_value else "")

    return dump_yaml(conf_vars)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    set_package_log_level(args.log_level)

    try:
        output = run(args)
    except (ContextOverlayError, TypeError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
