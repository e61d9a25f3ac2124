"""
@meta
name: config_fragments
type: utility
domain: config
responsibility:
  - Parse a single configuration fragment (YAML or JSON)
  - Map missing, empty and non-mapping fragments to "no contribution"
  - Wrap parser failures as fatal FragmentParseError
inputs:
  - Fragment file paths
outputs:
  - Optional configuration mappings
tags:
  - utility
  - config
  - loading
lifecycle:
  status: active
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from ..common.shared.json_cache import load_json
from ..common.shared.logging_utils import get_logger
from ..common.shared.yaml_utils import load_yaml
from ..errors import FragmentParseError

logger = get_logger(__name__)

FragmentParser = Callable[[Path], Any]

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def parse_fragment(path: Path) -> Any:
    """
    Parse a fragment file based on its suffix.

    Args:
        path: Existing fragment file (``.yaml``, ``.yml`` or ``.json``).

    Returns:
        Whatever the file holds; callers decide whether it is usable.

    Raises:
        FragmentParseError: If the suffix is unsupported or parsing fails.
    """
    suffix = path.suffix.lower()
    try:
        if suffix in YAML_SUFFIXES:
            return load_yaml(path)
        if suffix in JSON_SUFFIXES:
            return load_json(path)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        raise FragmentParseError(f"Failed to parse configuration fragment {path}: {exc}") from exc

    raise FragmentParseError(
        f"Unsupported configuration fragment type {suffix!r}: {path}. "
        f"Expected one of: {', '.join(YAML_SUFFIXES + JSON_SUFFIXES)}"
    )


def load_fragment(
    path: Path,
    parser: Optional[FragmentParser] = None,
) -> Optional[Dict[str, Any]]:
    """
    Load the contribution of one fragment.

    Args:
        path: Candidate fragment path; it does not have to exist.
        parser: Callable turning a path into data (default: ``parse_fragment``).

    Returns:
        The fragment mapping, or ``None`` when the file is missing, empty or
        does not hold a mapping.

    Raises:
        FragmentParseError: If the parser fails on an existing file.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug(f"Skipping missing fragment: {path}")
        return None

    data = (parser or parse_fragment)(path)

    if not data or not isinstance(data, Mapping):
        logger.debug(f"Fragment contributes nothing: {path}")
        return None

    return dict(data)
