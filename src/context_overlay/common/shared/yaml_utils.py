from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """
    Load a YAML file from disk.

    Args:
        path: Absolute or relative path to a YAML file.

    Returns:
        Parsed YAML content. Usually a dictionary, ``None`` for an empty file.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file cannot be parsed as valid YAML.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def dump_yaml(data: Any) -> str:
    """Render data as block-style YAML, keeping mapping order."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def save_yaml(path: str | Path, data: Any) -> None:
    """Persist data as YAML, replacing any prior content."""
    path = Path(path)
    payload = dump_yaml(data)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        handle.write(payload)
